"""Async client for the 1inch developer API (https://portal.1inch.dev)."""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from ..config import settings
from .base import BearerTokenProvider


class OneInchClient(BearerTokenProvider):
    """Thin wrapper around the api.1inch.dev endpoint family.

    Every method returns the raw upstream JSON; reshaping lives in
    ``services.normalizer``.
    """

    name = "1inch"
    credential_name = "INCH_API_KEY"
    label = "1inch API"

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
        portfolio_timeout_s: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(
            api_key=settings.inch_api_key if api_key is None else api_key,
            base_url=base_url or settings.inch_api_base_url,
            timeout_s=timeout_s or settings.request_timeout_seconds,
            transport=transport,
        )
        self.portfolio_timeout_s = portfolio_timeout_s or settings.portfolio_timeout_seconds

    async def health_check(self) -> Dict[str, Any]:
        # Configuration only; polling never reaches 1inch.
        if not await self.ready():
            return {"status": "unavailable", "reason": "INCH_API_KEY not configured"}
        return {"status": "healthy"}

    async def get_portfolio_current_value(self, wallet_address: str, chain_id: int) -> Any:
        return await self.get(
            "/portfolio/portfolio/v4/overview/erc20/current_value",
            params={"addresses": wallet_address, "chain_id": chain_id},
            timeout=self.portfolio_timeout_s,
        )

    async def get_history_events(
        self,
        wallet_address: str,
        chain_id: int,
        *,
        limit: int = 20,
        page: int = 1,
    ) -> Any:
        return await self.get(
            f"/history/v2.0/history/{wallet_address}/events",
            params={"chainId": chain_id, "limit": limit, "page": page},
            timeout=self.portfolio_timeout_s,
        )

    async def get_custom_token(self, chain_id: int, token_address: str) -> Any:
        return await self.get(f"/token/v1.2/{chain_id}/custom/{token_address}")

    async def get_gas_price(self, chain_id: int) -> Any:
        return await self.get(f"/gas-price/v1.4/{chain_id}")

    async def get_line_chart(
        self,
        from_token_address: str,
        to_token_address: str,
        period: str,
        chain_id: int,
    ) -> Any:
        return await self.get(
            f"/charts/v1.0/chart/line/{from_token_address}/{to_token_address}/{period}/{chain_id}"
        )

    async def submit_limit_order(self, chain_id: int, body: Dict[str, Any]) -> Any:
        return await self.post(f"/orderbook/v4.0/{chain_id}", json=body)

    async def get_orders_by_address(
        self,
        chain_id: int,
        maker_address: str,
        params: Dict[str, Any],
    ) -> Any:
        return await self.get(f"/orderbook/v4.0/{chain_id}/address/{maker_address}", params=params)
