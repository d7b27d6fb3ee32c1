"""Token pair price charts from the 1inch Charts API."""

from __future__ import annotations

from typing import List

from ..errors import PortfolioValidationError
from ..providers.oneinch import OneInchClient
from ..types import PricePoint
from .known_tokens import address_for_symbol
from .normalizer import normalize_price_chart

DEFAULT_PERIOD = "24H"


class PriceChartService:
    def __init__(self, client: OneInchClient) -> None:
        self._client = client

    @staticmethod
    def resolve_pair(from_symbol: str, to_symbol: str) -> tuple[str, str]:
        """Map a symbol pair to mainnet addresses; raises for unknown symbols."""

        from_address = address_for_symbol(from_symbol)
        to_address = address_for_symbol(to_symbol)
        if not from_address or not to_address:
            raise PortfolioValidationError(f"Unsupported token pair: {from_symbol}/{to_symbol}")
        return from_address, to_address

    async def get_price_chart(
        self,
        from_symbol: str,
        to_symbol: str,
        *,
        period: str = DEFAULT_PERIOD,
        chain_id: int = 1,
    ) -> List[PricePoint]:
        from_address, to_address = self.resolve_pair(from_symbol, to_symbol)
        payload = await self._client.get_line_chart(from_address, to_address, period, chain_id)
        return normalize_price_chart(payload)


__all__ = ["PriceChartService", "DEFAULT_PERIOD"]
