"""Single-chain portfolio valuation backed by the 1inch Portfolio API."""

from __future__ import annotations

import logging
from typing import Optional

from ..providers.oneinch import OneInchClient
from ..types import PortfolioResponse
from .address import require_chain_id, require_wallet_address
from .normalizer import normalize_portfolio_tokens

logger = logging.getLogger(__name__)


class SingleChainPortfolioService:
    """Fetch and normalize one wallet's holdings on one chain."""

    def __init__(self, client: OneInchClient) -> None:
        self._client = client

    async def fetch(
        self,
        wallet_address: str,
        chain_id: int,
        chain_name: Optional[str] = None,
    ) -> Optional[PortfolioResponse]:
        """Return the wallet's holdings on ``chain_id``.

        Raises ``PortfolioValidationError`` before any network call when the
        address or chain id is malformed. Upstream failures propagate as the
        matching ``PortfolioError`` subclass; nothing is retried. Returns
        ``None`` when the upstream reports no data for the wallet.
        """

        require_wallet_address(wallet_address)
        require_chain_id(chain_id)

        payload = await self._client.get_portfolio_current_value(wallet_address, chain_id)
        tokens = normalize_portfolio_tokens(payload, chain_id)
        if tokens is None:
            logger.info(
                "portfolio payload had no result",
                extra={"event": "portfolio_empty", "chain_id": chain_id},
            )
            return None

        return PortfolioResponse(
            tokens=tokens,
            total_value=sum(token.value for token in tokens),
            chain_id=chain_id,
            wallet_address=wallet_address,
            chain_name=chain_name,
        )


__all__ = ["SingleChainPortfolioService"]
