"""Wallet transaction history from the 1inch History API."""

from __future__ import annotations

from ..errors import PortfolioValidationError
from ..providers.oneinch import OneInchClient
from ..types import TransactionHistoryResponse
from .address import require_chain_id, require_wallet_address
from .normalizer import normalize_history_events

MIN_LIMIT = 1
MAX_LIMIT = 100
DEFAULT_LIMIT = 20
DEFAULT_PAGE = 1


class TransactionHistoryService:
    def __init__(self, client: OneInchClient) -> None:
        self._client = client

    async def fetch(
        self,
        wallet_address: str,
        chain_id: int,
        *,
        limit: int = DEFAULT_LIMIT,
        page: int = DEFAULT_PAGE,
    ) -> TransactionHistoryResponse:
        require_wallet_address(wallet_address)
        require_chain_id(chain_id)
        if not MIN_LIMIT <= limit <= MAX_LIMIT:
            raise PortfolioValidationError(f"Limit must be between {MIN_LIMIT} and {MAX_LIMIT}")
        if page < 1:
            raise PortfolioValidationError("Page must be greater than 0")

        payload = await self._client.get_history_events(wallet_address, chain_id, limit=limit, page=page)
        events = normalize_history_events(payload, chain_id)

        # The events endpoint does not report pagination metadata.
        return TransactionHistoryResponse(
            events=events,
            total=len(events),
            page=page,
            limit=limit,
            has_more=False,
        )


__all__ = ["TransactionHistoryService", "DEFAULT_LIMIT", "DEFAULT_PAGE", "MIN_LIMIT", "MAX_LIMIT"]
