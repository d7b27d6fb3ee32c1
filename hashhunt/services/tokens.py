"""Token metadata lookups with process-wide memoization."""

from __future__ import annotations

import logging

from ..cache import TokenInfoCache
from ..providers.oneinch import OneInchClient
from ..types import TokenInfo
from .normalizer import normalize_token_info

logger = logging.getLogger(__name__)


class TokenInfoService:
    def __init__(self, client: OneInchClient, cache: TokenInfoCache) -> None:
        self._client = client
        self._cache = cache

    async def get_token_info(self, address: str, chain_id: int = 1) -> TokenInfo:
        cached = self._cache.get(chain_id, address)
        if cached is not None:
            return cached

        payload = await self._client.get_custom_token(chain_id, address)
        info = normalize_token_info(payload, address)
        logger.debug("token info cached", extra={"chain_id": chain_id, "address": address.lower()})
        return self._cache.put(chain_id, address, info)


__all__ = ["TokenInfoService"]
