from __future__ import annotations

import time
from typing import Callable

from ..providers.oneinch import OneInchClient
from ..types import GasPriceTiers
from .normalizer import normalize_gas_price


def _now_ms() -> int:
    return int(time.time() * 1000)


class GasPriceService:
    def __init__(self, client: OneInchClient, *, clock: Callable[[], int] = _now_ms) -> None:
        self._client = client
        self._clock = clock

    async def get_gas_price(self, chain_id: int = 1) -> GasPriceTiers:
        payload = await self._client.get_gas_price(chain_id)
        return normalize_gas_price(payload, chain_id, self._clock())


__all__ = ["GasPriceService"]
