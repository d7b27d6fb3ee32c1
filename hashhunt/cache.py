import threading
from collections import OrderedDict
from typing import Optional

from .types import TokenInfo


class TokenInfoCache:
    """Process-wide token metadata cache keyed by ``chainId:address``.

    Addresses are lower-cased before building the key, so checksummed and
    lower-case spellings share an entry. Writes are insert-if-absent: the first
    stored value for a key is the one every later reader sees.

    ``max_size=0`` keeps every entry for the lifetime of the process. A
    positive ``max_size`` evicts the least recently used entry once full.
    """

    def __init__(self, max_size: int = 0):
        self.max_size = max(0, max_size)
        self._entries: "OrderedDict[str, TokenInfo]" = OrderedDict()
        self._lock = threading.Lock()

    @staticmethod
    def key(chain_id: int, address: str) -> str:
        return f"{chain_id}:{address.lower()}"

    def get(self, chain_id: int, address: str) -> Optional[TokenInfo]:
        key = self.key(chain_id, address)
        if not self.max_size:
            return self._entries.get(key)

        with self._lock:
            info = self._entries.get(key)
            if info is not None:
                self._entries.move_to_end(key)
            return info

    def put(self, chain_id: int, address: str, info: TokenInfo) -> TokenInfo:
        """Store ``info`` unless the key is already cached; return the cached value."""

        key = self.key(chain_id, address)
        with self._lock:
            existing = self._entries.get(key)
            if existing is not None:
                return existing

            self._entries[key] = info
            if self.max_size:
                while len(self._entries) > self.max_size:
                    self._entries.popitem(last=False)
            return info

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
