"""
Chain configuration for the multi-chain portfolio.

The set mirrors the networks the web client lets a wallet connect to.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..config import settings


@dataclass(frozen=True)
class ChainConfig:
    """A chain the portfolio aggregator fans out to."""
    id: int
    name: str


DEFAULT_CHAINS: List[ChainConfig] = [
    ChainConfig(id=1, name="Ethereum"),
    ChainConfig(id=42161, name="Arbitrum One"),
    ChainConfig(id=43114, name="Avalanche"),
    ChainConfig(id=56, name="BNB Smart Chain"),
    ChainConfig(id=100, name="Gnosis"),
    ChainConfig(id=10, name="OP Mainnet"),
    ChainConfig(id=137, name="Polygon"),
    ChainConfig(id=8453, name="Base"),
]


class ChainRegistry:
    """Lookup over the configured chain set."""

    def __init__(
        self,
        chains: Optional[Iterable[ChainConfig]] = None,
        enabled_ids: Optional[Iterable[int]] = None,
    ) -> None:
        self._chains = list(chains if chains is not None else DEFAULT_CHAINS)
        enabled = set(enabled_ids or [])
        if enabled:
            self._chains = [chain for chain in self._chains if chain.id in enabled]
        self._by_id = {chain.id: chain for chain in self._chains}

    def list_enabled(self) -> List[ChainConfig]:
        return list(self._chains)

    def get(self, chain_id: int) -> Optional[ChainConfig]:
        return self._by_id.get(chain_id)

    def name_for(self, chain_id: int) -> Optional[str]:
        chain = self.get(chain_id)
        return chain.name if chain else None


def default_chain_registry() -> ChainRegistry:
    return ChainRegistry(enabled_ids=settings.portfolio_chain_ids)


__all__ = ["ChainConfig", "ChainRegistry", "DEFAULT_CHAINS", "default_chain_registry"]
