"""Multi-chain portfolio fan-out with per-chain failure isolation."""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

from ..config import settings
from ..errors import PortfolioErrorType, error_type_of
from ..types import (
    AllChainsPortfolioResponse,
    ChainPortfolioResult,
    HighestValueChain,
    PortfolioResponse,
    PortfolioSummary,
)
from .address import require_wallet_address
from .chains import ChainConfig
from .portfolio import SingleChainPortfolioService

logger = logging.getLogger(__name__)


class MultiChainPortfolioAggregator:
    """Run ``SingleChainPortfolioService`` for every chain concurrently.

    The result always has one slot per requested chain, in request order. A
    chain that fails, or that is still running when the time budget runs
    out, gets a failure slot; the other chains are unaffected.
    """

    def __init__(
        self,
        service: SingleChainPortfolioService,
        *,
        timeout_s: Optional[float] = None,
    ) -> None:
        self._service = service
        self._timeout_s = timeout_s or settings.aggregate_timeout_seconds

    async def fetch_all(
        self,
        wallet_address: str,
        chains: Sequence[ChainConfig],
    ) -> AllChainsPortfolioResponse:
        require_wallet_address(wallet_address)

        tasks = [
            asyncio.create_task(
                self._service.fetch(wallet_address, chain.id, chain.name),
                name=f"portfolio-{chain.id}",
            )
            for chain in chains
        ]

        pending: set = set()
        if tasks:
            _, pending = await asyncio.wait(tasks, timeout=self._timeout_s)
            for task in pending:
                task.cancel()

        results = [
            self._slot(chain, task, timed_out=task in pending)
            for chain, task in zip(chains, tasks)
        ]
        return self._build_response(wallet_address, results)

    def _slot(self, chain: ChainConfig, task: asyncio.Task, *, timed_out: bool) -> ChainPortfolioResult:
        if timed_out:
            logger.warning(
                "portfolio fetch timed out",
                extra={"event": "portfolio_chain_timeout", "chain_id": chain.id, "budget_s": self._timeout_s},
            )
            return ChainPortfolioResult(
                chain_id=chain.id,
                chain_name=chain.name,
                success=False,
                error=f"Timed out after {self._timeout_s}s",
                error_type=PortfolioErrorType.TIMEOUT_ERROR.value,
            )

        exc = task.exception()
        if exc is not None:
            logger.warning(
                "portfolio fetch failed",
                extra={"event": "portfolio_chain_error", "chain_id": chain.id, "error": str(exc)},
            )
            return ChainPortfolioResult(
                chain_id=chain.id,
                chain_name=chain.name,
                success=False,
                error=getattr(exc, "message", None) or str(exc) or exc.__class__.__name__,
                error_type=error_type_of(exc).value,
            )

        return ChainPortfolioResult(
            chain_id=chain.id,
            chain_name=chain.name,
            success=True,
            data=task.result(),
        )

    @staticmethod
    def _build_response(
        wallet_address: str,
        results: List[ChainPortfolioResult],
    ) -> AllChainsPortfolioResponse:
        chains_with_data: List[PortfolioResponse] = [
            result.data for result in results if result.success and result.data is not None
        ]

        highest: Optional[PortfolioResponse] = None
        for portfolio in chains_with_data:
            if portfolio.total_value > (highest.total_value if highest else 0.0):
                highest = portfolio

        summary = PortfolioSummary(
            total_tokens=sum(len(portfolio.tokens) for portfolio in chains_with_data),
            chains_with_tokens=len(chains_with_data),
            highest_value_chain=HighestValueChain(
                chain_id=highest.chain_id if highest else 0,
                chain_name=(highest.chain_name if highest else None) or "Unknown",
                value=highest.total_value if highest else 0.0,
            ),
        )

        return AllChainsPortfolioResponse(
            wallet_address=wallet_address,
            total_value=sum(portfolio.total_value for portfolio in chains_with_data),
            results=results,
            chains=chains_with_data,
            failed_chains=[result.chain_id for result in results if not result.success],
            summary=summary,
        )


__all__ = ["MultiChainPortfolioAggregator"]
