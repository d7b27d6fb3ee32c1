import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ..errors import MissingCredentialError, PortfolioError, PortfolioValidationError
from ..providers.oneinch import OneInchClient
from ..services.address import is_valid_chain_id, is_valid_wallet_address, parse_int_param
from ..services.chains import ChainRegistry
from ..services.history import DEFAULT_LIMIT, DEFAULT_PAGE, TransactionHistoryService
from ..services.portfolio import SingleChainPortfolioService
from ..services.portfolio_aggregator import MultiChainPortfolioAggregator
from .deps import get_chain_registry, get_oneinch_client
from .responses import bad_request, error_response, success_response

router = APIRouter(prefix="/api")
_logger = logging.getLogger(__name__)


@router.get("/portfolio/all/{address}")
async def get_all_chains_portfolio(
    address: str,
    client: OneInchClient = Depends(get_oneinch_client),
    registry: ChainRegistry = Depends(get_chain_registry),
):
    """Portfolio across every enabled chain; failed chains are reported per slot."""

    if not is_valid_wallet_address(address):
        return bad_request("Invalid wallet address format")

    try:
        client.require_credential()
        aggregator = MultiChainPortfolioAggregator(SingleChainPortfolioService(client))
        result = await aggregator.fetch_all(address, registry.list_enabled())
    except PortfolioError as exc:
        _logger.error(
            "multi-chain portfolio failed",
            extra={"event": "portfolio_all_error", "error": exc.message},
        )
        return error_response(exc)
    except Exception as exc:
        _logger.exception("multi-chain portfolio failed", extra={"event": "portfolio_all_error"})
        return error_response(exc)

    _logger.info(
        "multi-chain portfolio fetched",
        extra={
            "event": "portfolio_all",
            "chains": len(result.results),
            "failed_chains": result.failed_chains,
        },
    )
    return success_response(result.to_wire())


@router.get("/portfolio/{address}")
async def get_portfolio(
    address: str,
    chainId: Optional[str] = Query(None, description="EVM chain id"),
    client: OneInchClient = Depends(get_oneinch_client),
    registry: ChainRegistry = Depends(get_chain_registry),
):
    chain_id = parse_int_param(chainId)
    if not is_valid_chain_id(chain_id):
        return error_response(PortfolioValidationError("Valid chain ID is required"))

    service = SingleChainPortfolioService(client)
    try:
        portfolio = await service.fetch(address, chain_id, registry.name_for(chain_id))
    except PortfolioError as exc:
        if not isinstance(exc, (PortfolioValidationError, MissingCredentialError)):
            _logger.error(
                "portfolio fetch failed",
                extra={"event": "portfolio_error", "chain_id": chain_id, "error": exc.message},
            )
        return error_response(exc)
    except Exception as exc:
        _logger.exception(
            "portfolio fetch failed", extra={"event": "portfolio_error", "chain_id": chain_id}
        )
        return error_response(exc)

    if portfolio is None:
        return JSONResponse(
            {"success": False, "error": "No portfolio data found for this wallet and chain"},
            status_code=404,
        )
    return success_response(portfolio.to_wire())


@router.get("/history/{address}")
async def get_history(
    address: str,
    chainId: Optional[str] = Query(None, description="EVM chain id"),
    limit: Optional[str] = Query(None, description="Events per page (1-100)"),
    page: Optional[str] = Query(None, description="Page number, starting at 1"),
    client: OneInchClient = Depends(get_oneinch_client),
):
    chain_id = parse_int_param(chainId)
    if not is_valid_chain_id(chain_id):
        return error_response(PortfolioValidationError("Valid chain ID is required"))

    # Unparseable or zero paging falls back to the defaults; other out-of-range values are rejected.
    limit_value = parse_int_param(limit) or DEFAULT_LIMIT
    page_value = parse_int_param(page) or DEFAULT_PAGE

    service = TransactionHistoryService(client)
    try:
        history = await service.fetch(address, chain_id, limit=limit_value, page=page_value)
    except PortfolioError as exc:
        if not isinstance(exc, PortfolioValidationError):
            _logger.error(
                "history fetch failed",
                extra={"event": "history_error", "chain_id": chain_id, "error": exc.message},
            )
        return error_response(exc)
    except Exception as exc:
        _logger.exception(
            "history fetch failed", extra={"event": "history_error", "chain_id": chain_id}
        )
        return error_response(exc)

    return success_response(history.to_wire())
