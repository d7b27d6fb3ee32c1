import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ..cache import TokenInfoCache
from ..errors import MissingCredentialError, PortfolioError, PortfolioValidationError
from ..providers.oneinch import OneInchClient
from ..services.address import parse_int_param
from ..services.charts import DEFAULT_PERIOD, PriceChartService
from ..services.gas_price import GasPriceService
from ..services.tokens import TokenInfoService
from .deps import get_oneinch_client, get_token_cache
from .responses import bad_request

router = APIRouter(prefix="/api")
_logger = logging.getLogger(__name__)

DEFAULT_CHAIN_ID = 1


def _chain_or_default(raw: Optional[str]) -> int:
    chain_id = parse_int_param(raw)
    return chain_id if chain_id and chain_id > 0 else DEFAULT_CHAIN_ID


@router.get("/token-info")
async def get_token_info(
    address: Optional[str] = Query(None, description="Token contract address"),
    chainId: Optional[str] = Query(None, description="EVM chain id (default 1)"),
    client: OneInchClient = Depends(get_oneinch_client),
    cache: TokenInfoCache = Depends(get_token_cache),
):
    """Token metadata; upstream failures degrade to ``{"token": null}``."""

    if not address:
        return bad_request("Missing address parameter", token=None)

    chain_id = _chain_or_default(chainId)
    try:
        client.require_credential()
        token = await TokenInfoService(client, cache).get_token_info(address, chain_id)
    except MissingCredentialError as exc:
        return JSONResponse({"token": None, "error": exc.message}, status_code=500)
    except PortfolioError as exc:
        _logger.warning(
            "token info lookup failed",
            extra={"event": "token_info_error", "chain_id": chain_id, "address": address, "error": exc.message},
        )
        return {"token": None}
    except Exception:
        _logger.exception(
            "token info lookup failed",
            extra={"event": "token_info_error", "chain_id": chain_id, "address": address},
        )
        return {"token": None}

    return {"token": token.to_wire()}


@router.get("/gas-price")
async def get_gas_price(
    chainId: Optional[str] = Query(None, description="EVM chain id (default 1)"),
    client: OneInchClient = Depends(get_oneinch_client),
):
    chain_id = _chain_or_default(chainId)
    try:
        tiers = await GasPriceService(client).get_gas_price(chain_id)
    except MissingCredentialError as exc:
        return JSONResponse({"error": exc.message}, status_code=500)
    except PortfolioError as exc:
        _logger.error(
            "gas price fetch failed",
            extra={"event": "gas_price_error", "chain_id": chain_id, "error": exc.message},
        )
        return JSONResponse(
            {"error": "Failed to fetch gas price", "details": exc.message},
            status_code=500,
        )
    except Exception as exc:
        _logger.exception("gas price fetch failed", extra={"event": "gas_price_error", "chain_id": chain_id})
        return JSONResponse(
            {"error": "Failed to fetch gas price", "details": str(exc)},
            status_code=500,
        )

    return tiers.to_wire()


@router.get("/charts/price")
async def get_price_chart(
    fromToken: Optional[str] = Query(None, description="Base token symbol, e.g. ETH"),
    toToken: Optional[str] = Query(None, description="Quote token symbol, e.g. USDC"),
    period: Optional[str] = Query(None, description="Chart period (default 24H)"),
    chainId: Optional[str] = Query(None, description="EVM chain id (default 1)"),
    client: OneInchClient = Depends(get_oneinch_client),
):
    """Price series for a known token pair; upstream failures degrade to ``[]``."""

    if not fromToken or not toToken:
        return bad_request("Missing token parameters", prices=[])

    chain_id = _chain_or_default(chainId)
    service = PriceChartService(client)
    try:
        prices = await service.get_price_chart(
            fromToken,
            toToken,
            period=period or DEFAULT_PERIOD,
            chain_id=chain_id,
        )
    except PortfolioValidationError as exc:
        return bad_request(exc.message, prices=[])
    except MissingCredentialError as exc:
        return JSONResponse({"prices": [], "error": exc.message}, status_code=500)
    except PortfolioError as exc:
        _logger.warning(
            "price chart fetch failed",
            extra={"event": "price_chart_error", "pair": f"{fromToken}/{toToken}", "error": exc.message},
        )
        return {"prices": []}
    except Exception:
        _logger.exception(
            "price chart fetch failed",
            extra={"event": "price_chart_error", "pair": f"{fromToken}/{toToken}"},
        )
        return {"prices": []}

    return {"prices": [point.to_wire() for point in prices]}
