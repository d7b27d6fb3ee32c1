import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ..errors import MissingCredentialError, PortfolioError
from ..providers.oneinch import OneInchClient
from ..services.address import parse_int_param
from ..services.limit_orders import DEFAULT_STATUSES, LimitOrderService, OrderSubmitter
from ..types import SubmitOrderRequest
from .deps import get_oneinch_client, get_order_submitter

router = APIRouter(prefix="/api")
_logger = logging.getLogger(__name__)


@router.post("/limit-orders/submit")
async def submit_limit_order(
    payload: SubmitOrderRequest,
    submitter: OrderSubmitter = Depends(get_order_submitter),
):
    """Forward an SDK-signed limit order to the order book."""

    if not payload.order or not payload.signature:
        return JSONResponse(
            {"success": False, "message": "Missing required fields: order or signature"},
            status_code=400,
        )

    try:
        result = await submitter.submit_order(
            payload.order,
            payload.signature,
            chain_id=payload.chainId,
            order_hash=payload.orderHash,
        )
    except MissingCredentialError as exc:
        return JSONResponse(
            {"success": False, "message": "API key not configured", "error": exc.message},
            status_code=500,
        )
    except Exception as exc:  # the submitter is an opaque SDK boundary
        _logger.exception(
            "limit order submission failed",
            extra={"event": "limit_order_submit_error", "chain_id": payload.chainId},
        )
        message = getattr(exc, "message", None) or str(exc) or "Unknown API error"
        return JSONResponse(
            {"success": False, "message": "Failed to submit order to 1inch", "error": message},
            status_code=500,
        )

    _logger.info(
        "limit order submitted",
        extra={"event": "limit_order_submitted", "chain_id": payload.chainId, "order_hash": payload.orderHash},
    )
    return {
        "success": True,
        "message": "Order submitted successfully to 1inch",
        "data": {
            "result": result,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    }


@router.get("/limit-orders")
async def list_limit_orders(
    address: Optional[str] = Query(None, description="Maker address"),
    chainId: Optional[str] = Query(None, description="EVM chain id (default 1)"),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    statuses: str = Query(DEFAULT_STATUSES, description="Comma separated order statuses"),
    sortBy: Optional[str] = Query(None),
    takerAsset: Optional[str] = Query(None),
    makerAsset: Optional[str] = Query(None),
    client: OneInchClient = Depends(get_oneinch_client),
):
    """A maker's open orders; upstream failures degrade to an empty list."""

    if not address:
        return JSONResponse(
            {"orders": [], "total": 0, "error": "Missing address parameter"},
            status_code=400,
        )

    chain_id = parse_int_param(chainId) or 1
    service = LimitOrderService(client)
    try:
        orders = await service.list_orders(
            address,
            chain_id=chain_id,
            page=parse_int_param(page) or 1,
            limit=parse_int_param(limit) or 100,
            statuses=statuses,
            sort_by=sortBy,
            taker_asset=takerAsset,
            maker_asset=makerAsset,
        )
    except MissingCredentialError as exc:
        return JSONResponse({"orders": [], "total": 0, "error": exc.message}, status_code=500)
    except PortfolioError as exc:
        _logger.warning(
            "limit order listing failed",
            extra={"event": "limit_orders_error", "chain_id": chain_id, "error": exc.message},
        )
        return {"orders": [], "total": 0}
    except Exception:
        _logger.exception(
            "limit order listing failed", extra={"event": "limit_orders_error", "chain_id": chain_id}
        )
        return {"orders": [], "total": 0}

    return {"orders": [order.to_wire() for order in orders], "total": len(orders)}
