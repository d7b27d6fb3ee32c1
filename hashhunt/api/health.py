from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..providers.oneinch import OneInchClient
from ..providers.twitter import TwitterClient
from .deps import get_oneinch_client, get_twitter_client

router = APIRouter()


@router.get("/healthz")
async def health_check(
    oneinch: OneInchClient = Depends(get_oneinch_client),
    twitter: TwitterClient = Depends(get_twitter_client),
) -> Dict[str, Any]:
    """Health check endpoint that verifies provider status"""

    provider_status = {
        "oneinch": await oneinch.health_check(),
        "twitter": await twitter.health_check(),
    }

    # 1inch backs every core route; Twitter only backs tweet verification.
    core_healthy = provider_status["oneinch"]["status"] == "healthy"
    available_providers = sum(
        1 for status in provider_status.values()
        if status["status"] == "healthy"
    )

    return {
        "status": "healthy" if core_healthy else "degraded",
        "providers": provider_status,
        "available_providers": available_providers,
        "total_providers": len(provider_status),
    }
