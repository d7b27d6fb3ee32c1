"""Twitter API v2 client used to verify mission tweets."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from ..config import settings
from .base import BearerTokenProvider


class TwitterClient(BearerTokenProvider):
    name = "twitter"
    credential_name = "TWITTER_BEARER_TOKEN"
    label = "Twitter API"

    def __init__(
        self,
        *,
        bearer_token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(
            api_key=settings.twitter_bearer_token if bearer_token is None else bearer_token,
            base_url=base_url or settings.twitter_api_base_url,
            timeout_s=timeout_s or settings.request_timeout_seconds,
            transport=transport,
        )

    async def health_check(self) -> Dict[str, Any]:
        # No unauthenticated ping endpoint; report configuration only.
        if not await self.ready():
            return {"status": "unavailable", "reason": "TWITTER_BEARER_TOKEN not configured"}
        return {"status": "healthy"}

    async def get_tweet(self, tweet_id: str) -> Optional[Dict[str, Any]]:
        payload = await self.get(
            f"/2/tweets/{tweet_id}",
            params={"tweet.fields": "author_id,created_at"},
        )
        return (payload or {}).get("data")

    async def get_user_tweets(self, user_id: str, *, max_results: int = 10) -> List[Dict[str, Any]]:
        payload = await self.get(
            f"/2/users/{user_id}/tweets",
            params={"max_results": max_results, "tweet.fields": "created_at"},
        )
        return (payload or {}).get("data") or []
