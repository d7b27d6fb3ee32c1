"""Mission tweet verification against the Twitter API."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

from ..providers.twitter import TwitterClient

# Only the leading part of the mission text has to appear in the tweet.
MATCH_PREFIX_CHARS = 50
RECENT_WINDOW = timedelta(minutes=5)


@dataclass(frozen=True)
class TweetVerification:
    verified: bool
    tweet_id: Optional[str] = None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_created_at(value: Any) -> Optional[datetime]:
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def _contains_mission_text(tweet: Dict[str, Any], tweet_text: str) -> bool:
    text = tweet.get("text") or ""
    return tweet_text[:MATCH_PREFIX_CHARS] in text


class TweetVerifier:
    def __init__(self, client: TwitterClient, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self._client = client
        self._clock = clock

    async def verify(
        self,
        tweet_text: str,
        user_id: str,
        tweet_id: Optional[str] = None,
    ) -> TweetVerification:
        """Check that ``user_id`` tweeted ``tweet_text``.

        With a ``tweet_id`` the tweet is checked directly (text and author).
        Without one, the user's latest tweets are searched for a matching
        tweet posted within the last five minutes.
        """

        if tweet_id:
            tweet = await self._client.get_tweet(tweet_id)
            verified = bool(
                tweet
                and _contains_mission_text(tweet, tweet_text)
                and str(tweet.get("author_id")) == str(user_id)
            )
            return TweetVerification(verified=verified, tweet_id=tweet_id)

        cutoff = self._clock() - RECENT_WINDOW
        for tweet in await self._client.get_user_tweets(user_id):
            created_at = _parse_created_at(tweet.get("created_at"))
            if created_at and created_at > cutoff and _contains_mission_text(tweet, tweet_text):
                return TweetVerification(verified=True, tweet_id=tweet.get("id"))

        return TweetVerification(verified=False)


__all__ = ["TweetVerifier", "TweetVerification", "MATCH_PREFIX_CHARS", "RECENT_WINDOW"]
