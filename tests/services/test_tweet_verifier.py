from datetime import datetime, timedelta, timezone

import pytest

from conftest import respond
from hashhunt.services.social import TweetVerifier

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
MISSION = "I just placed my first limit order on HashHunt! Join the hunt and earn rewards #1inch"


def _iso(moment):
    return moment.strftime("%Y-%m-%dT%H:%M:%S.000Z")


def _verifier(client):
    return TweetVerifier(client, clock=lambda: NOW)


@pytest.mark.asyncio
async def test_direct_tweet_requires_text_and_author(twitter, upstream):
    upstream.add("/2/tweets/55", respond({"data": {"id": "55", "text": f"gm {MISSION}", "author_id": "u1"}}))

    ok = await _verifier(twitter).verify(MISSION, "u1", "55")
    wrong_author = await _verifier(twitter).verify(MISSION, "u2", "55")

    assert ok.verified is True
    assert ok.tweet_id == "55"
    assert wrong_author.verified is False


@pytest.mark.asyncio
async def test_only_leading_fifty_chars_must_match(twitter, upstream):
    upstream.add("/2/tweets/56", respond({"data": {"id": "56", "text": MISSION[:50], "author_id": "u1"}}))

    result = await _verifier(twitter).verify(MISSION, "u1", "56")

    assert result.verified is True


@pytest.mark.asyncio
async def test_missing_tweet_is_not_verified(twitter, upstream):
    upstream.add("/2/tweets/57", respond({"errors": [{"detail": "not found"}]}))

    result = await _verifier(twitter).verify(MISSION, "u1", "57")

    assert result.verified is False


@pytest.mark.asyncio
async def test_recent_timeline_search(twitter, upstream):
    tweets = [
        {"id": "old", "text": MISSION, "created_at": _iso(NOW - timedelta(minutes=10))},
        {"id": "new", "text": MISSION, "created_at": _iso(NOW - timedelta(minutes=2))},
    ]
    upstream.add("/2/users/u1/tweets", respond({"data": tweets}))

    result = await _verifier(twitter).verify(MISSION, "u1")

    assert result.verified is True
    assert result.tweet_id == "new"
    params = upstream.requests[0].url.params
    assert params["max_results"] == "10"
    assert params["tweet.fields"] == "created_at"


@pytest.mark.asyncio
async def test_stale_timeline_is_not_verified(twitter, upstream):
    upstream.add(
        "/2/users/u1/tweets",
        respond({"data": [{"id": "old", "text": MISSION, "created_at": _iso(NOW - timedelta(minutes=6))}]}),
    )

    result = await _verifier(twitter).verify(MISSION, "u1")

    assert result.verified is False
    assert result.tweet_id is None
