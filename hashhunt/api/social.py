import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..errors import MissingCredentialError, PortfolioError
from ..providers.twitter import TwitterClient
from ..services.social import TweetVerifier
from ..types import VerifyTweetRequest
from .deps import get_twitter_client

router = APIRouter(prefix="/api")
_logger = logging.getLogger(__name__)


@router.post("/verify-tweet")
async def verify_tweet(
    payload: VerifyTweetRequest,
    client: TwitterClient = Depends(get_twitter_client),
):
    if not payload.tweetText or not payload.userId:
        return JSONResponse(
            {"verified": False, "error": "Missing required parameters"},
            status_code=400,
        )

    try:
        client.require_credential()
        result = await TweetVerifier(client).verify(payload.tweetText, payload.userId, payload.tweetId)
    except MissingCredentialError:
        return JSONResponse({"verified": False, "error": "Twitter API not configured"}, status_code=500)
    except PortfolioError as exc:
        _logger.error(
            "tweet verification failed",
            extra={"event": "verify_tweet_error", "user_id": payload.userId, "error": exc.message},
        )
        return JSONResponse({"verified": False, "error": "Failed to verify tweet"}, status_code=500)
    except Exception:
        _logger.exception(
            "tweet verification failed", extra={"event": "verify_tweet_error", "user_id": payload.userId}
        )
        return JSONResponse({"verified": False, "error": "Failed to verify tweet"}, status_code=500)

    body = {"verified": result.verified}
    if result.tweet_id:
        body["tweetId"] = result.tweet_id
    return body
