"""FastAPI dependencies shared by the routers.

Tests swap these out through ``app.dependency_overrides``.
"""

from fastapi import Depends, Request

from ..cache import TokenInfoCache
from ..providers.oneinch import OneInchClient
from ..providers.twitter import TwitterClient
from ..services.chains import ChainRegistry, default_chain_registry
from ..services.limit_orders import OneInchOrderbookSubmitter, OrderSubmitter


def get_oneinch_client() -> OneInchClient:
    return OneInchClient()


def get_twitter_client() -> TwitterClient:
    return TwitterClient()


def get_token_cache(request: Request) -> TokenInfoCache:
    return request.app.state.token_cache


def get_chain_registry() -> ChainRegistry:
    return default_chain_registry()


def get_order_submitter(client: OneInchClient = Depends(get_oneinch_client)) -> OrderSubmitter:
    return OneInchOrderbookSubmitter(client)
