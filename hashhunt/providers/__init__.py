from .base import BearerTokenProvider, Provider
from .oneinch import OneInchClient
from .twitter import TwitterClient

__all__ = [
    "Provider",
    "BearerTokenProvider",
    "OneInchClient",
    "TwitterClient",
]
