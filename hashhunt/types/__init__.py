from .envelope import ApiEnvelope
from .history import TransactionEvent, TransactionHistoryResponse
from .market import GasPrices, GasPriceTiers, GasTier, PricePoint
from .orders import LimitOrder, SubmitOrderRequest, VerifyTweetRequest
from .portfolio import (
    AllChainsPortfolioResponse,
    ChainPortfolioResult,
    HighestValueChain,
    PortfolioResponse,
    PortfolioSummary,
    TokenBalance,
)
from .tokens import TokenInfo

__all__ = [
    "ApiEnvelope",
    "TransactionEvent",
    "TransactionHistoryResponse",
    "GasPrices",
    "GasPriceTiers",
    "GasTier",
    "PricePoint",
    "LimitOrder",
    "SubmitOrderRequest",
    "VerifyTweetRequest",
    "AllChainsPortfolioResponse",
    "ChainPortfolioResult",
    "HighestValueChain",
    "PortfolioResponse",
    "PortfolioSummary",
    "TokenBalance",
    "TokenInfo",
]
