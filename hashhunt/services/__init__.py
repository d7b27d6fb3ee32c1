"""Service layer helpers"""

from .charts import PriceChartService
from .chains import ChainConfig, ChainRegistry, default_chain_registry
from .gas_price import GasPriceService
from .history import TransactionHistoryService
from .limit_orders import LimitOrderService, OneInchOrderbookSubmitter, OrderSubmitter
from .portfolio import SingleChainPortfolioService
from .portfolio_aggregator import MultiChainPortfolioAggregator
from .social import TweetVerification, TweetVerifier
from .tokens import TokenInfoService

__all__ = [
    "PriceChartService",
    "ChainConfig",
    "ChainRegistry",
    "default_chain_registry",
    "GasPriceService",
    "TransactionHistoryService",
    "LimitOrderService",
    "OneInchOrderbookSubmitter",
    "OrderSubmitter",
    "SingleChainPortfolioService",
    "MultiChainPortfolioAggregator",
    "TweetVerification",
    "TweetVerifier",
    "TokenInfoService",
]
