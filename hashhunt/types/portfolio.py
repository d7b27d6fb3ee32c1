from typing import List, Optional
from pydantic import Field

from .base import CamelModel


class TokenBalance(CamelModel):
    symbol: str = Field(description="Token symbol (e.g. ETH, USDC)")
    name: str = Field(description="Full token name")
    address: str = Field(description="Token contract address (zero address for native)")
    decimals: int = Field(description="Token decimal places")
    logo_uri: Optional[str] = Field(default=None, alias="logoURI", description="Token logo URL")
    tags: List[str] = Field(default_factory=list, description="Upstream token tags")
    balance: str = Field(description="Raw balance in base units")
    price: float = Field(description="Price per whole token in the quote currency")
    value: float = Field(description="balance / 10^decimals * price")
    change_24h: Optional[float] = Field(default=None, description="24h price change")
    icon: Optional[str] = Field(default=None, description="Display icon hint")
    color: Optional[str] = Field(default=None, description="Display gradient hint")


class PortfolioResponse(CamelModel):
    tokens: List[TokenBalance] = Field(description="Token holdings sorted by value")
    total_value: float = Field(description="Sum of token values")
    chain_id: int = Field(description="Chain the holdings were fetched from")
    wallet_address: str = Field(description="Wallet address as provided by the caller")
    chain_name: Optional[str] = Field(default=None, description="Human readable chain name")


class ChainPortfolioResult(CamelModel):
    chain_id: int
    chain_name: str
    success: bool
    data: Optional[PortfolioResponse] = None
    error: Optional[str] = None
    error_type: Optional[str] = None


class HighestValueChain(CamelModel):
    chain_id: int
    chain_name: str
    value: float


class PortfolioSummary(CamelModel):
    total_tokens: int
    chains_with_tokens: int
    highest_value_chain: HighestValueChain


class AllChainsPortfolioResponse(CamelModel):
    wallet_address: str
    total_value: float
    results: List[ChainPortfolioResult] = Field(description="One slot per configured chain, in order")
    chains: List[PortfolioResponse] = Field(description="Successful chains that returned data")
    failed_chains: List[int] = Field(default_factory=list, description="Chain IDs whose fetch failed")
    summary: PortfolioSummary
