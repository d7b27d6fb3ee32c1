from pydantic import Field

from .base import CamelModel


class GasTier(CamelModel):
    price: int = Field(description="Suggested gas price in wei")
    max_fee_per_gas: int
    max_priority_fee_per_gas: int


class GasPrices(CamelModel):
    slow: GasTier
    standard: GasTier
    fast: GasTier
    instant: GasTier


class GasPriceTiers(CamelModel):
    chain_id: int
    timestamp: int = Field(description="Milliseconds since epoch when the quote was taken")
    gas_prices: GasPrices
    base_fee: int
    priority_fee: int


class PricePoint(CamelModel):
    timestamp: int = Field(description="Milliseconds since epoch")
    price: float
