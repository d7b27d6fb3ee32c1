from typing import Any, List, Optional
from pydantic import Field

from .base import CamelModel


class TransactionEvent(CamelModel):
    id: str
    type: str = Field(description="transfer, swap, approve, mint or burn")
    timestamp: int = Field(description="Unix timestamp in seconds")
    block_number: int = 0
    transaction_hash: str = ""
    from_: str = Field(default="", alias="from")
    to: str = ""
    value: str = "0"
    token_address: Optional[str] = None
    token_symbol: str = "ETH"
    token_name: str = "Ethereum"
    gas_used: Optional[Any] = None
    gas_price: Optional[Any] = None
    status: str = "success"
    chain_id: int
    icon: Optional[str] = None
    color: Optional[str] = None
    direction: str = "unknown"
    rating: str = "unknown"
    block_time_sec: Optional[int] = None
    nonce: Optional[int] = None
    order_in_block: Optional[int] = None
    fee_in_smallest_native: Optional[str] = None
    token_actions: Optional[List[Any]] = None


class TransactionHistoryResponse(CamelModel):
    events: List[TransactionEvent]
    total: int
    page: int
    limit: int
    has_more: bool = False
