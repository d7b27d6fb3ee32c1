from typing import Any, Dict, Optional
from pydantic import BaseModel, Field

from .base import CamelModel


class LimitOrder(CamelModel):
    id: Optional[str] = None
    maker_asset: Optional[str] = None
    taker_asset: Optional[str] = None
    maker_amount: Optional[str] = None
    taker_amount: Optional[str] = None
    maker: Optional[str] = None
    salt: Optional[str] = None
    signature: Optional[str] = None
    permit: str = ""
    interaction: str = ""
    status: int = Field(description="1 when the order is valid, 3 when upstream flagged it invalid")
    created_at: Optional[float] = None
    updated_at: Optional[float] = None
    remaining_maker_amount: Optional[str] = None
    remaining_taker_amount: Optional[str] = None
    invalidated: bool = False
    maker_asset_data: Optional[str] = None
    taker_asset_data: Optional[str] = None


class SubmitOrderRequest(BaseModel):
    order: Optional[Dict[str, Any]] = Field(default=None, description="Signed order data from the order SDK")
    signature: Optional[str] = Field(default=None, description="EIP-712 signature over the order")
    orderHash: Optional[str] = Field(default=None, description="Order hash computed by the order SDK")
    chainId: int = Field(default=1, description="Chain the order lives on")


class VerifyTweetRequest(BaseModel):
    tweetText: Optional[str] = Field(default=None, description="Mission text the tweet must contain")
    userId: Optional[str] = Field(default=None, description="Twitter user ID expected to author the tweet")
    tweetId: Optional[str] = Field(default=None, description="Tweet to check directly, if known")
