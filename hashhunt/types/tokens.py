from typing import List, Optional
from pydantic import Field

from .base import CamelModel


class TokenInfo(CamelModel):
    symbol: str
    name: str
    address: str
    decimals: int
    logo_uri: Optional[str] = Field(default=None, alias="logoURI")
    tags: List[str] = Field(default_factory=list)
