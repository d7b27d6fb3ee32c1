from typing import Any, Optional
from pydantic import BaseModel, Field


class ApiEnvelope(BaseModel):
    success: bool = Field(description="Whether request was successful")
    data: Optional[Any] = Field(default=None, description="Response payload")
    error: Optional[str] = Field(default=None, description="Error message if failed")
    errorType: Optional[str] = Field(default=None, description="PortfolioError tag if failed")

    def to_wire(self) -> dict:
        return self.model_dump(exclude_none=True, mode="json")
