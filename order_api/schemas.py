# schemas.py

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Pydantic models for request and response.
# JSON keys are camelCase, attributes are snake_case; both are accepted on input.

class OrderItemRequest(BaseModel):
    # One line the client wants to buy
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(..., min_length=1, examples=["Widget"])
    qty: int = Field(..., ge=1, examples=[2])
    price: float = Field(0.0, ge=0, examples=[9.99])

class OrderRequest(BaseModel):
    # Fields that client sends in Request
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    customer_name: str = Field(..., alias="customerName", min_length=1, examples=["Alice"])
    email: Optional[str] = Field(None, examples=["alice@example.com"])
    name: Optional[str] = Field(None, examples=["Birthday gifts"])
    items: list[OrderItemRequest] = Field(..., min_length=1)

class OrderItemResponse(BaseModel):
    # One persisted order line
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(..., examples=["Widget"])
    qty: int = Field(..., examples=[2])
    price: float = Field(..., examples=[9.99])
    total_price: float = Field(..., alias="totalPrice", examples=[19.98])

class OrderResponse(BaseModel):
    # Fields that appear in Response body
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    order_id: str = Field(..., alias="orderId", examples=["ORD1A2B3C4D"])
    customer_name: str = Field(..., alias="customerName", examples=["Alice"])
    name: str = Field(..., examples=["Widget"])
    status: str = Field(..., examples=["PLACED"])
    order_date: date = Field(..., alias="orderDate", examples=["2025-01-31"])
    items: list[OrderItemResponse] = Field(default_factory=list)

    def to_json(self) -> dict:
        """ JSON-ready dict with camelCase keys, as sent to clients. """
        return self.model_dump(mode="json", by_alias=True)
