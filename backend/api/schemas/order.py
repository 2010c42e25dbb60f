"""주문 관련 스키마"""
from datetime import datetime
from typing import List
from pydantic import BaseModel, Field
from api.schemas.common import ResponseBase


class OrderCreateRequest(BaseModel):
    user_id: int = Field(..., alias="userId")
    amount: int
    description: str

    class Config:
        populate_by_name = True


class OrderCreateData(BaseModel):
    order_id: int = Field(..., alias="orderId")
    order_code: int = Field(..., alias="orderCode")
    checkout_url: str = Field(..., alias="checkoutUrl")

    class Config:
        populate_by_name = True


class OrderCreateResponse(ResponseBase):
    data: OrderCreateData


class OrderCancelRequest(BaseModel):
    order_code: int = Field(..., alias="orderCode")

    class Config:
        populate_by_name = True


class OrderHistoryItem(BaseModel):
    id: int
    order_code: int = Field(..., alias="orderCode")
    amount: int
    description: str
    status: str
    checkout_url: str = Field(..., alias="checkoutUrl")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class OrderHistoryResponse(ResponseBase):
    items: List[OrderHistoryItem]
    total: int
