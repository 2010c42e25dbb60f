"""결제 게이트웨이 콜백 스키마"""
from typing import Any
from pydantic import BaseModel, Field


class PaymentCallbackRequest(BaseModel):
    """payOS 결과 파라미터. 원시 값 그대로 받아 유스케이스에서 InvalidParameters로 검증"""
    code: Any = None
    id: Any = None
    cancel: Any = None
    status: Any = None
    order_code: Any = Field(None, alias="orderCode")

    class Config:
        populate_by_name = True
