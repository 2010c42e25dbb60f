"""주문 도메인 엔티티"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from domain.enums import OrderStatus


@dataclass
class OrderEntity:
    """VIP 업그레이드 주문"""
    id: int
    user_id: int
    order_code: int
    amount: int
    description: str
    status: OrderStatus
    payment_link_id: str
    checkout_url: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING


@dataclass
class NewOrder:
    """저장 전 주문 (결제 링크 발급 완료 상태)"""
    user_id: int
    order_code: int
    amount: int
    description: str
    payment_link_id: str
    checkout_url: str
