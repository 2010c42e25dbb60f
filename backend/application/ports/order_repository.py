"""주문 Repository 인터페이스"""
from abc import ABC, abstractmethod
from typing import Optional, List
from domain.entities.order import OrderEntity, NewOrder
from domain.enums import OrderStatus


class OrderRepository(ABC):
    @abstractmethod
    async def get_by_code(self, order_code: int) -> Optional[OrderEntity]: ...
    @abstractmethod
    async def code_exists(self, order_code: int) -> bool: ...
    @abstractmethod
    async def add(self, order: NewOrder) -> OrderEntity:
        """order_code 중복 시 OrderCodeConflictError"""
    @abstractmethod
    async def transition_from_pending(self, order_code: int, new_status: OrderStatus,
                                      user_id: Optional[int] = None) -> bool:
        """PENDING인 주문만 원자적으로 new_status로 변경. 변경 여부 반환"""
    @abstractmethod
    async def list_by_user(self, user_id: int) -> List[OrderEntity]: ...
