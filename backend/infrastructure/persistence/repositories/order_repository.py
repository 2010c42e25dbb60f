"""주문 Repository — SQLAlchemy 구현"""
from typing import Optional, List

from loguru import logger
from sqlalchemy import select, update, desc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from application.ports.order_repository import OrderRepository
from domain.entities.order import OrderEntity, NewOrder
from domain.enums import OrderStatus
from domain.exceptions import OrderCodeConflictError
from infrastructure.persistence.models.order import Order


def to_order_entity(order: Order) -> OrderEntity:
    return OrderEntity(
        id=order.id, user_id=order.user_id, order_code=order.order_code,
        amount=order.amount, description=order.description, status=order.status,
        payment_link_id=order.payment_link_id, checkout_url=order.checkout_url,
        created_at=order.created_at, updated_at=order.updated_at,
    )


class SqlAlchemyOrderRepository(OrderRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_code(self, order_code: int) -> Optional[OrderEntity]:
        result = await self._session.execute(
            select(Order).where(Order.order_code == order_code)
            .execution_options(populate_existing=True))
        order = result.scalar_one_or_none()
        return to_order_entity(order) if order else None

    async def code_exists(self, order_code: int) -> bool:
        result = await self._session.execute(
            select(Order.id).where(Order.order_code == order_code))
        return result.first() is not None

    async def add(self, order: NewOrder) -> OrderEntity:
        record = Order(
            user_id=order.user_id, order_code=order.order_code, amount=order.amount,
            description=order.description, status=OrderStatus.PENDING,
            payment_link_id=order.payment_link_id, checkout_url=order.checkout_url,
        )
        self._session.add(record)
        try:
            await self._session.flush()
        except IntegrityError as e:
            # 주문 생성 요청은 이 INSERT 외에 쓰기가 없으므로 트랜잭션 전체를 되돌린다
            await self._session.rollback()
            logger.warning(f"주문 저장 실패 (유니크 제약): {order.order_code} - {e.orig}")
            raise OrderCodeConflictError(order.order_code)
        return to_order_entity(record)

    async def transition_from_pending(self, order_code: int, new_status: OrderStatus,
                                      user_id: Optional[int] = None) -> bool:
        if not new_status.is_terminal:
            raise ValueError(f"종료 상태로만 전이할 수 있습니다: {new_status}")
        stmt = (
            update(Order)
            .where(Order.order_code == order_code, Order.status == OrderStatus.PENDING)
            .values(status=new_status)
            .execution_options(synchronize_session=False)
        )
        if user_id is not None:
            stmt = stmt.where(Order.user_id == user_id)
        result = await self._session.execute(stmt)
        return result.rowcount == 1

    async def list_by_user(self, user_id: int) -> List[OrderEntity]:
        result = await self._session.execute(
            select(Order).where(Order.user_id == user_id)
            .order_by(desc(Order.created_at), desc(Order.id)))
        return [to_order_entity(o) for o in result.scalars().all()]
