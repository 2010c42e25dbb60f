"""사용자 주문 취소 유스케이스"""
from typing import Any

from loguru import logger

from domain.enums import OrderStatus
from domain.exceptions import InvalidParametersError, OrderNotFoundError
from application.ports.order_repository import OrderRepository


class CancelOrderUseCase:
    """본인의 PENDING 주문만 취소. 없거나 이미 처리된 주문은 구분 없이 OrderNotFoundError"""

    def __init__(self, order_repo: OrderRepository):
        self._order_repo = order_repo

    async def execute(self, user_id: int, order_code: Any) -> int:
        if isinstance(order_code, bool) or not isinstance(order_code, int) or order_code <= 0:
            raise InvalidParametersError("orderCode가 올바르지 않습니다.")

        changed = await self._order_repo.transition_from_pending(
            order_code, OrderStatus.CANCELLED, user_id=user_id)
        if not changed:
            raise OrderNotFoundError(order_code)

        logger.info(f"사용자 주문 취소: user={user_id} orderCode={order_code}")
        return order_code
