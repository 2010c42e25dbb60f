"""결제 게이트웨이 콜백 처리 유스케이스"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

from loguru import logger

from domain.entities.account import AccountEntity
from domain.entities.payment_result import PaymentResult
from domain.enums import OrderStatus
from domain.exceptions import (
    AccountNotFoundError, AlreadyProcessedError, InvalidParametersError, OrderNotFoundError,
)
from application.ports.account_repository import AccountRepository
from application.ports.order_repository import OrderRepository


@dataclass
class SettlePaymentInput:
    code: Any
    id: Any
    cancel: Any
    status: Any
    order_code: Any
    expected_status: Optional[OrderStatus] = None  # 엔드포인트가 기대하는 결과


@dataclass
class SettlePaymentOutput:
    order_code: int
    status: OrderStatus
    vip_expire_at: Optional[datetime] = None


class SettlePaymentUseCase:
    """
    결제 결과 반영

    PENDING → PAID / CANCELLED 전이는 조건부 UPDATE 한 번으로 처리한다.
    전이에 성공한 호출만 VIP를 부여하므로 중복 콜백은 AlreadyProcessedError로 끝난다.
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        account_repo: AccountRepository,
        vip_duration_days: int = 30,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self._order_repo = order_repo
        self._account_repo = account_repo
        self._vip_duration_days = vip_duration_days
        self._clock = clock

    async def execute(self, input: SettlePaymentInput) -> SettlePaymentOutput:
        result = PaymentResult.parse(code=input.code, payment_id=input.id, cancel=input.cancel,
                                     status=input.status, order_code=input.order_code)
        if input.expected_status is not None and result.outcome != input.expected_status:
            raise InvalidParametersError(
                f"{input.expected_status.value} 콜백에 {result.outcome.value} 결과가 전달되었습니다.")

        changed = await self._order_repo.transition_from_pending(result.order_code, result.outcome)
        if not changed:
            order = await self._order_repo.get_by_code(result.order_code)
            if order is None:
                raise OrderNotFoundError(result.order_code)
            raise AlreadyProcessedError(result.order_code, order.status.value)

        if not result.paid:
            logger.info(f"결제 취소 반영: orderCode={result.order_code}")
            return SettlePaymentOutput(order_code=result.order_code, status=OrderStatus.CANCELLED)

        # 같은 트랜잭션 안에서 부여, 실패하면 주문 전이도 롤백된다
        account = await self._account_repo.get_by_order_owner(result.order_code)
        if account is None:
            raise AccountNotFoundError()

        expire_at = AccountEntity.vip_expiry_from(self._clock(), self._vip_duration_days)
        await self._account_repo.set_vip_expiry(account.id, expire_at)
        logger.info(f"결제 완료: orderCode={result.order_code} user={account.id} VIP ~{expire_at.isoformat()}")
        return SettlePaymentOutput(order_code=result.order_code, status=OrderStatus.PAID,
                                   vip_expire_at=expire_at)
