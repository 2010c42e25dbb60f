"""VIP 업그레이드 주문 생성 유스케이스"""
import random
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

from loguru import logger

from domain.entities.order import NewOrder
from domain.exceptions import (
    AccountNotFoundError, AccountMismatchError, AlreadyEntitledError,
    InvalidParametersError, OrderCodeConflictError, OrderCodeUnavailableError,
)
from application.ports.account_repository import AccountRepository
from application.ports.order_repository import OrderRepository
from application.ports.payment_gateway import PaymentGatewayPort


@dataclass
class CreateOrderInput:
    actor_id: int      # 인증된 사용자
    user_id: Any       # 요청 본문의 userId
    amount: Any
    description: Any
    return_url: str
    cancel_url: str


@dataclass
class CreateOrderOutput:
    order_id: int
    order_code: int
    checkout_url: str


def random_order_code(max_code: int) -> Callable[[], int]:
    """1..max_code 범위의 난수 주문 코드 생성기"""
    return lambda: random.randint(1, max_code)


class CreateOrderUseCase:
    """
    주문 생성

    1. 본인 계정 / 입력값 / VIP 여부 확인
    2. 주문 코드 발급 → 결제 링크 생성 → PENDING 주문 저장
       코드가 유니크 제약에 걸리면 새 코드로 재시도한다.
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        order_repo: OrderRepository,
        gateway: PaymentGatewayPort,
        code_generator: Callable[[], int],
        max_attempts: int = 5,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self._account_repo = account_repo
        self._order_repo = order_repo
        self._gateway = gateway
        self._generate_code = code_generator
        self._max_attempts = max_attempts
        self._clock = clock

    async def execute(self, input: CreateOrderInput) -> CreateOrderOutput:
        user_id = _parse_user_id(input.user_id)
        if user_id != input.actor_id:
            raise AccountMismatchError()

        amount = input.amount
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise InvalidParametersError("결제 금액은 양의 정수여야 합니다.")
        description = input.description.strip() if isinstance(input.description, str) else ""
        if not description:
            raise InvalidParametersError("주문 설명이 비어 있습니다.")

        account = await self._account_repo.get_by_id(user_id)
        if account is None:
            raise AccountNotFoundError()
        if account.is_vip(self._clock()):
            raise AlreadyEntitledError()

        for attempt in range(1, self._max_attempts + 1):
            order_code = self._generate_code()
            if await self._order_repo.code_exists(order_code):
                logger.warning(f"주문 코드 중복, 재발급: {order_code} (시도 {attempt})")
                continue

            # 실패 시 GatewayError 전파, 주문은 저장되지 않음
            link = await self._gateway.create_payment_link(
                order_code=order_code, amount=amount, description=description,
                return_url=input.return_url, cancel_url=input.cancel_url,
            )

            try:
                order = await self._order_repo.add(NewOrder(
                    user_id=user_id, order_code=order_code, amount=amount,
                    description=description, payment_link_id=link.payment_link_id,
                    checkout_url=link.checkout_url,
                ))
            except OrderCodeConflictError:
                logger.warning(f"주문 저장 중 코드 충돌, 재시도: {order_code} (시도 {attempt})")
                continue

            logger.info(f"주문 생성: user={user_id} orderCode={order.order_code} amount={amount}")
            return CreateOrderOutput(order_id=order.id, order_code=order.order_code,
                                     checkout_url=order.checkout_url)

        raise OrderCodeUnavailableError(self._max_attempts)


def _parse_user_id(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
