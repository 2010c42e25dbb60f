"""결제 게이트웨이 콜백 값 객체"""
from dataclasses import dataclass
from typing import Any, Optional

from domain.enums import OrderStatus
from domain.exceptions import InvalidParametersError

# 콜백이 가질 수 있는 (status, cancel) 조합
_OUTCOMES = {
    ("PAID", False): OrderStatus.PAID,
    ("CANCELLED", True): OrderStatus.CANCELLED,
}


@dataclass(frozen=True)
class PaymentResult:
    """검증이 끝난 결제 결과 — 상태 전이에 쓰이는 유일한 입력"""
    order_code: int
    outcome: OrderStatus
    code: str
    payment_id: str

    @property
    def paid(self) -> bool:
        return self.outcome == OrderStatus.PAID

    @classmethod
    def parse(cls, code: Any, payment_id: Any, cancel: Any, status: Any,
              order_code: Any) -> "PaymentResult":
        """원시 콜백 값을 검증한다. 누락되거나 모순된 값이면 InvalidParametersError"""
        if not code or not payment_id or cancel is None or not status or order_code is None:
            raise InvalidParametersError("필수 결제 파라미터가 누락되었습니다.")
        if not isinstance(cancel, bool):
            raise InvalidParametersError("cancel 값은 boolean이어야 합니다.")
        if not isinstance(status, str):
            raise InvalidParametersError("status 값은 문자열이어야 합니다.")
        order_code = _parse_order_code(order_code)
        if order_code is None:
            raise InvalidParametersError("orderCode가 올바르지 않습니다.")

        outcome = _OUTCOMES.get((status, cancel))
        if outcome is None:
            raise InvalidParametersError(f"결제 상태와 취소 여부가 일치하지 않습니다: status={status}, cancel={cancel}")
        return cls(order_code=order_code, outcome=outcome, code=str(code), payment_id=str(payment_id))


def _parse_order_code(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        order_code = int(value)
    except (TypeError, ValueError):
        return None
    if order_code <= 0 or str(order_code) != str(value).strip():
        return None
    return order_code
