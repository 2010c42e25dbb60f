"""결제 콜백 라우터 — payOS 결과 통지 (인증 없음)"""
from fastapi import APIRouter, Depends
from loguru import logger

from domain.enums import OrderStatus
from domain.exceptions import DomainError
from api.errors import to_http_exception
from api.schemas.common import ResponseBase
from api.schemas.payment import PaymentCallbackRequest
from api.dependencies import get_settle_payment_use_case
from application.use_cases.settle_payment import SettlePaymentUseCase, SettlePaymentInput

router = APIRouter(prefix="/api/v1/payment", tags=["결제"])


async def _settle(request: PaymentCallbackRequest, expected: OrderStatus,
                  use_case: SettlePaymentUseCase):
    try:
        return await use_case.execute(SettlePaymentInput(
            code=request.code, id=request.id, cancel=request.cancel, status=request.status,
            order_code=request.order_code, expected_status=expected))
    except DomainError as e:
        logger.warning(f"결제 콜백 거부 ({expected.value}): orderCode={request.order_code} - {e}")
        raise to_http_exception(e)


@router.post("/success", response_model=ResponseBase)
async def payment_success(request: PaymentCallbackRequest,
                          use_case: SettlePaymentUseCase = Depends(get_settle_payment_use_case)):
    output = await _settle(request, OrderStatus.PAID, use_case)
    return ResponseBase(success=True,
                        message=f"결제가 완료되었습니다. VIP 만료일: {output.vip_expire_at:%Y-%m-%d}")


@router.post("/cancel", response_model=ResponseBase)
async def payment_cancel(request: PaymentCallbackRequest,
                         use_case: SettlePaymentUseCase = Depends(get_settle_payment_use_case)):
    await _settle(request, OrderStatus.CANCELLED, use_case)
    return ResponseBase(success=True, message="결제가 취소되었습니다.")
