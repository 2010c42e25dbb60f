"""주문 라우터"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from config import settings
from infrastructure.persistence.database import get_session
from infrastructure.persistence.models.user import User
from infrastructure.persistence.repositories import SqlAlchemyOrderRepository
from domain.exceptions import DomainError, OrderNotFoundError
from api.errors import to_http_exception
from api.schemas.common import ResponseBase
from api.schemas.order import (
    OrderCreateRequest, OrderCreateData, OrderCreateResponse, OrderCancelRequest,
    OrderHistoryItem, OrderHistoryResponse,
)
from api.dependencies import (
    get_current_active_user, get_create_order_use_case, get_cancel_order_use_case,
)
from application.use_cases.create_order import CreateOrderUseCase, CreateOrderInput
from application.use_cases.cancel_order import CancelOrderUseCase

router = APIRouter(prefix="/api/v1/order", tags=["주문"])


@router.post("/create", response_model=OrderCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_order(request: OrderCreateRequest, http_request: Request,
                       current_user: User = Depends(get_current_active_user),
                       use_case: CreateOrderUseCase = Depends(get_create_order_use_case)):
    origin = http_request.headers.get("origin") or settings.FRONTEND_URL
    actor_id = current_user.id
    try:
        output = await use_case.execute(CreateOrderInput(
            actor_id=actor_id, user_id=request.user_id, amount=request.amount,
            description=request.description,
            return_url=f"{origin}/dashboard/payment/success",
            cancel_url=f"{origin}/dashboard/payment/cancel",
        ))
    except DomainError as e:
        logger.warning(f"주문 생성 거부: user={actor_id} - {e}")
        raise to_http_exception(e)

    return OrderCreateResponse(success=True, data=OrderCreateData(
        order_id=output.order_id, order_code=output.order_code, checkout_url=output.checkout_url))


@router.post("/cancel", response_model=ResponseBase)
async def cancel_order(request: OrderCancelRequest,
                       current_user: User = Depends(get_current_active_user),
                       use_case: CancelOrderUseCase = Depends(get_cancel_order_use_case)):
    try:
        await use_case.execute(current_user.id, request.order_code)
    except OrderNotFoundError as e:
        # 소유자/상태 불일치와 미존재를 구분하지 않는다
        raise to_http_exception(e, detail="취소할 주문이 없거나 이미 처리되었습니다.",
                                status_code=status.HTTP_400_BAD_REQUEST)
    except DomainError as e:
        raise to_http_exception(e)
    return ResponseBase(success=True, message="주문이 취소되었습니다.")


@router.get("/history", response_model=OrderHistoryResponse)
async def get_order_history(current_user: User = Depends(get_current_active_user),
                            session: AsyncSession = Depends(get_session)):
    orders = await SqlAlchemyOrderRepository(session).list_by_user(current_user.id)
    items = [OrderHistoryItem(id=o.id, order_code=o.order_code, amount=o.amount,
                              description=o.description, status=o.status.value,
                              checkout_url=o.checkout_url, created_at=o.created_at,
                              updated_at=o.updated_at)
             for o in orders]
    return OrderHistoryResponse(success=True, items=items, total=len(items))
