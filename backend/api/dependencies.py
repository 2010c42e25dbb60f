"""
FastAPI 의존성 주입 (Depends)

모든 라우터에서 사용하는 공통 의존성과 유스케이스 조립을 정의한다.
"""
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from config import settings
from infrastructure.persistence.database import get_session
from infrastructure.persistence.models.user import User
from infrastructure.persistence.repositories import SqlAlchemyAccountRepository, SqlAlchemyOrderRepository
from infrastructure.auth.jwt_service import decode_token
from infrastructure.auth.password_service import verify_password
from infrastructure.payment.payos_gateway import PayOSGateway
from application.ports.payment_gateway import PaymentGatewayPort
from application.use_cases.create_order import CreateOrderUseCase, random_order_code
from application.use_cases.settle_payment import SettlePaymentUseCase
from application.use_cases.cancel_order import CancelOrderUseCase
from application.use_cases.login import LoginUseCase

security = HTTPBearer()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    session: AsyncSession = Depends(get_session)
) -> User:
    """현재 인증된 사용자 반환"""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="유효하지 않은 인증 정보입니다.",
        headers={"WWW-Authenticate": "Bearer"},
    )

    token = credentials.credentials
    payload = decode_token(token)

    if payload is None or payload.get("type") != "access":
        raise credentials_exception

    user_id_raw = payload.get("sub")
    if user_id_raw is None:
        raise credentials_exception
    try:
        user_id = int(user_id_raw)
    except (ValueError, TypeError):
        raise credentials_exception

    result = await session.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()

    if user is None:
        raise credentials_exception
    return user


async def get_current_active_user(
    current_user: User = Depends(get_current_user)
) -> User:
    """활성 사용자 확인"""
    if not current_user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN,
                            detail="비활성화된 계정입니다.")
    return current_user


def get_payment_gateway() -> PaymentGatewayPort:
    return PayOSGateway()


def get_create_order_use_case(
    session: AsyncSession = Depends(get_session),
    gateway: PaymentGatewayPort = Depends(get_payment_gateway),
) -> CreateOrderUseCase:
    return CreateOrderUseCase(
        account_repo=SqlAlchemyAccountRepository(session),
        order_repo=SqlAlchemyOrderRepository(session),
        gateway=gateway,
        code_generator=random_order_code(settings.ORDER_CODE_MAX),
        max_attempts=settings.ORDER_CODE_MAX_ATTEMPTS,
    )


def get_settle_payment_use_case(session: AsyncSession = Depends(get_session)) -> SettlePaymentUseCase:
    return SettlePaymentUseCase(
        order_repo=SqlAlchemyOrderRepository(session),
        account_repo=SqlAlchemyAccountRepository(session),
        vip_duration_days=settings.VIP_DURATION_DAYS,
    )


def get_cancel_order_use_case(session: AsyncSession = Depends(get_session)) -> CancelOrderUseCase:
    return CancelOrderUseCase(SqlAlchemyOrderRepository(session))


def get_login_use_case(session: AsyncSession = Depends(get_session)) -> LoginUseCase:
    return LoginUseCase(SqlAlchemyAccountRepository(session), verify_password)
