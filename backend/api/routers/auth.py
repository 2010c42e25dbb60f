"""인증 라우터"""
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from config import settings
from infrastructure.persistence.database import get_session
from infrastructure.persistence.models.user import User
from infrastructure.persistence.repositories import SqlAlchemyAccountRepository
from domain.enums import UserRole
from domain.exceptions import DomainError, EmailAlreadyExistsError
from api.errors import to_http_exception
from api.schemas.common import ResponseBase
from api.schemas.auth import (
    UserSignupRequest, UserLoginRequest, TokenRefreshRequest, TokenResponse, UserResponse,
)
from api.dependencies import get_current_active_user, get_login_use_case
from application.use_cases.login import LoginUseCase, LoginInput
from infrastructure.auth.password_service import hash_password
from infrastructure.auth.jwt_service import create_access_token, create_refresh_token, decode_token

router = APIRouter(prefix="/api/v1/auth", tags=["인증"])


@router.post("/signup", response_model=ResponseBase, status_code=status.HTTP_201_CREATED)
async def signup(request: UserSignupRequest, session: AsyncSession = Depends(get_session)):
    result = await session.execute(select(User).where(User.email == request.email))
    if result.scalar_one_or_none():
        raise to_http_exception(EmailAlreadyExistsError(request.email))

    user = User(email=request.email, password_hash=hash_password(request.password),
                username=request.username or "", phone=request.phone or "", role=UserRole.USER)
    session.add(user)
    await session.flush()
    logger.info(f"새 사용자 가입: {user.email}")
    return ResponseBase(success=True, message="회원가입이 완료되었습니다.")


@router.post("/signin", response_model=TokenResponse)
async def signin(request: UserLoginRequest, use_case: LoginUseCase = Depends(get_login_use_case)):
    try:
        output = await use_case.execute(LoginInput(email=request.email, password=request.password))
    except DomainError as e:
        raise to_http_exception(e)

    access_token = create_access_token({"sub": output.user_id})
    refresh_token = create_refresh_token({"sub": output.user_id})
    logger.info(f"사용자 로그인: {output.email}")
    return TokenResponse(access_token=access_token, refresh_token=refresh_token,
                         expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60)


@router.post("/refresh", response_model=TokenResponse)
async def refresh(request: TokenRefreshRequest, session: AsyncSession = Depends(get_session)):
    """리프레시 토큰으로 토큰 재발급"""
    invalid_token = HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
                                  detail="유효하지 않은 리프레시 토큰입니다.")
    payload = decode_token(request.refresh_token)
    if payload is None or payload.get("type") != "refresh":
        raise invalid_token
    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise invalid_token

    account = await SqlAlchemyAccountRepository(session).get_by_id(user_id)
    if account is None or not account.is_active:
        raise invalid_token

    return TokenResponse(access_token=create_access_token({"sub": account.id}),
                         refresh_token=create_refresh_token({"sub": account.id}),
                         expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60)


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: User = Depends(get_current_active_user)):
    vip_expire_at = current_user.vip_expire_at
    return UserResponse(
        id=current_user.id, email=current_user.email, username=current_user.username,
        phone=current_user.phone, role=current_user.role.value,
        vip_expire_at=vip_expire_at,
        is_vip=vip_expire_at is not None and vip_expire_at > datetime.utcnow(),
        created_at=current_user.created_at)
