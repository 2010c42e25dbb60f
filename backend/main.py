"""
음악 스트리밍 VIP 구독 서비스 - FastAPI 메인 애플리케이션
"""
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from config import settings
from infrastructure.persistence.database import init_db
import infrastructure.persistence.models  # noqa: F401  테이블 메타데이터 등록
from api.routers import auth, health, order, payment

# 로깅 설정
os.makedirs(os.path.dirname(settings.LOG_FILE) or ".", exist_ok=True)
logger.add(
    settings.LOG_FILE,
    rotation="10 MB",
    retention="30 days",
    level=settings.LOG_LEVEL
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 수명 주기 관리"""
    logger.info("서비스 시작...")
    await init_db()
    logger.info("데이터베이스 초기화 완료")

    yield

    logger.info("서비스 종료...")


# FastAPI 앱 생성
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="음악 스트리밍 VIP 구독 - 주문 생성, payOS 결제 결과 반영, VIP 권한 부여",
    lifespan=lifespan
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(order.router)
app.include_router(payment.router)
app.include_router(health.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
