"""헬스 체크 라우터"""
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from config import settings
from infrastructure.persistence.database import get_session

router = APIRouter(tags=["시스템"])


@router.get("/health")
async def health_check(session: AsyncSession = Depends(get_session)):
    await session.execute(text("SELECT 1"))
    return {"status": "healthy", "service": settings.APP_NAME, "version": settings.APP_VERSION, "database": "ok"}


@router.get("/")
async def root():
    return {"service": settings.APP_NAME, "version": settings.APP_VERSION, "docs": "/docs", "health": "/health"}
