"""
데이터베이스 연결 및 세션 관리

사용법: from infrastructure.persistence.database import Base, get_session
"""
import os
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from config import settings


def _engine_options(db_url: str) -> dict:
    """SQLite는 커넥션 풀 옵션을 받지 않는다"""
    if db_url.startswith("sqlite"):
        return {}
    return {"pool_size": 5, "max_overflow": 10}


if settings.DB_URL.startswith("sqlite") and ":memory:" not in settings.DB_URL:
    os.makedirs("./data", exist_ok=True)

engine = create_async_engine(
    settings.DB_URL,
    echo=settings.DEBUG,
    future=True,
    **_engine_options(settings.DB_URL),
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False
)

Base = declarative_base()


async def init_db():
    """데이터베이스 초기화"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """비동기 세션 의존성 — 요청 단위 트랜잭션"""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


@asynccontextmanager
async def get_db_session():
    """컨텍스트 매니저 형태의 세션"""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
