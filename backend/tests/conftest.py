"""공용 테스트 픽스처"""
import os
import tempfile

# config 임포트 전에 설정
os.environ.setdefault("DB_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "music-vip-tests", "app.log"))

from contextlib import asynccontextmanager

import httpx
import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

from infrastructure.persistence.database import Base, get_session
from infrastructure.persistence.models import User, Order, UserRole, OrderStatus
from infrastructure.persistence.repositories import SqlAlchemyAccountRepository, SqlAlchemyOrderRepository
from infrastructure.auth.password_service import hash_password
from application.ports.payment_gateway import PaymentGatewayPort, PaymentLink
from domain.exceptions import GatewayError

PASSWORD = "secret123"
_PASSWORD_HASH = hash_password(PASSWORD)


class FakeGateway(PaymentGatewayPort):
    """payOS 대역 — 호출 기록, 실패 주입"""

    def __init__(self):
        self.calls = []
        self.fail = False

    async def create_payment_link(self, order_code, amount, description, return_url, cancel_url):
        self.calls.append({"order_code": order_code, "amount": amount, "description": description,
                           "return_url": return_url, "cancel_url": cancel_url})
        if self.fail:
            raise GatewayError("connection refused")
        link_id = f"plink-{order_code}-{len(self.calls)}"
        return PaymentLink(payment_link_id=link_id, checkout_url=f"https://pay.payos.vn/web/{link_id}")


@pytest.fixture
async def engine(tmp_path):
    # 동시성 테스트를 위해 세션마다 별도 커넥션을 쓰는 파일 DB
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def make_user(session_factory):
    async def _make(email="listener@example.com", vip_expire_at=None, is_active=True,
                    role=UserRole.USER) -> int:
        async with session_factory() as s:
            user = User(email=email, password_hash=_PASSWORD_HASH, username=email.split("@")[0],
                        role=role, vip_expire_at=vip_expire_at, is_active=is_active)
            s.add(user)
            await s.commit()
            return user.id
    return _make


@pytest.fixture
def make_order(session_factory):
    async def _make(user_id: int, order_code: int, status=OrderStatus.PENDING,
                    amount=50000, description="VIP") -> int:
        async with session_factory() as s:
            order = Order(user_id=user_id, order_code=order_code, amount=amount,
                          description=description, status=status,
                          payment_link_id=f"seed-{order_code}",
                          checkout_url=f"https://pay.payos.vn/web/seed-{order_code}")
            s.add(order)
            await s.commit()
            return order.id
    return _make


@pytest.fixture
def load_order(session_factory):
    async def _load(order_code: int):
        async with session_factory() as s:
            return await SqlAlchemyOrderRepository(s).get_by_code(order_code)
    return _load


@pytest.fixture
def load_account(session_factory):
    async def _load(account_id: int):
        async with session_factory() as s:
            return await SqlAlchemyAccountRepository(s).get_by_id(account_id)
    return _load


@pytest.fixture
def count_orders(session_factory):
    async def _count() -> int:
        async with session_factory() as s:
            return len((await s.execute(select(Order))).scalars().all())
    return _count


@pytest.fixture
async def client(session_factory, gateway):
    from main import app
    from api.dependencies import get_payment_gateway

    async def override_get_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def db_session_cm(session_factory):
    """스크립트용 get_db_session 대체"""
    @asynccontextmanager
    async def _cm():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
    return _cm