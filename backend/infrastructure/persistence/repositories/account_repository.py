"""계정 Repository — SQLAlchemy 구현"""
from datetime import datetime
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from application.ports.account_repository import AccountRepository
from domain.entities.account import AccountEntity
from infrastructure.persistence.models.order import Order
from infrastructure.persistence.models.user import User


def to_account_entity(user: User) -> AccountEntity:
    return AccountEntity(
        id=user.id, email=user.email, role=user.role.value, is_active=user.is_active,
        username=user.username, password_hash=user.password_hash,
        vip_expire_at=user.vip_expire_at,
    )


class SqlAlchemyAccountRepository(AccountRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def _one(self, stmt) -> Optional[AccountEntity]:
        result = await self._session.execute(stmt.execution_options(populate_existing=True))
        user = result.scalar_one_or_none()
        return to_account_entity(user) if user else None

    async def get_by_id(self, account_id: int) -> Optional[AccountEntity]:
        return await self._one(select(User).where(User.id == account_id))

    async def get_by_email(self, email: str) -> Optional[AccountEntity]:
        return await self._one(select(User).where(User.email == email))

    async def get_by_order_owner(self, order_code: int) -> Optional[AccountEntity]:
        return await self._one(
            select(User).join(Order, Order.user_id == User.id).where(Order.order_code == order_code))

    async def set_vip_expiry(self, account_id: int, expire_at: datetime) -> bool:
        result = await self._session.execute(
            update(User).where(User.id == account_id).values(vip_expire_at=expire_at)
            .execution_options(synchronize_session=False))
        return result.rowcount == 1

    async def update_last_login(self, account_id: int) -> None:
        await self._session.execute(
            update(User).where(User.id == account_id).values(last_login_at=datetime.utcnow())
            .execution_options(synchronize_session=False))
