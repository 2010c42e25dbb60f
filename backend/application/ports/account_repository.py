"""계정 Repository 인터페이스"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from domain.entities.account import AccountEntity


class AccountRepository(ABC):
    @abstractmethod
    async def get_by_id(self, account_id: int) -> Optional[AccountEntity]: ...
    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[AccountEntity]: ...
    @abstractmethod
    async def get_by_order_owner(self, order_code: int) -> Optional[AccountEntity]: ...
    @abstractmethod
    async def set_vip_expiry(self, account_id: int, expire_at: datetime) -> bool: ...
    @abstractmethod
    async def update_last_login(self, account_id: int) -> None: ...
