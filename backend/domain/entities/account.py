"""계정 도메인 엔티티"""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional


@dataclass
class AccountEntity:
    """Account 도메인 엔티티 — VIP 권한 판단용"""
    id: int
    email: str
    role: str  # "user" | "admin"
    is_active: bool = True
    username: Optional[str] = None
    password_hash: str = ""
    vip_expire_at: Optional[datetime] = None

    def is_vip(self, now: datetime) -> bool:
        """VIP 여부는 만료 시각과 현재 시각 비교로만 결정한다"""
        return self.vip_expire_at is not None and self.vip_expire_at > now

    @staticmethod
    def vip_expiry_from(now: datetime, days: int) -> datetime:
        """결제 완료 시점부터 고정 기간 부여 (남은 기간에 누적하지 않음)"""
        return now + timedelta(days=days)
