"""사용자(계정) ORM 모델"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Enum
from sqlalchemy.orm import relationship
from infrastructure.persistence.database import Base
from domain.enums import UserRole


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    username = Column(String(100), nullable=True, default="")
    phone = Column(String(20), nullable=True, default="")
    role = Column(Enum(UserRole), default=UserRole.USER, nullable=False)
    vip_expire_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    last_login_at = Column(DateTime, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    orders = relationship("Order", back_populates="user")

    def __repr__(self):
        return f"<User {self.email}>"
