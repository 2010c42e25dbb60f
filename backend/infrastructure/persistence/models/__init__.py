"""
ORM 모델 — 모든 모델을 re-export
"""
from infrastructure.persistence.database import Base
from infrastructure.persistence.models.user import User
from infrastructure.persistence.models.order import Order
from domain.enums import UserRole, OrderStatus
