"""주문 ORM 모델"""
from datetime import datetime
from sqlalchemy import Column, Integer, BigInteger, String, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from infrastructure.persistence.database import Base
from domain.enums import OrderStatus


class Order(Base):
    __tablename__ = "orders"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    order_code = Column(BigInteger, unique=True, index=True, nullable=False)
    amount = Column(Integer, nullable=False)
    description = Column(String(255), nullable=False)
    status = Column(Enum(OrderStatus), default=OrderStatus.PENDING, nullable=False)
    payment_link_id = Column(String(100), unique=True, nullable=False)
    checkout_url = Column(String(500), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
    user = relationship("User", back_populates="orders")

    def __repr__(self):
        return f"<Order {self.order_code} - {self.amount}đ {self.status}>"
