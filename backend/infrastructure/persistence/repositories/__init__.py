"""SQLAlchemy Repository 구현"""
from infrastructure.persistence.repositories.account_repository import SqlAlchemyAccountRepository
from infrastructure.persistence.repositories.order_repository import SqlAlchemyOrderRepository
