"""결제 게이트웨이 포트 인터페이스"""
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class PaymentLink:
    payment_link_id: str
    checkout_url: str


class PaymentGatewayPort(ABC):
    @abstractmethod
    async def create_payment_link(self, order_code: int, amount: int, description: str,
                                  return_url: str, cancel_url: str) -> PaymentLink:
        """결제 링크 생성. 실패/타임아웃 시 GatewayError"""
