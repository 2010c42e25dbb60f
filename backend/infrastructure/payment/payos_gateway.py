"""payOS API 클라이언트"""
import hashlib
import hmac
from typing import Dict, Any, Optional
import httpx
from loguru import logger
from config import settings
from application.ports.payment_gateway import PaymentGatewayPort, PaymentLink
from domain.exceptions import GatewayError


class PayOSClient:
    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.client_id = settings.PAYOS_CLIENT_ID
        self.api_key = settings.PAYOS_API_KEY
        self.checksum_key = settings.PAYOS_CHECKSUM_KEY
        self.api_url = settings.PAYOS_API_URL
        self.timeout = settings.PAYOS_TIMEOUT
        self._transport = transport

    def _get_headers(self) -> Dict[str, str]:
        return {"x-client-id": self.client_id, "x-api-key": self.api_key, "Content-Type": "application/json"}

    def sign(self, data: Dict[str, Any]) -> str:
        """키 알파벳 순 key=value&... 문자열의 HMAC-SHA256"""
        message = "&".join(f"{key}={data[key]}" for key in sorted(data))
        return hmac.new(self.checksum_key.encode(), message.encode(), hashlib.sha256).hexdigest()

    async def create_payment_request(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.api_url}/v2/payment-requests"
        signed_fields = {k: payload[k] for k in ("amount", "cancelUrl", "description", "orderCode", "returnUrl")}
        body = {**payload, "signature": self.sign(signed_fields)}
        async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
            try:
                response = await client.post(url, headers=self._get_headers(), json=body)
                response.raise_for_status()
                result = response.json()
            except httpx.TimeoutException:
                logger.error(f"payOS 결제 링크 생성 타임아웃: orderCode={payload['orderCode']}")
                raise GatewayError("결제 서버 응답 시간 초과")
            except httpx.HTTPStatusError as e:
                logger.error(f"payOS 결제 링크 생성 실패: {e.response.text}")
                raise GatewayError(f"HTTP {e.response.status_code}")
            except (httpx.HTTPError, ValueError) as e:
                logger.error(f"payOS 요청 오류: {e}")
                raise GatewayError(str(e))

        if result.get("code") != "00" or not result.get("data"):
            logger.error(f"payOS 오류 응답: {result.get('code')} {result.get('desc')}")
            raise GatewayError(f"{result.get('code')} {result.get('desc')}")
        return result["data"]


class PayOSGateway(PaymentGatewayPort):
    def __init__(self, client: Optional[PayOSClient] = None):
        self.payos = client or PayOSClient()

    async def create_payment_link(self, order_code: int, amount: int, description: str,
                                  return_url: str, cancel_url: str) -> PaymentLink:
        payload = {
            "orderCode": order_code,
            "amount": amount,
            "description": description,
            "items": [{"name": settings.VIP_ITEM_NAME, "quantity": 1, "price": amount}],
            "cancelUrl": cancel_url,
            "returnUrl": return_url,
        }
        data = await self.payos.create_payment_request(payload)
        try:
            return PaymentLink(payment_link_id=data["paymentLinkId"], checkout_url=data["checkoutUrl"])
        except KeyError as e:
            raise GatewayError(f"응답에 {e} 필드가 없습니다")
