"""
API 스키마 re-export

사용법:
  from api.schemas import OrderCreateRequest, UserResponse
"""
from api.schemas.common import ResponseBase
from api.schemas.auth import (
    UserSignupRequest, UserLoginRequest, TokenRefreshRequest, TokenResponse, UserResponse,
)
from api.schemas.order import (
    OrderCreateRequest, OrderCreateData, OrderCreateResponse, OrderCancelRequest,
    OrderHistoryItem, OrderHistoryResponse,
)
from api.schemas.payment import PaymentCallbackRequest
