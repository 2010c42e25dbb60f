"""도메인 예외"""


class DomainError(Exception):
    """도메인 레이어 기본 예외"""
    pass


class InvalidParametersError(DomainError):
    def __init__(self, detail: str = "요청 파라미터가 올바르지 않습니다."):
        super().__init__(detail)


class AccountNotFoundError(DomainError):
    def __init__(self):
        super().__init__("사용자를 찾을 수 없습니다.")


class AccountMismatchError(DomainError):
    def __init__(self):
        super().__init__("다른 사용자의 주문은 생성할 수 없습니다.")


class AlreadyEntitledError(DomainError):
    def __init__(self):
        super().__init__("이미 VIP 구독이 활성화되어 있습니다.")


class OrderNotFoundError(DomainError):
    def __init__(self, order_code: int):
        self.order_code = order_code
        super().__init__(f"주문을 찾을 수 없습니다: {order_code}")


class AlreadyProcessedError(DomainError):
    def __init__(self, order_code: int, status: str):
        self.order_code = order_code
        self.status = status
        super().__init__(f"이미 처리된 주문입니다: {order_code} ({status})")


class OrderCodeConflictError(DomainError):
    """주문 코드 유니크 제약 위반 — 생성 시 재시도 대상"""

    def __init__(self, order_code: int):
        self.order_code = order_code
        super().__init__(f"주문 코드 중복: {order_code}")


class OrderCodeUnavailableError(DomainError):
    def __init__(self, attempts: int):
        super().__init__(f"주문 코드를 발급하지 못했습니다 ({attempts}회 시도).")


class GatewayError(DomainError):
    def __init__(self, detail: str):
        super().__init__(f"결제 링크 생성 실패: {detail}")


class InvalidCredentialsError(DomainError):
    def __init__(self):
        super().__init__("이메일 또는 비밀번호가 올바르지 않습니다.")


class EmailAlreadyExistsError(DomainError):
    def __init__(self, email: str):
        super().__init__(f"이미 등록된 이메일입니다: {email}")
