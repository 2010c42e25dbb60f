"""
음악 스트리밍 VIP 구독 서비스 설정
"""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 앱 기본 설정
    APP_NAME: str = "음악 스트리밍 VIP 서비스"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = True

    # 서버 설정
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # 데이터베이스 설정
    DB_URL: str = "sqlite+aiosqlite:///./data/music.db"

    # JWT 설정
    SECRET_KEY: str = "your-super-secret-key-change-in-production-32chars"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7  # 7일
    REFRESH_TOKEN_EXPIRE_DAYS: int = 30

    # payOS 설정
    PAYOS_CLIENT_ID: str = "payos-client-id-change-in-production"
    PAYOS_API_KEY: str = "payos-api-key-change-in-production"
    PAYOS_CHECKSUM_KEY: str = "payos-checksum-key-change-in-production"
    PAYOS_API_URL: str = "https://api-merchant.payos.vn"
    PAYOS_TIMEOUT: float = 15.0  # 초

    # 결제 완료/취소 후 돌아갈 프론트엔드 주소 (Origin 헤더가 없을 때)
    FRONTEND_URL: str = "http://localhost:3000"

    # VIP 설정
    VIP_DURATION_DAYS: int = 30
    VIP_ITEM_NAME: str = "Nâng cấp gói VIP"

    # 주문 코드 설정
    ORDER_CODE_MAX: int = 999_999
    ORDER_CODE_MAX_ATTEMPTS: int = 5

    # CORS 설정
    CORS_ORIGINS: list = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # 로깅 설정
    LOG_LEVEL: str = "DEBUG"
    LOG_FILE: str = "./logs/app.log"

    class Config:
        env_file = ".env.backend"  # 백엔드 전용 환경 변수 파일
        case_sensitive = True
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """설정 싱글톤 반환"""
    return Settings()


# 설정 인스턴스
settings = get_settings()
