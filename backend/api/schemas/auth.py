"""인증 관련 스키마"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator


class UserSignupRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., max_length=100)
    confirm_password: str = Field(..., alias="confirmPassword")
    username: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=20)

    class Config:
        populate_by_name = True

    @field_validator('password')
    @classmethod
    def validate_password(cls, v):
        if len(v) < 6:
            raise ValueError('비밀번호는 최소 6자 이상이어야 합니다.')
        return v

    @model_validator(mode='after')
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError('비밀번호 확인이 일치하지 않습니다.')
        return self


class UserLoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenRefreshRequest(BaseModel):
    refresh_token: str


class TokenResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int


class UserResponse(BaseModel):
    id: int
    email: str
    username: Optional[str]
    phone: Optional[str]
    role: str
    vip_expire_at: Optional[datetime] = Field(None, alias="vipExpireAt")
    is_vip: bool = Field(False, alias="isVip")
    created_at: datetime = Field(..., alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True
