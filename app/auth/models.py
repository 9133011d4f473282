"""
Auth Models - Pydantic 모델 정의
"""
from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    """로그인 요청"""
    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """토큰 응답 - 클라이언트에게는 불투명 문자열"""
    token: str
