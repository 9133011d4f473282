"""
Auth Module - 로그인 / 세션 토큰
"""
from .router import (
    router as auth_router,
    create_access_token,
    decode_access_token,
    require_session,
)
from .models import LoginRequest, TokenResponse

__all__ = [
    "auth_router",
    "create_access_token",
    "decode_access_token",
    "require_session",
    "LoginRequest",
    "TokenResponse",
]
