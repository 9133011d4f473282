"""
Auth Router - 로그인 및 세션 토큰
"""
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from jose import JWTError, jwt
from loguru import logger

from app.config import ClubSettings, get_settings
from app.errors import ErrorResponse
from .models import LoginRequest, TokenResponse

router = APIRouter(prefix="/api", tags=["auth"])


def create_access_token(
    data: dict,
    settings: ClubSettings,
    expires_delta: Optional[timedelta] = None
) -> str:
    """JWT 토큰 생성"""
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})
    return jwt.encode(
        to_encode,
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM
    )


def decode_access_token(token: str, settings: ClubSettings) -> Optional[dict]:
    """JWT 토큰 검증 - 실패 시 None"""
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM]
        )
    except JWTError:
        return None
    if not payload.get("sub"):
        return None
    return payload


def verify_credentials(email: str, password: str, settings: ClubSettings) -> bool:
    """관리자 계정 확인 (상수 시간 비교)"""
    email_ok = secrets.compare_digest(
        email.strip().lower().encode(), settings.ADMIN_EMAIL.strip().lower().encode()
    )
    password_ok = secrets.compare_digest(password.encode(), settings.ADMIN_PASSWORD.encode())
    return email_ok and password_ok


def get_bearer_token(request: Request) -> Optional[str]:
    """Authorization 헤더에서 Bearer 토큰 추출"""
    auth_header = request.headers.get("Authorization")
    if auth_header and auth_header.startswith("Bearer "):
        return auth_header.split(" ", 1)[1].strip() or None
    return None


async def require_session(
    request: Request,
    settings: ClubSettings = Depends(get_settings)
) -> Optional[dict]:
    """세션 토큰 필수 의존성 (REQUIRE_SEARCH_AUTH=False 이면 통과)"""
    if not settings.REQUIRE_SEARCH_AUTH:
        return None

    token = get_bearer_token(request)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Login required"
        )

    payload = decode_access_token(token, settings)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session expired or invalid"
        )
    return payload


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={401: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)
async def login(body: LoginRequest, settings: ClubSettings = Depends(get_settings)):
    """
    이메일/비밀번호 로그인

    성공 시 {token}, 실패 시 401 {error}
    """
    if not verify_credentials(body.email, body.password, settings):
        logger.warning(f"로그인 실패: {body.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )

    token = create_access_token({"sub": body.email.lower()}, settings)
    logger.info(f"로그인 성공: {body.email}")
    return TokenResponse(token=token)
