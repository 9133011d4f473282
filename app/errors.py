"""
Error taxonomy - 서버/클라이언트 공통 오류
"""
from enum import Enum

from pydantic import BaseModel


class ServiceErrorKind(str, Enum):
    """검색 서비스 오류 유형"""
    STORE_UNAVAILABLE = "store_unavailable"  # 선수 테이블 접근 불가
    BAD_QUERY = "bad_query"                  # 잘못된 검색어


class AuthErrorKind(str, Enum):
    """로그인 오류 유형"""
    INVALID_CREDENTIALS = "invalid_credentials"
    NETWORK_UNREACHABLE = "network_unreachable"


class ServiceError(Exception):
    """검색 서비스 오류"""

    def __init__(self, kind: ServiceErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        if self.kind == ServiceErrorKind.BAD_QUERY:
            return 400
        return 500


class AuthError(Exception):
    """로그인 오류"""

    def __init__(self, kind: AuthErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


class ErrorResponse(BaseModel):
    """오류 응답 본문 {"error": ...}"""
    error: str

