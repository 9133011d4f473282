"""
Club Search Client

로그인 게이트 + 실시간 선수 검색 클라이언트
"""
from .api import ClubApiClient
from .app import ClubApp
from .state import AppState, AuthStatus, MIN_QUERY_LENGTH
from .storage import TokenStorage, MemoryTokenStorage

__all__ = [
    "ClubApiClient",
    "ClubApp",
    "AppState",
    "AuthStatus",
    "MIN_QUERY_LENGTH",
    "TokenStorage",
    "MemoryTokenStorage",
]
