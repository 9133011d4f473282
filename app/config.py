"""
Club Config - 서버 설정
"""
import os
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


# 검색 결과 상한 (페이지네이션 없음)
MAX_SEARCH_RESULTS = 10


class ClubSettings(BaseSettings):
    """클럽 서버 설정"""

    # Supabase (선수 테이블)
    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
    SUPABASE_KEY: str = os.getenv("SUPABASE_KEY", "")
    PLAYERS_TABLE: str = "club_players"

    # JWT
    JWT_SECRET_KEY: str = os.getenv("JWT_SECRET_KEY", "your-secret-key-change-in-production")
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24  # 24시간

    # 관리자 계정
    ADMIN_EMAIL: str = os.getenv("ADMIN_EMAIL", "admin@club.com")
    ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD", "password123")

    # 검색
    SEARCH_RESULT_LIMIT: int = MAX_SEARCH_RESULTS
    SEARCH_QUERY_MAX_LENGTH: int = 100
    REQUIRE_SEARCH_AUTH: bool = True

    # 서버
    CORS_ORIGINS: List[str] = ["*"]
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def search_limit(self) -> int:
        """설정값과 무관하게 10건을 넘지 않음"""
        return max(1, min(self.SEARCH_RESULT_LIMIT, MAX_SEARCH_RESULTS))


@lru_cache()
def get_settings() -> ClubSettings:
    return ClubSettings()
