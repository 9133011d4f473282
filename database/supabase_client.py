"""
Supabase 데이터베이스 클라이언트
"""
from typing import Optional

from loguru import logger
from supabase import Client, create_client

from app.config import get_settings


# 싱글톤 클라이언트
_supabase_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Supabase 클라이언트 인스턴스 반환 (싱글톤)
    커넥션 관리는 supabase 클라이언트에 위임
    """
    global _supabase_client
    if _supabase_client is None:
        settings = get_settings()
        if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
            raise ValueError("SUPABASE_URL과 SUPABASE_KEY 환경변수를 설정해주세요")
        _supabase_client = create_client(
            settings.SUPABASE_URL,
            settings.SUPABASE_KEY
        )
        logger.info("Supabase 클라이언트 생성 완료")
    return _supabase_client


def reset_supabase_client() -> None:
    """싱글톤 초기화 (테스트/재설정용)"""
    global _supabase_client
    _supabase_client = None
