"""
Player Search Service

club_players 테이블 이름 검색
- 대소문자 무시 부분 일치 (name 컬럼만)
- 최대 10건, 정렬 없음 (저장소 반환 순서 그대로)
"""

from typing import Any, Dict, List, Optional

from fastapi.concurrency import run_in_threadpool
from loguru import logger
from pydantic import ValidationError

from app.config import ClubSettings, get_settings
from app.errors import ServiceError, ServiceErrorKind
from .models import Player

PLAYER_COLUMNS = "id, name, email, dupr_rating"

# LIKE 패턴 특수문자
_LIKE_ESCAPES = {"\\": "\\\\", "%": "\\%", "_": "\\_"}


def escape_like(value: str) -> str:
    """LIKE 와일드카드를 리터럴로 취급하도록 이스케이프"""
    return "".join(_LIKE_ESCAPES.get(ch, ch) for ch in value)


def build_name_pattern(query: str) -> str:
    """부분 일치 ILIKE 패턴"""
    return f"%{escape_like(query)}%"


class PlayerService:
    """선수 검색 서비스"""

    def __init__(self, client=None, settings: Optional[ClubSettings] = None):
        self._client = client
        self.settings = settings or get_settings()

    @property
    def supabase(self):
        if self._client is None:
            from database.supabase_client import get_supabase_client
            self._client = get_supabase_client()
        return self._client

    def validate_query(self, query: Optional[str]) -> str:
        """검색어 검증 - 비어 있으면 전체 일치"""
        if query is None:
            return ""
        if not isinstance(query, str):
            raise ServiceError(ServiceErrorKind.BAD_QUERY, "Search query must be a string")
        if len(query) > self.settings.SEARCH_QUERY_MAX_LENGTH:
            raise ServiceError(
                ServiceErrorKind.BAD_QUERY,
                f"Search query must be at most {self.settings.SEARCH_QUERY_MAX_LENGTH} characters"
            )
        if "\x00" in query:
            raise ServiceError(ServiceErrorKind.BAD_QUERY, "Search query contains invalid characters")
        return query

    async def search(self, query: Optional[str]) -> List[Player]:
        """
        이름으로 선수 검색

        Args:
            query: 검색어 (빈 문자열이면 전체)

        Returns:
            최대 10명의 선수 (저장소 순서)

        Raises:
            ServiceError: 잘못된 검색어 또는 저장소 오류
        """
        query = self.validate_query(query)
        pattern = build_name_pattern(query)

        try:
            # supabase 클라이언트는 동기 호출이므로 스레드풀에서 실행
            response = await run_in_threadpool(self._execute_search, pattern)
        except Exception as e:
            logger.error(f"선수 검색 오류 (query={query!r}): {e}")
            raise ServiceError(
                ServiceErrorKind.STORE_UNAVAILABLE,
                "Player store unavailable"
            ) from e

        return self._to_players(response.data or [], query)

    def _execute_search(self, pattern: str):
        return self.supabase.table(self.settings.PLAYERS_TABLE).select(
            PLAYER_COLUMNS
        ).ilike("name", pattern).limit(self.settings.search_limit).execute()

    def _to_players(self, rows: List[Dict[str, Any]], query: str) -> List[Player]:
        """행 → Player 변환 (이름/레이팅 없는 행 제외)"""
        needle = query.lower()
        players = []
        for row in rows[:self.settings.search_limit]:
            if row.get("name") is None or row.get("dupr_rating") is None:
                logger.warning(f"불완전한 선수 행 제외: id={row.get('id')}")
                continue
            # PostgREST는 패턴의 * 를 와일드카드로 해석함
            if needle not in str(row["name"]).lower():
                continue
            try:
                players.append(Player.model_validate(row))
            except ValidationError as e:
                logger.warning(f"선수 행 변환 실패: id={row.get('id')} - {e}")
        return players


# 싱글톤 서비스 인스턴스
player_service = PlayerService()
