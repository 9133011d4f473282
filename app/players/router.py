"""
Player Search API Router

GET /api/players?search=<string>
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.auth.router import require_session
from app.errors import ErrorResponse
from .models import Player
from .service import PlayerService, player_service

router = APIRouter(prefix="/api", tags=["Players"])


def get_player_service() -> PlayerService:
    """선수 서비스 의존성"""
    return player_service


@router.get(
    "/players",
    response_model=List[Player],
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search_players(
    search: Optional[str] = Query(None, description="이름 검색어 (부분 일치)"),
    session: Optional[dict] = Depends(require_session),
    service: PlayerService = Depends(get_player_service),
):
    """
    선수 이름 검색

    대소문자 무시 부분 일치, 최대 10건.
    ServiceError는 앱 예외 핸들러에서 {"error": ...} 응답으로 변환됩니다.
    """
    return await service.search(search)
