"""
Player Search Module

클럽 선수 명단 이름 검색
"""

from .models import Player
from .router import router as players_router
from .service import PlayerService, player_service, escape_like

__all__ = ["Player", "PlayerService", "player_service", "players_router", "escape_like"]
