"""
터미널 렌더링
"""
from typing import List

from app.players.models import Player
from .state import AppState

APP_TITLE = "Pickleball Organiser"
DEMO_HINT = "Demo User: admin@club.com / password123"
LOADING_TEXT = "Searching..."


def empty_state_message(query: str) -> str:
    return f'No players found matching "{query}"'


def render_player(player: Player) -> str:
    """선수 카드 한 줄"""
    email = player.email or ""
    return f"{player.name:<30} {email:<32} DUPR {player.rating_display}"


def render_login(state: AppState) -> List[str]:
    """로그인 화면"""
    lines = [APP_TITLE, "Please sign in to manage sessions"]
    if state.auth_error:
        lines.append(f"! {state.auth_error}")
    lines.append(DEMO_HINT)
    return lines


def render_results(state: AppState) -> List[str]:
    """검색 결과 영역"""
    lines = []
    if state.loading:
        lines.append(LOADING_TEXT)
    if state.players:
        # id 기준 중복 없음
        lines.extend(render_player(p) for p in state.players)
    elif state.show_empty_state:
        lines.append(empty_state_message(state.query))
    return lines


def render(state: AppState) -> str:
    """현재 상태 전체 화면"""
    if not state.is_logged_in:
        return "\n".join(render_login(state))
    return "\n".join(render_results(state))
