"""
클라이언트 애플리케이션 상태

토큰, 검색어, 결과, 로딩 여부를 하나의 구조체로 관리
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set

from app.players.models import Player

# 이 길이 미만이면 검색하지 않음
MIN_QUERY_LENGTH = 2


class AuthStatus(str, Enum):
    """로그인 상태"""
    LOGGED_OUT = "logged_out"
    LOGGED_IN = "logged_in"


@dataclass
class AppState:
    """UI 상태"""
    token: Optional[str] = None
    email: str = ""
    auth_error: str = ""

    query: str = ""
    players: List[Player] = field(default_factory=list)
    loading: bool = False

    # 마지막으로 보낸 검색 번호 / 진행 중인 검색 번호들
    search_generation: int = 0
    in_flight: Set[int] = field(default_factory=set)

    @property
    def status(self) -> AuthStatus:
        return AuthStatus.LOGGED_IN if self.token else AuthStatus.LOGGED_OUT

    @property
    def is_logged_in(self) -> bool:
        return self.status == AuthStatus.LOGGED_IN

    @property
    def show_empty_state(self) -> bool:
        """검색 완료 후 결과 0건"""
        return (
            len(self.query) >= MIN_QUERY_LENGTH
            and not self.loading
            and not self.players
        )

    # ==================== 상태 전이 ====================

    def logged_in(self, token: str) -> None:
        self.token = token
        self.auth_error = ""

    def login_failed(self, message: str) -> None:
        self.auth_error = message

    def reset_query(self) -> None:
        """검색 상태 초기화 - 진행 중인 응답은 이후 무시됨"""
        self.query = ""
        self.clear_results()

    def clear_results(self) -> None:
        """짧은 검색어 - 결과 비우고 진행 중인 응답 무효화"""
        self.players = []
        self.loading = False
        self.in_flight.clear()
        self.search_generation += 1

    def logged_out(self) -> None:
        self.token = None
        self.reset_query()

    def begin_search(self) -> int:
        """검색 시작 - 이 요청의 번호 반환"""
        self.search_generation += 1
        self.in_flight.add(self.search_generation)
        self.loading = True
        return self.search_generation

    def is_latest(self, generation: int) -> bool:
        return generation == self.search_generation

    def settle_search(self, generation: int) -> None:
        """요청 종료 (성공/실패 무관)"""
        self.in_flight.discard(generation)
        self.loading = bool(self.in_flight)
