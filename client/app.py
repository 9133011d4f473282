"""
Club 클라이언트 컨트롤러

로그인 게이트 + 실시간 선수 검색
"""
from typing import Optional

from loguru import logger

from app.errors import AuthError, AuthErrorKind, ServiceError
from .api import ClubApiClient
from .state import MIN_QUERY_LENGTH, AppState


class ClubApp:
    """
    클라이언트 애플리케이션

    상태는 AppState 하나에 모으고, 모든 네트워크 오류는 여기서 상태로 변환한다.
    """

    def __init__(self, api: ClubApiClient, storage, state: Optional[AppState] = None):
        self.api = api
        self.storage = storage
        self.state = state or AppState()

    def start(self) -> AppState:
        """
        앱 시작 - 저장된 토큰이 있으면 바로 로그인 상태

        토큰은 서버에 재검증하지 않는다. 이후 검색이 401을 받으면 로그아웃된다.
        """
        token = self.storage.load()
        if token:
            self.state.logged_in(token)
            logger.info("저장된 세션으로 시작")
        else:
            self.state.logged_out()
        return self.state

    async def login(self, email: str, password: str) -> bool:
        """로그인 - 성공 여부 반환"""
        self.state.email = email
        self.state.auth_error = ""
        try:
            token = await self.api.login(email, password)
        except AuthError as e:
            self.state.login_failed(e.message)
            if e.kind == AuthErrorKind.NETWORK_UNREACHABLE:
                logger.warning(f"로그인 서버 연결 실패: {email}")
            return False

        self.storage.save(token)
        self.state.logged_in(token)
        logger.info(f"로그인 완료: {email}")
        return True

    def logout(self) -> None:
        """로그아웃 - 토큰과 검색 상태 모두 초기화"""
        self.storage.clear()
        self.state.logged_out()

    async def search_players(self, query: str) -> None:
        """
        검색어 변경 처리

        2자 미만이면 요청 없이 결과를 비운다. 응답은 가장 마지막에 보낸 검색의 것만 반영한다.
        """
        if not self.state.is_logged_in:
            logger.debug("로그아웃 상태, 검색 무시")
            return

        self.state.query = query
        if len(query) < MIN_QUERY_LENGTH:
            self.state.clear_results()
            return

        token = self.state.token
        generation = self.state.begin_search()
        try:
            players = await self.api.search_players(query, token)
        except AuthError as e:
            # 요청 이후 다시 로그인했다면 새 세션은 유지
            if self.state.token == token:
                logger.warning(f"세션 만료, 로그아웃: {e.message}")
                self.logout()
            else:
                logger.debug(f"이전 세션의 401 무시: {query!r}")
            return
        except ServiceError as e:
            logger.warning(f"Search failed: {e.kind.value} - {e.message}")
            if self.state.is_latest(generation):
                self.state.players = []
        else:
            if self.state.is_latest(generation):
                self.state.players = players
            else:
                logger.debug(f"이전 검색 응답 무시: {query!r}")
        finally:
            self.state.settle_search(generation)
