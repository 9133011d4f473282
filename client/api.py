"""
Club API HTTP 클라이언트
"""
from typing import List, Optional

import httpx
from loguru import logger
from pydantic import ValidationError

from app.errors import AuthError, AuthErrorKind, ServiceError, ServiceErrorKind
from app.players.models import Player

CONNECT_ERROR_MESSAGE = "Could not connect to server."
LOGIN_FAILED_MESSAGE = "Login failed"


def _error_message(response: httpx.Response, default: str) -> str:
    """{"error": ...} 본문에서 메시지 추출"""
    try:
        data = response.json()
    except ValueError:
        return default
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return default


class ClubApiClient:
    """클럽 서버 API 클라이언트"""

    def __init__(
        self,
        base_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._transport = transport
        # 타임아웃 없음이 기본 (응답이 올 때까지 로딩 유지)
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                transport=self._transport,
                timeout=self._timeout,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def login(self, email: str, password: str) -> str:
        """
        로그인 후 세션 토큰 반환

        Raises:
            AuthError: 잘못된 계정 정보 또는 서버 연결 실패
        """
        client = self._ensure_client()
        try:
            response = await client.post("/api/login", json={"email": email, "password": password})
        except httpx.RequestError as e:
            logger.warning(f"로그인 요청 실패: {e}")
            raise AuthError(AuthErrorKind.NETWORK_UNREACHABLE, CONNECT_ERROR_MESSAGE) from e

        if response.is_success:
            try:
                token = response.json().get("token")
            except (ValueError, AttributeError) as e:
                raise AuthError(AuthErrorKind.NETWORK_UNREACHABLE, CONNECT_ERROR_MESSAGE) from e
            if not token:
                raise AuthError(AuthErrorKind.NETWORK_UNREACHABLE, CONNECT_ERROR_MESSAGE)
            return token

        raise AuthError(
            AuthErrorKind.INVALID_CREDENTIALS,
            _error_message(response, LOGIN_FAILED_MESSAGE)
        )

    async def search_players(self, query: str, token: Optional[str] = None) -> List[Player]:
        """
        선수 검색

        Raises:
            AuthError: 세션 만료 (401)
            ServiceError: 서버/저장소 오류, 잘못된 검색어
        """
        client = self._ensure_client()
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        try:
            response = await client.get("/api/players", params={"search": query}, headers=headers)
        except httpx.RequestError as e:
            raise ServiceError(ServiceErrorKind.STORE_UNAVAILABLE, str(e)) from e

        if response.status_code == 401:
            raise AuthError(
                AuthErrorKind.INVALID_CREDENTIALS,
                _error_message(response, "Session expired")
            )
        if response.status_code == 400:
            raise ServiceError(ServiceErrorKind.BAD_QUERY, _error_message(response, "Bad query"))
        if not response.is_success:
            raise ServiceError(
                ServiceErrorKind.STORE_UNAVAILABLE,
                _error_message(response, f"HTTP {response.status_code}")
            )

        try:
            rows = response.json()
            return [Player.model_validate(row) for row in rows]
        except (ValueError, TypeError, ValidationError) as e:
            raise ServiceError(ServiceErrorKind.STORE_UNAVAILABLE, f"잘못된 응답: {e}") from e
