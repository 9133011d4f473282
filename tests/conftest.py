"""
Pytest configuration and fixtures for Club Roster tests
"""

import re
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import ClubSettings, get_settings  # noqa: E402
from app.players.service import PlayerService  # noqa: E402


def _ilike_to_regex(pattern: str) -> re.Pattern:
    """ILIKE 패턴 (\\ 이스케이프 포함) → 정규식"""
    out = []
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "\\" and i + 1 < len(pattern):
            out.append(re.escape(pattern[i + 1]))
            i += 2
            continue
        if ch == "%":
            out.append(".*")
        elif ch == "_":
            out.append(".")
        else:
            out.append(re.escape(ch))
        i += 1
    return re.compile("^" + "".join(out) + "$", re.IGNORECASE | re.DOTALL)


class FakeQuery:
    """supabase 쿼리 빌더 흉내 (select → ilike → limit → execute)"""

    def __init__(self, store: "FakeSupabase", table: str):
        self.store = store
        self.table_name = table
        self.columns = None
        self.pattern = None
        self.limit_count = None

    def select(self, columns):
        self.columns = columns
        return self

    def ilike(self, column, pattern):
        assert column == "name"
        self.pattern = pattern
        return self

    def limit(self, count):
        self.limit_count = count
        return self

    def execute(self):
        self.store.queries.append(self)
        if self.store.error is not None:
            raise self.store.error
        rows = self.store.rows
        if self.pattern is not None:
            regex = _ilike_to_regex(self.pattern)
            rows = [r for r in rows if r.get("name") is not None and regex.match(r["name"])]
        if self.limit_count is not None:
            rows = rows[:self.limit_count]
        return SimpleNamespace(data=[dict(r) for r in rows])


class FakeSupabase:
    """club_players 테이블 하나를 가진 가짜 Supabase 클라이언트"""

    def __init__(self, rows=None, error=None):
        self.rows = list(rows or [])
        self.error = error
        self.queries = []

    def table(self, name):
        return FakeQuery(self, name)


@pytest.fixture(scope="function")
def settings():
    """테스트용 설정"""
    return ClubSettings(
        SUPABASE_URL="",
        SUPABASE_KEY="",
        JWT_SECRET_KEY="test-secret",
        ADMIN_EMAIL="admin@club.com",
        ADMIN_PASSWORD="password123",
        REQUIRE_SEARCH_AUTH=True,
    )


@pytest.fixture(scope="function")
def sample_player_rows():
    """Store order sample rows"""
    return [
        {"id": 1, "name": "John Smith", "email": "john@club.com", "dupr_rating": 4.25},
        {"id": 2, "name": "Johnny Lee", "email": "johnny@club.com", "dupr_rating": 3.5},
        {"id": 3, "name": "Amy Jones", "email": "amy@club.com", "dupr_rating": 5.0},
    ]


@pytest.fixture(scope="function")
def fake_store(sample_player_rows):
    return FakeSupabase(sample_player_rows)


@pytest.fixture(scope="function")
def player_service(fake_store, settings):
    return PlayerService(client=fake_store, settings=settings)


@pytest.fixture(scope="function")
def api_app(settings, player_service):
    """의존성을 테스트용으로 교체한 FastAPI 앱"""
    from app.players.router import get_player_service
    from app.server import create_app

    application = create_app()
    application.dependency_overrides[get_settings] = lambda: settings
    application.dependency_overrides[get_player_service] = lambda: player_service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client(api_app):
    from fastapi.testclient import TestClient
    return TestClient(api_app)


@pytest.fixture(scope="function")
def auth_token(settings):
    from app.auth.router import create_access_token
    return create_access_token({"sub": settings.ADMIN_EMAIL}, settings)
