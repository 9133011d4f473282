"""
Club 검색 터미널 클라이언트

입력한 줄이 곧 새 검색어 (키 입력마다 검색하는 화면과 동일한 흐름)
- :logout  로그아웃
- :quit    종료
"""
import asyncio
import getpass
import os
from typing import Optional

import httpx
from loguru import logger

from .api import ClubApiClient
from .app import ClubApp
from .render import render
from .storage import TokenStorage

DEFAULT_API_URL = "http://localhost:5000"
DEFAULT_TOKEN_PATH = "~/.club_session.json"


def get_api_url() -> str:
    return os.getenv("CLUB_API_URL", DEFAULT_API_URL)


def get_token_path() -> str:
    return os.getenv("CLUB_TOKEN_PATH", DEFAULT_TOKEN_PATH)


async def _prompt(text: str) -> str:
    return await asyncio.to_thread(input, text)


async def _prompt_password(text: str) -> str:
    return await asyncio.to_thread(getpass.getpass, text)


async def _login_loop(app: ClubApp) -> bool:
    """로그인 될 때까지 반복 (EOF 시 False)"""
    while not app.state.is_logged_in:
        print(render(app.state))
        try:
            email = await _prompt("Email address: ")
            password = await _prompt_password("Password: ")
        except EOFError:
            return False
        await app.login(email.strip(), password)
    return True


async def _search_loop(app: ClubApp) -> Optional[str]:
    """검색 입력 처리 - 종료 명령 반환"""
    pending = set()

    def _on_done(task: asyncio.Task) -> None:
        pending.discard(task)
        if task.cancelled():
            return
        if task.exception() is not None:
            logger.error(f"검색 처리 오류: {task.exception()}")
            return
        # 세션 만료 시 로그인 화면은 _login_loop 에서 출력
        if app.state.is_logged_in:
            print(render(app.state))

    print("Find Players - type a name (e.g., 'John'), :logout or :quit")
    try:
        while app.state.is_logged_in:
            try:
                line = await _prompt("> ")
            except EOFError:
                return ":quit"
            if not app.state.is_logged_in:
                # 입력 대기 중 세션 만료
                return None
            command = line.strip()
            if command in (":quit", ":logout"):
                return command

            task = asyncio.create_task(app.search_players(line))
            pending.add(task)
            task.add_done_callback(_on_done)
            # 요청이 시작되면 로딩 표시
            await asyncio.sleep(0)
            if app.state.loading:
                print(render(app.state))
        return None
    finally:
        # 종료/로그아웃 시 진행 중인 검색 취소
        for task in list(pending):
            task.cancel()


async def run_client(
    api_url: Optional[str] = None,
    token_path: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> None:
    """터미널 클라이언트 실행"""
    api_url = api_url or get_api_url()
    storage = TokenStorage(token_path or get_token_path())

    async with ClubApiClient(api_url, transport=transport) as api:
        app = ClubApp(api, storage)
        app.start()
        logger.debug(f"API 서버: {api_url}")

        while True:
            if not await _login_loop(app):
                return
            command = await _search_loop(app)
            if command == ":logout":
                app.logout()
                print("Signed out.")
                continue
            if command == ":quit":
                return
            # 세션 만료로 로그아웃된 경우 다시 로그인


def main(api_url: Optional[str] = None, token_path: Optional[str] = None) -> None:
    asyncio.run(run_client(api_url, token_path))
