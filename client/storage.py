"""
세션 토큰 저장소

브라우저 localStorage 대신 JSON 파일 하나에 "token" 키로 저장
"""
import json
from pathlib import Path
from typing import Optional, Union

from loguru import logger

TOKEN_KEY = "token"


class TokenStorage:
    """파일 기반 토큰 저장소"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def load(self) -> Optional[str]:
        """저장된 토큰 (없으면 None)"""
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"세션 파일 읽기 실패, 로그아웃 상태로 시작: {e}")
            return None
        token = data.get(TOKEN_KEY) if isinstance(data, dict) else None
        return token or None

    def save(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({TOKEN_KEY: token}), encoding="utf-8")
        try:
            self.path.chmod(0o600)
        except OSError as e:
            logger.debug(f"세션 파일 권한 설정 실패: {e}")

    def clear(self) -> None:
        """토큰 삭제 (없어도 오류 없음)"""
        self.path.unlink(missing_ok=True)


class MemoryTokenStorage:
    """메모리 저장소 (테스트/임시 세션용)"""

    def __init__(self, token: Optional[str] = None):
        self.token = token

    def load(self) -> Optional[str]:
        return self.token

    def save(self, token: str) -> None:
        self.token = token

    def clear(self) -> None:
        self.token = None
