"""
Player Models - 선수 응답 모델
"""
from typing import Optional

from pydantic import BaseModel, Field


class Player(BaseModel):
    """클럽 선수 (club_players 행)"""
    id: int = Field(..., description="선수 고유 ID")
    name: str = Field(..., description="표시 이름")
    email: Optional[str] = Field(None, description="연락처 이메일")
    dupr_rating: float = Field(..., description="DUPR 레이팅")

    class Config:
        from_attributes = True

    @property
    def rating_display(self) -> str:
        """소수점 한 자리 레이팅"""
        return f"{self.dupr_rating:.1f}"
