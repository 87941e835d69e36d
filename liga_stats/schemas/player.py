"""Schemas de Player"""
from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


class RosterPlayer(BaseModel):
    """Jogador informado junto com a criação do time"""
    name: str
    position: str
    number: Optional[int] = None


class PlayerCreate(RosterPlayer):
    """Schema para criação de Player"""
    team_id: int


class PlayerUpdate(RosterPlayer):
    """Schema para atualização de Player"""


class PlayerResponse(RosterPlayer):
    """Schema de resposta de Player"""
    id: int
    team_id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
