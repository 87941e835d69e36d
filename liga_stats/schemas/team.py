"""Schemas de Team"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime
from liga_stats.schemas.player import PlayerResponse, RosterPlayer


class TeamBase(BaseModel):
    """Schema base de Team"""
    name: str
    logo: Optional[str] = None


class TeamCreate(TeamBase):
    """Schema para criação de Team (com elenco inicial opcional)"""
    players: List[RosterPlayer] = Field(default_factory=list)


class TeamUpdate(BaseModel):
    """Schema para atualização de Team (``players`` substitui o elenco inteiro)"""
    name: Optional[str] = None
    logo: Optional[str] = None
    players: Optional[List[RosterPlayer]] = None


class TeamSummary(TeamBase):
    """Time sem elenco, usado dentro de outras respostas"""
    id: int

    model_config = ConfigDict(from_attributes=True)


class TeamResponse(TeamSummary):
    """Schema de resposta de Team"""
    created_at: datetime
    players: List[PlayerResponse] = Field(default_factory=list)
