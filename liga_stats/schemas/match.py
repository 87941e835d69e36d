"""Schemas de Match, Goal e Card"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime
from liga_stats.schemas.team import TeamSummary


class GoalInput(BaseModel):
    """Gol informado na substituição completa do resultado"""
    scorer_id: int
    assistant_id: Optional[int] = None
    team_id: int
    minute: int


class GoalCreate(GoalInput):
    match_id: int


class GoalUpdate(GoalInput):
    pass


class GoalResponse(GoalCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)


class CardInput(BaseModel):
    """Cartão informado na substituição completa do resultado"""
    player_id: int
    team_id: int
    type: str
    minute: Optional[int] = None


class CardCreate(CardInput):
    match_id: int


class CardUpdate(CardInput):
    pass


class CardResponse(CardCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)


class MatchCreate(BaseModel):
    """Schema para criação de Match"""
    home_team_id: int
    away_team_id: int
    match_date: datetime


class MatchResultUpdate(BaseModel):
    """
    Atualização de partida.

    Com ``goals`` informado, gols e cartões são substituídos e o placar vem da
    contagem dos gols; sem ``goals``, é uma edição simples de placar.
    """
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    finished: Optional[bool] = None
    match_date: Optional[datetime] = None
    goals: Optional[List[GoalInput]] = None
    cards: Optional[List[CardInput]] = None


class MatchScore(BaseModel):
    """Placar de uma partida"""
    match_id: int
    home_score: int
    away_score: int


class MatchResponse(BaseModel):
    """Schema de resposta de Match"""
    id: int
    home_team_id: int
    away_team_id: int
    home_team: Optional[TeamSummary] = None
    away_team: Optional[TeamSummary] = None
    match_date: datetime
    finished: bool
    home_score: int
    away_score: int
    status: Optional[str] = None  # derivado: scheduled, live ou completed
    goals: List[GoalResponse] = Field(default_factory=list)
    cards: List[CardResponse] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class GoalWriteResponse(BaseModel):
    """Gol gravado e o placar resultante"""
    goal: GoalResponse
    score: MatchScore
