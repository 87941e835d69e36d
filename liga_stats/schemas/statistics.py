"""Schemas de estatísticas"""
from pydantic import BaseModel, ConfigDict, field_validator
import math
from typing import List, Optional
from liga_stats.schemas.team import TeamSummary


class StatsPlayer(BaseModel):
    id: int
    name: str
    position: str
    number: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)


class TeamStatsResponse(BaseModel):
    """Linha da tabela de classificação"""
    position: int
    team: TeamSummary
    points: int
    games: int
    wins: int
    draws: int
    defeats: int
    goals_for: int
    goals_against: int
    goal_difference: int
    last_five_games: List[str]

    model_config = ConfigDict(from_attributes=True)


class PlayerGoalStatsResponse(BaseModel):
    player: StatsPlayer
    team: TeamSummary
    goals: int

    model_config = ConfigDict(from_attributes=True)


class PlayerAssistStatsResponse(BaseModel):
    player: StatsPlayer
    team: TeamSummary
    assists: int

    model_config = ConfigDict(from_attributes=True)


class PlayerCardStatsResponse(BaseModel):
    player: StatsPlayer
    team: TeamSummary
    yellow_cards: int
    red_cards: int
    total_cards: int

    model_config = ConfigDict(from_attributes=True)


class GoalkeeperStatsResponse(BaseModel):
    player: StatsPlayer
    team: TeamSummary
    goals_against: int
    clean_sheets: int
    matches_played: int
    average_goals_against: Optional[float] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("average_goals_against")
    @classmethod
    def no_average_without_matches(cls, value):
        """Goleiro sem jogos fica sem média"""
        if value is None or math.isinf(value):
            return None
        return round(value, 2)
