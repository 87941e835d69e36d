"""Endpoints de Estatísticas"""
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session
from typing import Optional
from liga_stats.core.config import settings
from liga_stats.core.database import get_db
from liga_stats.core.exceptions import ValidationError
from liga_stats.core.rate_limit import limiter
from liga_stats.schemas.statistics import (
    TeamStatsResponse,
    PlayerGoalStatsResponse,
    PlayerAssistStatsResponse,
    PlayerCardStatsResponse,
    GoalkeeperStatsResponse,
)
from liga_stats.services.statistics_service import StatisticsService

router = APIRouter()

RANKINGS = {
    "scorers": ("compute_top_scorers", PlayerGoalStatsResponse),
    "assists": ("compute_top_assists", PlayerAssistStatsResponse),
    "cards": ("compute_card_stats", PlayerCardStatsResponse),
    "goalkeepers": ("compute_best_goalkeepers", GoalkeeperStatsResponse),
}


@router.get("/standings")
@limiter.limit(settings.STATISTICS_RATE_LIMIT)
def get_standings(request: Request, db: Session = Depends(get_db)):
    """Tabela de classificação"""
    table = StatisticsService(db).compute_standings()
    return {"standings": [TeamStatsResponse.model_validate(row).model_dump() for row in table]}


@router.get("/players")
@limiter.limit(settings.STATISTICS_RATE_LIMIT)
def get_player_statistics(
    request: Request,
    type: Optional[str] = Query(None, description="scorers, assists, cards ou goalkeepers"),
    limit: Optional[int] = Query(None, ge=1, le=settings.RANKING_MAX_LIMIT),
    db: Session = Depends(get_db)
):
    """Rankings de jogadores"""
    if type not in RANKINGS:
        raise ValidationError(f"Parâmetro type inválido. Use: {', '.join(RANKINGS)}")

    method, schema = RANKINGS[type]
    rows = getattr(StatisticsService(db), method)(limit)
    return {"type": type, "ranking": [schema.model_validate(row).model_dump() for row in rows]}
