"""Endpoints de Partidas"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from liga_stats.core.database import get_db
from liga_stats.schemas.match import MatchCreate, MatchResultUpdate, MatchResponse, MatchScore
from liga_stats.services.match_result_service import MatchResultService
from liga_stats.services.match_service import MatchService, match_status

router = APIRouter()


def to_response(match) -> MatchResponse:
    """Serializa a partida com o status derivado"""
    response = MatchResponse.model_validate(match)
    response.status = match_status(match)
    return response


@router.get("/", response_model=List[MatchResponse])
def get_matches(db: Session = Depends(get_db)):
    """Lista partidas, mais recentes primeiro"""
    return [to_response(m) for m in MatchService(db).get_matches()]


@router.get("/upcoming", response_model=List[MatchResponse])
def get_upcoming_matches(db: Session = Depends(get_db)):
    """Próximas partidas"""
    return [to_response(m) for m in MatchService(db).get_upcoming_matches()]


@router.get("/finished", response_model=List[MatchResponse])
def get_finished_matches(db: Session = Depends(get_db)):
    """Partidas finalizadas"""
    return [to_response(m) for m in MatchService(db).get_finished_matches()]


@router.post("/", response_model=MatchResponse, status_code=201)
def create_match(match: MatchCreate, db: Session = Depends(get_db)):
    """Cria partida (não finalizada, 0-0)"""
    service = MatchService(db)
    return to_response(service.create_match(match.home_team_id, match.away_team_id, match.match_date))


@router.get("/{match_id}", response_model=MatchResponse)
def get_match(match_id: int, db: Session = Depends(get_db)):
    """Obtém partida com gols e cartões"""
    return to_response(MatchService(db).get_match(match_id))


@router.put("/{match_id}", response_model=MatchResponse)
def update_match(match_id: int, data: MatchResultUpdate, db: Session = Depends(get_db)):
    """
    Atualiza o resultado da partida.

    Com ``goals`` é uma substituição completa de gols e cartões; sem ``goals``
    é uma edição simples de placar/status/data.
    """
    service = MatchResultService(db)
    match = service.replace_match_result(
        match_id,
        home_score=data.home_score,
        away_score=data.away_score,
        finished=data.finished,
        match_date=data.match_date,
        goals=[g.model_dump() for g in data.goals] if data.goals is not None else None,
        cards=[c.model_dump() for c in data.cards] if data.cards is not None else None,
    )
    return to_response(match)


@router.post("/{match_id}/recompute-score", response_model=MatchScore)
def recompute_match_score(match_id: int, db: Session = Depends(get_db)):
    """Recalcula o placar a partir dos gols"""
    score = MatchResultService(db).recompute_score(match_id)
    return MatchScore(**vars(score))


@router.delete("/{match_id}")
def delete_match(match_id: int, db: Session = Depends(get_db)):
    """Remove partida com gols e cartões"""
    MatchService(db).delete_match(match_id)
    return {"message": "Partida removida"}
