"""Endpoints de Times"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from liga_stats.core.database import get_db
from liga_stats.schemas.team import TeamCreate, TeamUpdate, TeamResponse
from liga_stats.services.team_service import TeamService

router = APIRouter()


@router.get("/", response_model=List[TeamResponse])
def get_teams(db: Session = Depends(get_db)):
    """Lista os times com seus elencos"""
    service = TeamService(db)
    return [TeamResponse.model_validate(team) for team in service.get_teams()]


@router.post("/", response_model=TeamResponse, status_code=201)
def create_team(team: TeamCreate, db: Session = Depends(get_db)):
    """Cria um time (com elenco opcional)"""
    service = TeamService(db)
    return TeamResponse.model_validate(service.create_team(team.model_dump()))


@router.get("/{team_id}", response_model=TeamResponse)
def get_team(team_id: int, db: Session = Depends(get_db)):
    """Obtém um time por ID"""
    service = TeamService(db)
    return TeamResponse.model_validate(service.get_team(team_id))


@router.put("/{team_id}", response_model=TeamResponse)
def update_team(team_id: int, team: TeamUpdate, db: Session = Depends(get_db)):
    """Atualiza nome e escudo do time"""
    service = TeamService(db)
    updated = service.update_team(team_id, team.model_dump(exclude_unset=True))
    return TeamResponse.model_validate(updated)


@router.delete("/{team_id}")
def delete_team(team_id: int, db: Session = Depends(get_db)):
    """Remove o time, suas partidas e seus jogadores"""
    TeamService(db).delete_team(team_id)
    return {"message": "Time removido"}
