"""Endpoints de Jogadores"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from liga_stats.core.database import get_db
from liga_stats.schemas.player import PlayerCreate, PlayerUpdate, PlayerResponse
from liga_stats.services.player_service import PlayerService

router = APIRouter()


@router.get("/", response_model=List[PlayerResponse])
def get_players(
    team_id: Optional[int] = Query(None, description="Filtrar por time"),
    db: Session = Depends(get_db)
):
    """Lista jogadores"""
    service = PlayerService(db)
    return [PlayerResponse.model_validate(p) for p in service.get_players(team_id)]


@router.post("/", response_model=PlayerResponse, status_code=201)
def create_player(player: PlayerCreate, db: Session = Depends(get_db)):
    """Cria jogador (número único dentro do time)"""
    service = PlayerService(db)
    return PlayerResponse.model_validate(service.create_player(player.model_dump()))


@router.put("/{player_id}", response_model=PlayerResponse)
def update_player(player_id: int, player: PlayerUpdate, db: Session = Depends(get_db)):
    """Atualiza jogador"""
    service = PlayerService(db)
    return PlayerResponse.model_validate(service.update_player(player_id, player.model_dump()))


@router.delete("/{player_id}")
def delete_player(player_id: int, db: Session = Depends(get_db)):
    """Remove jogador, seus gols e cartões"""
    PlayerService(db).delete_player(player_id)
    return {"message": "Jogador removido"}
