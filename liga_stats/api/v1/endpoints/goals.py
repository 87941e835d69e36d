"""Endpoints de Gols"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from liga_stats.core.database import get_db
from liga_stats.schemas.match import GoalCreate, GoalUpdate, GoalResponse, GoalWriteResponse, MatchScore
from liga_stats.services.match_result_service import MatchResultService

router = APIRouter()


@router.post("/", response_model=GoalWriteResponse, status_code=201)
def create_goal(goal: GoalCreate, db: Session = Depends(get_db)):
    """Registra gol e atualiza o placar da partida"""
    service = MatchResultService(db)
    created, score = service.record_goal(
        goal.match_id,
        scorer_id=goal.scorer_id,
        team_id=goal.team_id,
        minute=goal.minute,
        assistant_id=goal.assistant_id,
    )
    return GoalWriteResponse(goal=GoalResponse.model_validate(created), score=MatchScore(**vars(score)))


@router.put("/{goal_id}", response_model=GoalWriteResponse)
def update_goal(goal_id: int, goal: GoalUpdate, db: Session = Depends(get_db)):
    """Edita gol e atualiza o placar da partida"""
    service = MatchResultService(db)
    updated, score = service.update_goal(
        goal_id,
        scorer_id=goal.scorer_id,
        team_id=goal.team_id,
        minute=goal.minute,
        assistant_id=goal.assistant_id,
    )
    return GoalWriteResponse(goal=GoalResponse.model_validate(updated), score=MatchScore(**vars(score)))


@router.delete("/{goal_id}", response_model=MatchScore)
def delete_goal(goal_id: int, db: Session = Depends(get_db)):
    """Remove gol e devolve o placar atualizado"""
    score = MatchResultService(db).remove_goal(goal_id)
    return MatchScore(**vars(score))
