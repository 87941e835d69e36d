"""Endpoints de Cartões"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from liga_stats.core.database import get_db
from liga_stats.schemas.match import CardCreate, CardUpdate, CardResponse
from liga_stats.services.card_service import CardService

router = APIRouter()


@router.get("/", response_model=List[CardResponse])
def get_cards(
    match_id: Optional[int] = Query(None, description="Filtrar por partida"),
    db: Session = Depends(get_db)
):
    """Lista cartões"""
    return [CardResponse.model_validate(c) for c in CardService(db).get_cards(match_id)]


@router.post("/", response_model=CardResponse, status_code=201)
def create_card(card: CardCreate, db: Session = Depends(get_db)):
    """Registra cartão (YELLOW ou RED)"""
    return CardResponse.model_validate(CardService(db).create_card(card.model_dump()))


@router.put("/{card_id}", response_model=CardResponse)
def update_card(card_id: int, card: CardUpdate, db: Session = Depends(get_db)):
    """Edita cartão"""
    return CardResponse.model_validate(CardService(db).update_card(card_id, card.model_dump()))


@router.delete("/{card_id}")
def delete_card(card_id: int, db: Session = Depends(get_db)):
    """Remove cartão"""
    CardService(db).delete_card(card_id)
    return {"message": "Cartão removido"}
