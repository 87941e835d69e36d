"""Service de cartões"""
from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from liga_stats.core.database import atomic
from liga_stats.core.exceptions import NotFoundError
from liga_stats.models.card import Card
from liga_stats.repositories.card_repository import CardRepository
from liga_stats.repositories.match_repository import MatchRepository
from liga_stats.services.match_result_service import MatchResultService

logger = logging.getLogger(__name__)


class CardService:
    """Service para operações com cartões"""

    def __init__(self, db: Session):
        self.db = db
        self.repository = CardRepository(db)
        self.matches = MatchRepository(db)
        self.results = MatchResultService(db)

    def _get_match(self, match_id: int):
        match = self.matches.get_by_id(match_id)
        if not match:
            raise NotFoundError("Partida", match_id)
        return match

    def get_cards(self, match_id: Optional[int] = None) -> List[Card]:
        return self.repository.get_all(match_id=match_id)

    def create_card(self, card_data: dict) -> Card:
        with atomic(self.db):
            match = self._get_match(card_data.get("match_id"))
            card = self.repository.create(self.results.validate_card(match, card_data))

        logger.info(f"Cartão {card.type} para jogador {card.player_id} na partida {card.match_id}")
        return card

    def update_card(self, card_id: int, card_data: dict) -> Card:
        with atomic(self.db):
            card = self.repository.get_by_id(card_id)
            if not card:
                raise NotFoundError("Cartão", card_id)
            match = self._get_match(card.match_id)
            card = self.repository.update(card, self.results.validate_card(match, card_data))

        logger.info(f"Cartão {card_id} atualizado")
        return card

    def delete_card(self, card_id: int) -> None:
        with atomic(self.db):
            card = self.repository.get_by_id(card_id)
            if not card:
                raise NotFoundError("Cartão", card_id)
            self.repository.delete(card)
        logger.info(f"Cartão {card_id} removido")
