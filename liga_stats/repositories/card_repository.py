"""Repository de Card"""
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import select, delete
from typing import List, Optional
from liga_stats.models.card import Card


class CardRepository:
    """Repository para operações de banco com Card"""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self, match_id: Optional[int] = None) -> List[Card]:
        query = select(Card).options(selectinload(Card.player))
        if match_id is not None:
            query = query.filter(Card.match_id == match_id).order_by(Card.minute, Card.id)
        else:
            query = query.order_by(Card.id)
        result = self.db.execute(query)
        return list(result.scalars().all())

    def get_by_id(self, card_id: int) -> Optional[Card]:
        result = self.db.execute(select(Card).filter(Card.id == card_id))
        return result.scalar_one_or_none()

    def create(self, card_data: dict) -> Card:
        card = Card(**card_data)
        self.db.add(card)
        self.db.flush()
        return card

    def create_many(self, cards_data: List[dict]) -> List[Card]:
        cards = [Card(**data) for data in cards_data]
        self.db.add_all(cards)
        self.db.flush()
        return cards

    def update(self, card: Card, card_data: dict) -> Card:
        for key, value in card_data.items():
            setattr(card, key, value)
        self.db.flush()
        return card

    def delete(self, card: Card) -> None:
        self.db.delete(card)
        self.db.flush()

    def delete_by_match(self, match_id: int) -> int:
        result = self.db.execute(delete(Card).where(Card.match_id == match_id))
        return result.rowcount

    def delete_by_players(self, player_ids: List[int]) -> int:
        if not player_ids:
            return 0
        result = self.db.execute(delete(Card).where(Card.player_id.in_(player_ids)))
        return result.rowcount
