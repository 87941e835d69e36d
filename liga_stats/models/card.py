"""Modelo Card"""
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from liga_stats.models.base import BaseModel

YELLOW = "YELLOW"
RED = "RED"
CARD_TYPES = (YELLOW, RED)


class Card(BaseModel):
    """Modelo de Cartão"""
    __tablename__ = "cards"

    match_id = Column(Integer, ForeignKey("matches.id", ondelete="CASCADE"), nullable=False, index=True)
    player_id = Column(Integer, ForeignKey("players.id", ondelete="CASCADE"), nullable=False, index=True)
    team_id = Column(Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(String(10), nullable=False)
    minute = Column(Integer, nullable=True)

    # Relationships
    match = relationship("Match", back_populates="cards")
    player = relationship("Player")
    team = relationship("Team")

    def __repr__(self):
        return f"<Card(id={self.id}, match_id={self.match_id}, player_id={self.player_id}, type='{self.type}')>"
