"""Modelo Player"""
from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from liga_stats.models.base import BaseModel


class Player(BaseModel):
    """Modelo de Jogador"""
    __tablename__ = "players"

    team_id = Column(Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True)

    name = Column(String(255), nullable=False)
    position = Column(String(50), nullable=False)
    number = Column(Integer, nullable=True)

    # Relationships
    team = relationship("Team", back_populates="players")

    __table_args__ = (
        UniqueConstraint('team_id', 'number', name='uq_player_team_number'),
    )

    def __repr__(self):
        return f"<Player(name='{self.name}', number={self.number}, team_id={self.team_id})>"
