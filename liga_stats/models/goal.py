"""Modelo Goal"""
from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship
from liga_stats.models.base import BaseModel


class Goal(BaseModel):
    """Modelo de Gol"""
    __tablename__ = "goals"

    match_id = Column(Integer, ForeignKey("matches.id", ondelete="CASCADE"), nullable=False, index=True)
    scorer_id = Column(Integer, ForeignKey("players.id", ondelete="CASCADE"), nullable=False, index=True)
    assistant_id = Column(Integer, ForeignKey("players.id", ondelete="SET NULL"), nullable=True, index=True)
    team_id = Column(Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True)
    minute = Column(Integer, nullable=False)

    # Relationships
    match = relationship("Match", back_populates="goals")
    scorer = relationship("Player", foreign_keys=[scorer_id])
    assistant = relationship("Player", foreign_keys=[assistant_id])
    team = relationship("Team")

    def __repr__(self):
        return f"<Goal(id={self.id}, match_id={self.match_id}, scorer_id={self.scorer_id}, minute={self.minute})>"
