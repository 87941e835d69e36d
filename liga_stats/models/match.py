"""Modelo Match"""
from sqlalchemy import Column, Integer, ForeignKey, Boolean, DateTime, CheckConstraint
from sqlalchemy.orm import relationship
from liga_stats.models.base import BaseModel


class Match(BaseModel):
    """Modelo de Partida

    ``home_score``/``away_score`` são um cache da contagem de gols de cada lado,
    mantido pelo MatchResultService.
    """
    __tablename__ = "matches"

    home_team_id = Column(Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True)
    away_team_id = Column(Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True)

    match_date = Column(DateTime(timezone=True), nullable=False, index=True)
    finished = Column(Boolean, default=False, nullable=False, index=True)

    # Placar
    home_score = Column(Integer, default=0, nullable=False)
    away_score = Column(Integer, default=0, nullable=False)

    # Relationships
    home_team = relationship("Team", foreign_keys=[home_team_id])
    away_team = relationship("Team", foreign_keys=[away_team_id])
    goals = relationship(
        "Goal",
        back_populates="match",
        cascade="all, delete-orphan",
        order_by="Goal.minute",
    )
    cards = relationship(
        "Card",
        back_populates="match",
        cascade="all, delete-orphan",
        order_by="Card.minute",
    )

    __table_args__ = (
        CheckConstraint('home_team_id <> away_team_id', name='ck_match_distinct_teams'),
    )

    def __repr__(self):
        return (
            f"<Match(id={self.id}, {self.home_team_id} vs {self.away_team_id}, "
            f"{self.home_score}-{self.away_score}, finished={self.finished})>"
        )
