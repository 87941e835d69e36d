"""Modelo Team"""
from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from liga_stats.models.base import BaseModel


class Team(BaseModel):
    """Modelo de Time"""
    __tablename__ = "teams"

    name = Column(String(255), nullable=False, index=True)
    logo = Column(Text, nullable=True)

    # Relationships
    players = relationship(
        "Player",
        back_populates="team",
        cascade="all, delete-orphan",
        order_by="[Player.number, Player.name]",
    )

    def __repr__(self):
        return f"<Team(id={self.id}, name='{self.name}')>"
