"""Models - modelos SQLAlchemy"""
from liga_stats.models.team import Team
from liga_stats.models.player import Player
from liga_stats.models.match import Match
from liga_stats.models.goal import Goal
from liga_stats.models.card import Card

__all__ = [
    "Team",
    "Player",
    "Match",
    "Goal",
    "Card",
]
