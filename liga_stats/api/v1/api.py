"""Router principal da API v1"""
from fastapi import APIRouter
from liga_stats.api.v1.endpoints import teams, players, matches, goals, cards, statistics, data_integrity

api_router = APIRouter()

api_router.include_router(teams.router, prefix="/teams", tags=["teams"])
api_router.include_router(players.router, prefix="/players", tags=["players"])
api_router.include_router(matches.router, prefix="/matches", tags=["matches"])
api_router.include_router(goals.router, prefix="/goals", tags=["goals"])
api_router.include_router(cards.router, prefix="/cards", tags=["cards"])
api_router.include_router(statistics.router, prefix="/statistics", tags=["statistics"])
api_router.include_router(data_integrity.router, prefix="/data-integrity", tags=["data-integrity"])
