"""Regras de validação compartilhadas entre os serviços"""
from datetime import datetime, timezone
from typing import Optional
from liga_stats.core.config import settings
from liga_stats.core.exceptions import ValidationError, ConsistencyError
from liga_stats.models.card import CARD_TYPES


def require_text(value: Optional[str], field: str) -> str:
    """Campo de texto obrigatório e não vazio"""
    if value is None or len(value.strip()) == 0:
        raise ValidationError(f"{field} é obrigatório")
    return value.strip()


def validate_minute(minute: Optional[int], required: bool = True) -> Optional[int]:
    """Minuto dentro do intervalo permitido (1 a 120 por padrão)"""
    if minute is None:
        if required:
            raise ValidationError("Minuto é obrigatório")
        return None
    if not settings.MIN_GOAL_MINUTE <= minute <= settings.MAX_GOAL_MINUTE:
        raise ValidationError(
            f"Minuto deve estar entre {settings.MIN_GOAL_MINUTE} e {settings.MAX_GOAL_MINUTE}"
        )
    return minute


def validate_score(score: Optional[int], field: str) -> Optional[int]:
    if score is not None and score < 0:
        raise ValidationError(f"{field} não pode ser negativo")
    return score


def normalize_card_type(card_type: Optional[str]) -> str:
    """YELLOW ou RED, aceitando minúsculas"""
    normalized = (card_type or "").strip().upper()
    if normalized not in CARD_TYPES:
        raise ValidationError("Tipo do cartão deve ser YELLOW ou RED")
    return normalized


def ensure_team_in_match(match, team_id: int) -> None:
    """O time atribuído precisa ser mandante ou visitante da partida"""
    if team_id not in (match.home_team_id, match.away_team_id):
        raise ConsistencyError(
            f"Time {team_id} não participa da partida {match.id}"
        )


def as_utc(value: datetime) -> datetime:
    """Datas sem fuso são tratadas como UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
