"""Cálculo da tabela de classificação

Funções puras: recebem times e partidas já carregados e devolvem a tabela
ordenada. Nada aqui acessa o banco.
"""
from dataclasses import dataclass, field
from typing import Any, Iterable, List

WIN = "W"
DRAW = "D"
LOSS = "L"

POINTS_FOR_WIN = 3
POINTS_FOR_DRAW = 1


@dataclass
class TeamStats:
    """Linha da tabela de classificação"""
    team: Any
    points: int = 0
    games: int = 0
    wins: int = 0
    draws: int = 0
    defeats: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0
    last_five_games: List[str] = field(default_factory=list)
    position: int = 0


def match_result(own_score: int, opponent_score: int) -> str:
    """Resultado (W/D/L) do ponto de vista de quem marcou ``own_score``"""
    if own_score > opponent_score:
        return WIN
    if own_score == opponent_score:
        return DRAW
    return LOSS


def _team_matches(team_id, matches: Iterable) -> list:
    """Partidas finalizadas do time, da mais recente para a mais antiga"""
    played = [
        m for m in matches
        if m.finished and (m.home_team_id == team_id or m.away_team_id == team_id)
    ]
    # sorted é estável: partidas na mesma data mantêm a ordem de entrada
    return sorted(played, key=lambda m: m.match_date, reverse=True)


def calculate_team_stats(team, matches: Iterable, form_games: int = 5) -> TeamStats:
    """Estatísticas de um time a partir das partidas finalizadas"""
    stats = TeamStats(team=team)

    for match in _team_matches(team.id, matches):
        is_home = match.home_team_id == team.id
        own_score = match.home_score if is_home else match.away_score
        opponent_score = match.away_score if is_home else match.home_score

        stats.games += 1
        stats.goals_for += own_score
        stats.goals_against += opponent_score

        result = match_result(own_score, opponent_score)
        if result == WIN:
            stats.wins += 1
            stats.points += POINTS_FOR_WIN
        elif result == DRAW:
            stats.draws += 1
            stats.points += POINTS_FOR_DRAW
        else:
            stats.defeats += 1

        # Forma: mais recente primeiro
        if len(stats.last_five_games) < form_games:
            stats.last_five_games.append(result)

    stats.goal_difference = stats.goals_for - stats.goals_against
    return stats


def standings_sort_key(stats: TeamStats) -> tuple:
    """Pontos, saldo de gols e gols marcados, todos decrescentes"""
    return (-stats.points, -stats.goal_difference, -stats.goals_for)


def calculate_standings(teams: Iterable, matches: Iterable, form_games: int = 5) -> List[TeamStats]:
    """
    Monta a tabela de classificação.

    Só partidas com ``finished`` verdadeiro contam. Empates nos três critérios
    mantêm a ordem em que os times foram recebidos (ordenação estável).
    """
    matches = list(matches)
    table = [calculate_team_stats(team, matches, form_games) for team in teams]
    table = sorted(table, key=standings_sort_key)

    for index, stats in enumerate(table, start=1):
        stats.position = index

    return table
