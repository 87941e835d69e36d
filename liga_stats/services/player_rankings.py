"""Rankings de jogadores: artilharia, assistências, cartões e goleiros

Assim como a classificação, são funções puras sobre entidades já carregadas.
Gols e cartões cuja partida (ou jogador) não existe mais são ignorados.
"""
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional
import math
import unicodedata

from liga_stats.models.card import YELLOW, RED

GOALKEEPER = "goalkeeper"
DEFENDER = "defender"
MIDFIELDER = "midfielder"
FORWARD = "forward"

POSITION_ALIASES = {
    GOALKEEPER: {"goalkeeper", "goleiro", "gk", "gol", "arqueiro", "keeper"},
    DEFENDER: {"defender", "zagueiro", "defensor", "lateral", "df", "zag"},
    MIDFIELDER: {"midfielder", "meio-campo", "meio campo", "meia", "volante", "mf", "mc"},
    FORWARD: {"forward", "atacante", "centroavante", "ponta", "fw", "ata"},
}


@dataclass
class PlayerGoalStats:
    player: Any
    team: Any
    goals: int


@dataclass
class PlayerAssistStats:
    player: Any
    team: Any
    assists: int


@dataclass
class PlayerCardStats:
    player: Any
    team: Any
    yellow_cards: int
    red_cards: int
    total_cards: int


@dataclass
class GoalkeeperStats:
    player: Any
    team: Any
    goals_against: int
    clean_sheets: int
    matches_played: int

    @property
    def average_goals_against(self) -> float:
        """Média de gols sofridos por jogo (infinito sem jogos)"""
        if self.matches_played == 0:
            return math.inf
        return self.goals_against / self.matches_played


def _strip_accents(value: str) -> str:
    normalized = unicodedata.normalize("NFKD", value)
    return "".join(ch for ch in normalized if not unicodedata.combining(ch))


def normalize_position(position: Optional[str]) -> Optional[str]:
    """Converte texto livre (``Goleiro``, ``GK``...) para a posição canônica"""
    if not position:
        return None
    key = _strip_accents(position).strip().lower()
    for canonical, aliases in POSITION_ALIASES.items():
        if key in aliases:
            return canonical
    return None


def is_goalkeeper(player) -> bool:
    return normalize_position(player.position) == GOALKEEPER


def _live_records(records: Iterable, match_ids: set, player_attr: str, players_by_id: Dict) -> list:
    """Registros cuja partida e jogador ainda existem"""
    return [
        r for r in records
        if r.match_id in match_ids and getattr(r, player_attr) in players_by_id
    ]


def _index(entities: Iterable) -> Dict:
    return {entity.id: entity for entity in entities}


def _top_by_count(counts: Counter, players: List, teams_by_id: Dict, limit: int, factory) -> list:
    """Jogadores com contagem > 0, ordem decrescente; empates na ordem de entrada"""
    ranked = sorted(
        (p for p in players if counts[p.id] > 0 and p.team_id in teams_by_id),
        key=lambda p: -counts[p.id],
    )
    return [factory(p, teams_by_id[p.team_id], counts[p.id]) for p in ranked[:limit]]


def top_scorers(players: Iterable, teams: Iterable, matches: Iterable, goals: Iterable,
                limit: int = 10) -> List[PlayerGoalStats]:
    """Artilharia"""
    players = list(players)
    players_by_id = _index(players)
    match_ids = {m.id for m in matches}

    counts = Counter(
        g.scorer_id for g in _live_records(goals, match_ids, "scorer_id", players_by_id)
    )
    return _top_by_count(counts, players, _index(teams), limit, PlayerGoalStats)


def top_assists(players: Iterable, teams: Iterable, matches: Iterable, goals: Iterable,
                limit: int = 10) -> List[PlayerAssistStats]:
    """Líderes de assistências"""
    players = list(players)
    players_by_id = _index(players)
    match_ids = {m.id for m in matches}

    assisted = [g for g in goals if g.assistant_id is not None]
    counts = Counter(
        g.assistant_id for g in _live_records(assisted, match_ids, "assistant_id", players_by_id)
    )
    return _top_by_count(counts, players, _index(teams), limit, PlayerAssistStats)


def card_stats(players: Iterable, teams: Iterable, matches: Iterable, cards: Iterable,
               limit: int = 10) -> List[PlayerCardStats]:
    """
    Jogadores mais punidos.

    Ordem: vermelhos, depois amarelos, depois total, todos decrescentes.
    """
    players = list(players)
    players_by_id = _index(players)
    teams_by_id = _index(teams)
    match_ids = {m.id for m in matches}

    yellow = Counter()
    red = Counter()
    for card in _live_records(cards, match_ids, "player_id", players_by_id):
        card_type = (card.type or "").upper()
        if card_type == YELLOW:
            yellow[card.player_id] += 1
        elif card_type == RED:
            red[card.player_id] += 1

    rows = []
    for player in players:
        if player.team_id not in teams_by_id:
            continue
        total = yellow[player.id] + red[player.id]
        if total == 0:
            continue
        rows.append(PlayerCardStats(
            player=player,
            team=teams_by_id[player.team_id],
            yellow_cards=yellow[player.id],
            red_cards=red[player.id],
            total_cards=total,
        ))

    rows = sorted(rows, key=lambda r: (-r.red_cards, -r.yellow_cards, -r.total_cards))
    return rows[:limit]


def goalkeeper_stats(player, team, matches: Iterable) -> GoalkeeperStats:
    """Gols sofridos, partidas e jogos sem sofrer gols do time do goleiro"""
    goals_against = 0
    matches_played = 0
    clean_sheets = 0

    for match in matches:
        if not match.finished:
            continue
        if match.home_team_id == player.team_id:
            conceded = match.away_score
        elif match.away_team_id == player.team_id:
            conceded = match.home_score
        else:
            continue
        matches_played += 1
        goals_against += conceded
        if conceded == 0:
            clean_sheets += 1

    return GoalkeeperStats(
        player=player,
        team=team,
        goals_against=goals_against,
        clean_sheets=clean_sheets,
        matches_played=matches_played,
    )


def _goalkeeper_key(stats: GoalkeeperStats) -> tuple:
    return (stats.goals_against, stats.average_goals_against, -stats.clean_sheets)


def best_goalkeeper_per_team(all_stats: Iterable[GoalkeeperStats]) -> List[GoalkeeperStats]:
    """
    Reduz a um goleiro por time: menos gols sofridos, depois menor média,
    depois mais jogos sem sofrer gols. Em empate total fica o primeiro visto.
    """
    best: Dict[Any, GoalkeeperStats] = {}
    for stats in all_stats:
        team_id = stats.player.team_id
        current = best.get(team_id)
        if current is None or _goalkeeper_key(stats) < _goalkeeper_key(current):
            best[team_id] = stats
    return list(best.values())


def sort_goalkeepers(stats: Iterable[GoalkeeperStats]) -> List[GoalkeeperStats]:
    """Quem jogou vem primeiro; quem não jogou mantém a ordem de entrada no fim"""
    def key(s: GoalkeeperStats) -> tuple:
        if s.matches_played == 0:
            return (1, 0, 0.0, 0)
        return (0,) + _goalkeeper_key(s)

    return sorted(stats, key=key)


def best_goalkeepers(players: Iterable, teams: Iterable, matches: Iterable,
                     limit: int = 10) -> List[GoalkeeperStats]:
    """Melhor goleiro de cada time, ordenado entre os times"""
    teams_by_id = _index(teams)
    matches = list(matches)

    all_stats = [
        goalkeeper_stats(player, teams_by_id[player.team_id], matches)
        for player in players
        if is_goalkeeper(player) and player.team_id in teams_by_id
    ]
    return sort_goalkeepers(best_goalkeeper_per_team(all_stats))[:limit]
