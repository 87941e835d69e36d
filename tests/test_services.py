"""Testes dos services de gestão (times, jogadores, partidas, cartões) e estatísticas"""
from datetime import datetime, timedelta, timezone

import pytest

from liga_stats.core.exceptions import ConsistencyError, NotFoundError, ValidationError
from liga_stats.models import Card, Goal, Match, Player, Team
from liga_stats.services.card_service import CardService
from liga_stats.services.match_result_service import MatchResultService
from liga_stats.services.match_service import (
    COMPLETED,
    LIVE,
    SCHEDULED,
    MatchService,
    match_status,
)
from liga_stats.services.player_service import PlayerService
from liga_stats.services.statistics_service import StatisticsService
from liga_stats.services.team_service import TeamService


class TestTeamService:

    def test_create_team_with_roster(self, db):
        team = TeamService(db).create_team({
            "name": "  Vila Nova ",
            "logo": "https://example.org/vila.png",
            "players": [
                {"name": "Zé", "position": "Goleiro", "number": 1},
                {"name": "Tião", "position": "Atacante", "number": 9},
            ],
        })
        assert team.name == "Vila Nova"
        assert [p.number for p in team.players] == [1, 9]

    def test_create_team_rejects_repeated_numbers(self, db):
        with pytest.raises(ValidationError):
            TeamService(db).create_team({
                "name": "Vila Nova",
                "players": [
                    {"name": "Zé", "position": "Goleiro", "number": 1},
                    {"name": "Tião", "position": "Atacante", "number": 1},
                ],
            })
        assert db.query(Team).count() == 0

    def test_create_team_requires_name(self, db):
        with pytest.raises(ValidationError):
            TeamService(db).create_team({"name": "   "})

    def test_teams_listed_by_name(self, db, make_team):
        make_team("Zumbi")
        make_team("Aurora")
        assert [t.name for t in TeamService(db).get_teams()] == ["Aurora", "Zumbi"]

    def test_update_team(self, db, make_team):
        team = make_team("Aurora", logo="a.png")
        updated = TeamService(db).update_team(team.id, {"name": "Aurora FC", "logo": None})
        assert updated.name == "Aurora FC"
        assert updated.logo is None

    def test_update_without_players_keeps_roster(self, db, league):
        updated = TeamService(db).update_team(league["B"].id, {"name": "Bandeirantes EC"})
        assert {p.id for p in updated.players} == {league["b_gk"].id, league["b_fw"].id}

    def test_update_with_players_replaces_roster(self, db, league, make_match):
        match = make_match(league["A"], league["B"], finished=True)
        results = MatchResultService(db)
        results.record_goal(match.id, league["a_fw"].id, league["A"].id, 10)
        results.record_goal(match.id, league["b_fw"].id, league["B"].id, 30)
        db.add(Card(match_id=match.id, player_id=league["a_mf"].id, team_id=league["A"].id, type="YELLOW"))
        db.commit()

        updated = TeamService(db).update_team(league["A"].id, {
            "players": [
                {"name": "Novo Goleiro", "position": "Goleiro", "number": 1},
                {"name": "Novo Atacante", "position": "Atacante", "number": 9},
            ],
        })
        assert [(p.name, p.number) for p in updated.players] == [("Novo Goleiro", 1), ("Novo Atacante", 9)]

        db.expire_all()
        assert db.get(Player, league["a_fw"].id) is None
        stored = db.get(Match, match.id)
        assert (stored.home_score, stored.away_score) == (0, 1)
        assert db.query(Card).count() == 0

    def test_invalid_roster_update_keeps_current_players(self, db, league):
        service = TeamService(db)
        with pytest.raises(ValidationError):
            service.update_team(league["A"].id, {
                "players": [
                    {"name": "Um", "position": "Goleiro", "number": 4},
                    {"name": "Dois", "position": "Atacante", "number": 4},
                ],
            })
        with pytest.raises(ValidationError):
            service.update_team(league["A"].id, {
                "players": [{"name": "Um", "position": "Goleiro", "number": -1}],
            })
        db.expire_all()
        assert db.query(Player).filter(Player.team_id == league["A"].id).count() == 3

    def test_create_team_rejects_negative_number(self, db):
        with pytest.raises(ValidationError):
            TeamService(db).create_team({
                "name": "Vila Nova",
                "players": [{"name": "Zé", "position": "Goleiro", "number": -3}],
            })
        assert db.query(Team).count() == 0

    def test_missing_team(self, db):
        with pytest.raises(NotFoundError):
            TeamService(db).get_team(42)
        with pytest.raises(NotFoundError):
            TeamService(db).delete_team(42)

    def test_delete_team_removes_matches_and_players(self, db, league, make_match):
        played = make_match(league["A"], league["B"], finished=True)
        other = make_match(league["B"], league["C"], finished=True)
        results = MatchResultService(db)
        results.record_goal(played.id, league["a_fw"].id, league["A"].id, 10)
        results.record_goal(other.id, league["b_fw"].id, league["B"].id, 20)
        db.add(Card(match_id=played.id, player_id=league["b_fw"].id, team_id=league["B"].id, type="YELLOW"))
        db.commit()

        TeamService(db).delete_team(league["A"].id)
        db.expire_all()

        assert db.get(Team, league["A"].id) is None
        assert db.query(Player).filter(Player.team_id == league["A"].id).count() == 0
        assert [m.id for m in db.query(Match).all()] == [other.id]
        assert db.query(Goal).count() == 1
        assert db.query(Card).count() == 0
        standings = StatisticsService(db).compute_standings()
        assert [row.team.name for row in standings] == ["Bandeirantes", "Cruzeirinho"]


class TestPlayerService:

    def test_create_and_update_player(self, db, league):
        service = PlayerService(db)
        player = service.create_player({
            "name": "Novato", "position": "Zagueiro", "number": 4, "team_id": league["A"].id,
        })
        assert player.team_id == league["A"].id

        updated = service.update_player(player.id, {"name": "Novato", "position": "Lateral", "number": 5})
        assert (updated.position, updated.number) == ("Lateral", 5)

    def test_duplicate_number_in_team(self, db, league):
        service = PlayerService(db)
        with pytest.raises(ValidationError):
            service.create_player({
                "name": "Outro", "position": "Atacante", "number": 9, "team_id": league["A"].id,
            })
        with pytest.raises(ValidationError):
            service.update_player(league["a_mf"].id, {"name": "Meia A", "position": "Meia", "number": 9})
        # mesma camisa em outro time é permitida
        other = service.create_player({
            "name": "Outro", "position": "Atacante", "number": 10, "team_id": league["B"].id,
        })
        assert other.number == 10

    def test_player_requires_existing_team(self, db):
        with pytest.raises(NotFoundError):
            PlayerService(db).create_player({"name": "Sem time", "position": "Atacante", "team_id": 77})

    def test_players_filtered_by_team(self, db, league):
        players = PlayerService(db).get_players(team_id=league["B"].id)
        assert {p.id for p in players} == {league["b_gk"].id, league["b_fw"].id}

    def test_delete_player_updates_scores(self, db, league, make_match):
        match = make_match(league["A"], league["B"], finished=True)
        results = MatchResultService(db)
        results.record_goal(match.id, league["a_fw"].id, league["A"].id, 10, assistant_id=league["a_mf"].id)
        results.record_goal(match.id, league["a_mf"].id, league["A"].id, 20, assistant_id=league["a_fw"].id)
        db.add(Card(match_id=match.id, player_id=league["a_fw"].id, team_id=league["A"].id, type="RED"))
        db.commit()

        PlayerService(db).delete_player(league["a_fw"].id)
        db.expire_all()

        stored = db.get(Match, match.id)
        assert (stored.home_score, stored.away_score) == (1, 0)
        remaining = db.query(Goal).all()
        assert [(g.scorer_id, g.assistant_id) for g in remaining] == [(league["a_mf"].id, None)]
        assert db.query(Card).count() == 0

    def test_delete_missing_player(self, db):
        with pytest.raises(NotFoundError):
            PlayerService(db).delete_player(5)


class TestMatchService:

    def test_create_match_starts_unfinished_at_zero(self, db, league, base_date):
        match = MatchService(db).create_match(league["A"].id, league["B"].id, base_date)
        assert match.finished is False
        assert (match.home_score, match.away_score) == (0, 0)

    def test_same_team_is_rejected(self, db, league, base_date):
        with pytest.raises(ValidationError):
            MatchService(db).create_match(league["A"].id, league["A"].id, base_date)

    def test_unknown_team(self, db, league, base_date):
        with pytest.raises(NotFoundError):
            MatchService(db).create_match(league["A"].id, 999, base_date)

    def test_upcoming_and_finished_lists(self, db, league, make_match, base_date):
        past = make_match(league["A"], league["B"], days=-3, finished=True)
        soon = make_match(league["A"], league["C"], days=2)
        later = make_match(league["B"], league["C"], days=9)
        make_match(league["C"], league["A"], days=-1)

        service = MatchService(db)
        assert [m.id for m in service.get_upcoming_matches(now=base_date)] == [soon.id, later.id]
        assert [m.id for m in service.get_finished_matches()] == [past.id]
        assert len(service.get_matches()) == 4

    def test_delete_match(self, db, league, make_match):
        match = make_match(league["A"], league["B"])
        MatchResultService(db).record_goal(match.id, league["a_fw"].id, league["A"].id, 5)
        MatchService(db).delete_match(match.id)
        assert db.query(Goal).count() == 0
        with pytest.raises(NotFoundError):
            MatchService(db).get_match(match.id)


class TestMatchStatus:

    def test_status_is_derived(self, db, league, make_match, base_date):
        now = base_date
        assert match_status(make_match(league["A"], league["B"], days=1), now) == SCHEDULED
        assert match_status(make_match(league["A"], league["B"], days=-1), now) == LIVE
        assert match_status(make_match(league["A"], league["B"], days=5, finished=True), now) == COMPLETED

    def test_naive_dates_are_utc(self):
        class Stub:
            finished = False
            match_date = datetime(2024, 3, 1, 15, 0)

        now = datetime(2024, 3, 1, 14, 0, tzinfo=timezone.utc)
        assert match_status(Stub(), now) == SCHEDULED
        assert match_status(Stub(), now + timedelta(hours=2)) == LIVE


class TestCardService:

    def test_card_crud(self, db, league, make_match):
        match = make_match(league["A"], league["B"])
        service = CardService(db)
        card = service.create_card({
            "match_id": match.id, "player_id": league["b_fw"].id,
            "team_id": league["B"].id, "type": "yellow", "minute": 40,
        })
        assert card.type == "YELLOW"

        card = service.update_card(card.id, {
            "player_id": league["b_fw"].id, "team_id": league["B"].id, "type": "RED", "minute": 41,
        })
        assert (card.type, card.minute) == ("RED", 41)
        assert [c.id for c in service.get_cards(match_id=match.id)] == [card.id]

        service.delete_card(card.id)
        assert service.get_cards() == []

    def test_invalid_cards(self, db, league, make_match):
        match = make_match(league["A"], league["B"])
        service = CardService(db)
        with pytest.raises(ValidationError):
            service.create_card({
                "match_id": match.id, "player_id": league["b_fw"].id,
                "team_id": league["B"].id, "type": "BLUE",
            })
        with pytest.raises(ConsistencyError):
            service.create_card({
                "match_id": match.id, "player_id": league["c_fw"].id,
                "team_id": league["C"].id, "type": "RED",
            })
        with pytest.raises(NotFoundError):
            service.create_card({
                "match_id": 404, "player_id": league["b_fw"].id,
                "team_id": league["B"].id, "type": "RED",
            })


class TestStatisticsService:

    def test_statistics_from_database(self, db, league, make_match):
        first = make_match(league["A"], league["B"], days=0, finished=True)
        second = make_match(league["C"], league["A"], days=7, finished=True)
        make_match(league["B"], league["C"], days=14)
        results = MatchResultService(db)
        a, b, c = league["A"].id, league["B"].id, league["C"].id
        results.record_goal(first.id, league["a_fw"].id, a, 10, assistant_id=league["a_mf"].id)
        results.record_goal(first.id, league["a_fw"].id, a, 60)
        results.record_goal(second.id, league["c_fw"].id, c, 15)
        results.record_goal(second.id, league["a_mf"].id, a, 80, assistant_id=league["a_fw"].id)
        CardService(db).create_card({
            "match_id": first.id, "player_id": league["b_fw"].id, "team_id": b, "type": "RED",
        })

        service = StatisticsService(db)
        standings = service.compute_standings()
        assert [(s.team.id, s.points, s.position) for s in standings] == [(a, 4, 1), (c, 1, 2), (b, 0, 3)]
        assert standings[0].last_five_games == ["D", "W"]

        scorers = service.compute_top_scorers()
        assert [(s.player.id, s.goals) for s in scorers][0] == (league["a_fw"].id, 2)

        assists = service.compute_top_assists(limit=1)
        assert len(assists) == 1

        cards = service.compute_card_stats()
        assert [(s.player.id, s.red_cards) for s in cards] == [(league["b_fw"].id, 1)]

        keepers = service.compute_best_goalkeepers()
        assert [k.player.id for k in keepers] == [league["a_gk"].id, league["c_gk"].id, league["b_gk"].id]
