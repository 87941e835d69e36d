"""Testes dos endpoints da API"""
from liga_stats.core.config import settings
from liga_stats.core.rate_limit import limiter

API = settings.API_V1_PREFIX


def create_team(client, name, players=()):
    response = client.post(f"{API}/teams/", json={"name": name, "players": list(players)})
    assert response.status_code == 201
    return response.json()


def create_match(client, home, away, date="2024-03-01T15:00:00Z"):
    response = client.post(f"{API}/matches/", json={
        "home_team_id": home["id"], "away_team_id": away["id"], "match_date": date,
    })
    assert response.status_code == 201
    return response.json()


def player_id(team, number):
    return next(p["id"] for p in team["players"] if p["number"] == number)


def setup_pair(client):
    home = create_team(client, "Alvorada", [
        {"name": "Goleiro A", "position": "Goleiro", "number": 1},
        {"name": "Atacante A", "position": "Atacante", "number": 9},
    ])
    away = create_team(client, "Bandeirantes", [
        {"name": "Goleiro B", "position": "Goalkeeper", "number": 1},
        {"name": "Atacante B", "position": "Atacante", "number": 9},
    ])
    return home, away


class TestHealth:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "standings" in response.json()["endpoints"]

    def test_only_statistics_routes_are_rate_limited(self):
        assert limiter._default_limits == []

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert "X-Request-ID" in response.headers


class TestManagementEndpoints:

    def test_team_lifecycle(self, client):
        team = create_team(client, "Alvorada", [{"name": "Zé", "position": "Goleiro", "number": 1}])
        assert len(team["players"]) == 1

        response = client.put(f"{API}/teams/{team['id']}", json={"name": "Alvorada FC"})
        assert response.json()["name"] == "Alvorada FC"

        assert client.delete(f"{API}/teams/{team['id']}").status_code == 200
        response = client.get(f"{API}/teams/{team['id']}")
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    def test_update_team_replaces_roster(self, client):
        team = create_team(client, "Alvorada", [{"name": "Antigo", "position": "Goleiro", "number": 1}])
        response = client.put(f"{API}/teams/{team['id']}", json={
            "players": [{"name": "Novo", "position": "Goleiro", "number": 1}],
        })
        assert response.status_code == 200
        assert [p["name"] for p in response.json()["players"]] == ["Novo"]

        response = client.put(f"{API}/teams/{team['id']}", json={"logo": "novo.png"})
        assert [p["name"] for p in response.json()["players"]] == ["Novo"]

    def test_duplicate_player_number_is_400(self, client):
        team = create_team(client, "Alvorada", [{"name": "Zé", "position": "Goleiro", "number": 1}])
        response = client.post(f"{API}/players/", json={
            "name": "Tião", "position": "Atacante", "number": 1, "team_id": team["id"],
        })
        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    def test_missing_fields_are_400(self, client):
        response = client.post(f"{API}/teams/", json={})
        assert response.status_code == 400

    def test_match_with_same_teams_is_400(self, client):
        team = create_team(client, "Alvorada")
        response = client.post(f"{API}/matches/", json={
            "home_team_id": team["id"], "away_team_id": team["id"], "match_date": "2024-03-01T15:00:00Z",
        })
        assert response.status_code == 400

    def test_new_match_status(self, client):
        home, away = setup_pair(client)
        past = create_match(client, home, away, "2020-01-01T15:00:00Z")
        future = create_match(client, away, home, "2999-01-01T15:00:00Z")
        assert past["status"] == "live"
        assert future["status"] == "scheduled"
        assert (future["home_score"], future["away_score"], future["finished"]) == (0, 0, False)

        upcoming = client.get(f"{API}/matches/upcoming").json()
        assert [m["id"] for m in upcoming] == [future["id"]]


class TestGoalEndpoints:

    def test_goal_post_and_delete_update_score(self, client):
        home, away = setup_pair(client)
        match = create_match(client, home, away)

        response = client.post(f"{API}/goals/", json={
            "match_id": match["id"], "scorer_id": player_id(away, 9), "team_id": away["id"], "minute": 33,
        })
        assert response.status_code == 201
        body = response.json()
        assert body["score"] == {"match_id": match["id"], "home_score": 0, "away_score": 1}

        response = client.delete(f"{API}/goals/{body['goal']['id']}")
        assert response.json() == {"match_id": match["id"], "home_score": 0, "away_score": 0}

    def test_goal_errors_map_to_status_codes(self, client):
        home, away = setup_pair(client)
        other = create_team(client, "Cruzeirinho", [{"name": "Atacante C", "position": "Atacante", "number": 9}])
        match = create_match(client, home, away)
        goal = {"match_id": match["id"], "scorer_id": player_id(home, 9), "team_id": home["id"], "minute": 10}

        assert client.post(f"{API}/goals/", json={**goal, "minute": 0}).status_code == 400
        assert client.post(f"{API}/goals/", json={**goal, "match_id": 999}).status_code == 404
        response = client.post(f"{API}/goals/", json={
            **goal, "scorer_id": player_id(other, 9), "team_id": other["id"],
        })
        assert response.status_code == 409
        assert response.json()["error"] == "consistency_error"

        match_after = client.get(f"{API}/matches/{match['id']}").json()
        assert match_after["goals"] == []


class TestMatchResultEndpoint:

    def test_full_replacement(self, client):
        home, away = setup_pair(client)
        match = create_match(client, home, away)
        response = client.put(f"{API}/matches/{match['id']}", json={
            "finished": True,
            "goals": [
                {"scorer_id": player_id(home, 9), "team_id": home["id"], "minute": 5},
                {"scorer_id": player_id(home, 9), "team_id": home["id"], "minute": 50},
                {"scorer_id": player_id(away, 9), "team_id": away["id"], "minute": 70},
            ],
            "cards": [{"player_id": player_id(away, 9), "team_id": away["id"], "type": "yellow"}],
        })
        assert response.status_code == 200
        body = response.json()
        assert (body["home_score"], body["away_score"]) == (2, 1)
        assert body["status"] == "completed"
        assert [g["minute"] for g in body["goals"]] == [5, 50, 70]
        assert [c["type"] for c in body["cards"]] == ["YELLOW"]

        standings = client.get(f"{API}/statistics/standings").json()["standings"]
        assert [(row["team"]["name"], row["points"], row["position"]) for row in standings] == [
            ("Alvorada", 3, 1), ("Bandeirantes", 0, 2),
        ]
        assert standings[0]["last_five_games"] == ["W"]

    def test_recompute_score(self, client):
        home, away = setup_pair(client)
        match = create_match(client, home, away)
        client.put(f"{API}/matches/{match['id']}", json={"home_score": 4, "away_score": 4})

        response = client.post(f"{API}/matches/{match['id']}/recompute-score")
        assert response.json() == {"match_id": match["id"], "home_score": 0, "away_score": 0}


class TestStatisticsEndpoints:

    def test_player_rankings(self, client):
        home, away = setup_pair(client)
        match = create_match(client, home, away)
        client.put(f"{API}/matches/{match['id']}", json={
            "finished": True,
            "goals": [{"scorer_id": player_id(home, 9), "team_id": home["id"], "minute": 12}],
        })

        scorers = client.get(f"{API}/statistics/players", params={"type": "scorers"}).json()
        assert scorers["type"] == "scorers"
        assert [(r["player"]["name"], r["goals"]) for r in scorers["ranking"]] == [("Atacante A", 1)]

        keepers = client.get(f"{API}/statistics/players", params={"type": "goalkeepers"}).json()["ranking"]
        assert [(r["player"]["name"], r["goals_against"], r["clean_sheets"]) for r in keepers] == [
            ("Goleiro A", 0, 1), ("Goleiro B", 1, 0),
        ]
        assert keepers[0]["average_goals_against"] == 0.0

    def test_goalkeeper_without_matches_has_no_average(self, client):
        setup_pair(client)
        keepers = client.get(f"{API}/statistics/players", params={"type": "goalkeepers"}).json()["ranking"]
        assert [r["average_goals_against"] for r in keepers] == [None, None]

    def test_invalid_type_is_400(self, client):
        response = client.get(f"{API}/statistics/players", params={"type": "saves"})
        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
        assert client.get(f"{API}/statistics/players").status_code == 400

    def test_empty_league(self, client):
        assert client.get(f"{API}/statistics/standings").json() == {"standings": []}


class TestDataIntegrityEndpoints:

    def test_check_and_repair(self, client):
        home, away = setup_pair(client)
        match = create_match(client, home, away)
        client.post(f"{API}/goals/", json={
            "match_id": match["id"], "scorer_id": player_id(home, 9), "team_id": home["id"], "minute": 3,
        })
        client.put(f"{API}/matches/{match['id']}", json={"home_score": 7})

        report = client.get(f"{API}/data-integrity/check").json()
        assert report["status"] == "issues_found"

        repaired = client.post(f"{API}/data-integrity/repair").json()
        assert repaired["repaired"] == 1
        assert repaired["matches"][0]["after"] == "1-0"

        assert client.get(f"{API}/data-integrity/check").json()["status"] == "ok"
