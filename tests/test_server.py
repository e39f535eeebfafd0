"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from shipyard.models import UPGRADES
from shipyard.server.main import app

PHOENIX = "Phoenix (snubfighter) 10 (13):2:2d6+1:2d6:2d8+1:Agile,Fast,Shields"


@pytest.fixture
def client():
    """Test client with the app lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


def test_api_root(client):
    """Test the health check."""
    response = client.get("/api")
    assert response.status_code == 200
    assert response.json() == {
        "service": "Shipyard",
        "status": "operational",
        "upgrades": len(UPGRADES),
    }


def test_list_upgrades(client):
    """Test the catalog is listed in name order."""
    upgrades = client.get("/api/upgrades").json()
    assert len(upgrades) == len(UPGRADES)
    assert [u["name"] for u in upgrades] == sorted(UPGRADES)
    assert upgrades[0] == {
        "name": "Agile",
        "shipTypes": ["GUNSHIP", "SNUBFIGHTER"],
        "rarity": "COMMON",
        "cost": 1,
        "slots": 1,
    }
    fully_loaded = next(u for u in upgrades if u["name"] == "Fully Loaded")
    assert fully_loaded["slots"] == 0


class TestParseShip:
    """Test POST /api/ships/parse."""

    def test_parse(self, client):
        """Test the report for a parsed ship."""
        response = client.post("/api/ships/parse", json={"printable": PHOENIX})
        assert response.status_code == 200
        assert response.json() == {
            "name": "Phoenix",
            "shipType": "SNUBFIGHTER",
            "speed": 2,
            "defense": "2d6+1",
            "weapons": ["2d6"],
            "pilot": "2d8+1",
            "upgrades": ["Agile", "Fast", "Shields"],
            "costWithoutPilot": 10,
            "costWithPilot": 13,
            "upgradeLimit": 3,
            "printable": PHOENIX,
            "violations": [],
        }

    def test_parse_does_not_validate(self, client):
        """Test parsing an illegal ship reports no violations."""
        response = client.post(
            "/api/ships/parse", json={"printable": "Slowpoke (snubfighter) 0 (0):1:2d6::none:"}
        )
        assert response.status_code == 200
        assert response.json()["violations"] == []

    def test_coalesces_upgrades(self, client):
        """Test repeated upgrades come back as "Name xN"."""
        line = "Auroch (corvette) 0 (0):1:2d10:2d8E,2d8E:2d8:Enhanced Turret,Enhanced Turret"
        body = client.post("/api/ships/parse", json={"printable": line}).json()
        assert body["upgrades"] == ["Enhanced Turret x2"]
        assert body["weapons"] == ["2d8E", "2d8E"]

    def test_unknown_upgrade(self, client):
        """Test upgrades outside the catalog are rejected."""
        response = client.post(
            "/api/ships/parse", json={"printable": "Odd (gunship) 0 (0):1:2d8::none:Cloaking Device"}
        )
        assert response.status_code == 400
        assert response.json() == {"detail": "Unknown upgrade(s): Cloaking Device"}

    def test_empty_line(self, client):
        """Test request validation rejects an empty line."""
        response = client.post("/api/ships/parse", json={"printable": ""})
        assert response.status_code == 422


class TestValidateShip:
    """Test POST /api/ships/validate."""

    def test_legal_ship(self, client):
        """Test a legal ship has no violations."""
        response = client.post("/api/ships/validate", json={"printable": PHOENIX})
        assert response.status_code == 200
        assert response.json()["violations"] == []

    def test_illegal_ship(self, client):
        """Test violations are reported in rule order."""
        response = client.post(
            "/api/ships/validate", json={"printable": "Slowpoke (snubfighter) 0 (0):1:2d6::none:"}
        )
        assert response.json()["violations"] == [
            "Speed is 1, but must be between 2 and 3",
            "Snubfighters must carry at least one weapon",
        ]

    def test_trait(self, client):
        """Test the squadron trait is applied before validating."""
        line = "Laden (snubfighter) 0 (0):2:2d6:2d6:none:Fast,Maneuverable,Repair,Shields"
        without = client.post("/api/ships/validate", json={"printable": line}).json()
        assert without["violations"] == ["Snubfighters may have at most 3 upgrades"]

        with_trait = client.post(
            "/api/ships/validate", json={"printable": line, "squadronTrait": "high_tech"}
        ).json()
        assert with_trait["violations"] == []
        assert with_trait["upgradeLimit"] == 4

    def test_rugged_changes_defense(self, client):
        """Test trait bonuses show in the derived stats."""
        body = client.post(
            "/api/ships/validate", json={"printable": PHOENIX, "squadronTrait": "RUGGED"}
        ).json()
        assert body["defense"] == "2d6+2"

    def test_unknown_trait(self, client):
        """Test traits outside the closed set are rejected."""
        response = client.post(
            "/api/ships/validate", json={"printable": PHOENIX, "squadronTrait": "sneaky"}
        )
        assert response.status_code == 400
        assert response.json() == {"detail": "Unknown squadron trait: sneaky"}

    def test_unknown_ship_type(self, client):
        """Test a ship of unknown type is reported, not rejected."""
        response = client.post(
            "/api/ships/validate", json={"printable": "Mystery (frigate) 0 (0):2::2d8:none:"}
        )
        assert response.status_code == 200
        body = response.json()
        assert body["shipType"] == "FRIGATE"
        assert body["defense"] is None
        assert body["upgradeLimit"] is None
        assert body["violations"] == ["Unknown ship type: FRIGATE"]


class TestValidateSquadron:
    """Test POST /api/squadrons/validate."""

    def test_legal_squadron(self, client):
        """Test a legal squadron."""
        response = client.post("/api/squadrons/validate", json={"ships": [PHOENIX] * 4})
        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is True
        assert body["totalCost"] == 52
        assert body["squadronViolations"] == []
        assert len(body["ships"]) == 4

    def test_squadron_violations(self, client):
        """Test squadron-wide findings make the squadron invalid."""
        body = client.post("/api/squadrons/validate", json={"ships": [PHOENIX] * 3}).json()
        assert body["valid"] is False
        assert body["squadronViolations"] == ["A squadron must contain at least four ships"]
        assert all(ship["violations"] == [] for ship in body["ships"])

    def test_rarity_on_each_carrier(self, client):
        """Test rarity findings are attached to every carrier."""
        ghost = "Ghost (snubfighter) 0 (0):2:2d6:2d6:none:Stealth"
        body = client.post("/api/squadrons/validate", json={"ships": [ghost] * 4}).json()
        assert body["valid"] is False
        assert body["squadronViolations"] == []
        for ship in body["ships"]:
            assert ship["violations"] == ["At most three ships can carry the Stealth upgrade"]

    def test_ship_rules_and_rarity_together(self, client):
        """Test ship violations come before rarity violations."""
        slow_ghost = "Ghost (snubfighter) 0 (0):1:2d6:2d6:none:Stealth"
        body = client.post("/api/squadrons/validate", json={"ships": [slow_ghost] * 4}).json()
        assert body["ships"][0]["violations"] == [
            "Speed is 1, but must be between 2 and 3",
            "At most three ships can carry the Stealth upgrade",
        ]

    def test_empty_squadron(self, client):
        """Test an empty squadron is valid."""
        body = client.post("/api/squadrons/validate", json={"ships": []}).json()
        assert body == {"valid": True, "totalCost": 0, "squadronViolations": [], "ships": []}
