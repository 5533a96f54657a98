"""Tests for the lookup and health endpoints and shared response headers."""

from fpdb.api.dependencies import get_field_registry
from fpdb.core.field_registry import FieldRegistry
from fpdb.main import app


def test_platforms(client):
    response = client.get("/platforms")

    assert response.status_code == 200
    assert sorted(response.json()) == ["Flash", "HTML5", "Java", "Shockwave"]


def test_additional_apps(client):
    response = client.get("/addapps", params={"id": "g1"})

    assert response.status_code == 200
    assert response.json() == [
        {
            "id": "a1",
            "name": "Manual",
            "applicationPath": "manual.html",
            "launchCommand": "http://example.com/manual.html",
            "runBefore": False,
        }
    ]


def test_additional_apps_without_id(client):
    assert client.get("/addapps").json() == []
    assert client.get("/addapps", params={"id": "g2"}).json() == []


def test_stats(client):
    stats = client.get("/stats").json()

    assert {s["name"]: s["count"] for s in stats["libraryTotals"]} == {"arcade": 4, "theatre": 2}
    assert {s["name"]: s["count"] for s in stats["formatTotals"]} == {"gameZip": 2, "legacy": 4}
    assert {s["name"]: s["count"] for s in stats["platformTotals"]} == {
        "Flash": 3,
        "HTML5": 1,
        "Java": 1,
        "Shockwave": 1,
    }


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_cors_headers(client):
    response = client.get("/platforms", headers={"Origin": "http://example.com"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_shared_headers_without_origin(client):
    for response in (client.get("/platforms"), client.get("/search", params={"title": "x"})):
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-allow-headers"] == "Content-Type"


def test_shared_headers_on_server_error(client):
    broken = FieldRegistry.from_config(
        [
            {"name": "title", "sourceExpression": "game.no_such_column"},
            {"name": "tags", "sourceExpression": "game.tagsStr", "type": "array"},
        ]
    )
    app.dependency_overrides[get_field_registry] = lambda: broken

    response = client.get("/search", params={"title": "x"})

    assert response.status_code == 500
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-headers"] == "Content-Type"
