"""Tests for the /search endpoint against an in-memory library."""

from fpdb.api.dependencies import get_field_registry
from fpdb.core.field_registry import FieldRegistry, read_fields_config
from fpdb.main import app
from fpdb.services.search_service import SearchService


def search(client, **params) -> list[dict]:
    response = client.get("/search", params=params)
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    return response.json()


def titles(results: list[dict]) -> list[str]:
    return [result["title"] for result in results]


def test_no_filters_returns_empty_list(client):
    assert search(client) == []
    assert search(client, fields="title", limit="2", any="true") == []


def test_unknown_parameters_are_not_filters(client):
    assert search(client, bogus="alien") == []


def test_substring_filter(client):
    results = search(client, title="hominid")

    assert titles(results) == ["Alien Hominid"]


def test_default_output_has_every_field(client, registry):
    (result,) = search(client, title="hominid")

    assert list(result) == registry.names()
    assert result["tags"] == ["Action", "Shooter"]
    assert result["zipped"] is True


def test_percent_matches_literally(client):
    assert titles(search(client, title="%")) == ["100% Orange Juice"]


def test_underscore_matches_literally(client):
    assert titles(search(client, title="_", fields="title")) == ["Snake_Game"]


def test_caret_matches_literally(client):
    assert titles(search(client, developer="^", fields="title")) == ["Caret ^ Quest"]


def test_two_values_and(client):
    assert search(client, title="alien,bloons") == []
    assert titles(search(client, title="alien,hominid", fields="title")) == ["Alien Hominid"]


def test_two_values_any(client):
    results = search(client, title="alien,bloons", any="true", fields="title")

    assert sorted(titles(results)) == ["Alien Hominid", "Bloons Tower Defense"]


def test_filters_across_fields(client):
    assert titles(search(client, platform="flash", developer="kiwi", fields="title")) == [
        "Bloons Tower Defense"
    ]
    results = search(client, platform="html5", developer="kiwi", any="TRUE", fields="title")
    assert sorted(titles(results)) == ["100% Orange Juice", "Bloons Tower Defense"]


def test_smart_search(client):
    assert titles(search(client, smartSearch="behemoth", fields="title")) == ["Alien Hominid"]
    assert titles(search(client, smartSearch="retro", fields="title")) == ["Snake_Game"]
    assert search(client, smartSearch="kiwi,behemoth") == []

    results = search(client, smartSearch="kiwi,behemoth", any="true", fields="title")
    assert sorted(titles(results)) == ["Alien Hominid", "Bloons Tower Defense"]


def test_tags_all(client):
    assert titles(search(client, tagsStr="action,shooter", fields="title")) == ["Alien Hominid"]


def test_tags_any(client):
    results = search(client, tagsStr="shooter,puzzle", any="true", fields="title")

    assert sorted(titles(results)) == ["Alien Hominid", "Caret ^ Quest", "Snake_Game"]


def test_tags_must_match_whole_tag(client):
    assert search(client, tagsStr="tower") == []


def test_blocklist_filter(client):
    assert titles(search(client, platform="html5", fields="title")) == ["100% Orange Juice"]
    assert search(client, platform="html5", filter="true") == []
    assert titles(search(client, platform="html5", filter="false", fields="title")) == [
        "100% Orange Juice"
    ]


def test_requested_fields_only(client):
    results = search(client, library="arcade", fields="title,platform", limit="2")

    assert len(results) == 2
    for result in results:
        assert list(result) == ["title", "platform"]


def test_requested_fields_ignore_unknown(client):
    results = search(client, title="hominid", fields="platform,nope,tags")

    assert results == [{"platform": "Flash", "tags": ["Action", "Shooter"]}]


def test_typed_values(client):
    results = search(client, title="orange", fields="zipped,tags,title")

    assert results == [
        {"zipped": True, "tags": ["Board Game", "Extreme"], "title": "100% Orange Juice"}
    ]
    assert search(client, title="untagged", fields="tags,zipped") == [
        {"tags": [""], "zipped": False}
    ]


def test_limit_bounded_by_ceiling(client):
    assert len(search(client, library="arcade", limit="5")) == 3
    assert len(search(client, library="arcade", limit="2")) == 2
    assert len(search(client, library="arcade", limit="nonsense")) == 3


def test_join_field(client):
    results = search(client, overrideTitle="classic", fields="id,overrideTitle")

    assert results == [{"id": "g2", "overrideTitle": "Bloons TD Classic"}]


def test_join_field_falls_back_without_override_row(client):
    results = search(client, title="hominid", fields="overrideTitle")

    assert results == [{"overrideTitle": "Alien Hominid"}]


def test_join_elision_keeps_results(session, registry, test_settings):
    unlimited = test_settings.model_copy(update={"SEARCH_LIMIT": -1})
    service = SearchService(session, registry, unlimited)
    params = {"library": "arcade,theatre", "any": "true", "fields": "id,title,tags"}

    plain = service.search(params)
    joined = service.search(params, force_join=True)

    assert len(plain) == 6
    assert sorted(plain, key=lambda r: r["id"]) == sorted(joined, key=lambda r: r["id"])


def test_query_error_is_server_error(client):
    broken = FieldRegistry.from_config(
        [
            {"name": "title", "sourceExpression": "game.no_such_column"},
            {"name": "tags", "sourceExpression": "game.tagsStr", "type": "array"},
        ]
    )
    app.dependency_overrides[get_field_registry] = lambda: broken

    response = client.get("/search", params={"title": "x"})

    assert response.status_code == 500
    assert response.content == b""


def test_missing_tags_field_is_server_error(client):
    no_tags = FieldRegistry.from_config(
        [field for field in read_fields_config(None) if field["name"] != "tags"]
    )
    app.dependency_overrides[get_field_registry] = lambda: no_tags

    response = client.get("/search", params={"title": "x"})

    assert response.status_code == 500


def test_missing_tags_field_still_answers_empty_request(client):
    title_only = FieldRegistry.from_config([{"name": "title", "sourceExpression": "game.title"}])
    app.dependency_overrides[get_field_registry] = lambda: title_only

    assert search(client) == []


def test_zipped_filters_on_rendered_value(client):
    results = search(client, zipped="true", fields="id")

    assert sorted(result["id"] for result in results) == ["g1", "g3"]
    results = search(client, zipped="false", library="theatre", fields="title")
    assert sorted(titles(results)) == ["Snake_Game", "Untagged Thing"]
