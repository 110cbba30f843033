"""Tests for query configuration loading."""

import json

from mission_control.models.scout import Query
from mission_control.scout.queries import (
    DEFAULT_QUERIES,
    load_api_key_from_config,
    load_queries,
)


class TestDefaultQueries:
    """Tests for the built-in query list."""

    def test_default_count(self):
        assert len(DEFAULT_QUERIES) == 22

    def test_defaults_are_valid_queries(self):
        for query in DEFAULT_QUERIES:
            assert isinstance(query, Query)
            assert 0 < query.weight <= 1.2
            assert query.text


class TestLoadQueries:
    """Tests for load_queries."""

    def test_missing_file_uses_defaults(self, tmp_path):
        queries = load_queries(tmp_path / "mc-config.json")
        assert queries == list(DEFAULT_QUERIES)

    def test_empty_list_uses_defaults(self, config_file):
        path = config_file(json.dumps({"scout": {"queries": []}}))
        assert load_queries(path) == list(DEFAULT_QUERIES)

    def test_empty_file_uses_defaults(self, config_file):
        path = config_file("")
        assert load_queries(path) == list(DEFAULT_QUERIES)

    def test_unparseable_file_uses_defaults(self, config_file):
        path = config_file("{not json")
        assert len(load_queries(path)) == len(DEFAULT_QUERIES)

    def test_no_scout_section_uses_defaults(self, config_file):
        path = config_file(json.dumps({"scout": "disabled", "theme": "dark"}))
        assert load_queries(path) == list(DEFAULT_QUERIES)

    def test_loads_configured_queries(self, config_file):
        path = config_file(json.dumps({
            "scout": {
                "queries": [
                    {"q": "react jobs växjö", "category": "freelance", "source": "web", "weight": 1.0},
                    {"q": "hackerone new program", "category": "bounty", "source": "hackerone", "weight": 0.9},
                ]
            }
        }))

        queries = load_queries(path)

        assert len(queries) == 2
        assert queries[0].text == "react jobs växjö"
        assert queries[1].category == "bounty"
        assert queries[1].weight == 0.9

    def test_weight_and_source_default(self, config_file):
        path = config_file(json.dumps({"scout": {"queries": [{"q": "edtech", "category": "edtech"}]}}))

        query = load_queries(path)[0]

        assert query.weight == 1.0
        assert query.source == "web"

    def test_skips_malformed_entries(self, config_file):
        path = config_file(json.dumps({
            "scout": {
                "queries": [
                    {"q": "good query", "category": "freelance"},
                    {"category": "missing text"},
                    {"q": "bad weight", "category": "x", "weight": "heavy"},
                    "not an object",
                    {"q": "another good one", "category": "bounty", "weight": 0.8},
                ]
            }
        }))

        queries = load_queries(path)

        assert [q.text for q in queries] == ["good query", "another good one"]

    def test_all_malformed_uses_defaults(self, config_file):
        path = config_file(json.dumps({"scout": {"queries": [{"category": "x"}, {"q": ""}]}}))
        assert load_queries(path) == list(DEFAULT_QUERIES)


class TestLoadApiKey:
    """Tests for reading the credential from the dashboard config."""

    def test_reads_key(self, config_file):
        path = config_file(json.dumps({"scout": {"enabled": True, "braveApiKey": "abc123"}}))
        assert load_api_key_from_config(path) == "abc123"

    def test_blank_key_is_none(self, config_file):
        path = config_file(json.dumps({"scout": {"braveApiKey": ""}}))
        assert load_api_key_from_config(path) is None

    def test_missing_file(self, tmp_path):
        assert load_api_key_from_config(tmp_path / "nope.json") is None
