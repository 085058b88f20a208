import pytest
import requests

import league_analytics.sleeper_data.sleeper_api.client as client_module
from league_analytics.sleeper_data.sleeper_api import (
    SleeperApiError,
    SleeperClient,
    get_player_stats,
)


class _FakeResponse:
    def __init__(self, payload=None, *, status_code=200, text=None):
        self._payload = payload
        self.status_code = status_code
        self.text = text if text is not None else ("{}" if payload is not None else "")

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code}", response=self)

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


@pytest.fixture
def fake_get(monkeypatch):
    calls = []
    responses = []

    def _get(url, params=None, headers=None, timeout=None):
        calls.append(url)
        return responses.pop(0)

    monkeypatch.setattr(client_module.requests, "get", _get)
    return calls, responses


def test_get_json_caches_responses(fake_get, tmp_path):
    calls, responses = fake_get
    responses.append(_FakeResponse({"league_id": "1"}))
    client = SleeperClient(cache_dir=tmp_path)

    first = client.get_json("/league/1")
    second = client.get_json("/league/1")

    assert first == second == {"league_id": "1"}
    assert calls == ["https://api.sleeper.app/v1/league/1"]


def test_default_client_fetches_fresh(fake_get, tmp_path, monkeypatch):
    calls, responses = fake_get
    responses.extend([_FakeResponse({"wins": 1}), _FakeResponse({"wins": 2})])
    monkeypatch.chdir(tmp_path)
    client = SleeperClient()

    first = client.get_json("/league/1/rosters")
    second = client.get_json("/league/1/rosters")

    assert client.cache_dir is None
    assert (first, second) == ({"wins": 1}, {"wins": 2})
    assert len(calls) == 2
    assert list(tmp_path.iterdir()) == []


def test_http_error_becomes_api_error(fake_get):
    _, responses = fake_get
    responses.append(_FakeResponse(status_code=404, text="not found"))

    with pytest.raises(SleeperApiError, match="HTTP 404"):
        SleeperClient(cache_dir=None).get_json("/league/missing")


def test_empty_body_is_an_error(fake_get):
    _, responses = fake_get
    responses.append(_FakeResponse(text=""))

    with pytest.raises(SleeperApiError, match="Empty response"):
        SleeperClient(cache_dir=None).get_json("/league/1")


def test_connection_error_becomes_api_error(monkeypatch):
    def _get(*args, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(client_module.requests, "get", _get)

    with pytest.raises(SleeperApiError, match="Request failed"):
        SleeperClient(cache_dir=None).get_json("/league/1")


def test_player_stats_path(fake_get):
    calls, responses = fake_get
    responses.append(_FakeResponse({"stats": {"rec": 3}}))

    payload = get_player_stats("4034", "2024", client=SleeperClient(cache_dir=None))

    assert payload == {"stats": {"rec": 3}}
    assert calls == ["https://api.sleeper.app/v1/players/nfl/stats/2024/4034"]
