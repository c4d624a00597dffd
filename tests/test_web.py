from __future__ import annotations

import pytest

from web import create_app


@pytest.fixture()
def client():
    app = create_app({"TESTING": True})
    return app.test_client()


def test_nim_endpoint(client):
    r = client.post("/api/nim", json={"heap": 5, "depth": 6})
    assert r.status_code == 200
    data = r.get_json()
    assert data["move"] == 1
    assert data["value"] == 0
    assert data["nodes"] > 1


def test_tree_endpoint(client):
    r = client.post("/api/tree", json={"depth": 4})
    assert r.status_code == 200
    assert r.get_json()["move"] == "0"
    assert r.get_json()["value"] == 4

    r = client.post("/api/tree", json={"depth": 0})
    data = r.get_json()
    assert data["move"] is None
    assert data["nodes"] == 1


def test_chess_endpoint(client):
    r = client.post("/api/chess", json={"fen": "6k1/5ppp/8/8/8/8/8/R5K1 w - - 0 1", "depth": 1})
    assert r.status_code == 200
    data = r.get_json()
    assert data["move"] == "a1a8"
    assert data["value"] == 100000


def test_chess_endpoint_defaults_to_start_position(client):
    r = client.post("/api/chess", json={"depth": 1})
    assert r.status_code == 200
    assert len(r.get_json()["move"]) == 4


@pytest.mark.parametrize(
    "path, payload",
    [
        ("/api/nim", {}),
        ("/api/nim", {"heap": "lots"}),
        ("/api/nim", {"heap": -2}),
        ("/api/nim", {"heap": 5, "depth": -1}),
        ("/api/nim", {"heap": 5, "depth": 99}),
        ("/api/nim", {"heap": 5.5}),
        ("/api/nim", [1, 2]),
        ("/api/tree", {"depth": 2.9}),
        ("/api/tree", "depth"),
        ("/api/tree", {"depth": True}),
        ("/api/chess", {"fen": "not a fen", "depth": 1}),
        ("/api/chess", {"depth": 4}),
        ("/api/chess", {"fen": 123, "depth": 1}),
    ],
)
def test_bad_requests(client, path, payload):
    r = client.post(path, json=payload)
    assert r.status_code == 400
    assert "error" in r.get_json()


def test_depth_limits_come_from_config():
    app = create_app({"MAX_DEPTH": 2})
    r = app.test_client().post("/api/tree", json={"depth": 3})
    assert r.status_code == 400


def test_integer_strings_are_accepted(client):
    r = client.post("/api/nim", json={"heap": "5", "depth": "6"})
    assert r.status_code == 200
    assert r.get_json()["move"] == 1


def test_missing_body_uses_default_depth(client):
    r = client.post("/api/tree")
    assert r.status_code == 200
    assert r.get_json()["move"] == "1"
