from __future__ import annotations

from web import create_app


def main() -> None:
    app = create_app()
    client = app.test_client()

    # nim from a heap of five
    resp = client.post("/api/nim", json={"heap": 5, "depth": 6})
    assert resp.status_code == 200, resp.data
    data = resp.get_json()
    assert data["move"] == 1, data

    # a shallow chess search from the initial position
    resp = client.post("/api/chess", json={"depth": 2})
    assert resp.status_code == 200, resp.data
    data = resp.get_json()
    assert "move" in data
    print("Smoke OK. Engine chose:", data["move"])


if __name__ == "__main__":
    main()
