def test_health(client):
    resp = client.get("/api/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["timestamp"]


def test_unknown_route_uses_error_shape(client):
    resp = client.get("/api/nothing-here")

    assert resp.status_code == 404
    assert "error" in resp.json()
