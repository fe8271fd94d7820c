def test_healthcheck(client):
    response = client.get("/api/v1/healthcheck")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["status"] == "OK"
    assert body["data"]["database"] == "connected"


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/v1/nothing-here")

    assert response.status_code == 404
    assert response.json()["success"] is False
