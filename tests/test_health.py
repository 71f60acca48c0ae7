def test_health(client):
    assert client.get("/v1/health").json() == {"status": "ok"}


def test_version(client):
    assert client.get("/v1/version").json() == {"version": "1.0.0"}


def test_metadata_routes_publish_their_schemas(client):
    paths = client.get("/openapi.json").json()["paths"]
    health = paths["/v1/health"]["get"]["responses"]["200"]["content"]["application/json"]["schema"]
    version = paths["/v1/version"]["get"]["responses"]["200"]["content"]["application/json"]["schema"]
    assert health == {"$ref": "#/components/schemas/Health"}
    assert version == {"$ref": "#/components/schemas/Version"}
