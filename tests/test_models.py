"""Model registry endpoints: listing, registration and the missing-field rule."""
import pytest


def test_list_models_empty(client):
    resp = client.get("/api/models")
    assert resp.status_code == 200
    assert resp.json() == []


def test_register_model(client, sample_model):
    resp = client.post("/api/models", json=sample_model)
    assert resp.status_code == 201
    assert resp.json() == {
        "id": 1,
        "name": "churn-xgb",
        "version": "1.0.0",
        "artifactUrl": "s3://models/churn/1.0.0.pkl",
        "status": "registered",
    }


def test_register_two_models_in_order(client, sample_model):
    client.post("/api/models", json=sample_model)
    second = client.post(
        "/api/models",
        json={"name": "fraud-lgbm", "version": "2.3.1", "artifactUrl": "s3://models/fraud/2.3.1.bin"},
    )
    assert second.status_code == 201
    assert second.json()["id"] == 2

    models = client.get("/api/models").json()
    assert len(models) == 2
    assert [m["name"] for m in models] == ["churn-xgb", "fraud-lgbm"]
    assert [m["id"] for m in models] == [1, 2]


def test_id_is_previous_count_plus_one(client, sample_model):
    for expected in range(1, 6):
        previous = len(client.get("/api/models").json())
        resp = client.post("/api/models", json=sample_model)
        assert resp.json()["id"] == previous + 1 == expected


def test_extra_fields_ignored(client, sample_model):
    resp = client.post("/api/models", json={**sample_model, "status": "deployed", "id": 99})
    assert resp.status_code == 201
    assert resp.json()["id"] == 1
    assert resp.json()["status"] == "registered"


@pytest.mark.parametrize("field", ["name", "version", "artifactUrl"])
@pytest.mark.parametrize("mode", ["absent", "null", "empty"])
def test_register_missing_field(client, sample_model, field, mode):
    payload = dict(sample_model)
    if mode == "absent":
        del payload[field]
    elif mode == "null":
        payload[field] = None
    else:
        payload[field] = ""

    resp = client.post("/api/models", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing fields"}
    assert client.get("/api/models").json() == []


def test_register_without_body(client):
    resp = client.post("/api/models")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing fields"}


def test_failed_registration_does_not_consume_id(client, sample_model):
    client.post("/api/models", json=sample_model)
    client.post("/api/models", json={"name": "broken"})
    resp = client.post("/api/models", json=sample_model)
    assert resp.json()["id"] == 2
    assert len(client.get("/api/models").json()) == 2


def test_register_invalid_json(client):
    resp = client.post(
        "/api/models",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 422
    assert resp.json()["error"] == "Validation error"
    assert client.get("/api/models").json() == []


def test_registrations_visible_in_store(client, store, sample_model):
    client.post("/api/models", json=sample_model)
    assert len(store.models) == 1
    assert store.models.list()[0].artifact_url == sample_model["artifactUrl"]


def test_snake_case_artifact_url_is_missing(client):
    resp = client.post("/api/models", json={"name": "a", "version": "1", "artifact_url": "s3://x"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing fields"}
    assert client.get("/api/models").json() == []


def test_non_string_values_stored_as_sent(client):
    resp = client.post("/api/models", json={"name": 5, "version": 1.5, "artifactUrl": "s3://x"})
    assert resp.status_code == 201
    assert resp.json()["name"] == 5
    assert resp.json()["version"] == 1.5
    assert client.get("/api/models").json()[0]["name"] == 5


@pytest.mark.parametrize("value", [0, False])
def test_falsy_non_empty_values_are_present(client, value):
    resp = client.post("/api/models", json={"name": value, "version": "1", "artifactUrl": "s3://x"})
    assert resp.status_code == 201
    assert resp.json()["name"] == value
