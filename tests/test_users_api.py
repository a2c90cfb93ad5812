def test_unknown_user_is_null(client):
    response = client.get("/users/nobody@example.com")
    assert response.status_code == 200
    assert response.json() is None


def test_upsert_creates_then_merges(client, database):
    first = client.put("/users/guest@example.com", json={"role": "guest", "name": "G"})
    assert first.status_code == 200
    assert first.json()["upsertedCount"] == 1
    assert first.json()["upsertedId"]

    second = client.put("/users/guest@example.com", json={"role": "host"})
    assert second.json()["matchedCount"] == 1
    assert second.json()["upsertedId"] is None

    assert len(database["users"].documents) == 1
    user = client.get("/users/guest@example.com").json()
    assert user["role"] == "host"
    assert user["name"] == "G"
    assert user["email"] == "guest@example.com"
    assert isinstance(user["_id"], str)


def test_path_email_wins_over_body(client, database):
    client.put("/users/guest@example.com", json={"email": "spoof@example.com", "role": "guest"})
    assert database["users"].documents[0]["email"] == "guest@example.com"
