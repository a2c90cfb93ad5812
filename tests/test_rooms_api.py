from bson import ObjectId

from aircnc_api.app.core.config import settings


ROOM = {
    "host": {"email": "host@example.com", "name": "Hoster"},
    "title": "Cabin by the lake",
    "location": "Lakeside",
    "price": "120.5",
    "images": ["a.jpg"],
}


def _create(client, auth, room=ROOM):
    response = client.post("/rooms", json=room, headers=auth("host@example.com"))
    assert response.status_code == 200
    return response.json()["insertedId"]


def test_create_and_read_room(client, auth):
    room_id = _create(client, auth)

    room = client.get(f"/room/{room_id}").json()
    assert room["_id"] == room_id
    assert room["price"] == 120.5
    assert room["booked"] is False
    assert room["images"] == ["a.jpg"]
    assert room["host"]["email"] == "host@example.com"

    assert [r["_id"] for r in client.get("/rooms").json()] == [room_id]


def test_non_numeric_price_is_rejected(client, database, auth):
    response = client.post("/rooms", json={**ROOM, "price": "cheap"}, headers=auth())
    assert response.status_code == 400
    assert response.json()["error"] is True
    assert database["rooms"].documents == []


def test_room_requires_host_email(client, auth):
    response = client.post("/rooms", json={"title": "No host"}, headers=auth())
    assert response.status_code == 400


def test_unknown_room_is_null(client):
    response = client.get(f"/room/{ObjectId()}")
    assert response.status_code == 200
    assert response.json() is None


def test_malformed_room_id_is_bad_request(client, database):
    for method, path in [
        ("get", "/room/not-an-id"),
        ("delete", "/rooms/not-an-id"),
    ]:
        response = client.request(method, path)
        assert response.status_code == 400
        assert response.json() == {"error": True, "message": "invalid identifier: not-an-id"}
    response = client.patch("/rooms/status/xyz", json={"status": True})
    assert response.status_code == 400
    assert database.calls == []


def test_patch_status_sets_booked_flag(client, auth):
    room_id = _create(client, auth)
    response = client.patch(f"/rooms/status/{room_id}", json={"status": True})
    assert response.status_code == 200
    assert response.json()["modifiedCount"] == 1
    assert client.get(f"/room/{room_id}").json()["booked"] is True


def test_patch_status_never_creates_a_room(client, database):
    response = client.patch(f"/rooms/status/{ObjectId()}", json={"status": True})
    assert response.json()["matchedCount"] == 0
    assert database["rooms"].documents == []


def test_put_merges_fields(client, auth):
    room_id = _create(client, auth)
    response = client.put(f"/rooms/{room_id}", json={"title": "Renamed", "price": 99}, headers=auth())
    assert response.status_code == 200
    assert response.json()["matchedCount"] == 1

    room = client.get(f"/room/{room_id}").json()
    assert room["title"] == "Renamed"
    assert room["price"] == 99
    assert room["location"] == "Lakeside"


def test_put_upserts_unknown_id(client, database, auth):
    room_id = str(ObjectId())
    response = client.put(f"/rooms/{room_id}", json={"title": "New", "host": {"email": "host@example.com"}}, headers=auth())
    assert response.json()["upsertedId"] == room_id
    assert client.get(f"/room/{room_id}").json()["title"] == "New"


def test_delete_room(client, auth):
    room_id = _create(client, auth)
    assert client.delete(f"/rooms/{room_id}").json() == {"acknowledged": True, "deletedCount": 1}
    assert client.get("/rooms").json() == []


def test_delete_unknown_room_reports_zero(client):
    response = client.delete(f"/rooms/{ObjectId()}")
    assert response.status_code == 200
    assert response.json()["deletedCount"] == 0


def test_room_mutations_are_open_by_default(client, auth):
    room_id = _create(client, auth)
    assert client.put(f"/rooms/{room_id}", json={"title": "x"}, headers=auth("stranger@example.com")).status_code == 200
    assert client.delete(f"/rooms/{room_id}").status_code == 200


def test_ownership_enforced_when_enabled(client, auth, monkeypatch):
    room_id = _create(client, auth)
    monkeypatch.setattr(settings, "enforce_room_ownership", True)

    assert client.delete(f"/rooms/{room_id}").status_code == 401
    assert client.patch(f"/rooms/status/{room_id}", json={"status": True}, headers=auth("stranger@example.com")).status_code == 403
    assert client.put(f"/rooms/{room_id}", json={"title": "x"}, headers=auth("stranger@example.com")).status_code == 403

    assert client.patch(f"/rooms/status/{room_id}", json={"status": True}, headers=auth("host@example.com")).status_code == 200
    response = client.delete(f"/rooms/{room_id}", headers=auth("host@example.com"))
    assert response.json()["deletedCount"] == 1


def test_boolean_price_is_rejected(client, database, auth):
    response = client.post("/rooms", json={**ROOM, "price": True}, headers=auth())
    assert response.status_code == 400
    assert database["rooms"].documents == []


def test_explicit_null_fields_are_stored(client, database, auth):
    room_id = _create(client, auth, {**ROOM, "image": None, "note": None})
    stored = database["rooms"].documents[0]
    assert str(stored["_id"]) == room_id
    assert "image" in stored and stored["image"] is None
    assert "note" in stored and stored["note"] is None
    assert stored["booked"] is False
