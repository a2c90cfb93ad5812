import asyncio

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from aircnc_api.app.api.deps import get_database
from aircnc_api.app.core.errors import InvalidIdentifierError, PersistenceError
from aircnc_api.app.main import app
from aircnc_api.app.repositories import BookingRepository, RoomRepository, UserRepository


class DownCollection:
    async def find_one(self, query):
        raise ServerSelectionTimeoutError("no servers")

    def find(self, query):
        raise ServerSelectionTimeoutError("no servers")

    async def insert_one(self, document):
        raise ServerSelectionTimeoutError("no servers")


class DownDatabase(dict):
    def __missing__(self, name):
        return DownCollection()


def test_driver_errors_become_persistence_errors():
    rooms = RoomRepository(DownDatabase())
    with pytest.raises(PersistenceError):
        asyncio.run(rooms.list_all())
    with pytest.raises(PersistenceError):
        asyncio.run(rooms.insert_one({"title": "x"}))


def test_persistence_failure_is_generic_500(database):
    app.dependency_overrides[get_database] = lambda: DownDatabase()
    try:
        response = TestClient(app).get("/rooms")
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 500
    assert response.json() == {"error": True, "message": "internal server error"}


def test_unexpected_errors_become_generic_500():
    class Exploding(dict):
        def __missing__(self, name):
            raise KeyError("boom")

    app.dependency_overrides[get_database] = lambda: Exploding()
    try:
        response = TestClient(app, raise_server_exceptions=False).get("/users/a@b.c")
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 500
    assert "boom" not in response.text


def test_malformed_id_is_translated(database):
    with pytest.raises(InvalidIdentifierError):
        asyncio.run(BookingRepository(database).delete_one_by_id("nope"))


def test_client_supplied_id_is_ignored(database):
    result = asyncio.run(RoomRepository(database).insert_one({"_id": "chosen", "title": "x"}))
    assert result.insertedId != "chosen"
    assert isinstance(database["rooms"].documents[0]["_id"], ObjectId)


def test_empty_update_is_a_no_op(database):
    result = asyncio.run(RoomRepository(database).update_by_id(str(ObjectId()), {}, upsert=True))
    assert result.matchedCount == 0
    assert database["rooms"].calls == []


def test_user_upsert_keeps_single_record(database):
    users = UserRepository(database)
    asyncio.run(users.upsert_by_email("a@b.c", {"role": "guest"}))
    asyncio.run(users.upsert_by_email("a@b.c", {"role": "host"}))
    assert [(u["email"], u["role"]) for u in database["users"].documents] == [("a@b.c", "host")]
