from datetime import date

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.core.config import settings
from app.main import app
from app.models.student import calculate_age
from app.repositories.student import SqlAlchemyStudentRepository

URL = "/api/v1/student/"


def test_health_check(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["docs"] == "/docs"


def test_startup_seeds_two_students(client):
    r = client.get(URL)
    assert r.status_code == 200
    data = r.json()
    assert [s["name"] for s in data] == ["Mariam", "Alex"]
    assert [s["id"] for s in data] == [1, 2]
    assert data[0] == {
        "id": 1,
        "name": "Mariam",
        "email": "mariam.jamal@gmail.com",
        "dob": "2000-01-05",
        "age": calculate_age(date(2000, 1, 5)),
    }


def test_create_student_gets_next_id(client):
    before = client.get(URL).json()

    r = client.post(URL, json={"name": "Sam", "email": "sam@x.com", "dob": "1999-03-01"})
    assert r.status_code == 200
    assert r.content == b""

    after = client.get(URL).json()
    assert len(after) == len(before) + 1
    sam = after[-1]
    assert sam["id"] == max(s["id"] for s in before) + 1
    assert sam["name"] == "Sam"
    assert sam["dob"] == "1999-03-01"
    assert sam["age"] == calculate_age(date(1999, 3, 1))


def test_client_supplied_id_is_ignored(client):
    r = client.post(URL, json={"id": 99, "name": "Sam", "email": "sam@x.com", "dob": "1999-03-01"})
    assert r.status_code == 200
    ids = [s["id"] for s in client.get(URL).json()]
    assert 99 not in ids
    assert ids[-1] == 3


def test_delete_unknown_id_is_a_server_error(client):
    before = client.get(URL).json()

    r = client.delete(URL + "999")
    assert r.status_code == 500
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "ILLEGAL_STATE"
    assert body["error"]["message"] == "student with id 999 does not exist"

    assert client.get(URL).json() == before


def test_delete_existing_then_repeat(client):
    r = client.delete(URL + "1")
    assert r.status_code == 200
    assert r.content == b""

    ids = [s["id"] for s in client.get(URL).json()]
    assert ids == [2]

    r = client.delete(URL + "1")
    assert r.status_code == 500
    assert r.json()["error"]["message"] == "student with id 1 does not exist"


def test_malformed_body_is_rejected(client):
    r = client.post(URL, json={"name": "Sam", "email": "sam@x.com", "dob": "not-a-date"})
    assert r.status_code == 422
    body = r.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert "dob" in body["error"]["details"]
    assert len(client.get(URL).json()) == 2


def test_delete_id_out_of_range_is_rejected(client):
    r = client.delete(URL + str(2**63))
    assert r.status_code == 422
    body = r.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert "path.student_id" in body["error"]["details"]
    assert len(client.get(URL).json()) == 2


def test_store_errors_surface_as_internal_server_error(monkeypatch):
    def broken_find_all(self):
        raise OperationalError("SELECT * FROM students", {}, Exception("connection refused"))

    monkeypatch.setattr(SqlAlchemyStudentRepository, "find_all", broken_find_all)

    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.get(URL)

    assert r.status_code == 500
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "INTERNAL_SERVER_ERROR"
    assert body["error"]["details"] is None


def test_startup_without_seeding_has_no_students(monkeypatch):
    monkeypatch.setattr(settings, "SEED_ON_STARTUP", False)

    with TestClient(app) as c:
        r = c.get(URL)

    assert r.status_code == 200
    assert r.json() == []
