import uuid
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from roster.api.rest_api import RosterRestAPI
from roster.core.exceptions import StorageCorruptionError

from conftest import class_data, parent_data, student_data, teacher_data


@pytest.fixture
def client(services):
    return TestClient(RosterRestAPI(services).app, raise_server_exceptions=False)


@pytest.fixture
def teacher_id(client):
    return client.post("/teachers", json=teacher_data()).json()["id"]


@pytest.fixture
def class_id(client, teacher_id):
    return client.post("/classes", json=class_data(teacher=teacher_id)).json()["id"]


@pytest.fixture
def parent_id(client):
    return client.post("/parents", json=parent_data()).json()["id"]


@pytest.fixture
def student_id(client, class_id, parent_id):
    return client.post("/students", json=student_data(**{"class": class_id, "parents": [parent_id]})).json()["id"]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class TestCrud:
    def test_create_returns_the_stored_record(self, client, teacher_id):
        response = client.post("/classes", json=class_data(teacher=teacher_id))
        assert response.status_code == 201
        body = response.json()
        assert body["code"] == "1B-M"
        assert client.get(f"/classes/{body['id']}").json() == body

    def test_list(self, client, class_id):
        response = client.get("/classes")
        assert response.status_code == 200
        assert [record["id"] for record in response.json()] == [class_id]

    def test_update_applies_only_sent_fields(self, client, class_id, teacher_id):
        response = client.put(f"/classes/{class_id}", json={"code": "2C-T"})
        assert response.status_code == 200
        assert response.json()["teacher"] == teacher_id

    def test_update_with_null_clears_the_field(self, client, class_id):
        response = client.put(f"/classes/{class_id}", json={"teacher": None})
        assert response.json()["teacher"] is None

    def test_delete(self, client, class_id):
        assert client.delete(f"/classes/{class_id}").status_code == 204
        assert client.get("/classes").json() == []

    def test_student_round_trip_uses_camel_case(self, client, student_id, class_id):
        body = client.get(f"/students/{student_id}").json()
        assert body["class"] == class_id
        assert body["bloodType"] == "A+"
        assert "class_" not in body


class TestRelations:
    def test_class_teacher_and_students(self, client, class_id, teacher_id, student_id):
        assert client.get(f"/classes/{class_id}/teacher").json()["id"] == teacher_id
        assert [s["id"] for s in client.get(f"/classes/{class_id}/students").json()] == [student_id]

    def test_class_without_teacher(self, client, class_id):
        client.put(f"/classes/{class_id}", json={"teacher": None})
        response = client.get(f"/classes/{class_id}/teacher")
        assert response.status_code == 404
        assert response.json()["code"] == "DEPENDENCY_LOCK"

    def test_student_class_and_parents(self, client, student_id, class_id, parent_id):
        assert client.get(f"/students/{student_id}/class").json()["id"] == class_id
        assert [p["id"] for p in client.get(f"/students/{student_id}/parents").json()] == [parent_id]

    def test_teacher_classes(self, client, teacher_id, class_id):
        assert [c["id"] for c in client.get(f"/teachers/{teacher_id}/classes").json()] == [class_id]

    def test_parent_students(self, client, parent_id, student_id):
        assert [s["id"] for s in client.get(f"/parents/{parent_id}/students").json()] == [student_id]


class TestErrors:
    def test_not_found(self, client):
        missing = str(uuid.uuid4())
        response = client.get(f"/classes/{missing}")
        assert response.status_code == 404
        assert response.json() == {
            "code": "NOT_FOUND",
            "message": f'Class with locator "{missing}" could not be found',
            "name": "ClassError",
        }

    def test_conflict(self, client, class_id):
        response = client.post("/classes", json=class_data(teacher=None))
        assert response.status_code == 409
        assert response.json()["code"] == "CONFLICT"
        assert response.json()["name"] == "ClassError"

    def test_unknown_reference(self, client):
        response = client.post("/classes", json=class_data())
        assert response.status_code == 404
        assert response.json()["name"] == "TeacherError"

    def test_remove_locked_by_dependents(self, client, teacher_id, class_id):
        response = client.delete(f"/teachers/{teacher_id}")
        assert response.status_code == 403
        assert response.json()["code"] == "DEPENDENCY_LOCK"
        assert response.json()["name"] == "TeacherError"

    def test_invalid_body(self, client):
        response = client.post("/classes", json={"code": "invalid", "teacher": None})
        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["errors"][0]["path"] == "code"

    def test_unknown_field_in_update(self, client, class_id):
        response = client.put(f"/classes/{class_id}", json={"room": "B12"})
        assert response.status_code == 422

    def test_storage_corruption(self, services):
        services.classes.list = MagicMock(side_effect=StorageCorruptionError("class.json", "not a list"))
        client = TestClient(RosterRestAPI(services).app, raise_server_exceptions=False)

        response = client.get("/classes")
        assert response.status_code == 500
        assert response.json()["code"] == "STORAGE_CORRUPTION"

    def test_unexpected_error(self, services):
        services.teachers.list = MagicMock(side_effect=RuntimeError("disk on fire"))
        client = TestClient(RosterRestAPI(services).app, raise_server_exceptions=False)

        response = client.get("/teachers")
        assert response.status_code == 500
        assert response.json() == {"code": "UNKNOWN_ERROR", "message": "disk on fire", "name": "RuntimeError"}

    def test_create_refuses_a_client_id(self, client, class_id):
        response = client.post("/classes", json={"id": class_id, "code": "4D-N", "teacher": None})
        assert response.status_code == 422
        assert [c["code"] for c in client.get("/classes").json()] == ["1B-M"]
