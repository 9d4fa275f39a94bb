"""Unit tests for course routes."""

import pytest
from fastapi.testclient import TestClient

from registrar.bootstrap import Registrar

ADMIN = {"X-Username": "admin"}
STUDENT = {"X-Username": "alice"}


@pytest.mark.unit
class TestListCourses:
    """Tests for GET /api/v1/courses."""

    def test_list_courses(self, client: TestClient) -> None:
        response = client.get("/api/v1/courses")

        assert response.status_code == 200
        data = response.json()["data"]
        assert [c["code"] for c in data] == ["CSCI-101", "CSCI-201", "MATH-121"]
        assert data[0]["summary"] == "CSCI-101 - Intro to Programming (Seats: 0/40)"

    def test_search_courses(self, client: TestClient) -> None:
        response = client.get("/api/v1/courses", params={"q": "calc"})

        assert [c["code"] for c in response.json()["data"]] == ["MATH-121"]

    def test_search_no_match(self, client: TestClient) -> None:
        response = client.get("/api/v1/courses", params={"q": "biology"})

        assert response.status_code == 200
        assert response.json()["data"] == []


@pytest.mark.unit
class TestGetCourse:
    """Tests for GET /api/v1/courses/{code}."""

    def test_get_course_any_case(self, client: TestClient) -> None:
        response = client.get("/api/v1/courses/csci-201")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["code"] == "CSCI-201"
        assert data["prerequisites"] == ["CSCI-101"]

    def test_get_course_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/courses/BIO-999")

        assert response.status_code == 404
        assert response.json()["error"] == "Course not found"


@pytest.mark.unit
class TestUpsertCourse:
    """Tests for PUT /api/v1/courses/{code}."""

    def test_create_course(self, client: TestClient) -> None:
        response = client.put(
            "/api/v1/courses/PHYS-101",
            json={"title": "Mechanics", "department": "Physics", "capacity": 25},
            headers=ADMIN,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["code"] == "PHYS-101"
        assert data["capacity"] == 25
        assert data["enrolled"] == 0
        assert data["credits"] == 3

    def test_replace_course(self, client: TestClient, seeded: Registrar) -> None:
        response = client.put(
            "/api/v1/courses/math-121",
            json={"title": "Calculus I (Honors)", "department": "Math", "capacity": 20},
            headers=ADMIN,
        )

        assert response.status_code == 200
        assert len(seeded.catalog.list()) == 3
        assert seeded.catalog.get("MATH-121").title == "Calculus I (Honors)"

    def test_self_prerequisite_rejected(self, client: TestClient) -> None:
        response = client.put(
            "/api/v1/courses/PHYS-201",
            json={"title": "Waves", "prerequisites": ["phys-201"]},
            headers=ADMIN,
        )

        assert response.status_code == 400
        assert "own prerequisite" in response.json()["error"]

    def test_requires_admin(self, client: TestClient) -> None:
        response = client.put("/api/v1/courses/PHYS-101", json={"title": "x"}, headers=STUDENT)

        assert response.status_code == 403
        assert response.json()["error"] == "alice (student) may not manage courses."

    def test_requires_actor(self, client: TestClient) -> None:
        response = client.put("/api/v1/courses/PHYS-101", json={"title": "x"})

        assert response.status_code == 403
        assert response.json()["error"] == "Login required."

    def test_unknown_actor(self, client: TestClient) -> None:
        response = client.put(
            "/api/v1/courses/PHYS-101", json={"title": "x"}, headers={"X-Username": "ghost"}
        )

        assert response.status_code == 403

    def test_invalid_body(self, client: TestClient) -> None:
        response = client.put(
            "/api/v1/courses/PHYS-101", json={"capacity": "many"}, headers=ADMIN
        )

        assert response.status_code == 422


@pytest.mark.unit
class TestDeleteCourse:
    """Tests for DELETE /api/v1/courses/{code}."""

    def test_delete_course(self, client: TestClient, seeded: Registrar) -> None:
        response = client.delete("/api/v1/courses/MATH-121", headers=ADMIN)

        assert response.status_code == 204
        assert seeded.catalog.get("MATH-121") is None

    def test_delete_not_found(self, client: TestClient) -> None:
        response = client.delete("/api/v1/courses/BIO-999", headers=ADMIN)

        assert response.status_code == 404

    def test_delete_requires_admin(self, client: TestClient, seeded: Registrar) -> None:
        response = client.delete("/api/v1/courses/MATH-121", headers={"X-Username": "prof"})

        assert response.status_code == 403
        assert seeded.catalog.get("MATH-121") is not None
