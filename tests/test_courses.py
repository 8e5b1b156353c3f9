"""Tests for catalog API endpoints."""

from decimal import Decimal

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy import select
from sqlalchemy.orm import Session

from educa import models


class TestListCourses:
    """Test suite for the public catalog endpoints."""

    def test_list_courses(self, client: TestClient, test_courses: list[models.Course]) -> None:
        response = client.get("/api/v1/courses")

        assert response.status_code == status.HTTP_200_OK
        courses = response.json()["courses"]
        assert [course["title"] for course in courses] == [
            "Python for Data Analysis",
            "Cloud Engineering",
        ]
        assert Decimal(courses[0]["price"]) == Decimal("450")

    def test_empty_catalog(self, client: TestClient) -> None:
        response = client.get("/api/v1/courses")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"courses": []}

    def test_get_course(self, client: TestClient, test_courses: list[models.Course]) -> None:
        response = client.get(f"/api/v1/courses/{test_courses[1].id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["instructor"] == "Omar Haddad"

    def test_get_unknown_course(self, client: TestClient) -> None:
        response = client.get("/api/v1/courses/9999")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_featured_course_is_first(
        self, client: TestClient, test_courses: list[models.Course]
    ) -> None:
        response = client.get("/api/v1/courses/featured")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["id"] == test_courses[0].id

    def test_featured_course_on_empty_catalog(self, client: TestClient) -> None:
        response = client.get("/api/v1/courses/featured")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "The catalog is empty"


class TestCreateCourse:
    """Test suite for POST /courses."""

    def test_create_course(
        self, client: TestClient, db_session: Session, admin_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/courses",
            json={
                "title": "Machine Learning Foundations",
                "description": "Models, metrics and pipelines",
                "instructor": "Lin Wei",
                "price": "699.50",
                "level": "Advanced",
            },
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert Decimal(data["price"]) == Decimal("699.50")
        assert data["lesson_reference"] is None

        db_course = db_session.get(models.Course, data["id"])
        assert db_course is not None
        assert db_course.title == "Machine Learning Foundations"

    def test_negative_price_is_rejected(
        self, client: TestClient, db_session: Session, admin_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/courses", json={"title": "Cheap", "price": -5}, headers=admin_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["details"]["field"] == "price"
        assert db_session.query(models.Course).count() == 0

    def test_empty_title_is_rejected(
        self, client: TestClient, admin_headers: dict[str, str]
    ) -> None:
        response = client.post("/api/v1/courses", json={"title": " "}, headers=admin_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_requires_admin(self, client: TestClient, db_session: Session) -> None:
        response = client.post("/api/v1/courses", json={"title": "Sneaky"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert db_session.query(models.Course).count() == 0


class TestUpdateLesson:
    """Test suite for PUT /courses/{id}/lesson."""

    def test_set_and_clear_lesson(
        self, client: TestClient, admin_headers: dict[str, str], test_courses: list[models.Course]
    ) -> None:
        url = f"/api/v1/courses/{test_courses[0].id}/lesson"

        response = client.put(
            url,
            json={"lesson_reference": "https://videos.example.com/python-1"},
            headers=admin_headers,
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["lesson_reference"] == "https://videos.example.com/python-1"

        response = client.put(url, json={"lesson_reference": None}, headers=admin_headers)
        assert response.json()["lesson_reference"] is None

    def test_unknown_course(self, client: TestClient, admin_headers: dict[str, str]) -> None:
        response = client.put(
            "/api/v1/courses/9999/lesson", json={"lesson_reference": "x"}, headers=admin_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestResetCatalog:
    """Test suite for POST /courses/reset."""

    def test_reset_loads_demo_catalog(
        self,
        client: TestClient,
        admin_headers: dict[str, str],
        test_courses: list[models.Course],
    ) -> None:
        response = client.post("/api/v1/courses/reset", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        titles = [course["title"] for course in response.json()["courses"]]
        assert titles == [
            "Full Stack Web Development",
            "Cloud Engineering",
            "Python for Data Analysis",
        ]
        listed = client.get("/api/v1/courses").json()["courses"]
        assert [course["title"] for course in listed] == titles

    @pytest.mark.filterwarnings("error::sqlalchemy.exc.SAWarning")
    def test_reset_reuses_ids_of_loaded_courses(
        self,
        client: TestClient,
        db_session: Session,
        admin_headers: dict[str, str],
        test_courses: list[models.Course],
    ) -> None:
        old_ids = {course.id for course in test_courses}

        response = client.post("/api/v1/courses/reset", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        new_ids = {course["id"] for course in response.json()["courses"]}
        assert old_ids & new_ids
        stored = db_session.scalars(select(models.Course).order_by(models.Course.id)).all()
        assert [course.id for course in stored] == sorted(new_ids)

    def test_reset_with_custom_seed(
        self, client: TestClient, admin_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/courses/reset",
            json={"courses": [{"title": "Only Course", "price": 10}]},
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert [course["title"] for course in response.json()["courses"]] == ["Only Course"]

    def test_reset_drops_enrollments(
        self,
        client: TestClient,
        db_session: Session,
        admin_headers: dict[str, str],
        test_learner: models.Learner,
        test_courses: list[models.Course],
    ) -> None:
        learner_id = test_learner.id
        client.post(
            f"/api/v1/learners/{learner_id}/enrollments",
            json={"course_id": test_courses[0].id},
            headers=admin_headers,
        )

        client.post("/api/v1/courses/reset", headers=admin_headers)

        learner = client.get(f"/api/v1/learners/{learner_id}", headers=admin_headers).json()
        assert learner["enrolled_course_ids"] == []
        assert db_session.get(models.Learner, learner_id) is not None

    def test_invalid_seed_leaves_catalog_untouched(
        self,
        client: TestClient,
        db_session: Session,
        admin_headers: dict[str, str],
        test_courses: list[models.Course],
    ) -> None:
        response = client.post(
            "/api/v1/courses/reset",
            json={"courses": [{"title": "Fine"}, {"title": "Broken", "price": -1}]},
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert db_session.query(models.Course).count() == len(test_courses)
