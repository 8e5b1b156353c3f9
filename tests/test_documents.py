"""Tests for certificate and invoice endpoints."""

from collections.abc import Callable
from decimal import Decimal

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from educa import models


def enroll(client: TestClient, headers: dict[str, str], learner_id: int, course_id: int) -> None:
    response = client.post(
        f"/api/v1/learners/{learner_id}/enrollments", json={"course_id": course_id}, headers=headers
    )
    assert response.status_code == status.HTTP_200_OK


def set_progress(client: TestClient, headers: dict[str, str], learner_id: int, value: int) -> None:
    response = client.put(
        f"/api/v1/learners/{learner_id}/progress", json={"progress": value}, headers=headers
    )
    assert response.status_code == status.HTTP_200_OK


class TestInvoice:
    """Test suite for invoice rendering."""

    def test_invoice_lists_enrolled_courses(
        self,
        client: TestClient,
        admin_headers: dict[str, str],
        learner_headers: dict[str, str],
        test_learner: models.Learner,
        test_courses: list[models.Course],
    ) -> None:
        learner_id = test_learner.id
        for course in test_courses:
            enroll(client, admin_headers, learner_id, course.id)

        response = client.get("/api/v1/learners/me/invoice", headers=learner_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data["lines"]) == 2
        assert Decimal(data["total"]) == Decimal("1000.00")
        assert sum(Decimal(line["amount"]) for line in data["lines"]) == Decimal(data["total"])
        assert data["currency"] == "USD"
        assert data["learner_email"] == "ada@example.com"
        assert data["invoice_number"] == f"INV-{learner_id:06d}"

    def test_invoice_total_is_exact(
        self,
        client: TestClient,
        db_session: Session,
        admin_headers: dict[str, str],
        test_learner: models.Learner,
    ) -> None:
        courses = [
            models.Course(title=f"Short course {cents}", price=Decimal(cents) / 100)
            for cents in (10, 20, 5)
        ]
        db_session.add_all(courses)
        db_session.commit()
        learner_id = test_learner.id
        for course in courses:
            enroll(client, admin_headers, learner_id, course.id)

        response = client.get(f"/api/v1/learners/{learner_id}/invoice", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        assert Decimal(response.json()["total"]) == Decimal("0.35")

    def test_invoice_without_enrollments(
        self, client: TestClient, learner_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/v1/learners/me/invoice", headers=learner_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["lines"] == []
        assert Decimal(response.json()["total"]) == 0

    def test_invoice_currency_is_configurable(
        self,
        client: TestClient,
        admin_headers: dict[str, str],
        test_learner: models.Learner,
        settings_override: Callable[..., None],
    ) -> None:
        settings_override(INVOICE_CURRENCY="EUR")
        learner_id = test_learner.id

        response = client.get(f"/api/v1/learners/{learner_id}/invoice", headers=admin_headers)

        assert response.json()["currency"] == "EUR"

    def test_invoice_for_unknown_learner(
        self, client: TestClient, admin_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/v1/learners/9999/invoice", headers=admin_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestCertificate:
    """Test suite for certificate issuance."""

    def test_certificate_after_completion(
        self,
        client: TestClient,
        admin_headers: dict[str, str],
        learner_headers: dict[str, str],
        test_learner: models.Learner,
        test_courses: list[models.Course],
    ) -> None:
        learner_id, course_id = test_learner.id, test_courses[1].id
        enroll(client, admin_headers, learner_id, course_id)
        set_progress(client, admin_headers, learner_id, 100)

        response = client.get(
            f"/api/v1/learners/me/certificates/{course_id}", headers=learner_headers
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["learner_name"] == "Ada Lovelace"
        assert data["course_title"] == "Cloud Engineering"
        assert data["certificate_number"].startswith("EDU-")

        again = client.get(
            f"/api/v1/learners/{learner_id}/certificates/{course_id}", headers=admin_headers
        )
        assert again.json() == data

    def test_certificate_requires_enrollment(
        self,
        client: TestClient,
        admin_headers: dict[str, str],
        test_learner: models.Learner,
        test_courses: list[models.Course],
    ) -> None:
        learner_id = test_learner.id
        set_progress(client, admin_headers, learner_id, 100)

        response = client.get(
            f"/api/v1/learners/{learner_id}/certificates/{test_courses[0].id}",
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_certificate_requires_completion(
        self,
        client: TestClient,
        admin_headers: dict[str, str],
        test_learner: models.Learner,
        test_courses: list[models.Course],
    ) -> None:
        learner_id, course_id = test_learner.id, test_courses[0].id
        enroll(client, admin_headers, learner_id, course_id)
        set_progress(client, admin_headers, learner_id, 99)

        response = client.get(
            f"/api/v1/learners/{learner_id}/certificates/{course_id}", headers=admin_headers
        )

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_completion_check_can_be_disabled(
        self,
        client: TestClient,
        admin_headers: dict[str, str],
        test_learner: models.Learner,
        test_courses: list[models.Course],
        settings_override: Callable[..., None],
    ) -> None:
        settings_override(CERTIFICATE_REQUIRES_COMPLETION=False)
        learner_id, course_id = test_learner.id, test_courses[0].id
        enroll(client, admin_headers, learner_id, course_id)

        response = client.get(
            f"/api/v1/learners/{learner_id}/certificates/{course_id}", headers=admin_headers
        )

        assert response.status_code == status.HTTP_200_OK

    def test_certificate_for_unknown_course(
        self, client: TestClient, admin_headers: dict[str, str], test_learner: models.Learner
    ) -> None:
        response = client.get(
            f"/api/v1/learners/{test_learner.id}/certificates/9999", headers=admin_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
