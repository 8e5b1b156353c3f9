"""Tests for EnrollmentUseCase."""

from dataclasses import replace
from decimal import Decimal

import pytest

from educa.application.enrollment.use_cases.enrollment_use_case import EnrollmentUseCase
from educa.domain.catalog.entities.course import Course
from educa.domain.catalog.exceptions import CourseNotFoundError
from educa.domain.common.exceptions import ValidationError
from educa.domain.common.value_objects.ids import CourseId, LearnerId
from educa.domain.identity.entities.learner import Learner
from educa.domain.identity.exceptions import LearnerNotFoundError


class InMemoryLearnerRepository:
    def __init__(self, learners: list[Learner]) -> None:
        self.learners = {learner.id: learner for learner in learners}
        self.enrollment_writes: list[tuple[LearnerId, CourseId]] = []
        self.saves = 0

    def find_by_id(self, learner_id: LearnerId) -> Learner | None:
        learner = self.learners.get(learner_id)
        # Hand out copies so the use case must write through the repository
        return (
            replace(learner, enrolled_course_ids=set(learner.enrolled_course_ids))
            if learner
            else None
        )

    def save(self, learner: Learner) -> Learner:
        self.saves += 1
        self.learners[learner.id] = learner
        return learner

    def add_enrollment(self, learner_id: LearnerId, course_id: CourseId) -> bool:
        self.enrollment_writes.append((learner_id, course_id))
        self.learners[learner_id].enrolled_course_ids.add(course_id)
        return True


class InMemoryCourseRepository:
    def __init__(self, courses: list[Course]) -> None:
        self.courses = {course.id: course for course in courses}

    def find_by_id(self, course_id: CourseId) -> Course | None:
        return self.courses.get(course_id)

    def find_by_ids(self, course_ids: set[CourseId]) -> list[Course]:
        return [self.courses[cid] for cid in sorted(course_ids, key=int) if cid in self.courses]


@pytest.fixture
def learners() -> InMemoryLearnerRepository:
    return InMemoryLearnerRepository(
        [Learner(id=LearnerId(1), full_name="Ada", email="ada@example.com", hashed_password="h")]
    )


@pytest.fixture
def use_case(learners: InMemoryLearnerRepository) -> EnrollmentUseCase:
    courses = InMemoryCourseRepository(
        [
            Course(id=CourseId(1), title="Python for Data Analysis", price=Decimal("450")),
            Course(id=CourseId(2), title="Cloud Engineering", price=Decimal("550")),
        ]
    )
    return EnrollmentUseCase(learner_repository=learners, course_repository=courses)


class TestEnroll:
    """Test suite for enrollment."""

    def test_enroll_records_membership(
        self, use_case: EnrollmentUseCase, learners: InMemoryLearnerRepository
    ) -> None:
        learner = use_case.enroll(1, 2)
        assert learner.is_enrolled_in(CourseId(2))
        assert learners.enrollment_writes == [(LearnerId(1), CourseId(2))]

    def test_enroll_twice_writes_once(
        self, use_case: EnrollmentUseCase, learners: InMemoryLearnerRepository
    ) -> None:
        use_case.enroll(1, 2)
        learner = use_case.enroll(1, 2)
        assert learner.enrolled_course_ids == {CourseId(2)}
        assert len(learners.enrollment_writes) == 1

    def test_unknown_learner(self, use_case: EnrollmentUseCase) -> None:
        with pytest.raises(LearnerNotFoundError):
            use_case.enroll(99, 1)

    def test_unknown_course(self, use_case: EnrollmentUseCase) -> None:
        with pytest.raises(CourseNotFoundError):
            use_case.enroll(1, 99)

    def test_list_enrolled_courses_in_id_order(self, use_case: EnrollmentUseCase) -> None:
        assert use_case.list_enrolled_courses(1) == []
        use_case.enroll(1, 2)
        use_case.enroll(1, 1)
        titles = [course.title for course in use_case.list_enrolled_courses(1)]
        assert titles == ["Python for Data Analysis", "Cloud Engineering"]


class TestSetProgress:
    """Test suite for progress updates."""

    @pytest.mark.parametrize("value", [0, 100])
    def test_bounds_are_accepted(self, use_case: EnrollmentUseCase, value: int) -> None:
        assert use_case.set_progress(1, value).progress == value

    @pytest.mark.parametrize("value", [-1, 101])
    def test_out_of_range_leaves_state_untouched(
        self, use_case: EnrollmentUseCase, learners: InMemoryLearnerRepository, value: int
    ) -> None:
        use_case.set_progress(1, 40)
        with pytest.raises(ValidationError):
            use_case.set_progress(1, value)
        assert learners.learners[LearnerId(1)].progress == 40
        assert learners.saves == 1

    def test_invalid_value_is_checked_before_lookup(self, use_case: EnrollmentUseCase) -> None:
        with pytest.raises(ValidationError):
            use_case.set_progress(99, 101)
