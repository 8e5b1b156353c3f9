"""Learner entity for identity and enrollment."""

from dataclasses import dataclass, field
from datetime import datetime

from educa.domain.common.entity import Entity
from educa.domain.common.exceptions import ValidationError
from educa.domain.common.value_objects.ids import CourseId, LearnerId

# Domain constraints
MAX_EMAIL_LENGTH = 255
MAX_NAME_LENGTH = 255
MIN_PROGRESS = 0
MAX_PROGRESS = 100


def normalize_email(email: str) -> str:
    """Emails are compared case-insensitively, so they are stored lower-cased."""
    return email.strip().lower()


def validate_progress(value: int) -> int:
    """
    Check that a progress value is a whole percentage.

    Raises:
        ValidationError: If value is not an int in [MIN_PROGRESS, MAX_PROGRESS]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("Progress must be an integer", field="progress", value=value)
    if not MIN_PROGRESS <= value <= MAX_PROGRESS:
        raise ValidationError(
            f"Progress must be between {MIN_PROGRESS} and {MAX_PROGRESS}",
            field="progress",
            value=value,
        )
    return value


@dataclass(eq=False)
class Learner(Entity[LearnerId]):
    """
    A registered end user who may enroll in courses.

    Business Rules:
    - Full name and email cannot be empty
    - Email is unique across learners (enforced at repository level)
    - Progress is a single percentage in [0, 100] for the learner
    - Enrollment is a set: enrolling twice in the same course is a no-op
    """

    id: LearnerId
    full_name: str
    email: str
    hashed_password: str
    progress: int = MIN_PROGRESS
    enrolled_course_ids: set[CourseId] = field(default_factory=set)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.full_name or not self.full_name.strip():
            raise ValidationError("Full name cannot be empty", field="full_name")
        if len(self.full_name) > MAX_NAME_LENGTH:
            raise ValidationError(
                f"Full name cannot exceed {MAX_NAME_LENGTH} characters", field="full_name"
            )
        if not self.email or not self.email.strip():
            raise ValidationError("Email cannot be empty", field="email")
        if len(self.email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email cannot exceed {MAX_EMAIL_LENGTH} characters",
                field="email",
                value=self.email,
            )
        if not self.hashed_password:
            raise ValidationError("Password cannot be empty", field="password")
        validate_progress(self.progress)

    def enroll(self, course_id: CourseId) -> bool:
        """
        Add a course to the enrollment set.

        Returns:
            True if the course was added, False if the learner was already enrolled
        """
        if course_id in self.enrolled_course_ids:
            return False
        self.enrolled_course_ids.add(course_id)
        return True

    def is_enrolled_in(self, course_id: CourseId) -> bool:
        return course_id in self.enrolled_course_ids

    def set_progress(self, value: int) -> None:
        """
        Overwrite the learner's progress.

        Raises:
            ValidationError: If value is outside [0, 100]
        """
        self.progress = validate_progress(value)

    @property
    def has_completed(self) -> bool:
        return self.progress == MAX_PROGRESS

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match over name and email."""
        needle = query.strip().lower()
        return needle in self.full_name.lower() or needle in self.email.lower()

    @classmethod
    def create(cls, full_name: str, email: str, hashed_password: str) -> "Learner":
        """
        Create a newly registered learner (ID will be 0 until persisted).

        Raises:
            ValidationError: If name or email is empty
        """
        return cls(
            id=LearnerId.generate(),
            full_name=(full_name or "").strip(),
            email=normalize_email(email or ""),
            hashed_password=hashed_password,
        )

    @classmethod
    def create_with_id(
        cls,
        id: LearnerId,
        full_name: str,
        email: str,
        hashed_password: str,
        progress: int,
        enrolled_course_ids: set[CourseId],
        created_at: datetime,
        updated_at: datetime,
    ) -> "Learner":
        """Reconstitute a learner from persistence."""
        return cls(
            id=id,
            full_name=full_name,
            email=email,
            hashed_password=hashed_password,
            progress=progress,
            enrolled_course_ids=set(enrolled_course_ids),
            created_at=created_at,
            updated_at=updated_at,
        )
