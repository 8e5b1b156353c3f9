"""
Course entity for the catalog.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation

from educa.domain.common.entity import Entity
from educa.domain.common.exceptions import ValidationError
from educa.domain.common.value_objects.ids import CourseId

MAX_TITLE_LENGTH = 255


def to_price(value: Decimal | int | float | str) -> Decimal:
    """
    Coerce a price to a non-negative Decimal.

    Raises:
        ValidationError: If the value is not a number or is negative
    """
    if isinstance(value, bool):
        raise ValidationError("Price must be a number", field="price", value=value)
    try:
        price = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError("Price must be a number", field="price", value=value) from None
    if not price.is_finite():
        raise ValidationError("Price must be a number", field="price", value=value)
    if price < 0:
        raise ValidationError("Price cannot be negative", field="price", value=value)
    return price


@dataclass(eq=False)
class Course(Entity[CourseId]):
    """
    A course offered in the catalog.

    Business Rules:
    - Title cannot be empty
    - Price cannot be negative
    - Only the lesson reference changes after creation; level and thumbnail
      are display hints with no behavioral effect
    """

    id: CourseId
    title: str
    description: str = ""
    instructor: str = ""
    price: Decimal = Decimal("0")
    lesson_reference: str | None = None
    level: str | None = None
    thumbnail: str | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError("Course title cannot be empty", field="title")
        if len(self.title) > MAX_TITLE_LENGTH:
            raise ValidationError(
                f"Course title cannot exceed {MAX_TITLE_LENGTH} characters", field="title"
            )
        self.price = to_price(self.price)

    def update_lesson_reference(self, reference: str | None) -> None:
        """
        Point the course at a playable lesson (video URL, syllabus link, ...).

        An empty or blank reference clears it.
        """
        self.lesson_reference = reference.strip() if reference and reference.strip() else None

    @classmethod
    def create(
        cls,
        title: str,
        description: str = "",
        instructor: str = "",
        price: Decimal | int | float | str = 0,
        lesson_reference: str | None = None,
        level: str | None = None,
        thumbnail: str | None = None,
    ) -> "Course":
        """Create a new course (ID will be 0 until persisted)."""
        return cls(
            id=CourseId.generate(),
            title=(title or "").strip(),
            description=(description or "").strip(),
            instructor=(instructor or "").strip(),
            price=to_price(price),
            lesson_reference=lesson_reference,
            level=level,
            thumbnail=thumbnail,
        )

    @classmethod
    def create_with_id(
        cls,
        id: CourseId,
        title: str,
        description: str,
        instructor: str,
        price: Decimal,
        lesson_reference: str | None,
        level: str | None,
        thumbnail: str | None,
        created_at: datetime,
    ) -> "Course":
        """Reconstitute a course from persistence."""
        return cls(
            id=id,
            title=title,
            description=description,
            instructor=instructor,
            price=price,
            lesson_reference=lesson_reference,
            level=level,
            thumbnail=thumbnail,
            created_at=created_at,
        )
