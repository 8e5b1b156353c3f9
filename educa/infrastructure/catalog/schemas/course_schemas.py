"""Pydantic schemas for Course API request/response validation."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from educa.domain.catalog.entities.course import Course


class CourseCreateRequest(BaseModel):
    """Schema for creating a course."""

    title: str = Field(..., description="Course title")
    description: str = Field("", description="What the course covers")
    instructor: str = Field("", description="Instructor name")
    price: Decimal = Field(Decimal("0"), description="Price, must not be negative")
    lesson_reference: str | None = Field(None, description="Playable lesson or syllabus pointer")
    level: str | None = Field(None, description="Display level such as Beginner or Advanced")
    thumbnail: str | None = Field(None, description="Optional image URL")


class CourseLessonUpdateRequest(BaseModel):
    """Schema for pointing a course at its lesson video."""

    lesson_reference: str | None = Field(..., description="New lesson pointer, null to clear")


class CatalogResetRequest(BaseModel):
    """Schema for replacing the catalog. Omit `courses` to load the demo catalog."""

    courses: list[CourseCreateRequest] | None = Field(None, description="Seed courses")


class CourseResponse(BaseModel):
    """Schema for a course."""

    id: int
    title: str
    description: str
    instructor: str
    price: Decimal
    lesson_reference: str | None
    level: str | None
    thumbnail: str | None
    created_at: datetime | None = None

    @classmethod
    def from_entity(cls, course: Course) -> "CourseResponse":
        return cls(
            id=course.id.value,
            title=course.title,
            description=course.description,
            instructor=course.instructor,
            price=course.price,
            lesson_reference=course.lesson_reference,
            level=course.level,
            thumbnail=course.thumbnail,
            created_at=course.created_at,
        )


class CoursesListResponse(BaseModel):
    """Schema for list of courses response."""

    courses: list[CourseResponse] = Field(..., description="List of courses")
