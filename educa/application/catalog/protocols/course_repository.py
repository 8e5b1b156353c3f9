from typing import Protocol

from educa.domain.catalog.entities.course import Course
from educa.domain.common.value_objects.ids import CourseId


class CourseRepositoryProtocol(Protocol):
    def find_by_id(self, course_id: CourseId) -> Course | None: ...

    def find_by_ids(self, course_ids: set[CourseId]) -> list[Course]: ...

    def find_first(self) -> Course | None: ...

    def list_all(self) -> list[Course]: ...

    def save(self, course: Course) -> Course: ...

    def replace_all(self, courses: list[Course]) -> list[Course]: ...
