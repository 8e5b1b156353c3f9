from .course_repository import CourseRepositoryProtocol

__all__ = ["CourseRepositoryProtocol"]
