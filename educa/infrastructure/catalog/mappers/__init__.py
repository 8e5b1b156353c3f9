from .course_mapper import CourseMapper

__all__ = ["CourseMapper"]
