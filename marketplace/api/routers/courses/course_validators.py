"""
Course validation utilities.

Business logic validation not covered by Pydantic models.

Dependencies: marketplace.models.course
System role: Course request validation
"""

from marketplace.core.exceptions import BadRequestError
from marketplace.models.course import CreateCourseRequest


def validate_course_creation(request: CreateCourseRequest) -> None:
    """
    Validate course creation request.

    Args:
        request: CreateCourseRequest with teacher id and name

    Raises:
        BadRequestError: If either teacher field is missing or blank
    """
    if not (request.teacher_id or "").strip() or not (request.teacher_name or "").strip():
        raise BadRequestError("Teacher Id and name are required")
