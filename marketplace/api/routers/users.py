"""
User course progress API endpoints.

Routes:
- GET /users/{userId}/enrolled-courses - Courses the user is enrolled in
- GET /users/{userId}/courses/{courseId}/progress - Stored progress
- PUT /users/{userId}/courses/{courseId}/progress - Merge a progress update

Dependencies: marketplace.application.services, marketplace.models
System role: Progress tracking HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from marketplace.api.deps import (
    get_current_user_id,
    get_progress_service,
    require_same_user,
)
from marketplace.api.errors import handle_api_errors
from marketplace.application.services import ProgressService
from marketplace.models.common import ApiResponse
from marketplace.models.course import Course
from marketplace.models.progress import UpdateProgressRequest, UserCourseProgress

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "/{user_id}/enrolled-courses",
    response_model=ApiResponse[list[Course]],
    response_model_exclude_none=True,
)
@handle_api_errors("Error retrieving enrolled courses")
async def get_user_enrolled_courses(
    user_id: str,
    current_user_id: str = Depends(get_current_user_id),
    progress_service: ProgressService = Depends(get_progress_service),
) -> ApiResponse[list[Course]]:
    """
    Raises:
        HTTPException(403): Path user is not the caller
    """
    require_same_user(user_id, current_user_id)

    courses = await progress_service.get_enrolled_courses(user_id)
    return ApiResponse(message="Enrolled courses retrieved successfully", data=courses)


@router.get(
    "/{user_id}/courses/{course_id}/progress",
    response_model=ApiResponse[UserCourseProgress],
    response_model_exclude_none=True,
)
@handle_api_errors("Error retrieving user course progress")
async def get_user_course_progress(
    user_id: str,
    course_id: str,
    current_user_id: str = Depends(get_current_user_id),
    progress_service: ProgressService = Depends(get_progress_service),
) -> ApiResponse[UserCourseProgress]:
    """
    Raises:
        HTTPException(403): Path user is not the caller
        HTTPException(404): No progress for this course
    """
    require_same_user(user_id, current_user_id)

    progress = await progress_service.get_progress(user_id, course_id)
    return ApiResponse(message="Course progress retrieved successfully", data=progress)


@router.put(
    "/{user_id}/courses/{course_id}/progress",
    response_model=ApiResponse[UserCourseProgress],
    response_model_exclude_none=True,
)
@handle_api_errors("Error updating user course progress")
async def update_user_course_progress(
    user_id: str,
    course_id: str,
    request: UpdateProgressRequest,
    current_user_id: str = Depends(get_current_user_id),
    progress_service: ProgressService = Depends(get_progress_service),
) -> ApiResponse[UserCourseProgress]:
    """
    Merge completed flags into stored progress and recompute the overall ratio.

    Raises:
        HTTPException(403): Path user is not the caller
        HTTPException(500): Store failure
    """
    require_same_user(user_id, current_user_id)

    logger.info(
        "Updating course progress",
        extra={"user_id": user_id, "course_id": course_id, "sections": len(request.sections)},
    )

    progress = await progress_service.update_progress(user_id, course_id, request.sections)
    return ApiResponse(message="Course progress updated successfully", data=progress)
