"""
Course API endpoints.

Routes:
- GET /courses - List courses (optional ?category=)
- GET /courses/{id} - Get single course
- POST /courses - Create draft course
- PUT /courses/{id} - Update course (owner only)
- DELETE /courses/{id} - Delete course (owner only)
- POST /courses/upload-url - Presigned video upload URL
- POST /courses/{id}/sections/{sid}/chapters/{cid}/get-upload-url - Same, scoped to a chapter

Dependencies: marketplace.application.services, marketplace.models
System role: Course management HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from marketplace.api.deps import (
    get_course_service,
    get_current_user_id,
    get_s3_video_client,
    get_settings_dependency,
)
from marketplace.api.errors import handle_api_errors
from marketplace.application.services import CourseService
from marketplace.boundary.aws import S3VideoClient
from marketplace.configs import Settings
from marketplace.models.common import ApiResponse
from marketplace.models.course import (
    Course,
    CreateCourseRequest,
    UpdateCourseRequest,
    UploadUrlRequest,
    UploadUrlResponse,
)

from .course_validators import validate_course_creation
from .video_upload_handler import handle_video_upload_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=ApiResponse[list[Course]], response_model_exclude_none=True)
@handle_api_errors("Error retrieving courses")
async def list_courses(
    category: str | None = None,
    course_service: CourseService = Depends(get_course_service),
) -> ApiResponse[list[Course]]:
    """
    List courses, optionally filtered by exact category ("all" disables the filter).
    """
    logger.info("Listing courses", extra={"category": category})

    courses = await course_service.list_courses(category)

    logger.info("Courses retrieved", extra={"count": len(courses), "category": category})
    return ApiResponse(message="Courses retrieved successfully", data=courses)


@router.post(
    "/upload-url",
    response_model=ApiResponse[UploadUrlResponse],
    response_model_exclude_none=True,
)
@handle_api_errors("Error generating upload URL")
async def get_upload_video_url(
    request: UploadUrlRequest,
    user_id: str = Depends(get_current_user_id),
    s3_client: S3VideoClient = Depends(get_s3_video_client),
    settings: Settings = Depends(get_settings_dependency),
) -> ApiResponse[UploadUrlResponse]:
    """
    Issue a 60-second presigned PUT URL for a chapter video.

    Raises:
        HTTPException(400): fileName or fileType missing
        HTTPException(500): Presigning failed
    """
    logger.info("Video upload URL requested", extra={"user_id": user_id, "file_name": request.file_name})

    upload = handle_video_upload_request(
        request,
        s3_client=s3_client,
        cloudfront_domain=settings.s3_videos.cloudfront_domain,
        expires_in=settings.s3_videos.upload_url_expiry,
    )
    return ApiResponse(message="Upload URL generated successfully", data=upload)


@router.post(
    "/{course_id}/sections/{section_id}/chapters/{chapter_id}/get-upload-url",
    response_model=ApiResponse[UploadUrlResponse],
    response_model_exclude_none=True,
)
@handle_api_errors("Error generating upload URL")
async def get_chapter_upload_video_url(
    course_id: str,
    section_id: str,
    chapter_id: str,
    request: UploadUrlRequest,
    user_id: str = Depends(get_current_user_id),
    s3_client: S3VideoClient = Depends(get_s3_video_client),
    settings: Settings = Depends(get_settings_dependency),
) -> ApiResponse[UploadUrlResponse]:
    """Chapter-scoped alias of POST /courses/upload-url used by the course editor."""
    logger.info(
        "Chapter video upload URL requested",
        extra={
            "user_id": user_id,
            "course_id": course_id,
            "section_id": section_id,
            "chapter_id": chapter_id,
        },
    )

    upload = handle_video_upload_request(
        request,
        s3_client=s3_client,
        cloudfront_domain=settings.s3_videos.cloudfront_domain,
        expires_in=settings.s3_videos.upload_url_expiry,
    )
    return ApiResponse(message="Upload URL generated successfully", data=upload)


@router.get("/{course_id}", response_model=ApiResponse[Course], response_model_exclude_none=True)
@handle_api_errors("Error retrieving course")
async def get_course(
    course_id: str,
    course_service: CourseService = Depends(get_course_service),
) -> ApiResponse[Course]:
    """
    Get single course by ID.

    Raises:
        HTTPException(404): Course not found
        HTTPException(500): Retrieval failed
    """
    course = await course_service.get_course(course_id)
    return ApiResponse(message="Course retrieved successfully", data=course)


@router.post("", response_model=ApiResponse[Course], response_model_exclude_none=True)
@handle_api_errors("Error creating course")
async def create_course(
    request: CreateCourseRequest,
    user_id: str = Depends(get_current_user_id),
    course_service: CourseService = Depends(get_course_service),
) -> ApiResponse[Course]:
    """
    Create an "Untitled Course" draft owned by the calling teacher.

    Raises:
        HTTPException(400): Teacher id or name missing
        HTTPException(403): teacherId is not the caller
        HTTPException(500): Creation failed
    """
    validate_course_creation(request)

    logger.info("Creating new course", extra={"teacher_id": request.teacher_id})

    course = await course_service.create_course(
        user_id=user_id,
        teacher_id=request.teacher_id,
        teacher_name=request.teacher_name,
    )
    return ApiResponse(message="Course created successfully", data=course)


@router.put("/{course_id}", response_model=ApiResponse[Course], response_model_exclude_none=True)
@handle_api_errors("Error updating course")
async def update_course(
    course_id: str,
    request: UpdateCourseRequest,
    user_id: str = Depends(get_current_user_id),
    course_service: CourseService = Depends(get_course_service),
) -> ApiResponse[Course]:
    """
    Update course by ID.

    Raises:
        HTTPException(400): Invalid price or sections
        HTTPException(403): Caller does not own the course
        HTTPException(404): Course not found
        HTTPException(500): Update failed
    """
    logger.info(
        "Updating course",
        extra={
            "course_id": course_id,
            "fields": sorted(request.model_dump(exclude_none=True).keys()),
        },
    )

    course = await course_service.update_course(course_id, user_id, request)
    return ApiResponse(message="Course updated successfully", data=course)


@router.delete("/{course_id}", response_model=ApiResponse[Course], response_model_exclude_none=True)
@handle_api_errors("Error deleting course")
async def delete_course(
    course_id: str,
    user_id: str = Depends(get_current_user_id),
    course_service: CourseService = Depends(get_course_service),
) -> ApiResponse[Course]:
    """
    Delete course by ID and return the deleted item.

    Raises:
        HTTPException(403): Caller does not own the course
        HTTPException(404): Course not found
        HTTPException(500): Deletion failed
    """
    logger.info("Deleting course", extra={"course_id": course_id})

    course = await course_service.delete_course(course_id, user_id)
    return ApiResponse(message="Course deleted successfully", data=course)
