"""
Course service orchestrator.

Coordinates course lifecycle operations: listing, creation of draft
courses, owner-only updates and deletion.

Dependencies: marketplace.boundary.db, marketplace.core
System role: Course use case orchestration
"""

import logging
import uuid

from marketplace.boundary.db.repositories import CourseRepository
from marketplace.core.exceptions import ForbiddenError, MarketplaceException, NotFoundError
from marketplace.core.pricing import to_minor_units
from marketplace.core.timestamps import utc_now_iso
from marketplace.models.course import (
    Chapter,
    Course,
    Section,
    SectionInput,
    UpdateCourseRequest,
)

logger = logging.getLogger(__name__)


def assign_missing_ids(sections: list[SectionInput]) -> list[Section]:
    """
    Turn editor input into stored sections.

    Sections and chapters submitted without an id get a fresh uuid4;
    existing ids are kept.
    """
    return [
        Section(
            section_id=section.section_id or str(uuid.uuid4()),
            section_title=section.section_title,
            section_description=section.section_description,
            chapters=[
                Chapter(
                    chapter_id=chapter.chapter_id or str(uuid.uuid4()),
                    type=chapter.type,
                    title=chapter.title,
                    content=chapter.content,
                    comments=chapter.comments,
                    video=chapter.video,
                )
                for chapter in section.chapters
            ],
        )
        for section in sections
    ]


class CourseService:
    """Course service orchestrator."""

    def __init__(self, courses: CourseRepository) -> None:
        """
        Initialize course service.

        Args:
            courses: Courses table repository
        """
        self.courses = courses

    async def list_courses(self, category: str | None = None) -> list[Course]:
        """
        List courses, optionally filtered by exact category.

        Args:
            category: Category name; None, "" and "all" return every course

        Returns:
            list[Course]: Matching courses
        """
        if category == "all":
            category = None
        try:
            return await self.courses.list_all(category=category or None)
        except Exception as e:
            logger.error("Failed to list courses", extra={"error": str(e), "category": category})
            raise

    async def get_course(self, course_id: str) -> Course:
        """
        Get course by ID.

        Raises:
            NotFoundError: If course does not exist
        """
        course = await self.courses.get(course_id)
        if course is None:
            raise NotFoundError("Course not found", resource="course", resource_id=course_id)
        return course

    async def create_course(self, user_id: str, teacher_id: str, teacher_name: str) -> Course:
        """
        Create an empty draft course owned by the teacher.

        Args:
            user_id: Authenticated user id
            teacher_id: Owner named in the request
            teacher_name: Owner display name

        Returns:
            Course: Stored placeholder course

        Raises:
            ForbiddenError: If the caller is not the named teacher
        """
        if teacher_id != user_id:
            raise ForbiddenError("Not authorized to create courses for another teacher", user_id=user_id)

        now = utc_now_iso()
        course = Course(
            course_id=str(uuid.uuid4()),
            teacher_id=teacher_id,
            teacher_name=teacher_name,
            created_at=now,
            updated_at=now,
        )
        try:
            await self.courses.put(course)
        except Exception as e:
            logger.error("Failed to create course", extra={"error": str(e), "teacher_id": teacher_id})
            raise

        logger.info("Course created", extra={"course_id": course.course_id, "teacher_id": teacher_id})
        return course

    async def update_course(
        self,
        course_id: str,
        user_id: str,
        request: UpdateCourseRequest,
    ) -> Course:
        """
        Apply an owner's changes to a course.

        Price is converted to minor units and missing section/chapter ids are
        generated before the full item is written back.

        Raises:
            NotFoundError: If course does not exist
            ForbiddenError: If the caller does not own the course
            BadRequestError: If price is not a valid number
        """
        try:
            course = await self.get_course(course_id)
            self._ensure_owner(course, user_id, "update")

            changes = request.model_dump(
                exclude_none=True,
                exclude={"price", "sections"},
            )
            if request.price is not None and request.price != "":
                changes["price"] = to_minor_units(request.price)
            if request.sections is not None:
                changes["sections"] = assign_missing_ids(request.sections)
            changes["updated_at"] = utc_now_iso()

            updated = course.model_copy(update=changes)
            await self.courses.put(updated)
        except MarketplaceException:
            raise
        except Exception as e:
            logger.error("Failed to update course", extra={"error": str(e), "course_id": course_id})
            raise

        logger.info(
            "Course updated",
            extra={"course_id": course_id, "updates": sorted(changes.keys())},
        )
        return updated

    async def delete_course(self, course_id: str, user_id: str) -> Course:
        """
        Delete an owner's course.

        Returns:
            Course: The course as it was before deletion

        Raises:
            NotFoundError: If course does not exist
            ForbiddenError: If the caller does not own the course
        """
        course = await self.get_course(course_id)
        self._ensure_owner(course, user_id, "delete")

        try:
            await self.courses.delete(course_id)
        except Exception as e:
            logger.error("Failed to delete course", extra={"error": str(e), "course_id": course_id})
            raise

        logger.info("Course deleted", extra={"course_id": course_id})
        return course

    @staticmethod
    def _ensure_owner(course: Course, user_id: str, action: str) -> None:
        if course.teacher_id != user_id:
            logger.warning(
                "Course ownership check failed",
                extra={"course_id": course.course_id, "user_id": user_id, "action": action},
            )
            raise ForbiddenError(f"Not authorized to {action} this course", user_id=user_id)
