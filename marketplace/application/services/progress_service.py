"""
Progress service orchestrator.

Enrolled-course listing and per-chapter progress reads and merges.

Dependencies: marketplace.boundary.db, marketplace.core.progress
System role: Progress tracking use case orchestration
"""

import logging

from marketplace.boundary.db.repositories import CourseRepository, ProgressRepository
from marketplace.core.exceptions import NotFoundError
from marketplace.core.progress import calculate_overall_progress, merge_sections
from marketplace.core.timestamps import utc_now_iso
from marketplace.models.course import Course
from marketplace.models.progress import SectionProgress, UserCourseProgress

logger = logging.getLogger(__name__)


class ProgressService:
    """Progress service orchestrator."""

    def __init__(self, progress: ProgressRepository, courses: CourseRepository) -> None:
        """
        Args:
            progress: UserCourseProgress table repository
            courses: Courses table repository
        """
        self.progress = progress
        self.courses = courses

    async def get_enrolled_courses(self, user_id: str) -> list[Course]:
        """
        Courses the user holds a progress record for.

        Returns:
            list[Course]: Courses with defaults filled in for missing fields
        """
        records = await self.progress.list_by_user(user_id)
        course_ids = [record.course_id for record in records]
        if not course_ids:
            return []

        courses = await self.courses.batch_get(course_ids)
        logger.info(
            "Enrolled courses fetched",
            extra={"user_id": user_id, "progress_records": len(records), "courses": len(courses)},
        )
        return courses

    async def get_progress(self, user_id: str, course_id: str) -> UserCourseProgress:
        """
        Raises:
            NotFoundError: If the user has no progress for the course
        """
        progress = await self.progress.get(user_id, course_id)
        if progress is None:
            raise NotFoundError(
                "Course progress not found for this user",
                resource="progress",
                resource_id=f"{user_id}/{course_id}",
            )
        return progress

    async def update_progress(
        self,
        user_id: str,
        course_id: str,
        sections: list[SectionProgress],
    ) -> UserCourseProgress:
        """
        Merge a partial chapter-completion update into stored progress.

        A missing record is created from the incoming sections. The overall
        ratio is recomputed from the merged sections.

        Args:
            user_id: Learner id
            course_id: Course id
            sections: Partial section progress from the client

        Returns:
            UserCourseProgress: Stored progress after the merge
        """
        now = utc_now_iso()
        progress = await self.progress.get(user_id, course_id)

        if progress is None:
            logger.info(
                "No stored progress, creating record",
                extra={"user_id": user_id, "course_id": course_id},
            )
            merged = [section.model_copy(deep=True) for section in sections]
            progress = UserCourseProgress(
                user_id=user_id,
                course_id=course_id,
                enrollment_date=now,
                sections=merged,
                last_accessed_timestamp=now,
            )
        else:
            merged = merge_sections(progress.sections, sections)

        progress = progress.model_copy(
            update={
                "sections": merged,
                "overall_progress": calculate_overall_progress(merged),
                "last_accessed_timestamp": now,
            }
        )
        await self.progress.put(progress)

        logger.info(
            "Course progress updated",
            extra={
                "user_id": user_id,
                "course_id": course_id,
                "overall_progress": progress.overall_progress,
            },
        )
        return progress
