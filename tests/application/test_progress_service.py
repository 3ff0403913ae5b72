"""
Tests for ProgressService.

System role: Verification of progress reads and merges
"""

import pytest
import pytest_asyncio

from marketplace.core.exceptions import NotFoundError
from marketplace.core.progress import build_initial_sections
from marketplace.models.progress import ChapterProgress, SectionProgress, UserCourseProgress


def completion(section_id: str, chapter_id: str, completed: bool = True) -> list[SectionProgress]:
    return [
        SectionProgress(
            section_id=section_id,
            chapters=[ChapterProgress(chapter_id=chapter_id, completed=completed)],
        )
    ]


@pytest_asyncio.fixture
async def enrolled(progress_repo, course_repo, sample_course) -> UserCourseProgress:
    await course_repo.put(sample_course)
    progress = UserCourseProgress(
        user_id="U",
        course_id="C",
        enrollment_date="2025-01-01T00:00:00.000Z",
        sections=build_initial_sections(sample_course),
        last_accessed_timestamp="2025-01-01T00:00:00.000Z",
    )
    await progress_repo.put(progress)
    return progress


class TestUpdateProgress:
    """Merging chapter completion updates."""

    @pytest.mark.asyncio
    async def test_completion_accumulates(self, progress_service, enrolled) -> None:
        # Act
        first = await progress_service.update_progress("U", "C", completion("S1", "CH1"))
        second = await progress_service.update_progress("U", "C", completion("S2", "CH3"))

        # Assert
        assert first.overall_progress == pytest.approx(1 / 3)
        assert second.overall_progress == pytest.approx(2 / 3)
        states = {
            c.chapter_id: c.completed for s in second.sections for c in s.chapters
        }
        assert states == {"CH1": True, "CH2": False, "CH3": True}

    @pytest.mark.asyncio
    async def test_update_bumps_last_accessed(self, progress_service, progress_repo, enrolled) -> None:
        updated = await progress_service.update_progress("U", "C", completion("S1", "CH2"))

        stored = progress_repo.items[("U", "C")]
        assert stored.last_accessed_timestamp == updated.last_accessed_timestamp
        assert stored.last_accessed_timestamp != enrolled.last_accessed_timestamp
        assert stored.enrollment_date == enrolled.enrollment_date

    @pytest.mark.asyncio
    async def test_missing_record_is_created(self, progress_service, progress_repo) -> None:
        progress = await progress_service.update_progress("U", "X", completion("S1", "CH1"))

        assert progress.overall_progress == 1.0
        assert ("U", "X") in progress_repo.items

    @pytest.mark.asyncio
    async def test_empty_update_recomputes_without_change(self, progress_service, enrolled) -> None:
        progress = await progress_service.update_progress("U", "C", [])

        assert progress.overall_progress == 0.0
        assert [s.section_id for s in progress.sections] == ["S1", "S2"]


class TestProgressQueries:
    """Progress and enrolled course reads."""

    @pytest.mark.asyncio
    async def test_get_progress(self, progress_service, enrolled) -> None:
        progress = await progress_service.get_progress("U", "C")

        assert progress.course_id == "C"

    @pytest.mark.asyncio
    async def test_get_progress_missing(self, progress_service) -> None:
        with pytest.raises(NotFoundError, match="Course progress not found for this user"):
            await progress_service.get_progress("U", "C")

    @pytest.mark.asyncio
    async def test_enrolled_courses(self, progress_service, enrolled) -> None:
        courses = await progress_service.get_enrolled_courses("U")

        assert [c.course_id for c in courses] == ["C"]

    @pytest.mark.asyncio
    async def test_no_enrollments(self, progress_service) -> None:
        assert await progress_service.get_enrolled_courses("nobody") == []
