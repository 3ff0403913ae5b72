"""
Tests for CourseService.

Uses in-memory repositories from conftest.

System role: Verification of course lifecycle rules
"""

import pytest

from marketplace.core.exceptions import BadRequestError, ForbiddenError, NotFoundError
from marketplace.models.course import (
    ChapterInput,
    ChapterType,
    CourseStatus,
    SectionInput,
    UpdateCourseRequest,
)


class TestCourseQueries:
    """Listing and lookup."""

    @pytest.mark.asyncio
    async def test_list_courses_by_category(self, course_service, course_repo, sample_course) -> None:
        # Arrange
        await course_repo.put(sample_course)
        await course_repo.put(sample_course.model_copy(update={"course_id": "D", "category": "Design"}))

        # Act
        programming = await course_service.list_courses("Programming")
        everything = await course_service.list_courses("all")
        unfiltered = await course_service.list_courses(None)

        # Assert
        assert [c.course_id for c in programming] == ["C"]
        assert {c.course_id for c in everything} == {"C", "D"}
        assert {c.course_id for c in unfiltered} == {"C", "D"}

    @pytest.mark.asyncio
    async def test_get_course_missing_raises(self, course_service) -> None:
        with pytest.raises(NotFoundError, match="Course not found"):
            await course_service.get_course("nope")


class TestCreateCourse:
    """Draft course creation."""

    @pytest.mark.asyncio
    async def test_creates_placeholder_draft(self, course_service, course_repo) -> None:
        course = await course_service.create_course("T1", "T1", "Ada")

        assert course.title == "Untitled Course"
        assert course.category == "Uncategorized"
        assert course.price == 0
        assert course.status == CourseStatus.DRAFT
        assert course.sections == []
        assert course.enrollments == []
        assert course.created_at == course.updated_at
        assert course_repo.items[course.course_id].teacher_name == "Ada"

    @pytest.mark.asyncio
    async def test_each_course_gets_a_new_id(self, course_service) -> None:
        first = await course_service.create_course("T1", "T1", "Ada")
        second = await course_service.create_course("T1", "T1", "Ada")

        assert first.course_id != second.course_id

    @pytest.mark.asyncio
    async def test_cannot_create_for_another_teacher(self, course_service, course_repo) -> None:
        with pytest.raises(ForbiddenError):
            await course_service.create_course("U2", "T1", "Ada")

        assert course_repo.put_calls == 0


class TestUpdateCourse:
    """Owner-only updates."""

    @pytest.mark.asyncio
    async def test_price_string_stored_in_minor_units(self, course_service, course_repo, sample_course) -> None:
        await course_repo.put(sample_course)

        updated = await course_service.update_course("C", "T1", UpdateCourseRequest(price="49.99"))

        assert updated.price == 4999
        assert course_repo.items["C"].price == 4999
        assert course_repo.items["C"].title == "Intro to Python"

    @pytest.mark.asyncio
    async def test_invalid_price_writes_nothing(self, course_service, course_repo, sample_course) -> None:
        await course_repo.put(sample_course)
        puts_before = course_repo.put_calls

        with pytest.raises(BadRequestError, match="Invalid price format"):
            await course_service.update_course("C", "T1", UpdateCourseRequest(price="abc"))

        assert course_repo.put_calls == puts_before
        assert course_repo.items["C"].price == 1000

    @pytest.mark.asyncio
    async def test_non_owner_cannot_update(self, course_service, course_repo, sample_course) -> None:
        await course_repo.put(sample_course)

        with pytest.raises(ForbiddenError, match="Not authorized to update this course"):
            await course_service.update_course("C", "U2", UpdateCourseRequest(title="Hijacked"))

        assert course_repo.items["C"].title == "Intro to Python"

    @pytest.mark.asyncio
    async def test_missing_ids_are_generated_and_existing_kept(
        self, course_service, course_repo, sample_course
    ) -> None:
        await course_repo.put(sample_course)
        request = UpdateCourseRequest(
            sections=[
                SectionInput(
                    section_title="New section",
                    chapters=[ChapterInput(type=ChapterType.TEXT, title="Fresh")],
                ),
                SectionInput(
                    section_id="S1",
                    section_title="Getting started",
                    chapters=[ChapterInput(chapter_id="CH1", type=ChapterType.TEXT, title="Welcome")],
                ),
            ]
        )

        updated = await course_service.update_course("C", "T1", request)

        new_section, kept_section = updated.sections
        assert new_section.section_id
        assert new_section.chapters[0].chapter_id
        assert kept_section.section_id == "S1"
        assert kept_section.chapters[0].chapter_id == "CH1"

    @pytest.mark.asyncio
    async def test_generated_chapter_ids_are_distinct(self, course_service) -> None:
        course = await course_service.create_course("T1", "T1", "Ada")
        request = UpdateCourseRequest(
            sections=[
                SectionInput(section_title="One", chapters=[ChapterInput(type=ChapterType.TEXT, title="A")]),
                SectionInput(section_title="Two", chapters=[ChapterInput(type=ChapterType.QUIZ, title="B")]),
            ]
        )

        updated = await course_service.update_course(course.course_id, "T1", request)

        chapter_ids = [chapter.chapter_id for section in updated.sections for chapter in section.chapters]
        assert len(chapter_ids) == 2
        assert all(chapter_ids)
        assert chapter_ids[0] != chapter_ids[1]

    @pytest.mark.asyncio
    async def test_update_refreshes_updated_at(self, course_service, course_repo, sample_course) -> None:
        await course_repo.put(sample_course)

        updated = await course_service.update_course("C", "T1", UpdateCourseRequest(status=CourseStatus.DRAFT))

        assert updated.updated_at != sample_course.updated_at
        assert updated.created_at == sample_course.created_at

    @pytest.mark.asyncio
    async def test_update_missing_course(self, course_service) -> None:
        with pytest.raises(NotFoundError):
            await course_service.update_course("nope", "T1", UpdateCourseRequest(title="x"))


class TestDeleteCourse:
    """Owner-only deletion."""

    @pytest.mark.asyncio
    async def test_delete_returns_removed_course(self, course_service, course_repo, sample_course) -> None:
        await course_repo.put(sample_course)

        deleted = await course_service.delete_course("C", "T1")

        assert deleted.course_id == "C"
        assert "C" not in course_repo.items

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, course_service, course_repo, sample_course) -> None:
        await course_repo.put(sample_course)

        with pytest.raises(ForbiddenError):
            await course_service.delete_course("C", "U2")

        assert "C" in course_repo.items
