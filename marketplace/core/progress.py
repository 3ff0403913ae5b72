"""
Progress merging and aggregation.

Reconciles a client's partial chapter-completion update with stored
progress and recomputes the overall completion ratio.

Dependencies: marketplace.models
System role: Pure progress computation used by enrollment and progress updates
"""

from collections.abc import Iterable, Sequence

from marketplace.models.course import Course
from marketplace.models.progress import ChapterProgress, SectionProgress


def merge_sections(
    existing: Sequence[SectionProgress],
    incoming: Sequence[SectionProgress],
) -> list[SectionProgress]:
    """
    Merge incoming section progress into the stored sections.

    Sections are keyed by section_id and chapters by chapter_id. An incoming
    chapter's completed flag replaces the stored one; anything present only
    on one side is kept. Stored order is preserved and new sections or
    chapters are appended in incoming order. Inputs are left untouched.

    Args:
        existing: Previously stored section progress
        incoming: Partial update from the client

    Returns:
        list[SectionProgress]: Merged section progress
    """
    merged: dict[str, SectionProgress] = {
        section.section_id: section.model_copy(deep=True) for section in existing
    }

    for update in incoming:
        current = merged.get(update.section_id)
        if current is None:
            merged[update.section_id] = update.model_copy(deep=True)
            continue
        current.chapters = _merge_chapters(current.chapters, update.chapters)

    return list(merged.values())


def _merge_chapters(
    existing: Sequence[ChapterProgress],
    incoming: Sequence[ChapterProgress],
) -> list[ChapterProgress]:
    chapters: dict[str, ChapterProgress] = {
        chapter.chapter_id: chapter for chapter in existing
    }
    for chapter in incoming:
        chapters[chapter.chapter_id] = chapter.model_copy()
    return list(chapters.values())


def calculate_overall_progress(sections: Iterable[SectionProgress]) -> float:
    """
    Ratio of completed chapters over all chapters.

    Returns 0.0 when there are no chapters at all.
    """
    total = 0
    completed = 0
    for section in sections:
        total += len(section.chapters)
        completed += sum(1 for chapter in section.chapters if chapter.completed)
    if total == 0:
        return 0.0
    return completed / total


def build_initial_sections(course: Course) -> list[SectionProgress]:
    """Progress skeleton for a fresh enrollment: every chapter incomplete."""
    return [
        SectionProgress(
            section_id=section.section_id,
            chapters=[
                ChapterProgress(chapter_id=chapter.chapter_id, completed=False)
                for chapter in section.chapters
            ],
        )
        for section in course.sections
    ]
