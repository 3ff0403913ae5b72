"""
User course progress models.

Dependencies: pydantic
System role: Progress tracking API contracts
"""

from pydantic import Field

from marketplace.models.common import CamelModel


class ChapterProgress(CamelModel):
    chapter_id: str = Field(..., min_length=1)
    completed: bool = False


class SectionProgress(CamelModel):
    section_id: str = Field(..., min_length=1)
    chapters: list[ChapterProgress] = Field(default_factory=list)


class UserCourseProgress(CamelModel):
    """Progress item keyed by (user_id, course_id) in the UserCourseProgress table."""

    user_id: str
    course_id: str
    enrollment_date: str
    overall_progress: float = Field(0.0, ge=0.0, le=1.0)
    sections: list[SectionProgress] = Field(default_factory=list)
    last_accessed_timestamp: str


class UpdateProgressRequest(CamelModel):
    """Partial progress update; only sections are read from the body."""

    sections: list[SectionProgress] = Field(default_factory=list)
