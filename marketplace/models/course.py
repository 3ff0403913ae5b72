"""
Course domain models and schemas.

Course/section/chapter entities as stored in the Courses table, plus
request/response schemas for course operations.

Dependencies: pydantic
System role: Course API contracts
"""

import json
from enum import Enum
from typing import Any

from pydantic import Field, field_validator

from marketplace.models.common import CamelModel


class CourseLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class CourseStatus(str, Enum):
    DRAFT = "Draft"
    PUBLISHED = "Published"


class ChapterType(str, Enum):
    TEXT = "Text"
    QUIZ = "Quiz"
    VIDEO = "Video"


class Comment(CamelModel):
    """Student comment attached to a chapter."""

    comment_id: str
    user_id: str
    text: str
    timestamp: str


class Chapter(CamelModel):
    """Single unit of course content."""

    chapter_id: str
    type: ChapterType
    title: str
    content: str = ""
    comments: list[Comment] | None = None
    video: str | None = None


class Section(CamelModel):
    """Ordered group of chapters."""

    section_id: str
    section_title: str
    section_description: str | None = None
    chapters: list[Chapter] = Field(default_factory=list)


class Enrollment(CamelModel):
    user_id: str


class Course(CamelModel):
    """
    Course item as stored in the Courses table.

    Defaults double as the placeholder values of a freshly created course
    and fill gaps when normalizing partially written items.
    """

    course_id: str
    teacher_id: str = ""
    teacher_name: str = ""
    title: str = "Untitled Course"
    description: str = ""
    category: str = "Uncategorized"
    image: str = ""
    price: int = 0
    level: CourseLevel = CourseLevel.BEGINNER
    status: CourseStatus = CourseStatus.DRAFT
    sections: list[Section] = Field(default_factory=list)
    enrollments: list[Enrollment] = Field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""

    def is_enrolled(self, user_id: str) -> bool:
        return any(enrollment.user_id == user_id for enrollment in self.enrollments)


class CreateCourseRequest(CamelModel):
    """Request schema for creating a new (draft) course."""

    teacher_id: str | None = Field(None, description="Owning teacher's user id")
    teacher_name: str | None = Field(None, description="Display name of the teacher")


class ChapterInput(CamelModel):
    """Chapter as submitted by the course editor; chapter_id may be missing."""

    chapter_id: str | None = None
    type: ChapterType
    title: str
    content: str = ""
    comments: list[Comment] | None = None
    video: str | None = None


class SectionInput(CamelModel):
    """Section as submitted by the course editor; section_id may be missing."""

    section_id: str | None = None
    section_title: str
    section_description: str | None = None
    chapters: list[ChapterInput] = Field(default_factory=list)


class UpdateCourseRequest(CamelModel):
    """Request schema for updating a course. Omitted fields are left unchanged."""

    title: str | None = Field(None, max_length=255)
    description: str | None = None
    category: str | None = None
    image: str | None = None
    price: str | int | float | None = Field(
        None, description="Decimal price in major units, e.g. \"49.99\""
    )
    level: CourseLevel | None = None
    status: CourseStatus | None = None
    sections: list[SectionInput] | None = None

    @field_validator("sections", mode="before")
    @classmethod
    def parse_sections_json(cls, value: Any) -> Any:
        """Accept sections serialized as a JSON string (multipart course editor)."""
        if isinstance(value, str):
            try:
                return json.loads(value)
            except json.JSONDecodeError as e:
                raise ValueError("sections must be a list or a JSON encoded list") from e
        return value


class UploadUrlRequest(CamelModel):
    """Request schema for a presigned video upload URL."""

    file_name: str | None = None
    file_type: str | None = None


class UploadUrlResponse(CamelModel):
    """Presigned write URL and the public URL the video will be served from."""

    upload_url: str
    video_url: str
