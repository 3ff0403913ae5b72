"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory table repositories, Stripe gateway mock, sample
course data and service instances wired to them.
Dependencies: pytest, unittest.mock
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock

import pytest

from marketplace.application.services import (
    CourseService,
    ProgressService,
    TransactionService,
)
from marketplace.boundary.payments import PaymentIntentSummary
from marketplace.models.course import Chapter, ChapterType, Course, Enrollment, Section
from marketplace.models.progress import UserCourseProgress
from marketplace.models.transaction import Transaction


class InMemoryCourseRepository:
    """CourseRepository stand-in keeping copies of items in a dict."""

    def __init__(self) -> None:
        self.items: dict[str, Course] = {}
        self.put_calls = 0

    async def get(self, course_id: str) -> Course | None:
        course = self.items.get(course_id)
        return course.model_copy(deep=True) if course else None

    async def list_all(self, category: str | None = None) -> list[Course]:
        return [
            course.model_copy(deep=True)
            for course in self.items.values()
            if category is None or course.category == category
        ]

    async def put(self, course: Course) -> None:
        self.put_calls += 1
        self.items[course.course_id] = course.model_copy(deep=True)

    async def delete(self, course_id: str) -> None:
        self.items.pop(course_id, None)

    async def append_enrollment(self, course_id: str, user_id: str) -> None:
        course = self.items[course_id]
        course.enrollments.append(Enrollment(user_id=user_id))

    async def batch_get(self, course_ids: list[str]) -> list[Course]:
        return [
            self.items[course_id].model_copy(deep=True)
            for course_id in dict.fromkeys(course_ids)
            if course_id in self.items
        ]


class InMemoryTransactionRepository:
    """TransactionRepository stand-in."""

    def __init__(self) -> None:
        self.items: list[Transaction] = []

    async def get(self, transaction_id: str) -> Transaction | None:
        return next((t for t in self.items if t.transaction_id == transaction_id), None)

    async def put(self, transaction: Transaction) -> None:
        self.items.append(transaction.model_copy(deep=True))

    async def list_by_user(self, user_id: str) -> list[Transaction]:
        return [t for t in self.items if t.user_id == user_id]

    async def list_all(self) -> list[Transaction]:
        return list(self.items)


class InMemoryProgressRepository:
    """ProgressRepository stand-in keyed by (user_id, course_id)."""

    def __init__(self) -> None:
        self.items: dict[tuple[str, str], UserCourseProgress] = {}

    async def get(self, user_id: str, course_id: str) -> UserCourseProgress | None:
        progress = self.items.get((user_id, course_id))
        return progress.model_copy(deep=True) if progress else None

    async def put(self, progress: UserCourseProgress) -> None:
        self.items[(progress.user_id, progress.course_id)] = progress.model_copy(deep=True)

    async def list_by_user(self, user_id: str) -> list[UserCourseProgress]:
        return [p for (uid, _), p in self.items.items() if uid == user_id]


@pytest.fixture
def course_repo() -> InMemoryCourseRepository:
    return InMemoryCourseRepository()


@pytest.fixture
def transaction_repo() -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository()


@pytest.fixture
def progress_repo() -> InMemoryProgressRepository:
    return InMemoryProgressRepository()


@pytest.fixture
def payment_gateway() -> AsyncMock:
    """
    Create mock StripePaymentGateway.

    Returns:
        AsyncMock: Gateway reporting intent "tx1" as succeeded for 1000
    """
    gateway = AsyncMock()
    gateway.create_payment_intent = AsyncMock(return_value="pi_123_secret_456")
    gateway.retrieve_payment_intent = AsyncMock(
        return_value=PaymentIntentSummary(id="tx1", status="succeeded", amount=1000, currency="usd")
    )
    return gateway


@pytest.fixture
def sample_course() -> Course:
    """Published course C by teacher T1: two sections, three chapters, price 1000."""
    return Course(
        course_id="C",
        teacher_id="T1",
        teacher_name="Ada Teacher",
        title="Intro to Python",
        description="Basics",
        category="Programming",
        price=1000,
        status="Published",
        sections=[
            Section(
                section_id="S1",
                section_title="Getting started",
                chapters=[
                    Chapter(chapter_id="CH1", type=ChapterType.TEXT, title="Welcome", content="Hi"),
                    Chapter(
                        chapter_id="CH2",
                        type=ChapterType.VIDEO,
                        title="Setup",
                        content="",
                        video="https://cdn.example.com/videos/v1/setup.mp4",
                    ),
                ],
            ),
            Section(
                section_id="S2",
                section_title="Wrap up",
                chapters=[
                    Chapter(chapter_id="CH3", type=ChapterType.QUIZ, title="Quiz", content="Q1"),
                ],
            ),
        ],
        created_at="2025-01-01T00:00:00.000Z",
        updated_at="2025-01-01T00:00:00.000Z",
    )


@pytest.fixture
def course_service(course_repo: InMemoryCourseRepository) -> CourseService:
    return CourseService(courses=course_repo)


@pytest.fixture
def transaction_service(
    course_repo: InMemoryCourseRepository,
    transaction_repo: InMemoryTransactionRepository,
    progress_repo: InMemoryProgressRepository,
    payment_gateway: AsyncMock,
) -> TransactionService:
    return TransactionService(
        courses=course_repo,
        transactions=transaction_repo,
        progress=progress_repo,
        payments=payment_gateway,
        verify_payments=True,
        default_amount=50,
    )


@pytest.fixture
def progress_service(
    progress_repo: InMemoryProgressRepository,
    course_repo: InMemoryCourseRepository,
) -> ProgressService:
    return ProgressService(progress=progress_repo, courses=course_repo)
