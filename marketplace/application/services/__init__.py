"""Service orchestrators."""

from .course_service import CourseService
from .progress_service import ProgressService
from .transaction_service import TransactionService

__all__ = [
    "CourseService",
    "ProgressService",
    "TransactionService",
]
