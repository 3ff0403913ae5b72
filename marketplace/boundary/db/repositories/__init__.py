"""Table repositories."""

from .base_repository import DynamoRepository
from .course_repository import CourseRepository
from .progress_repository import ProgressRepository
from .transaction_repository import TransactionRepository

__all__ = [
    "DynamoRepository",
    "CourseRepository",
    "ProgressRepository",
    "TransactionRepository",
]
