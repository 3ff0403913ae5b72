"""
Database boundary layer: DynamoDB resource factory, item encoding and
repositories for the Courses, Transactions and UserCourseProgress tables.

Dependencies: boto3, marketplace.configs
System role: Key-value store adapter
"""

from marketplace.boundary.db.connection import create_dynamodb_resource
from marketplace.boundary.db.item_codec import from_item, to_item
from marketplace.boundary.db.repositories import (
    CourseRepository,
    ProgressRepository,
    TransactionRepository,
)

__all__ = [
    "create_dynamodb_resource",
    "from_item",
    "to_item",
    "CourseRepository",
    "ProgressRepository",
    "TransactionRepository",
]
