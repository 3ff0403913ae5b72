"""
UserCourseProgress table repository.

Dependencies: boto3
System role: Progress persistence keyed by (userId, courseId)
"""

from boto3.dynamodb.conditions import Key

from marketplace.boundary.db.repositories.base_repository import DynamoRepository
from marketplace.models.progress import UserCourseProgress


class ProgressRepository(DynamoRepository[UserCourseProgress]):
    """Repository for UserCourseProgress (partition userId, sort courseId)."""

    model = UserCourseProgress

    async def get(self, user_id: str, course_id: str) -> UserCourseProgress | None:
        return await self._get_item({"userId": user_id, "courseId": course_id})

    async def put(self, progress: UserCourseProgress) -> None:
        await self._put(progress)

    async def list_by_user(self, user_id: str) -> list[UserCourseProgress]:
        return await self._query_all(KeyConditionExpression=Key("userId").eq(user_id))
