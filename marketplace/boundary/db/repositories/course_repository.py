"""
Courses table repository.

Dependencies: boto3
System role: Course persistence
"""

import asyncio
import logging
from typing import Any

from boto3.dynamodb.conditions import Attr

from marketplace.boundary.db.repositories.base_repository import DynamoRepository
from marketplace.models.course import Course

logger = logging.getLogger(__name__)

# BatchGetItem accepts at most 100 keys per request
BATCH_GET_LIMIT = 100


class CourseRepository(DynamoRepository[Course]):
    """Repository for the Courses table (partition key courseId)."""

    model = Course

    async def get(self, course_id: str) -> Course | None:
        return await self._get_item({"courseId": course_id})

    async def list_all(self, category: str | None = None) -> list[Course]:
        """
        Scan all courses, optionally keeping only an exact category match.

        Args:
            category: Category filter (None for every course)

        Returns:
            list[Course]: Matching courses
        """
        if category:
            return await self._scan_all(FilterExpression=Attr("category").eq(category))
        return await self._scan_all()

    async def put(self, course: Course) -> None:
        """Write the full course item, replacing any previous version."""
        await self._put(course)

    async def delete(self, course_id: str) -> None:
        await asyncio.to_thread(self._table.delete_item, Key={"courseId": course_id})

    async def append_enrollment(self, course_id: str, user_id: str) -> None:
        """
        Append {userId} to the course's enrollments list.

        The append is evaluated by DynamoDB on the single item; it does not
        rewrite the rest of the course.
        """
        await asyncio.to_thread(
            self._table.update_item,
            Key={"courseId": course_id},
            UpdateExpression=(
                "SET enrollments = list_append("
                "if_not_exists(enrollments, :empty_list), :new_enrollment)"
            ),
            ExpressionAttributeValues={
                ":new_enrollment": [{"userId": user_id}],
                ":empty_list": [],
            },
        )

    async def batch_get(self, course_ids: list[str]) -> list[Course]:
        """
        Fetch several courses by id.

        Ids are de-duplicated and requested in chunks of BATCH_GET_LIMIT;
        unprocessed keys returned by DynamoDB are requested again.

        Args:
            course_ids: Course ids to fetch

        Returns:
            list[Course]: Courses that exist (order not guaranteed)
        """
        unique_ids = list(dict.fromkeys(course_ids))
        if not unique_ids:
            return []
        return await asyncio.to_thread(self._batch_get_sync, unique_ids)

    def _batch_get_sync(self, course_ids: list[str]) -> list[Course]:
        items: list[dict[str, Any]] = []
        for start in range(0, len(course_ids), BATCH_GET_LIMIT):
            chunk = course_ids[start:start + BATCH_GET_LIMIT]
            request: dict[str, Any] = {
                self.table_name: {"Keys": [{"courseId": cid} for cid in chunk]}
            }
            while request:
                response = self._resource.batch_get_item(RequestItems=request)
                items.extend(response.get("Responses", {}).get(self.table_name, []))
                request = response.get("UnprocessedKeys") or {}
                if request:
                    logger.info(
                        "Retrying unprocessed course keys",
                        extra={"count": len(request.get(self.table_name, {}).get("Keys", []))},
                    )
        return [self._parse(item) for item in items]
