"""
Base repository for DynamoDB tables.

Provides the paginated scan/query loops and item conversion shared by the
table-specific repositories. boto3 calls are blocking, so every public
coroutine hands them to a worker thread.

Dependencies: boto3, asyncio
System role: Foundation for all table repositories
"""

import asyncio
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from marketplace.boundary.db.item_codec import from_item, to_item

ModelT = TypeVar("ModelT", bound=BaseModel)


class DynamoRepository(Generic[ModelT]):
    """
    Generic base class for a single DynamoDB table.

    Type Parameters:
        ModelT: Pydantic model stored in the table

    Attributes:
        model: Pydantic model class items are parsed into
        table_name: Physical table name
    """

    model: type[ModelT]

    def __init__(self, resource: Any, table_name: str) -> None:
        """
        Initialize repository for one table.

        Args:
            resource: boto3 DynamoDB ServiceResource
            table_name: Table to operate on
        """
        self._resource = resource
        self.table_name = table_name
        self._table = resource.Table(table_name)

    def _parse(self, item: dict[str, Any]) -> ModelT:
        return self.model.model_validate(from_item(item))

    def _dump(self, instance: ModelT) -> dict[str, Any]:
        return to_item(instance.model_dump(mode="json", by_alias=True, exclude_none=True))

    async def _get_item(self, key: dict[str, Any]) -> ModelT | None:
        response = await asyncio.to_thread(self._table.get_item, Key=key)
        item = response.get("Item")
        return self._parse(item) if item else None

    async def _put(self, instance: ModelT) -> None:
        await asyncio.to_thread(self._table.put_item, Item=self._dump(instance))

    async def _scan_all(self, **kwargs: Any) -> list[ModelT]:
        """Scan the whole table, following LastEvaluatedKey."""
        return await asyncio.to_thread(self._paginate, self._table.scan, kwargs)

    async def _query_all(self, **kwargs: Any) -> list[ModelT]:
        """Run a query to exhaustion, following LastEvaluatedKey."""
        return await asyncio.to_thread(self._paginate, self._table.query, kwargs)

    def _paginate(self, operation: Any, kwargs: dict[str, Any]) -> list[ModelT]:
        response = operation(**kwargs)
        items = list(response.get("Items", []))
        while "LastEvaluatedKey" in response:
            response = operation(ExclusiveStartKey=response["LastEvaluatedKey"], **kwargs)
            items.extend(response.get("Items", []))
        return [self._parse(item) for item in items]
