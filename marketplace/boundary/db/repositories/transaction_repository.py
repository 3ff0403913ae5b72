"""
Transactions table repository.

Dependencies: boto3
System role: Purchase record persistence
"""

from typing import Any

from boto3.dynamodb.conditions import Key

from marketplace.boundary.db.repositories.base_repository import DynamoRepository
from marketplace.models.transaction import Transaction


class TransactionRepository(DynamoRepository[Transaction]):
    """Repository for the Transactions table (partition key transactionId) with a userId GSI."""

    model = Transaction

    def __init__(self, resource: Any, table_name: str, user_index: str) -> None:
        super().__init__(resource, table_name)
        self.user_index = user_index

    async def get(self, transaction_id: str) -> Transaction | None:
        return await self._get_item({"transactionId": transaction_id})

    async def put(self, transaction: Transaction) -> None:
        await self._put(transaction)

    async def list_by_user(self, user_id: str) -> list[Transaction]:
        return await self._query_all(
            IndexName=self.user_index,
            KeyConditionExpression=Key("userId").eq(user_id),
        )

    async def list_all(self) -> list[Transaction]:
        return await self._scan_all()
