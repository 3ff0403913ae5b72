"""
DynamoDB connection management.

Dependencies: boto3, marketplace.configs
System role: Builds the boto3 service resource shared by repositories
"""

import logging
from typing import Any

import boto3

from marketplace.configs.dynamodb import DynamoDBSettings

logger = logging.getLogger(__name__)


def create_dynamodb_resource(settings: DynamoDBSettings) -> Any:
    """
    Create a DynamoDB service resource.

    Args:
        settings: DynamoDB configuration (region, optional endpoint override)

    Returns:
        boto3 DynamoDB ServiceResource
    """
    logger.info(
        "Creating DynamoDB resource",
        extra={"region": settings.region, "endpoint_url": settings.endpoint_url},
    )
    return boto3.resource(
        "dynamodb",
        region_name=settings.region,
        endpoint_url=settings.endpoint_url or None,
    )
