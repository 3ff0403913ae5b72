"""
S3 client for the chapter video bucket.

Handles presigned URL generation for direct browser uploads. Videos are
read back through CloudFront, never through this client.

Dependencies: boto3
System role: API-level S3 operations for presigned URLs
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import boto3


class S3VideoClient:
    """S3 client for video bucket operations (presigned upload URLs only)."""

    def __init__(self, bucket: str, region: str = "us-east-1", client: Any = None) -> None:
        """
        Initialize S3 client for the video bucket.

        Args:
            bucket: S3 bucket name for video storage
            region: AWS region for S3 bucket
            client: Pre-built boto3 S3 client (built from region when omitted)
        """
        self._bucket = bucket
        self._region = region
        self._s3_client = client or boto3.client("s3", region_name=region)

    @property
    def bucket(self) -> str:
        return self._bucket

    def generate_presigned_upload_url(
        self,
        s3_key: str,
        content_type: str,
        expires_in: int = 60,
    ) -> tuple[str, datetime]:
        """
        Generate presigned URL for uploading a video.

        Args:
            s3_key: S3 object key (path in bucket)
            content_type: MIME type the browser will send
            expires_in: URL expiry in seconds

        Returns:
            tuple[str, datetime]: (presigned_url, expires_at)

        Raises:
            ClientError: If presigned URL generation fails
        """
        presigned_url = self._s3_client.generate_presigned_url(
            ClientMethod="put_object",
            Params={
                "Bucket": self._bucket,
                "Key": s3_key,
                "ContentType": content_type,
            },
            ExpiresIn=expires_in,
        )
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=expires_in)
        return presigned_url, expires_at
