"""
Video upload URL handler.

Encapsulates file validation and S3 key generation for chapter video
uploads, and builds the CloudFront URL the video will be served from.

Dependencies: marketplace.boundary.aws.s3_client
System role: Presigned video upload request handling
"""

import logging
import uuid

from marketplace.boundary.aws.s3_client import S3VideoClient
from marketplace.core.exceptions import BadRequestError
from marketplace.models.course import UploadUrlRequest, UploadUrlResponse

logger = logging.getLogger(__name__)


def validate_video_request(request: UploadUrlRequest) -> None:
    """
    Raises:
        BadRequestError: Missing name/type or a name that escapes its key prefix
    """
    if not request.file_name or not request.file_type:
        raise BadRequestError("File name and type are required")

    if ".." in request.file_name or "/" in request.file_name or "\\" in request.file_name:
        raise BadRequestError("Invalid file name: path traversal detected", field="fileName")


def build_video_key(upload_id: str, file_name: str) -> str:
    """Format: videos/{upload_id}/{file_name}"""
    return f"videos/{upload_id}/{file_name}"


def handle_video_upload_request(
    request: UploadUrlRequest,
    s3_client: S3VideoClient,
    cloudfront_domain: str,
    expires_in: int = 60,
) -> UploadUrlResponse:
    """
    Generate a presigned upload URL and the public video URL.

    Args:
        request: UploadUrlRequest with file name and content type
        s3_client: S3VideoClient for URL generation
        cloudfront_domain: CDN base URL in front of the bucket
        expires_in: Upload URL lifetime in seconds

    Returns:
        UploadUrlResponse: uploadUrl for the browser PUT, videoUrl for playback

    Raises:
        BadRequestError: Invalid request
        ClientError: Presigning failed
    """
    validate_video_request(request)

    upload_id = str(uuid.uuid4())
    s3_key = build_video_key(upload_id, request.file_name)

    upload_url, expires_at = s3_client.generate_presigned_upload_url(
        s3_key=s3_key,
        content_type=request.file_type,
        expires_in=expires_in,
    )

    logger.info(
        "Video upload URL generated",
        extra={"s3_key": s3_key, "expires_at": expires_at.isoformat()},
    )

    return UploadUrlResponse(
        upload_url=upload_url,
        video_url=f"{cloudfront_domain.rstrip('/')}/{s3_key}",
    )
