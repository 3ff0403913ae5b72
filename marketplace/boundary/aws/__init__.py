"""
AWS boundary modules.

Exports: S3VideoClient
"""

from .s3_client import S3VideoClient

__all__ = ["S3VideoClient"]
