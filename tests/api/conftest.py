"""
API test fixtures.

Builds a TestClient whose services run against the in-memory repositories.
Callers authenticate with a signed session token or through the login fixture.
"""

import time
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from marketplace.api.deps import (
    get_course_service,
    get_current_user_id,
    get_progress_service,
    get_s3_video_client,
    get_settings_dependency,
    get_token_verifier,
    get_transaction_service,
)
from marketplace.boundary.auth import ClerkTokenVerifier
from marketplace.configs import Settings
from marketplace.configs.s3_videos import S3VideosSettings
from marketplace.main import create_app

TEST_SIGNING_SECRET = "api-test-secret"


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        s3_videos=S3VideosSettings(
            bucket="videos-bucket",
            cloudfront_domain="https://cdn.example.com/",
        )
    )


@pytest.fixture
def mock_s3_client() -> MagicMock:
    s3 = MagicMock()
    s3.generate_presigned_upload_url.return_value = ("https://s3.example.com/signed", MagicMock())
    return s3


@pytest.fixture
def app(course_service, transaction_service, progress_service, mock_s3_client, test_settings):
    application = create_app()
    application.dependency_overrides[get_course_service] = lambda: course_service
    application.dependency_overrides[get_transaction_service] = lambda: transaction_service
    application.dependency_overrides[get_progress_service] = lambda: progress_service
    application.dependency_overrides[get_s3_video_client] = lambda: mock_s3_client
    application.dependency_overrides[get_settings_dependency] = lambda: test_settings
    application.dependency_overrides[get_token_verifier] = lambda: ClerkTokenVerifier(
        jwt_key=TEST_SIGNING_SECRET, algorithms=["HS256"]
    )
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def login(app):
    """Authenticate subsequent requests as the given user id."""

    def _login(user_id: str) -> None:
        app.dependency_overrides[get_current_user_id] = lambda: user_id

    return _login


@pytest.fixture
def session_token():
    """Sign a short-lived session token for the given user id."""

    def _sign(user_id: str) -> str:
        return jwt.encode(
            {"sub": user_id, "exp": int(time.time()) + 300},
            TEST_SIGNING_SECRET,
            algorithm="HS256",
        )

    return _sign
