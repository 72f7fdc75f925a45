"""Test fixtures for origin signer tests."""

from datetime import UTC, datetime

import pytest

from origin_signer._types import CloudFrontRequest, CloudFrontRequestEvent, LambdaContext
from origin_signer.config import Credentials

ORIGIN_DOMAIN = "abc123.lambda-url.us-east-1.on.aws"
VIEWER_HOST = "www.example.com"

ACCESS_KEY_ID = "AKIDEXAMPLE"
SECRET_ACCESS_KEY = "wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY"
SESSION_TOKEN = "IQoJb3JpZ2luX2VjEXAMPLETOKEN"


class MockLambdaContext(LambdaContext):
    """Mock Lambda context for testing."""

    function_name = "us-east-1.origin-signer"
    memory_limit_in_mb = 128
    invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:origin-signer:3"
    aws_request_id = "test-request-id-12345"


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set execution role credentials for all tests."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", ACCESS_KEY_ID)
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", SECRET_ACCESS_KEY)
    monkeypatch.setenv("AWS_SESSION_TOKEN", SESSION_TOKEN)


@pytest.fixture
def lambda_context() -> LambdaContext:
    """Provide mock Lambda context."""
    return MockLambdaContext()


@pytest.fixture
def environ() -> dict[str, str]:
    """Credential environment passed explicitly to the transformer."""
    return {
        "AWS_ACCESS_KEY_ID": ACCESS_KEY_ID,
        "AWS_SECRET_ACCESS_KEY": SECRET_ACCESS_KEY,
        "AWS_SESSION_TOKEN": SESSION_TOKEN,
    }


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(
        access_key_id=ACCESS_KEY_ID,
        secret_access_key=SECRET_ACCESS_KEY,
        session_token=SESSION_TOKEN,
        region="us-east-1",
    )


@pytest.fixture
def signing_time() -> datetime:
    return datetime(2024, 5, 17, 9, 30, 15, tzinfo=UTC)


@pytest.fixture
def signable_request() -> CloudFrontRequest:
    """Origin request routed to a Lambda function URL."""
    return {
        "clientIp": "203.0.113.178",
        "method": "GET",
        "uri": "/api/items",
        "querystring": "limit=10&tag=a&tag=b",
        "headers": {
            "host": [{"key": "Host", "value": VIEWER_HOST}],
            "accept": [{"key": "Accept", "value": "application/json"}],
            "user-agent": [{"key": "User-Agent", "value": "Amazon CloudFront"}],
            "x-forwarded-for": [{"key": "X-Forwarded-For", "value": "203.0.113.178"}],
            "via": [
                {"key": "Via", "value": "2.0 2afae0d44e2540f472c0635ab62c232b.cloudfront.net"}
            ],
        },
        "origin": {
            "custom": {
                "domainName": ORIGIN_DOMAIN,
                "path": "",
                "port": 443,
                "protocol": "https",
                "readTimeout": 30,
                "keepaliveTimeout": 5,
                "sslProtocols": ["TLSv1.2"],
                "customHeaders": {},
            }
        },
    }


@pytest.fixture
def request_with_body(signable_request: CloudFrontRequest) -> CloudFrontRequest:
    """POST with a base64 body, as CloudFront delivers it when body inclusion is on."""
    signable_request["method"] = "POST"
    signable_request["body"] = {
        "action": "read-only",
        "data": "eyJuYW1lIjogIndpZGdldCJ9",  # {"name": "widget"}
        "encoding": "base64",
        "inputTruncated": False,
    }
    return signable_request


@pytest.fixture
def s3_request(signable_request: CloudFrontRequest) -> CloudFrontRequest:
    """Origin request routed to a non-function-URL origin."""
    signable_request["origin"] = {"custom": {"domainName": "assets.s3.us-east-1.amazonaws.com"}}
    return signable_request


def make_event(request: CloudFrontRequest) -> CloudFrontRequestEvent:
    """Wrap a request in a Lambda@Edge origin-request event."""
    return {
        "Records": [
            {
                "cf": {
                    "config": {
                        "distributionDomainName": "d111111abcdef8.cloudfront.net",
                        "distributionId": "EDFDVBD6EXAMPLE",
                        "eventType": "origin-request",
                        "requestId": "4TyzHTaYWb1GX1qTfsHhEqV6HUDd_BzoBZnwfnvQc_1oF26ClkoUSEQ==",
                    },
                    "request": request,
                }
            }
        ]
    }
