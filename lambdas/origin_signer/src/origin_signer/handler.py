"""Lambda@Edge origin-request handler - signs requests bound for Lambda function URLs."""

import json
import os

from ._types import (
    CloudFrontRequest,
    CloudFrontRequestEvent,
    CloudFrontResultResponse,
    LambdaContext,
)
from .errors import OriginSignerError, SigningConfigurationError
from .logging_config import LOGGER
from .signer import AUTHORIZATION_HEADER
from .transformer import origin_domain, sign_origin_request


def _error_response(error: OriginSignerError) -> CloudFrontResultResponse:
    """Build the generated response returned instead of forwarding the request."""
    if isinstance(error, SigningConfigurationError):
        status, description = "502", "Bad Gateway"
    else:
        status, description = "400", "Bad Request"

    return {
        "status": status,
        "statusDescription": description,
        "headers": {
            "content-type": [{"key": "Content-Type", "value": "application/json"}],
        },
        "body": json.dumps({"error": error.kind, "message": str(error)}),
    }


def _signing_region(request: CloudFrontRequest) -> str:
    """Read the region back from the credential scope of the signed request."""
    authorization = request["headers"][AUTHORIZATION_HEADER][0]["value"]
    credential = authorization.split("Credential=", 1)[1].split(",", 1)[0]
    # <access key>/<date>/<region>/<service>/aws4_request
    return credential.split("/")[2]


def handler(
    event: CloudFrontRequestEvent, context: LambdaContext
) -> CloudFrontRequest | CloudFrontResultResponse:
    """Sign the origin request when it targets a function URL.

    Flow:
    1. Unwrap the CloudFront request from the event
    2. Sign it (or pass it through) using the execution role credentials
    3. On a fatal error, return a generated error response instead of forwarding
    """
    record = event["Records"][0]["cf"]
    request = record["request"]
    request_id = record.get("config", {}).get("requestId", context.aws_request_id)
    domain = origin_domain(request)

    try:
        result = sign_origin_request(request, os.environ)
    except OriginSignerError as e:
        LOGGER.error(
            "Origin request not signed: %s",
            e,
            extra={"errorKind": e.kind, "originDomain": domain, "requestId": request_id},
        )
        return _error_response(e)

    if result is request:
        LOGGER.info(
            "Origin is not a function URL, passing request through",
            extra={"outcome": "passthrough", "originDomain": domain, "requestId": request_id},
        )
        return result

    LOGGER.info(
        "Origin request signed",
        extra={
            "outcome": "signed",
            "originDomain": domain,
            "region": _signing_region(result),
            "method": request.get("method"),
            "uri": request.get("uri"),
            "requestId": request_id,
        },
    )
    return result
