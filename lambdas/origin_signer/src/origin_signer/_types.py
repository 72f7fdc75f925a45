"""Type definitions for the origin signer Lambda@Edge function."""

from typing import NotRequired, TypedDict


class CloudFrontHeader(TypedDict):
    """Single header entry; CloudFront keeps the original casing in `key`."""

    key: str
    value: str


CloudFrontHeaders = dict[str, list[CloudFrontHeader]]

# Lower-cased header name to a single value.
HeaderBag = dict[str, str]

# Parameter name to a value, a list of values, or None for a bare `key=`.
QueryParameters = dict[str, str | list[str] | None]


class CloudFrontRequestBody(TypedDict, total=False):
    action: str
    data: str
    encoding: str
    inputTruncated: bool


class CustomOrigin(TypedDict, total=False):
    domainName: str
    path: str
    port: int
    protocol: str
    readTimeout: int
    keepaliveTimeout: int
    sslProtocols: list[str]
    customHeaders: CloudFrontHeaders


class CloudFrontOrigin(TypedDict, total=False):
    custom: CustomOrigin


class CloudFrontRequest(TypedDict, total=False):
    """CloudFront origin-request `request` object."""

    clientIp: str
    method: str
    uri: str
    querystring: str
    headers: CloudFrontHeaders
    body: CloudFrontRequestBody
    origin: CloudFrontOrigin


class CloudFrontConfig(TypedDict, total=False):
    distributionDomainName: str
    distributionId: str
    eventType: str
    requestId: str


class CloudFrontPayload(TypedDict):
    config: CloudFrontConfig
    request: CloudFrontRequest


class CloudFrontRecord(TypedDict):
    cf: CloudFrontPayload


class CloudFrontRequestEvent(TypedDict):
    """Lambda@Edge origin-request event."""

    Records: list[CloudFrontRecord]


class CloudFrontResultResponse(TypedDict):
    """Generated response returned instead of forwarding to the origin."""

    status: str
    statusDescription: str
    headers: NotRequired[CloudFrontHeaders]
    body: NotRequired[str]


class LambdaContext:
    """AWS Lambda context object stub for typing."""

    function_name: str
    memory_limit_in_mb: int
    invoked_function_arn: str
    aws_request_id: str
