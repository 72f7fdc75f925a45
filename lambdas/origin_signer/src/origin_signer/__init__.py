"""Lambda@Edge function that SigV4-signs requests to Lambda function URL origins."""

from ._types import CloudFrontRequest, CloudFrontRequestEvent, LambdaContext
from .handler import handler
from .transformer import sign_origin_request

__all__ = [
    "handler",
    "sign_origin_request",
    "CloudFrontRequest",
    "CloudFrontRequestEvent",
    "LambdaContext",
]
