"""Origin-request transformation: classify, prepare and sign.

Flow:
1. Classify the origin domain; anything but a function URL passes through
2. Resolve region and credentials (fatal on failure)
3. Rewrite `host` to the origin domain, keeping the viewer host in `x-forwarded-host`
4. Flatten headers, drop hop-by-hop headers, parse the query and decode the body
5. Sign and put the signed headers back on a copy of the request
"""

import base64
import binascii
from collections.abc import Mapping
from datetime import datetime

from ._types import CloudFrontHeaders, CloudFrontRequest, CloudFrontRequestBody
from .codec import parse_query_string, to_header_bag, to_multi_value_headers
from .config import SigningConfig
from .credentials import resolve_credentials
from .errors import BodyEncodingError, BodyTruncatedError
from .origin import extract_region, is_signable_origin
from .signer import CanonicalRequest, sign


def origin_domain(request: CloudFrontRequest) -> str | None:
    """Return the custom origin domain the request is routed to."""
    return request.get("origin", {}).get("custom", {}).get("domainName")


def decode_body(body: CloudFrontRequestBody | None) -> bytes | None:
    """Decode the request body from its transport encoding.

    Raises:
        BodyTruncatedError: If CloudFront truncated the body
        BodyEncodingError: If the data does not match its declared encoding
    """
    if not body or not body.get("data"):
        return None
    if body.get("inputTruncated"):
        raise BodyTruncatedError("Request body was truncated by CloudFront")

    data = body["data"]
    encoding = body.get("encoding", "base64")
    if encoding == "text":
        return data.encode("utf-8")
    if encoding != "base64":
        raise BodyEncodingError(f"Unsupported body encoding '{encoding}'")

    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise BodyEncodingError("Request body is not valid base64") from e


def _rewrite_host(headers: CloudFrontHeaders, domain: str, forwarded_host_header: str) -> None:
    entries = headers.get("host") or []
    original_host = entries[0].get("value") if entries else None
    if original_host:
        headers[forwarded_host_header] = [{"key": forwarded_host_header, "value": original_host}]
    headers["host"] = [{"key": "host", "value": domain}]


def sign_origin_request(
    request: CloudFrontRequest,
    environ: Mapping[str, str],
    config: SigningConfig | None = None,
    now: datetime | None = None,
) -> CloudFrontRequest:
    """Return the request signed for its function URL origin, or unchanged.

    Args:
        request: CloudFront origin-request `request` object
        environ: Environment mapping holding the execution role credentials
        config: Signing policy, defaults to SigningConfig()
        now: Signing time, defaults to the current UTC time

    Returns:
        The same request object when the origin is not signable, otherwise a
        copy with only `headers` replaced

    Raises:
        RegionExtractionError: If the origin domain has no region segment
        MissingCredentialsError: If any credential value is missing
        BodyEncodingError: If the body cannot be decoded
        BodyTruncatedError: If CloudFront truncated the body
    """
    config = config or SigningConfig()

    domain = origin_domain(request)
    if not domain or not is_signable_origin(domain):
        return request

    region = extract_region(domain)
    credentials = resolve_credentials(environ, region)

    headers: CloudFrontHeaders = dict(request.get("headers", {}))
    _rewrite_host(headers, domain, config.forwarded_host_header)

    header_bag = to_header_bag(headers)
    for name in config.excluded_headers:
        header_bag.pop(name, None)

    canonical = CanonicalRequest(
        method=request.get("method", "GET"),
        hostname=header_bag["host"],
        path=request.get("uri", "/"),
        query=parse_query_string(request.get("querystring", "")),
        headers=header_bag,
        body=decode_body(request.get("body")),
    )
    signed_headers = sign(canonical, credentials, now=now, service=config.service)

    return {**request, "headers": to_multi_value_headers(signed_headers)}
