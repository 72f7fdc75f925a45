"""AWS Signature Version 4 signing for origin requests.

Implements the published SigV4 process:

1. Canonical request: method, canonical URI, canonical query string,
   canonical headers, signed header list and payload hash.
2. String to sign: algorithm, timestamp, credential scope and the
   SHA-256 of the canonical request.
3. Signing key: HMAC chain over date, region, service and `aws4_request`,
   seeded with the secret access key.
4. Signature: hex HMAC of the string to sign under the signing key.

Percent-encoding and path normalisation come from botocore so the canonical
form matches what AWS computes on the receiving side.
"""

import hashlib
import hmac
from dataclasses import dataclass, field
from datetime import UTC, datetime
from urllib.parse import unquote_to_bytes

from botocore.utils import normalize_url_path, percent_encode

from ._types import HeaderBag, QueryParameters
from .config import Credentials
from .errors import MissingCredentialsError

SIGNING_ALGORITHM = "AWS4-HMAC-SHA256"
SCOPE_TERMINATOR = "aws4_request"
EMPTY_PAYLOAD_HASH = hashlib.sha256(b"").hexdigest()

AMZ_DATE_HEADER = "x-amz-date"
SECURITY_TOKEN_HEADER = "x-amz-security-token"
CONTENT_SHA256_HEADER = "x-amz-content-sha256"
AUTHORIZATION_HEADER = "authorization"

_TIMESTAMP_FORMAT = "%Y%m%dT%H%M%SZ"
_DATE_FORMAT = "%Y%m%d"

# Headers that proxies may add, drop or rewrite after signing.
UNSIGNABLE_HEADERS = frozenset(
    {
        "authorization",
        "cache-control",
        "connection",
        "expect",
        "from",
        "keep-alive",
        "max-forwards",
        "pragma",
        "referer",
        "te",
        "trailer",
        "transfer-encoding",
        "upgrade",
        "user-agent",
        "x-amzn-trace-id",
    }
)
UNSIGNABLE_HEADER_PREFIXES = ("proxy-", "sec-")


@dataclass(frozen=True)
class CanonicalRequest:
    """Request fields covered by the signature.

    `protocol` is informational; SigV4 does not cover the scheme.
    """

    method: str
    hostname: str
    path: str
    query: QueryParameters = field(default_factory=dict)
    headers: HeaderBag = field(default_factory=dict)
    body: bytes | None = None
    protocol: str = "https"


def _hmac(key: bytes, msg: str) -> bytes:
    return hmac.new(key, msg.encode("utf-8"), hashlib.sha256).digest()


def payload_hash(body: bytes | None) -> str:
    """Hex SHA-256 of the body, or of the empty string when there is none."""
    if not body:
        return EMPTY_PAYLOAD_HASH
    return hashlib.sha256(body).hexdigest()


def canonical_uri(path: str) -> str:
    """Normalise dot segments and percent-encode the path, keeping `/`.

    The incoming path is already URL-encoded, so encoding it again is the
    double encoding SigV4 expects for every service except S3.
    """
    return percent_encode(normalize_url_path(path), safe="/-_.~")


def canonical_query_string(query: QueryParameters) -> str:
    """Encode and sort query pairs per SigV4.

    Values arrive as received on the wire. They are decoded to raw bytes first
    so that already-encoded values are not encoded twice and escapes that are
    not valid UTF-8 survive unchanged.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in query.items():
        if value is None:
            values = [""]
        elif isinstance(value, list):
            values = value
        else:
            values = [value]
        encoded_key = percent_encode(unquote_to_bytes(key))
        pairs.extend((encoded_key, percent_encode(unquote_to_bytes(item))) for item in values)
    return "&".join(f"{key}={value}" for key, value in sorted(pairs))


def is_signable_header(name: str) -> bool:
    name = name.lower()
    return name not in UNSIGNABLE_HEADERS and not name.startswith(UNSIGNABLE_HEADER_PREFIXES)


def headers_to_sign(headers: HeaderBag) -> HeaderBag:
    """Lower-case names, drop unsignable headers and collapse value whitespace."""
    return {
        name.lower(): " ".join(value.split())
        for name, value in headers.items()
        if is_signable_header(name)
    }


def signed_header_names(headers: HeaderBag) -> str:
    return ";".join(sorted(headers_to_sign(headers)))


def canonical_request(
    method: str,
    path: str,
    query: QueryParameters,
    headers: HeaderBag,
    body_hash: str,
) -> str:
    """Build the canonical request string."""
    signable = headers_to_sign(headers)
    canonical_headers = "".join(f"{name}:{signable[name]}\n" for name in sorted(signable))
    return "\n".join(
        [
            method.upper(),
            canonical_uri(path),
            canonical_query_string(query),
            canonical_headers,
            ";".join(sorted(signable)),
            body_hash,
        ]
    )


def credential_scope(date_stamp: str, region: str, service: str) -> str:
    return f"{date_stamp}/{region}/{service}/{SCOPE_TERMINATOR}"


def string_to_sign(amz_date: str, scope: str, canonical: str) -> str:
    """Build the string to sign from a canonical request."""
    digest = hashlib.sha256(canonical.encode("utf-8")).hexdigest()
    return "\n".join([SIGNING_ALGORITHM, amz_date, scope, digest])


def derive_signing_key(secret_access_key: str, date_stamp: str, region: str, service: str) -> bytes:
    """Derive the scoped signing key through the four-step HMAC chain."""
    k_date = _hmac(f"AWS4{secret_access_key}".encode("utf-8"), date_stamp)
    k_region = _hmac(k_date, region)
    k_service = _hmac(k_region, service)
    return _hmac(k_service, SCOPE_TERMINATOR)


def compute_signature(signing_key: bytes, to_sign: str) -> str:
    return hmac.new(signing_key, to_sign.encode("utf-8"), hashlib.sha256).hexdigest()


def sign(
    request: CanonicalRequest,
    credentials: Credentials,
    *,
    now: datetime | None = None,
    service: str = "lambda",
) -> HeaderBag:
    """Sign a request and return its headers with the SigV4 headers added.

    Input headers keep their values; only `host` (when absent), the
    `x-amz-*` signing headers and `authorization` are set.

    Args:
        request: Request to sign
        credentials: Access key, secret key, optional session token and region
        now: Signing time, defaults to the current UTC time
        service: Service name for the credential scope

    Returns:
        Header bag including `x-amz-date`, `x-amz-security-token`,
        `x-amz-content-sha256` and `authorization`

    Raises:
        MissingCredentialsError: If the access key or secret key is empty
    """
    missing = tuple(
        name
        for name, value in (
            ("access_key_id", credentials.access_key_id),
            ("secret_access_key", credentials.secret_access_key),
        )
        if not value
    )
    if missing:
        raise MissingCredentialsError(missing)

    if now is None:
        now = datetime.now(UTC)
    elif now.tzinfo is not None:
        now = now.astimezone(UTC)
    amz_date = now.strftime(_TIMESTAMP_FORMAT)
    date_stamp = now.strftime(_DATE_FORMAT)
    body_hash = payload_hash(request.body)

    headers: HeaderBag = {name.lower(): value for name, value in request.headers.items()}
    headers.setdefault("host", request.hostname)
    headers[AMZ_DATE_HEADER] = amz_date
    if credentials.session_token:
        headers[SECURITY_TOKEN_HEADER] = credentials.session_token
    headers[CONTENT_SHA256_HEADER] = body_hash

    canonical = canonical_request(request.method, request.path, request.query, headers, body_hash)
    scope = credential_scope(date_stamp, credentials.region, service)
    signing_key = derive_signing_key(
        credentials.secret_access_key, date_stamp, credentials.region, service
    )
    signature = compute_signature(signing_key, string_to_sign(amz_date, scope, canonical))

    headers[AUTHORIZATION_HEADER] = (
        f"{SIGNING_ALGORITHM} Credential={credentials.access_key_id}/{scope}, "
        f"SignedHeaders={signed_header_names(headers)}, Signature={signature}"
    )
    return headers
