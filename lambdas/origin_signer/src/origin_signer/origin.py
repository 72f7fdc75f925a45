"""Classification of CloudFront origins that need SigV4 signing."""

import re

from .errors import RegionExtractionError

_FUNCTION_URL_PATTERN = re.compile(
    r"^[a-z0-9]+\.lambda-url\.[a-z0-9-]+\.on\.aws$", re.IGNORECASE
)


def is_signable_origin(domain: str | None) -> bool:
    """Return True if the domain is a Lambda function URL."""
    if not domain:
        return False
    return _FUNCTION_URL_PATTERN.match(domain) is not None


def extract_region(domain: str) -> str:
    """Return the region segment of a function URL domain.

    `abc123.lambda-url.eu-west-2.on.aws` -> `eu-west-2`

    Raises:
        RegionExtractionError: If the domain has no third segment
    """
    segments = domain.split(".")
    if len(segments) < 3 or not segments[2]:
        raise RegionExtractionError(domain)
    return segments[2].lower()
