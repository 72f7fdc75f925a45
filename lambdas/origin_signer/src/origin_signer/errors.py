"""Errors raised while preparing or signing an origin request.

Every error carries a `kind` so the handler can tell configuration problems
apart from problems with the request itself.
"""


class OriginSignerError(Exception):
    """Base class for fatal signing errors."""

    kind = "signing_error"


class SigningConfigurationError(OriginSignerError):
    """The function cannot sign because its environment or origin is misconfigured."""

    kind = "configuration_error"


class MissingCredentialsError(SigningConfigurationError):
    """One or more credential values are absent."""

    def __init__(self, missing: tuple[str, ...]) -> None:
        self.missing = missing
        super().__init__(f"Missing credential values: {', '.join(missing)}")


class RegionExtractionError(SigningConfigurationError):
    """Origin domain does not carry a region segment."""

    def __init__(self, domain: str) -> None:
        self.domain = domain
        super().__init__(f"Cannot extract region from origin domain '{domain}'")


class SigningRequestError(OriginSignerError):
    """The inbound request cannot be signed as received."""

    kind = "request_error"


class BodyEncodingError(SigningRequestError):
    """Request body is not valid for its declared encoding."""


class BodyTruncatedError(SigningRequestError):
    """CloudFront passed only part of the body, so its hash cannot be signed."""
