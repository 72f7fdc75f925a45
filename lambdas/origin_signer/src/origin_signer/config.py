"""Signing configuration dataclasses."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SigningConfig:
    """Signing policy for function-URL origins."""

    service: str = "lambda"
    forwarded_host_header: str = "x-forwarded-host"
    # Values change hop to hop, so they can never be part of the signature.
    excluded_headers: frozenset[str] = field(
        default_factory=lambda: frozenset({"x-forwarded-for"})
    )


@dataclass(frozen=True)
class Credentials:
    """Credentials and region used for a single signing call."""

    access_key_id: str
    secret_access_key: str
    session_token: str
    region: str

    def __repr__(self) -> str:
        return (
            f"Credentials(access_key_id={self.access_key_id!r}, "
            f"secret_access_key='***', session_token='***', region={self.region!r})"
        )
