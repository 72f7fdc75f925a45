"""Credential resolution from process-scoped configuration."""

from collections.abc import Mapping

from .config import Credentials
from .errors import MissingCredentialsError

ACCESS_KEY_ID_VAR = "AWS_ACCESS_KEY_ID"
SECRET_ACCESS_KEY_VAR = "AWS_SECRET_ACCESS_KEY"
SESSION_TOKEN_VAR = "AWS_SESSION_TOKEN"

_REQUIRED_VARS = (ACCESS_KEY_ID_VAR, SECRET_ACCESS_KEY_VAR, SESSION_TOKEN_VAR)


def resolve_credentials(environ: Mapping[str, str], region: str) -> Credentials:
    """Resolve signing credentials from an environment mapping.

    Lambda rotates the execution role's temporary credentials, so this is called
    on every invocation instead of being cached.

    Args:
        environ: Environment mapping, normally `os.environ`
        region: Signing region taken from the origin domain

    Returns:
        Credentials for the execution role

    Raises:
        MissingCredentialsError: If any of the three values is missing or empty
    """
    missing = tuple(name for name in _REQUIRED_VARS if not environ.get(name))
    if missing:
        raise MissingCredentialsError(missing)

    return Credentials(
        access_key_id=environ[ACCESS_KEY_ID_VAR],
        secret_access_key=environ[SECRET_ACCESS_KEY_VAR],
        session_token=environ[SESSION_TOKEN_VAR],
        region=region,
    )
