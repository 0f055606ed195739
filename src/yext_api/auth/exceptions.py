"""Exceptions raised while resolving Yext credentials and settings."""

from yext_api.errors.exceptions import YextError


class CredentialError(YextError):
    """Base exception for credential resolution failures."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required setting is missing from every source.

    Attributes:
        env_var_name: The environment variable that was checked, if any.
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a required credential file cannot be read."""

    pass
