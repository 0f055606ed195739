"""Credential resolution for the Yext API client.

Example:
    ```python
    from yext_api.auth import CredentialResolver

    api_key = CredentialResolver().resolve(env_var_name="YEXT_API_KEY", required=True)
    ```
"""

from yext_api.auth.credentials import CredentialResolver
from yext_api.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)

__all__ = [
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
]
