"""Credential and setting resolution for Yext API configuration.

Values are resolved from, in priority order:
1. An explicitly provided value
2. An environment variable (``.env`` entries are loaded into the
   environment by python-dotenv, without overriding real variables)
3. A default

Example:
    ```python
    from yext_api.auth import CredentialResolver

    resolver = CredentialResolver()
    api_key = resolver.resolve(env_var_name="YEXT_API_KEY", required=True)
    account_id = resolver.resolve(env_var_name="YEXT_ACCOUNT_ID", default="me", mask_in_logs=False)
    ```

API keys are never logged; only the source they came from is.
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import find_dotenv, load_dotenv

from yext_api.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)


class CredentialResolver:
    """Resolve settings from explicit values, the environment and ``.env``.

    Explicit values win over environment variables, which win over defaults.
    A ``.env`` file is loaded into the environment once, at construction,
    and never overrides variables that are already set.

    Attributes:
        _dotenv_loaded: Whether the .env file has been loaded (or attempted).
        _dotenv_lock: Lock guarding the one-time .env load.

    Example:
        ```python
        resolver = CredentialResolver()

        # Required API key (raises if missing)
        api_key = resolver.resolve(env_var_name="YEXT_API_KEY", required=True)

        # Non-secret setting with a fallback
        env = resolver.resolve(env_var_name="YEXT_ENV", default="PROD", mask_in_logs=False)
        ```
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize the resolver.

        Args:
            dotenv_path: Path to a .env file. If None, python-dotenv searches
                upward from the current working directory.
            load_dotenv: Set to False to skip .env loading entirely (useful
                in tests). Default is True.

        Example:
            ```python
            # Load .env from a specific path
            resolver = CredentialResolver(dotenv_path="/app/.env")

            # Skip .env loading
            resolver = CredentialResolver(load_dotenv=False)
            ```
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        """Load the .env file once (thread-safe); a missing file is not an error."""
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                dotenv_path = self._dotenv_path or find_dotenv(usecwd=True)
                if dotenv_path and load_dotenv(dotenv_path=dotenv_path):
                    logger.debug(f"Loaded .env file for Yext configuration: {dotenv_path}")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    @staticmethod
    def _mask(value: str | None) -> str:
        return "None" if value is None else "***"

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a single setting.

        Resolution order (first match wins):
        1. ``value``
        2. The environment variable ``env_var_name`` (including .env entries)
        3. ``default``
        4. None, or CredentialNotFoundError if ``required``

        Args:
            value: Explicit value; wins over every other source.
            env_var_name: Environment variable to consult.
            default: Value used when nothing else is set.
            required: Raise CredentialNotFoundError instead of returning None.
            mask_in_logs: Log ``***`` in place of the resolved value. Disable
                only for non-secret settings.

        Returns:
            The resolved value, or None.

        Raises:
            CredentialNotFoundError: If required and nothing was found.

        Example:
            ```python
            # Explicit value takes precedence
            api_key = resolver.resolve(value="override-key", env_var_name="YEXT_API_KEY")

            # Falls back to "me" when YEXT_ACCOUNT_ID is unset
            account_id = resolver.resolve(env_var_name="YEXT_ACCOUNT_ID", default="me", mask_in_logs=False)
            ```
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = self._mask(result) if mask_in_logs else result
            logger.debug(f"Resolved setting from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a credential (typically an API key) from a file.

        ``~`` and ``$VAR`` in the path are expanded, and surrounding
        whitespace is stripped from the contents.

        Args:
            file_path: Path to the file. Wins over ``env_var_name``.
            env_var_name: Environment variable holding the path, used when
                ``file_path`` is None.
            required: Raise CredentialFileError instead of returning None
                when no path is given or the file cannot be read.

        Returns:
            The stripped file contents, or None.

        Raises:
            CredentialFileError: If required and the file cannot be read.

        Example:
            ```python
            # Path from YEXT_API_KEY_FILE
            api_key = resolver.resolve_from_file(env_var_name="YEXT_API_KEY_FILE")

            # Explicit path
            api_key = resolver.resolve_from_file(file_path="~/.yext/api_key", required=True)
            ```
        """
        path_to_use = None
        if file_path is not None:
            path_to_use = str(file_path)
        elif env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name, mask_in_logs=False)

        if not path_to_use:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except FileNotFoundError:
            error_msg = f"Credential file not found: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.debug(error_msg)
            return None
        except PermissionError:
            error_msg = f"Permission denied reading credential file: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.warning(error_msg)
            return None
        except OSError as e:
            error_msg = f"Error reading credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content
