"""Configuration for calls to Yext APIs."""

import logging
from dataclasses import dataclass
from enum import Enum

from yext_api.auth.credentials import CredentialResolver
from yext_api.auth.exceptions import CredentialNotFoundError
from yext_api.errors.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Date this version of the package sends as the ``v`` parameter.
DEFAULT_V_PARAM: str = "20211028"

DEFAULT_ACCOUNT_ID = "me"


class Environment(str, Enum):
    """The Yext environment holding the account an API key belongs to.

    Most accounts live in PROD; Hitchhiker Playground accounts live in SANDBOX.
    """

    PROD = "PROD"
    SANDBOX = "SANDBOX"

    @property
    def host(self) -> str:
        return _HOSTS[self]


_HOSTS = {
    Environment.PROD: "api.yext.com",
    Environment.SANDBOX: "api-sandbox.yext.com",
}


@dataclass(frozen=True)
class Config:
    """Settings shared by every call to Yext APIs.

    Attributes:
        api_key: API key from the Yext Developer Console.
        env: Environment of the account; defaults to PROD. Strings such as
            ``"SANDBOX"`` are converted to Environment; falsy values mean PROD.
        account_id: Value for the ``{accountId}`` path segment. The default
            ``"me"`` selects the account that owns ``api_key``.
        v_param: Value for the ``v`` query parameter. Changing it away from
            DEFAULT_V_PARAM may break compatibility with this package.
        host_override: Host to send requests to instead of the one
            implied by ``env``.

    Raises:
        ConfigurationError: If ``env`` is not a known Environment.
    """

    api_key: str
    env: Environment = Environment.PROD
    account_id: str = DEFAULT_ACCOUNT_ID
    v_param: str = DEFAULT_V_PARAM
    host_override: str | None = None

    def __post_init__(self) -> None:
        try:
            env = Environment(self.env or Environment.PROD)
        except ValueError:
            raise ConfigurationError(f"Unknown Yext environment: {self.env}") from None
        # frozen dataclass
        object.__setattr__(self, "env", env)

    def __repr__(self) -> str:
        return (
            f"Config(api_key='***', env={self.env!r}, account_id={self.account_id!r}, "
            f"v_param={self.v_param!r}, host_override={self.host_override!r})"
        )

    @classmethod
    def from_env(
        cls,
        resolver: CredentialResolver | None = None,
        *,
        api_key: str | None = None,
        env: Environment | str | None = None,
        account_id: str | None = None,
        v_param: str | None = None,
        host_override: str | None = None,
    ) -> "Config":
        """Build a Config from explicit values, then YEXT_* environment variables.

        Reads YEXT_API_KEY, YEXT_ENV, YEXT_ACCOUNT_ID, YEXT_V_PARAM and
        YEXT_HOST_OVERRIDE. When YEXT_API_KEY is unset, the key is read from
        the file named by YEXT_API_KEY_FILE.

        Args:
            resolver: Resolver to use; defaults to one that loads ``.env``
                from the current working directory.
            api_key, env, account_id, v_param, host_override: Explicit
                values, which win over the environment.

        Returns:
            A validated Config.

        Raises:
            CredentialNotFoundError: If no API key can be found.
            ConfigurationError: If the resolved environment is unknown.

        Example:
            ```python
            # YEXT_API_KEY=... YEXT_ENV=SANDBOX in the environment or .env
            api = KnowledgeGraphApi(Config.from_env())
            ```
        """
        resolver = resolver or CredentialResolver()
        api_key = resolver.resolve(value=api_key, env_var_name="YEXT_API_KEY")
        if api_key is None:
            api_key = resolver.resolve_from_file(env_var_name="YEXT_API_KEY_FILE")
        if api_key is None:
            raise CredentialNotFoundError(
                "Required credential not found (checked env vars: YEXT_API_KEY, YEXT_API_KEY_FILE)",
                env_var_name="YEXT_API_KEY",
            )

        return cls(
            api_key=api_key,
            env=resolver.resolve(
                value=env, env_var_name="YEXT_ENV", default=Environment.PROD.value, mask_in_logs=False
            ),
            account_id=resolver.resolve(
                value=account_id, env_var_name="YEXT_ACCOUNT_ID", default=DEFAULT_ACCOUNT_ID, mask_in_logs=False
            ),
            v_param=resolver.resolve(
                value=v_param, env_var_name="YEXT_V_PARAM", default=DEFAULT_V_PARAM, mask_in_logs=False
            ),
            host_override=resolver.resolve(
                value=host_override, env_var_name="YEXT_HOST_OVERRIDE", mask_in_logs=False
            ),
        )


def resolve_host(config: Config) -> str:
    """Return the network host for ``config``; a host override wins over ``env``."""
    if config.host_override:
        return config.host_override
    return config.env.host


def base_url(config: Config) -> str:
    """Return ``https://{host}/v2/accounts/{account_id}/`` for ``config``."""
    account_id = config.account_id or DEFAULT_ACCOUNT_ID
    return f"https://{resolve_host(config)}/v2/accounts/{account_id}/"
