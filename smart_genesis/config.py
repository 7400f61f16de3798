"""
Smart Genesis configuration.

All remote endpoints and workflow constants live in one object that is passed
to the poller, the GitHub client and the bootstrapper.
"""

import os
from dataclasses import dataclass

from smart_genesis.exceptions import ConfigurationError

DEFAULT_OAUTH_BASE_URL = "https://oauth-server-production.up.railway.app"
DEFAULT_API_BASE_URL = "https://api.github.com"


@dataclass
class GenesisConfig:
    """Endpoints and constants for the token and repository workflow."""

    login_url: str = f"{DEFAULT_OAUTH_BASE_URL}/login"
    token_url: str = f"{DEFAULT_OAUTH_BASE_URL}/token"
    api_base_url: str = DEFAULT_API_BASE_URL
    max_attempts: int = 20
    poll_interval: float = 3.0  # Seconds between token polls
    request_timeout: float = 30.0
    repo_description: str = "Repository created automatically by Smart Genesis CLI"
    commit_message: str = "Initial commit with scaffolded project"
    default_branch: str = "main"
    remote_name: str = "origin"

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ConfigurationError(
                f"max_attempts must be at least 1, got {self.max_attempts}"
            )
        if self.poll_interval < 0:
            raise ConfigurationError(
                f"poll_interval must not be negative, got {self.poll_interval}"
            )
        if self.request_timeout <= 0:
            raise ConfigurationError(
                f"request_timeout must be positive, got {self.request_timeout}"
            )

    @classmethod
    def from_env(cls) -> "GenesisConfig":
        """
        Create a configuration from environment variables.

        Environment variables:
            SMART_GENESIS_LOGIN_URL: Consent screen URL
            SMART_GENESIS_TOKEN_URL: Token polling endpoint
            SMART_GENESIS_API_URL: Repository API base URL
            SMART_GENESIS_MAX_ATTEMPTS: Poll attempt budget
            SMART_GENESIS_POLL_INTERVAL: Seconds between polls
            SMART_GENESIS_TIMEOUT: HTTP request timeout in seconds

        Unset variables fall back to the defaults.

        Returns:
            Configured GenesisConfig instance

        Raises:
            ConfigurationError: If a numeric variable cannot be parsed
        """
        defaults = cls()
        return cls(
            login_url=os.environ.get("SMART_GENESIS_LOGIN_URL", defaults.login_url),
            token_url=os.environ.get("SMART_GENESIS_TOKEN_URL", defaults.token_url),
            api_base_url=os.environ.get("SMART_GENESIS_API_URL", defaults.api_base_url),
            max_attempts=_env_number(
                "SMART_GENESIS_MAX_ATTEMPTS", int, defaults.max_attempts
            ),
            poll_interval=_env_number(
                "SMART_GENESIS_POLL_INTERVAL", float, defaults.poll_interval
            ),
            request_timeout=_env_number(
                "SMART_GENESIS_TIMEOUT", float, defaults.request_timeout
            ),
        )


def _env_number(name: str, kind: type, default: int | float) -> int | float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return kind(raw)
    except ValueError:
        raise ConfigurationError(
            f"Invalid {name}: {raw!r} is not a valid {kind.__name__}"
        ) from None
