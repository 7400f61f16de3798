"""
Smart Genesis GitHub client.

Provides the authenticated interface to the repository API.
"""

from typing import Any

import httpx

from smart_genesis.clients import ReposClient
from smart_genesis.config import GenesisConfig
from smart_genesis.exceptions import ConfigurationError
from smart_genesis.transport import HTTPTransport


class GitHubClient:
    """
    Client for the GitHub repository API, bound to one access token.

    Example:
        ```python
        from smart_genesis import GitHubClient
        from smart_genesis.types import RepositoryDescriptor

        with GitHubClient(token=access_token) as client:
            repo = client.repos.create(
                RepositoryDescriptor(name="demo", description="Demo project")
            )
            print(repo.clone_url)
        ```
    """

    DEFAULT_BASE_URL = "https://api.github.com"
    DEFAULT_TIMEOUT = 30.0
    ACCEPT = "application/vnd.github.v3+json"

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the GitHub client.

        Args:
            token: OAuth access token
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            transport: Optional httpx transport, for tests

        Raises:
            ConfigurationError: If the token is empty
        """
        if not token:
            raise ConfigurationError("An access token is required")

        self.base_url = base_url
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=base_url,
            timeout=timeout,
            headers={
                "Authorization": f"token {token}",
                "Accept": self.ACCEPT,
            },
            transport=transport,
        )

        self.repos = ReposClient(self._transport)

    @classmethod
    def from_config(
        cls,
        token: str,
        config: GenesisConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> "GitHubClient":
        """Create a client using the API URL and timeout from ``config``."""
        return cls(
            token=token,
            base_url=config.api_base_url,
            timeout=config.request_timeout,
            transport=transport,
        )

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
