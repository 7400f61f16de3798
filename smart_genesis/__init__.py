"""Smart Genesis - project scaffolding with GitHub publishing."""

from smart_genesis.auth import ConsentInitiator, TokenPoller, acquire_token
from smart_genesis.bootstrap import RepositoryBootstrapper, bootstrap_repositories
from smart_genesis.client import GitHubClient
from smart_genesis.commands import CommandRunner
from smart_genesis.config import GenesisConfig
from smart_genesis.exceptions import (
    APIError,
    AuthenticationError,
    AuthorizationError,
    BootstrapError,
    BrowserOpenError,
    CommandError,
    ConfigurationError,
    ConflictError,
    GenesisError,
    NotFoundError,
    PollTimeoutError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from smart_genesis.git import GitHelper
from smart_genesis.logging import configure_logging, get_logger
from smart_genesis.transport import HTTPTransport
from smart_genesis.workflow import publish_project

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Workflow
    "ConsentInitiator",
    "TokenPoller",
    "acquire_token",
    "RepositoryBootstrapper",
    "bootstrap_repositories",
    "publish_project",
    # Clients
    "GitHubClient",
    "HTTPTransport",
    "GitHelper",
    "CommandRunner",
    # Configuration
    "GenesisConfig",
    # Exceptions
    "GenesisError",
    "ConfigurationError",
    "BrowserOpenError",
    "PollTimeoutError",
    "APIError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    "BootstrapError",
    "CommandError",
    # Logging
    "configure_logging",
    "get_logger",
]
