"""Repositories resource client."""

from typing import TYPE_CHECKING, Any

from smart_genesis.exceptions import APIError, ServerError
from smart_genesis.logging import get_logger
from smart_genesis.types.repos import CreationResult, Repository, RepositoryDescriptor

if TYPE_CHECKING:
    from smart_genesis.transport import HTTPTransport

logger = get_logger()


def _parse_repository(data: dict[str, Any]) -> Repository:
    """Parse a repository record; ``clone_url`` is mandatory."""
    clone_url = data.get("clone_url")
    if not clone_url:
        raise ServerError(
            "INVALID_RESPONSE", "Repository response did not include a clone_url"
        )
    return Repository(
        name=data.get("name", ""),
        clone_url=clone_url,
        full_name=data.get("full_name"),
        html_url=data.get("html_url"),
        private=bool(data.get("private", False)),
        default_branch=data.get("default_branch"),
    )


class ReposClient:
    """Client for repository-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: Authenticated HTTP transport for the repository API
        """
        self.transport = transport

    def create(self, descriptor: RepositoryDescriptor) -> Repository:
        """
        Create a new repository for the authenticated user.

        Args:
            descriptor: Name, description and visibility of the repository

        Returns:
            Repository object with clone_url

        Raises:
            AuthenticationError: If the token is rejected
            ConflictError: If the repository already exists
            ServerError: On network errors or a response without clone_url
        """
        response = self.transport.request(
            method="POST",
            path="/user/repos",
            body=descriptor.to_payload(),
        )
        return _parse_repository(response)

    def try_create(self, descriptor: RepositoryDescriptor) -> CreationResult:
        """
        Create a repository, returning the failure instead of raising it.

        Args:
            descriptor: Name, description and visibility of the repository

        Returns:
            CreationResult holding either the repository or the error
        """
        try:
            repository = self.create(descriptor)
        except APIError as e:
            logger.error(f"Creating repository {descriptor.name} failed: {e}")
            return CreationResult(descriptor=descriptor, error=e)
        logger.info(f"Repository created: {repository.clone_url}")
        return CreationResult(descriptor=descriptor, repository=repository)
