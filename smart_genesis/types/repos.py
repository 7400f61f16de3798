"""Repository-related data models."""

from dataclasses import dataclass
from typing import Any

from smart_genesis.exceptions import APIError


@dataclass
class RepositoryDescriptor:
    """What to ask the repository API to create."""

    name: str
    description: str
    private: bool = False

    def to_payload(self) -> dict[str, Any]:
        """Request body for ``POST /user/repos``."""
        return {
            "name": self.name,
            "description": self.description,
            "private": self.private,
        }


@dataclass
class Repository:
    """Repository record returned by the API."""

    name: str
    clone_url: str
    full_name: str | None = None
    html_url: str | None = None
    private: bool = False
    default_branch: str | None = None


@dataclass
class CreationResult:
    """Outcome of one repository creation call."""

    descriptor: RepositoryDescriptor
    repository: Repository | None = None
    error: APIError | None = None

    @property
    def ok(self) -> bool:
        return self.repository is not None
