"""Bootstrap run data models."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from smart_genesis.exceptions import GenesisError
from smart_genesis.types.repos import Repository, RepositoryDescriptor


class StructureMode(str, Enum):
    """Whether a project becomes one repository or a frontend/backend pair."""

    SINGLE = "single"
    DUAL_FRONTEND_BACKEND = "dual"


class BootstrapState(str, Enum):
    """Progress of a bootstrap run. FAILED and PUSHED are terminal."""

    IDLE = "idle"
    REMOTE_REPO_CREATED = "remote_repo_created"
    LOCAL_INIT_DONE = "local_init_done"
    COMMITTED = "committed"
    REMOTE_ADDED = "remote_added"
    BRANCH_RENAMED = "branch_renamed"
    PUSHED = "pushed"
    FAILED = "failed"


@dataclass
class BootstrapTarget:
    """A local directory paired with the repository it is pushed to."""

    local_path: Path
    descriptor: RepositoryDescriptor
    clone_url: str | None = None


@dataclass
class BootstrapResult:
    """Final report of a bootstrap run."""

    state: BootstrapState
    created: list[Repository] = field(default_factory=list)
    pushed: list[Path] = field(default_factory=list)
    error: GenesisError | None = None

    @property
    def succeeded(self) -> bool:
        return self.state is BootstrapState.PUSHED
