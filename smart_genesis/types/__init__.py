"""Smart Genesis type definitions.

This module exports all data model types used by the package.
"""

from smart_genesis.types.bootstrap import (
    BootstrapResult,
    BootstrapState,
    BootstrapTarget,
    StructureMode,
)
from smart_genesis.types.project import ProjectAnswers, ProjectLayout
from smart_genesis.types.repos import CreationResult, Repository, RepositoryDescriptor

__all__ = [
    # Repository types
    "Repository",
    "RepositoryDescriptor",
    "CreationResult",
    # Bootstrap types
    "StructureMode",
    "BootstrapState",
    "BootstrapTarget",
    "BootstrapResult",
    # Project types
    "ProjectAnswers",
    "ProjectLayout",
]
