"""Project scaffolding data models."""

from dataclasses import dataclass
from pathlib import Path

from smart_genesis.types.bootstrap import StructureMode

PROJECT_TYPES = ("Web App", "API", "CLI Tool")
FRONTEND_FRAMEWORKS = ("Next.js", "React", "Vite")
BACKEND_FRAMEWORKS = (
    "Nest.js",
    "Python (Django)",
    "Python (Flask)",
    "Python (FastAPI)",
)
REPO_STRUCTURES = ("Monorepo", "Separate Repos")
CLI_LANGUAGES = ("Node.js", "Bash", "Python")


@dataclass
class ProjectAnswers:
    """Answers collected by the interactive prompts."""

    project_name: str
    project_type: str  # one of PROJECT_TYPES
    description: str = ""
    frontend_framework: str | None = None
    include_backend: bool = False
    backend_framework: str | None = None
    repo_structure: str | None = None  # "Monorepo" or "Separate Repos"
    use_typescript: bool = False
    api_framework: str | None = None
    cli_language: str | None = None
    create_github: bool = False

    @property
    def is_web_app(self) -> bool:
        return self.project_type == "Web App"

    @property
    def separate_repos(self) -> bool:
        return (
            self.is_web_app
            and self.include_backend
            and self.repo_structure == "Separate Repos"
        )

    @property
    def framework(self) -> str | None:
        """The main framework or language, for templates."""
        if self.project_type == "API":
            return self.api_framework
        if self.project_type == "CLI Tool":
            return self.cli_language
        return self.frontend_framework


@dataclass
class ProjectLayout:
    """Where a scaffolded project lives and how it is published."""

    target_directory: Path  # passed to the bootstrapper
    mode: StructureMode
    directories: list[Path]  # every generated project directory
