"""Project layouts.

Decides which directories a project gets, runs the generators into them and
overlays the templates. The returned ProjectLayout tells the bootstrapper
which directory to publish and in which structural mode.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from smart_genesis.commands import CommandRunner
from smart_genesis.exceptions import GenesisError
from smart_genesis.logging import get_logger
from smart_genesis.scaffold.generators import generate_backend, generate_cli, generate_frontend
from smart_genesis.scaffold.overlay import overlay_templates, template_context
from smart_genesis.types.bootstrap import StructureMode
from smart_genesis.types.project import ProjectAnswers, ProjectLayout

logger = get_logger()


class ProjectExistsError(GenesisError):
    """Raised when a project directory already exists and is not empty."""

    def __init__(self, conflicting_dirs: list[str]) -> None:
        self.conflicting_dirs = conflicting_dirs
        super().__init__(
            "PROJECT_EXISTS", f"Directories already exist: {', '.join(conflicting_dirs)}"
        )


def planned_directories(answers: ProjectAnswers, base_dir: Path) -> list[Path]:
    """Top-level directories the project will create under ``base_dir``."""
    if answers.separate_repos:
        return [
            base_dir / f"{answers.project_name}-frontend",
            base_dir / f"{answers.project_name}-backend",
        ]
    return [base_dir / answers.project_name]


def scaffold_project(
    answers: ProjectAnswers,
    base_dir: Path,
    runner: CommandRunner | None = None,
    force: bool = False,
) -> ProjectLayout:
    """Generate the project described by ``answers`` under ``base_dir``.

    Args:
        answers: Prompt answers.
        base_dir: Directory in which the project directories are created.
        runner: Command runner for framework generators.
        force: If False, refuse to write into non-empty existing directories.

    Returns:
        Layout to hand to the bootstrapper.

    Raises:
        ProjectExistsError: If a target directory is not empty and force is False.
        CommandError: If a generator fails.
    """
    base_dir = base_dir.resolve()
    runner = runner or CommandRunner()

    if not force:
        conflicts = [
            str(d) for d in planned_directories(answers, base_dir)
            if d.is_dir() and any(d.iterdir())
        ]
        if conflicts:
            raise ProjectExistsError(conflicts)

    if answers.project_type == "API":
        layout = _scaffold_api(answers, base_dir, runner)
    elif answers.project_type == "CLI Tool":
        layout = _scaffold_cli(answers, base_dir)
    elif not answers.include_backend:
        layout = _scaffold_frontend_only(answers, base_dir, runner)
    elif answers.separate_repos:
        layout = _scaffold_separate_repos(answers, base_dir, runner)
    else:
        layout = _scaffold_monorepo(answers, base_dir, runner)

    logger.info(f'Project scaffold for "{answers.project_name}" has been created')
    return layout


def _scaffold_monorepo(
    answers: ProjectAnswers, base_dir: Path, runner: CommandRunner
) -> ProjectLayout:
    project_dir = base_dir / answers.project_name
    frontend_dir = project_dir / "apps" / "frontend"
    backend_dir = project_dir / "apps" / "backend"
    frontend_dir.parent.mkdir(parents=True, exist_ok=True)
    runner.run(["npm", "init", "-y"], project_dir)

    generate_frontend(
        answers.frontend_framework, frontend_dir, runner, answers.use_typescript
    )
    generate_backend(answers.backend_framework, backend_dir, runner, answers.project_name)

    overlay_templates(frontend_dir, "web-app", template_context(answers))
    overlay_templates(
        backend_dir, "api", template_context(answers, answers.backend_framework)
    )

    # Generators that run git init would leave embedded repositories
    for directory in (frontend_dir, backend_dir):
        _remove_nested_git(directory)

    return ProjectLayout(
        target_directory=project_dir,
        mode=StructureMode.SINGLE,
        directories=[frontend_dir, backend_dir],
    )


def _scaffold_separate_repos(
    answers: ProjectAnswers, base_dir: Path, runner: CommandRunner
) -> ProjectLayout:
    frontend_dir, backend_dir = planned_directories(answers, base_dir)

    generate_frontend(
        answers.frontend_framework, frontend_dir, runner, answers.use_typescript
    )
    generate_backend(answers.backend_framework, backend_dir, runner, answers.project_name)

    overlay_templates(frontend_dir, "web-app", template_context(answers))
    overlay_templates(
        backend_dir, "api", template_context(answers, answers.backend_framework)
    )
    return ProjectLayout(
        target_directory=base_dir,
        mode=StructureMode.DUAL_FRONTEND_BACKEND,
        directories=[frontend_dir, backend_dir],
    )


def _scaffold_frontend_only(
    answers: ProjectAnswers, base_dir: Path, runner: CommandRunner
) -> ProjectLayout:
    project_dir = base_dir / answers.project_name
    generate_frontend(
        answers.frontend_framework, project_dir, runner, answers.use_typescript
    )
    overlay_templates(project_dir, "web-app", template_context(answers))
    return ProjectLayout(
        target_directory=project_dir,
        mode=StructureMode.SINGLE,
        directories=[project_dir],
    )


def _scaffold_api(
    answers: ProjectAnswers, base_dir: Path, runner: CommandRunner
) -> ProjectLayout:
    project_dir = base_dir / answers.project_name
    generate_backend(
        answers.api_framework,
        project_dir,
        runner,
        answers.project_name,
        title=f"{answers.project_name} API",
    )
    overlay_templates(project_dir, "api", template_context(answers))
    return ProjectLayout(
        target_directory=project_dir,
        mode=StructureMode.SINGLE,
        directories=[project_dir],
    )


def _scaffold_cli(answers: ProjectAnswers, base_dir: Path) -> ProjectLayout:
    project_dir = base_dir / answers.project_name
    generate_cli(answers.cli_language, project_dir, answers.project_name)
    overlay_templates(project_dir, "cli", template_context(answers))
    return ProjectLayout(
        target_directory=project_dir,
        mode=StructureMode.SINGLE,
        directories=[project_dir],
    )


def _remove_nested_git(directory: Path) -> None:
    nested = directory / ".git"
    if nested.is_dir():
        logger.info(f"Removing nested repository {nested}")
        shutil.rmtree(nested)
    elif nested.exists():
        nested.unlink()
