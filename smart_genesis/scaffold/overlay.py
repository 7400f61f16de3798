"""Template overlay for generated projects.

Writes README.md and .gitignore on top of whatever the framework generator
produced. Templates use ``$name`` placeholders.
"""

from __future__ import annotations

from pathlib import Path
from string import Template

from smart_genesis.logging import get_logger
from smart_genesis.types.project import ProjectAnswers

logger = get_logger()

TEMPLATE_TYPES = ("web-app", "api", "cli")

# Template files to render: (template_name, output_path)
_FILE_MAP: list[tuple[str, str]] = [
    ("README.md.tmpl", "README.md"),
    ("gitignore.tmpl", ".gitignore"),
]


def _get_templates_dir() -> Path:
    """Return the path to the templates directory within the package."""
    return Path(__file__).parent / "templates"


def template_context(answers: ProjectAnswers, framework: str | None = None) -> dict[str, str]:
    """Placeholder values for one generated directory."""
    return {
        "project_name": answers.project_name,
        "description": answers.description or "",
        "project_type": answers.project_type,
        "framework": framework or answers.framework or "",
    }


def render_template(template_file: Path, context: dict[str, str]) -> str:
    """Render a template file; unknown placeholders are left as-is."""
    return Template(template_file.read_text(encoding="utf-8")).safe_substitute(context)


def overlay_templates(
    directory: Path,
    template_type: str,
    context: dict[str, str],
) -> list[str]:
    """Render the templates of ``template_type`` into ``directory``.

    Args:
        directory: Generated project directory.
        template_type: One of TEMPLATE_TYPES.
        context: Placeholder values.

    Returns:
        List of written file names (relative to directory).
    """
    if template_type not in TEMPLATE_TYPES:
        raise ValueError(f"Unknown template type: {template_type}")

    template_dir = _get_templates_dir() / template_type
    written: list[str] = []
    for template_name, output_path in _FILE_MAP:
        template_file = template_dir / template_name
        if not template_file.exists():
            continue
        (directory / output_path).write_text(
            render_template(template_file, context), encoding="utf-8"
        )
        written.append(output_path)

    logger.info(f"Custom files added to {directory} using {template_type} templates")
    return written
