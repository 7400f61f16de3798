"""Project scaffolding: prompts, generators, layouts and template overlay."""

from smart_genesis.scaffold.generators import normalize_django_name
from smart_genesis.scaffold.layout import ProjectExistsError, scaffold_project
from smart_genesis.scaffold.prompts import prompt_create_github, prompt_project
from smart_genesis.scaffold.overlay import overlay_templates

__all__ = [
    "ProjectExistsError",
    "normalize_django_name",
    "overlay_templates",
    "prompt_create_github",
    "prompt_project",
    "scaffold_project",
]
