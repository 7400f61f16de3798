"""Framework generators.

Each generator fills one directory, either by running the framework's own
CLI through the command runner or by writing a small starter file.
"""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path

from smart_genesis.commands import CommandRunner
from smart_genesis.logging import get_logger

logger = get_logger()

_REQUIREMENTS: dict[str, list[str]] = {
    "Django": ["Django>=4.2", "djangorestframework", "gunicorn"],
    "Flask": ["Flask", "gunicorn", "requests"],
    "FastAPI": ["fastapi", "uvicorn", "pydantic"],
}

_FLASK_APP = '''from flask import Flask, jsonify

app = Flask(__name__)


@app.route("/")
def index():
    return jsonify({{"message": "Hello from {title}!"}})


if __name__ == "__main__":
    app.run(debug=True)
'''

_FASTAPI_APP = '''from fastapi import FastAPI

app = FastAPI()


@app.get("/")
def read_root():
    return {{"Hello": "{title}"}}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
'''

_CLI_STUBS: dict[str, tuple[str, str]] = {
    "Node.js": ("index.js", '#!/usr/bin/env node\nconsole.log("Welcome to {name} CLI tool!");\n'),
    "Bash": ("run.sh", '#!/bin/bash\necho "Welcome to {name} CLI tool!"\n'),
    "Python": ("main.py", '#!/usr/bin/env python3\nprint("Welcome to {name} CLI tool!")\n'),
}


def normalize_django_name(name: str) -> str:
    """Turn a project name into a valid Django project (Python package) name."""
    normalized = name.lower()
    normalized = re.sub(r"[-\s]+", "_", normalized)
    normalized = re.sub(r"[^a-z0-9_]", "", normalized)
    if re.match(r"[0-9]", normalized):
        normalized = "_" + normalized
    return normalized


def python_flavor(framework: str) -> str | None:
    """Return "Django", "Flask" or "FastAPI" for a "Python (...)" choice."""
    for flavor in _REQUIREMENTS:
        if flavor in framework:
            return flavor
    return None


def venv_python(directory: Path) -> Path:
    """Path of the interpreter inside ``directory/.venv``."""
    if os.name == "nt":
        return directory / ".venv" / "Scripts" / "python.exe"
    return directory / ".venv" / "bin" / "python"


def generate_frontend(
    framework: str,
    directory: Path,
    runner: CommandRunner,
    use_typescript: bool = False,
) -> None:
    """Run the frontend framework's generator in ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    logger.info(f"Initializing {framework} app in {directory}...")

    if framework == "Next.js":
        command = ["npx", "create-next-app", "."]
        if use_typescript:
            command.append("--typescript")
        command.append("--disable-git")
    elif framework == "React":
        command = ["npx", "create-react-app", "."]
    elif framework == "Vite":
        template = "vanilla-ts" if use_typescript else "vanilla"
        command = ["npx", "create-vite@latest", ".", "--template", template]
    else:
        raise ValueError(f"Unknown frontend framework: {framework}")

    runner.run(command, directory)


def generate_backend(
    framework: str,
    directory: Path,
    runner: CommandRunner,
    project_name: str,
    title: str | None = None,
) -> None:
    """Scaffold a Nest.js or Python backend in ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    title = title or project_name

    if framework == "Nest.js":
        logger.info(f"Initializing NestJS app in {directory}...")
        runner.run(
            ["npx", "@nestjs/cli", "new", ".", "--skip-install", "--skip-git"],
            directory,
        )
        return

    flavor = python_flavor(framework)
    if flavor is None:
        raise ValueError(f"Unknown backend framework: {framework}")

    logger.info(f"Initializing {flavor} project in {directory}...")
    runner.run([sys.executable, "-m", "venv", ".venv"], directory)
    python = str(venv_python(directory))
    runner.run([python, "-m", "pip", "install", flavor], directory)

    if flavor == "Django":
        runner.run(
            [python, "-m", "django", "startproject", normalize_django_name(project_name), "."],
            directory,
        )
    elif flavor == "Flask":
        (directory / "app.py").write_text(_FLASK_APP.format(title=title), encoding="utf-8")
    else:
        (directory / "main.py").write_text(_FASTAPI_APP.format(title=title), encoding="utf-8")

    write_requirements(flavor, directory)


def write_requirements(flavor: str, directory: Path) -> Path:
    """Write requirements.txt for a Python backend flavor."""
    target = directory / "requirements.txt"
    target.write_text("\n".join(_REQUIREMENTS[flavor]) + "\n", encoding="utf-8")
    logger.info(f"requirements.txt created in {directory}")
    return target


def generate_cli(language: str, directory: Path, project_name: str) -> Path:
    """Write a greeting entry point for a CLI tool."""
    if language not in _CLI_STUBS:
        raise ValueError(f"Unknown CLI language: {language}")

    directory.mkdir(parents=True, exist_ok=True)
    filename, body = _CLI_STUBS[language]
    target = directory / filename
    target.write_text(body.format(name=project_name), encoding="utf-8")
    target.chmod(0o755)
    return target
