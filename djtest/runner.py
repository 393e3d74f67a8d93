"""Running Django's test command for a dotted path."""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path

import typer

from djtest.config import DjtestConfig


def manage_py_path(root: Path, config: DjtestConfig) -> str:
    """Return the manage.py to run, relative to root."""
    if config.source_dir:
        nested = Path(config.source_dir) / config.manage_py
        if (root / nested).is_file():
            return nested.as_posix()
    return config.manage_py


def build_command(
    dotted_path: str, options: str, config: DjtestConfig, root: Path
) -> list[str]:
    """Assemble the argv for running one test label.

    Args:
        dotted_path: Label passed to the test command.
        options: Pass-through options, as a shell-quoted string.
        config: Project configuration.
        root: Project root the command runs in.

    Returns:
        The command line as a list of arguments.
    """
    return [
        config.python,
        manage_py_path(root, config),
        config.test_command,
        dotted_path,
        *shlex.split(options),
    ]


def run_tests(
    dotted_path: str, options: str, config: DjtestConfig, root: Path
) -> int:
    """Run the test command and report the outcome.

    The dotted path is printed first; the ``>>> path <<<`` banner only follows
    a zero exit status.

    Returns:
        The runner's exit status, or 127 if the interpreter is missing.
    """
    typer.echo(dotted_path)
    typer.echo()

    command = build_command(dotted_path, options, config, root)
    try:
        result = subprocess.run(command, cwd=root, check=False)
    except FileNotFoundError:
        typer.echo(f"Error: cannot run {config.python!r}", err=True)
        return 127

    if result.returncode == 0:
        typer.echo(f">>> {dotted_path} <<<")
    return result.returncode
