"""Fuzzy selection of a module or package through fzf."""

from __future__ import annotations

import subprocess

import typer


def pick(entries: list[str], *, query: str = "") -> str | None:
    """Let the user fuzzy-pick one entry.

    fzf draws on the terminal directly, so only the selection comes back on
    stdout.

    Args:
        entries: Candidate paths, one per line in the picker.
        query: Initial query typed into the picker.

    Returns:
        The selected entry, or None if the user aborted, nothing matched or
        fzf is not installed.
    """
    command = ["fzf"]
    if query:
        command.extend(["--query", query])
    try:
        result = subprocess.run(
            command,
            input="\n".join(entries),
            stdout=subprocess.PIPE,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        typer.echo("Warning: fzf is not installed", err=True)
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None
