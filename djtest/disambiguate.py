"""Interactive selection among equally valid candidates."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

import typer

from djtest.models import TargetNotFoundError

T = TypeVar("T")


def choose(
    candidates: Sequence[T],
    *,
    header: str,
    prompt: str,
    render: Callable[[T], str] = str,
) -> T:
    """Show an enumerated list and block until the user picks one entry.

    Non-numeric answers are re-asked by ``typer.prompt``; numbers outside
    ``1..len(candidates)`` are reported and re-asked.

    Args:
        candidates: At least two entries to choose from.
        header: Line shown above the list.
        prompt: Text of the input prompt.
        render: Formats one entry for display.

    Returns:
        The selected entry.
    """
    typer.echo(f"{header}\n")
    for number, candidate in enumerate(candidates, start=1):
        typer.echo(f"({number}) {render(candidate)}")
    typer.echo()

    while True:
        selection = typer.prompt(prompt, type=int)
        if 1 <= selection <= len(candidates):
            return candidates[selection - 1]
        typer.echo(
            f"Error: choose a number between 1 and {len(candidates)}", err=True
        )


def choose_one(
    candidates: Sequence[T],
    *,
    header: str,
    prompt: str,
    not_found: str,
    render: Callable[[T], str] = str,
) -> T:
    """Return the only candidate, or ask the user when there are several.

    Raises:
        TargetNotFoundError: If there are no candidates.
    """
    if not candidates:
        raise TargetNotFoundError(not_found)
    if len(candidates) == 1:
        return candidates[0]
    return choose(candidates, header=header, prompt=prompt, render=render)
