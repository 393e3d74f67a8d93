"""CLI entry point for djtest."""

from __future__ import annotations

import contextlib
import shlex
from pathlib import Path
from typing import Annotated

import typer

from djtest.config import ConfigError, find_project_root, load_config
from djtest.models import ResolutionError
from djtest.pipeline import resolve_target
from djtest.runner import run_tests
from djtest.session import SessionStore, default_session_path, shell_identity

_EPILOG = (
    "A method should look like test_foo_bar. A class should be FooBarTest or "
    "FooBarTests, although TestFooBar and TestsFooBar are supported as well. "
    "Without a method or class, an interactive fuzzy search over the project "
    "picks the module or package to test. -r always means --repeat here; pass "
    "Django's reverse flag as --reverse."
)


def _split_arguments(args: list[str]) -> tuple[str, str]:
    """Split positional arguments into the target and pass-through options."""
    if args and not args[0].startswith("-"):
        return args[0], shlex.join(args[1:])
    return "", shlex.join(args)


app = typer.Typer(
    name="djtest",
    help="Find a Django test by name and run it.",
    no_args_is_help=False,
    add_completion=False,
)


@app.command(
    epilog=_EPILOG,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
    },
)
def main(
    args: Annotated[
        list[str] | None,
        typer.Argument(
            help="Test method or class, followed by options for the test runner.",
            show_default=False,
        ),
    ] = None,
    repeat: Annotated[
        bool,
        typer.Option("--repeat", "-r", help="Repeat the previous test."),
    ] = False,
    clear: Annotated[
        bool,
        typer.Option(
            "--clear",
            "-c",
            help="With --repeat: replace the previous runner options.",
        ),
    ] = False,
    session_file: Annotated[
        Path | None,
        typer.Option(
            "--session-file",
            envvar="DJTEST_SESSION_FILE",
            hidden=True,
        ),
    ] = None,
) -> None:
    """Locate a test method, class, module or package and run it."""
    args = args or []
    root = find_project_root(Path.cwd())
    try:
        config = load_config(root)
    except ConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(2) from exc

    store = SessionStore(session_file or default_session_path(), shell_identity())

    if repeat:
        session = store.load()
        if not session.last_dotted_path:
            typer.echo("Error: no previous test to repeat.", err=True)
            raise typer.Exit(1)
        options = session.last_options
        if clear:
            options = shlex.join(args)
            store.remember(session.last_dotted_path, options)
        typer.echo("Running previous test...")
        raise typer.Exit(run_tests(session.last_dotted_path, options, config, root))

    if clear:
        typer.echo("Warning: --clear has no effect without --repeat", err=True)

    target, options = _split_arguments(args)
    with contextlib.chdir(root):
        try:
            dotted_path = resolve_target(target, config, root)
        except ResolutionError as exc:
            typer.echo(f"Error: {exc}.", err=True)
            raise typer.Exit(1) from exc

        store.remember(dotted_path, options)
        exit_code = run_tests(dotted_path, options, config, root)

    raise typer.Exit(exit_code)
