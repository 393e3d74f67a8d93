"""Memory of the last test run, scoped to the calling shell."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import typer
from pydantic import ValidationError

from djtest.models import Session


def default_session_path() -> Path:
    """Return the register location for the shell that started us.

    The file is keyed by the parent process id and kept in the per-user
    runtime directory when there is one, which is emptied at logout.
    """
    base = os.environ.get("XDG_RUNTIME_DIR") or tempfile.gettempdir()
    return Path(base) / f"djtest-session-{os.getppid()}.json"


def shell_identity(pid: int | None = None) -> str:
    """Identify the calling shell by pid and, where /proc exists, start time.

    The start time tells a later process that reused the pid apart from the
    shell that wrote the session.
    """
    if pid is None:
        pid = os.getppid()
    try:
        stat = Path(f"/proc/{pid}/stat").read_text(encoding="utf-8")
    except OSError:
        return str(pid)
    # The command name may contain spaces; fields after ")" start at field 3.
    fields = stat.rpartition(")")[2].split()
    if len(fields) < 20:
        return str(pid)
    return f"{pid}:{fields[19]}"


class SessionStore:
    """Reads and writes the session register.

    A store created with a shell identity ignores sessions written by a
    different shell.
    """

    def __init__(self, path: Path, shell: str = "") -> None:
        self.path = path
        self.shell = shell

    def load(self) -> Session:
        """Return the stored session, or an empty one if there is none."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return Session()
        except OSError as exc:
            typer.echo(f"Warning: cannot read {self.path}: {exc}", err=True)
            return Session()
        try:
            session = Session.model_validate_json(raw)
        except ValidationError:
            typer.echo(f"Warning: ignoring corrupt session {self.path}", err=True)
            return Session()
        if self.shell and session.shell and session.shell != self.shell:
            return Session()
        return session

    def save(self, session: Session) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(session.model_dump_json(), encoding="utf-8")

    def remember(self, dotted_path: str, options: str) -> None:
        self.save(
            Session(
                last_dotted_path=dotted_path, last_options=options, shell=self.shell
            )
        )
