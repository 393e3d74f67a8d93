"""Core data structures for djtest."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from pydantic import BaseModel


class TargetKind(enum.Enum):
    """What a raw command-line target denotes."""

    METHOD = "method"
    CLASS = "class"
    MODULE_OR_PACKAGE = "module"


@dataclass(frozen=True)
class ClassOccurrence:
    """A class found above one appearance of a method in a file."""

    path: str
    class_name: str
    line: int


class Session(BaseModel):
    """The last resolved test target and the options it ran with."""

    last_dotted_path: str = ""
    last_options: str = ""
    shell: str = ""


class ResolutionError(Exception):
    """Raised when a target cannot be turned into a dotted path."""


class TargetNotFoundError(ResolutionError):
    """Raised when no file or class matches the target."""


class SelectionAbortedError(ResolutionError):
    """Raised when the user backs out of a selection."""
