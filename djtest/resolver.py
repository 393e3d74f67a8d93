"""Find the classes a test method is defined in."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Protocol

from djtest.models import ClassOccurrence

CLASS_DEF_PATTERN = re.compile(r"^class\s+([A-Za-z_][A-Za-z0-9_]*)")


class ClassResolver(Protocol):
    """Maps a method name in a file to the classes enclosing it."""

    def resolve(self, file_path: str, method: str) -> list[ClassOccurrence]: ...


class TextClassResolver:
    """Line-oriented resolver that scans a file backwards.

    Every line containing the method as a whole word is a start marker. From
    each marker, counting from the end of the file, the scan walks back to the
    nearest top-level ``class`` statement. No parsing is involved, so a name
    that appears in a docstring or a call also counts as a marker.
    """

    def __init__(self, root: Path | None = None) -> None:
        self.root = root

    def resolve(self, file_path: str, method: str) -> list[ClassOccurrence]:
        """Return one occurrence per marker that has a class above it.

        Args:
            file_path: Path of the file, relative to the resolver root.
            method: Method name to look for.

        Returns:
            Occurrences ordered from the end of the file towards the start.

        Raises:
            FileNotFoundError: If file_path does not exist.
        """
        path = Path(file_path) if self.root is None else self.root / file_path
        lines = path.read_text(encoding="utf-8", errors="replace").splitlines()
        word = re.compile(rf"(?<!\w){re.escape(method)}(?!\w)")

        occurrences: list[ClassOccurrence] = []
        for marker in range(len(lines) - 1, -1, -1):
            if not word.search(lines[marker]):
                continue
            for index in range(marker, -1, -1):
                match = CLASS_DEF_PATTERN.match(lines[index])
                if match:
                    occurrences.append(
                        ClassOccurrence(
                            path=file_path,
                            class_name=match.group(1),
                            line=index + 1,
                        )
                    )
                    break
        return occurrences


def unique_class_names(occurrences: list[ClassOccurrence]) -> list[str]:
    """Collapse occurrences to distinct class names, keeping first-seen order."""
    names: list[str] = []
    for occurrence in occurrences:
        if occurrence.class_name not in names:
            names.append(occurrence.class_name)
    return names
