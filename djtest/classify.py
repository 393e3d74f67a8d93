"""Shape-based classification of a raw test target."""

from __future__ import annotations

import re

from djtest.models import TargetKind

METHOD_PATTERN = re.compile(r"test[a-z_0-9]+$")
CLASS_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"[A-Za-z]Tests?$"),
    re.compile(r"Test[A-Za-z]+$"),
)


def classify(token: str) -> TargetKind:
    """Decide whether a token names a test method, a test class or neither.

    Rules are checked in order and the first match wins, so a token that
    looks like both a method and a class is treated as a method.

    Args:
        token: The raw target as typed by the user; may be empty.

    Returns:
        The TargetKind for the token.
    """
    if METHOD_PATTERN.search(token):
        return TargetKind.METHOD
    if any(pattern.search(token) for pattern in CLASS_PATTERNS):
        return TargetKind.CLASS
    return TargetKind.MODULE_OR_PACKAGE
