"""Turning file paths into dotted test labels."""

from __future__ import annotations

import os

_SEPARATORS: tuple[str, ...] = ("/",) if os.sep == "/" else ("/", os.sep)


def build_dotted_path(
    file_path: str,
    class_name: str | None = None,
    method: str | None = None,
    *,
    source_dir: str = "src",
    extensions: tuple[str, ...] = (".py",),
) -> str:
    """Build the label the test runner expects from a path and optional names.

    A file path loses its extension and yields a module label; a directory
    path loses one trailing separator and yields a package label. A leading
    ``source_dir`` segment is dropped because the runner imports from inside
    it.

    Args:
        file_path: Path relative to the project root.
        class_name: Test class to append, if any.
        method: Test method to append, if any.
        source_dir: Intermediate source directory to strip; empty disables.
        extensions: Recognized single-file source extensions.

    Returns:
        The dotted path, e.g. ``app.billing.tests.InvoiceTest.test_total``.
    """
    path = file_path
    for ext in extensions:
        if path.endswith(ext):
            path = path[: -len(ext)]
            break
    else:
        if path.endswith(_SEPARATORS):
            path = path[:-1]

    if source_dir:
        for sep in _SEPARATORS:
            prefix = source_dir.rstrip("/" + os.sep) + sep
            if path.startswith(prefix):
                path = path[len(prefix) :]
                break

    for sep in _SEPARATORS:
        path = path.replace(sep, ".")

    dotted_path = path
    if class_name:
        dotted_path += f".{class_name}"
    if method:
        dotted_path += f".{method}"
    return dotted_path
