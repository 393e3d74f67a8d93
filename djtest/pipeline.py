"""Resolution of a raw target into a dotted test path."""

from __future__ import annotations

from pathlib import Path

from djtest.classify import classify
from djtest.config import DjtestConfig
from djtest.disambiguate import choose_one
from djtest.discovery import enumerate_entries, locate
from djtest.models import SelectionAbortedError, TargetKind, TargetNotFoundError
from djtest.paths import build_dotted_path
from djtest.picker import pick
from djtest.resolver import ClassResolver, TextClassResolver, unique_class_names

_FILES_HEADER = "The name of the test method/class was found in multiple files:"
_CLASSES_HEADER = "The test method was found in multiple classes:"


def _choose_file(token: str, root: Path) -> str:
    return choose_one(
        locate(token, root),
        header=_FILES_HEADER,
        prompt="Select a file path",
        not_found=f"No file contains '{token}'",
    )


def resolve_method(
    method: str,
    config: DjtestConfig,
    root: Path,
    *,
    class_resolver: ClassResolver | None = None,
) -> str:
    """Find the file and class of a test method and build its dotted path."""
    if class_resolver is None:
        class_resolver = TextClassResolver(root)

    file_path = _choose_file(method, root)
    class_names = unique_class_names(class_resolver.resolve(file_path, method))
    class_name = choose_one(
        class_names,
        header=_CLASSES_HEADER,
        prompt="Select a test class",
        not_found=f"No class defines '{method}' in {file_path}",
        render=lambda name: f"{file_path}: {name}",
    )
    return build_dotted_path(
        file_path,
        class_name,
        method,
        source_dir=config.source_dir,
        extensions=config.extensions,
    )


def resolve_class(class_name: str, config: DjtestConfig, root: Path) -> str:
    """Find the file a test class lives in and build its dotted path."""
    file_path = _choose_file(class_name, root)
    return build_dotted_path(
        file_path,
        class_name,
        source_dir=config.source_dir,
        extensions=config.extensions,
    )


def resolve_module(query: str, config: DjtestConfig, root: Path) -> str:
    """Let the user pick a module or package and build its dotted path.

    Raises:
        SelectionAbortedError: If nothing was picked.
    """
    selected = pick(enumerate_entries(root), query=query)
    if not selected:
        msg = "No module or package selected"
        raise SelectionAbortedError(msg)
    return build_dotted_path(
        selected, source_dir=config.source_dir, extensions=config.extensions
    )


def _explicit_path(target: str, root: Path) -> str | None:
    """Return target relative to root if it names an existing entry below it.

    ``./`` prefixes and absolute paths are reduced to a root-relative path;
    entries outside root, and root itself, are not explicit targets.
    """
    if not target:
        return None
    root = root.resolve()
    candidate = (root / target).resolve()
    if candidate == root or not candidate.is_relative_to(root):
        return None
    relative = candidate.relative_to(root).as_posix()
    if candidate.is_dir():
        return relative + "/"
    if candidate.is_file():
        return relative
    return None


def resolve_target(
    target: str,
    config: DjtestConfig,
    root: Path,
    *,
    class_resolver: ClassResolver | None = None,
) -> str:
    """Turn the raw command-line target into the runner's dotted path.

    Args:
        target: Method name, class name, path or empty string.
        config: Project configuration.
        root: Project root; candidate paths are relative to it.
        class_resolver: Strategy for finding enclosing classes.

    Returns:
        A non-empty dotted path.

    Raises:
        TargetNotFoundError: If the target matches nothing.
        SelectionAbortedError: If the module picker was dismissed.
    """
    explicit = _explicit_path(target, root)
    if explicit is not None:
        dotted_path = build_dotted_path(
            explicit, source_dir=config.source_dir, extensions=config.extensions
        )
    else:
        kind = classify(target)
        if kind is TargetKind.METHOD:
            dotted_path = resolve_method(
                target, config, root, class_resolver=class_resolver
            )
        elif kind is TargetKind.CLASS:
            dotted_path = resolve_class(target, config, root)
        else:
            dotted_path = resolve_module(target, config, root)

    if not dotted_path:
        msg = f"Cannot build a test path from '{target}'"
        raise TargetNotFoundError(msg)
    return dotted_path
