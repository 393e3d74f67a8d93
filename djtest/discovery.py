"""Locating test targets in the working tree."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

import pathspec
import typer

SKIP_DIRS: frozenset[str] = frozenset(
    {
        "__pycache__",
        "node_modules",
        ".git",
        ".hg",
        ".svn",
        "venv",
        ".venv",
        "env",
        ".env",
        "build",
        "dist",
        ".tox",
        ".mypy_cache",
        ".ruff_cache",
        ".pytest_cache",
        "egg-info",
        "htmlcov",
        "staticfiles",
    }
)


def _ripgrep(token: str, root: Path) -> list[str]:
    """Run ripgrep for whole-word matches of token below root.

    Returns:
        Output lines of the form ``path:line:content``, or an empty list when
        ripgrep is missing, finds nothing or fails.
    """
    try:
        result = subprocess.run(
            [
                "rg",
                "--word-regexp",
                "--fixed-strings",
                "--line-number",
                "--with-filename",
                "--no-heading",
                "--color=never",
                "--sort=path",
                "--",
                token,
                ".",
            ],
            cwd=root,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        typer.echo("Warning: ripgrep (rg) is not installed", err=True)
        return []
    if result.returncode == 1:
        return []
    if result.returncode != 0:
        typer.echo(f"Warning: rg failed: {result.stderr.strip()}", err=True)
        return []
    return result.stdout.splitlines()


def locate(token: str, root: Path | None = None) -> list[str]:
    """Return the files below root that contain token as a whole word.

    Args:
        token: Literal method or class name to search for.
        root: Directory to search (default: current directory).

    Returns:
        Relative file paths in order of first appearance, without duplicates.
    """
    if not token:
        return []
    if root is None:
        root = Path.cwd()

    candidates: list[str] = []
    seen: set[str] = set()
    for line in _ripgrep(token, root):
        path, sep, _rest = line.partition(":")
        if not sep:
            continue
        path = path.removeprefix("./")
        if path not in seen:
            seen.add(path)
            candidates.append(path)
    return candidates


def _git_ls_files(root: Path) -> set[str] | None:
    """Return the set of git-tracked and untracked-but-not-ignored files.

    Uses ``git ls-files --cached --others --exclude-standard`` to respect
    all gitignore files (root, subdirectory, and global).

    Returns:
        Set of repo-relative file paths, or None if git is unavailable
        or the directory is not a git repository.
    """
    if not (root / ".git").exists():
        return None
    try:
        result = subprocess.run(
            ["git", "ls-files", "--cached", "--others", "--exclude-standard"],
            cwd=root,
            capture_output=True,
            text=True,
            timeout=10,
            check=False,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return None
    if result.returncode != 0:
        return None
    return set(result.stdout.splitlines())


def _load_gitignore(root: Path) -> pathspec.PathSpec:
    """Load .gitignore from root, returning a PathSpec matcher."""
    gitignore_path = root / ".gitignore"
    if gitignore_path.is_file():
        lines = gitignore_path.read_text(encoding="utf-8").splitlines()
        return pathspec.PathSpec.from_lines("gitignore", lines)
    return pathspec.PathSpec.from_lines("gitignore", [])


def enumerate_entries(root: Path) -> list[str]:
    """Walk root and list the files and directories a test can live in.

    Hidden entries, well-known tool directories and symlinks are skipped, and
    gitignored entries are left out. Directories carry a trailing ``/`` so
    they normalize to package paths.

    Args:
        root: Directory to enumerate.

    Returns:
        Relative paths, sorted.
    """
    git_files = _git_ls_files(root)
    gitignore = _load_gitignore(root) if git_files is None else None
    git_dirs: set[str] = set()
    if git_files is not None:
        for name in git_files:
            git_dirs.update(p.as_posix() for p in Path(name).parents if p != Path("."))

    entries: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root, followlinks=False):
        # Prune skip dirs and hidden dirs in-place to prevent descent
        dirnames[:] = sorted(
            d for d in dirnames if d not in SKIP_DIRS and not d.startswith(".")
        )

        rel_dir = Path(dirpath).relative_to(root)

        kept_dirs: list[str] = []
        for dname in dirnames:
            rel = (rel_dir / dname).as_posix()
            if (Path(dirpath) / dname).is_symlink():
                continue
            if git_files is not None:
                if rel not in git_dirs:
                    continue
            elif gitignore and gitignore.match_file(rel + "/"):
                continue
            kept_dirs.append(dname)
            entries.append(rel + "/")
        dirnames[:] = kept_dirs

        for fname in sorted(filenames):
            if fname.startswith("."):
                continue
            if (Path(dirpath) / fname).is_symlink():
                continue

            rel = (rel_dir / fname).as_posix()
            if git_files is not None:
                if rel not in git_files:
                    continue
            elif gitignore and gitignore.match_file(rel):
                continue
            entries.append(rel)

    entries.sort()
    return entries
