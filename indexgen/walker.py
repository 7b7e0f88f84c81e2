"""Recursive directory traversal grouped by parent directory.

Children are visited in lexicographic name order, depth-first and pre-order,
so group keys and their member lists come out in a stable order that does not
depend on the filesystem. Reserved names are pruned before descending, which
drops an excluded directory together with its whole subtree.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from .errors import TraversalError
from .models import DirectoryGroups, WalkEntry

logger = logging.getLogger(__name__)

ROOT_KEY = "."
PATH_SEPARATOR = "/"


def _sorted_children(directory: Path) -> list[os.DirEntry[str]]:
    """Return scandir entries for ``directory`` sorted by name."""
    try:
        with os.scandir(directory) as entries:
            children = list(entries)
    except OSError as exc:
        raise TraversalError(f"cannot scan directory ({exc.strerror or exc})", directory) from exc
    children.sort(key=lambda child: child.name)
    return children


def _entry_is_dir(child: os.DirEntry[str]) -> bool:
    """Return whether ``child`` is a real directory; symlinks are never followed."""
    try:
        return child.is_dir(follow_symlinks=False)
    except OSError as exc:
        raise TraversalError(f"cannot read entry type ({exc.strerror or exc})", child.path) from exc


def iter_entries(
    root: Path,
    max_depth: int | None,
    exclusions: frozenset[str] | set[str],
) -> Iterator[WalkEntry]:
    """Yield entries under ``root`` in traversal order.

    ``root`` itself (depth 0) is never yielded. Entries deeper than
    ``max_depth`` are skipped; ``None`` means unlimited.
    """
    if max_depth is not None and max_depth < 1:
        return

    stack: list[tuple[str, int, Iterator[os.DirEntry[str]]]] = [
        (ROOT_KEY, 1, iter(_sorted_children(root)))
    ]
    while stack:
        parent_key, depth, children = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            continue
        if child.name in exclusions:
            logger.debug("skipping reserved entry %s%s%s", parent_key, PATH_SEPARATOR, child.name)
            continue

        is_dir = _entry_is_dir(child)
        entry = WalkEntry(
            path=f"{parent_key}{PATH_SEPARATOR}{child.name}",
            parent=parent_key,
            name=child.name,
            depth=depth,
            is_dir=is_dir,
            fs_path=Path(child.path),
        )
        yield entry

        if is_dir and (max_depth is None or depth < max_depth):
            stack.append((entry.path, depth + 1, iter(_sorted_children(entry.fs_path))))


def walk_tree(
    root: Path,
    max_depth: int | None,
    exclusions: frozenset[str] | set[str],
) -> DirectoryGroups:
    """Group every visited entry under its immediate parent's key.

    Keys are traversal-relative paths (``"."``, ``"./sub"``) in the order the
    directories were first populated. Directories left with no surviving
    children never become keys.
    """
    groups: DirectoryGroups = {}
    for entry in iter_entries(root, max_depth, exclusions):
        groups.setdefault(entry.parent, []).append(entry)
    logger.debug("walked %s: %d non-empty directories", root, len(groups))
    return groups


def group_directory(root: Path, key: str) -> Path:
    """Return the filesystem directory a group key refers to."""
    if key == ROOT_KEY:
        return root
    relative = key[len(ROOT_KEY + PATH_SEPARATOR) :] if key.startswith(ROOT_KEY + PATH_SEPARATOR) else key
    return root.joinpath(*relative.split(PATH_SEPARATOR))


__all__ = ["ROOT_KEY", "iter_entries", "walk_tree", "group_directory"]
