"""Datatypes flowing through the traversal, extraction and rendering stages."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class WalkEntry:
    """One filesystem entry discovered while walking the target tree.

    ``path`` is the traversal-relative display path (``./sub/b.txt``) and
    ``parent`` the key of the group it belongs to (``./sub``). ``fs_path`` is
    the real location used for stat calls.
    """

    path: str
    parent: str
    name: str
    depth: int
    is_dir: bool
    fs_path: Path


@dataclass(frozen=True)
class FileItem:
    """Normalized per-entry record handed to templates."""

    path: str
    name: str
    size: str
    modified: str
    mime: str
    is_dir: bool
    icon: str


@dataclass(frozen=True)
class Generator:
    """Product metadata shown in page footers."""

    name: str
    version: str
    url: str


@dataclass(frozen=True)
class RenderContext:
    """Everything one listing page renders from."""

    root: str
    files: tuple[FileItem, ...]
    generator: Generator


DirectoryGroups = dict[str, list[WalkEntry]]


__all__ = [
    "WalkEntry",
    "FileItem",
    "Generator",
    "RenderContext",
    "DirectoryGroups",
]
