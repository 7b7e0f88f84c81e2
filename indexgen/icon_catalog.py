"""Bundled SVG icon catalog and MIME-to-icon resolution.

The catalog is read once per run from ``indexgen/icons`` (or another asset
root) into an immutable mapping keyed by ``<iconset>/<category>[/<sub>].svg``.
Resolution walks a fixed fallback chain and returns the first hit as base64.
"""

from __future__ import annotations

import base64
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

BUNDLED_ICONS_DIR = Path(__file__).resolve().parent / "icons"
DEFAULT_ICONSET = "papirus"
DIRECTORY_MIME = "inode/directory"
FALLBACK_ICON = "default"
ICON_SUFFIX = ".svg"


@dataclass(frozen=True)
class IconCatalog:
    """Read-only mapping of catalog keys to raw icon bytes."""

    icons: Mapping[str, bytes]

    @classmethod
    def from_directory(cls, root: Path) -> IconCatalog:
        """Load every ``.svg`` below ``root`` keyed by its posix relative path."""
        if not root.is_dir():
            raise ConfigurationError(f"icon catalog not found: {root}")
        icons: dict[str, bytes] = {}
        for path in sorted(root.rglob(f"*{ICON_SUFFIX}")):
            if not path.is_file():
                continue
            icons[path.relative_to(root).as_posix()] = path.read_bytes()
        logger.debug("loaded %d icons from %s", len(icons), root)
        return cls(icons=MappingProxyType(icons))

    def get(self, key: str) -> bytes | None:
        return self.icons.get(key)

    def iconsets(self) -> tuple[str, ...]:
        """Return the names of the top-level iconset directories."""
        return tuple(sorted({key.split("/", 1)[0] for key in self.icons if "/" in key}))


_BUNDLED_CATALOG: IconCatalog | None = None


def bundled_icon_catalog() -> IconCatalog:
    """Return the process-wide catalog of bundled icons, loading it on first use."""
    global _BUNDLED_CATALOG
    if _BUNDLED_CATALOG is None:
        _BUNDLED_CATALOG = IconCatalog.from_directory(BUNDLED_ICONS_DIR)
    return _BUNDLED_CATALOG


def icon_targets(mime: str, is_dir: bool) -> tuple[str, ...]:
    """Return catalog targets to try, most specific first."""
    if is_dir:
        mime = DIRECTORY_MIME
    if not mime:
        return (FALLBACK_ICON,)
    if "/" not in mime:
        return (mime, FALLBACK_ICON)
    major = mime.split("/", 1)[0]
    return (mime, major, FALLBACK_ICON)


def resolve_icon(mime: str, is_dir: bool, iconset: str, catalog: IconCatalog) -> str:
    """Return the base64 SVG for ``mime`` or ``""`` when nothing in the chain exists."""
    for target in icon_targets(mime, is_dir):
        payload = catalog.get(f"{iconset}/{target}{ICON_SUFFIX}")
        if payload is not None:
            return base64.b64encode(payload).decode("ascii")
    return ""


__all__ = [
    "BUNDLED_ICONS_DIR",
    "DEFAULT_ICONSET",
    "DIRECTORY_MIME",
    "IconCatalog",
    "bundled_icon_catalog",
    "icon_targets",
    "resolve_icon",
]
