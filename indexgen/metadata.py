"""Per-entry metadata extraction into ``FileItem`` records."""

from __future__ import annotations

import mimetypes
import os
from datetime import datetime

from .errors import TraversalError
from .icon_catalog import IconCatalog, resolve_icon
from .models import FileItem, WalkEntry
from .sizes import size_label

MODIFIED_FORMAT = "%Y-%m-%d %H:%M:%S"


def guess_mime(path: str) -> str:
    """Return the extension-derived MIME type for ``path`` or ``""`` if unknown."""
    # guess_type parses URLs; anchoring at ./ keeps "data:..." names from reading as a scheme.
    if not path.startswith(("./", "/")):
        path = f"./{path}"
    mime, _encoding = mimetypes.guess_type(path, strict=False)
    return mime or ""


def format_modified(timestamp: float) -> str:
    """Format a POSIX timestamp in local time."""
    return datetime.fromtimestamp(timestamp).strftime(MODIFIED_FORMAT)


def entry_stat(entry: WalkEntry) -> os.stat_result:
    """Return ``lstat`` data for ``entry``; failures abort the run."""
    try:
        return entry.fs_path.stat(follow_symlinks=False)
    except OSError as exc:
        raise TraversalError(f"cannot read metadata ({exc.strerror or exc})", entry.fs_path) from exc


def extract_file_item(
    entry: WalkEntry,
    human: bool,
    iconset: str,
    catalog: IconCatalog,
) -> FileItem:
    """Build the normalized record for one walked entry.

    Directory sizes are whatever the filesystem reports for the directory
    itself, never a recursive total.
    """
    stat = entry_stat(entry)
    mime = guess_mime(entry.path)
    return FileItem(
        path=entry.path,
        name=entry.name,
        size=size_label(stat.st_size, human),
        modified=format_modified(stat.st_mtime),
        mime=mime,
        is_dir=entry.is_dir,
        icon=resolve_icon(mime, entry.is_dir, iconset, catalog),
    )


__all__ = ["MODIFIED_FORMAT", "guess_mime", "format_modified", "extract_file_item"]
