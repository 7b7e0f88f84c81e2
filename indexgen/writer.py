"""Persist rendered listing pages."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from .errors import OutputWriteError

logger = logging.getLogger(__name__)


def write_page(
    directory: Path,
    filename: str,
    content: str,
    also_print: bool = False,
    stream: TextIO | None = None,
) -> Path:
    """Write ``content`` to ``directory/filename``, echoing it first when asked."""
    target = directory / filename
    try:
        if also_print:
            out = stream if stream is not None else sys.stdout
            out.write(content)
            out.write("\n")
        target.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(f"cannot write page ({exc.strerror or exc})", target) from exc
    except UnicodeError as exc:
        raise OutputWriteError(f"cannot encode page ({exc})", target) from exc
    logger.debug("wrote %s (%d bytes)", target, len(content))
    return target


__all__ = ["write_page"]
