"""Byte-count formatting for listing pages."""

from __future__ import annotations

SIZE_UNIT_STEP = 1024.0
SIZE_UNITS = ("", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB")
SIZE_LAST_UNIT = "YiB"


def format_size(size_bytes: int) -> str:
    """Return a base-1024 human-readable label for ``size_bytes``.

    Plain byte counts render as the bare integer (``"123"``); every scaled
    unit renders with one decimal place (``"1.5 KiB"``). Anything still at
    least 1024 ZiB is reported in YiB without further scaling.
    """
    magnitude = float(size_bytes)
    for unit in SIZE_UNITS:
        if abs(magnitude) < SIZE_UNIT_STEP:
            if not unit:
                return f"{magnitude:.0f}"
            return f"{magnitude:.1f} {unit}"
        magnitude /= SIZE_UNIT_STEP
    return f"{magnitude:.1f} {SIZE_LAST_UNIT}"


def size_label(size_bytes: int, human: bool) -> str:
    """Return the size column text, raw decimal unless ``human`` is set."""
    if human:
        return format_size(size_bytes)
    return str(int(size_bytes))


__all__ = ["SIZE_UNITS", "format_size", "size_label"]
