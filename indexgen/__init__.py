"""Public package surface for indexgen.

Exports ``main`` for programmatic CLI invocation and the product metadata
shared by ``--version`` and rendered pages.
"""

from __future__ import annotations

__version__ = "0.1.0"

PRODUCT_NAME = "indexgen"
# Homepage shown in footers and --version output; empty until one is published.
PRODUCT_URL = ""


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main", "__version__", "PRODUCT_NAME", "PRODUCT_URL"]
