"""Listing generation pipeline: walk, extract, render, write.

Runs strictly in sequence and stops at the first error; pages already
written before a failure stay on disk.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from . import PRODUCT_NAME, PRODUCT_URL, __version__
from .config import GeneratorConfig
from .errors import ConfigurationError
from .icon_catalog import IconCatalog, bundled_icon_catalog
from .metadata import extract_file_item
from .models import Generator, RenderContext, WalkEntry
from .render import TemplateSet, display_root, load_template_set
from .walker import group_directory, walk_tree
from .writer import write_page

logger = logging.getLogger(__name__)


def product_generator() -> Generator:
    return Generator(name=PRODUCT_NAME, version=__version__, url=PRODUCT_URL)


def build_context(
    group_key: str,
    entries: list[WalkEntry],
    config: GeneratorConfig,
    catalog: IconCatalog,
    generator: Generator,
) -> RenderContext:
    """Turn one directory group into the context its page renders from."""
    files = tuple(extract_file_item(entry, config.human, config.iconset, catalog) for entry in entries)
    return RenderContext(
        root=display_root(config.base, group_key),
        files=files,
        generator=generator,
    )


def generate(
    config: GeneratorConfig,
    templates: TemplateSet | None = None,
    catalog: IconCatalog | None = None,
    stream: TextIO | None = None,
) -> list[Path]:
    """Write one listing page into every non-empty directory under ``config.path``.

    Returns the written page paths in traversal order.
    """
    root = Path(config.path)
    if not root.exists():
        raise ConfigurationError(f"path does not exist: {root}")
    if not root.is_dir():
        raise ConfigurationError(f"path is not a directory: {root}")

    if templates is None:
        templates = load_template_set(config.theme, config.template_dir)
    if catalog is None:
        catalog = bundled_icon_catalog()
    if config.iconset not in catalog.iconsets():
        logger.warning("iconset %r not found; pages will render without icons", config.iconset)

    generator = product_generator()
    groups = walk_tree(root, config.max_depth, config.exclusions())

    written: list[Path] = []
    for group_key, entries in groups.items():
        logger.debug("rendering %s (%d entries)", group_key, len(entries))
        context = build_context(group_key, entries, config, catalog, generator)
        html = templates.render(context)
        written.append(
            write_page(
                group_directory(root, group_key),
                config.output_name,
                html,
                also_print=config.print_output,
                stream=stream,
            )
        )
    logger.info("wrote %d listing page(s) under %s", len(written), root)
    return written


__all__ = ["build_context", "generate", "product_generator"]
