"""Template loading and listing-page rendering.

A ``TemplateSet`` is built once per run, either from a bundled theme under
``indexgen/templates/<theme>`` or from a user-supplied template directory.
Both sources must provide ``layout.html`` and ``index.html``; anything else
is rejected at load time so a run never fails halfway on a missing template.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape

from .errors import ConfigurationError, TemplateRenderError
from .models import RenderContext

logger = logging.getLogger(__name__)

BUNDLED_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
DEFAULT_THEME = "default"
LAYOUT_TEMPLATE = "layout.html"
INDEX_TEMPLATE = "index.html"
REQUIRED_TEMPLATES = (LAYOUT_TEMPLATE, INDEX_TEMPLATE)
CONTEXT_NAME = "ig"


def available_theme_names() -> tuple[str, ...]:
    """Return bundled themes that ship every required template."""
    if not BUNDLED_TEMPLATES_DIR.is_dir():
        return ()
    return tuple(
        sorted(
            child.name
            for child in BUNDLED_TEMPLATES_DIR.iterdir()
            if child.is_dir() and all((child / name).is_file() for name in REQUIRED_TEMPLATES)
        )
    )


def _build_environment(search_path: Path) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(search_path)),
        autoescape=select_autoescape(enabled_extensions=("html", "htm")),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


@dataclass(frozen=True)
class TemplateSet:
    """Compiled ``layout``/``index`` pair shared by every page of a run."""

    source: Path
    environment: Environment

    @classmethod
    def from_directory(cls, directory: Path) -> TemplateSet:
        """Load and compile the required templates found in ``directory``."""
        if not directory.is_dir():
            raise ConfigurationError(f"template directory not found: {directory}")
        missing = [name for name in REQUIRED_TEMPLATES if not (directory / name).is_file()]
        if missing:
            raise ConfigurationError(f"template directory {directory} is missing {', '.join(missing)}")

        environment = _build_environment(directory)
        for name in REQUIRED_TEMPLATES:
            try:
                environment.get_template(name)
            except (TemplateError, UnicodeError) as exc:
                raise TemplateRenderError(str(exc), name) from exc
        logger.debug("loaded templates from %s", directory)
        return cls(source=directory, environment=environment)

    @classmethod
    def for_theme(cls, theme: str) -> TemplateSet:
        """Load a bundled theme by name."""
        if theme not in available_theme_names():
            known = ", ".join(available_theme_names())
            raise ConfigurationError(f"unknown theme {theme!r} (available: {known})")
        return cls.from_directory(BUNDLED_TEMPLATES_DIR / theme)

    def render(self, context: RenderContext, template_name: str = INDEX_TEMPLATE) -> str:
        """Render ``template_name`` with ``context`` exposed as ``ig``."""
        try:
            template = self.environment.get_template(template_name)
            return template.render({CONTEXT_NAME: asdict(context)})
        except (TemplateError, UnicodeError) as exc:
            raise TemplateRenderError(str(exc), template_name) from exc


def load_template_set(theme: str, template_dir: Path | None) -> TemplateSet:
    """Return the user template set when given, otherwise the bundled theme."""
    if template_dir is not None:
        return TemplateSet.from_directory(template_dir)
    return TemplateSet.for_theme(theme)


def display_root(base: str, group_key: str) -> str:
    """Return the page title path: ``base`` plus ``group_key`` without ``./``.

    ``"."`` maps to ``base`` alone and ``"./sub/dir"`` to ``base + "sub/dir"``.
    """
    relative = group_key[1:] if group_key.startswith(".") else ""
    if relative.startswith("/"):
        relative = relative[1:]
    else:
        relative = ""
    return base + relative


__all__ = [
    "BUNDLED_TEMPLATES_DIR",
    "DEFAULT_THEME",
    "INDEX_TEMPLATE",
    "LAYOUT_TEMPLATE",
    "TemplateSet",
    "available_theme_names",
    "display_root",
    "load_template_set",
]
