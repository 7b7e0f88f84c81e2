"""Run configuration plus persisted user defaults.

``GeneratorConfig`` carries every option of one run. Users may keep defaults
for the theme, iconset, output name, size style and base root in a JSON object
at ``<user config dir>/indexgen/config.json``; command-line flags override
them. A missing or malformed defaults file never stops a run.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .icon_catalog import DEFAULT_ICONSET
from .render import DEFAULT_THEME

logger = logging.getLogger(__name__)

APP_NAME = "indexgen"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_OUTPUT_NAME = "index.html"
IMAGES_DIR_NAME = "images"
FAVICON_NAME = "favicon.ico"
DEFAULT_BASE = os.sep

_STRING_KEYS = ("theme", "iconset", "name", "root")
_BOOL_KEYS = ("human",)


@dataclass(frozen=True)
class GeneratorConfig:
    """Options for a single generation run.

    ``max_depth`` of ``None`` means unlimited; ``template_dir`` replaces the
    bundled theme when set.
    """

    path: Path
    theme: str = DEFAULT_THEME
    template_dir: Path | None = None
    output_name: str = DEFAULT_OUTPUT_NAME
    print_output: bool = False
    max_depth: int | None = None
    base: str = DEFAULT_BASE
    human: bool = False
    iconset: str = DEFAULT_ICONSET

    def exclusions(self) -> frozenset[str]:
        """Names never listed and never descended into."""
        return frozenset({self.output_name, IMAGES_DIR_NAME, FAVICON_NAME})


def load_config() -> dict[str, object]:
    """Load the persisted JSON defaults object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        raw = CONFIG_PATH.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    try:
        data = json.loads(raw)
    except ValueError as exc:
        logger.warning("ignoring malformed config %s: %s", CONFIG_PATH, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: top-level value is not an object", CONFIG_PATH)
        return {}
    return data


def load_user_defaults() -> dict[str, object]:
    """Return only well-typed default values from the persisted config."""
    data = load_config()
    defaults: dict[str, object] = {}
    for key in _STRING_KEYS:
        value = data.get(key)
        if isinstance(value, str) and value:
            defaults[key] = value
        elif value is not None:
            logger.warning("ignoring config key %r: expected a non-empty string", key)
    for key in _BOOL_KEYS:
        value = data.get(key)
        if isinstance(value, bool):
            defaults[key] = value
        elif value is not None:
            logger.warning("ignoring config key %r: expected a boolean", key)
    return defaults


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_BASE",
    "DEFAULT_OUTPUT_NAME",
    "GeneratorConfig",
    "load_config",
    "load_user_defaults",
]
