"""YAML-based style configuration.

Styles can be customised from ``$XDG_CONFIG_HOME/cli-menu/style.yaml``:

    bg: 16
    bg_fallback: white
    fg: red
    selected_marker: ">"
    margin_auto: true
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Callable

import yaml

from .style import MenuStyle
from .terminal import TerminalCapabilityProvider

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the cli-menu config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config) / "cli-menu"


def get_style_config_path() -> Path:
    """Get the path to the style config file."""
    return get_config_dir() / "style.yaml"


def load_style_config(path: Path | None = None) -> dict[str, Any]:
    """Load style settings, returning an empty dict if none are usable."""
    path = path or get_style_config_path()
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Could not read style config %s: %s", path, e)
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring style config %s: expected a mapping", path)
        return {}
    return data


def _setter(method: str) -> Callable[[MenuStyle, Any], None]:
    return lambda style, value: getattr(style, method)(value)


_SIMPLE_KEYS: dict[str, Callable[[MenuStyle, Any], None]] = {
    "selected_marker": _setter("set_selected_marker"),
    "unselected_marker": _setter("set_unselected_marker"),
    "item_extra": _setter("set_item_extra"),
    "displays_extra": _setter("set_displays_extra"),
    "title_separator": _setter("set_title_separator"),
    "width": _setter("set_width"),
    "padding": _setter("set_padding"),
    "margin": _setter("set_margin"),
}

_COLOUR_KEYS = {"bg": "set_bg", "fg": "set_fg"}
_KNOWN_KEYS = set(_SIMPLE_KEYS) | set(_COLOUR_KEYS) | {"bg_fallback", "fg_fallback", "margin_auto"}


def _set_margin_auto(style: MenuStyle, enabled: object) -> None:
    if not isinstance(enabled, bool):
        raise TypeError(f"margin_auto must be true or false, got {enabled!r}")
    if enabled:
        style.set_margin_auto()


def _apply(key: str, action: Callable[[], None], strict: bool) -> None:
    try:
        action()
    except (TypeError, ValueError) as e:
        if strict:
            raise
        logger.warning("Ignoring style setting %s: %s", key, e)


def apply_style_config(style: MenuStyle, cfg: dict[str, Any], strict: bool = True) -> MenuStyle:
    """Apply config settings to ``style`` through its setters.

    Width is applied before margin so an automatic margin is derived from
    the configured width.

    Args:
        style: Style to mutate.
        cfg: Settings as loaded by ``load_style_config``.
        strict: Raise on the first invalid value. When False, invalid
            values are logged and skipped, leaving that attribute unchanged.

    Returns:
        The same style, for chaining.
    """
    for key in cfg:
        if key not in _KNOWN_KEYS:
            logger.warning("Unknown style setting: %s", key)

    for key, method in _COLOUR_KEYS.items():
        if key in cfg:
            fallback = cfg.get(f"{key}_fallback")
            setter = getattr(style, method)
            _apply(key, lambda: setter(cfg[key], fallback), strict)

    for key, setter in _SIMPLE_KEYS.items():
        if key in cfg:
            _apply(key, lambda: setter(style, cfg[key]), strict)

    if "margin_auto" in cfg:
        _apply("margin_auto", lambda: _set_margin_auto(style, cfg["margin_auto"]), strict)
    return style


def style_from_config(
    terminal: TerminalCapabilityProvider | None = None,
    path: Path | None = None,
    strict: bool = True,
) -> MenuStyle:
    """Create a style bound to ``terminal`` and customised from the config file."""
    return apply_style_config(MenuStyle(terminal), load_style_config(path), strict=strict)
