"""JSON config file loading utilities."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from jointcount.constants import (
    ASSETS_DIR, BODY_IMAGE_PATH, CONFIG_DIR, DEFAULT_COLORS, DEFAULT_SCALE,
    SOUND_PATHS, WIDGET_CONFIG_NAME,
)

logger = logging.getLogger(__name__)


def load_json(path: Path) -> Any:
    """Load and return parsed JSON from a file."""
    with open(path) as f:
        return json.load(f)


def load_config(name: str) -> Any:
    """Load a config file from assets/config/."""
    return load_json(CONFIG_DIR / name)


@dataclass
class WidgetConfig:
    """Defaults applied to every assessment canvas."""
    scale: float = DEFAULT_SCALE
    colors: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_COLORS))
    play_sound: bool = True
    image_path: Path = BODY_IMAGE_PATH
    sound_paths: tuple[Path, ...] = SOUND_PATHS


def _asset_path(value: str) -> Path:
    path = Path(value)
    return path if path.is_absolute() else ASSETS_DIR / path


def load_widget_config(path: Optional[Path] = None) -> WidgetConfig:
    """Load widget defaults, falling back to built-ins when the file is absent.

    Malformed JSON is not caught.
    """
    path = path or CONFIG_DIR / WIDGET_CONFIG_NAME
    try:
        data = load_json(path)
    except FileNotFoundError:
        logger.info("No widget config at %s, using defaults", path)
        return WidgetConfig()

    config = WidgetConfig()
    if "scale" in data:
        config.scale = float(data["scale"])
    if "colors" in data:
        colors = dict(DEFAULT_COLORS)
        colors.update(data["colors"])
        config.colors = colors
    if "play_sound" in data:
        config.play_sound = bool(data["play_sound"])
    if "image" in data:
        config.image_path = _asset_path(data["image"])
    if "sounds" in data:
        config.sound_paths = tuple(_asset_path(s) for s in data["sounds"])
    return config
