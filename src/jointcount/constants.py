"""Shared constants and paths for JointCount."""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
ASSETS_DIR = PROJECT_ROOT / "assets"
CONFIG_DIR = ASSETS_DIR / "config"
IMAGES_DIR = ASSETS_DIR / "images"
AUDIO_DIR = ASSETS_DIR / "audio"

WIDGET_CONFIG_NAME = "widget.json"
BODY_IMAGE_PATH = IMAGES_DIR / "man-transparent.png"
SOUND_PATHS = (AUDIO_DIR / "ouch.wav", AUDIO_DIR / "getoff.wav")
ASSET_GENERATOR = "tools/generate_placeholder_assets.py"

# Body image geometry (base coordinates are in these pixels)
BASE_IMAGE_WIDTH = 744
BASE_IMAGE_HEIGHT = 1060
BASE_JOINT_RADIUS = 15

# Widget defaults
DEFAULT_SCALE = 0.5
DEFAULT_COLORS = {"border": "green", "selected": "green", "unselected": "white"}

# Status line boxes in base pixels: (x, y, width, height)
HOVER_BOX = (30, 40, 230, 100)
COUNT_BOX = (480, 40, 200, 100)
STATUS_FONT_PT = 20
STATUS_TEXT_INSET = 5
STATUS_BASELINE_OFFSET = 60  # baseline sits at y=100 for both boxes
STATUS_BACKGROUND = "white"
STATUS_FOREGROUND = "black"

# Audio cue: one chance in SOUND_CHANCE_DENOMINATOR per new selection
SOUND_CHANCE_DENOMINATOR = 5
