"""Generate placeholder body-diagram and audio assets.

The clinical body image and sound clips are not distributed with the
source. This script draws a plain outline figure at the base image size
(with every joint marker position inside the silhouette) and writes two
short tones, so the application runs out of the box.

Usage::

    python tools/generate_placeholder_assets.py
    python tools/generate_placeholder_assets.py --show-joints
"""

import argparse
import sys
import wave
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from jointcount.anatomy.joint_locations import BASE_CENTERS, BASE_RADII  # noqa: E402
from jointcount.constants import (  # noqa: E402
    BASE_IMAGE_HEIGHT, BASE_IMAGE_WIDTH, BODY_IMAGE_PATH, SOUND_PATHS,
)

OUTLINE = (90, 90, 90, 255)
FILL = (235, 228, 220, 255)

SAMPLE_RATE = 22050


def draw_body(show_joints: bool = False) -> Image.Image:
    """Front-view outline figure with hands and feet spread below the body."""
    img = Image.new("RGBA", (BASE_IMAGE_WIDTH, BASE_IMAGE_HEIGHT), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    cx = BASE_IMAGE_WIDTH // 2

    def shape(points):
        draw.polygon(points, fill=FILL, outline=OUTLINE)

    # Head and neck
    draw.ellipse((cx - 55, 20, cx + 55, 140), fill=FILL, outline=OUTLINE)
    shape([(cx - 22, 135), (cx + 22, 135), (cx + 25, 160), (cx - 25, 160)])
    # Torso and pelvis
    shape([(cx - 110, 160), (cx + 110, 160), (cx + 95, 400),
           (cx + 90, 450), (cx - 90, 450), (cx - 95, 400)])
    # Arms
    shape([(cx - 110, 160), (cx - 85, 200), (cx - 120, 330), (cx - 145, 440),
           (cx - 170, 430), (cx - 125, 310)])
    shape([(cx + 110, 160), (cx + 85, 200), (cx + 120, 330), (cx + 145, 440),
           (cx + 170, 430), (cx + 125, 310)])
    # Legs
    shape([(cx - 90, 450), (cx - 5, 450), (cx - 20, 620), (cx - 25, 780),
           (cx - 50, 780), (cx - 55, 620)])
    shape([(cx + 90, 450), (cx + 5, 450), (cx + 20, 620), (cx + 25, 780),
           (cx + 50, 780), (cx + 55, 620)])
    # Hands (spread either side below the arms)
    for x0, x1 in ((30, 300), (BASE_IMAGE_WIDTH - 300, BASE_IMAGE_WIDTH - 30)):
        draw.rounded_rectangle((x0, 600, x1, 805), radius=40, fill=FILL, outline=OUTLINE)
    # Feet
    for x0, x1 in ((190, 365), (BASE_IMAGE_WIDTH - 365, BASE_IMAGE_WIDTH - 190)):
        draw.rounded_rectangle((x0, 830, x1, 1020), radius=40, fill=FILL, outline=OUTLINE)

    if show_joints:
        for joint_id, (x, y) in BASE_CENTERS.items():
            r = BASE_RADII[joint_id]
            draw.ellipse((x - r, y - r, x + r, y + r), outline=(200, 60, 60, 255))
    return img


def write_tone(path: Path, freqs: tuple[float, ...], duration: float = 0.25) -> None:
    """Write a mono 16-bit WAV of consecutive sine chirps."""
    segment = int(SAMPLE_RATE * duration / len(freqs))
    t = np.arange(segment) / SAMPLE_RATE
    envelope = np.hanning(segment)
    samples = np.concatenate([np.sin(2 * np.pi * f * t) * envelope for f in freqs])
    pcm = (samples * 0.6 * 32767).astype("<i2")

    path.parent.mkdir(parents=True, exist_ok=True)
    with wave.open(str(path), "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(SAMPLE_RATE)
        wav.writeframes(pcm.tobytes())


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--show-joints", action="store_true",
                        help="Outline joint marker positions on the image")
    parser.add_argument("--force", action="store_true",
                        help="Overwrite existing assets")
    args = parser.parse_args()

    if args.force or not BODY_IMAGE_PATH.exists():
        BODY_IMAGE_PATH.parent.mkdir(parents=True, exist_ok=True)
        draw_body(args.show_joints).save(BODY_IMAGE_PATH)
        print(f"Wrote {BODY_IMAGE_PATH}")

    for path, freqs in zip(SOUND_PATHS, ((660.0, 440.0), (520.0, 390.0, 300.0))):
        if args.force or not path.exists():
            write_tone(path, freqs)
            print(f"Wrote {path}")


if __name__ == "__main__":
    main()
