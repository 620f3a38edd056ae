"""Randomised audible cue played when a joint becomes selected."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable, Optional, Protocol, Sequence

from jointcount.constants import SOUND_CHANCE_DENOMINATOR

logger = logging.getLogger(__name__)


class Playable(Protocol):
    def play(self) -> None: ...


class AudioCuePlayer:
    """Plays one of several clips with a fixed chance per request.

    Parameters
    ----------
    clips : sequence of objects with ``play()``
        Usually ``QSoundEffect`` instances from :func:`load_sound_effects`.
    rng : random.Random, optional
        Random source; pass a seeded instance for reproducible behaviour.
    chance_denominator : int
        A cue plays when ``rng.randrange(chance_denominator) == 0``.
    enabled : bool
        When False, :meth:`maybe_play` never plays and never draws.
    """

    def __init__(
        self,
        clips: Sequence[Playable] = (),
        rng: Optional[random.Random] = None,
        chance_denominator: int = SOUND_CHANCE_DENOMINATOR,
        enabled: bool = True,
    ):
        if chance_denominator < 1:
            raise ValueError(f"chance_denominator must be >= 1, got {chance_denominator}")
        self.clips = list(clips)
        self.rng = rng or random.Random()
        self.chance_denominator = chance_denominator
        self.enabled = enabled

    def maybe_play(self) -> Optional[int]:
        """Roll for a cue; play it and return its clip index, else None.

        Playback is fire-and-forget: clips may overlap.
        """
        if not self.enabled or not self.clips:
            return None
        if self.rng.randrange(self.chance_denominator) != 0:
            return None
        index = self.rng.randrange(len(self.clips))
        self.clips[index].play()
        logger.debug("Playing audio cue %d", index)
        return index


def load_sound_effects(paths: Iterable[Path], parent=None) -> list:
    """Create a QSoundEffect per existing file; missing files are skipped.

    Audio is optional, so problems are logged rather than raised.
    """
    from PySide6.QtCore import QUrl
    from PySide6.QtMultimedia import QSoundEffect

    effects = []
    for path in paths:
        path = Path(path)
        if not path.is_file():
            logger.warning("Audio cue not found, skipping: %s", path)
            continue
        effect = QSoundEffect(parent)
        effect.setSource(QUrl.fromLocalFile(str(path.resolve())))
        effects.append(effect)
    return effects
