"""Maintainability index, derived at finalize time only."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .cyclomatic import CyclomaticStats
    from .halstead import HalsteadStats
    from .loc import LocStats


class MiStats:
    """Maintainability index variants.

    Attributes:
        original: 171 - 5.2 ln(V) - 0.23 CC - 16.2 ln(SLOC)
        sei: SEI variant with a comment-ratio bonus, log2 based
        visual_studio: ``original`` rescaled to 0..100 and clamped at 0
    """

    def __init__(self) -> None:
        self.original = 0.0
        self.sei = 0.0
        self.visual_studio = 0.0

    def finalize(
        self, halstead: HalsteadStats, cyclomatic: CyclomaticStats, loc: LocStats
    ) -> None:
        volume = halstead.volume
        cc = cyclomatic.cumulative
        sloc = loc.sloc
        comment_ratio = loc.cloc / sloc if sloc else 0.0

        self.original = 171.0 - 5.2 * _log(volume) - 0.23 * cc - 16.2 * _log(sloc)
        self.sei = (
            171.0
            - 5.2 * _log2(volume)
            - 0.23 * cc
            - 16.2 * _log2(sloc)
            + 50.0 * math.sin(math.sqrt(2.4 * comment_ratio))
        )
        self.visual_studio = max(0.0, self.original * 100.0 / 171.0)

    def to_dict(self) -> dict[str, float]:
        return {
            "original": self.original,
            "sei": self.sei,
            "visual_studio": self.visual_studio,
        }


def _log(value: float) -> float:
    return math.log(value) if value > 0 else 0.0


def _log2(value: float) -> float:
    return math.log2(value) if value > 0 else 0.0
