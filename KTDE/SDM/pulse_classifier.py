# =============================================================================
# pulse_classifier.py - Short / Medium / Long pulse classification
# =============================================================================
#
# Thresholds are upper bounds derived from the calibrated short width S0:
#
#   short_max  = S0 * 1.1 * 1.0
#   medium_max = S0 * 1.1 * 1.4
#   long_max   = S0 * 1.1 * 1.9
#
# A width falls in the first class whose bound it is strictly below; anything
# at or above long_max is UNKNOWN and keeps its width for diagnostics. Unknown
# pulses are not errors here; the block decoder rejects them when they fail to
# pair up.
# =============================================================================

from __future__ import annotations
from enum import Enum
from typing import Iterable, Iterator, NamedTuple

from KTDE.SMM.config import DecoderConfig, DEFAULT_CONFIG


class PulseType(Enum):
    SHORT   = "S"
    MEDIUM  = "M"
    LONG    = "L"
    UNKNOWN = "?"


class Pulse(NamedTuple):
    kind:  PulseType
    width: int       # samples

    def __str__(self) -> str:
        if self.kind is PulseType.UNKNOWN:
            return f"?({self.width})"
        return self.kind.value


class Thresholds(NamedTuple):
    short_max:  float
    medium_max: float
    long_max:   float

    @classmethod
    def from_short_width(
        cls, short_width: int, config: DecoderConfig = DEFAULT_CONFIG
    ) -> "Thresholds":
        base = short_width * config.overshoot_factor
        return cls(
            short_max=base * config.short_multiplier,
            medium_max=base * config.medium_multiplier,
            long_max=base * config.long_multiplier,
        )

    def classify(self, width: int) -> Pulse:
        if width < self.short_max:
            return Pulse(PulseType.SHORT, width)
        if width < self.medium_max:
            return Pulse(PulseType.MEDIUM, width)
        if width < self.long_max:
            return Pulse(PulseType.LONG, width)
        return Pulse(PulseType.UNKNOWN, width)

    def __str__(self) -> str:
        return (
            f"S<{self.short_max:.2f} M<{self.medium_max:.2f} L<{self.long_max:.2f}"
        )


def classify_pulses(widths: Iterable[int], thresholds: Thresholds) -> Iterator[Pulse]:
    """Yield one Pulse per width, in order."""
    for width in widths:
        yield thresholds.classify(width)
