# =============================================================================
# config.py - Decoder configuration
# =============================================================================
#
# DecoderConfig bundles the SMM constants into one immutable value that is
# built once when a decode session starts and handed to each stage that needs
# it. Override individual fields with DecoderConfig(edge_threshold=...) or
# cfg._replace(...).
# =============================================================================

from __future__ import annotations
from typing import NamedTuple

from KTDE.SMM.constants import (
    EDGE_THRESHOLD,
    CALIBRATION_PULSES, CALIBRATION_RANK,
    PULSE_WIDTH_OVERSHOOT_FACTOR,
    SHORT_MULTIPLIER, MEDIUM_MULTIPLIER, LONG_MULTIPLIER,
)


class DecoderConfig(NamedTuple):
    edge_threshold:     int   = EDGE_THRESHOLD
    calibration_pulses: int   = CALIBRATION_PULSES
    calibration_rank:   int   = CALIBRATION_RANK
    overshoot_factor:   float = PULSE_WIDTH_OVERSHOOT_FACTOR
    short_multiplier:   float = SHORT_MULTIPLIER
    medium_multiplier:  float = MEDIUM_MULTIPLIER
    long_multiplier:    float = LONG_MULTIPLIER

    def validate(self) -> "DecoderConfig":
        """Raise ValueError if the values cannot describe a usable decoder."""
        if self.edge_threshold < 0:
            raise ValueError(
                f"edge_threshold must be >= 0, got {self.edge_threshold!r}"
            )
        if self.calibration_pulses <= 0:
            raise ValueError(
                f"calibration_pulses must be positive, got {self.calibration_pulses!r}"
            )
        if not 0 <= self.calibration_rank < self.calibration_pulses:
            raise ValueError(
                f"calibration_rank must be in [0, {self.calibration_pulses}), "
                f"got {self.calibration_rank!r}"
            )
        if self.overshoot_factor <= 0:
            raise ValueError(
                f"overshoot_factor must be positive, got {self.overshoot_factor!r}"
            )
        if not 0 < self.short_multiplier < self.medium_multiplier < self.long_multiplier:
            raise ValueError(
                "multipliers must be positive and strictly ascending, got "
                f"{self.short_multiplier!r} / {self.medium_multiplier!r} / "
                f"{self.long_multiplier!r}"
            )
        return self

    def summary(self) -> str:
        return (
            f"  Edge threshold     : {self.edge_threshold}\n"
            f"  Calibration window : {self.calibration_pulses} pulses, rank {self.calibration_rank}\n"
            f"  Overshoot factor   : {self.overshoot_factor}  "
            f"(S/M/L x{self.short_multiplier} / x{self.medium_multiplier} / x{self.long_multiplier})"
        )


DEFAULT_CONFIG = DecoderConfig()
