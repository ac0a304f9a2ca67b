# =============================================================================
# leader_calibrator.py - Short pulse width from the block leader
# =============================================================================
#
# The first pulses on tape are the leader: thousands of identical short
# pulses. The first CALIBRATION_PULSES widths are sorted and the value at
# CALIBRATION_RANK becomes the reference short width for the whole session.
#
# Calibration happens once, before the first block. Later blocks reuse the
# same thresholds even if tape speed drifts over a long recording.
# =============================================================================

from __future__ import annotations
from typing import Iterable

from KTDE.SMM.constants import CALIBRATION_PULSES, CALIBRATION_RANK
from KTDE.SDM.streams import take


class CalibrationError(ValueError):
    """Fewer pulses than the calibration window needs."""


def calibrate_short_width(
    widths: Iterable[int],
    count: int = CALIBRATION_PULSES,
    rank: int = CALIBRATION_RANK,
) -> int:
    """
    Consume ``count`` widths from ``widths`` and return the one at ``rank``
    after sorting.

    The consumed widths are not replayed; they are leader pulses and carry no
    data. Raises CalibrationError if the stream holds fewer than ``count``.
    """
    window = take(widths, count)
    if len(window) < count:
        raise CalibrationError(
            f"need {count} pulses to calibrate, stream ended after {len(window)}"
        )
    return sorted(window)[rank]
