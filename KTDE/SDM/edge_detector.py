# =============================================================================
# edge_detector.py - Falling-edge pulse width detector
# =============================================================================
#
# Hardware model:
#   The Datasette read head produces one roughly sinusoidal cycle per pulse.
#   A pulse is measured from one steep falling zero-crossing to the next:
#
#       a >= 0  and  b < 0  and  a - b > EDGE_THRESHOLD
#
#   for consecutive samples (a, b). The slope check rejects the shallow
#   crossings that hiss and DC drift produce near the centre line.
#
#   Widths are counted in sample pairs examined since the previous edge, so
#   the first width is measured from the start of the stream. A partial pulse
#   left over when the samples run out is dropped.
# =============================================================================

from __future__ import annotations
from itertools import pairwise
from typing import Iterable, Iterator

from KTDE.SMM.constants import EDGE_THRESHOLD


def is_falling_edge(a: int, b: int, threshold: int = EDGE_THRESHOLD) -> bool:
    return a - b > threshold and a >= 0 and b < 0


def pulse_widths(
    samples: Iterable[int],
    threshold: int = EDGE_THRESHOLD,
) -> Iterator[int]:
    """
    Yield the width, in samples, of every pulse in ``samples``.

    Parameters
    ----------
    samples   : signed amplitudes, consumed lazily and exactly once
    threshold : minimum amplitude drop across the zero-crossing
    """
    width = 0
    for a, b in pairwise(samples):
        width += 1
        if is_falling_edge(a, b, threshold):
            yield width
            width = 0
