# =============================================================================
# wav_source.py - Lazy WAV sample source
# =============================================================================
#
# Reads the recording READ_BLOCK_FRAMES frames at a time with
# soundfile.blocks(), so only one chunk is in memory however long the tape
# is. Samples come out as 16-bit signed ints regardless of the file's own
# subtype (libsndfile scales float and 24-bit data into int16 range), which
# is what EDGE_THRESHOLD is tuned for.
# =============================================================================

from __future__ import annotations
import logging
import os
from typing import Iterator, NamedTuple

import numpy as np
import soundfile as sf

from KTDE.SMM.constants import READ_BLOCK_FRAMES

log = logging.getLogger(__name__)


class WavInfo(NamedTuple):
    path:        str
    sample_rate: int
    channels:    int
    frames:      int
    subtype:     str

    @property
    def duration(self) -> float:
        return self.frames / self.sample_rate if self.sample_rate else 0.0

    def summary(self) -> str:
        return (
            f"  File     : {os.path.basename(self.path)}\n"
            f"  Rate     : {self.sample_rate} Hz\n"
            f"  Channels : {self.channels}\n"
            f"  Duration : {self.duration:.2f} s  ({self.frames:,} frames)\n"
            f"  Format   : {self.subtype}"
        )


def wav_info(path: str) -> WavInfo:
    info = sf.info(path)
    return WavInfo(
        path=path,
        sample_rate=info.samplerate,
        channels=info.channels,
        frames=info.frames,
        subtype=info.subtype,
    )


def read_samples(
    path: str,
    channel: int = 0,
    block_frames: int = READ_BLOCK_FRAMES,
    logger: logging.Logger | None = None,
) -> Iterator[int]:
    """
    Yield the samples of one channel of ``path`` as ints, in order.

    Parameters
    ----------
    path         : audio file readable by libsndfile
    channel      : 0-based channel index for multi-channel files
    block_frames : frames fetched per read
    logger       : receives a DEBUG line per chunk read
    """
    logger = logger or log
    if block_frames <= 0:
        raise ValueError(f"block_frames must be positive, got {block_frames!r}")

    channels = sf.info(path).channels
    if not 0 <= channel < channels:
        raise ValueError(
            f"channel must be in [0, {channels}) for {path!r}, got {channel!r}"
        )

    return _iter_channel(path, channel, block_frames, logger)


def _iter_channel(
    path: str, channel: int, block_frames: int, logger: logging.Logger
) -> Iterator[int]:
    for block in sf.blocks(path, blocksize=block_frames, dtype="int16", always_2d=True):
        logger.debug("Reading %d-sample block", len(block))
        column: np.ndarray = block[:, channel]
        yield from column.tolist()
