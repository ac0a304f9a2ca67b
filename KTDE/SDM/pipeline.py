# =============================================================================
# pipeline.py - End-to-end decode session
# =============================================================================
#
#   samples ─► DataStream ─► pulse_widths ─► calibrate (first 100, once)
#                                  │
#                                  └─► classify_pulses ─► BlockDecoder ─► blocks
#
# Nothing is read ahead: pulling the next block pulls exactly as many samples
# as that block needs.
# =============================================================================

from __future__ import annotations
import logging
from typing import Iterable, Iterator

from KTDE.SMM.config import DecoderConfig, DEFAULT_CONFIG
from KTDE.SMM.constants import READ_BLOCK_FRAMES
from KTDE.SAM.wav_source import read_samples
from KTDE.SDM.streams import DataStream
from KTDE.SDM.edge_detector import pulse_widths
from KTDE.SDM.leader_calibrator import CalibrationError, calibrate_short_width
from KTDE.SDM.pulse_classifier import Thresholds, classify_pulses
from KTDE.SDM.block_decoder import (
    Block, BlockDecoder, DecodeError, ErrorKind, raise_for_error,
)

log = logging.getLogger(__name__)


def decode_tape(
    samples: Iterable[int],
    config: DecoderConfig = DEFAULT_CONFIG,
    logger: logging.Logger | None = None,
    strict: bool = False,
) -> Iterator[Block | DecodeError]:
    """
    Decode a stream of samples into blocks.

    Returns a lazy iterator of Block items, ending either when the samples
    run out or with a single DecodeError. With ``strict=True`` the iterator
    yields only Blocks and raises TapeDecodeError instead.

    Raises ValueError immediately if ``config`` is invalid.
    """
    config.validate()
    items = _session(samples, config, logger or log)
    return raise_for_error(items) if strict else items


def decode_wav(
    path: str,
    channel: int = 0,
    config: DecoderConfig = DEFAULT_CONFIG,
    logger: logging.Logger | None = None,
    strict: bool = False,
    block_frames: int = READ_BLOCK_FRAMES,
) -> Iterator[Block | DecodeError]:
    """decode_tape() over one channel of an audio file."""
    logger = logger or log
    samples = read_samples(path, channel=channel, block_frames=block_frames, logger=logger)
    return decode_tape(samples, config=config, logger=logger, strict=strict)


def _session(
    samples: Iterable[int],
    config: DecoderConfig,
    logger: logging.Logger,
) -> Iterator[Block | DecodeError]:
    stream = DataStream(samples)
    widths = pulse_widths(stream, config.edge_threshold)

    try:
        short_width = calibrate_short_width(
            widths, config.calibration_pulses, config.calibration_rank,
        )
    except CalibrationError as exc:
        yield DecodeError(
            kind=ErrorKind.CALIBRATION,
            message=f"Calibration failed: {exc} at {stream.position}",
            sample_pos=stream.position,
        )
        return

    thresholds = Thresholds.from_short_width(short_width, config)
    logger.info("Determined short pulse width: %d", short_width)
    logger.info("Pulse width thresholds: %s", thresholds)

    decoder = BlockDecoder(position=lambda: stream.position, logger=logger)
    for item in decoder.decode(classify_pulses(widths, thresholds)):
        if isinstance(item, Block):
            logger.info("Successfully decoded a data block (%d bytes)", len(item.data))
        yield item
