# =============================================================================
# block_decoder.py - Pulse pairs → bytes → blocks
# =============================================================================
#
# State machine (one pass, no backtracking):
#
#   SEEKING_LEADER   skip pulses until an L is consumed
#   EXPECT_START     the next pulse must be M  (L M = start of first byte)
#   READING_BITS     read pulses two at a time:
#                      S M → bit 0
#                      M S → bit 1
#                      L M → byte boundary: exactly 9 bits must be pending,
#                            8 data bits LSB first + odd parity bit
#                      L S → end-of-data marker, block done
#                      anything else → framing error
#
# After an end-of-data marker the decoder goes back to SEEKING_LEADER for the
# next block. If the pulses run out inside READING_BITS, the bytes decoded so
# far are yielded as a final block with terminated=False.
#
# Errors are fatal: the decoder yields a single DecodeError as its last item
# and stops. It never resynchronises on the next leader. The caller decides
# what to do with the error (see raise_for_error / tape_decoder.main).
# =============================================================================

from __future__ import annotations
import logging
from enum import Enum
from typing import Callable, Iterable, Iterator, NamedTuple

from KTDE.SMM.constants import DATA_BITS, FRAME_BITS
from KTDE.SDM.pulse_classifier import Pulse, PulseType
from KTDE.SDM.streams import chunked, skip_through

S = PulseType.SHORT
M = PulseType.MEDIUM
L = PulseType.LONG


class ErrorKind(Enum):
    CALIBRATION  = "calibration"
    START_MARKER = "start_marker"
    BIT_COUNT    = "bit_count"
    PARITY       = "parity"
    FRAMING      = "framing"


class Block(NamedTuple):
    index:      int     # 0-based block number within the session
    data:       bytes
    start_pos:  int     # sample position where the data began (after L M)
    end_pos:    int     # sample position where the block closed
    terminated: bool    # True = closed by an L S end-of-data marker


class DecodeError(NamedTuple):
    kind:       ErrorKind
    message:    str
    sample_pos: int


class TapeDecodeError(Exception):
    """Raised by raise_for_error() when the decoder hit a fatal error."""

    def __init__(self, error: DecodeError) -> None:
        super().__init__(error.message)
        self.error = error


def parity_ok(data_bits: list[int], parity: int) -> bool:
    """True if the 8 data bits plus the parity bit hold an odd number of 1s."""
    return (sum(data_bits) + parity) % 2 == 1


def bits_to_byte(bits: list[int]) -> int:
    """Assemble bits stored LSB first into an int."""
    value = 0
    for i, bit in enumerate(bits):
        value |= bit << i
    return value


class BlockDecoder:
    """
    Block decoder for one tape session.

    Parameters
    ----------
    position : callable returning the current sample position, used only for
               diagnostics. Typically ``lambda: samples.position`` where
               ``samples`` is the DataStream feeding the edge detector.
    logger   : where progress messages go; defaults to this module's logger.
    """

    def __init__(
        self,
        position: Callable[[], int] | None = None,
        logger: logging.Logger | None = None,
    ):
        self._position = position or (lambda: 0)
        self.log = logger or logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def decode(self, pulses: Iterable[Pulse]) -> Iterator[Block | DecodeError]:
        """
        Yield each Block as soon as it is complete.

        Stops when ``pulses`` is exhausted, or after yielding one DecodeError.
        """
        pulses = iter(pulses)
        index = 0

        while True:
            self.log.info("Start parsing block at %d", self._position())

            # --- SEEKING_LEADER ---
            if skip_through(pulses, lambda p: p.kind is L) is None:
                return

            # --- EXPECT_START ---
            marker = next(pulses, None)
            if marker is None:
                return
            if marker.kind is not M:
                yield self._error(
                    ErrorKind.START_MARKER, f"Expected M, got {marker}"
                )
                return
            start_pos = self._position()
            self.log.info("End of leader found at %d", start_pos)

            # --- READING_BITS ---
            data = bytearray()
            error = None
            terminated = False
            bits: list[int] = []

            for pair in chunked(pulses, 2):
                if len(pair) < 2:
                    # Odd pulse left at end of input; nothing to pair it with.
                    break
                a, b = pair
                kinds = (a.kind, b.kind)

                if kinds == (S, M):
                    bits.append(0)
                elif kinds == (M, S):
                    bits.append(1)
                elif kinds == (L, M):
                    error = self._check_frame(bits)
                    if error is not None:
                        break
                    bits.pop()  # parity, already checked
                    data.append(bits_to_byte(bits))
                    bits = []
                elif kinds == (L, S):
                    # Optional; any bits pending are dropped without complaint.
                    self.log.info("End-of-data marker at %d", self._position())
                    terminated = True
                    break
                else:
                    error = self._error(ErrorKind.FRAMING, f"Read error: {a} {b}")
                    break

            if error is not None:
                yield error
                return

            yield Block(
                index=index,
                data=bytes(data),
                start_pos=start_pos,
                end_pos=self._position(),
                terminated=terminated,
            )
            index += 1

            if not terminated:
                return

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _check_frame(self, bits: list[int]) -> DecodeError | None:
        if len(bits) < FRAME_BITS:
            return self._error(
                ErrorKind.BIT_COUNT,
                f"Read error: found only {len(bits)} bits",
            )
        if len(bits) > FRAME_BITS:
            return self._error(
                ErrorKind.BIT_COUNT,
                f"Read error: found {len(bits)} bits, expected {FRAME_BITS}",
            )
        data_bits, parity = bits[:DATA_BITS], bits[DATA_BITS]
        if not parity_ok(data_bits, parity):
            return self._error(
                ErrorKind.PARITY,
                f"Read error: incorrect parity {parity} for {data_bits}",
            )
        return None

    def _error(self, kind: ErrorKind, message: str) -> DecodeError:
        pos = self._position()
        return DecodeError(kind=kind, message=f"{message} at {pos}", sample_pos=pos)


def raise_for_error(items: Iterable[Block | DecodeError]) -> Iterator[Block]:
    """Pass Blocks through; raise TapeDecodeError on the first DecodeError."""
    for item in items:
        if isinstance(item, DecodeError):
            raise TapeDecodeError(item)
        yield item
