#!/usr/bin/env python3
# =============================================================================
# tape_decoder.py - Datasette Tape Decoder (command line)
# =============================================================================
#
# Feed it a WAV recording of a cassette written by the Kernal tape routines
# and it prints every decoded block as one line of hex bytes on stdout.
# Diagnostics go to stderr.
#
# Usage:
#   python -m KTDE.SDM.tape_decoder <path_to_wav>
#   python -m KTDE.SDM.tape_decoder <path_to_wav> --edge-threshold 1500
#   python -m KTDE.SDM.tape_decoder <path_to_wav> --channel 1 -v
#   python -m KTDE.SDM.tape_decoder <path_to_wav> -q > dump.txt
#
# Exit status: 0 when the tape decoded cleanly, 1 on a missing or unreadable
# file or the first decode error (there is no recovery past a bad byte).
# =============================================================================

from __future__ import annotations
import argparse
import logging
import os
import sys

import soundfile as sf

from KTDE.SMM.config import DecoderConfig
from KTDE.SMM.constants import EDGE_THRESHOLD, READ_BLOCK_FRAMES
from KTDE.SAM.wav_source import wav_info
from KTDE.SDM.pipeline import decode_wav
from KTDE.SDM.block_decoder import DecodeError
from KTDE.SViz.hexdump import write_block

log = logging.getLogger("KTDE")

DIVIDER = "=" * 68


def setup_logging(verbosity: int) -> None:
    """verbosity: -1 = errors only, 0 = info, 1 = debug."""
    level = {-1: logging.ERROR, 0: logging.INFO}.get(verbosity, logging.DEBUG)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname).1s: %(message)s"))
    log.handlers[:] = [handler]
    log.setLevel(level)
    log.propagate = False


def run_decode(
    wav_path: str,
    config: DecoderConfig,
    channel: int = 0,
    block_frames: int = READ_BLOCK_FRAMES,
    quiet: bool = False,
) -> bool:
    """
    Decode one WAV file, writing hex lines to stdout.
    Returns True if the whole tape decoded without error.
    """
    report = (lambda *a: None) if quiet else (lambda *a: print(*a, file=sys.stderr))

    if not os.path.exists(wav_path):
        print(f"  [!!] File not found: {wav_path}", file=sys.stderr)
        return False

    report(f"\n{DIVIDER}")
    report("  Datasette Tape Decoder")
    report(DIVIDER)
    try:
        info = wav_info(wav_path)
    except sf.LibsndfileError as exc:
        log.error("Cannot read %s: %s", wav_path, exc)
        return False

    report(info.summary())
    report(config.summary())
    report(DIVIDER)

    n_blocks = 0
    n_bytes = 0
    error: DecodeError | None = None

    try:
        items = decode_wav(
            wav_path,
            channel=channel,
            config=config,
            logger=log,
            block_frames=block_frames,
        )
    except (ValueError, sf.LibsndfileError) as exc:
        log.error(str(exc))
        return False

    for item in items:
        if isinstance(item, DecodeError):
            error = item
            break
        write_block(item.data, sys.stdout)
        n_blocks += 1
        n_bytes += len(item.data)

    report(DIVIDER)
    report(f"  Blocks decoded : {n_blocks}")
    report(f"  Bytes decoded  : {n_bytes:,}")

    if error is not None:
        log.error(error.message)
        report(f"  VERDICT: FAIL - {error.kind.value} error at sample {error.sample_pos:,}")
        report(DIVIDER)
        return False

    report("  VERDICT: PASS")
    report(DIVIDER)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Decode Commodore Kernal-format Datasette recordings to hex",
    )
    parser.add_argument("wav", help="Path to the tape recording (WAV or any libsndfile format)")
    parser.add_argument(
        "--edge-threshold", type=int, default=EDGE_THRESHOLD,
        help=f"Minimum amplitude drop across a falling edge, default {EDGE_THRESHOLD}",
    )
    parser.add_argument(
        "--channel", type=int, default=0,
        help="0-based channel to decode in multi-channel files, default 0",
    )
    parser.add_argument(
        "--block-size", type=int, default=READ_BLOCK_FRAMES,
        help=f"Frames read from the file at a time, default {READ_BLOCK_FRAMES}",
    )
    volume = parser.add_mutually_exclusive_group()
    volume.add_argument(
        "-v", "--verbose", action="store_true",
        help="Debug output (every chunk read)",
    )
    volume.add_argument(
        "-q", "--quiet", action="store_true",
        help="Only hex lines on stdout and errors on stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(-1 if args.quiet else (1 if args.verbose else 0))

    try:
        config = DecoderConfig(edge_threshold=args.edge_threshold).validate()
    except ValueError as exc:
        log.error(str(exc))
        sys.exit(2)

    ok = run_decode(
        wav_path=args.wav,
        config=config,
        channel=args.channel,
        block_frames=args.block_size,
        quiet=args.quiet,
    )
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
