# =============================================================================
# hexdump.py - Block → hex text
# =============================================================================

from __future__ import annotations
from typing import Iterable, TextIO


def format_block(data: bytes | Iterable[int]) -> str:
    """``b"\\xde\\xad"`` → ``"de ad"``"""
    return " ".join(f"{b:02x}" for b in data)


def write_block(data: bytes | Iterable[int], out: TextIO) -> None:
    out.write(format_block(data) + "\n")
    out.flush()
