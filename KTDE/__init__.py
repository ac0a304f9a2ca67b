# =============================================================================
# Kernal Tape Decoding Engine (KTDE)
# =============================================================================
#
# Recovers the bytes that a home computer's firmware tape routines wrote to
# cassette as pulse-width-modulated audio.
#
# ── DATA FLOW ─────────────────────────────────────────────────────────────────
#   WAV file     → SAM  lazy int16 samples, read in 64K-frame chunks
#   samples      → SDM  edge detector: widths between falling zero-crossings
#   widths[:100] → SDM  leader calibrator: short pulse width (rank 50)
#   widths       → SDM  pulse classifier: S / M / L / ?(width)
#   symbols      → SDM  block decoder: pairs → bits → parity-checked bytes
#   blocks       → SViz hex lines, one per block
#
# Every stage is a generator that pulls from the one before it, so a tape of
# any length decodes in constant memory.
#
# ── TAPE FORMAT ───────────────────────────────────────────────────────────────
#   Leader      : long run of short pulses (sync + calibration)
#   Start       : L M
#   Bit 0       : S M
#   Bit 1       : M S
#   Byte        : 8 data bits LSB first + 1 odd-parity bit, then L M
#   End of data : L S  (optional)
#
# ── Module layout ─────────────────────────────────────────────────────────────
#   SMM/   constants and the immutable DecoderConfig
#   SAM/   sample acquisition from WAV files
#   SDM/   the decoding pipeline and the command-line decoder
#   SViz/  hex rendering of decoded blocks
# =============================================================================
