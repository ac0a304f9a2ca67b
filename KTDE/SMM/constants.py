# =============================================================================
# constants.py - SMM Tape Format Constants
# =============================================================================
#
# Source: C64 ROM loader documentation (c64tapes.org, "loaders:rom_loader")
# cross-checked against real Datasette recordings.

# -----------------------------------------------------------------------------
# EDGE DETECTION
# -----------------------------------------------------------------------------

# Minimum drop (a - b) across a falling zero-crossing for it to count as the
# end of a pulse. Found by trial and error on 16-bit recordings; quiet or
# heavily amplified tapes need a different value (see --edge-threshold).
EDGE_THRESHOLD = 2_000

# -----------------------------------------------------------------------------
# LEADER CALIBRATION
# -----------------------------------------------------------------------------

# Every block starts with a long leader of short pulses. The first
# CALIBRATION_PULSES widths are sorted and the one at CALIBRATION_RANK is
# taken as the short pulse width. A few pulses at the very start are skewed
# while the tape motor spins up, hence a rank statistic and not the mean.
CALIBRATION_PULSES = 100
CALIBRATION_RANK   = 50     # lower of the two middle values of 100

# -----------------------------------------------------------------------------
# PULSE CLASSIFICATION
# -----------------------------------------------------------------------------

# Headroom for wow and flutter above the nominal short pulse width.
PULSE_WIDTH_OVERSHOOT_FACTOR = 1.1

# Upper bound of each pulse class, as a multiple of the overshot short width.
# Nominal Kernal pulse lengths are roughly S : M : L = 1 : 1.4 : 1.9.
SHORT_MULTIPLIER  = 1.0
MEDIUM_MULTIPLIER = 1.4
LONG_MULTIPLIER   = 1.9

# -----------------------------------------------------------------------------
# BYTE FRAMING
# -----------------------------------------------------------------------------

DATA_BITS  = 8
FRAME_BITS = DATA_BITS + 1   # data bits + one odd-parity bit

# -----------------------------------------------------------------------------
# SAMPLE ACQUISITION
# -----------------------------------------------------------------------------

# Frames fetched from the WAV file per read. Keeps memory flat for long tapes.
READ_BLOCK_FRAMES = 65_536
