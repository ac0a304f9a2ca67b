# =============================================================================
# KTDE/SMM/__init__.py - Signal Mapping Module
# =============================================================================
#
# The SMM is the single source of truth for the tape format: edge detection
# amplitude, calibration window, pulse width ratios.
#
# All other KTDE sub-modules import exclusively from here.
# Never define format constants outside this module.
#
# Sub-modules:
#   constants.py  - all timing constants and ratios
#   config.py     - DecoderConfig, the per-session bundle of those constants
# =============================================================================
