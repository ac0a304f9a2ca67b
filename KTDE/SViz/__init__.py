# =============================================================================
# KTDE/SViz/__init__.py - Signal Visualizer Module
# =============================================================================
#
# Text rendering of decoded data for humans and for diffing against known
# good dumps.
#
# Sub-modules:
#   hexdump.py  - one line of lowercase hex bytes per block
# =============================================================================
