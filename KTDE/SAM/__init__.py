# =============================================================================
# KTDE/SAM/__init__.py - Sample Acquisition Module
# =============================================================================
#
# Gets raw amplitudes out of an audio container and into the decoder as a
# lazy stream of Python ints. The decoder itself never touches files.
#
# Sub-modules:
#   wav_source.py  - chunked soundfile reader (any format libsndfile opens)
# =============================================================================
