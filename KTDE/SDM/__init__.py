# =============================================================================
# KTDE/SDM/__init__.py - Signal Decoding Module
# =============================================================================
#
# The SDM turns a lazy stream of samples into a lazy stream of decoded blocks.
#
# Sub-modules:
#   streams.py           - DataStream (position-counting iterator) + helpers
#   edge_detector.py     - samples → pulse widths
#   leader_calibrator.py - first 100 widths → short pulse width
#   pulse_classifier.py  - widths → S / M / L / ?(width)
#   block_decoder.py     - symbols → parity-checked bytes grouped in blocks
#   pipeline.py          - wires the stages together (decode_tape/decode_wav)
#   tape_decoder.py      - command-line decoder (python -m KTDE.SDM.tape_decoder)
# =============================================================================
