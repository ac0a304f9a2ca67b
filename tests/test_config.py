"""Tests for DecoderConfig and the format constants."""

from __future__ import annotations

import pytest

from KTDE.SMM import constants
from KTDE.SMM.config import DEFAULT_CONFIG, DecoderConfig


class TestConstants:
    def test_format_defaults(self):
        assert constants.EDGE_THRESHOLD == 2000
        assert constants.CALIBRATION_PULSES == 100
        assert constants.CALIBRATION_RANK == 50
        assert constants.PULSE_WIDTH_OVERSHOOT_FACTOR == 1.1
        assert (
            constants.SHORT_MULTIPLIER,
            constants.MEDIUM_MULTIPLIER,
            constants.LONG_MULTIPLIER,
        ) == (1.0, 1.4, 1.9)

    def test_frame_is_data_plus_parity(self):
        assert constants.FRAME_BITS == constants.DATA_BITS + 1 == 9


class TestDecoderConfig:
    def test_defaults_come_from_constants(self):
        assert DEFAULT_CONFIG == DecoderConfig(
            edge_threshold=2000,
            calibration_pulses=100,
            calibration_rank=50,
            overshoot_factor=1.1,
            short_multiplier=1.0,
            medium_multiplier=1.4,
            long_multiplier=1.9,
        )

    def test_is_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.edge_threshold = 5

    def test_replace(self):
        cfg = DEFAULT_CONFIG._replace(edge_threshold=800)
        assert cfg.edge_threshold == 800
        assert DEFAULT_CONFIG.edge_threshold == 2000

    def test_validate_returns_self(self):
        assert DEFAULT_CONFIG.validate() is DEFAULT_CONFIG

    @pytest.mark.parametrize('overrides, field', [
        ({'edge_threshold': -1}, 'edge_threshold'),
        ({'calibration_pulses': 0}, 'calibration_pulses'),
        ({'calibration_rank': -1}, 'calibration_rank'),
        ({'calibration_pulses': 10}, 'calibration_rank'),
        ({'overshoot_factor': 0.0}, 'overshoot_factor'),
        ({'medium_multiplier': 1.0}, 'multipliers'),
        ({'long_multiplier': 1.2}, 'multipliers'),
        ({'short_multiplier': 0.0}, 'multipliers'),
    ])
    def test_validate_rejects(self, overrides, field):
        with pytest.raises(ValueError, match=field):
            DecoderConfig(**overrides).validate()

    def test_summary_mentions_every_setting(self):
        text = DEFAULT_CONFIG.summary()
        for token in ('2000', '100 pulses', 'rank 50', '1.1', 'x1.4', 'x1.9'):
            assert token in text
