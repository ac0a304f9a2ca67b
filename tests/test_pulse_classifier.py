"""Tests for short / medium / long pulse classification."""

from __future__ import annotations

import pytest

from KTDE.SMM.config import DecoderConfig
from KTDE.SDM.pulse_classifier import (
    Pulse,
    PulseType,
    Thresholds,
    classify_pulses,
)

ORDER = [PulseType.SHORT, PulseType.MEDIUM, PulseType.LONG, PulseType.UNKNOWN]


class TestThresholds:
    def test_derived_from_short_width(self):
        t = Thresholds.from_short_width(10)
        assert t.short_max == pytest.approx(11.0)
        assert t.medium_max == pytest.approx(15.4)
        assert t.long_max == pytest.approx(20.9)

    def test_strictly_ascending(self):
        t = Thresholds.from_short_width(37)
        assert t.short_max < t.medium_max < t.long_max

    def test_config_overrides(self):
        cfg = DecoderConfig(overshoot_factor=1.0, medium_multiplier=2.0, long_multiplier=3.0)
        t = Thresholds.from_short_width(10, cfg)
        assert (t.short_max, t.medium_max, t.long_max) == pytest.approx((10.0, 20.0, 30.0))

    def test_str(self):
        assert str(Thresholds.from_short_width(10)) == "S<11.00 M<15.40 L<20.90"


class TestClassify:
    @pytest.mark.parametrize('width, kind', [
        (1, PulseType.SHORT),
        (10, PulseType.SHORT),
        (12, PulseType.MEDIUM),
        (15, PulseType.MEDIUM),
        (16, PulseType.LONG),
        (20, PulseType.LONG),
        (21, PulseType.UNKNOWN),
        (500, PulseType.UNKNOWN),
    ])
    def test_cascade(self, width, kind):
        assert Thresholds.from_short_width(10).classify(width).kind is kind

    def test_bounds_are_exclusive(self):
        cfg = DecoderConfig(overshoot_factor=1.0, medium_multiplier=1.5, long_multiplier=2.0)
        t = Thresholds.from_short_width(10, cfg)
        assert [t.classify(w).kind for w in (9, 10, 15, 20)] == [
            PulseType.SHORT, PulseType.MEDIUM, PulseType.LONG, PulseType.UNKNOWN,
        ]

    def test_unknown_keeps_width(self):
        pulse = Thresholds.from_short_width(10).classify(42)
        assert pulse == Pulse(PulseType.UNKNOWN, 42)
        assert str(pulse) == "?(42)"

    def test_known_pulses_render_as_letter(self):
        t = Thresholds.from_short_width(10)
        assert [str(t.classify(w)) for w in (10, 14, 19)] == ["S", "M", "L"]

    def test_monotonic_in_width(self):
        t = Thresholds.from_short_width(23)
        ranks = [ORDER.index(t.classify(w).kind) for w in range(1, 80)]
        assert ranks == sorted(ranks)

    def test_classify_pulses_is_one_to_one(self):
        t = Thresholds.from_short_width(10)
        widths = [10, 14, 19, 30, 10]
        out = list(classify_pulses(widths, t))
        assert [p.width for p in out] == widths
        assert "".join(str(p) for p in out) == "SML?(30)S"
