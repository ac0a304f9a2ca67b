"""Tests for falling-edge pulse width detection."""

from __future__ import annotations

from KTDE.SDM.edge_detector import is_falling_edge, pulse_widths
from KTDE.SDM.streams import DataStream

from synth import samples_for_widths


class TestIsFallingEdge:
    def test_steep_zero_crossing_qualifies(self):
        assert is_falling_edge(1500, -1500, threshold=2000)

    def test_drop_must_exceed_threshold(self):
        assert not is_falling_edge(1000, -1000, threshold=2000)
        assert is_falling_edge(1000, -1001, threshold=2000)

    def test_rising_edge_ignored(self):
        assert not is_falling_edge(-5000, 5000, threshold=2000)

    def test_drop_without_crossing_ignored(self):
        assert not is_falling_edge(9000, 10, threshold=2000)
        assert not is_falling_edge(-10, -9000, threshold=2000)

    def test_zero_counts_as_non_negative(self):
        assert is_falling_edge(0, -2001, threshold=2000)


class TestPulseWidths:
    def test_single_edge_reports_distance_from_start(self):
        samples = [0, 100, 3000, 3000, 3000, -3000, -3000]
        assert list(pulse_widths(samples)) == [5]

    def test_distance_between_edges(self):
        samples = [3000, -3000, -100, 200, 3000, -3000, 5, 3000, -3000]
        assert list(pulse_widths(samples)) == [1, 4, 3]

    def test_synthetic_pulse_train(self):
        widths = [10, 14, 19, 10, 10, 14]
        assert list(pulse_widths(samples_for_widths(widths))) == widths

    def test_shallow_noise_is_not_an_edge(self):
        samples = [3000, -3000] + [50, -50] * 10 + [3000, -3000]
        assert list(pulse_widths(samples)) == [1, 22]

    def test_custom_threshold(self):
        samples = [500, -500, 500, -500]
        assert list(pulse_widths(samples)) == []
        assert list(pulse_widths(samples, threshold=900)) == [1, 2]

    def test_trailing_partial_pulse_dropped(self):
        samples = [3000, -3000, 100, 200, 300]
        assert list(pulse_widths(samples)) == [1]

    def test_empty_and_single_sample_input(self):
        assert list(pulse_widths([])) == []
        assert list(pulse_widths([3000])) == []

    def test_pulls_samples_lazily(self):
        stream = DataStream(samples_for_widths([10] * 1000))
        widths = pulse_widths(stream)
        assert next(widths) == 10
        assert stream.position == 11
