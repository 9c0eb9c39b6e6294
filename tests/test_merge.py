# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Tests for greedy perceptual merging."""

import math

import pytest

from colorextractor.measure.merge import merge_colors
from colorextractor.schema import WeightedColor

RED = 0xFF0000
NEAR_RED = 0xFE0101
GREEN = 0x00FF00
BLUE = 0x0000FF
NEAR_BLUE = 0x0101FE
YELLOW = 0xFFFF00
BLACK = 0x000000
WHITE = 0xFFFFFF
SILVER = 0xC0C0C0


def _as_pairs(result):
    return [(wc.color, wc.weight) for wc in result]


class TestMergeColors:

    def test_infinite_delta_collapses_to_one(self):
        colors = [(RED, 5.0), (GREEN, 4.0), (BLUE, 3.0), (BLACK, 2.0)]
        result = merge_colors(colors, limit=4, max_delta=math.inf)
        assert _as_pairs(result) == [(RED, 14.0)]

    def test_zero_delta_never_merges(self):
        colors = [(RED, 5.0), (NEAR_RED, 4.0), (BLUE, 3.0), (NEAR_BLUE, 2.0)]
        result = merge_colors(colors, limit=4, max_delta=0.0)
        assert _as_pairs(result) == colors

    def test_near_colors_merge_into_first(self):
        colors = [(RED, 10.0), (NEAR_RED, 5.0), (BLUE, 3.0)]
        result = merge_colors(colors, limit=3, max_delta=5.0)
        assert _as_pairs(result) == [(RED, 15.0), (BLUE, 3.0)]

    def test_representative_unchanged_and_resorted(self):
        colors = [(RED, 5.0), (BLUE, 4.0), (NEAR_BLUE, 3.0)]
        result = merge_colors(colors, limit=3, max_delta=5.0)
        assert _as_pairs(result) == [(BLUE, 7.0), (RED, 5.0)]

    def test_first_matching_cluster_wins(self):
        """Silver is nearer white, but black was created first and is within range."""
        colors = [(BLACK, 3.0), (WHITE, 2.0), (SILVER, 1.0)]
        result = merge_colors(colors, limit=3, max_delta=90.0)
        assert _as_pairs(result) == [(BLACK, 4.0), (WHITE, 2.0)]

    def test_limit_stops_scanning(self):
        colors = [(RED, 5.0), (GREEN, 4.0), (BLUE, 3.0), (YELLOW, 2.0)]
        result = merge_colors(colors, limit=2, max_delta=0.0)
        assert _as_pairs(result) == [(RED, 5.0), (GREEN, 4.0)]

    def test_limit_one_returns_first_seed(self):
        colors = [(RED, 5.0), (NEAR_RED, 3.0)]
        result = merge_colors(colors, limit=1, max_delta=5.0)
        assert _as_pairs(result) == [(RED, 5.0)]

    def test_limit_larger_than_input(self):
        colors = [(RED, 2.0), (BLUE, 1.0)]
        assert len(merge_colors(colors, limit=10, max_delta=0.0)) == 2

    def test_mapping_input(self):
        result = merge_colors({RED: 10, NEAR_RED: 5, BLUE: 3}, limit=3)
        assert _as_pairs(result) == [(RED, 15), (BLUE, 3)]

    def test_duplicate_color_accumulates(self):
        result = merge_colors([(RED, 2.0), (RED, 3.0)], limit=2, max_delta=0.0)
        assert _as_pairs(result) == [(RED, 5.0)]

    def test_returns_weighted_colors(self):
        result = merge_colors([(RED, 1.0)], limit=1)
        assert result == (WeightedColor(color=RED, weight=1.0),)

    def test_empty_and_zero_limit(self):
        assert merge_colors([], limit=5) == ()
        assert merge_colors([(RED, 1.0)], limit=0) == ()

    def test_explicit_lab_cache_is_filled(self):
        cache = {}
        merge_colors([(RED, 2.0), (BLUE, 1.0)], limit=2, lab_cache=cache)
        assert set(cache) == {RED, BLUE}

    def test_default_cache_not_shared_between_calls(self):
        first = merge_colors([(RED, 2.0), (NEAR_RED, 1.0)], limit=2, max_delta=5.0)
        second = merge_colors([(RED, 2.0), (NEAR_RED, 1.0)], limit=2, max_delta=0.0)
        assert len(first) == 1
        assert len(second) == 2

    @pytest.mark.parametrize("max_delta", [0.0, 5.0, 50.0, math.inf])
    def test_weights_never_exceed_input_total(self, max_delta):
        colors = [(RED, 5.0), (NEAR_RED, 4.0), (BLUE, 3.0), (NEAR_BLUE, 2.0)]
        result = merge_colors(colors, limit=4, max_delta=max_delta)
        assert sum(wc.weight for wc in result) <= 14.0
        weights = [wc.weight for wc in result]
        assert weights == sorted(weights, reverse=True)
