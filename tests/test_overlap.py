"""Tests for the overlap cost evaluator."""

import numpy as np
import pytest

from pathquilt.overlap import masked_cost, overlap_cost, overlap_mask, pixel_cost


class TestPixelCost:
    def test_identical_is_zero(self):
        a = np.full((3, 4, 3), 77, dtype=np.uint8)
        assert np.all(pixel_cost(a, a) == 0)

    def test_squared_euclidean_rgb(self):
        old = np.array([[[10, 20, 30]]], dtype=np.uint8)
        new = np.array([[[13, 16, 30]]], dtype=np.uint8)
        assert pixel_cost(old, new)[0, 0] == pytest.approx(9 + 16)

    def test_no_uint8_wraparound(self):
        old = np.array([[[0, 0, 0]]], dtype=np.uint8)
        new = np.array([[[255, 0, 0]]], dtype=np.uint8)
        assert pixel_cost(old, new)[0, 0] == pytest.approx(255 ** 2)

    def test_shape(self):
        a = np.zeros((5, 2, 3), dtype=np.uint8)
        assert pixel_cost(a, a).shape == (5, 2)

    def test_shape_mismatch(self):
        with pytest.raises(ValueError):
            pixel_cost(np.zeros((2, 2, 3)), np.zeros((2, 3, 3)))


class TestOverlapCost:
    def test_field_and_total(self):
        old = np.zeros((2, 2, 3), dtype=np.uint8)
        new = np.zeros((2, 2, 3), dtype=np.uint8)
        new[0, 1] = (1, 1, 1)
        new[1, 0] = (2, 0, 0)
        field, total = overlap_cost(old, new)
        assert field.tolist() == [[0, 3], [4, 0]]
        assert total == pytest.approx(7)

    def test_empty_overlap(self):
        empty = np.zeros((4, 0, 3), dtype=np.uint8)
        field, total = overlap_cost(empty, empty)
        assert total == 0.0
        assert field.shape == (4, 0)

    def test_no_side_effects(self):
        old = np.full((2, 2, 3), 5, dtype=np.uint8)
        new = np.full((2, 2, 3), 9, dtype=np.uint8)
        overlap_cost(old, new)
        assert np.all(old == 5) and np.all(new == 9)


class TestOverlapMask:
    def test_left_only(self):
        mask = overlap_mask(3, 4, left=1, top=0)
        assert mask[:, 0].all()
        assert not mask[:, 1:].any()

    def test_top_only(self):
        mask = overlap_mask(3, 4, left=0, top=2)
        assert mask[:2].all()
        assert not mask[2:].any()

    def test_union_counts_corner_once(self):
        mask = overlap_mask(4, 4, left=2, top=2)
        assert mask.sum() == 16 - 4

    def test_no_overlap(self):
        assert not overlap_mask(4, 4, 0, 0).any()


class TestMaskedCost:
    def test_only_masked_pixels_count(self):
        old = np.zeros((2, 2, 3), dtype=np.uint8)
        new = np.full((2, 2, 3), 1, dtype=np.uint8)
        mask = np.array([[True, False], [False, False]])
        assert masked_cost(old, new, mask) == pytest.approx(3)

    def test_empty_mask(self):
        old = np.zeros((2, 2, 3), dtype=np.uint8)
        new = np.full((2, 2, 3), 100, dtype=np.uint8)
        assert masked_cost(old, new, np.zeros((2, 2), dtype=bool)) == 0.0
