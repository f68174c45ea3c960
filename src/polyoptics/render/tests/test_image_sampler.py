#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for the image buffer, sample budgets and gamut correction

.. Created on Sun Oct 18 14:10:51 2026

.. codeauthor: Michael J. Hayford
"""

import unittest
import pytest
from pytest import approx
import numpy as np
import numpy.testing as npt

from polyoptics.render.image import Image
from polyoptics.render.sampler import (sample_aperture, jitter,
                                       sample_counts, sample_batches)
from polyoptics.render.gamut import correct_gamut


class ImageTestCase(unittest.TestCase):
    def setUp(self):
        data = np.zeros((4, 5, 3))
        data[..., 0] = np.arange(5)[np.newaxis, :]
        data[..., 1] = np.arange(4)[:, np.newaxis]
        data[..., 2] = 1.0
        self.img = Image.from_array(data)

    def test_shape(self):
        assert (self.img.width, self.img.height, self.img.channels) == (5, 4, 3)
        with pytest.raises(ValueError):
            Image(5, 4, data=np.zeros((5, 4, 3)))
        grey = Image.from_array(np.ones((2, 3)))
        assert grey.channels == 1

    def test_lookup(self):
        vals = self.img.lookup([1.0, 2.5, 0.0], [2.0, 1.0, 2.75])
        npt.assert_allclose(vals, [[1.0, 2.0, 1.0],
                                   [2.5, 1.0, 1.0],
                                   [0.0, 2.75, 1.0]])

    def test_lookup_clamps(self):
        vals = self.img.lookup([-3.0, 10.0], [1.0, 9.0])
        npt.assert_allclose(vals, [[0.0, 1.0, 1.0], [4.0, 3.0, 1.0]])

    def test_splat_at_pixel(self):
        img = Image(5, 4)
        img.splat([2.0], [1.0], [[1.0, 2.0, 3.0]])
        npt.assert_allclose(img.data[1, 2], [1.0, 2.0, 3.0])
        assert img.data.sum() == approx(6.0)

    def test_splat_bilinear(self):
        img = Image(5, 4)
        img.splat([1.25], [2.5], [[1.0, 1.0, 1.0]])
        assert img.data[2, 1, 0] == approx(0.375)
        assert img.data[2, 2, 0] == approx(0.125)
        assert img.data[3, 1, 0] == approx(0.375)
        assert img.data[3, 2, 0] == approx(0.125)

    def test_splat_accumulates(self):
        img = Image(5, 4)
        ones = np.ones((3, 3))
        img.splat([3.0, 3.0, 3.0], [0.0, 0.0, 0.0], ones)
        npt.assert_allclose(img.data[0, 3], [3.0, 3.0, 3.0])

    def test_splat_edges(self):
        img = Image(5, 4)
        img.splat([-0.5, 4.5, 100.0, np.nan], [0.0, 3.0, 1.0, 1.0],
                  np.ones((4, 3)))
        assert img.data[0, 0, 0] == approx(0.5)
        assert img.data[3, 4, 0] == approx(0.5)
        assert img.data.sum() == approx(3.0)


class SamplerTestCase(unittest.TestCase):
    def setUp(self):
        self.rng = np.random.default_rng(11)

    def test_aperture_in_disk(self):
        pts = sample_aperture(self.rng, 5000, 2.0)
        assert pts.shape == (5000, 2)
        assert np.all(np.hypot(pts[:, 0], pts[:, 1]) <= 2.0)
        # uniform in area: a quarter of the points inside half the radius
        inner = np.mean(np.hypot(pts[:, 0], pts[:, 1]) < 1.0)
        assert inner == approx(0.25, abs=0.03)
        npt.assert_allclose(pts.mean(axis=0), [0.0, 0.0], atol=0.1)

    def test_pinhole(self):
        pts = sample_aperture(self.rng, 10, 0.0)
        npt.assert_array_equal(pts, np.zeros((10, 2)))

    def test_retry_cap_projects_to_boundary(self):
        pts = sample_aperture(self.rng, 2000, 1.0, max_tries=1)
        r = np.hypot(pts[:, 0], pts[:, 1])
        assert np.all(r <= 1.0 + 1e-12)
        assert np.sum(np.isclose(r, 1.0)) > 0

    def test_reproducible(self):
        pts1 = sample_aperture(np.random.default_rng(3), 100, 1.0)
        pts2 = sample_aperture(np.random.default_rng(3), 100, 1.0)
        npt.assert_array_equal(pts1, pts2)

    def test_jitter(self):
        offsets = jitter(self.rng, 1000, 0.5)
        assert np.all(np.abs(offsets) <= 0.25)

    def test_sample_counts(self):
        power = np.array([0.0, 0.0004, 0.0123, 2.5])
        counts, weights = sample_counts(power, 1000.0)
        npt.assert_array_equal(counts, [1, 1, 12, 2500])
        npt.assert_allclose(counts*weights, power)

    def test_sample_counts_not_finite(self):
        with pytest.raises(ValueError):
            sample_counts([0.5, np.inf], 1000.0)
        with pytest.raises(ValueError):
            sample_counts([np.nan], 1000.0)

    def test_sample_batches(self):
        counts = np.array([3, 4, 10, 1, 1, 2])
        batches = list(sample_batches(counts, 7))
        assert [len(pix) for pix in batches] == [7, 7, 7]
        npt.assert_array_equal(batches[0], [0, 0, 0, 1, 1, 1, 1])
        npt.assert_array_equal(batches[2], [2, 2, 2, 3, 4, 5, 5])
        npt.assert_array_equal(np.concatenate(batches),
                               np.repeat(np.arange(len(counts)), counts))
        batches = list(sample_batches(counts, 1000))
        assert len(batches) == 1
        npt.assert_array_equal(np.bincount(batches[0]), counts)

    def test_bright_pixel_is_split(self):
        counts, weights = sample_counts([0.5, 5.0e4, 0.5], 1000.0)
        batch_size = 1 << 20
        sizes = [len(pix) for pix in sample_batches(counts, batch_size)]
        assert max(sizes) <= batch_size
        assert sum(sizes) == counts.sum() == 50001000
        assert all(size == batch_size for size in sizes[:-1])

    def test_empty_batches(self):
        assert list(sample_batches(np.array([], dtype=np.int64), 8)) == []


def test_gamut_floor():
    rng = np.random.default_rng(5)
    data = rng.normal(size=(6, 7, 3))
    data[0, 0] = [-1.0, -2.0, -0.5]
    orig_max = data.max(axis=-1)
    img = Image.from_array(data.copy())
    result = correct_gamut(img, floor=0.02)
    assert result is img
    out = img.data
    pos = orig_max >= 0.0
    npt.assert_allclose(out.max(axis=-1)[pos], orig_max[pos])
    assert np.all(out >= 0.02*np.clip(out.max(axis=-1), 0.0, None)[..., None]
                  - 1e-15)
    npt.assert_array_equal(out[0, 0], [0.0, 0.0, 0.0])


def test_gamut_array_in_place():
    data = np.array([[[1.0, -0.1, 0.5]]])
    correct_gamut(data)
    npt.assert_allclose(data, [[[1.0, 0.02, 0.5]]])
