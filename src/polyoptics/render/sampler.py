#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
"""Random 2d distributions and sample budgets for Monte Carlo rendering

.. Created on Thu Oct 15 08:52:37 2026

.. codeauthor: Michael J. Hayford
"""
import logging

import numpy as np

logger = logging.getLogger(__name__)


def sample_aperture(rng, n, radius, max_tries=64):
    """Uniformly distributed points in a disk, by rejection sampling.

    Points are drawn in the square [-radius, radius]**2 and kept if they lie
    in the disk; acceptance is pi/4 per round. Points still rejected after
    `max_tries` rounds are projected onto the disk boundary.

    arguments:
        rng: a numpy random Generator
        n: number of points
        radius: radius of the disk

    returns:
        an (n, 2) array of points
    """
    pts = np.zeros((n, 2))
    if radius == 0.0 or n == 0:
        return pts
    todo = np.arange(n)
    for _ in range(max_tries):
        uv = rng.uniform(-radius, radius, size=(len(todo), 2))
        inside = np.sum(uv*uv, axis=1) <= radius*radius
        pts[todo[inside]] = uv[inside]
        todo = todo[~inside]
        if len(todo) == 0:
            return pts
    logger.warning("aperture sampling: %d of %d points not accepted after "
                   "%d tries, projecting onto the boundary",
                   len(todo), n, max_tries)
    uv = rng.uniform(-radius, radius, size=(len(todo), 2))
    r = np.hypot(uv[:, 0], uv[:, 1])
    r[r == 0.0] = 1.0
    pts[todo] = radius*uv/r[:, np.newaxis]
    return pts


def jitter(rng, n, width):
    """n uniform offsets in [-width/2, width/2)."""
    return rng.uniform(-0.5*width, 0.5*width, size=n)


def sample_counts(power, sample_mul):
    """Sample budget for each pixel.

    A pixel of power p gets max(1, floor(p*sample_mul)) samples, each with
    weight p/count, so the weights of a pixel always sum to p.

    returns:
        (counts, weights) arrays shaped like power

    raises:
        ValueError: if any power isn't finite
    """
    power = np.asarray(power, dtype=float)
    if not np.isfinite(power).all():
        raise ValueError("pixel power must be finite")
    counts = np.maximum(1, np.floor(power*sample_mul)).astype(np.int64)
    return counts, power/counts


def sample_batches(counts, batch_size):
    """Split the samples of a run of pixels into batches of batch_size rays.

    Sample k belongs to the first pixel whose running total of counts
    exceeds k. A pixel asking for more than batch_size samples is spread
    over several batches; only the last batch can be shorter.

    yields:
        an array of pixel indices into counts, one entry per ray
    """
    totals = np.cumsum(counts)
    total = int(totals[-1]) if len(totals) else 0
    for first in range(0, total, int(batch_size)):
        last = min(first + batch_size, total)
        yield np.searchsorted(totals, np.arange(first, last), side='right')
