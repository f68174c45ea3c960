#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Floating point rgb image with sub-pixel read and accumulate

.. Created on Wed Oct 14 14:45:09 2026

.. codeauthor: Michael J. Hayford
"""
import numpy as np
from scipy import ndimage


class Image:
    """ Dense (height, width, channels) radiance buffer

    Pixel (i, j) is column i, row j; sub-pixel coordinates put pixel
    centers at integer values.

    Attributes:
        data: float array of shape (height, width, channels)
    """

    def __init__(self, width, height, channels=3, data=None):
        if data is None:
            data = np.zeros((height, width, channels))
        elif data.shape != (height, width, channels):
            raise ValueError(f"data shape {data.shape} doesn't match "
                             f"{(height, width, channels)}")
        self.data = data

    @classmethod
    def from_array(cls, arr):
        arr = np.asarray(arr, dtype=float)
        if arr.ndim == 2:
            arr = arr[..., np.newaxis]
        height, width, channels = arr.shape
        return cls(width, height, channels=channels, data=arr)

    def __repr__(self):
        return f"{type(self).__name__}(width={self.width}, " \
               f"height={self.height}, channels={self.channels})"

    @property
    def width(self):
        return self.data.shape[1]

    @property
    def height(self):
        return self.data.shape[0]

    @property
    def channels(self):
        return self.data.shape[2]

    def lookup(self, x, y):
        """ bilinear sample at (x, y), clamping to the border pixels

        Returns:
            an (N, channels) array for N coordinates
        """
        coords = np.array([np.ravel(y), np.ravel(x)], dtype=float)
        return np.stack([ndimage.map_coordinates(self.data[..., c], coords,
                                                 order=1, mode='nearest')
                         for c in range(self.channels)], axis=-1)

    def splat(self, x, y, values):
        """ add `values` at (x, y), shared bilinearly among 4 pixels

        Neighbors falling outside the image are dropped.

        Args:
            x, y: arrays of N sub-pixel coordinates
            values: an (N, channels) array
        """
        x = np.ravel(x)
        y = np.ravel(y)
        values = np.asarray(values, dtype=float).reshape(len(x), -1)
        keep = (np.isfinite(x) & np.isfinite(y) &
                (x > -1) & (x < self.width) & (y > -1) & (y < self.height))
        x, y, values = x[keep], y[keep], values[keep]
        x0 = np.floor(x).astype(np.int64)
        y0 = np.floor(y).astype(np.int64)
        fx = x - x0
        fy = y - y0
        for di, wx in ((0, 1.0 - fx), (1, fx)):
            for dj, wy in ((0, 1.0 - fy), (1, fy)):
                xi = x0 + di
                yj = y0 + dj
                inside = ((xi >= 0) & (xi < self.width) &
                          (yj >= 0) & (yj < self.height))
                w = (wx*wy)[inside]
                np.add.at(self.data, (yj[inside], xi[inside]),
                          w[:, np.newaxis]*values[inside])
