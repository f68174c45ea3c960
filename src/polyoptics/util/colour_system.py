#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2016 Christian Hill
""" converting between wavelengths and linear rgb colour

adapted from the web blog:
    https://scipython.com/blog/converting-a-spectrum-to-a-colour/

The conversions here are linear; no gamut mapping and no normalization on
the largest component. Monochromatic colours fall outside the rgb gamut and
produce negative components, which is what spectral accumulation needs.

@author: Christian Hill
"""

import numpy as np
from pathlib import Path


def xyz_from_xy(x, y):
    """Return the vector (x, y, 1-x-y)."""
    return np.array((x, y, 1-x-y))


class ColourSystem:
    """A class representing a colour system.

    A colour system defined by the CIE x, y and z=1-x-y coordinates of
    its three primary illuminants and its "white point".

    Besides the xyz -> rgb matrix, the colour system holds rgb colour
    matching functions, scaled so an equal energy spectrum sampled on the
    cmf grid gives rgb = (1, 1, 1), and a non-negative spectral basis used
    to turn an rgb value into spectral power at a single wavelength.
    """

    # The CIE 1931 2° colour matching function for 380 - 780 nm in 5 nm
    # intervals
    path = Path(__file__).resolve().parent
    cmf_data = np.loadtxt(path / 'cie-cmf.txt')
    wvls = cmf_data[:, 0]
    cmf = cmf_data[:, 1:]

    def __init__(self, red, green, blue, white):
        """Initialise the ColourSystem object.

        Pass vectors (ie NumPy arrays of shape (3,)) for each of the
        red, green, blue  chromaticities and the white illuminant
        defining the colour system.

        """

        # Chromaticities
        self.red, self.green, self.blue = red, green, blue
        self.white = white
        # The chromaticity matrix (rgb -> xyz) and its inverse
        self.M = np.vstack((self.red, self.green, self.blue)).T
        self.MI = np.linalg.inv(self.M)
        # White scaling array
        self.wscale = self.MI.dot(self.white)
        # xyz -> rgb transformation matrix
        self.T = self.MI / self.wscale[:, np.newaxis]

        # rgb colour matching functions, one column per channel
        rgb_cmf = self.cmf @ self.T.T
        self.rgb_cmf = rgb_cmf / np.sum(rgb_cmf, axis=0)
        basis = np.clip(self.rgb_cmf, 0.0, None)
        self.basis = basis / np.max(basis, axis=0)

    def xyz_to_rgb(self, xyz):
        """Transform from xyz to linear rgb, without gamut mapping."""
        return np.asarray(xyz) @ self.T.T

    def _interp(self, table, wv):
        wv = np.asarray(wv, dtype=float)
        return np.stack([np.interp(wv, self.wvls, table[:, i],
                                   left=0.0, right=0.0)
                         for i in range(table.shape[1])], axis=-1)

    def wvl_to_xyz(self, wv):
        """Return the cmf xyz values at wavelength wv (nm).

        Values between the 5 nm grid points are linearly interpolated;
        wavelengths outside 380 - 780 nm give zeros.

        """
        return self._interp(self.cmf, wv)

    def wvl_to_rgb(self, wv):
        """Convert a wavelength (nm) to a linear rgb weight."""
        return self._interp(self.rgb_cmf, wv)

    def rgb_to_power(self, wv, rgb):
        """Return the spectral power at wv (nm) of a colour given in rgb.

        rgb may be a single colour or an array of colours with the channel
        as the last axis.

        """
        return np.sum(np.asarray(rgb) * self._interp(self.basis, wv),
                      axis=-1)


illuminant_D65 = xyz_from_xy(0.3127, 0.3291)

cs_srgb = ColourSystem(red=xyz_from_xy(0.64, 0.33),
                       green=xyz_from_xy(0.30, 0.60),
                       blue=xyz_from_xy(0.15, 0.06),
                       white=illuminant_D65)


def wavelength_to_rgb(wvl, cs=cs_srgb):
    """ linear rgb weight of unit spectral power at `wvl` nm """
    return cs.wvl_to_rgb(wvl)


def rgb_to_power(wvl, rgb, cs=cs_srgb):
    """ scalar spectral power at `wvl` nm of the colour `rgb` """
    return cs.rgb_to_power(wvl, rgb)
