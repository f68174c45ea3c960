#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Wavelength bins used to approximate the visible spectrum

.. Created on Wed Oct 14 11:02:18 2026

.. codeauthor: Michael J. Hayford
"""
from collections import namedtuple

import numpy as np

from polyoptics.util.colour_system import cs_srgb

SpectralSample = namedtuple('SpectralSample', ['wvl', 'rgb'])
SpectralSample.wvl.__doc__ = "wavelength of the bin, in nm"
SpectralSample.rgb.__doc__ = "linear rgb weight of unit power in the bin"


class SpectralSampling:
    """ Evenly spaced wavelength bins and their rgb weights

    A single bin degenerates to the central wavelength.

    With `white_balance` set, the rgb weights are scaled per channel so that
    the sum over the bins of the spectral power of (1, 1, 1) times the bin
    weight is (1, 1, 1). An image rendered through an ideal lens then keeps
    its colours regardless of the number of bins.

    Attributes:
        samples: list of :class:`SpectralSample`
    """

    def __init__(self, num_wvls=12, wvl_from=440.0, wvl_to=660.0,
                 wvl_center=550.0, white_balance=True, cs=cs_srgb):
        self.cs = cs
        if num_wvls == 1:
            wvls = np.array([wvl_center], dtype=float)
        else:
            wvls = np.linspace(wvl_from, wvl_to, num_wvls)
        rgb = cs.wvl_to_rgb(wvls)
        if white_balance:
            power = cs.rgb_to_power(wvls, np.ones(3))
            response = np.sum(power[:, np.newaxis]*rgb, axis=0)
            gain = np.zeros(3)
            nonzero = np.abs(response) > 1e-12
            gain[nonzero] = 1.0/response[nonzero]
            rgb = rgb*gain
        self.samples = [SpectralSample(float(w), c) for w, c in zip(wvls, rgb)]

    def __len__(self):
        return len(self.samples)

    def __getitem__(self, k):
        return self.samples[k]

    def __iter__(self):
        return iter(self.samples)

    @property
    def wvls(self):
        return [s.wvl for s in self.samples]

    def listobj_str(self):
        o_str = "wvl (nm)        r          g          b\n"
        for s in self.samples:
            o_str += f"{s.wvl:8.2f} {s.rgb[0]:10.4g} {s.rgb[1]:10.4g} " \
                     f"{s.rgb[2]:10.4g}\n"
        return o_str

    @classmethod
    def from_spec(cls, spec):
        return cls(num_wvls=spec.num_wvls, wvl_from=spec.wvl_from,
                   wvl_to=spec.wvl_to, wvl_center=spec.wvl_center,
                   white_balance=spec.white_balance)
