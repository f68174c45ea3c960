#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" First order properties from the degree-1 part of a transform

    The degree-1 coefficients of a lens transform are its paraxial, matrix
    optics, description. Focus and magnification are first order concepts,
    so only these coefficients are used here.

    For the x section, with (x_world, y_world, x_ap, y_ap) inputs and
    (x, y, dx, dy) outputs, a paraxial transfer by d gives::

        x' = x + d*dx

    Best focus makes x' independent of the aperture coordinate::

        d = -(dx/dx_ap of x) / (d/dx_ap of dx)

.. Created on Tue Oct 13 10:27:55 2026

.. codeauthor: Michael J. Hayford
"""
import math

import polyoptics.optical.model_constants as mc
from polyoptics.elem.elements import propagate
from polyoptics.parax.paraxerror import FocusError


class FocusData:
    """ Container class for the first order focus of a transform

    Attributes:
        bfl: distance from the last vertex plane to best focus
        m: transverse magnification at best focus
        wvl: wavelength, in nm, the focus was determined at
    """

    def __init__(self, bfl, m, wvl=None):
        self.bfl = bfl
        self.m = m
        self.wvl = wvl

    def __repr__(self):
        return f"{type(self).__name__}(bfl={self.bfl!r}, m={self.m!r}, " \
               f"wvl={self.wvl!r})"

    def listobj_str(self):
        o_str = f"bfl        {self.bfl:12.6g}\n"
        o_str += f"m          {self.m:12.6g}\n"
        if self.wvl is not None:
            o_str += f"wvl        {self.wvl:12.6g}\n"
        return o_str


def _find_focus(system, pos_eq, dir_eq, ap_var):
    a = system.linear_coeff(pos_eq, ap_var)
    b = system.linear_coeff(dir_eq, ap_var)
    if b == 0.0:
        raise FocusError("degree-1 block is afocal; the aperture coordinate "
                         "doesn't change the ray direction", a, b)
    d = -a/b
    if not math.isfinite(d):
        raise FocusError("focus distance isn't finite", a, b)
    return d


def find_focus_x(system):
    """ return the back focal distance of `system` in the x section

    Raises:
        FocusError: if the degree-1 block is degenerate
    """
    return _find_focus(system, mc.x, mc.dx, mc.x_ap)


def find_focus_y(system):
    """ return the back focal distance of `system` in the y section

    Raises:
        FocusError: if the degree-1 block is degenerate
    """
    return _find_focus(system, mc.y, mc.dy, mc.y_ap)


def get_magnification_x(system):
    """ ratio of output to input x position, for a focused system """
    return system.linear_coeff(mc.x, mc.x_world)


def get_magnification_y(system):
    """ ratio of output to input y position, for a focused system """
    return system.linear_coeff(mc.y, mc.y_world)


def compute_focus(system, wvl=None):
    """ find best focus and the magnification there

    Args:
        system: an unfocused (world, aperture) -> ray transform
        wvl: optional wavelength label for the result

    Returns:
        :class:`FocusData`
    """
    bfl = find_focus_x(system)
    m = get_magnification_x(system >> propagate(bfl, degree=system.degree))
    if m == 0.0:
        raise FocusError("magnification at best focus is zero")
    return FocusData(bfl, m, wvl=wvl)
