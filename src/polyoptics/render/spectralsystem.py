#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Build the wavelength dependent transform used for rendering

    The lens is traced at two wavelengths, both focused at the distance
    found for the focus wavelength. The two transforms are interpolated
    linearly in wavelength, giving a single transform with the wavelength
    as a 5th input. Finally the two direction outputs are folded into the
    single quantity the renderer needs::

        sin2 = dx**2 + dy**2 = 1 - cos**2(exit angle)

    The resulting :class:`RenderSystem` maps (x_world, y_world, x_ap, y_ap,
    lambda) to (x, y, sin2) on the sensor.

.. Created on Thu Oct 15 10:17:05 2026

.. codeauthor: Michael J. Hayford
"""
import logging
from collections import namedtuple

import polyoptics.optical.model_constants as mc
from polyoptics.elem.elements import propagate
from polyoptics.parax.firstorder import compute_focus

logger = logging.getLogger(__name__)

RenderSystem = namedtuple('RenderSystem', ['system', 'focus', 'degree'])
RenderSystem.system.__doc__ = "5 input, 3 output spectral transform"
RenderSystem.focus.__doc__ = ":class:`~.FocusData` at the focus wavelength"
RenderSystem.degree.__doc__ = "working truncation degree"


def focused_system(prescription, wvl, degree, focus_dist):
    """ transform of `prescription` at `wvl`, transferred to `focus_dist` """
    system = prescription.get_system(wvl, degree=degree)
    return system >> propagate(focus_dist, degree=degree)


def spectral_system(prescription, degree, focus_dist,
                    wvl_center=500.0, wvl_right=600.0):
    """ interpolate the focused transforms at two wavelengths

    The wavelength becomes the last input, `lambda`, in nm. It enters
    linearly, so the result has truncation degree `degree` + 1. The end
    points are the actual sample wavelengths, so baking `wvl_center` or
    `wvl_right` reproduces the focused transform at that wavelength and the
    dispersion slope is the difference over (wvl_right - wvl_center) nm.
    """
    sys_center = focused_system(prescription, wvl_center, degree, focus_dist)
    sys_right = focused_system(prescription, wvl_right, degree, focus_dist)
    return sys_center.lerp_with(sys_right, wvl_center, wvl_right,
                                var_name=mc.wvl_var)


def fold_angle_terms(system, degree):
    """ replace (dx, dy) by dx**2 + dy**2, truncated at `degree` """
    dx = system[mc.dx]
    dy = system[mc.dy]
    sin2 = (dx*dx + dy*dy).truncated(degree)
    return system.with_equation(mc.sin2, sin2).drop_equation(mc.dy)


def prepare_render_system(prescription, spec):
    """ focus the lens and build the folded spectral transform

    Args:
        prescription: a :class:`~.LensPrescription`
        spec: a :class:`~.RenderSpec`

    Returns:
        :class:`RenderSystem`

    Raises:
        FocusError: if the lens has no usable first order focus
    """
    degree = spec.degree
    base = prescription.get_system(spec.focus_wvl, degree=degree)
    focus = compute_focus(base, wvl=spec.focus_wvl)
    logger.info("focus at %.1fnm: bfl %.6g, magnification %.6g",
                spec.focus_wvl, focus.bfl, focus.m)

    wvl_center, wvl_right = spec.spectral_wvls
    system = spectral_system(prescription, degree, focus.bfl,
                             wvl_center=wvl_center, wvl_right=wvl_right)
    system = fold_angle_terms(system, degree)
    logger.debug("render system: %r", system)
    return RenderSystem(system, focus, degree)
