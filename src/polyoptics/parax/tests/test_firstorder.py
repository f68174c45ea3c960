#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for first order focus and magnification

.. Created on Sun Oct 18 10:48:02 2026

.. codeauthor: Michael J. Hayford
"""

import pytest
from pytest import approx

from polyoptics.poly.truncpoly import TruncPoly
from polyoptics.poly.polysystem import PolySystem
from polyoptics.elem.elements import propagate
from polyoptics.parax.firstorder import (compute_focus, find_focus_x,
                                         find_focus_y, get_magnification_x,
                                         get_magnification_y)
from polyoptics.parax.paraxerror import FocusError, ParaxError
from polyoptics.seq.prescription import LensPrescription, achromat_nt32_921
import polyoptics.optical.model_constants as mc


def paraxial_trace(y, u, surfaces):
    """ trace (height, angle) through [(radius, thi, n_after), ...] """
    n = 1.0
    for radius, thi, n_after in surfaces:
        u = (n*u - y*(n_after - n)/radius)/n_after
        y = y + thi*u
        n = n_after
    return y, u


@pytest.fixture
def singlet_data():
    d0 = 2000.0
    surfaces = [(40.0, 6.0, 1.6), (-80.0, 0.0, 1.0)]
    lens = LensPrescription(d0, [(40.0, 6.0, 1.6), (-80.0, 0.0, 'air')])
    return d0, surfaces, lens


def test_singlet_focus(singlet_data):
    d0, surfaces, lens = singlet_data
    system = lens.get_system(550.0, degree=3)

    # marginal ray from the axial object point
    y, u = paraxial_trace(1.0, 1.0/d0, surfaces)
    bfl = -y/u
    assert find_focus_x(system) == approx(bfl, rel=1e-9)
    assert find_focus_y(system) == approx(bfl, rel=1e-9)

    # chief ray through the vertex of the first surface
    y, u = paraxial_trace(0.0, -1.0/d0, surfaces)
    m = y + bfl*u
    fod = compute_focus(system, wvl=550.0)
    assert fod.bfl == approx(bfl, rel=1e-9)
    assert fod.m == approx(m, rel=1e-8)
    assert fod.wvl == 550.0

    focused = system >> propagate(fod.bfl, degree=3)
    assert get_magnification_x(focused) == approx(m, rel=1e-8)
    assert get_magnification_y(focused) == approx(m, rel=1e-8)
    assert focused.linear_coeff(mc.x, mc.x_ap) == approx(0.0, abs=1e-12)


def test_achromat_focus():
    lens = achromat_nt32_921()
    fod = compute_focus(lens.get_system(550.0, degree=3), wvl=550.0)
    assert fod.bfl == approx(111.0, abs=2.0)
    assert fod.m == approx(-120.0/lens.obj_dist, rel=0.05)
    o_str = fod.listobj_str()
    assert o_str.startswith("bfl")
    assert "wvl" in o_str


def test_afocal_system():
    nvars, degree = 4, 3
    xw, yw, xa, ya = [TruncPoly.variable(nvars, degree, i)
                      for i in range(nvars)]
    telescope = PolySystem([xa, ya, 0.01*xw, 0.01*yw],
                           var_names=mc.entry_vars)
    with pytest.raises(FocusError) as exc_info:
        compute_focus(telescope)
    assert exc_info.value.dir_coeff == 0.0
    assert isinstance(exc_info.value, ParaxError)


def test_zero_magnification():
    nvars, degree = 4, 3
    xw, yw, xa, ya = [TruncPoly.variable(nvars, degree, i)
                      for i in range(nvars)]
    system = PolySystem([xa, ya, -0.01*xa, -0.01*ya],
                        var_names=mc.entry_vars)
    with pytest.raises(FocusError):
        compute_focus(system)
