#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for truncated polynomial arithmetic

.. Created on Sat Oct 17 09:40:12 2026

.. codeauthor: Michael J. Hayford
"""

import unittest
import pytest
from pytest import approx
import numpy as np
import numpy.testing as npt

from polyoptics.poly.truncpoly import TruncPoly, binom
from polyoptics.poly.polyerror import PolyDomainError, ShapeMismatchError


def variables(nvars, degree):
    return [TruncPoly.variable(nvars, degree, i) for i in range(nvars)]


class TruncPolyArithmeticTestCase(unittest.TestCase):
    def setUp(self):
        self.x, self.y = variables(2, 3)

    def test_constructor_drops_high_degree_and_zero_terms(self):
        p = TruncPoly(2, 2, {(0, 0): 1.0, (1, 0): 0.0, (2, 1): 5.0,
                             (1, 1): 2.0})
        assert p.terms == {(0, 0): 1.0, (1, 1): 2.0}

    def test_constructor_checks_exponent_length(self):
        with pytest.raises(ShapeMismatchError):
            TruncPoly(2, 3, {(1, 0, 0): 1.0})

    def test_add_sub(self):
        p = 1.0 + self.x + 2.0*self.y
        assert p.terms == {(0, 0): 1.0, (1, 0): 1.0, (0, 1): 2.0}
        q = p - self.x
        assert q.terms == {(0, 0): 1.0, (0, 1): 2.0}
        r = 3.0 - p
        assert r.terms == {(0, 0): 2.0, (1, 0): -1.0, (0, 1): -2.0}

    def test_mul(self):
        p = (self.x + self.y)*(self.x + self.y)
        assert p.terms == {(2, 0): 1.0, (1, 1): 2.0, (0, 2): 1.0}

    def test_mul_truncates(self):
        p = self.x*self.x*self.x*self.x
        assert p.terms == {}
        q = (1.0 + self.x)**5
        assert q.terms == {(0, 0): 1.0, (1, 0): 5.0, (2, 0): 10.0,
                           (3, 0): 10.0}

    def test_mixed_degrees_use_smaller(self):
        x2 = TruncPoly.variable(2, 2, 0)
        p = self.x + x2
        assert p.degree == 2
        q = (self.x*self.x*self.y)*(1.0 + x2)
        assert q.degree == 2
        assert q.terms == {}

    def test_scalar_division(self):
        p = (2.0 + 4.0*self.x)/2.0
        assert p.terms == {(0, 0): 1.0, (1, 0): 2.0}

    def test_accessors(self):
        p = 3.0 + 2.0*self.x - self.y + self.x*self.y*self.y
        assert p.const_term == 3.0
        assert p.linear_coeff(0) == 2.0
        assert p.linear_coeff(1) == -1.0
        assert p.total_degree == 3
        assert TruncPoly(2, 3).total_degree == 0


class TruncPolySeriesTestCase(unittest.TestCase):
    def setUp(self):
        self.x, self.y = variables(2, 4)
        self.p = 4.0 + self.x + 0.5*self.y*self.y - 0.25*self.x*self.y

    def test_binom(self):
        assert binom(0.5, 0) == 1.0
        assert binom(0.5, 1) == 0.5
        assert binom(0.5, 2) == approx(-0.125)
        assert binom(-1, 3) == approx(-1.0)

    def test_sqrt_squared(self):
        s = self.p.sqrt()
        assert s.const_term == approx(2.0)
        assert (s*s).allclose(self.p)

    def test_rsqrt(self):
        r = self.p.rsqrt()
        assert (r*r*self.p).allclose(TruncPoly.constant(2, 4, 1.0))

    def test_reciprocal(self):
        r = self.p.reciprocal()
        assert (r*self.p).allclose(TruncPoly.constant(2, 4, 1.0))
        assert (1.0/self.p).allclose(r)
        assert (self.x/self.p).allclose(self.x*r)

    def test_negative_integer_power_of_negative_constant(self):
        p = -2.0 + self.x
        r = p**-1
        assert (r*p).allclose(TruncPoly.constant(2, 4, 1.0))

    def test_domain_errors(self):
        with pytest.raises(PolyDomainError):
            self.x.sqrt()
        with pytest.raises(PolyDomainError):
            (self.x - 1.0).sqrt()
        with pytest.raises(PolyDomainError):
            self.y.reciprocal()

    def test_series_matches_function(self):
        pt = np.array([0.1, -0.2])
        npt.assert_allclose(self.p.sqrt().evaluate(pt),
                            np.sqrt(self.p.evaluate(pt)), rtol=1e-5)


class TruncPolySubstitutionTestCase(unittest.TestCase):
    def setUp(self):
        self.x, self.y = variables(2, 3)
        self.p = 1.0 + self.x + 2.0*self.y + self.x*self.y

    def test_bake(self):
        b = self.p.bake(0, 2.0)
        assert b.nvars == 1
        assert b.terms == {(0,): 3.0, (1,): 4.0}

    def test_extended(self):
        e = self.p.extended(3)
        assert e.nvars == 3
        assert e.terms == {(0, 0, 0): 1.0, (1, 0, 0): 1.0, (0, 1, 0): 2.0,
                           (1, 1, 0): 1.0}

    def test_substitute(self):
        q = self.x*self.y
        s = q.substitute([1.0 + self.x, self.y])
        assert s.terms == {(0, 1): 1.0, (1, 1): 1.0}

    def test_substitute_wrong_count(self):
        with pytest.raises(ShapeMismatchError):
            self.p.substitute([self.x])

    def test_evaluate(self):
        assert self.p.evaluate([1.0, 2.0]) == approx(8.0)
        pts = np.array([[0.0, 0.0], [1.0, 2.0], [-1.0, 1.0]])
        npt.assert_allclose(self.p.evaluate(pts), [1.0, 8.0, 1.0])

    def test_listobj_str(self):
        o_str = self.p.listobj_str(var_names=('u', 'v'))
        assert 'u*v' in o_str
        assert len(o_str.splitlines()) == 4
