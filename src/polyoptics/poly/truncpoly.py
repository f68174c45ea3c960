#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Multivariate polynomials truncated at a maximum total degree

    A :class:`TruncPoly` behaves like a truncated Taylor expansion in
    several variables. Products drop every term whose total degree exceeds
    the truncation degree, and analytic functions of a polynomial (square
    root, reciprocal) are evaluated as power series about its constant
    term. This makes it possible to write ordinary ray tracing formulas and
    get back the polynomial approximation of the whole computation.

.. Created on Sat Oct 10 09:40:02 2026

.. codeauthor: Michael J. Hayford
"""
import numpy as np

from polyoptics.poly.polyerror import (ShapeMismatchError, PolyDomainError)


def _add_exps(e1, e2):
    return tuple(a + b for a, b in zip(e1, e2))


def _mul_terms(terms1, terms2, degree):
    """ multiply two term dicts, discarding terms above `degree` """
    items2 = [(e2, c2, sum(e2)) for e2, c2 in terms2.items()]
    result = {}
    for e1, c1 in terms1.items():
        d1 = sum(e1)
        for e2, c2, d2 in items2:
            if d1 + d2 > degree:
                continue
            e = _add_exps(e1, e2)
            result[e] = result.get(e, 0.0) + c1*c2
    return result


def binom(alpha, k):
    """ generalized binomial coefficient, alpha over k """
    b = 1.0
    for i in range(k):
        b *= (alpha - i)/(i + 1)
    return b


class TruncPoly:
    """ Polynomial in `nvars` variables, truncated at total degree `degree`

    Arithmetic between polynomials of different truncation degrees yields
    the smaller degree; the terms above it aren't known for the lower
    degree operand. Instances are treated as immutable: every operation
    returns a new polynomial.

    Attributes:
        nvars: the number of input variables
        degree: the maximum total degree retained
        terms: dict mapping exponent tuples to (non-zero) coefficients
    """

    def __init__(self, nvars, degree, terms=None):
        self.nvars = nvars
        self.degree = degree
        self.terms = {}
        if terms:
            for exps, c in terms.items():
                if len(exps) != nvars:
                    raise ShapeMismatchError(
                        f"exponent {exps} doesn't match {nvars} variables",
                        expected=nvars, found=len(exps))
                if sum(exps) <= degree and c != 0.0:
                    self.terms[tuple(exps)] = float(c)

    @classmethod
    def constant(cls, nvars, degree, value):
        return cls(nvars, degree, {(0,)*nvars: value})

    @classmethod
    def variable(cls, nvars, degree, index, value=0.0):
        """ the polynomial `value + x_index` """
        exps = [0]*nvars
        exps[index] = 1
        return cls(nvars, degree, {(0,)*nvars: value, tuple(exps): 1.0})

    def __repr__(self):
        return (f"{type(self).__name__}(nvars={self.nvars}, "
                f"degree={self.degree}, terms={self.terms!r})")

    def listobj_str(self, var_names=None):
        if var_names is None:
            var_names = [f"x{i}" for i in range(self.nvars)]
        o_str = ""
        for exps, c in sorted(self.terms.items(),
                              key=lambda t: (sum(t[0]), t[0][::-1])):
            mono = "*".join(f"{v}^{e}" if e > 1 else v
                            for v, e in zip(var_names, exps) if e > 0)
            o_str += f"{c:+14.6g} {mono}\n"
        return o_str

    @property
    def const_term(self):
        return self.terms.get((0,)*self.nvars, 0.0)

    @property
    def total_degree(self):
        """ the highest total degree of any non-zero term """
        return max((sum(e) for e in self.terms), default=0)

    def linear_coeff(self, index):
        """ return the degree-1 coefficient of variable `index` """
        exps = [0]*self.nvars
        exps[index] = 1
        return self.terms.get(tuple(exps), 0.0)

    def truncated(self, degree):
        """ return a copy with the truncation degree set to `degree` """
        return TruncPoly(self.nvars, degree, self.terms)

    def _coerce(self, other):
        if isinstance(other, TruncPoly):
            if other.nvars != self.nvars:
                raise ShapeMismatchError(
                    "polynomials have different numbers of variables",
                    expected=self.nvars, found=other.nvars)
            return other
        return TruncPoly.constant(self.nvars, self.degree, other)

    def __add__(self, other):
        other = self._coerce(other)
        terms = dict(self.terms)
        for e, c in other.terms.items():
            terms[e] = terms.get(e, 0.0) + c
        return TruncPoly(self.nvars, min(self.degree, other.degree), terms)

    __radd__ = __add__

    def __neg__(self):
        return TruncPoly(self.nvars, self.degree,
                         {e: -c for e, c in self.terms.items()})

    def __pos__(self):
        return self

    def __sub__(self, other):
        return self + (-self._coerce(other))

    def __rsub__(self, other):
        return (-self) + other

    def __mul__(self, other):
        if isinstance(other, TruncPoly):
            other = self._coerce(other)
            degree = min(self.degree, other.degree)
            return TruncPoly(self.nvars, degree,
                             _mul_terms(self.terms, other.terms, degree))
        return TruncPoly(self.nvars, self.degree,
                         {e: c*other for e, c in self.terms.items()})

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, TruncPoly):
            return self * other.reciprocal()
        return self * (1.0/other)

    def __rtruediv__(self, other):
        return self.reciprocal() * other

    def __pow__(self, n):
        if not isinstance(n, int) or n < 0:
            return self.power_series(n)
        result = TruncPoly.constant(self.nvars, self.degree, 1.0)
        base = self
        while n:
            if n & 1:
                result = result * base
            n >>= 1
            if n:
                base = base * base
        return result

    def power_series(self, alpha):
        """ return self**alpha expanded about the constant term

        With c0 the constant term and h = self - c0::

            (c0 + h)**alpha = c0**alpha * sum_k binom(alpha, k) * (h/c0)**k

        h has no constant term, so its powers vanish beyond the truncation
        degree and the series is exact to that degree.

        Raises:
            PolyDomainError: if c0 is zero, or negative for non-integer
                             alpha
        """
        c0 = self.const_term
        if c0 == 0.0 or (c0 < 0.0 and alpha != int(alpha)):
            raise PolyDomainError(f"power {alpha}", c0)
        u = (self - c0) * (1.0/c0)
        result = TruncPoly.constant(self.nvars, self.degree, 1.0)
        u_k = result
        for k in range(1, self.degree + 1):
            u_k = u_k * u
            if not u_k.terms:
                break
            result = result + binom(alpha, k)*u_k
        return result * (c0**alpha)

    def sqrt(self):
        return self.power_series(0.5)

    def rsqrt(self):
        """ return 1/sqrt(self) """
        return self.power_series(-0.5)

    def reciprocal(self):
        return self.power_series(-1)

    def bake(self, index, value):
        """ substitute `value` for variable `index`, dropping the variable """
        terms = {}
        for exps, c in self.terms.items():
            e = exps[:index] + exps[index+1:]
            terms[e] = terms.get(e, 0.0) + c*value**exps[index]
        return TruncPoly(self.nvars - 1, self.degree, terms)

    def extended(self, nvars):
        """ return a copy defined over `nvars` variables, new ones last """
        pad = (0,)*(nvars - self.nvars)
        return TruncPoly(nvars, self.degree,
                         {e + pad: c for e, c in self.terms.items()})

    def substitute(self, polys):
        """ return self evaluated with polys[i] substituted for variable i

        All of the `polys` must share the same variables; the result is
        defined over those variables and truncated at the smallest degree
        involved.
        """
        if len(polys) != self.nvars:
            raise ShapeMismatchError("substitution needs one polynomial per "
                                     "variable",
                                     expected=self.nvars, found=len(polys))
        degree = min([self.degree] + [p.degree for p in polys])
        nvars = polys[0].nvars
        one = TruncPoly.constant(nvars, degree, 1.0)
        powers = [[one, p.truncated(degree)] for p in polys]
        terms = {}
        for exps, c in self.terms.items():
            mono = one
            for i, e in enumerate(exps):
                if e == 0:
                    continue
                pw = powers[i]
                while len(pw) <= e:
                    pw.append(pw[-1]*pw[1])
                mono = mono*pw[e]
            for e, cm in mono.terms.items():
                terms[e] = terms.get(e, 0.0) + c*cm
        return TruncPoly(nvars, degree, terms)

    def exponent_array(self):
        """ return the exponents as an int array and matching coefficients """
        if not self.terms:
            return (np.zeros((0, self.nvars), dtype=int), np.zeros(0))
        exps, coefs = zip(*self.terms.items())
        return np.array(exps, dtype=int), np.array(coefs)

    def evaluate(self, x):
        """ evaluate at a point, or at each row of an (N, nvars) array """
        x = np.asarray(x, dtype=float)
        exps, coefs = self.exponent_array()
        monomials = np.prod(x[..., np.newaxis, :]**exps, axis=-1)
        return monomials @ coefs

    def allclose(self, other, rtol=1e-9, atol=1e-12):
        """ True if all coefficients of self and other agree """
        keys = set(self.terms) | set(other.terms)
        return all(np.isclose(self.terms.get(k, 0.0), other.terms.get(k, 0.0),
                              rtol=rtol, atol=atol) for k in keys)
