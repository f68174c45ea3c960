#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Systems of truncated polynomials used as optical transforms

    A :class:`PolySystem` maps an input vector of ray/scene parameters to an
    output vector of ray/sensor parameters. Each output is a
    :class:`~.TruncPoly` in the named input variables.

    Sequential composition models the physical succession of optical
    elements: the outputs of the first system feed the inputs of the
    second::

        system = compose(two_plane(d0, 3), propagate(d1, 3))
        system = two_plane(d0, 3) >> propagate(d1, 3)

    The other operations needed to build and use a lens transform are:

        - :meth:`~.PolySystem.bake_input_variable`: substitute a fixed value
          for one input, reducing the input count by one
        - :meth:`~.PolySystem.truncated`: change the truncation degree
        - :meth:`~.PolySystem.lerp_with`: linear interpolation between two
          systems, adding the control value as a new input variable
        - :meth:`~.PolySystem.drop_equation`: remove one output
        - :meth:`~.PolySystem.evaluate`: numeric evaluation, vectorized over
          many input points

    None of the operations modify the operands.

.. Created on Sat Oct 10 14:05:47 2026

.. codeauthor: Michael J. Hayford
"""
import numpy as np

from polyoptics.poly.truncpoly import TruncPoly
from polyoptics.poly.polyerror import DegreeMismatchError, ShapeMismatchError


class PolySystem:
    """ A vector of truncated polynomials over a common set of inputs

    Attributes:
        equations: tuple of :class:`~.TruncPoly`, one per output
        var_names: tuple of input variable names
    """

    def __init__(self, equations, var_names=None):
        self.equations = tuple(equations)
        if len(self.equations) == 0:
            raise ShapeMismatchError("a PolySystem needs at least one "
                                     "equation")
        nvars = self.equations[0].nvars
        for eq in self.equations:
            if eq.nvars != nvars:
                raise ShapeMismatchError("equations have different numbers "
                                         "of variables",
                                         expected=nvars, found=eq.nvars)
        if var_names is None:
            var_names = [f"x{i}" for i in range(nvars)]
        if len(var_names) != nvars:
            raise ShapeMismatchError("wrong number of variable names",
                                     expected=nvars, found=len(var_names))
        self.var_names = tuple(var_names)
        self._compiled = None

    @classmethod
    def identity(cls, nvars, degree, var_names=None):
        return cls([TruncPoly.variable(nvars, degree, i)
                    for i in range(nvars)], var_names=var_names)

    def __repr__(self):
        return (f"{type(self).__name__}(nvars={self.nvars}, "
                f"neqs={self.neqs}, degree={self.degree}, "
                f"var_names={self.var_names!r})")

    def listobj_str(self):
        o_str = f"{self.nvars} inputs {self.var_names}, " \
                f"{self.neqs} outputs, degree {self.degree}\n"
        for i, eq in enumerate(self.equations):
            o_str += f"out[{i}]:\n"
            o_str += eq.listobj_str(var_names=self.var_names)
        return o_str

    def __len__(self):
        return len(self.equations)

    def __getitem__(self, k):
        return self.equations[k]

    def __iter__(self):
        return iter(self.equations)

    def __rshift__(self, other):
        return compose(self, other)

    @property
    def nvars(self):
        return self.equations[0].nvars

    @property
    def neqs(self):
        return len(self.equations)

    @property
    def degree(self):
        """ the truncation degree, the largest of the equations' degrees """
        return max(eq.degree for eq in self.equations)

    def var_index(self, var):
        """ accept either a variable index or name and return the index """
        if isinstance(var, str):
            try:
                return self.var_names.index(var)
            except ValueError:
                raise KeyError(f"unknown input variable {var!r}, "
                               f"expected one of {self.var_names}") from None
        if not -self.nvars <= var < self.nvars:
            raise IndexError(f"input variable {var} out of range for "
                             f"{self.nvars} variables")
        return var % self.nvars

    def linear_coeff(self, eq, var):
        """ degree-1 coefficient of input `var` in output `eq` """
        return self.equations[eq].linear_coeff(self.var_index(var))

    def compose(self, other):
        """ return the system applying `self` then `other` """
        if self.degree != other.degree:
            raise DegreeMismatchError(self.degree, other.degree)
        if other.nvars != self.neqs:
            raise ShapeMismatchError("outputs don't match the inputs of the "
                                     "following system",
                                     expected=other.nvars, found=self.neqs)
        eqs = [eq.substitute(self.equations) for eq in other.equations]
        return PolySystem(eqs, var_names=self.var_names)

    def bake_input_variable(self, var, value):
        """ substitute `value` for input `var`, removing that input """
        idx = self.var_index(var)
        if self.nvars == 1:
            raise ShapeMismatchError("can't bake the only input variable")
        names = self.var_names[:idx] + self.var_names[idx+1:]
        return PolySystem([eq.bake(idx, value) for eq in self.equations],
                          var_names=names)

    def truncated(self, degree):
        return PolySystem([eq.truncated(degree) for eq in self.equations],
                          var_names=self.var_names)

    def with_equation(self, k, poly):
        """ return a copy with output `k` replaced by `poly` """
        eqs = list(self.equations)
        eqs[k] = poly
        return PolySystem(eqs, var_names=self.var_names)

    def drop_equation(self, k):
        if self.neqs == 1:
            raise ShapeMismatchError("can't drop the only equation")
        eqs = list(self.equations)
        del eqs[k]
        return PolySystem(eqs, var_names=self.var_names)

    def lerp_with(self, other, x0, x1, var_name='lambda'):
        """ linear interpolation between self (at x0) and other (at x1)

        The control value becomes a new, last, input variable `var_name`::

            result = self + (t - x0)/(x1 - x0) * (other - self)

        The control variable enters linearly, so the truncation degree of
        the result is one more than the operands'. Re-truncate after baking
        the control value to get back to the original degree.
        """
        if self.degree != other.degree:
            raise DegreeMismatchError(self.degree, other.degree)
        if self.nvars != other.nvars or self.neqs != other.neqs:
            raise ShapeMismatchError("interpolated systems must have the "
                                     "same shape",
                                     expected=(self.nvars, self.neqs),
                                     found=(other.nvars, other.neqs))
        if x1 == x0:
            raise ValueError("interpolation end points must be distinct")
        nvars = self.nvars + 1
        degree = self.degree + 1
        t = TruncPoly.variable(nvars, degree, nvars - 1, value=-x0)
        t = t*(1.0/(x1 - x0))
        eqs = []
        for a, b in zip(self.equations, other.equations):
            a = a.extended(nvars).truncated(degree)
            b = b.extended(nvars).truncated(degree)
            eqs.append(a + t*(b - a))
        return PolySystem(eqs, var_names=self.var_names + (var_name,))

    def _compile(self):
        """ build the exponent and coefficient arrays used by evaluate() """
        if self._compiled is None:
            exps = sorted({e for eq in self.equations for e in eq.terms})
            index = {e: i for i, e in enumerate(exps)}
            coefs = np.zeros((self.neqs, len(exps)))
            for k, eq in enumerate(self.equations):
                for e, c in eq.terms.items():
                    coefs[k, index[e]] = c
            exps = np.array(exps, dtype=int).reshape(len(exps), self.nvars)
            self._compiled = exps, coefs
        return self._compiled

    def evaluate(self, x):
        """ evaluate the system

        Args:
            x: a point with `nvars` components, or an (N, nvars) array

        Returns:
            an array of `neqs` outputs, or an (N, neqs) array
        """
        x = np.asarray(x, dtype=float)
        if x.shape[-1] != self.nvars:
            raise ShapeMismatchError("wrong number of input values",
                                     expected=self.nvars, found=x.shape[-1])
        exps, coefs = self._compile()
        monomials = np.prod(x[..., np.newaxis, :]**exps, axis=-1)
        return monomials @ coefs.T


def compose(a, b):
    """ return the system applying `a` then `b` """
    return a.compose(b)


def truncate(system, degree):
    """ return `system` truncated at `degree` """
    return system.truncated(degree)


def bake(system, var, value):
    """ return `system` with input `var` fixed at `value` """
    return system.bake_input_variable(var, value)


def lerp(a, b, x0, x1, var_name='lambda'):
    """ interpolate between `a` at `x0` and `b` at `x1` """
    return a.lerp_with(b, x0, x1, var_name=var_name)
