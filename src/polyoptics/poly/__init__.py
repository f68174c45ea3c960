""" Package for truncated multivariate polynomial algebra

    The :mod:`~.poly` subpackage provides the polynomial machinery that
    stands in for exact ray tracing. These include:

        - Truncated polynomials and their arithmetic, including power
          series for square roots and reciprocals, :mod:`~.truncpoly`
        - Systems of polynomials used as optical transforms, with
          composition, baking, truncation, interpolation and evaluation,
          :mod:`~.polysystem`
        - Exception classes for reporting misuse of the algebra,
          :mod:`~.polyerror`
"""

from polyoptics.poly.truncpoly import TruncPoly
from polyoptics.poly.polysystem import (PolySystem, compose, truncate,
                                        bake, lerp)
