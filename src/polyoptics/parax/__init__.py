""" Package for first order (paraxial) calculations

    The :mod:`~.parax` subpackage extracts first order properties from the
    degree-1 part of a polynomial transform:

        - Focus distance and magnification, :mod:`~.firstorder`
        - Exception classes for degenerate systems, :mod:`~.paraxerror`
"""
