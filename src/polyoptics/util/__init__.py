""" package supplying utility functions for colour support

    The :mod:`~polyoptics.util` subpackage provides the conversions between
    wavelength, spectral power and linear rgb colour, :mod:`~.colour_system`,
    based on the CIE 1931 colour matching functions in ``cie-cmf.txt``.
"""
