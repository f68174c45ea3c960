# -*- coding: utf-8 -*-
""" The **polyoptics** package renders images through a lens modeled as a
    truncated multivariate polynomial

    The lens transform is built from the following subpackages:

        - :mod:`~.poly`: truncated polynomials and systems of them, with
          composition, baking, truncation and interpolation
        - :mod:`~.elem`: transforms for the basic optical operations and the
          interfaces built on them
        - :mod:`~.seq`: lens prescriptions and material support
        - :mod:`~.parax`: first order focus and magnification

        - :mod:`opticalglass`: this package interfaces with glass manufacturer
          optical data

    The :mod:`~.render` subpackage turns the lens transform into a spectral
    Monte Carlo renderer, with gamut correction of the result. HDR image
    files are read and written by :mod:`~.hdrfile` and the
    ``polyoptics-render`` command is in :mod:`~.renderapp`.

    The :mod:`~.util` subpackage provides the wavelength to colour
    conversions.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = 'unknown'


def listobj(obj):
    """ Print wrapper function for listobj_str() method of `obj`.

    listobj() is designed to be used in scripting environments where detailed,
    textual output is supported. Classes may implement the `listobj_str`
    method that returns a string containing a formatted description of the
    object. Examples include :meth:`.PolySystem.listobj_str` and
    :meth:`.RenderSpec.listobj_str`.
    """
    try:
        print(obj.listobj_str())
    except AttributeError:
        print(repr(obj))
