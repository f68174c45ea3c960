#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Module building on :mod:`opticalglass` for polyoptics material support

.. Created on Mon Oct 12 09:14:50 2026

.. codeauthor: Michael J. Hayford
"""
import logging
import numbers

from opticalglass import glassfactory as gfact
from opticalglass import opticalmedium as om
from opticalglass import modelglass as mg
from opticalglass import glasserror

logger = logging.getLogger(__name__)


def decode_medium(*inputs, **kwargs) -> om.OpticalMedium:
    """ Input utility for parsing various forms of material input.

    The **inputs** can have several forms:

        - **refractive_index, v-number**: float -> :class:`opticalglass.modelglass.ModelGlass`
        - **refractive_index** only: float -> :class:`opticalglass.opticalmedium.ConstantIndex`
        - **glass_name, catalog_name** as 1 (comma separated) or 2 strings
        - an instance with a `rindex` attribute
        - **air**: str -> :class:`opticalglass.opticalmedium.Air`
        - blank -> defaults to :class:`opticalglass.opticalmedium.Air`

    A catalog glass that can't be found is an error; a lens built with a
    silently substituted material isn't the lens that was asked for.

    Raises:
        GlassNotFoundError: if the catalog glass isn't available
    """
    cat = kwargs.get('cat_list')
    if len(inputs) == 0:
        return om.Air()

    mat = None
    first = inputs[0]
    logger.debug("num inputs = %d, inputs[0] = %r, %s",
                 len(inputs), first, type(first))
    if isinstance(first, numbers.Number):
        if first == 1.0:
            mat = om.Air()
        elif len(inputs) == 1 or inputs[1] in ('', None):
            mat = om.ConstantIndex(first, f"n:{first:.3f}")
        else:
            mat = mg.ModelGlass(first, inputs[1], '')

    elif isinstance(first, str):
        names = [tkn.strip() for tkn in inputs
                 if isinstance(tkn, str) and len(tkn.strip()) > 0]
        if len(names) == 0 or (len(names) == 1 and names[0].upper() == 'AIR'):
            mat = om.Air()
        else:
            if len(names) == 2:
                name, cat = names
            elif cat is not None:
                name = names[0]
            else:
                name, cat = (s.strip() for s in names[0].split(','))
            try:
                mat = gfact.create_glass(name, cat)
            except glasserror.GlassNotFoundError as gerr:
                logger.error('%s glass data type %s not found',
                             gerr.catalog, gerr.name)
                raise

    # glass instance args. if they respond to `rindex`, they're in
    elif hasattr(first, 'rindex'):
        mat = first

    if mat is None:
        raise ValueError(f"can't interpret {inputs!r} as an optical medium")
    logger.debug("mat = %s, %s, %s", mat.name(), mat.catalog_name(),
                 type(mat))
    return mat


def get_index(medium, wvl) -> float:
    """ return the refractive index of `medium` at `wvl` nm """
    return float(medium.rindex(wvl))
