#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Gamut correction of spectrally accumulated images

    Monochromatic bins have negative rgb weights in some channels, so
    accumulated pixels can end up slightly negative. Clamping at zero
    bands visibly at the spectral edges; instead every channel is raised
    to a fraction of the pixel's largest channel.

.. Created on Thu Oct 15 16:40:22 2026

.. codeauthor: Michael J. Hayford
"""
import numpy as np

from polyoptics.render.image import Image


def correct_gamut(img, floor=0.02):
    """ raise every channel to at least `floor` times the pixel maximum

    A pixel whose channels are all negative is raised to zero. The image is
    modified in place and returned.

    Args:
        img: an :class:`~.Image` or a (height, width, channels) array
        floor: fraction of the largest channel
    """
    data = img.data if isinstance(img, Image) else img
    max_chnl = np.clip(np.max(data, axis=-1, keepdims=True), 0.0, None)
    np.maximum(data, floor*max_chnl, out=data)
    return img
