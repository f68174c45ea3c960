#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Read and write high dynamic range rgb images

    Images are held in memory as float32 (height, width, 3) arrays of linear
    rgb radiance. Reading and writing goes through OpenCV, so any float
    format it supports can be used; Radiance ``.hdr`` and ``.pfm`` work out
    of the box, ``.exr`` needs the OPENCV_IO_ENABLE_OPENEXR environment
    variable set before cv2 is imported.

.. Created on Fri Oct 16 09:12:44 2026

.. codeauthor: Michael J. Hayford
"""
import logging
from pathlib import Path

import cv2
import numpy as np

from polyoptics.render.image import Image

logger = logging.getLogger(__name__)


class HdrFileError(Exception):
    """ Exception raised when an image can't be read or written """
    def __init__(self, file_name, reason):
        super().__init__(f"{file_name}: {reason}")
        self.file_name = file_name
        self.reason = reason


def read_hdr(file_name):
    """ read an image file, returning a float32 (height, width, 3) array

    Grey images are expanded to 3 channels and an alpha channel is
    dropped.

    Raises:
        HdrFileError: if the file is missing or can't be decoded
    """
    file_pth = Path(file_name)
    if not file_pth.is_file():
        raise HdrFileError(file_name, "file not found")
    img = cv2.imread(str(file_pth), cv2.IMREAD_UNCHANGED)
    if img is None:
        raise HdrFileError(file_name, "unsupported or corrupt image")

    if img.ndim == 2:
        img = np.stack((img,)*3, axis=-1)
    elif img.shape[2] == 4:
        img = cv2.cvtColor(img, cv2.COLOR_BGRA2RGB)
    else:
        img = cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
    img = img.astype(np.float32)
    logger.info("read %s: %dx%d", file_pth, img.shape[1], img.shape[0])
    return img


def write_hdr(file_name, img):
    """ write a (height, width, 3) rgb array to `file_name`

    The format follows the file extension.

    Raises:
        HdrFileError: if OpenCV can't write the file
    """
    if isinstance(img, Image):
        img = img.data
    data = np.asarray(img, dtype=np.float32)
    if data.ndim != 3 or data.shape[2] != 3:
        raise HdrFileError(file_name, f"expected a 3 channel image, "
                                      f"got shape {data.shape}")
    bgr = cv2.cvtColor(np.ascontiguousarray(data), cv2.COLOR_RGB2BGR)
    try:
        ok = cv2.imwrite(str(file_name), bgr)
    except cv2.error as err:
        raise HdrFileError(file_name, str(err)) from err
    if not ok:
        raise HdrFileError(file_name, "OpenCV failed to write the image")
    logger.info("wrote %s: %dx%d", file_name, data.shape[1], data.shape[0])
    return file_name
