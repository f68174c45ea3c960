#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Container class for rendering constants

    The defaults reproduce the doublet rendering: a degree 3 model of the
    NT32-921 achromat at full aperture, 12 wavelength bins from 440 to
    660nm, rendered to a full frame 1920x1080 sensor.

    A spec can be saved to and restored from a JSON file::

        save_spec(spec, 'night.json')
        spec = load_spec('night.json')

    :func:`load_spec` also accepts a plain JSON object holding any subset
    of the attributes.

.. Created on Wed Oct 14 09:31:40 2026

.. codeauthor: Michael J. Hayford
"""
import json_tricks
from pathlib import Path


class RenderSpec:
    """ Container for the constants controlling a rendering

    Attributes:
        degree: working degree of the polynomial transforms
        sample_mul: Monte Carlo samples per unit of spectral power
        pupil_radius: radius of the sampled aperture, in mm
        num_wvls: number of spectral bins
        wvl_from: short end of the sampled spectrum, in nm
        wvl_to: long end of the sampled spectrum, in nm
        wvl_center: wavelength used when there's a single bin
        focus_wvl: wavelength the lens is focused at
        spectral_wvls: (short, long) wavelengths of the two lens models that
                       are interpolated across the spectrum
        sensor_width: physical width of the sensor, in mm
        sensor_xres: horizontal sensor resolution, in pixels
        sensor_yres: vertical sensor resolution, in pixels
        gamut_floor: fraction of a pixel's largest channel that all its
                     channels are raised to
        white_balance: if True, scale the bin weights so that a (1, 1, 1)
                       input renders to (1, 1, 1)
        seed: seed for the random generator, None for fresh entropy
        batch_size: maximum number of rays evaluated at once
        max_aperture_tries: cap on rejection sampling rounds for aperture
                            points
    """

    def __init__(self, **kwargs):
        self.degree = kwargs.get('degree', 3)
        self.sample_mul = kwargs.get('sample_mul', 1000.0)
        self.pupil_radius = kwargs.get('pupil_radius', 19.5)
        self.num_wvls = kwargs.get('num_wvls', 12)
        self.wvl_from = kwargs.get('wvl_from', 440.0)
        self.wvl_to = kwargs.get('wvl_to', 660.0)
        self.wvl_center = kwargs.get('wvl_center', 550.0)
        self.focus_wvl = kwargs.get('focus_wvl', 550.0)
        self.spectral_wvls = tuple(kwargs.get('spectral_wvls',
                                              (500.0, 600.0)))
        self.sensor_width = kwargs.get('sensor_width', 36.0)
        self.sensor_xres = kwargs.get('sensor_xres', 1920)
        self.sensor_yres = kwargs.get('sensor_yres', 1080)
        self.gamut_floor = kwargs.get('gamut_floor', 0.02)
        self.white_balance = kwargs.get('white_balance', True)
        self.seed = kwargs.get('seed', 0)
        self.batch_size = kwargs.get('batch_size', 1 << 20)
        self.max_aperture_tries = kwargs.get('max_aperture_tries', 64)
        unknown = set(kwargs) - set(vars(self))
        if unknown:
            raise TypeError(f"unknown RenderSpec attributes: "
                            f"{', '.join(sorted(unknown))}")

    def __repr__(self):
        args = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({args})"

    def __eq__(self, other):
        if not isinstance(other, RenderSpec):
            return NotImplemented
        return vars(self) == vars(other)

    def __json_encode__(self):
        attrs = dict(vars(self))
        attrs['spectral_wvls'] = list(self.spectral_wvls)
        return attrs

    def __json_decode__(self, **attrs):
        self.__init__(**attrs)

    def listobj_str(self):
        o_str = f"{type(self).__name__}:\n"
        for k, v in vars(self).items():
            o_str += f"{k}: {v}\n"
        return o_str

    @property
    def sensor_scaling(self):
        """ pixels per mm on the sensor """
        return self.sensor_xres/self.sensor_width

    def update(self, **kwargs):
        """ set the given attributes, ignoring None values """
        for k, v in kwargs.items():
            if v is None:
                continue
            if not hasattr(self, k):
                raise TypeError(f"unknown RenderSpec attribute: {k}")
            setattr(self, k, tuple(v) if k == 'spectral_wvls' else v)

    def validate(self):
        """ Validate the rendering constants.

        Raises:
            ValueError: if a constant is out of range
        """
        if self.degree < 1:
            raise ValueError(f"degree {self.degree} must be at least 1")
        if self.sample_mul < 0:
            raise ValueError(f"sample_mul {self.sample_mul} is negative")
        if self.pupil_radius < 0:
            raise ValueError(f"pupil_radius {self.pupil_radius} is negative")
        if self.num_wvls < 1:
            raise ValueError(f"num_wvls {self.num_wvls} must be at least 1")
        if self.num_wvls > 1 and not self.wvl_from < self.wvl_to:
            raise ValueError(f"empty spectral range [{self.wvl_from}, "
                             f"{self.wvl_to}]")
        if len(self.spectral_wvls) != 2 or \
           self.spectral_wvls[0] == self.spectral_wvls[1]:
            raise ValueError(f"spectral_wvls {self.spectral_wvls} must be "
                             f"two distinct wavelengths")
        if self.sensor_width <= 0:
            raise ValueError(f"sensor_width {self.sensor_width} must be "
                             f"positive")
        if self.sensor_xres < 1 or self.sensor_yres < 1:
            raise ValueError(f"sensor resolution {self.sensor_xres}x"
                             f"{self.sensor_yres} must be positive")
        if not 0 <= self.gamut_floor <= 1:
            raise ValueError(f"gamut_floor {self.gamut_floor} out of range "
                             f"[0, 1]")
        if self.batch_size < 1:
            raise ValueError(f"batch_size {self.batch_size} must be positive")
        if self.max_aperture_tries < 1:
            raise ValueError(f"max_aperture_tries {self.max_aperture_tries} "
                             f"must be positive")


def save_spec(spec, file_name):
    """Save a RenderSpec in a JSON file.

    Args:
        spec: the :class:`RenderSpec` to save
        file_name: str or Path
    """
    file_pth = Path(file_name).with_suffix('.json')
    if not file_pth.parent.exists():
        file_pth.parent.mkdir(parents=True)
    with open(file_pth, 'w') as f:
        json_tricks.dump(spec, f, indent=1, separators=(',', ':'),
                         allow_nan=True)
    return file_pth


def load_spec(file_name):
    """Restore a RenderSpec from a JSON file.

    The file may hold a saved :class:`RenderSpec` or a plain JSON object of
    attribute values; unlisted attributes take their defaults.
    """
    with open(file_name, 'r') as f:
        obj = json_tricks.loads(f.read())
    if isinstance(obj, RenderSpec):
        return obj
    if isinstance(obj, dict):
        return RenderSpec(**obj)
    raise ValueError(f"{file_name}: doesn't contain a RenderSpec")
