#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Monte Carlo rendering of an image through a spectral lens transform

    The output image is accumulated one wavelength bin at a time. For each
    bin the wavelength is baked into the :class:`~.RenderSystem` and the
    input image is processed a row at a time:

        - the world y coordinate of the row is baked into the transform
        - each pixel's spectral power at the bin wavelength sets its sample
          count; every sample carries an equal share of the power
        - each sample gets a random aperture point and a jittered world x
          coordinate within the pixel footprint
        - the transform maps the samples to sensor positions and exit
          angles; the Lambertian falloff weighted rgb of the bin is splatted
          into the output

    All the samples of a row are evaluated as numpy arrays, in batches of at
    most :attr:`~.RenderSpec.batch_size` rays.

.. Created on Thu Oct 15 13:26:51 2026

.. codeauthor: Michael J. Hayford
"""
import logging

import numpy as np

import polyoptics.optical.model_constants as mc
from polyoptics.render.image import Image
from polyoptics.render.sampler import (sample_aperture, jitter,
                                       sample_counts, sample_batches)
from polyoptics.render.spectralsampling import SpectralSampling

logger = logging.getLogger(__name__)

# falloff assigned to samples whose angle term has no real square root
NAN_FALLOFF = 0.0


def lambertian_falloff(sin2):
    """ cosine falloff sqrt(1 - sin2), clipped to [0, 1]

    Where the polynomial overshoots and 1 - sin2 is negative the square
    root isn't a real number; those samples get :data:`NAN_FALLOFF`.
    """
    cos2 = 1.0 - np.asarray(sin2, dtype=float)
    with np.errstate(invalid='ignore'):
        falloff = np.sqrt(cos2)
    is_real = ~np.isnan(falloff)
    falloff = np.where(is_real, falloff, NAN_FALLOFF)
    return np.clip(falloff, 0.0, 1.0)


class MonteCarloRenderer:
    """ Render images through a :class:`~.RenderSystem`

    Attributes:
        render_system: the folded spectral transform and its focus data
        spec: the :class:`~.RenderSpec` in use
        rng: numpy random Generator, seeded from `spec.seed` by default
        sampling: the :class:`~.SpectralSampling` of the spectrum
    """

    def __init__(self, render_system, spec, rng=None, sampling=None):
        self.render_system = render_system
        self.spec = spec
        self.rng = np.random.default_rng(spec.seed) if rng is None else rng
        self.sampling = (SpectralSampling.from_spec(spec) if sampling is None
                         else sampling)

    def __repr__(self):
        return (f"{type(self).__name__}(degree={self.render_system.degree}, "
                f"bins={len(self.sampling)}, "
                f"sensor={self.spec.sensor_xres}x{self.spec.sensor_yres})")

    @property
    def magnification(self):
        return self.render_system.focus.m

    def render(self, img_in):
        """ render `img_in` and return the accumulated output image

        Args:
            img_in: an :class:`~.Image` or a (height, width, 3) array of
                    linear rgb radiance

        Raises:
            ValueError: if the input isn't 3 channel or has NaN or infinite
                        values
        """
        if not isinstance(img_in, Image):
            img_in = Image.from_array(img_in)
        if img_in.channels != 3:
            raise ValueError(f"input image has {img_in.channels} channels, "
                             f"expected 3")
        if not np.isfinite(img_in.data).all():
            raise ValueError("input image contains NaN or infinite values")

        img_out = Image(self.spec.sensor_xres, self.spec.sensor_yres)
        for k, sample in enumerate(self.sampling):
            logger.info("wavelength %d of %d: %.1fnm",
                        k + 1, len(self.sampling), sample.wvl)
            self.render_wavelength(img_in, sample, img_out)
        return img_out

    def bake_wavelength(self, wvl):
        """ the render system at `wvl` nm, re-truncated at working degree """
        system = self.render_system.system.bake_input_variable(mc.wvl_var,
                                                               wvl)
        return system.truncated(self.render_system.degree)

    def render_wavelength(self, img_in, sample, img_out):
        """ accumulate the contribution of one spectral bin into img_out """
        system = self.bake_wavelength(sample.wvl)
        for j in range(img_in.height):
            self.render_row(system, img_in, j, sample, img_out)

    def render_row(self, system, img_in, j, sample, img_out):
        """ accumulate row `j` of `img_in` at one wavelength into img_out

        Args:
            system: the render system with the wavelength baked in
            img_in: input :class:`~.Image`
            j: the input row
            sample: the :class:`~.SpectralSample` being rendered
            img_out: output :class:`~.Image`
        """
        spec = self.spec
        width, height = img_in.width, img_in.height
        m = self.magnification

        y_world = ((j - height//2)/width)*spec.sensor_width/m
        row_system = system.bake_input_variable(
            mc.entry_vars[mc.y_world], y_world)

        cols = np.arange(width)
        x_world = (cols/width - 0.5)*spec.sensor_width/m
        pixel_size = abs(spec.sensor_width/width/m)

        rgb = img_in.lookup(cols, np.full(width, j))
        power = self.sampling.cs.rgb_to_power(sample.wvl, rgb)
        counts, weights = sample_counts(power, spec.sample_mul)

        scaling = spec.sensor_scaling
        x_origin = spec.sensor_xres/2
        y_origin = spec.sensor_yres/2
        for pix in sample_batches(counts, spec.batch_size):
            n = len(pix)
            xw = x_world[pix] + jitter(self.rng, n, pixel_size)
            ap = sample_aperture(self.rng, n, spec.pupil_radius,
                                 max_tries=spec.max_aperture_tries)
            out = row_system.evaluate(np.column_stack((xw, ap)))

            px = out[:, mc.sensor_x]*scaling + x_origin
            py = out[:, mc.sensor_y]*scaling + y_origin
            falloff = lambertian_falloff(out[:, mc.sin2])
            values = (falloff*weights[pix])[:, np.newaxis]*sample.rgb
            img_out.splat(px, py, values)
