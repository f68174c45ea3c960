#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Command line application rendering an image through the achromat

    Usage::

        polyoptics-render input.hdr output.hdr --samples 200 --seed 1

    The rendering constants start from the :class:`~.RenderSpec` defaults,
    are overridden by an optional JSON file given with ``--spec``, and then
    by the individual command line options.

.. Created on Fri Oct 16 11:37:50 2026

.. codeauthor: Michael J. Hayford
"""
import argparse
import logging
import sys

from opticalglass.glasserror import GlassNotFoundError

from polyoptics.hdrfile import read_hdr, write_hdr, HdrFileError
from polyoptics.parax.paraxerror import FocusError
from polyoptics.render.gamut import correct_gamut
from polyoptics.render.montecarlo import MonteCarloRenderer
from polyoptics.render.renderspec import RenderSpec, load_spec
from polyoptics.render.spectralsampling import SpectralSampling
from polyoptics.render.spectralsystem import prepare_render_system
from polyoptics.seq.prescription import achromat_nt32_921

logger = logging.getLogger(__name__)


def _resolution(value):
    try:
        w, h = value.lower().split('x')
        return int(w), int(h)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"resolution {value!r} isn't of the form WIDTHxHEIGHT") from None


def build_parser():
    parser = argparse.ArgumentParser(
        prog='polyoptics-render',
        description="Render an HDR image through a polynomial model of the "
                    "NT32-921 achromat.")
    parser.add_argument('input', help="input HDR image (.hdr, .pfm, .exr)")
    parser.add_argument('output', help="output HDR image")
    parser.add_argument('--spec', metavar='FILE',
                        help="JSON file with rendering constants")
    parser.add_argument('--degree', type=int,
                        help="polynomial degree of the lens model")
    parser.add_argument('--samples', type=float, dest='sample_mul',
                        help="samples per unit of spectral power")
    parser.add_argument('--pupil', type=float, dest='pupil_radius',
                        help="aperture radius in mm, 0 for a pinhole")
    parser.add_argument('--wavelengths', type=int, dest='num_wvls',
                        help="number of spectral bins")
    parser.add_argument('--resolution', type=_resolution,
                        help="output size, e.g. 1920x1080")
    parser.add_argument('--seed', type=int, help="random seed")
    parser.add_argument('--list', action='store_true',
                        help="print the lens, rendering constants and focus")
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help="more logging output, repeat for debug")
    return parser


def spec_from_args(args):
    """ build the RenderSpec from defaults, --spec file and options """
    spec = load_spec(args.spec) if args.spec else RenderSpec()
    spec.update(degree=args.degree, sample_mul=args.sample_mul,
                pupil_radius=args.pupil_radius, num_wvls=args.num_wvls,
                seed=args.seed)
    if args.resolution is not None:
        spec.update(sensor_xres=args.resolution[0],
                    sensor_yres=args.resolution[1])
    spec.validate()
    return spec


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging_level = (logging.WARNING, logging.INFO,
                     logging.DEBUG)[min(args.verbose, 2)]
    logging.basicConfig(level=logging_level,
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        spec = spec_from_args(args)
    except (OSError, ValueError, TypeError) as err:
        logger.error("invalid rendering constants: %s", err)
        return 2

    try:
        lens = achromat_nt32_921()
        render_system = prepare_render_system(lens, spec)
    except (GlassNotFoundError, FocusError) as err:
        logger.error("can't model the lens: %s", err)
        return 1

    if args.list:
        print(lens.listobj_str())
        print(spec.listobj_str())
        print(render_system.focus.listobj_str())
        print(SpectralSampling.from_spec(spec).listobj_str())

    try:
        img_in = read_hdr(args.input)
        renderer = MonteCarloRenderer(render_system, spec)
        img_out = renderer.render(img_in)
        correct_gamut(img_out, floor=spec.gamut_floor)
        write_hdr(args.output, img_out)
    except (HdrFileError, ValueError) as err:
        logger.error("%s", err)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
