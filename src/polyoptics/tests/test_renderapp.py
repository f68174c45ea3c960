#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for HDR file i/o and the polyoptics-render application

.. Created on Sun Oct 18 16:52:25 2026

.. codeauthor: Michael J. Hayford
"""

import pytest
import numpy as np
import numpy.testing as npt

from polyoptics.hdrfile import read_hdr, write_hdr, HdrFileError
from polyoptics.render.image import Image
from polyoptics.render.renderspec import RenderSpec, save_spec
from polyoptics.renderapp import main, build_parser, spec_from_args


@pytest.fixture
def hdr_image(tmp_path):
    rng = np.random.default_rng(8)
    data = rng.uniform(0.1, 4.0, size=(6, 8, 3)).astype(np.float32)
    data[0, 0] = [3.0, 0.5, 0.25]
    file_pth = tmp_path / 'scene.hdr'
    write_hdr(file_pth, data)
    return file_pth, data


def test_hdr_round_trip(hdr_image):
    file_pth, data = hdr_image
    img = read_hdr(file_pth)
    assert img.dtype == np.float32
    assert img.shape == (6, 8, 3)
    # rgbe keeps about 2 significant digits, relative to the largest channel
    npt.assert_allclose(img, data, rtol=0.02, atol=0.02)
    assert img[0, 0, 0] > img[0, 0, 1] > img[0, 0, 2]


def test_write_image_object(tmp_path):
    img = Image(4, 3)
    img.data[...] = 1.0
    file_pth = write_hdr(tmp_path / 'ones.hdr', img)
    npt.assert_allclose(read_hdr(file_pth), np.ones((3, 4, 3)), rtol=0.01)


def test_hdr_errors(tmp_path):
    with pytest.raises(HdrFileError):
        read_hdr(tmp_path / 'missing.hdr')
    junk = tmp_path / 'junk.hdr'
    junk.write_bytes(b'not an image')
    with pytest.raises(HdrFileError):
        read_hdr(junk)
    with pytest.raises(HdrFileError):
        write_hdr(tmp_path / 'grey.hdr', np.ones((3, 4)))
    with pytest.raises(HdrFileError):
        write_hdr(tmp_path / 'no_dir' / 'out.hdr', np.ones((3, 4, 3)))


def test_spec_from_args(tmp_path):
    spec_pth = save_spec(RenderSpec(degree=2, seed=5, num_wvls=3),
                         tmp_path / 'spec')
    args = build_parser().parse_args(
        ['in.hdr', 'out.hdr', '--spec', str(spec_pth), '--seed', '9',
         '--resolution', '64x48', '--pupil', '0'])
    spec = spec_from_args(args)
    assert spec.degree == 2
    assert spec.num_wvls == 3
    assert spec.seed == 9
    assert (spec.sensor_xres, spec.sensor_yres) == (64, 48)
    assert spec.pupil_radius == 0.0


def test_bad_resolution():
    with pytest.raises(SystemExit):
        build_parser().parse_args(['in.hdr', 'out.hdr', '--resolution', '64'])


def test_render(hdr_image, tmp_path):
    file_pth, data = hdr_image
    out_pth = tmp_path / 'render.hdr'
    status = main([str(file_pth), str(out_pth), '--resolution', '8x6',
                   '--samples', '20', '--wavelengths', '1', '--pupil', '0',
                   '--seed', '3'])
    assert status == 0
    img = read_hdr(out_pth)
    assert img.shape == (6, 8, 3)
    assert np.all(np.isfinite(img))
    assert img.max() > 0.0


def test_render_failures(hdr_image, tmp_path):
    file_pth, data = hdr_image
    assert main([str(tmp_path / 'missing.hdr'), str(tmp_path / 'out.hdr'),
                 '--resolution', '8x6', '--wavelengths', '1']) == 1
    assert main([str(file_pth), str(tmp_path / 'out.hdr'),
                 '--degree', '0']) == 2
