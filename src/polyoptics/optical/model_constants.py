#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" optical model constants

.. Created on Sat Oct 10 16:21:09 2026

.. codeauthor: Michael J. Hayford
"""

# ray data at a reference plane: position and direction cosines
x, y, dx, dy = range(4)
ray_vars = ('x', 'y', 'dx', 'dy')

# inputs of the two-plane entry mapping: world plane and aperture positions
x_world, y_world, x_ap, y_ap = range(4)
entry_vars = ('x_world', 'y_world', 'x_ap', 'y_ap')

# wavelength input added by spectral interpolation
wvl_var = 'lambda'

# outputs of the render system: sensor position, 1 - cos**2 of exit angle
sensor_x, sensor_y, sin2 = range(3)
