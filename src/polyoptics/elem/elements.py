#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Polynomial transforms for the basic optical operations

    Each builder writes the exact ray trace for its operation using
    :class:`~.TruncPoly` arithmetic, so the result is the Taylor expansion
    of the real trace up to the requested degree.

    Rays are described at a reference plane perpendicular to the axis by
    their position (x, y) and the x, y components of the unit direction
    vector (dx, dy). Surfaces are referred to the plane through their
    vertex.

.. Created on Sun Oct 11 10:02:44 2026

.. codeauthor: Michael J. Hayford
"""
import math

from polyoptics.poly.truncpoly import TruncPoly
from polyoptics.poly.polysystem import PolySystem
import polyoptics.optical.model_constants as mc


def _input_vars(degree, nvars=4):
    return [TruncPoly.variable(nvars, degree, i) for i in range(nvars)]


def direction_z(dx, dy):
    """ return the z direction cosine, sqrt(1 - dx**2 - dy**2) """
    return (1.0 - dx*dx - dy*dy).sqrt()


def two_plane(obj_dist, degree=3):
    """ Map (world plane position, aperture position) to a ray

    The world plane is `obj_dist` in front of the aperture plane. The
    output ray starts at the aperture point, heading away from the world
    point.
    """
    xw, yw, xa, ya = _input_vars(degree)
    ux = xa - xw
    uy = ya - yw
    inv_len = (obj_dist*obj_dist + ux*ux + uy*uy).rsqrt()
    return PolySystem([xa, ya, ux*inv_len, uy*inv_len],
                      var_names=mc.entry_vars)


def propagate(distance, degree=3):
    """ Transfer a ray along the axis by `distance` in a homogeneous medium """
    x, y, dx, dy = _input_vars(degree)
    t = distance*direction_z(dx, dy).reciprocal()
    return PolySystem([x + t*dx, y + t*dy, dx, dy], var_names=mc.ray_vars)


def refract_planar(n_before, n_after, degree=3):
    """ Refraction at a flat interface; tangential n*direction is conserved """
    x, y, dx, dy = _input_vars(degree)
    k = n_before/n_after
    return PolySystem([x, y, k*dx, k*dy], var_names=mc.ray_vars)


def refract_spherical(radius, n_before, n_after, degree=3):
    """ Refraction at a spherical surface with its vertex at the origin

    The ray is intersected with the sphere, refracted by Snell's law in
    vector form and transferred back to the vertex plane. A positive
    radius has its center of curvature after the vertex.

    Raises:
        PolyDomainError: if the axial ray would be totally internally
                         reflected
    """
    if math.isinf(radius):
        return refract_planar(n_before, n_after, degree=degree)

    x, y, dx, dy = _input_vars(degree)
    dz = direction_z(dx, dy)

    # intersect with the sphere centered at (0, 0, radius). The near root
    # is c/q of the far root, which keeps the constant term away from zero.
    o_d = x*dx + y*dy - radius*dz
    r2 = x*x + y*y
    disc = o_d*o_d - r2
    t_far = -o_d + math.copysign(1.0, radius)*disc.sqrt()
    t = r2/t_far
    qx = x + t*dx
    qy = y + t*dy
    qz = t*dz

    # unit normal at the intersection, oriented along +z
    nx = -qx/radius
    ny = -qy/radius
    nz = 1.0 - qz/radius

    cos_i = dx*nx + dy*ny + dz*nz
    n_cos_ip = (n_after*n_after - n_before*n_before*(1.0 - cos_i*cos_i)).sqrt()
    alpha = n_cos_ip - n_before*cos_i
    dx_out = (n_before*dx + alpha*nx)/n_after
    dy_out = (n_before*dy + alpha*ny)/n_after
    dz_out = (n_before*dz + alpha*nz)/n_after

    # back to the vertex plane along the refracted direction
    s = qz/dz_out
    return PolySystem([qx - s*dx_out, qy - s*dy_out, dx_out, dy_out],
                      var_names=mc.ray_vars)
