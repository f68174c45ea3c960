#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Optical interfaces making up a polynomial lens model

    The lens is a sequence of interfaces. Refracting interfaces carry the
    refractive indices on either side, evaluated at the wavelength the
    model is being built for; a new sequence is made for every
    wavelength. Interfaces are immutable.

.. Created on Sun Oct 11 15:37:12 2026

.. codeauthor: Michael J. Hayford
"""
import math

import attr

from polyoptics.elem import elements


class OpticalInterface:
    """ Base class for the elements of a polynomial lens model

    Subclasses implement :meth:`transform`, returning the
    :class:`~.PolySystem` for the interface at a given degree.
    """

    def transform(self, degree):
        raise NotImplementedError

    def listobj_str(self):
        o_str = f"{type(self).__name__}: "
        o_str += ", ".join(f"{a.name}={getattr(self, a.name)}"
                           for a in attr.fields(type(self)))
        return o_str + "\n"


@attr.s(frozen=True)
class TwoPlane(OpticalInterface):
    """ Planar boundary mapping world and aperture positions to a ray

    Attributes:
        obj_dist: distance from the world plane to the aperture plane
    """
    obj_dist = attr.ib()

    def transform(self, degree):
        return elements.two_plane(self.obj_dist, degree=degree)


@attr.s(frozen=True)
class PlanarSurface(OpticalInterface):
    """ Flat refracting interface """
    n_before = attr.ib()
    n_after = attr.ib()

    def transform(self, degree):
        return elements.refract_planar(self.n_before, self.n_after,
                                       degree=degree)


@attr.s(frozen=True)
class SphericalSurface(OpticalInterface):
    """ Spherical refracting interface

    Attributes:
        radius: radius of curvature, positive when the center of curvature
                follows the vertex
        n_before: refractive index preceding the interface
        n_after: refractive index following the interface
    """
    radius = attr.ib()
    n_before = attr.ib()
    n_after = attr.ib()

    @radius.validator
    def _check_radius(self, attribute, value):
        if value == 0.0:
            raise ValueError("a spherical surface needs a non-zero radius")

    @property
    def optical_power(self):
        if math.isinf(self.radius):
            return 0.0
        return (self.n_after - self.n_before)/self.radius

    def transform(self, degree):
        return elements.refract_spherical(self.radius, self.n_before,
                                          self.n_after, degree=degree)


@attr.s(frozen=True)
class Propagation(OpticalInterface):
    """ Homogeneous gap between two interfaces

    Attributes:
        distance: axial length of the gap
    """
    distance = attr.ib()

    def transform(self, degree):
        return elements.propagate(self.distance, degree=degree)
