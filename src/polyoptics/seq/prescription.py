#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Lens prescription and the optical system builder

    A :class:`LensPrescription` holds the design data of a lens: the object
    distance, and for each refracting surface its radius, the thickness of
    the following gap and the medium filling it. :meth:`~.LensPrescription.get_system`
    turns it into the polynomial transform for one wavelength::

        lens = achromat_nt32_921()
        system = lens.get_system(550.0, degree=3)

.. Created on Mon Oct 12 11:48:26 2026

.. codeauthor: Michael J. Hayford
"""
import logging
import math

from opticalglass import opticalmedium as om

from polyoptics.elem.interface import (TwoPlane, SphericalSurface,
                                       PlanarSurface, Propagation)
from polyoptics.poly.polysystem import compose
from polyoptics.seq.medium import decode_medium, get_index

logger = logging.getLogger(__name__)


class LensPrescription:
    """ Design data of a lens built from spherical and flat surfaces

    Attributes:
        obj_dist: distance from the world plane to the first vertex
        surfaces: list of (radius, thickness, medium) tuples. `medium`
                  follows the surface and `thickness` is the gap to the next
                  surface; the thickness after the last surface isn't used
        obj_medium: medium in object space
        title: a short description of the lens
    """

    def __init__(self, obj_dist, surfaces, obj_medium=None, title=''):
        if len(surfaces) == 0:
            raise ValueError("a lens prescription needs at least one surface")
        self.obj_dist = obj_dist
        self.obj_medium = (om.Air() if obj_medium is None
                           else decode_medium(obj_medium))
        self.surfaces = []
        for radius, thi, med in surfaces:
            if not hasattr(med, 'rindex'):
                med = decode_medium(*med) if isinstance(med, tuple) \
                    else decode_medium(med)
            self.surfaces.append((radius, thi, med))
        self.title = title

    def __repr__(self):
        return (f"{type(self).__name__}(obj_dist={self.obj_dist!r}, "
                f"surfaces={self.surfaces!r})")

    def listobj_str(self):
        o_str = f"{self.title}\n" if self.title else ""
        o_str += f"obj dist {self.obj_dist:14.6g}   " \
                 f"{self.obj_medium.name()}\n"
        for i, (radius, thi, med) in enumerate(self.surfaces):
            o_str += f"{i+1:3d}: r={radius:12.5g}  t={thi:10.5g}  " \
                     f"{med.name()}\n"
        return o_str

    @property
    def materials(self):
        """ the media between the surfaces, i.e. excluding image space """
        return [med for _, _, med in self.surfaces[:-1]]

    def interfaces(self, wvl):
        """ return the sequence of interfaces with indices at `wvl` nm """
        ifcs = [TwoPlane(self.obj_dist)]
        n_before = get_index(self.obj_medium, wvl)
        last = len(self.surfaces) - 1
        for i, (radius, thi, med) in enumerate(self.surfaces):
            n_after = get_index(med, wvl)
            if math.isinf(radius):
                ifcs.append(PlanarSurface(n_before, n_after))
            else:
                ifcs.append(SphericalSurface(radius, n_before, n_after))
            if i < last:
                ifcs.append(Propagation(thi))
            n_before = n_after
        return ifcs

    def get_system(self, wvl, degree=3):
        """ return the transform from (world, aperture) to the exit ray

        The result maps (x_world, y_world, x_ap, y_ap) to (x, y, dx, dy) at
        the vertex plane of the last surface, for wavelength `wvl` nm.
        """
        system = None
        for ifc in self.interfaces(wvl):
            t = ifc.transform(degree)
            system = t if system is None else compose(system, t)
        logger.debug("system at %.1fnm, degree %d: %d terms", wvl, degree,
                     sum(len(eq.terms) for eq in system))
        return system


def achromat_nt32_921(obj_dist=5.0e6):
    """ Edmund Optics achromat #NT32-921, N-SSK8/N-SF10

    Clear aperture 39mm, efl 120mm, bfl 111mm. The default scene is 5km
    away.
    """
    glass1 = ('N-SSK8', 'Schott')
    glass2 = ('N-SF10', 'Schott')
    return LensPrescription(obj_dist,
                            [(65.22, 9.60, glass1),
                             (-62.03, 4.20, glass2),
                             (-1240.67, 0.0, 'air')],
                            title="Edmund Optics NT32-921 achromat")


def get_system(wvl, degree=3, prescription=None):
    """ return the transform for `prescription` (default NT32-921) """
    if prescription is None:
        prescription = achromat_nt32_921()
    return prescription.get_system(wvl, degree=degree)
