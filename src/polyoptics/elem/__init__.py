""" Package for optical elements and their polynomial transforms

    The :mod:`~.elem` subpackage provides the building blocks of a lens
    model:

        - Polynomial transforms for entry, refraction and propagation,
          :mod:`~.elements`
        - Immutable interface classes holding the physical parameters,
          :mod:`~.interface`
"""
