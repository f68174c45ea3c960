""" Package of shared optical model definitions

    The ``polyoptics.optical`` subpackage holds the index constants that
    name the inputs and outputs of the polynomial transforms,
    :mod:`~.model_constants`.
"""
