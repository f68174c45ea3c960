""" Package for the sequential lens description

    The :mod:`~.seq` subpackage provides the lens prescription and its
    conversion into a polynomial transform:

        - Material support built on :mod:`opticalglass`, :mod:`~.medium`
        - The lens prescription and the optical system builder,
          :mod:`~.prescription`
"""
