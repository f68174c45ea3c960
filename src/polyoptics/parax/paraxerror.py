#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Support for first order exception handling

.. Created on Tue Oct 13 10:05:12 2026

.. codeauthor: Michael J. Hayford
"""


class ParaxError(Exception):
    """ Exception raised by first order calculations """


class FocusError(ParaxError):
    """ Exception raised when the degree-1 block has no finite focus """
    def __init__(self, msg, pos_coeff=None, dir_coeff=None):
        self.pos_coeff = pos_coeff
        self.dir_coeff = dir_coeff
        super().__init__(msg)
