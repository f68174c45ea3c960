#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Support for polynomial algebra exception handling

.. Created on Sat Oct 10 09:12:31 2026

.. codeauthor: Michael J. Hayford
"""


class PolyError(Exception):
    """ Exception raised by truncated polynomial operations """


class DegreeMismatchError(PolyError):
    """ Exception raised when operands have different truncation degrees """
    def __init__(self, degree_a, degree_b):
        self.degree_a = degree_a
        self.degree_b = degree_b
        super().__init__(f"truncation degree mismatch: {degree_a} vs "
                         f"{degree_b}")


class ShapeMismatchError(PolyError):
    """ Exception raised when variable or equation counts don't agree """
    def __init__(self, msg, expected=None, found=None):
        self.expected = expected
        self.found = found
        super().__init__(msg)


class PolyDomainError(PolyError):
    """ Exception raised when a series can't be expanded about the constant
    term, e.g. the square root of a negative constant (TIR) """
    def __init__(self, op, const_term):
        self.op = op
        self.const_term = const_term
        super().__init__(f"{op}: invalid constant term {const_term!r}")
