#!/usr/bin/env python
# -*- coding: utf-8 -*-

'''
Exceptions raised by bounded unsigned integers. None of these are meant to be
recovered from at the point they are raised, they signal caller error.
'''


class WrapNumError(ArithmeticError):
    '''
    Base class for every failure of a bounded unsigned integer.
    '''


class BoundError(WrapNumError, ValueError):
    '''
    Construction with a value that is not strictly below its wrap.
    '''


class UnderflowError(WrapNumError):
    '''
    Subtraction whose right operand is larger than the left magnitude.
    '''


class ZeroModulusError(WrapNumError, ZeroDivisionError):
    '''
    Remainder with a right operand of zero.
    '''


class CastError(WrapNumError, OverflowError):
    '''
    Operand whose value cannot be represented at the target unsigned width.
    '''
