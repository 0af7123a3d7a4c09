#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

import numpy as np

from pywrapnum.errors import CastError

'''
Unsigned storage widths for bounded integers. Each supported width is backed by
the numpy unsigned dtype of the same size, values themselves are kept as plain
Python int() objects so intermediate results never overflow silently.
'''

UNSIGNED_DTYPES = {
    8: np.uint8,
    16: np.uint16,
    32: np.uint32,
    64: np.uint64,
}

DEFAULT_NUM_BITS = 64


def dtype_for_bits(num_bits):
    '''
    numpy unsigned dtype for a storage width in bits.
    '''
    try:
        return UNSIGNED_DTYPES[int(num_bits)]
    except KeyError:
        raise ValueError(f"Unsupported unsigned width of {num_bits} bits, expected one of {sorted(UNSIGNED_DTYPES)}") from None


def bits_of(num):
    '''
    Storage width of a numpy unsigned scalar, or None for anything else.
    '''
    if isinstance(num, np.unsignedinteger):
        return np.dtype(type(num)).itemsize * 8
    return None


def resolve_num_bits(*nums, num_bits=None):
    '''
    Pick the storage width for a set of values.
    :param nums: Values that will share the width, numpy unsigned scalars among them
    vote for their own width and the widest one wins.
    :param num_bits: Explicit width, overrides anything inferred from the values.
    Defaults to None, falling back to DEFAULT_NUM_BITS when nothing can be inferred.
    '''
    if num_bits is not None:
        dtype_for_bits(num_bits)
        return int(num_bits)
    widths = [bits_of(num) for num in nums]
    widths = [w for w in widths if w is not None]
    return max(widths) if widths else DEFAULT_NUM_BITS


def max_for_bits(num_bits):
    return int(np.iinfo(dtype_for_bits(num_bits)).max)


def is_integer(num):
    # bool is an int() subclass but not a magnitude
    return isinstance(num, (int, np.integer)) and not isinstance(num, bool)


def check_unsigned(num, num_bits):
    '''
    Validate that an integer is representable as an unsigned integer of a width,
    and return it as a Python int().
    '''
    if not is_integer(num):
        raise TypeError(f"Expected an integer, got {type(num).__name__}")
    int_num = int(num)
    if int_num not in range(max_for_bits(num_bits) + 1):
        raise CastError(f"Value {int_num} out-of-range for unsigned {num_bits:,d} bits")
    return int_num


def cast_unsigned(num, num_bits, from_bits=None):
    '''
    Failure-checked cast of an integer into an unsigned width. Values that do not
    fit raise CastError rather than being truncated.
    :param num: Python int() or numpy integer scalar
    :param num_bits: Target width in bits
    :param from_bits: Width the value was stored at, if known, only used for logging
    '''
    if from_bits is None:
        from_bits = bits_of(num)
    if from_bits is not None and from_bits > num_bits:
        logging.debug(f"Narrowing {num} from {from_bits:,d} to {num_bits:,d} bits.")
    return check_unsigned(num, num_bits)


def wrapping_add(a, b, num_bits):
    '''
    Addition that over-flows at the storage width, like the hardware would.
    '''
    return (int(a) + int(b)) & max_for_bits(num_bits)


def wrapping_mul(a, b, num_bits):
    '''
    Multiplication that over-flows at the storage width, like the hardware would.
    '''
    return (int(a) * int(b)) & max_for_bits(num_bits)
