#!/usr/bin/env python
# -*- coding: utf-8 -*-

import copy
import enum
import logging

from pywrapnum.errors import BoundError, UnderflowError, ZeroModulusError
from pywrapnum.width import (
    cast_unsigned,
    check_unsigned,
    dtype_for_bits,
    is_integer,
    resolve_num_bits,
    wrapping_add,
    wrapping_mul,
)


class WrapPolicy(enum.Enum):
    '''
    How addition and multiplication wrap when the result would reach the bound.

    BOUND reduces by the declared wrap, so results always stay in [0, wrap).
    NATIVE over-flows at the storage width instead and ignores the wrap, which
    can leave a result at or past its wrap. NATIVE is a deliberate relaxation
    for code that wants hardware-style counters, not a safe default.
    '''
    BOUND = 'bound'
    NATIVE = 'native'


class WrapNum:
    '''
    Unsigned integer confined to [0, wrap), with wrap chosen per value. Addition
    and multiplication wrap back around to 0 past the wrap, subtraction and
    remainder work on the raw magnitudes and fail instead of wrapping.

    When operating on two WrapNums, the wrap, width and policy of the left one
    are kept and the right one's wrap is discarded. Right operands can also be
    plain integers, and can be of a different width as long as their value fits
    in the left operand's width.
    '''

    def __init__(self, num, wrap, num_bits=None, policy=WrapPolicy.BOUND):
        '''
        Initialize with a value and its exclusive upper bound, both of which must
        fit the storage width.
        :param num: Integer value, must be strictly below wrap
        :param wrap: Exclusive upper bound for the value
        :param num_bits: Storage width, one of 8, 16, 32 or 64. Defaults to None,
        which takes the width of numpy unsigned scalar arguments, or 64 bits.
        :param policy: WrapPolicy for addition and multiplication. Defaults to
        WrapPolicy.BOUND.
        '''
        self.num_bits = resolve_num_bits(num, wrap, num_bits=num_bits)
        self.wrap = check_unsigned(wrap, self.num_bits)
        self.value = check_unsigned(num, self.num_bits)
        if not self.value < self.wrap:
            raise BoundError(f"Value {self.value} must be below its wrap of {self.wrap}")
        self.policy = WrapPolicy(policy)

    @classmethod
    def new(cls, num, wrap, **kwargs):
        return cls(num, wrap, **kwargs)

    def get_value(self):
        '''
        Stored magnitude, as is. This is not re-reduced by the wrap, so under
        WrapPolicy.NATIVE it can be at or past get_bound().
        '''
        return self.value

    def get_bound(self):
        return self.wrap

    def get_num_bits(self):
        return self.num_bits

    def __repr__(self):
        return f"wrapnum{self.value}%{self.wrap}"

    def __format__(self, *fmt_args):
        '''
        Just use the underlying Python int()'s formatting.
        '''
        return self.value.__format__(*fmt_args)

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def to_numpy(self):
        '''
        Value as a numpy scalar of the storage dtype, e.g. numpy.uint32.
        '''
        return dtype_for_bits(self.num_bits)(self.value)

    '''
    Equality covers both the value and the wrap, a 4 that wraps at 6 is not
    the same number as a 4 that wraps at 5.
    '''
    def __eq__(self, o):
        if not isinstance(o, WrapNum):
            return NotImplemented
        return self.value == o.value and self.wrap == o.wrap

    def __hash__(self):
        return hash((self.value, self.wrap))

    def _derive(self, num):
        # keeps wrap, width, policy and subclass without re-validating
        result = copy.copy(self)
        result.value = num
        return result

    def _operand(self, o):
        '''
        Right operand cast to this width, as a Python int().
        '''
        if isinstance(o, WrapNum):
            return cast_unsigned(o.value, self.num_bits, from_bits=o.num_bits)
        if is_integer(o):
            return cast_unsigned(o, self.num_bits)
        raise TypeError(f"Unsupported operand type for {self.__class__.__name__}: {type(o).__name__}")

    @staticmethod
    def _accepts(o):
        return isinstance(o, WrapNum) or is_integer(o)

    def _wrapped(self, raw, native):
        if self.policy is WrapPolicy.BOUND:
            return raw % self.wrap
        if native >= self.wrap:
            logging.debug(f"Native {self.num_bits:,d}-bit wraparound left {native} at or past its wrap of {self.wrap}.")
        return native

    def _add(self, rhs):
        return self._wrapped(self.value + rhs, wrapping_add(self.value, rhs, self.num_bits))

    def _mul(self, rhs):
        return self._wrapped(self.value * rhs, wrapping_mul(self.value, rhs, self.num_bits))

    def _sub(self, rhs):
        if rhs > self.value:
            raise UnderflowError(f"Cannot subtract {rhs} from {self.value}")
        return self.value - rhs

    def _rem(self, rhs):
        if rhs == 0:
            raise ZeroModulusError(f"Remainder of {self.value} by zero")
        return self.value % rhs

    '''
    Named operations, each returning a new WrapNum, with in-place counterparts
    that update this one. The Python operator dunders below delegate to these.
    '''
    def add(self, o):
        return self._derive(self._add(self._operand(o)))

    def sub(self, o):
        return self._derive(self._sub(self._operand(o)))

    def mul(self, o):
        return self._derive(self._mul(self._operand(o)))

    def rem(self, o):
        return self._derive(self._rem(self._operand(o)))

    def add_assign(self, o):
        self.value = self._add(self._operand(o))
        return self

    def sub_assign(self, o):
        self.value = self._sub(self._operand(o))
        return self

    def mul_assign(self, o):
        self.value = self._mul(self._operand(o))
        return self

    def rem_assign(self, o):
        self.value = self._rem(self._operand(o))
        return self

    def __add__(self, o):
        return self.add(o) if self._accepts(o) else NotImplemented

    def __sub__(self, o):
        return self.sub(o) if self._accepts(o) else NotImplemented

    def __mul__(self, o):
        return self.mul(o) if self._accepts(o) else NotImplemented

    def __mod__(self, o):
        return self.rem(o) if self._accepts(o) else NotImplemented

    def __iadd__(self, o):
        return self.add_assign(o) if self._accepts(o) else NotImplemented

    def __isub__(self, o):
        return self.sub_assign(o) if self._accepts(o) else NotImplemented

    def __imul__(self, o):
        return self.mul_assign(o) if self._accepts(o) else NotImplemented

    def __imod__(self, o):
        return self.rem_assign(o) if self._accepts(o) else NotImplemented


class WrapNum8(WrapNum):
    """
    Class for a WrapNum stored in an unsigned byte.
    """

    def __init__(self, num, wrap, policy=WrapPolicy.BOUND):
        super().__init__(num, wrap, num_bits=8, policy=policy)


class WrapNum16(WrapNum):
    """
    Class for a WrapNum stored in a 16-bit unsigned integer.
    """

    def __init__(self, num, wrap, policy=WrapPolicy.BOUND):
        super().__init__(num, wrap, num_bits=16, policy=policy)


class WrapNum32(WrapNum):
    """
    Class for a WrapNum stored in a 32-bit unsigned integer.
    """

    def __init__(self, num, wrap, policy=WrapPolicy.BOUND):
        super().__init__(num, wrap, num_bits=32, policy=policy)


class WrapNum64(WrapNum):
    """
    Class for a WrapNum stored in a 64-bit unsigned integer.
    """

    def __init__(self, num, wrap, policy=WrapPolicy.BOUND):
        super().__init__(num, wrap, num_bits=64, policy=policy)
