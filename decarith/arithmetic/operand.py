"""Operator overloading for mixed native and decimal values.

Wrap a value in Operand, and ordinary infix operators on it go through the
dispatch engine:

    >>> Operand(m('98.01')) * m('10.01')
    Operand(Decimal('981.0801'))
    >>> Operand(3.15) == m('3.15')
    True

Only Operand itself is affected; built-in types keep their own operators.
"""

from ..numeric import conversion
from . import dispatch


def _unwrap(x):
    if isinstance(x, Operand):
        return x._value
    else:
        return x

def _supported(x):
    return isinstance(x, Operand) or conversion.is_decimal(x) or conversion.is_native(x)


class Operand(object):
    """A native number or a decimal, with dispatching operators."""

    __slots__ = ('_value', '_ctx')

    def __init__(self, x, ctx=None):
        if isinstance(x, Operand):
            if ctx is None:
                ctx = x._ctx
            x = x._value
        # fail early for strings and other non-numbers
        conversion.kind_of(x)
        self._value = x
        self._ctx = ctx

    @property
    def value(self):
        """The wrapped native number or decimal."""
        return self._value

    @property
    def ctx(self):
        return self._ctx

    @property
    def kind(self):
        return conversion.kind_of(self._value)

    def is_decimal(self):
        return conversion.is_decimal(self._value)

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, repr(self._value))

    def __str__(self):
        return str(self._value)

    def __float__(self):
        return float(self._value)

    def __int__(self):
        return int(self._value)

    def __bool__(self):
        return bool(self._value)

    def __hash__(self):
        # matches the hash of any equal Operand, not of an equal bare float
        return hash(conversion.promote(self._value))

    # arithmetic

    def _binary(self, fn, a, b):
        if not (_supported(a) and _supported(b)):
            return NotImplemented
        return type(self)(fn(_unwrap(a), _unwrap(b), ctx=self._ctx), ctx=self._ctx)

    def __add__(self, other):
        return self._binary(dispatch.add, self, other)

    def __radd__(self, other):
        return self._binary(dispatch.add, other, self)

    def __sub__(self, other):
        return self._binary(dispatch.subtract, self, other)

    def __rsub__(self, other):
        return self._binary(dispatch.subtract, other, self)

    def __mul__(self, other):
        return self._binary(dispatch.multiply, self, other)

    def __rmul__(self, other):
        return self._binary(dispatch.multiply, other, self)

    def __truediv__(self, other):
        return self._binary(dispatch.divide, self, other)

    def __rtruediv__(self, other):
        return self._binary(dispatch.divide, other, self)

    def __neg__(self):
        return type(self)(dispatch.negate(self._value, ctx=self._ctx), ctx=self._ctx)

    def __pos__(self):
        return self

    def __abs__(self):
        if dispatch.less_than(self._value, 0):
            return -self
        return self

    def round(self, places=0, rm=None):
        return type(self)(dispatch.round_to(self._value, places, rm=rm, ctx=self._ctx), ctx=self._ctx)

    # comparison

    def _compare(self, fn, other):
        if not _supported(other):
            return NotImplemented
        return fn(self._value, _unwrap(other), ctx=self._ctx)

    def __eq__(self, other):
        return self._compare(dispatch.equal, other)

    def __ne__(self, other):
        return self._compare(dispatch.not_equal, other)

    def __lt__(self, other):
        return self._compare(dispatch.less_than, other)

    def __le__(self, other):
        return self._compare(dispatch.less_or_equal, other)

    def __gt__(self, other):
        return self._compare(dispatch.greater_than, other)

    def __ge__(self, other):
        return self._compare(dispatch.greater_or_equal, other)
