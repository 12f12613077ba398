"""Coercion between native numbers and decimals.

Native numbers are machine integers and floats: Python int and float,
numpy integer and floating scalars, and gmpy2 mpz and mpfr values.
Decimals are decimal.Decimal instances. Nothing else participates.
"""

import decimal
import logging
import numbers
from enum import IntEnum, unique

import gmpy2 as gmp
import numpy as np

from . import utils


logger = logging.getLogger(__name__)


@unique
class Kind(IntEnum):
    NATIVE = 0
    DECIMAL = 1


# bool is an int, and promotes like one; numpy.bool_ is not a number at all
_native_integers = (numbers.Integral, np.integer, type(gmp.mpz(0)))
_mpfr = type(gmp.mpfr(0))
_native_floats = (float, np.floating, _mpfr)


def is_decimal(x):
    return isinstance(x, decimal.Decimal)

def is_native(x):
    return isinstance(x, _native_integers) or isinstance(x, _native_floats)

def kind_of(x, op=None):
    """Classify an operand, or raise UnsupportedOperand."""
    if isinstance(x, decimal.Decimal):
        return Kind.DECIMAL
    elif is_native(x):
        return Kind.NATIVE
    else:
        raise utils.UnsupportedOperand(x, op=op)


def _float_text(x):
    # str() of an mpfr is not the shortest rendering; up to double precision the float repr is
    if isinstance(x, _mpfr) and x.precision <= 53:
        f = float(x)
        if f == x or f != f:
            return repr(f)
    return str(x)


def promote(x):
    """Convert a native number to an equivalent decimal.
    Decimals are returned unchanged. Integers convert exactly; floats
    convert through their shortest decimal string, so that 0.1 becomes
    Decimal('0.1') rather than the exact binary value of the float.
    """
    if isinstance(x, decimal.Decimal):
        return x
    elif isinstance(x, _native_integers):
        return decimal.Decimal(int(x))
    elif isinstance(x, _native_floats):
        text = _float_text(x)
        logger.debug('promote %s %s', type(x).__name__, text)
        return decimal.Decimal(text)
    else:
        raise utils.UnsupportedOperand(x, op='promote')

dec = promote


def coerce(a, b, op=None):
    """Bring two operands to a common representation.
    Returns (kind, a, b), where a and b are either both native (untouched)
    or both decimal. A mixed pair is never returned.
    """
    ka = kind_of(a, op=op)
    kb = kind_of(b, op=op)
    if ka is Kind.NATIVE and kb is Kind.NATIVE:
        return Kind.NATIVE, a, b
    else:
        return Kind.DECIMAL, promote(a), promote(b)
