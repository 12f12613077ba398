"""Operator dispatch between native and decimal arithmetic.

Every binary operation first brings its operands to a common representation
(see conversion.coerce). Two native numbers use the native Python operator,
exactly as if decarith were not involved. If either side is a decimal, the
native side is promoted and the decimal engine performs the operation, so
the result is a decimal no matter which operand was promoted.

Decimal arithmetic runs in the context given by ctx= (a DecimalCtx or a
decimal.Context), or in the decimal module's current context if none is
given. Rounding, precision and signals are entirely the decimal module's
business: DivisionByZero and friends propagate to the caller untouched.

Equality is value equality. Ordering comes from a single three-way
comparison; >= and <= are built from == and > / <, and != from ==.
"""

import decimal
import operator

from ..numeric import conversion
from ..numeric.conversion import Kind, promote
from ..numeric.ops import OP, RM, Ordering, symbols
from . import evalctx


_native_ops = {
    OP.add: operator.add,
    OP.sub: operator.sub,
    OP.mul: operator.mul,
    OP.div: operator.truediv,
}

_decimal_ops = {
    OP.add: decimal.Context.add,
    OP.sub: decimal.Context.subtract,
    OP.mul: decimal.Context.multiply,
    OP.div: decimal.Context.divide,
}


def compute(opcode, a, b, ctx=None):
    """Compute a <op> b for one of the arithmetic opcodes."""
    kind, x, y = conversion.coerce(a, b, op=symbols[opcode])
    if kind is Kind.NATIVE:
        return _native_ops[opcode](x, y)
    else:
        return _decimal_ops[opcode](evalctx.decimal_context(ctx), x, y)


# arithmetic

def add(a, b, ctx=None):
    return compute(OP.add, a, b, ctx=ctx)

def subtract(a, b, ctx=None):
    return compute(OP.sub, a, b, ctx=ctx)

def multiply(a, b, ctx=None):
    return compute(OP.mul, a, b, ctx=ctx)

def divide(a, b, ctx=None):
    """Divide a by b. Native operands use true division, so 1 / 2 is 0.5
    and 1 / 0 raises ZeroDivisionError as usual. A decimal division by zero
    raises decimal.DivisionByZero (if the context traps it).
    """
    return compute(OP.div, a, b, ctx=ctx)

def negate(a, ctx=None):
    if conversion.kind_of(a, op=symbols[OP.neg]) is Kind.NATIVE:
        return -a
    else:
        return evalctx.decimal_context(ctx).minus(a)


# comparison

def _decimal_compare(x, y, ctx):
    result = x.compare(y, context=evalctx.decimal_context(ctx))
    if result.is_nan():
        return None
    else:
        return Ordering(int(result))

def _native_compare(x, y):
    if x < y:
        return Ordering.LESS
    elif x == y:
        return Ordering.EQUAL
    elif x > y:
        return Ordering.GREATER
    else:
        return None

def compare(a, b, ctx=None):
    """Three-way comparison. Returns an Ordering, or None if the operands
    are unordered (i.e. one of them is NaN).
    """
    kind, x, y = conversion.coerce(a, b, op='compare')
    if kind is Kind.NATIVE:
        return _native_compare(x, y)
    else:
        return _decimal_compare(x, y, ctx)

def equal(a, b, ctx=None):
    """Value equality: Decimal('1.50') equals Decimal('1.5') and 1.5."""
    kind, x, y = conversion.coerce(a, b, op=symbols[OP.eq])
    return bool(x == y)

def not_equal(a, b, ctx=None):
    return not equal(a, b, ctx=ctx)

def greater_than(a, b, ctx=None):
    kind, x, y = conversion.coerce(a, b, op=symbols[OP.gt])
    if kind is Kind.NATIVE:
        return bool(x > y)
    else:
        return _decimal_compare(x, y, ctx) is Ordering.GREATER

def less_than(a, b, ctx=None):
    kind, x, y = conversion.coerce(a, b, op=symbols[OP.lt])
    if kind is Kind.NATIVE:
        return bool(x < y)
    else:
        return _decimal_compare(x, y, ctx) is Ordering.LESS

def greater_or_equal(a, b, ctx=None):
    return equal(a, b, ctx=ctx) or greater_than(a, b, ctx=ctx)

def less_or_equal(a, b, ctx=None):
    return equal(a, b, ctx=ctx) or less_than(a, b, ctx=ctx)


# rounding

def round_to(a, places=0, rm=None, ctx=None):
    """Round to a fixed number of fractional digits, always giving a decimal.
    Native numbers are promoted first. Ties round half up unless another
    rounding mode is given.
    """
    x = promote(a)
    if rm is None:
        rm = RM.RNA
    else:
        rm = evalctx.parse_rm(rm)
    quantum = decimal.Decimal((0, (1,), -operator.index(places)))
    return x.quantize(quantum, rounding=rm.to_decimal(), context=evalctx.decimal_context(ctx))


_dispatch = {
    OP.add: add,
    OP.sub: subtract,
    OP.mul: multiply,
    OP.div: divide,
    OP.eq: equal,
    OP.ne: not_equal,
    OP.gt: greater_than,
    OP.ge: greater_or_equal,
    OP.lt: less_than,
    OP.le: less_or_equal,
    OP.neg: negate,
}

def apply(opcode, *args, ctx=None):
    """Apply the operation named by an OP code."""
    try:
        fn = _dispatch[opcode]
    except KeyError:
        raise ValueError('unknown operation {}'.format(repr(opcode)))
    return fn(*args, ctx=ctx)
