"""Standard operation codes, shared by the dispatch engine and the interpreter."""

import decimal
from enum import IntEnum, unique


class RM(IntEnum):
    ROUND_NEAREST_EVEN = 0
    RNE = 0
    ROUND_NEAREST_AWAY = 1
    RNA = 1
    ROUND_UP = 2
    RTP = 2
    ROUND_DOWN = 3
    RTN = 3
    ROUND_TO_ZERO = 4
    RTZ = 4
    ROUND_AWAY_ZERO = 5
    RAZ = 5
    ROUND_NEAREST_ZERO = 6
    RNZ = 6
    ROUND_05_UP = 7
    R05UP = 7

    def to_decimal(self):
        """The matching rounding constant of the decimal module."""
        return _rm_to_decimal[self]

    @classmethod
    def from_decimal(cls, rounding):
        try:
            return _decimal_to_rm[rounding]
        except KeyError:
            raise ValueError('unknown decimal rounding {}'.format(repr(rounding)))

_rm_to_decimal = {
    RM.RNE: decimal.ROUND_HALF_EVEN,
    RM.RNA: decimal.ROUND_HALF_UP,
    RM.RTP: decimal.ROUND_CEILING,
    RM.RTN: decimal.ROUND_FLOOR,
    RM.RTZ: decimal.ROUND_DOWN,
    RM.RAZ: decimal.ROUND_UP,
    RM.RNZ: decimal.ROUND_HALF_DOWN,
    RM.R05UP: decimal.ROUND_05UP,
}

_decimal_to_rm = {v: k for k, v in _rm_to_decimal.items()}


@unique
class Ordering(IntEnum):
    """Result of a three-way comparison.
    Unordered pairs (anything involving NaN) are reported as None instead.
    """
    LESS = -1
    EQUAL = 0
    GREATER = 1


@unique
class OP(IntEnum):
    add = 0
    sub = 1
    mul = 2
    div = 3
    eq = 4
    ne = 5
    gt = 6
    ge = 7
    lt = 8
    le = 9
    neg = 10


# printable operator symbols, for messages
symbols = {
    OP.add: '+',
    OP.sub: '-',
    OP.mul: '*',
    OP.div: '/',
    OP.eq: '==',
    OP.ne: '!=',
    OP.gt: '>',
    OP.ge: '>=',
    OP.lt: '<',
    OP.le: '<=',
    OP.neg: '-',
}
