"""General utilities, such as exception classes."""

import decimal


# decarith-specific exceptions

class DecarithError(Exception):
    """Base decarith error."""

class MalformedLiteral(DecarithError, ValueError):
    """Text that cannot be parsed as a decimal literal."""

    def __init__(self, text, reason=None):
        self.text = text
        self.reason = reason
        if reason:
            msg = 'malformed decimal literal {}: {}'.format(repr(text), reason)
        else:
            msg = 'malformed decimal literal {}'.format(repr(text))
        super().__init__(msg)

class UnsupportedOperand(DecarithError, TypeError):
    """An operand that is neither a native number nor a decimal."""

    def __init__(self, x, op=None):
        self.operand = x
        self.op = op
        if op is None:
            msg = 'unsupported operand type {}'.format(type(x).__name__)
        else:
            msg = 'unsupported operand type for {}: {}'.format(op, type(x).__name__)
        super().__init__(msg)


# Raised by the decimal engine itself; never wrapped, so that callers see
# exactly what the decimal module signalled.
DivisionByZero = decimal.DivisionByZero


# some common data structures

class ImmutableDict(dict):
    def __delitem__(self, key):
        raise ValueError('ImmutableDict cannot be modified: attempt to delete {}'
                         .format(repr(key)))

    def __setitem__(self, key, value):
        raise ValueError('ImmutableDict cannot be modified: attempt to assign [{}] = {}'
                         .format(repr(key), repr(value)))

    def clear(self):
        raise ValueError('ImmutableDict cannot be modified: attempt to clear')

    def pop(self, key, *args):
        raise ValueError('ImmutableDict cannot be modified: attempt to pop {}'
                         .format(repr(key)))

    def popitem(self):
        raise ValueError('ImmutableDict cannot be modified: attempt to popitem')

    def setdefault(self, key, default=None):
        raise ValueError('ImmutableDict cannot be modified: attempt to setdefault {}, default={}'
                         .format(repr(key), repr(default)))

    def update(self, *args, **kwargs):
        raise ValueError('ImmutableDict cannot be modified: attempt to update')
