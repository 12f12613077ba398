"""Decimal literals written as text, i.e. m('98.01')."""

import decimal
import re

from . import utils


#                       1         2           3         4               5
_dec_re = re.compile(r'([-+]?)(?:([0-9]+)\.?|([0-9]*)\.([0-9]+))(?:[eE]([+-]?[0-9]+))?')
_special_re = re.compile(r'([-+]?)(inf|infinity|nan)', flags=re.IGNORECASE)

# malformed strings must raise, whatever the caller's current context says
_parse_ctx = decimal.Context(traps=[decimal.InvalidOperation])


def is_literal(text):
    """Would decimal_from accept this text?"""
    if not isinstance(text, str):
        return False
    s = text.strip()
    return bool(_dec_re.fullmatch(s) or _special_re.fullmatch(s))


def decimal_from(text):
    """Parse a decimal literal. The textual scale is kept, so '1.50' has
    two fractional digits (but still compares equal to '1.5').
    """
    if not isinstance(text, str):
        raise TypeError('decimal literal must be a string, got {}'.format(type(text).__name__))

    s = text.strip()
    if not s:
        raise utils.MalformedLiteral(text, 'empty literal')
    if not (_dec_re.fullmatch(s) or _special_re.fullmatch(s)):
        raise utils.MalformedLiteral(text)

    try:
        return decimal.Decimal(s, context=_parse_ctx)
    except decimal.InvalidOperation as exn:
        raise utils.MalformedLiteral(text) from exn

m = decimal_from
