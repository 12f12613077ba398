"""Evaluation context information: decimal precision, rounding, and bindings."""

import decimal

from ..numeric import utils
from ..numeric.ops import RM


RNE_synonyms = {'rne', 'nearesteven', 'roundnearesteven', 'halfeven', 'roundhalfeven', 'round_half_even'}
RNA_synonyms = {'rna', 'nearestaway', 'roundnearestaway', 'halfup', 'roundhalfup', 'round_half_up'}
RTP_synonyms = {'rtp', 'topositive', 'roundtopositive', 'ceiling', 'roundceiling', 'round_ceiling'}
RTN_synonyms = {'rtn', 'tonegative', 'roundtonegative', 'floor', 'roundfloor', 'round_floor'}
RTZ_synonyms = {'rtz', 'tozero', 'roundtozero', 'down', 'rounddown', 'round_down'}
RAZ_synonyms = {'raz', 'awayzero', 'roundawayzero', 'up', 'roundup', 'round_up'}
RNZ_synonyms = {'rnz', 'nearestzero', 'roundnearestzero', 'halfdown', 'roundhalfdown', 'round_half_down'}
R05UP_synonyms = {'r05up', '05up', 'round05up', 'round_05up'}

decimal_rm = {}
decimal_rm.update((k, RM.RNE) for k in RNE_synonyms)
decimal_rm.update((k, RM.RNA) for k in RNA_synonyms)
decimal_rm.update((k, RM.RTP) for k in RTP_synonyms)
decimal_rm.update((k, RM.RTN) for k in RTN_synonyms)
decimal_rm.update((k, RM.RTZ) for k in RTZ_synonyms)
decimal_rm.update((k, RM.RAZ) for k in RAZ_synonyms)
decimal_rm.update((k, RM.RNZ) for k in RNZ_synonyms)
decimal_rm.update((k, RM.R05UP) for k in R05UP_synonyms)


def parse_rm(rounding):
    """Look up a rounding mode by name, or pass an RM through."""
    if isinstance(rounding, RM):
        return rounding
    try:
        return decimal_rm[str(rounding).lower()]
    except KeyError:
        raise ValueError('unsupported decimal rounding mode {}'.format(repr(rounding)))

def parse_prec(prec):
    try:
        p = int(str(prec))
    except ValueError:
        raise ValueError('unsupported decimal precision {}'.format(repr(prec)))
    if p < 1:
        raise ValueError('decimal precision must be positive, got {}'.format(repr(prec)))
    return p


class DecimalCtx(object):
    """Context for decimal arithmetic.
    Holds the precision and rounding mode handed to the decimal engine,
    plus variable bindings and string properties used by the interpreter.
    Contexts are not modified after construction; use let() to derive a new one.
    """

    # these placeholders should never have anything put in them
    bindings = utils.ImmutableDict()
    props = utils.ImmutableDict()

    prec = 28
    rm = RM.RNE

    def __init__(self, prec=None, rm=None, props=None, bindings=None):
        init_prec = self.prec
        init_rm = self.rm

        if bindings:
            self.bindings = dict(bindings)
        else:
            self.bindings = {}

        self.props = {}
        if props:
            if 'round' in props:
                init_rm = parse_rm(props['round'])
            if 'precision' in props:
                init_prec = parse_prec(props['precision'])
            self.props.update(props)

        # arguments are allowed to override properties
        if prec is not None:
            init_prec = parse_prec(prec)
        if rm is not None:
            init_rm = parse_rm(rm)

        self.prec = init_prec
        self.rm = init_rm
        self._context = None

    def _import_fields(self, ctx):
        self.prec = ctx.prec
        self.rm = ctx.rm
        self._context = ctx._context

    @property
    def context(self):
        """The decimal.Context that performs arithmetic under this ctx.
        Traps are the decimal module defaults: DivisionByZero,
        InvalidOperation and Overflow all raise.
        """
        if self._context is None:
            self._context = decimal.Context(prec=self.prec, rounding=self.rm.to_decimal())
        return self._context

    def __repr__(self):
        args = ['prec=' + repr(self.prec), 'rm=' + str(self.rm.name)]
        if len(self.bindings) > 0:
            args.append('bindings=' + repr(self.bindings))
        if len(self.props) > 0:
            args.append('props=' + repr(self.props))
        return '{}({})'.format(type(self).__name__, ', '.join(args))

    def __str__(self):
        lines = [type(self).__name__ + ':',
                 '    prec: ' + str(self.prec),
                 '    rm: ' + self.rm.name]
        if len(self.bindings) > 0:
            lines.append('  bindings:')
            lines.extend('    ' + str(k) + ': ' + str(v) for k, v in self.bindings.items())
        if len(self.props) > 0:
            lines.append('  props:')
            lines.extend('    ' + str(k) + ': ' + str(v) for k, v in self.props.items())
        return '\n'.join(lines)

    def let(self, bindings=None, props=None):
        """Create a new context, updated with any provided bindings
        or properties.
        """
        cls = type(self)
        newctx = cls.__new__(cls)
        newctx._import_fields(self)

        if bindings:
            newctx.bindings = self.bindings.copy()
            newctx.bindings.update(bindings)
        else:
            # share the dictionary
            newctx.bindings = self.bindings

        if props:
            newctx.props = self.props.copy()
            newctx.props.update(props)
            if 'round' in props:
                newctx.rm = parse_rm(props['round'])
                newctx._context = None
            if 'precision' in props:
                newctx.prec = parse_prec(props['precision'])
                newctx._context = None
        else:
            # share the dictionary
            newctx.props = self.props

        return newctx


used_ctxs = {}
def decimal_ctx(prec=28, rm=RM.RNE):
    rm = parse_rm(rm)
    try:
        return used_ctxs[(prec, rm)]
    except KeyError:
        ctx = DecimalCtx(prec=prec, rm=rm)
        used_ctxs[(prec, rm)] = ctx
        return ctx


def decimal_context(ctx):
    """Resolve the ctx= argument of an operation to a decimal.Context.
    None means the decimal module's current (thread-local) context.
    """
    if ctx is None:
        return decimal.getcontext()
    elif isinstance(ctx, DecimalCtx):
        return ctx.context
    elif isinstance(ctx, decimal.Context):
        return ctx
    else:
        raise TypeError('expected DecimalCtx or decimal.Context, got {}'.format(type(ctx).__name__))
