"""Interpreter for infix expressions over native numbers and decimals.

Expressions use Python syntax. Bare numbers are native, and decimal
literals are written m('98.01'):

    >>> Interpreter().run("m('34.78') * (1 + 23/100)")
    Decimal('42.7794')

Every operator goes through the dispatch engine, so mixing the two kinds
promotes to decimal exactly as the dispatch functions do.
"""

import ast
import logging

from ..numeric import utils, conversion, literal
from ..numeric.ops import OP
from .evalctx import DecimalCtx
from .operand import Operand
from . import dispatch


logger = logging.getLogger(__name__)


class EvaluatorError(utils.DecarithError):
    """Base decarith evaluator error."""

class EvaluatorUnimplementedError(EvaluatorError):
    """Unsupported syntax encountered during evaluation."""

class EvaluatorUnboundError(EvaluatorError, LookupError):
    """Unbound variable encountered during evaluation."""


class Evaluator(object):
    """Expression evaluator.
    Dispatches on type of nodes in the AST.
    """

    ctype = DecimalCtx

    def _eval_node(self, e, ctx):
        raise EvaluatorUnimplementedError('unsupported syntax: {}'.format(type(e).__name__))

    def _eval_expression(self, e, ctx):
        return self.evaluate(e.body, ctx)

    _evaluator_dispatch = {
        # catch-all for everything we don't understand
        ast.AST: '_eval_node',
        # the root of anything parsed with mode='eval'
        ast.Expression: '_eval_expression',
        # values
        ast.Constant: '_eval_constant',
        ast.Name: '_eval_name',
        # operations
        ast.BinOp: '_eval_binop',
        ast.UnaryOp: '_eval_unaryop',
        ast.Compare: '_eval_compare',
        ast.BoolOp: '_eval_boolop',
        ast.Call: '_eval_call',
    }

    _evaluator_cache = utils.ImmutableDict()

    def __init__(self):
        self.evals = 0

    def evaluate(self, e, ctx):
        try:
            method = self._evaluator_cache[type(e)]
        except KeyError:
            # initialize the cache for this instance if it hasn't been initialized already
            if isinstance(self._evaluator_cache, utils.ImmutableDict):
                self._evaluator_cache = {}
            # walk up the mro and assign the evaluator for the first subtype to this type
            method = None
            ecls = type(e)
            for superclass in ecls.__mro__:
                method_name = self._evaluator_dispatch.get(superclass, None)
                if method_name is not None and hasattr(self, method_name):
                    method = getattr(self, method_name)
                    self._evaluator_cache[ecls] = method
                    break
            if method is None:
                raise EvaluatorError('Evaluator: unable to dispatch for expression {} with mro {}'
                                     .format(repr(e), repr(ecls.__mro__)))

        self.evals += 1
        return method(e, ctx)


class Interpreter(Evaluator):
    """Evaluates expressions with the decimal dispatch engine."""

    _binops = {
        ast.Add: OP.add,
        ast.Sub: OP.sub,
        ast.Mult: OP.mul,
        ast.Div: OP.div,
    }

    _cmpops = {
        ast.Eq: OP.eq,
        ast.NotEq: OP.ne,
        ast.Lt: OP.lt,
        ast.LtE: OP.le,
        ast.Gt: OP.gt,
        ast.GtE: OP.ge,
    }

    functions = {
        'm': '_call_m',
        'dec': '_call_dec',
        'round': '_call_round',
    }

    def parse(self, text):
        try:
            return ast.parse(text.strip(), mode='eval')
        except SyntaxError as exn:
            raise EvaluatorError('invalid expression {}: {}'.format(repr(text), exn.msg)) from exn

    def run(self, text, ctx=None, bindings=None):
        """Parse and evaluate an expression string."""
        if ctx is None:
            ctx = self.ctype()
        if bindings:
            ctx = ctx.let(bindings=bindings)
        logger.debug('evaluate %r with %r', text, ctx)
        return self.evaluate(self.parse(text), ctx)

    # values

    def _eval_constant(self, e, ctx):
        value = e.value
        if isinstance(value, bool) or conversion.is_native(value):
            return value
        elif isinstance(value, str):
            raise EvaluatorError('bare string {}: decimal literals are written m({})'
                                 .format(repr(value), repr(value)))
        else:
            raise EvaluatorUnimplementedError('unsupported constant {}'.format(repr(value)))

    def _eval_name(self, e, ctx):
        try:
            value = ctx.bindings[e.id]
        except KeyError as exn:
            raise EvaluatorUnboundError(exn.args[0])
        if isinstance(value, Operand):
            return value.value
        return value

    # operations

    def _eval_binop(self, e, ctx):
        try:
            opcode = self._binops[type(e.op)]
        except KeyError:
            raise EvaluatorUnimplementedError('unsupported operator {}'.format(type(e.op).__name__))
        in0 = self.evaluate(e.left, ctx)
        in1 = self.evaluate(e.right, ctx)
        return dispatch.apply(opcode, in0, in1, ctx=ctx)

    def _eval_unaryop(self, e, ctx):
        in0 = self.evaluate(e.operand, ctx)
        if isinstance(e.op, ast.USub):
            return dispatch.negate(in0, ctx=ctx)
        elif isinstance(e.op, ast.UAdd):
            conversion.kind_of(in0, op='+')
            return in0
        elif isinstance(e.op, ast.Not):
            return not in0
        else:
            raise EvaluatorUnimplementedError('unsupported operator {}'.format(type(e.op).__name__))

    # Chained comparisons short-circuit, like Python's own:
    # a < b < c evaluates c only if a < b holds.

    def _eval_compare(self, e, ctx):
        a = self.evaluate(e.left, ctx)
        for op, child in zip(e.ops, e.comparators):
            try:
                opcode = self._cmpops[type(op)]
            except KeyError:
                raise EvaluatorUnimplementedError('unsupported comparison {}'.format(type(op).__name__))
            b = self.evaluate(child, ctx)
            if not dispatch.apply(opcode, a, b, ctx=ctx):
                return False
            a = b
        return True

    # and/or return the deciding operand, like Python's own

    def _eval_boolop(self, e, ctx):
        is_and = isinstance(e.op, ast.And)
        for child in e.values:
            result = self.evaluate(child, ctx)
            if bool(result) != is_and:
                return result
        return result

    def _eval_call(self, e, ctx):
        if not isinstance(e.func, ast.Name) or e.func.id not in self.functions:
            raise EvaluatorUnimplementedError('unsupported call {}'.format(ast.dump(e.func)))
        if e.keywords:
            raise EvaluatorError('{}() takes no keyword arguments'.format(e.func.id))
        method = getattr(self, self.functions[e.func.id])
        return method(e.args, ctx)

    # functions

    def _call_m(self, args, ctx):
        if len(args) != 1 or not isinstance(args[0], ast.Constant) or not isinstance(args[0].value, str):
            raise EvaluatorError("m() takes a single string literal, e.g. m('1.5')")
        return literal.decimal_from(args[0].value)

    def _call_dec(self, args, ctx):
        if len(args) != 1:
            raise EvaluatorError('dec() takes exactly one argument')
        return conversion.promote(self.evaluate(args[0], ctx))

    def _call_round(self, args, ctx):
        if len(args) not in (1, 2):
            raise EvaluatorError('round() takes one or two arguments')
        x = self.evaluate(args[0], ctx)
        if len(args) == 2:
            places = self.evaluate(args[1], ctx)
            if isinstance(places, bool) or not isinstance(places, int):
                raise EvaluatorError('round() places must be an integer, got {}'.format(repr(places)))
        else:
            places = 0
        return dispatch.round_to(x, places, ctx=ctx)
