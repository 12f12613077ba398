"""Command-line calculator for mixed native and decimal expressions.

    python -m decarith.calc "m('98.01') * m('10.01')"
    python -m decarith.calc --places 2 -D vat=23 "m('34.78') * (1 + vat / 100)"
"""

import argparse
import logging
import sys

from .numeric import utils
from .arithmetic import evalctx, dispatch
from .arithmetic.interpreter import Interpreter


logger = logging.getLogger(__name__)


def parse_binding(s):
    """NAME=EXPR, where EXPR is evaluated like any other expression."""
    name, sep, text = s.partition('=')
    name = name.strip()
    if not sep or not name.isidentifier():
        raise argparse.ArgumentTypeError('expected NAME=VALUE, got {}'.format(repr(s)))
    try:
        value = Interpreter().run(text)
    except (utils.DecarithError, ArithmeticError) as exn:
        raise argparse.ArgumentTypeError('bad value for {}: {}'.format(name, exn))
    return name, value


def make_parser():
    parser = argparse.ArgumentParser(
        prog='decarith.calc',
        description='Evaluate infix expressions over native numbers and decimals. '
                    "Decimal literals are written m('1.5'); bare numbers are native.",
    )
    parser.add_argument('exprs', nargs='+', metavar='EXPR',
                        help='expression to evaluate')
    parser.add_argument('--prec', type=int, default=28,
                        help='decimal precision, in significant digits')
    parser.add_argument('--round', type=str, default='rne',
                        help='decimal rounding mode, e.g. rne, halfup, down')
    parser.add_argument('--places', type=int, default=None,
                        help='round each result to this many fractional digits')
    parser.add_argument('-D', '--define', type=parse_binding, action='append', default=[],
                        metavar='NAME=VALUE', help='bind a variable')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log debugging information to stderr')
    return parser


def main(argv=None):
    parser = make_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(name)s: %(message)s',
        stream=sys.stderr,
    )

    try:
        ctx = evalctx.decimal_ctx(args.prec, args.round)
    except ValueError as exn:
        parser.error(str(exn))
    if args.define:
        ctx = ctx.let(bindings=dict(args.define))
    logger.debug('context %r', ctx)

    interpreter = Interpreter()
    status = 0
    for text in args.exprs:
        try:
            result = interpreter.run(text, ctx=ctx)
            if args.places is not None and not isinstance(result, bool):
                result = dispatch.round_to(result, args.places, ctx=ctx)
        except (utils.DecarithError, ArithmeticError) as exn:
            print('{}: {}: {}'.format(text, type(exn).__name__, exn), file=sys.stderr, flush=True)
            status = 1
        else:
            print(result)

    return status


if __name__ == '__main__':
    sys.exit(main())
