from .numeric import utils, ops, conversion, literal
from .arithmetic import evalctx, dispatch, operand, interpreter

DecarithError = utils.DecarithError
MalformedLiteral = utils.MalformedLiteral
UnsupportedOperand = utils.UnsupportedOperand
DivisionByZero = utils.DivisionByZero

OP = ops.OP
RM = ops.RM
Ordering = ops.Ordering

promote = conversion.promote
dec = conversion.dec
decimal_from = literal.decimal_from
m = literal.m

DecimalCtx = evalctx.DecimalCtx
decimal_ctx = evalctx.decimal_ctx

add = dispatch.add
subtract = dispatch.subtract
multiply = dispatch.multiply
divide = dispatch.divide
negate = dispatch.negate
compare = dispatch.compare
equal = dispatch.equal
not_equal = dispatch.not_equal
greater_than = dispatch.greater_than
greater_or_equal = dispatch.greater_or_equal
less_than = dispatch.less_than
less_or_equal = dispatch.less_or_equal
round_to = dispatch.round_to

Operand = operand.Operand
Interpreter = interpreter.Interpreter
