import math

from .bindings import lookup
from .errors import EvaluationException, ArityException
from .tokens import Tag, IMPLICIT_MUL


def divide(a, b):
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def modulo(a, b):
    # sign follows the dividend
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


def power(a, b):
    try:
        return math.pow(a, b)
    except OverflowError:
        odd = b.is_integer() and b % 2 == 1
        return -math.inf if a < 0 and odd else math.inf
    except ValueError:
        if a == 0:
            odd = b.is_integer() and b % 2 == 1
            return math.copysign(math.inf, a) if odd else math.inf
        return math.nan


ARITHMETIC = {
    '+': lambda a, b: a + b,
    '-': lambda a, b: a - b,
    '*': lambda a, b: a * b,
    IMPLICIT_MUL: lambda a, b: a * b,
    '/': divide,
    '%': modulo,
    '^': power,
}


def call(token, binding, stack):
    if token.argc is not None and token.argc != binding.arity:
        raise ArityException("'%s' takes %d argument(s), %d given" % (token.name, binding.arity, token.argc))
    if len(stack) < binding.arity:
        raise ArityException("invalid expression")
    split = len(stack) - binding.arity
    args = stack[split:]
    del stack[split:]
    return binding(*args)


def evaluate(rpn, env=None):
    """Run an RPN token list on a value stack and return the single result."""
    stack = []
    for token in rpn:
        if token.tag is Tag.NUMBER:
            stack.append(token.value)
        elif token.tag is Tag.UNARY:
            if not stack:
                raise EvaluationException("invalid expression")
            if token.symbol == '-':
                stack.append(-stack.pop())
        elif token.tag is Tag.OPERATOR:
            if len(stack) < 2:
                raise EvaluationException("invalid expression")
            b, a = stack.pop(), stack.pop()
            stack.append(ARITHMETIC[token.symbol](a, b))
        elif token.tag is Tag.IDENT:
            binding = lookup(env, token.name)
            if binding.is_function:
                stack.append(call(token, binding, stack))
            else:
                stack.append(binding.value)
        else:
            # parentheses and commas never reach the RPN form
            raise EvaluationException("invalid expression")
    if len(stack) != 1:
        raise EvaluationException("invalid expression")
    return stack[0]
