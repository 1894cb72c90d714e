import logging
import math

from ordered_set import OrderedSet

from .errors import EvaluationException
from .evaluator import evaluate
from .lexer import tokenize
from .postfix import to_rpn
from .tokens import Tag, format_tokens

logger = logging.getLogger(__name__)


def eval_float(expression: str, env=None) -> float:
    """Parse and evaluate ``expression``, treating every number as a float.

    ``env`` maps names to ints, floats, fixed-arity functions of floats or
    explicit bindings (see ``rpn_calc.bindings``). Any failure raises a
    ``CalcException``.
    """
    tokens = tokenize(expression)
    logger.debug("tokens: %s", format_tokens(tokens))
    rpn = to_rpn(tokens, env)
    return evaluate(rpn, env)


def eval_int(expression: str, env=None) -> int:
    """Like ``eval_float`` but truncates the result toward zero."""
    x = eval_float(expression, env)
    if not math.isfinite(x):
        raise EvaluationException("cannot truncate %r to an integer" % x)
    return int(x)


def identifiers(expression: str) -> OrderedSet:
    return OrderedSet(t.name for t in tokenize(expression) if t.tag is Tag.IDENT)
