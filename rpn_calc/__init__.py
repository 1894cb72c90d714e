"""Parse and evaluate short mathematical expressions.

Expressions are first tokenized, then rearranged into reverse polish
notation with the shunting-yard algorithm, and finally evaluated with all
numbers treated as floats. Expressions may use variables and functions
supplied by the caller.
"""
import logging

from .bindings import Binding, IntegerConstant, FloatConstant, Function
from .calc import eval_float, eval_int, identifiers
from .errors import (
    CalcException, LexException, SyntaxException, BindingException,
    EvaluationException, ArityException
)
from .evaluator import evaluate
from .lexer import scan, tokenize
from .postfix import to_rpn
from .tokens import Tag, Token, format_tokens

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'eval_float', 'eval_int', 'identifiers',
    'scan', 'tokenize', 'to_rpn', 'evaluate', 'format_tokens', 'Tag', 'Token',
    'Binding', 'IntegerConstant', 'FloatConstant', 'Function',
    'CalcException', 'LexException', 'SyntaxException', 'BindingException',
    'EvaluationException', 'ArityException',
]
