import logging
from collections import namedtuple
from enum import Enum
from types import MappingProxyType

from .bindings import lookup
from .errors import SyntaxException
from .tokens import Tag, OperatorToken, IMPLICIT_MUL, format_tokens

logger = logging.getLogger(__name__)


class Assoc(Enum):
    LEFT = 0
    RIGHT = 1


OperatorInfo = namedtuple('OperatorInfo', ['prec', 'assoc'])

# Precedence and associativity, keyed by (tag, symbol).
OPERATORS = MappingProxyType({
    (Tag.OPERATOR, '^'): OperatorInfo(5, Assoc.RIGHT),
    (Tag.UNARY, '+'): OperatorInfo(4, Assoc.RIGHT),
    (Tag.UNARY, '-'): OperatorInfo(4, Assoc.RIGHT),
    (Tag.OPERATOR, IMPLICIT_MUL): OperatorInfo(3, Assoc.LEFT),
    (Tag.OPERATOR, '*'): OperatorInfo(2, Assoc.LEFT),
    (Tag.OPERATOR, '/'): OperatorInfo(2, Assoc.LEFT),
    (Tag.OPERATOR, '%'): OperatorInfo(2, Assoc.LEFT),
    (Tag.OPERATOR, '+'): OperatorInfo(1, Assoc.LEFT),
    (Tag.OPERATOR, '-'): OperatorInfo(1, Assoc.LEFT),
})


def operator_info(token):
    return OPERATORS[(token.tag, token.value)]


class ShuntingYard:
    """Rearranges an infix token list into RPN.

    The only tokens ever left on the operator stack are operators, signs,
    open parentheses and names bound to functions. A function is emitted
    when the parenthesis following it closes, together with the number of
    arguments written inside.
    """
    def __init__(self, tokens, env):
        self.tokens = tokens
        self.env = env
        self.output = []
        self.stack = []
        # commas seen so far inside each open parenthesis on the stack
        self.commas = []
        self.index = 0
        self.handlers = {
            Tag.NUMBER: self.on_number,
            Tag.IDENT: self.on_ident,
            Tag.SEPARATOR: self.on_separator,
            Tag.UNARY: self.on_unary,
            Tag.OPERATOR: self.on_operator,
            Tag.PAREN_OPEN: self.on_paren_open,
            Tag.PAREN_CLOSE: self.on_paren_close,
        }
        assert set(self.handlers) == set(Tag)
    def run(self):
        for i, token in enumerate(self.tokens):
            self.index = i
            self.handlers[token.tag](token)
        while self.stack:
            top = self.stack.pop()
            if top.tag is Tag.PAREN_OPEN:
                raise SyntaxException("mismatched parentheses")
            self.output.append(top)
        return self.output
    def previous_is(self, *tags):
        return self.index > 0 and self.tokens[self.index - 1].tag in tags
    def top(self):
        return self.stack[-1] if self.stack else None
    def implicit_multiplication(self, token):
        if self.previous_is(Tag.NUMBER):
            self.push_operator(OperatorToken(IMPLICIT_MUL, token.offset))
    def push_operator(self, token):
        info = operator_info(token)
        while self.stack:
            top = self.top()
            if top.tag not in (Tag.OPERATOR, Tag.UNARY):
                break
            top_info = operator_info(top)
            if info.assoc is Assoc.LEFT and info.prec <= top_info.prec or \
                    info.assoc is Assoc.RIGHT and info.prec < top_info.prec:
                self.output.append(self.stack.pop())
            else:
                break
        self.stack.append(token)
    def on_number(self, token):
        self.output.append(token)
    def on_ident(self, token):
        self.implicit_multiplication(token)
        if lookup(self.env, token.name).is_function:
            self.stack.append(token)
        else:
            self.output.append(token)
    def on_separator(self, token):
        while True:
            top = self.top()
            if top is None:
                raise SyntaxException("bad comma")
            if top.tag is Tag.PAREN_OPEN:
                break
            self.output.append(self.stack.pop())
        if self.previous_is(Tag.SEPARATOR, Tag.PAREN_OPEN):
            raise SyntaxException("bad comma")
        self.commas[-1] += 1
    def on_unary(self, token):
        self.stack.append(token)
    def on_operator(self, token):
        self.push_operator(token)
    def on_paren_open(self, token):
        self.implicit_multiplication(token)
        self.stack.append(token)
        self.commas.append(0)
    def on_paren_close(self, token):
        if self.previous_is(Tag.SEPARATOR):
            raise SyntaxException("bad comma")
        while True:
            top = self.top()
            if top is None:
                raise SyntaxException("mismatched parentheses")
            self.stack.pop()
            if top.tag is Tag.PAREN_OPEN:
                break
            self.output.append(top)
        commas = self.commas.pop()
        argc = 0 if self.previous_is(Tag.PAREN_OPEN) else commas + 1
        top = self.top()
        if top is not None and top.tag is Tag.IDENT:
            self.output.append(self.stack.pop().called_with(argc))


def to_rpn(tokens, env=None):
    rpn = ShuntingYard(tokens, env).run()
    logger.debug("rpn: %s", format_tokens(rpn))
    return rpn
