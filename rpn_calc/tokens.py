from abc import ABC
from enum import Enum, auto

# Symbol of the multiplication inserted between adjacent operands, as in 2x or 2(3+1).
# The lexer never produces it.
IMPLICIT_MUL = '·'

COMBINING_LOW_LINE = '\u0332'


class Tag(Enum):
    NUMBER = auto()
    IDENT = auto()
    OPERATOR = auto()
    UNARY = auto()
    PAREN_OPEN = auto()
    PAREN_CLOSE = auto()
    SEPARATOR = auto()


class Token(ABC):
    __slots__ = ('_tag', '_offset', '_value')
    def __init__(self, tag, offset, value=None):
        object.__setattr__(self, '_tag', tag)
        object.__setattr__(self, '_offset', offset)
        object.__setattr__(self, '_value', value)
    def __setattr__(self, name, value):
        raise AttributeError("tokens are immutable")
    @property
    def tag(self):
        return self._tag
    @property
    def offset(self):
        return self._offset
    @property
    def value(self):
        return self._value
    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self._tag == other._tag and self._value == other._value
    def __hash__(self):
        return hash((self._tag, self._value))
    def __str__(self):
        return str(self._value)
    def __repr__(self):
        return '%s(%r @ %d)' % (self._tag.name, self._value, self._offset)


class NumberToken(Token):
    __slots__ = ()
    def __init__(self, number, offset=0):
        super().__init__(Tag.NUMBER, offset, float(number))
    def __str__(self):
        return format_number(self._value)


class IdentToken(Token):
    """A variable or function name.

    In RPN output a function name also remembers how many arguments were
    written between its parentheses; ``argc`` is None for a bare name.
    """
    __slots__ = ('_argc',)
    def __init__(self, name, offset=0, argc=None):
        super().__init__(Tag.IDENT, offset, name)
        object.__setattr__(self, '_argc', argc)
    @property
    def name(self):
        return self._value
    @property
    def argc(self):
        return self._argc
    def called_with(self, argc):
        return IdentToken(self._value, self._offset, argc)


class OperatorToken(Token):
    __slots__ = ()
    def __init__(self, symbol, offset=0):
        super().__init__(Tag.OPERATOR, offset, symbol)
    @property
    def symbol(self):
        return self._value


class UnaryToken(Token):
    __slots__ = ()
    def __init__(self, symbol, offset=0):
        super().__init__(Tag.UNARY, offset, symbol)
    @property
    def symbol(self):
        return self._value
    def __str__(self):
        return self._value + COMBINING_LOW_LINE


class PunctuationToken(Token):
    __slots__ = ()
    domain_tags = {Tag.PAREN_OPEN: '(', Tag.PAREN_CLOSE: ')', Tag.SEPARATOR: ','}
    def __init__(self, tag, offset=0):
        assert tag in PunctuationToken.domain_tags
        super().__init__(tag, offset)
    def __str__(self):
        return PunctuationToken.domain_tags[self._tag]


def format_number(x):
    if x.is_integer() and abs(x) < 1e16:
        return str(int(x))
    return repr(x)


def format_tokens(tokens):
    return ' '.join(str(t) for t in tokens)
