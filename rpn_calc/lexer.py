import re

from .errors import LexException
from .tokens import Tag, NumberToken, IdentToken, OperatorToken, UnaryToken, PunctuationToken

OPERATOR_SYMBOLS = '+-*/%^'
SIGN_SYMBOLS = '+-'

PUNCTUATION = {'(': Tag.PAREN_OPEN, ')': Tag.PAREN_CLOSE, ',': Tag.SEPARATOR}

# Tags after which + and - are signs rather than binary operators.
SIGN_CONTEXT = {Tag.PAREN_OPEN, Tag.SEPARATOR, Tag.OPERATOR, Tag.UNARY}

NUMBER_PATTERN = re.compile(r'([0-9]+(\.[0-9]*)?|\.[0-9]*)([eE][-+]?[0-9]+)?')
DANGLING_EXPONENT = re.compile(r'[eE][-+]')


class Position:
    def __init__(self, text, index):
        self._text = text
        self._index = index

    @classmethod
    def default_position(cls, text):
        return cls(text, 0)

    @property
    def index(self):
        return self._index

    @property
    def cp(self):
        return -1 if self._index == len(self._text) else self._text[self._index]

    @property
    def is_white_space(self):
        return self.cp in (' ', '\t')

    @property
    def is_ident_start(self):
        cp = self.cp
        return cp != -1 and (cp.isalpha() or cp == '_')

    @property
    def is_ident_part(self):
        cp = self.cp
        return cp != -1 and (cp.isalpha() or cp.isdecimal() or cp in '_.')

    @property
    def is_number_start(self):
        cp = self.cp
        return cp != -1 and ('0' <= cp <= '9' or cp == '.')

    def advance(self, count):
        return Position(self._text, min(self._index + count, len(self._text)))

    def __next__(self):
        return self.advance(1)


def scan_number(text, start):
    m = NUMBER_PATTERN.match(text, start.index)
    literal = m.group(0)
    if m.group(3) is None and DANGLING_EXPONENT.match(text, m.end()):
        raise LexException("bad number '%s'" % text[start.index:m.end() + 2], text, start.index)
    try:
        number = float(literal)
    except ValueError:
        raise LexException("bad number '%s'" % literal, text, start.index) from None
    return NumberToken(number, start.index), start.advance(len(literal))


def scan(text):
    """Yield the tokens of ``text`` from left to right.

    Whether + or - is a sign is decided by the token before it, never by
    what follows.
    """
    cur = Position.default_position(text)
    prev = None
    while cur.cp != -1:
        if cur.is_white_space:
            cur = next(cur)
            continue
        start = cur
        if cur.is_ident_start:
            cur = next(cur)
            while cur.is_ident_part:
                cur = next(cur)
            token = IdentToken(text[start.index:cur.index], start.index)
        elif cur.is_number_start:
            token, cur = scan_number(text, start)
        elif cur.cp in OPERATOR_SYMBOLS:
            cur = next(cur)
            if start.cp in SIGN_SYMBOLS and (prev is None or prev.tag in SIGN_CONTEXT):
                token = UnaryToken(start.cp, start.index)
            else:
                token = OperatorToken(start.cp, start.index)
        elif cur.cp in PUNCTUATION:
            cur = next(cur)
            token = PunctuationToken(PUNCTUATION[start.cp], start.index)
        else:
            raise LexException("bad character '%s'" % cur.cp, text, cur.index)
        prev = token
        yield token


def tokenize(text):
    return list(scan(text))
