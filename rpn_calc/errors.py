"""Exceptions raised while tokenizing, reordering and evaluating expressions."""

PREFIX = 'calc: '


class CalcException(Exception):
    def __init__(self, message, expression=None, offset=None):
        super(CalcException, self).__init__(message)
        self.message = message
        self.expression = expression
        self.offset = offset
    def __str__(self):
        if self.expression is None or self.offset is None:
            return PREFIX + self.message
        margin = ' ' * len(PREFIX)
        return "%s%s\n%s%s\n%s%s^" % (PREFIX, self.message, margin, self.expression, margin, ' ' * self.offset)


class LexException(CalcException):
    pass


class SyntaxException(CalcException):
    pass


class BindingException(CalcException):
    pass


class EvaluationException(CalcException):
    pass


class ArityException(EvaluationException):
    pass
