"""Values and functions a caller can bind to identifiers.

An environment is any mapping from name to a binding. Plain ``int``,
``float`` and callables are accepted too and classified on lookup, so
``{'x': 4, 'inc': lambda x: x + 1}`` works as is. The arity of a plain
callable is read from its signature when the binding is made; wrap
callables whose signature cannot be inspected (some builtins) in
``Function(fn, arity)``.
"""
from abc import ABC, abstractmethod
from inspect import signature, Parameter
from typing import Callable

from .errors import BindingException

POSITIONAL = (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD)


class Binding(ABC):
    is_function = False
    @property
    @abstractmethod
    def value(self) -> float:
        ...


class IntegerConstant(Binding):
    def __init__(self, value):
        self._value = int(value)
    @property
    def value(self):
        return float(self._value)
    def __eq__(self, other):
        return isinstance(other, IntegerConstant) and self._value == other._value
    def __repr__(self):
        return 'IntegerConstant(%d)' % self._value


class FloatConstant(Binding):
    def __init__(self, value):
        self._value = float(value)
    @property
    def value(self):
        return self._value
    def __eq__(self, other):
        return isinstance(other, FloatConstant) and self._value == other._value
    def __repr__(self):
        return 'FloatConstant(%r)' % self._value


class Function(Binding):
    is_function = True
    def __init__(self, fn, arity=None):
        if not isinstance(fn, Callable):
            raise BindingException("%r is not callable" % (fn,))
        self.fn = fn
        self.arity = arity if arity is not None else infer_arity(fn)
        if self.arity < 0:
            raise BindingException("negative arity %d" % self.arity)
    @property
    def value(self):
        raise BindingException("a function has no value")
    def __call__(self, *args):
        assert len(args) == self.arity
        return float(self.fn(*args))
    def __repr__(self):
        return 'Function(%r, %d)' % (self.fn, self.arity)


def infer_arity(fn):
    try:
        parameters = signature(fn).parameters.values()
    except (TypeError, ValueError):
        raise BindingException("cannot read the signature of %r, give its arity explicitly" % (fn,)) from None
    arity = 0
    for p in parameters:
        if p.kind == Parameter.VAR_POSITIONAL:
            raise BindingException("%r takes variable arguments, give its arity explicitly" % (fn,))
        if p.kind in POSITIONAL and p.default is Parameter.empty:
            arity += 1
    return arity


def as_binding(value):
    if isinstance(value, Binding):
        return value
    # bool is an int subclass but never a number here
    if isinstance(value, bool):
        raise BindingException("unsupported binding %r" % (value,))
    if isinstance(value, int):
        return IntegerConstant(value)
    if isinstance(value, float):
        return FloatConstant(value)
    if isinstance(value, Callable):
        return Function(value)
    raise BindingException("unsupported binding %r" % (value,))


def lookup(env, name):
    if env is None or name not in env:
        raise BindingException("'%s' not provided" % name)
    return as_binding(env[name])
