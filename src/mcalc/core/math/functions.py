"""
Functions — Generic Dispatch over Number Types

Каждая функция выбирает реализацию по типу аргумента:
- int / float → модуль math (результат float)
- Component → точные десятичные функции
- BigNum → гиперкомплексные функции

Для неподдерживаемого типа поднимается TypeError.
"""

import math
import operator
from functools import singledispatch
from typing import Callable, Optional

from mcalc.core.domain.context import MathContext
from mcalc.core.math import circular, exponential, hyperbolic, hypercomplex
from mcalc.core.math.bignum import BigNum
from mcalc.core.math.component import Component


def _numeric_function(
    name: str,
    native: Callable,
    decimal: Callable,
    hyper: Optional[Callable] = None,
) -> Callable:
    @singledispatch
    def dispatch(x, context: Optional[MathContext] = None):
        raise TypeError(f"Operation {name} not defined for object of type {type(x).__name__}")

    @dispatch.register(int)
    @dispatch.register(float)
    def _native(x, context: Optional[MathContext] = None):
        return native(x)

    dispatch.register(Component, decimal)
    if hyper is not None:
        dispatch.register(BigNum, hyper)

    dispatch.__name__ = name
    dispatch.__qualname__ = name
    dispatch.__doc__ = f"{name}(x, context=None) для int, float, Component и BigNum."
    return dispatch


def _component_neg(x: Component, context: Optional[MathContext] = None) -> Component:
    return x.neg()


def _component_abs(x: Component, context: Optional[MathContext] = None) -> Component:
    return x.abs()


def _component_floor(x: Component, context: Optional[MathContext] = None) -> Component:
    return x.floor()


def _component_ceil(x: Component, context: Optional[MathContext] = None) -> Component:
    return x.ceil()


def _bignum_neg(x: BigNum, context: Optional[MathContext] = None) -> BigNum:
    return x.neg()


def _bignum_abs(x: BigNum, context: Optional[MathContext] = None) -> BigNum:
    return x.abs(context)


neg = _numeric_function("neg", operator.neg, _component_neg, _bignum_neg)
abs = _numeric_function("abs", abs, _component_abs, _bignum_abs)
floor = _numeric_function("floor", math.floor, _component_floor)
ceil = _numeric_function("ceil", math.ceil, _component_ceil)

exp = _numeric_function("exp", math.exp, exponential.exp, hypercomplex.exp)
ln = _numeric_function("ln", math.log, exponential.ln, hypercomplex.ln)
log = _numeric_function("log", math.log10, exponential.log, hypercomplex.log)
sqrt = _numeric_function("sqrt", math.sqrt, exponential.sqrt, hypercomplex.sqrt)

sin = _numeric_function("sin", math.sin, circular.sin, hypercomplex.sin)
cos = _numeric_function("cos", math.cos, circular.cos, hypercomplex.cos)
tan = _numeric_function("tan", math.tan, circular.tan, hypercomplex.tan)
asin = _numeric_function("asin", math.asin, circular.asin, hypercomplex.asin)
acos = _numeric_function("acos", math.acos, circular.acos, hypercomplex.acos)
atan = _numeric_function("atan", math.atan, circular.atan, hypercomplex.atan)

sinh = _numeric_function("sinh", math.sinh, hyperbolic.sinh, hypercomplex.sinh)
cosh = _numeric_function("cosh", math.cosh, hyperbolic.cosh, hypercomplex.cosh)
tanh = _numeric_function("tanh", math.tanh, hyperbolic.tanh, hypercomplex.tanh)
asinh = _numeric_function("asinh", math.asinh, hyperbolic.asinh, hypercomplex.asinh)
acosh = _numeric_function("acosh", math.acosh, hyperbolic.acosh, hypercomplex.acosh)
atanh = _numeric_function("atanh", math.atanh, hyperbolic.atanh, hypercomplex.atanh)


def atan2(y, x, context: Optional[MathContext] = None):
    """
    atan2(y, x): math.atan2 для int/float, точный вариант для Component.

    Raises:
        TypeError: Для других типов
    """
    if isinstance(y, (int, float)) and isinstance(x, (int, float)):
        return math.atan2(y, x)
    if isinstance(y, (Component, int, float)) and isinstance(x, (Component, int, float)):
        return circular.atan2(y, x, context)
    raise TypeError(
        f"Operation atan2 not defined for objects of type {type(y).__name__}, {type(x).__name__}"
    )


def power(base, exponent, context: Optional[MathContext] = None):
    """Степень: ** для int/float, exponential.power для Component, hypercomplex.power для BigNum."""
    if isinstance(base, BigNum) or isinstance(exponent, BigNum):
        return hypercomplex.power(base, exponent, context)
    if isinstance(base, Component) or isinstance(exponent, Component):
        return exponential.power(base, exponent, context)
    if isinstance(base, (int, float)) and isinstance(exponent, (int, float)):
        return base**exponent
    raise TypeError(
        f"Operation pow not defined for objects of type {type(base).__name__}, {type(exponent).__name__}"
    )
