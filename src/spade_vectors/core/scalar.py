"""
Scalar — Числовая capability для компонент вектора

Скалярный тип не реализуется этой библиотекой, а потребляется:
подходит любой тип с операциями + - * /, упорядочиванием и нулём.
На практике: int, float, fractions.Fraction, decimal.Decimal, numpy scalars.

Ноль получается как scalar_type(0) — все перечисленные типы это поддерживают.
"""

from typing import Any, Final, Protocol, TypeVar, runtime_checkable

# Скалярный тип по умолчанию для bindings без явной специализации.
# int(0) — точный аддитивный ноль для int, float, Fraction, Decimal и numpy scalars
DEFAULT_SCALAR_TYPE: Final[type] = int


@runtime_checkable
class SpadeNum(Protocol):
    """
    Протокол скалярного типа.

    Требования: арифметика (+ - * /) и строгий порядок (<).
    Порядок предполагается тотальным (NaN не обрабатывается специально).
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> Any: ...


S = TypeVar("S")


def zero(scalar_type: type) -> Any:
    """
    Аддитивный ноль скалярного типа.

    Examples:
        >>> zero(int)
        0
        >>> zero(float)
        0.0
    """
    return scalar_type(0)


def zero_like(value: S) -> S:
    """
    Ноль того же типа, что и value.

    Examples:
        >>> zero_like(Fraction(1, 3))  # doctest: +SKIP
        Fraction(0, 1)
    """
    return type(value)(0)


def min_inline(a: S, b: S) -> S:
    """Минимум двух скаляров; при равенстве возвращается b."""
    return a if a < b else b


def max_inline(a: S, b: S) -> S:
    """Максимум двух скаляров; при равенстве возвращается b."""
    return a if a > b else b


def is_spade_num(value: object) -> bool:
    """
    Проверка, годится ли значение как компонента вектора.

    bool формально поддерживает арифметику, но координатой не является.
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, SpadeNum)
