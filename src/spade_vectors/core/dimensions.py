"""
Dimensional Markers — TwoDimensional / ThreeDimensional

Маркеры-уточнения VectorN без runtime-состояния:
- TwoDimensional   — тип имеет ровно 2 компоненты (без доп. методов)
- ThreeDimensional — тип имеет ровно 3 компоненты, добавляет cross()

Некоторые структуры данных работают только с 2D (планарные) или 3D входами:
маркер позволяет отсечь неподходящие векторы на границе интерфейса.

Размерность проверяется ОДИН раз — при создании конкретного класса
(__init_subclass__), дальше маркеру доверяют.
"""

import logging

from spade_vectors.core.errors import DimensionMismatchError
from spade_vectors.core.vector import VectorN

logger = logging.getLogger(__name__)


def _check_marker_dimensions(cls: type, expected: int, marker: str) -> None:
    """Проверка, что конкретный класс с маркером имеет нужную размерность."""
    dimensions = cls.dimensions
    if getattr(dimensions, "__isabstractmethod__", False):
        # dimensions() ещё не реализован — проверка отложена до подкласса
        return

    actual = dimensions()
    if actual != expected:
        raise DimensionMismatchError(
            expected, actual, context=f"{cls.__name__} marked {marker}"
        )
    logger.debug("%s verified as %s", cls.__name__, marker)


# =============================================================================
# TWO DIMENSIONAL
# =============================================================================


class TwoDimensional(VectorN):
    """
    Двумерный вектор.

    Некоторые структуры данных работают только с 2D векторами;
    маркер гарантирует, что передаются только такие.
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        _check_marker_dimensions(cls, 2, "TwoDimensional")


# =============================================================================
# THREE DIMENSIONAL
# =============================================================================


class ThreeDimensional(VectorN):
    """
    Трёхмерный вектор.

    Некоторые алгоритмы работают только с 3D векторами;
    маркер гарантирует это и открывает векторное произведение.
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        _check_marker_dimensions(cls, 3, "ThreeDimensional")

    def cross(self, other: "ThreeDimensional") -> "ThreeDimensional":
        """
        Векторное произведение (правая тройка).

        Формулы:
            r[0] = a[1]*b[2] - a[2]*b[1]
            r[1] = a[2]*b[0] - a[0]*b[2]
            r[2] = a[0]*b[1] - a[1]*b[0]

        Examples:
            >>> ArrayVector3(1, 0, 0).cross(ArrayVector3(0, 1, 0))  # doctest: +SKIP
            ArrayVector3(0, 0, 1)
        """
        result = type(self).new()
        result.set_nth(0, self.nth(1) * other.nth(2) - self.nth(2) * other.nth(1))
        result.set_nth(1, self.nth(2) * other.nth(0) - self.nth(0) * other.nth(2))
        result.set_nth(2, self.nth(0) * other.nth(1) - self.nth(1) * other.nth(0))
        return result


# =============================================================================
# GUARDS
# =============================================================================


def require_two_dimensional(vector: object) -> TwoDimensional:
    """
    Guard для алгоритмов, принимающих только 2D векторы.

    Raises:
        TypeError: если vector не помечен TwoDimensional
    """
    if not isinstance(vector, TwoDimensional):
        raise TypeError(
            f"Expected a TwoDimensional vector, got {type(vector).__name__}"
        )
    return vector


def require_three_dimensional(vector: object) -> ThreeDimensional:
    """
    Guard для алгоритмов, принимающих только 3D векторы.

    Raises:
        TypeError: если vector не помечен ThreeDimensional
    """
    if not isinstance(vector, ThreeDimensional):
        raise TypeError(
            f"Expected a ThreeDimensional vector, got {type(vector).__name__}"
        )
    return vector
