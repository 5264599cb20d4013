"""
Array Bindings — VectorN для массивов фиксированной длины 2, 3, 4

Компоненты хранятся в собственном list фиксированной длины.
Binding не добавляет поведения сверх VectorN: вся арифметика
приходит из VectorNExtensions, cross() — из ThreeDimensional.
"""

from typing import Any, List, Sequence

from spade_vectors.core.dimensions import ThreeDimensional, TwoDimensional
from spade_vectors.core.errors import DimensionMismatchError
from spade_vectors.core.vector import VectorN


class ArrayVector(VectorN):
    """
    Общая часть array bindings.

    Конструктор принимает ровно dimensions() позиционных скаляров:
        ArrayVector3(1, 2, 3)
    """

    def __init__(self, *components: Any):
        if len(components) != self.dimensions():
            raise DimensionMismatchError(
                self.dimensions(), len(components), context=type(self).__name__
            )
        self._components: List[Any] = list(components)

    @classmethod
    def from_value(cls, value: Any) -> "ArrayVector":
        return cls(*([value] * cls.dimensions()))

    @classmethod
    def from_sequence(cls, values: Sequence[Any]) -> "ArrayVector":
        """Вектор из list/tuple нужной длины."""
        return cls(*values)

    def nth(self, index: int) -> Any:
        return self._components[self.check_index(index)]

    def set_nth(self, index: int, value: Any) -> None:
        self._components[self.check_index(index)] = value

    def copy(self) -> "ArrayVector":
        return type(self)(*self._components)

    def to_list(self) -> List[Any]:
        """Компоненты как новый list."""
        return list(self._components)


class ArrayVector2(ArrayVector, TwoDimensional):
    """Массив из 2 компонент."""

    @classmethod
    def dimensions(cls) -> int:
        return 2


class ArrayVector3(ArrayVector, ThreeDimensional):
    """Массив из 3 компонент."""

    @classmethod
    def dimensions(cls) -> int:
        return 3


class ArrayVector4(ArrayVector):
    """Массив из 4 компонент."""

    @classmethod
    def dimensions(cls) -> int:
        return 4
