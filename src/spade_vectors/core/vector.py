"""
VectorN — Capability вектора фиксированной размерности

Минимальный интерфейс, который реализует каждый тип вектора:
- dimensions()        — фиксированное число компонент (функция типа, не экземпляра)
- from_value(value)   — вектор, все компоненты которого равны value
- nth(index)          — чтение компоненты
- set_nth(index, v)   — запись компоненты (мутирует только сам вектор)

Всё остальное (арифметика, свёртки, dot, min/max) наследуется из
VectorNExtensions и работает для любой реализации автоматически.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. dimensions() ∈ SUPPORTED_DIMENSIONS и равно числу адресуемых позиций
2. Валидны только индексы 0 <= index < dimensions(); иначе ComponentIndexError
3. Отрицательные индексы никогда не "заворачиваются" с конца
4. Каждый вектор владеет своими компонентами (value semantics)

Чтобы подключить собственный тип вектора:

    class Point3(ThreeDimensional):
        scalar_type = float

        @classmethod
        def dimensions(cls) -> int:
            return 3
        ...

и проверить его через contracts.check_vector_type(Point3).
"""

import operator
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, ClassVar, Final, Generic, Iterable, Iterator, Tuple, TypeVar

from spade_vectors.core.errors import ComponentIndexError, DimensionMismatchError
from spade_vectors.core.extensions import VectorNExtensions
from spade_vectors.core.scalar import DEFAULT_SCALAR_TYPE

# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

# Поддерживаемые фиксированные размерности
SUPPORTED_DIMENSIONS: Final[Tuple[int, ...]] = (2, 3, 4)

S = TypeVar("S")


# =============================================================================
# VECTOR CAPABILITY
# =============================================================================


class VectorN(VectorNExtensions, ABC, Generic[S]):
    """
    Абстракция над векторами с фиксированным числом измерений.

    Алгоритмы принимают любой VectorN (или маркер TwoDimensional /
    ThreeDimensional) и не зависят от конкретного представления.
    """

    # Ассоциированный скалярный тип (используется для нуля в new())
    scalar_type: ClassVar[type] = DEFAULT_SCALAR_TYPE

    # Векторы мутабельны через set_nth
    __hash__ = None  # type: ignore[assignment]

    # =========================================================================
    # ПРИМИТИВЫ (обязательны для реализации)
    # =========================================================================

    @classmethod
    @abstractmethod
    def dimensions(cls) -> int:
        """Фиксированное число измерений типа."""

    @classmethod
    @abstractmethod
    def from_value(cls, value: S) -> "VectorN[S]":
        """Вектор, все компоненты которого равны value."""

    @abstractmethod
    def nth(self, index: int) -> S:
        """Компонента с индексом index."""

    @abstractmethod
    def set_nth(self, index: int, value: S) -> None:
        """Запись компоненты с индексом index."""

    # =========================================================================
    # ПРОВЕРКА ИНДЕКСА
    # =========================================================================

    @classmethod
    def check_index(cls, index: Any) -> int:
        """
        Fail-fast проверка индекса компоненты.

        Реализации вызывают её в nth()/set_nth() перед обращением к хранилищу.

        Args:
            index: Индекс (int или объект с __index__)

        Returns:
            Индекс как int

        Raises:
            ComponentIndexError: если индекс не целый или вне [0, dimensions())
        """
        dimensions = cls.dimensions()
        if isinstance(index, bool):
            raise ComponentIndexError(index, dimensions)
        try:
            position = operator.index(index)
        except TypeError:
            raise ComponentIndexError(index, dimensions) from None

        if not 0 <= position < dimensions:
            raise ComponentIndexError(index, dimensions)
        return position

    # =========================================================================
    # КОНСТРУИРОВАНИЕ
    # =========================================================================

    @classmethod
    def from_components(cls, components: Iterable[S]) -> "VectorN[S]":
        """
        Вектор из последовательности ровно dimensions() скаляров.

        Raises:
            DimensionMismatchError: если число значений не совпадает
        """
        values = list(components)
        if len(values) != cls.dimensions():
            raise DimensionMismatchError(cls.dimensions(), len(values), context=cls.__name__)

        result = cls.new()
        for i, value in enumerate(values):
            result.set_nth(i, value)
        return result

    @classmethod
    def with_scalar(cls, scalar_type: type) -> type:
        """
        Специализация типа вектора под другой скалярный тип.

        Возвращает кэшированный подкласс, у которого переопределён только
        scalar_type; повторный вызов с тем же типом возвращает тот же класс.

        Examples:
            >>> IntVector3 = ArrayVector3.with_scalar(int)  # doctest: +SKIP
            >>> IntVector3.new()  # doctest: +SKIP
            ArrayVector3[int](0, 0, 0)
        """
        if scalar_type is cls.scalar_type:
            return cls
        return _specialize(cls, scalar_type)

    def copy(self) -> "VectorN[S]":
        """Независимая копия вектора."""
        return type(self).from_components(self.components())

    # =========================================================================
    # ДОСТУП
    # =========================================================================

    def components(self) -> Tuple[S, ...]:
        """Все компоненты в порядке индексов."""
        return tuple(self.nth(i) for i in range(self.dimensions()))

    def __getitem__(self, index: int) -> S:
        return self.nth(index)

    def __setitem__(self, index: int, value: S) -> None:
        self.set_nth(index, value)

    def __iter__(self) -> Iterator[S]:
        for i in range(self.dimensions()):
            yield self.nth(i)

    def __len__(self) -> int:
        return self.dimensions()

    # =========================================================================
    # РАВЕНСТВО И ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        """Структурное равенство: та же размерность и равные компоненты."""
        if not isinstance(other, VectorN):
            return NotImplemented
        if other.dimensions() != self.dimensions():
            return False
        return all(bool(l == r) for l, r in zip(self.components(), other.components()))

    def __repr__(self) -> str:
        values = ", ".join(repr(value) for value in self.components())
        return f"{type(self).__name__}({values})"


@lru_cache(maxsize=None)
def _specialize(cls: type, scalar_type: type) -> type:
    name = f"{cls.__name__}[{scalar_type.__name__}]"
    return type(cls)(name, (cls,), {"scalar_type": scalar_type, "__module__": cls.__module__})
