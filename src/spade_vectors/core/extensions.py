"""
Vector Extensions — Производные операции над любым VectorN

Mixin, который VectorN наследует целиком: каждая реализация capability
получает все операции автоматически, без переопределения per-type.

Все методы выражены ТОЛЬКО через примитивы VectorN:
    dimensions(), from_value(), nth(), set_nth()
(плюс copy(), который базовый класс сам выражает через эти примитивы).

ИНВАРИАНТЫ:
1. Ни одна операция не мутирует self или rhs — результат всегда новый вектор
2. Обход компонент всегда в порядке индексов 0, 1, ..., dimensions() - 1
3. self и rhs имеют один тип; размерность на границе не проверяется
4. map() в другой тип проверяет совпадение размерностей
"""

from typing import Any, Callable, Optional, TypeVar

from spade_vectors.core.errors import DimensionMismatchError
from spade_vectors.core.scalar import max_inline, min_inline, zero, zero_like

T = TypeVar("T")


class VectorNExtensions:
    """Производные операции; self — экземпляр VectorN."""

    # =========================================================================
    # КОНСТРУИРОВАНИЕ
    # =========================================================================

    @classmethod
    def new(cls):
        """Вектор со всеми компонентами, равными нулю скалярного типа."""
        return cls.from_value(zero(cls.scalar_type))

    # =========================================================================
    # КОМПОНЕНТНАЯ АРИФМЕТИКА
    # =========================================================================

    def add(self, rhs):
        """Сложение двух векторов."""
        return self.component_wise(rhs, lambda l, r: l + r)

    def sub(self, rhs):
        """Вычитание двух векторов."""
        return self.component_wise(rhs, lambda l, r: l - r)

    def mul(self, scalar):
        """Умножение на скаляр."""
        return self.map(lambda x: x * scalar)

    def div(self, scalar):
        """
        Деление на скаляр.

        Деление на ноль целиком определяется скалярным типом
        (int/float → ZeroDivisionError, numpy → inf/nan).
        """
        return self.map(lambda x: x / scalar)

    def component_wise(self, rhs, f: Callable[[Any, Any], Any]):
        """
        Применение бинарной операции покомпонентно.

        result[i] = f(self[i], rhs[i]) для i = 0 .. dimensions() - 1.
        Все бинарные арифметические операции — частные случаи.

        Args:
            rhs: Вектор того же типа
            f: Бинарная функция над скалярами

        Returns:
            Новый вектор типа self
        """
        result = self.copy()
        for i in range(self.dimensions()):
            result.set_nth(i, f(self.nth(i), rhs.nth(i)))
        return result

    def map(self, f: Callable[[Any], Any], target: Optional[type] = None):
        """
        Применение унарной операции ко всем компонентам.

        Результат строится через target.new(), поэтому target может быть
        другим типом вектора (например, ArrayVector3 → NumpyVector3).

        Args:
            f: Унарная функция над скалярами
            target: Тип результата (default: тип self)

        Returns:
            Новый вектор типа target

        Raises:
            DimensionMismatchError: если target.dimensions() != self.dimensions()
        """
        target = type(self) if target is None else target
        if target.dimensions() != self.dimensions():
            raise DimensionMismatchError(
                target.dimensions(),
                self.dimensions(),
                context=f"map {type(self).__name__} -> {target.__name__}",
            )

        result = target.new()
        for i in range(self.dimensions()):
            result.set_nth(i, f(self.nth(i)))
        return result

    def min_vec(self, rhs):
        """Покомпонентный минимум этого и другого вектора."""
        return self.component_wise(rhs, min_inline)

    def max_vec(self, rhs):
        """Покомпонентный максимум этого и другого вектора."""
        return self.component_wise(rhs, max_inline)

    # =========================================================================
    # СВЁРТКИ И ПРЕДИКАТЫ
    # =========================================================================

    def fold(self, initial: T, f: Callable[[T, Any], T]) -> T:
        """
        Левая свёртка по компонентам в порядке индексов.

        Порядок важен для некоммутативных f:
            fold(acc, f) = f(...f(f(acc, v[0]), v[1])..., v[n-1])

        Examples:
            >>> ArrayVector3(1, 2, 3).fold([], lambda acc, x: acc + [x])  # doctest: +SKIP
            [1, 2, 3]
        """
        acc = initial
        for i in range(self.dimensions()):
            acc = f(acc, self.nth(i))
        return acc

    def all_comp_wise(self, rhs, predicate: Callable[[Any, Any], bool]) -> bool:
        """
        Проверка, что предикат выполняется для всех пар компонент.

        Обход по возрастанию индекса; на первой неудаче — short-circuit False.
        """
        for i in range(self.dimensions()):
            if not predicate(self.nth(i), rhs.nth(i)):
                return False
        return True

    def dot(self, rhs):
        """
        Скалярное произведение: покомпонентное умножение + сумма от нуля.

        Ноль берётся из типа самих произведений, а не из scalar_type:
        Fraction, Decimal и большие int остаются точными.
        """
        products = self.component_wise(rhs, lambda l, r: l * r)
        return products.fold(zero_like(products.nth(0)), lambda acc, value: acc + value)

    def length2(self):
        """
        Квадрат евклидовой длины.

        Корень не извлекается: результат остаётся точным в арифметике
        скалярного типа (int, Fraction) и не требует sqrt от скаляра.
        """
        return self.dot(self)
