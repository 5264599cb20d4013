"""
NumPy Bindings — VectorN для numpy.ndarray формы (2,), (3,), (4,)

Вектор владеет собственным 1-D массивом: from_array() и to_array()
всегда копируют, чтобы экземпляры не делили мутабельное хранилище.

scalar_type здесь — numpy dtype class (default: numpy.float64);
специализация через NumpyVector3.with_scalar(numpy.int64).
"""

from typing import Any, Final

import numpy as np
from numpy.typing import ArrayLike, NDArray

from spade_vectors.core.dimensions import ThreeDimensional, TwoDimensional
from spade_vectors.core.errors import DimensionMismatchError
from spade_vectors.core.vector import VectorN

# dtype по умолчанию для компонент
NUMPY_DEFAULT_DTYPE: Final[type] = np.float64


class NumpyVector(VectorN):
    """
    Общая часть numpy bindings.

    Конструктор принимает ровно dimensions() позиционных скаляров,
    значения приводятся к scalar_type:
        NumpyVector3(1.0, 2.0, 3.0)
    """

    scalar_type = NUMPY_DEFAULT_DTYPE

    def __init__(self, *components: Any):
        if len(components) != self.dimensions():
            raise DimensionMismatchError(
                self.dimensions(), len(components), context=type(self).__name__
            )
        self._array: NDArray[Any] = np.array(components, dtype=self.scalar_type)

    @classmethod
    def from_value(cls, value: Any) -> "NumpyVector":
        return cls.from_array(np.full(cls.dimensions(), value, dtype=cls.scalar_type))

    @classmethod
    def from_array(cls, array: ArrayLike) -> "NumpyVector":
        """
        Вектор из массива формы (dimensions(),).

        Raises:
            DimensionMismatchError: если форма массива не (dimensions(),)
        """
        data = np.array(array, dtype=cls.scalar_type)
        if data.shape != (cls.dimensions(),):
            actual = data.size if data.ndim == 1 else -1
            raise DimensionMismatchError(
                cls.dimensions(), actual, context=f"{cls.__name__} from shape {data.shape}"
            )

        vector = cls.__new__(cls)
        vector._array = data
        return vector

    def nth(self, index: int) -> Any:
        return self._array[self.check_index(index)]

    def set_nth(self, index: int, value: Any) -> None:
        self._array[self.check_index(index)] = value

    def copy(self) -> "NumpyVector":
        return type(self).from_array(self._array)

    def to_array(self) -> NDArray[Any]:
        """Копия компонент как numpy.ndarray."""
        return self._array.copy()

    def __repr__(self) -> str:
        values = ", ".join(repr(value) for value in self._array.tolist())
        return f"{type(self).__name__}({values})"


class NumpyVector2(NumpyVector, TwoDimensional):
    """numpy вектор из 2 компонент."""

    @classmethod
    def dimensions(cls) -> int:
        return 2


class NumpyVector3(NumpyVector, ThreeDimensional):
    """numpy вектор из 3 компонент."""

    @classmethod
    def dimensions(cls) -> int:
        return 3


class NumpyVector4(NumpyVector):
    """numpy вектор из 4 компонент."""

    @classmethod
    def dimensions(cls) -> int:
        return 4
