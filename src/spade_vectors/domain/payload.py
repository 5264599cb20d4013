"""
VectorPayload — Сериализуемое представление вектора

Immutable Pydantic модель для обмена векторами через JSON.
Соответствует схеме contracts/schema/vector.json.

Модель не зависит от конкретного binding'а: любой VectorN можно
выгрузить в payload и загрузить обратно в любой тип той же размерности.

Компоненты — JSON numbers:
- целые (int, numpy integers) сохраняются как int без потерь
- остальные скаляры приводятся к float; для Fraction и Decimal
  это приведение с потерей точности
"""

import numbers
from typing import Any, Tuple, Type, Union

from pydantic import BaseModel, Field, StrictInt, model_validator

from spade_vectors.core.errors import DimensionMismatchError
from spade_vectors.core.vector import SUPPORTED_DIMENSIONS, VectorN


def _json_scalar(value: Any) -> Union[int, float]:
    """Скаляр компоненты как JSON number."""
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return int(value)
    return float(value)


class VectorPayload(BaseModel):
    """
    Вектор фиксированной размерности в сериализуемом виде.

    Immutable модель (frozen=True).
    """

    dimensions: int = Field(
        ...,
        ge=min(SUPPORTED_DIMENSIONS),
        le=max(SUPPORTED_DIMENSIONS),
        description="Фиксированная размерность вектора (2, 3 или 4)",
    )
    components: Tuple[Union[StrictInt, float], ...] = Field(
        ..., description="Компоненты в порядке индексов (int сохраняется как int)"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_component_count(self) -> "VectorPayload":
        """Число компонент должно совпадать с dimensions."""
        if len(self.components) != self.dimensions:
            raise ValueError(
                f"components has {len(self.components)} values, "
                f"expected dimensions={self.dimensions}"
            )
        return self

    @classmethod
    def from_vector(cls, vector: VectorN) -> "VectorPayload":
        """Payload из любого VectorN."""
        return cls(
            dimensions=vector.dimensions(),
            components=tuple(_json_scalar(value) for value in vector.components()),
        )

    def to_vector(self, vector_type: Type[VectorN]) -> VectorN:
        """
        Восстановление вектора заданного типа.

        Args:
            vector_type: Класс VectorN (например, ArrayVector3)

        Returns:
            Новый экземпляр vector_type

        Raises:
            DimensionMismatchError: если размерность vector_type не совпадает
        """
        if vector_type.dimensions() != self.dimensions:
            raise DimensionMismatchError(
                vector_type.dimensions(),
                self.dimensions,
                context=f"payload -> {vector_type.__name__}",
            )
        return vector_type.from_components(self.components)
