"""
Conformance — Проверка binding'а на соответствие контракту VectorN

Для пользовательских типов векторов: один вызов check_vector_type()
подтверждает, что тип можно передавать в алгоритмы spade_vectors.

Проверяется:
1. Тип — конкретный подкласс VectorN
2. dimensions() ∈ SUPPORTED_DIMENSIONS и не зависит от вызова
3. from_value() заполняет ровно dimensions() адресуемых позиций
4. Индексы dimensions() и -1 дают ComponentIndexError (чтение и запись)
5. set_nth() мутирует только одну компоненту и только этот экземпляр
6. Маркеры TwoDimensional / ThreeDimensional согласованы с dimensions()
"""

import inspect
import logging
from typing import Any, Callable

from spade_vectors.core.dimensions import ThreeDimensional, TwoDimensional
from spade_vectors.core.errors import ComponentIndexError, VectorContractViolation
from spade_vectors.core.vector import SUPPORTED_DIMENSIONS, VectorN

logger = logging.getLogger(__name__)


def _expect_index_error(vector_type: type, action: str, call: Callable[[], Any]) -> None:
    try:
        call()
    except ComponentIndexError:
        return
    except Exception as e:
        raise VectorContractViolation(
            f"{vector_type.__name__}: {action} raised {type(e).__name__} "
            f"instead of ComponentIndexError"
        ) from e
    raise VectorContractViolation(
        f"{vector_type.__name__}: {action} did not fail on out-of-range index"
    )


def check_vector_type(vector_type: type) -> None:
    """
    Проверка типа вектора на соответствие контракту VectorN.

    Args:
        vector_type: Проверяемый класс

    Raises:
        VectorContractViolation: при первом найденном нарушении
    """
    name = getattr(vector_type, "__name__", repr(vector_type))

    if not (isinstance(vector_type, type) and issubclass(vector_type, VectorN)):
        raise VectorContractViolation(f"{name} is not a VectorN subclass")
    if inspect.isabstract(vector_type):
        raise VectorContractViolation(f"{name} is abstract")

    # Размерность — функция типа
    dimensions = vector_type.dimensions()
    if dimensions not in SUPPORTED_DIMENSIONS:
        raise VectorContractViolation(
            f"{name}: dimensions() = {dimensions}, expected one of {SUPPORTED_DIMENSIONS}"
        )
    if vector_type.dimensions() != dimensions:
        raise VectorContractViolation(f"{name}: dimensions() is not constant")

    # Маркеры
    if issubclass(vector_type, TwoDimensional) and dimensions != 2:
        raise VectorContractViolation(f"{name} is TwoDimensional but has {dimensions} dimensions")
    if issubclass(vector_type, ThreeDimensional) and dimensions != 3:
        raise VectorContractViolation(
            f"{name} is ThreeDimensional but has {dimensions} dimensions"
        )

    # from_value заполняет все позиции
    one = vector_type.scalar_type(1)
    probe = vector_type.from_value(one)
    components = probe.components()
    if len(components) != dimensions:
        raise VectorContractViolation(
            f"{name}: from_value produced {len(components)} components, expected {dimensions}"
        )
    if not all(value == one for value in components):
        raise VectorContractViolation(f"{name}: from_value did not broadcast to every component")

    # Fail-fast на границах
    for index in (dimensions, -1):
        _expect_index_error(vector_type, f"nth({index})", lambda: probe.nth(index))
        _expect_index_error(
            vector_type, f"set_nth({index})", lambda: probe.set_nth(index, one)
        )

    # Запись затрагивает одну компоненту одного экземпляра
    two = vector_type.scalar_type(2)
    copy = probe.copy()
    probe.set_nth(dimensions - 1, two)
    if probe.nth(dimensions - 1) != two:
        raise VectorContractViolation(f"{name}: set_nth did not store the value")
    if any(probe.nth(i) != one for i in range(dimensions - 1)):
        raise VectorContractViolation(f"{name}: set_nth changed other components")
    if copy.nth(dimensions - 1) != one:
        raise VectorContractViolation(f"{name}: copy() shares storage with the original")

    logger.debug("%s conforms to VectorN (%d dimensions)", name, dimensions)
