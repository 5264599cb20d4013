"""
spade_vectors — абстракция векторов фиксированной размерности

Геометрические алгоритмы пишутся один раз против capability VectorN
и работают с любым 2-, 3- или 4-компонентным представлением:
массивами фиксированной длины, numpy.ndarray или собственными типами.
"""

from spade_vectors.bindings import (
    ArrayVector2,
    ArrayVector3,
    ArrayVector4,
    NumpyVector2,
    NumpyVector3,
    NumpyVector4,
)
from spade_vectors.contracts import check_vector_type, validate_vector_payload
from spade_vectors.core import (
    SUPPORTED_DIMENSIONS,
    ComponentIndexError,
    DimensionMismatchError,
    SpadeNum,
    ThreeDimensional,
    TwoDimensional,
    VectorContractViolation,
    VectorError,
    VectorN,
    VectorNExtensions,
    require_three_dimensional,
    require_two_dimensional,
)
from spade_vectors.domain import VectorPayload

__all__ = [
    # Capability
    "SUPPORTED_DIMENSIONS",
    "SpadeNum",
    "VectorN",
    "VectorNExtensions",
    # Markers
    "ThreeDimensional",
    "TwoDimensional",
    "require_three_dimensional",
    "require_two_dimensional",
    # Errors
    "ComponentIndexError",
    "DimensionMismatchError",
    "VectorContractViolation",
    "VectorError",
    # Bindings
    "ArrayVector2",
    "ArrayVector3",
    "ArrayVector4",
    "NumpyVector2",
    "NumpyVector3",
    "NumpyVector4",
    # Serialization
    "VectorPayload",
    "check_vector_type",
    "validate_vector_payload",
]
