"""
Core vector abstraction для spade_vectors

Capability VectorN, производные операции, маркеры размерности
и скалярная capability.
"""

# Scalar capability
from spade_vectors.core.scalar import (
    DEFAULT_SCALAR_TYPE,
    SpadeNum,
    is_spade_num,
    max_inline,
    min_inline,
    zero,
    zero_like,
)

# Errors
from spade_vectors.core.errors import (
    ComponentIndexError,
    DimensionMismatchError,
    VectorContractViolation,
    VectorError,
)

# Vector capability + extensions
from spade_vectors.core.extensions import VectorNExtensions
from spade_vectors.core.vector import SUPPORTED_DIMENSIONS, VectorN

# Dimensional markers
from spade_vectors.core.dimensions import (
    ThreeDimensional,
    TwoDimensional,
    require_three_dimensional,
    require_two_dimensional,
)

__all__ = [
    # Scalar — Constants
    "DEFAULT_SCALAR_TYPE",
    # Scalar — Types
    "SpadeNum",
    # Scalar — Functions
    "is_spade_num",
    "max_inline",
    "min_inline",
    "zero",
    "zero_like",
    # Errors
    "ComponentIndexError",
    "DimensionMismatchError",
    "VectorContractViolation",
    "VectorError",
    # Vector — Constants
    "SUPPORTED_DIMENSIONS",
    # Vector — Types
    "VectorN",
    "VectorNExtensions",
    # Markers
    "ThreeDimensional",
    "TwoDimensional",
    "require_three_dimensional",
    "require_two_dimensional",
]
