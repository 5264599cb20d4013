"""
Contract Validation Module

Валидация JSON представлений векторов и проверка bindings
на соответствие контракту VectorN.
"""

from .conformance import check_vector_type
from .validators import (
    ContractValidator,
    SchemaLoader,
    VectorPayloadValidator,
    validate_vector_payload,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "VectorPayloadValidator",
    # Functions
    "check_vector_type",
    "validate_vector_payload",
]
