"""
Concrete bindings: массивы фиксированной длины и numpy.ndarray.
"""

from spade_vectors.bindings.arrays import (
    ArrayVector,
    ArrayVector2,
    ArrayVector3,
    ArrayVector4,
)
from spade_vectors.bindings.numpy_vectors import (
    NUMPY_DEFAULT_DTYPE,
    NumpyVector,
    NumpyVector2,
    NumpyVector3,
    NumpyVector4,
)

__all__ = [
    # Arrays
    "ArrayVector",
    "ArrayVector2",
    "ArrayVector3",
    "ArrayVector4",
    # NumPy
    "NUMPY_DEFAULT_DTYPE",
    "NumpyVector",
    "NumpyVector2",
    "NumpyVector3",
    "NumpyVector4",
]
