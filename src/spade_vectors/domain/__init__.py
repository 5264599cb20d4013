"""
Domain models: сериализуемые представления векторов.
"""

from spade_vectors.domain.payload import VectorPayload

__all__ = [
    "VectorPayload",
]
