"""
Similarity schemes and the vector operations they are built from.
"""
import math
from abc import ABC, abstractmethod
from typing import Callable, Mapping, Union

from ..preprocessing.document import VectorizedDocument

VectorLike = Union[VectorizedDocument, Mapping[str, float]]


def _components(vector: VectorLike) -> Mapping[str, float]:
    if isinstance(vector, VectorizedDocument):
        return vector.vector
    return vector


def dot_product(a: VectorLike, b: VectorLike) -> float:
    """
    Calculate the dot product between two vectors.

    Args:
        a: First vector
        b: Second vector

    Returns:
        Sum of the products of the shared components
    """
    a, b = _components(a), _components(b)
    # Only shared terms contribute, walk the shorter vector
    if len(a) > len(b):
        a, b = b, a
    return sum(weight * b[term] for term, weight in a.items() if term in b)


def euclidean_length(vector: VectorLike) -> float:
    return math.sqrt(sum(component ** 2 for component in _components(vector).values()))


def cosine_similarity(a: VectorLike, b: VectorLike) -> float:
    """
    Compute cosine similarity between two vectors.

    Args:
        a: First vector
        b: Second vector

    Returns:
        Cosine similarity score, 0 when either vector has zero length
    """
    magnitude = euclidean_length(a) * euclidean_length(b)

    # Avoid division by zero
    if magnitude == 0:
        return 0.0

    return dot_product(a, b) / magnitude


class SimilarityScheme(ABC):
    """Numerical comparison between two vectorized documents, higher is more similar."""

    name = "similarity"

    @abstractmethod
    def similarity(self, a: VectorizedDocument, b: VectorizedDocument) -> float:
        raise NotImplementedError()

    def __call__(self, a, b):
        return self.similarity(a, b)

    def __repr__(self):
        return f"{type(self).__name__}()"


class FunctionSimilarity(SimilarityScheme):
    """Wraps a plain ``(a, b) -> float`` callable."""

    def __init__(self, function: Callable):
        self.function = function
        self.name = getattr(function, "__name__", "custom")

    def similarity(self, a, b):
        return self.function(a, b)


class CosineSimilarity(SimilarityScheme):
    name = "cosine"

    def similarity(self, a, b):
        return cosine_similarity(a, b)


class DotProductSimilarity(SimilarityScheme):
    """Unnormalized similarity, favours long documents."""

    name = "dot"

    def similarity(self, a, b):
        return dot_product(a, b)


def as_similarity_scheme(scheme) -> SimilarityScheme:
    if isinstance(scheme, SimilarityScheme):
        return scheme
    if callable(scheme):
        return FunctionSimilarity(scheme)
    raise TypeError(f"Similarity scheme must be callable, got {type(scheme).__name__}")


cosine = CosineSimilarity()
