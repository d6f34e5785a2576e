"""
Test vector operations and similarity schemes
"""
import math

import pytest

from VSMRetriever.preprocessing.document import VectorizedDocument
from VSMRetriever.vector_space.similarity import (
    CosineSimilarity,
    DotProductSimilarity,
    FunctionSimilarity,
    as_similarity_scheme,
    cosine,
    cosine_similarity,
    dot_product,
    euclidean_length,
)


def doc(vector):
    return VectorizedDocument(vector, "")


def test_dot_product_only_counts_shared_terms():
    assert dot_product(doc({"a": 1, "b": 2}), doc({"b": 3, "c": 4})) == 6


def test_dot_product_is_symmetric():
    a = doc({"a": 1.5, "b": 2, "c": 0.5})
    b = doc({"b": 3})
    assert dot_product(a, b) == dot_product(b, a)


def test_dot_product_with_itself_is_squared_length():
    a = doc({"a": 1.5, "b": -2, "c": 0.25})
    assert dot_product(a, a) == pytest.approx(euclidean_length(a) ** 2)


def test_euclidean_length():
    assert euclidean_length(doc({"a": 3, "b": 4})) == 5
    assert euclidean_length(doc({})) == 0


def test_primitives_accept_plain_mappings():
    assert dot_product({"a": 2}, {"a": 3}) == 6
    assert euclidean_length({"a": 3, "b": 4}) == 5


def test_cosine_of_vector_with_itself_is_one():
    a = doc({"a": 1, "b": 2, "c": 3})
    assert cosine_similarity(a, a) == pytest.approx(1.0)


def test_cosine_is_symmetric():
    a = doc({"a": 1, "b": 2})
    b = doc({"b": 1, "c": 5})
    assert cosine_similarity(a, b) == pytest.approx(cosine_similarity(b, a))


def test_cosine_of_orthogonal_vectors_is_zero():
    assert cosine(doc({"a": 1}), doc({"b": 1})) == 0


def test_cosine_with_zero_vector_is_zero_not_nan():
    score = CosineSimilarity().similarity(doc({}), doc({"a": 1}))
    assert score == 0.0
    assert not math.isnan(score)
    assert cosine(doc({"a": 0.0}), doc({"a": 0.0})) == 0.0


def test_dot_product_similarity():
    assert DotProductSimilarity()(doc({"a": 2}), doc({"a": 4})) == 8


def test_plain_callables_are_wrapped():
    scheme = as_similarity_scheme(cosine_similarity)
    assert isinstance(scheme, FunctionSimilarity)
    assert scheme.name == "cosine_similarity"
    assert as_similarity_scheme(cosine) is cosine
