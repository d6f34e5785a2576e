"""
Shared fixtures for the VSMRetriever test suite.
"""
import pytest

from VSMRetriever import VectorSpaceModel, case_insensitive, cosine, tfidf


@pytest.fixture
def relevance_collection():
    return [
        {"content": "This is test numero uno.", "meta": {"id": 1}},
        {"content": "This document will be the most relevant.", "meta": {"id": 2}},
        {"content": "Ordered last in the results.", "meta": {"id": 3}},
    ]


@pytest.fixture
def relevance_query():
    return "which document is the most relevant."


@pytest.fixture
def model():
    """Case-insensitive tf-idf model with cosine similarity."""
    return VectorSpaceModel(cosine, tfidf, case_insensitive)
