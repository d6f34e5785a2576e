"""
Test weighing schemes
"""
import math

import pytest

from VSMRetriever.preprocessing.document import VectorizedDocument
from VSMRetriever.vector_space.vectorizer import Vectorizer
from VSMRetriever.vector_space.weighing import (
    FunctionWeighing,
    RawTermFrequency,
    TfIdf,
    as_weighing_scheme,
    document_frequencies,
    inverse_document_frequencies,
    tfidf,
)


@pytest.fixture
def batch():
    return Vectorizer().vectorize_batch(["a a b", "b c", "c c c d"])


def test_document_frequencies(batch):
    documents, _ = batch
    assert document_frequencies(documents) == {"a": 1, "b": 2, "c": 2, "d": 1}


def test_idf_is_natural_log(batch):
    documents, dictionary = batch
    idf = inverse_document_frequencies(documents, dictionary)
    assert idf["a"] == pytest.approx(math.log(3))
    assert idf["b"] == pytest.approx(math.log(3 / 2))


def test_tfidf_weights(batch):
    documents, dictionary = batch
    weighted = tfidf(documents, dictionary)
    assert weighted[0].vector["a"] == pytest.approx(2 * math.log(3))
    assert weighted[0].vector["b"] == pytest.approx(math.log(3 / 2))
    assert weighted[2].vector["c"] == pytest.approx(3 * math.log(3 / 2))


def test_tfidf_keeps_cardinality_and_key_sets(batch):
    documents, dictionary = batch
    weighted = TfIdf().weigh(documents, dictionary)
    assert len(weighted) == len(documents)
    for before, after in zip(documents, weighted):
        assert set(before.vector) == set(after.vector)
        assert before.content == after.content


def test_tfidf_leaves_input_untouched(batch):
    documents, dictionary = batch
    tfidf(documents, dictionary)
    assert documents[0].vector == {"a": 2, "b": 1}


def test_term_in_every_document_weighs_zero():
    documents, dictionary = Vectorizer().vectorize_batch(["x y", "x"])
    weighted = tfidf(documents, dictionary)
    assert weighted[0].vector["x"] == 0
    assert weighted[1].vector["x"] == 0


def test_stale_dictionary_term_does_not_divide_by_zero(batch, caplog):
    documents, dictionary = batch
    weighted = tfidf(documents, dictionary | {"stale"})
    assert all("stale" not in document.vector for document in weighted)
    assert "stale" in caplog.text


def test_raw_term_frequency_copies_batch(batch):
    documents, dictionary = batch
    weighted = RawTermFrequency().weigh(documents, dictionary)
    assert [d.vector for d in weighted] == [d.vector for d in documents]
    assert weighted[0] is not documents[0]


def test_tfidf_query_uses_collection_statistics(batch):
    documents, dictionary = batch
    query = VectorizedDocument({"a": 1, "b": 2}, "a b b")
    weighted = tfidf.weigh_query(query, documents, dictionary)
    assert weighted.vector["a"] == pytest.approx(math.log(3))
    assert weighted.vector["b"] == pytest.approx(2 * math.log(3 / 2))


def test_default_query_weighing_treats_query_as_pseudo_document(batch):
    documents, dictionary = batch
    query = VectorizedDocument({"a": 1}, "a")
    weighted = RawTermFrequency().weigh_query(query, documents, dictionary)
    assert weighted.vector == {"a": 1}


def test_plain_callables_are_wrapped():
    def identity(batch, dictionary):
        return list(batch)

    scheme = as_weighing_scheme(identity)
    assert isinstance(scheme, FunctionWeighing)
    assert scheme.name == "identity"
