"""
Weighing schemes assigning a weight to every term of every document in a batch.
"""
import logging
import math
from abc import ABC, abstractmethod
from collections import Counter
from typing import AbstractSet, Callable, Dict, Iterable, List, Sequence

from ..preprocessing.document import VectorizedDocument

logger = logging.getLogger(__name__)


class WeighingScheme(ABC):
    """
    Defines the weight of each term component of each document.

    weigh() receives the whole batch and the dictionary of its dimensions and
    returns a new batch of the same length and order, with the same terms in
    every vector. The input batch must be left untouched.
    """

    name = "weighing"

    @abstractmethod
    def weigh(self, batch: Sequence[VectorizedDocument], dictionary: AbstractSet[str]) -> List[VectorizedDocument]:
        raise NotImplementedError()

    def weigh_query(self, query: VectorizedDocument, batch: Sequence[VectorizedDocument],
                    dictionary: AbstractSet[str]) -> VectorizedDocument:
        """
        Weigh a query against an already vectorized batch of raw counts.

        The default treats the query as a pseudo-document appended to the
        batch and returns its weighted vector.

        Args:
            query: Vectorized query restricted to the dictionary
            batch: Unweighted documents of the collection
            dictionary: Dimensions of the collection

        Returns:
            Weighted query document
        """
        return self.weigh(list(batch) + [query], dictionary)[-1]

    def __call__(self, batch, dictionary):
        return self.weigh(batch, dictionary)

    def __repr__(self):
        return f"{type(self).__name__}()"


class FunctionWeighing(WeighingScheme):
    """Wraps a plain ``(batch, dictionary) -> batch`` callable."""

    def __init__(self, function: Callable):
        self.function = function
        self.name = getattr(function, "__name__", "custom")

    def weigh(self, batch, dictionary):
        return self.function(batch, dictionary)


class RawTermFrequency(WeighingScheme):
    """Keeps the raw term counts (a copy of the batch)."""

    name = "tf"

    def weigh(self, batch, dictionary):
        return [document.with_vector(document.vector) for document in batch]


def document_frequencies(batch: Iterable[VectorizedDocument]) -> Counter:
    """
    Count the documents containing each term. Presence in the vector is the
    membership signal, the stored value is not inspected.

    Args:
        batch: Vectorized documents

    Returns:
        Counter mapping term to number of documents containing it
    """
    frequencies = Counter()
    for document in batch:
        frequencies.update(document.vector.keys())
    return frequencies


def inverse_document_frequencies(batch: Sequence[VectorizedDocument], dictionary: AbstractSet[str]) -> Dict[str, float]:
    """
    Calculate the inverse document frequency of every dimension.
    IDF(t) = ln(N / DF(t))

    Args:
        batch: Unweighted vectorized documents
        dictionary: Dimensions of the batch

    Returns:
        Dictionary mapping term to its IDF
    """
    batch_size = len(batch)
    frequencies = document_frequencies(batch)
    idf = {}
    for term in dictionary:
        df = frequencies.get(term, 0)
        if df == 0:
            # Stale dictionary entry, no document to weigh
            logger.warning("Term %r is in the dictionary but in no document of the batch", term)
            idf[term] = 0.0
            continue
        idf[term] = math.log(batch_size / df)
    return idf


class TfIdf(WeighingScheme):
    """A weighing scheme utilizing term frequency and inverse document frequency."""

    name = "tfidf"

    def weigh(self, batch, dictionary):
        # Statistics come from the untouched input, weights go to new documents
        idf = inverse_document_frequencies(batch, dictionary)
        weighted = []
        for document in batch:
            vector = {term: idf.get(term, 0.0) * tf for term, tf in document.vector.items()}
            weighted.append(document.with_vector(vector))
        logger.debug("Weighed %d documents with tf-idf over %d dimensions", len(batch), len(dictionary))
        return weighted

    def weigh_query(self, query, batch, dictionary):
        # The query is weighed with the collection's statistics alone
        idf = inverse_document_frequencies(batch, dictionary)
        vector = {term: idf.get(term, 0.0) * tf for term, tf in query.vector.items()}
        return query.with_vector(vector)


def as_weighing_scheme(scheme) -> WeighingScheme:
    if isinstance(scheme, WeighingScheme):
        return scheme
    if callable(scheme):
        return FunctionWeighing(scheme)
    raise TypeError(f"Weighing scheme must be callable, got {type(scheme).__name__}")


tfidf = TfIdf()
raw_term_frequency = RawTermFrequency()
