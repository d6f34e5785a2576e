"""
Vector space model ranking a collection of documents against a query.
"""
import logging
import math
from typing import Iterable, List, Sequence

from ..errors import EmptyQueryError, InvalidKError, KExceedsCollectionError
from ..preprocessing.document import RawDocument, VectorizedDocument
from .similarity import as_similarity_scheme
from .vectorizer import Vectorizer
from .weighing import RawTermFrequency, as_weighing_scheme

logger = logging.getLogger(__name__)


class ScoredDocument:
    """A document paired with its relevance score, only lives inside the ranker."""

    __slots__ = ("document", "score")

    def __init__(self, document: VectorizedDocument, score: float):
        self.document = document
        self.score = score

    def __repr__(self):
        return f"ScoredDocument({self.document.content!r}, {self.score:.4f})"


def validate_query(query_text: str, collection_size: int, k) -> None:
    """
    Validate query arguments, raising a UsageError on the first problem.

    Args:
        query_text: Query to perform
        collection_size: Number of documents in the collection (non-zero)
        k: Number of results requested
    """
    if isinstance(k, bool) or not isinstance(k, int) or k <= 0:
        raise InvalidKError(k)
    if k > collection_size:
        raise KExceedsCollectionError(k, collection_size)
    if not query_text:
        raise EmptyQueryError()


def rank(query_vector: VectorizedDocument, documents: Iterable[VectorizedDocument],
         similarity, k: int) -> List[ScoredDocument]:
    """
    Score documents against the query vector and keep the top k.

    Args:
        query_vector: Weighted query
        documents: Weighted documents of the collection
        similarity: Similarity scheme
        k: Number of results to keep

    Returns:
        Top k scored documents, highest score first
    """
    scored = []
    for document in documents:
        score = similarity(query_vector, document)
        if math.isnan(score):
            # NaN has no place in a total order
            logger.warning("Similarity of %r is NaN, scoring it 0", document)
            score = 0.0
        scored.append(ScoredDocument(document, score))

    # Stable, equal scores keep their collection order
    scored.sort(key=lambda scored_document: scored_document.score, reverse=True)
    return scored[:k]


class VectorSpaceModel:
    """
    Models collections of documents as vector spaces and ranks them against queries.
    """

    def __init__(self, similarity_scheme, weighing_scheme=None, word_mapper=None, tokenizer=None):
        """
        Initialize the model.

        Args:
            similarity_scheme: Metric of relevance between two vectorized documents
            weighing_scheme: Weight of each term of each document, raw term counts if None
            word_mapper: Maps variations of words onto one term, identity if None
            tokenizer: Tokenizer to use (defaults to RegexMatchTokenizer)
        """
        self.similarity_scheme = as_similarity_scheme(similarity_scheme)
        self.weighing_scheme = as_weighing_scheme(weighing_scheme) if weighing_scheme is not None else RawTermFrequency()
        self.vectorizer = Vectorizer(word_mapper, tokenizer)

    @classmethod
    def from_config(cls, config=None) -> "VectorSpaceModel":
        """
        Build a model from a configuration dictionary or the default config.json.

        Args:
            config: Configuration dictionary, loaded from disk when None

        Returns:
            VectorSpaceModel
        """
        from ..config import create_model_components, load_config

        if config is None:
            config = load_config()
        similarity, weighing, word_mapper = create_model_components(config)
        return cls(similarity, weighing, word_mapper)

    @property
    def word_mapper(self):
        return self.vectorizer.word_mapper

    def vectorize(self, documents: Iterable):
        """
        Vectorize and weigh a batch of documents.

        Args:
            documents: Documents of the batch

        Returns:
            Tuple of (weighted documents, dictionary)
        """
        batch, dictionary = self.vectorizer.vectorize_batch(documents)
        weighted = self.weighing_scheme.weigh(batch, dictionary)
        if len(weighted) != len(batch):
            raise RuntimeError(
                f"Weighing scheme {self.weighing_scheme!r} returned {len(weighted)} documents for a batch of {len(batch)}"
            )
        return weighted, dictionary

    def _vectorize_with_query(self, query_text: str, collection: Sequence):
        # The query joins the batch as its last member, then is split off again
        documents = [RawDocument.coerce(document) for document in collection]
        weighted, dictionary = self.vectorize(documents + [RawDocument(query_text)])
        query_vector = weighted.pop()
        logger.debug("Query %r spans %d of %d dimensions", query_text, len(query_vector.vector), len(dictionary))
        return query_vector, weighted

    def score(self, query_text: str, collection: Sequence) -> List[ScoredDocument]:
        """
        Score every document of the collection without ranking.

        Args:
            query_text: Query to score against
            collection: Documents to score

        Returns:
            Scored documents in collection order
        """
        if not collection:
            return []
        if not query_text:
            raise EmptyQueryError()
        query_vector, weighted = self._vectorize_with_query(query_text, collection)
        return [ScoredDocument(document, self.similarity_scheme(query_vector, document)) for document in weighted]

    def query(self, query_text: str, collection: Sequence, k: int) -> List[RawDocument]:
        """
        Perform a query on a collection of documents, returning the top k results.

        Args:
            query_text: Query to perform on the collection
            collection: Documents to construct a vector space of, without the query
            k: Positive integer, number of results to return

        Returns:
            Top k documents (content and metadata), most relevant first
        """
        if not collection:
            return []
        validate_query(query_text, len(collection), k)

        query_vector, weighted = self._vectorize_with_query(query_text, collection)
        ranked = rank(query_vector, weighted, self.similarity_scheme, k)
        return [scored.document.to_raw() for scored in ranked]

    def __repr__(self):
        return (f"VectorSpaceModel(similarity={self.similarity_scheme!r}, "
                f"weighing={self.weighing_scheme!r}, word_mapper={self.word_mapper!r})")
