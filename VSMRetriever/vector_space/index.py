"""
Index vectorizing a fixed collection once and answering repeated queries.
"""
import logging
from typing import FrozenSet, Iterable, List

from ..errors import VSMError
from ..preprocessing.document import RawDocument, VectorizedDocument
from .model import VectorSpaceModel, rank, validate_query

logger = logging.getLogger(__name__)


class VectorSpaceIndex:
    """
    Holds the vectorized collection and its dictionary for repeated queries.

    The stored batch is read-only once indexed: searches never modify it and
    index_documents() replaces it as a whole. Callers sharing an index
    between threads must not re-index while searches are running.
    """

    def __init__(self, model: VectorSpaceModel, documents: Iterable = None):
        """
        Initialize the index.

        Args:
            model: Model providing the word mapper, weighing and similarity schemes
            documents: Optional collection to index right away
        """
        self.model = model
        self._documents: List[RawDocument] = []
        self._raw_batch: List[VectorizedDocument] = []
        self._weighted_batch: List[VectorizedDocument] = []
        self._dictionary: FrozenSet[str] = frozenset()

        if documents is not None:
            self.index_documents(documents)

    def index_documents(self, documents: Iterable) -> None:
        """
        Vectorize and weigh a collection, replacing anything indexed before.

        Args:
            documents: RawDocuments, strings or document dictionaries
        """
        documents = [RawDocument.coerce(document) for document in documents]
        raw_batch, dictionary = self.model.vectorizer.vectorize_batch(documents)
        weighted_batch = self.model.weighing_scheme.weigh(raw_batch, dictionary)
        if len(weighted_batch) != len(raw_batch):
            raise VSMError("Weighing scheme changed the number of documents in the batch")

        self._documents = documents
        self._raw_batch = raw_batch
        self._weighted_batch = weighted_batch
        self._dictionary = dictionary
        logger.info("Indexed %d documents over %d dimensions", len(documents), len(dictionary))

    @property
    def dictionary(self) -> FrozenSet[str]:
        return self._dictionary

    def get_document(self, position: int) -> RawDocument:
        return self._weighted_batch[position].to_raw()

    def vectorize_query(self, query_text: str) -> VectorizedDocument:
        """
        Vectorize and weigh a query against the indexed collection.
        Terms outside the indexed dictionary carry no weight and are dropped.

        Args:
            query_text: Query text

        Returns:
            Weighted query document
        """
        counts = self.model.vectorizer.term_frequencies(query_text)
        vector = {term: count for term, count in counts.items() if term in self._dictionary}
        query = VectorizedDocument(vector, query_text)
        return self.model.weighing_scheme.weigh_query(query, self._raw_batch, self._dictionary)

    def search(self, query_text: str, k: int) -> List[RawDocument]:
        """
        Search the indexed collection.

        Args:
            query_text: Query string
            k: Number of top results to return

        Returns:
            Top k documents, most relevant first
        """
        if not self._weighted_batch:
            return []
        validate_query(query_text, len(self._weighted_batch), k)

        query_vector = self.vectorize_query(query_text)
        ranked = rank(query_vector, self._weighted_batch, self.model.similarity_scheme, k)
        return [scored.document.to_raw() for scored in ranked]

    def __len__(self):
        return len(self._documents)
