"""
Turns documents into term-frequency vectors over a shared dictionary.
"""
import logging
from collections import Counter
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from ..preprocessing.document import RawDocument, VectorizedDocument
from ..preprocessing.tokenizer import RegexMatchTokenizer, Tokenizer
from ..preprocessing.word_mapping import WordMapper, as_word_mapper

logger = logging.getLogger(__name__)


class DictionaryBuilder:
    """
    Accumulates the distinct terms of a batch. Once the batch is vectorized
    the builder is sealed with build() and the frozen set is what the
    weighing scheme sees.
    """

    def __init__(self):
        self._terms = set()
        self._sealed = False

    def add(self, term: str):
        if self._sealed:
            raise RuntimeError("Dictionary has already been built")
        self._terms.add(term)

    def update(self, terms: Iterable[str]):
        for term in terms:
            self.add(term)

    def build(self) -> FrozenSet[str]:
        self._sealed = True
        return frozenset(self._terms)

    def __contains__(self, term):
        return term in self._terms

    def __len__(self):
        return len(self._terms)


class Vectorizer:
    """Tokenizes documents and counts their (mapped) terms."""

    def __init__(self, word_mapper=None, tokenizer: Optional[Tokenizer] = None):
        """
        Args:
            word_mapper: WordMapper or plain callable applied to every token, identity if None
            tokenizer: Tokenizer to use (defaults to RegexMatchTokenizer)
        """
        self.word_mapper: Optional[WordMapper] = as_word_mapper(word_mapper) if word_mapper is not None else None
        self.tokenizer = tokenizer or RegexMatchTokenizer()

    def terms(self, text: str) -> List[str]:
        """
        Tokenize text and apply the word mapper.

        Args:
            text: Text to process

        Returns:
            Mapped terms in order of appearance, dropped (empty) terms excluded
        """
        tokens = self.tokenizer.tokenize(text)
        if self.word_mapper is not None:
            self.word_mapper.map_all(tokens)
        return [token.processed_form for token in tokens if token.processed_form]

    def term_frequencies(self, text: str) -> Dict[str, int]:
        return dict(Counter(self.terms(text)))

    def vectorize(self, document, dictionary: Optional[DictionaryBuilder] = None) -> VectorizedDocument:
        """
        Vectorize one document, adding its terms to the dictionary.

        Args:
            document: RawDocument, string or document dictionary
            dictionary: Builder collecting the batch's terms (optional)

        Returns:
            VectorizedDocument holding raw term counts
        """
        document = RawDocument.coerce(document)
        frequencies = self.term_frequencies(document.content)
        if dictionary is not None:
            dictionary.update(frequencies)
        return VectorizedDocument(frequencies, document.content, document.meta)

    def vectorize_batch(self, documents: Iterable) -> Tuple[List[VectorizedDocument], FrozenSet[str]]:
        """
        Vectorize a batch of documents against a fresh dictionary.

        Args:
            documents: Documents of the batch

        Returns:
            Tuple of (vectorized documents, sealed dictionary)
        """
        builder = DictionaryBuilder()
        vectors = [self.vectorize(document, builder) for document in documents]
        dictionary = builder.build()
        logger.debug("Vectorized %d documents over %d dimensions", len(vectors), len(dictionary))
        return vectors, dictionary
