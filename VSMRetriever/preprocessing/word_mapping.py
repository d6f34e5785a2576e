import json
import logging
import string
import unicodedata
from abc import ABC, abstractmethod
from typing import Callable, Iterable, List, Union

from .tokenizer import Token

logger = logging.getLogger(__name__)


class WordMapper(ABC):
    """
    Maps a word to another word, typically to treat variations of the same
    word as one term. Mapping a word to "" drops it from the document.
    """

    @abstractmethod
    def map(self, word: str) -> str:
        raise NotImplementedError()

    def map_token(self, token: Token) -> Token:
        token.processed_form = self.map(token.processed_form)
        return token

    def map_all(self, tokens: List[Token]) -> List[Token]:
        return [self.map_token(token) for token in tokens]

    def __call__(self, word: str) -> str:
        return self.map(word)


class FunctionMapper(WordMapper):
    """Wraps a plain ``str -> str`` callable."""

    def __init__(self, function: Callable[[str], str]):
        self.function = function

    def map(self, word: str) -> str:
        return self.function(word)

    def __repr__(self):
        return f"FunctionMapper({getattr(self.function, '__name__', self.function)!r})"


class CaseInsensitive(WordMapper):
    def map(self, word: str) -> str:
        return word.lower()


class NoPunctuation(WordMapper):
    """Strips ASCII punctuation. Note that "_" is punctuation but also a word character."""

    _TABLE = str.maketrans("", "", string.punctuation)

    def map(self, word: str) -> str:
        return word.translate(self._TABLE)


class RemoveDiacritics(WordMapper):
    """Mapper removing diacritics (accents)."""

    def map(self, word: str) -> str:
        # NFD splits characters with accents into the base character + accent
        normalized = unicodedata.normalize("NFD", word)
        return "".join(c for c in normalized if not unicodedata.combining(c))


class StopWords(WordMapper):
    """Mapper dropping stop words."""

    def __init__(self, stop_words: Iterable[str] = ()):
        """
        Args:
            stop_words: Words to drop, compared case-insensitively
        """
        self.stop_words = {word.lower() for word in stop_words}

    @classmethod
    def from_json(cls, path: str) -> "StopWords":
        """
        Load stop words from a JSON file containing a list of words.

        Args:
            path: Path to the JSON file

        Returns:
            StopWords mapper
        """
        with open(path, "r", encoding="utf-8") as f:
            words = json.load(f)
        logger.debug("Loaded %d stop words from %s", len(words), path)
        return cls(words)

    def map(self, word: str) -> str:
        if word.lower() in self.stop_words:
            return ""
        return word


class WordMappingPipeline(WordMapper):
    """Pipeline of word mappers applied in order."""

    def __init__(self, mappers: Iterable[Union[WordMapper, Callable[[str], str]]], name="Default Pipeline"):
        """
        Initialize a word mapping pipeline.

        Args:
            mappers: Word mappers (or plain callables) in application order
            name: Name of the pipeline
        """
        self.mappers = [as_word_mapper(mapper) for mapper in mappers]
        self.name = name

    def map(self, word: str) -> str:
        for mapper in self.mappers:
            word = mapper.map(word)
            if not word:
                # Dropped, later mappers have nothing to do
                return ""
        return word

    def __len__(self):
        return len(self.mappers)

    def __repr__(self):
        return f"WordMappingPipeline({self.name!r}, {self.mappers!r})"


def as_word_mapper(mapper) -> WordMapper:
    """Accept a WordMapper or a plain callable."""
    if isinstance(mapper, WordMapper):
        return mapper
    if callable(mapper):
        return FunctionMapper(mapper)
    raise TypeError(f"Word mapper must be callable, got {type(mapper).__name__}")


case_insensitive = CaseInsensitive()
no_punctuation = NoPunctuation()
remove_diacritics = RemoveDiacritics()
