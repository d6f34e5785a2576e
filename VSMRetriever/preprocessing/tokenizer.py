import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import List


class TokenType(Enum):
    WORD = "word"
    NUMBER = "number"


class Token:
    """A single token extracted from a document."""

    def __init__(self, text: str, position: int, token_type: TokenType = TokenType.WORD):
        self.text = text
        self.position = position
        self.token_type = token_type
        # Word mappers rewrite this, the original text stays untouched
        self.processed_form = text

    def __repr__(self):
        return f"Token({self.text!r}, {self.position}, {self.token_type.name})"

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.text, self.position, self.token_type, self.processed_form) == (
            other.text, other.position, other.token_type, other.processed_form
        )


class Tokenizer(ABC):
    @abstractmethod
    def tokenize(self, text: str) -> List[Token]:
        raise NotImplementedError()


class RegexMatchTokenizer(Tokenizer):
    """
    Splits text into maximal runs of word characters (letters, digits and
    underscore). Everything else acts as a separator and is discarded.
    """

    WORD_PATTERN = re.compile(r"\w+")

    def __init__(self, pattern=None):
        """
        Args:
            pattern: Optional regular expression (string or compiled) matching a single token
        """
        if pattern is None:
            self.pattern = self.WORD_PATTERN
        elif isinstance(pattern, str):
            self.pattern = re.compile(pattern)
        else:
            self.pattern = pattern

    def tokenize(self, text: str) -> List[Token]:
        """
        Tokenize the given text.

        Args:
            text: Text to tokenize, None and "" yield no tokens

        Returns:
            Tokens in order of appearance
        """
        if not text:
            return []

        tokens = []
        for match in self.pattern.finditer(text):
            word = match.group()
            token_type = TokenType.NUMBER if word.isdigit() else TokenType.WORD
            tokens.append(Token(word, match.start(), token_type))
        return tokens
