"""
Preprocessing module turning raw text into terms.
Includes tokenization, document types and word mapping hooks.
"""
from .tokenizer import Tokenizer, RegexMatchTokenizer, Token, TokenType
from .document import RawDocument, VectorizedDocument
from .word_mapping import (
    WordMapper,
    FunctionMapper,
    CaseInsensitive,
    NoPunctuation,
    RemoveDiacritics,
    StopWords,
    WordMappingPipeline,
    as_word_mapper,
    case_insensitive,
    no_punctuation,
    remove_diacritics,
)
