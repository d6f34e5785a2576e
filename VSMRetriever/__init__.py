"""
VSMRetriever - ranking documents against queries with a vector space model.
"""
from .log import configure_logging
from .errors import (
    VSMError,
    UsageError,
    InvalidKError,
    KExceedsCollectionError,
    EmptyQueryError,
    ConfigurationError,
)
from .preprocessing import (
    RawDocument,
    VectorizedDocument,
    WordMapper,
    CaseInsensitive,
    NoPunctuation,
    RemoveDiacritics,
    StopWords,
    WordMappingPipeline,
    case_insensitive,
    no_punctuation,
)
from .vector_space import (
    WeighingScheme,
    RawTermFrequency,
    TfIdf,
    tfidf,
    SimilarityScheme,
    CosineSimilarity,
    cosine,
    cosine_similarity,
    dot_product,
    euclidean_length,
    VectorSpaceModel,
    VectorSpaceIndex,
)
from .config import load_config

__version__ = "0.1.0"
