"""
Vector space module: vectorization, weighing, similarity and ranking.
"""
from .vectorizer import DictionaryBuilder, Vectorizer
from .weighing import (
    WeighingScheme,
    FunctionWeighing,
    RawTermFrequency,
    TfIdf,
    as_weighing_scheme,
    document_frequencies,
    inverse_document_frequencies,
    raw_term_frequency,
    tfidf,
)
from .similarity import (
    SimilarityScheme,
    FunctionSimilarity,
    CosineSimilarity,
    DotProductSimilarity,
    as_similarity_scheme,
    cosine,
    cosine_similarity,
    dot_product,
    euclidean_length,
)
from .model import ScoredDocument, VectorSpaceModel, rank, validate_query
from .index import VectorSpaceIndex
