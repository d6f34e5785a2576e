"""
Model configuration: loading config.json and building components by name.
"""
import copy
import json
import logging
import os
from typing import Dict, Optional

from .errors import ConfigurationError
from .preprocessing.word_mapping import (
    CaseInsensitive,
    NoPunctuation,
    RemoveDiacritics,
    StopWords,
    WordMappingPipeline,
)
from .vector_space.similarity import CosineSimilarity, DotProductSimilarity, SimilarityScheme
from .vector_space.weighing import RawTermFrequency, TfIdf, WeighingScheme

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.json")

DEFAULT_CONFIG = {
    "word_mapping": {
        "case_insensitive": True,
        "no_punctuation": False,
        "remove_diacritics": False,
        "stop_words": {"use": False, "words": [], "path": None},
        "pipeline_order": ["case_insensitive", "no_punctuation", "remove_diacritics", "stop_words"],
    },
    "weighing": "tfidf",
    "similarity": "cosine",
}

WEIGHING_SCHEMES = {
    "tfidf": TfIdf,
    "tf": RawTermFrequency,
    "raw": RawTermFrequency,
}

SIMILARITY_SCHEMES = {
    "cosine": CosineSimilarity,
    "dot": DotProductSimilarity,
}


def default_config() -> Dict:
    return copy.deepcopy(DEFAULT_CONFIG)


def load_config(path: Optional[str] = None) -> Dict:
    """
    Load configuration from a JSON file.

    A missing or unreadable file is not an error: the defaults are used and
    a warning is logged.

    Args:
        path: Path to the config file (defaults to the packaged config.json)

    Returns:
        Configuration dictionary
    """
    config_path = path or DEFAULT_CONFIG_PATH

    if not os.path.exists(config_path):
        logger.warning("No config found at %s, using default settings", config_path)
        return default_config()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Could not load config: %s, using default settings", e)
        return default_config()

    if not isinstance(config, dict):
        raise ConfigurationError(f"Config in {config_path} must be a JSON object")

    logger.debug("Loaded model configuration from %s", config_path)
    return config


def create_word_mapper(config: Dict) -> Optional[WordMappingPipeline]:
    """
    Create the word mapping pipeline based on configuration.

    Args:
        config: Full configuration dictionary

    Returns:
        WordMappingPipeline, or None when no mapper is enabled (identity)
    """
    mapping_config = config.get("word_mapping", {})
    pipeline_order = mapping_config.get("pipeline_order", DEFAULT_CONFIG["word_mapping"]["pipeline_order"])

    mappers = []
    for step in pipeline_order:
        if step == "case_insensitive":
            if mapping_config.get("case_insensitive", True):
                mappers.append(CaseInsensitive())

        elif step == "no_punctuation":
            if mapping_config.get("no_punctuation", False):
                mappers.append(NoPunctuation())

        elif step == "remove_diacritics":
            if mapping_config.get("remove_diacritics", False):
                mappers.append(RemoveDiacritics())

        elif step == "stop_words":
            stop_words_config = mapping_config.get("stop_words", {})
            if stop_words_config.get("use", False):
                if stop_words_config.get("path"):
                    mappers.append(StopWords.from_json(stop_words_config["path"]))
                else:
                    mappers.append(StopWords(stop_words_config.get("words", [])))

        else:
            raise ConfigurationError(f"Unknown word mapping step: {step!r}")

    if not mappers:
        return None
    return WordMappingPipeline(mappers, name="Configured Pipeline")


def create_weighing_scheme(name: Optional[str]) -> WeighingScheme:
    if name is None:
        return RawTermFrequency()
    try:
        return WEIGHING_SCHEMES[name]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown weighing scheme {name!r}, expected one of {sorted(WEIGHING_SCHEMES)}"
        ) from None


def create_similarity_scheme(name: str) -> SimilarityScheme:
    try:
        return SIMILARITY_SCHEMES[name]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown similarity scheme {name!r}, expected one of {sorted(SIMILARITY_SCHEMES)}"
        ) from None


def create_model_components(config: Dict):
    """
    Build the components of a model from configuration.

    Args:
        config: Configuration dictionary

    Returns:
        Tuple of (similarity scheme, weighing scheme, word mapper or None)
    """
    similarity = create_similarity_scheme(config.get("similarity", DEFAULT_CONFIG["similarity"]))
    weighing = create_weighing_scheme(config.get("weighing", DEFAULT_CONFIG["weighing"]))
    word_mapper = create_word_mapper(config)
    return similarity, weighing, word_mapper
