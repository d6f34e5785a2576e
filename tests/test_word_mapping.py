"""
Test word mappers and the mapping pipeline
"""
import json

import pytest

from VSMRetriever.preprocessing.word_mapping import (
    CaseInsensitive,
    FunctionMapper,
    NoPunctuation,
    RemoveDiacritics,
    StopWords,
    WordMappingPipeline,
    as_word_mapper,
    case_insensitive,
    no_punctuation,
)


def test_case_insensitive():
    assert case_insensitive("Example") == "example"
    assert CaseInsensitive().map("ABC") == "abc"


def test_no_punctuation():
    assert no_punctuation("don't") == "dont"
    assert NoPunctuation().map("snake_case") == "snakecase"
    assert no_punctuation("___") == ""


def test_remove_diacritics():
    assert RemoveDiacritics().map("příliš") == "prilis"


def test_stop_words_drop_case_insensitively():
    mapper = StopWords(["The", "a"])
    assert mapper.map("the") == ""
    assert mapper.map("THE") == ""
    assert mapper.map("cat") == "cat"


def test_stop_words_from_json(tmp_path):
    path = tmp_path / "stopwords.json"
    path.write_text(json.dumps(["and", "or"]), encoding="utf-8")
    mapper = StopWords.from_json(str(path))
    assert mapper.map("and") == ""
    assert mapper.map("not") == "not"


def test_pipeline_applies_mappers_in_order():
    pipeline = WordMappingPipeline([CaseInsensitive(), StopWords(["the"])])
    assert pipeline("The") == ""
    assert pipeline("Cat") == "cat"
    assert len(pipeline) == 2


def test_pipeline_short_circuits_on_dropped_word():
    calls = []

    def record(word):
        calls.append(word)
        return word

    pipeline = WordMappingPipeline([StopWords(["x"]), record])
    assert pipeline("x") == ""
    assert calls == []


def test_plain_callables_are_wrapped():
    mapper = as_word_mapper(str.upper)
    assert isinstance(mapper, FunctionMapper)
    assert mapper("abc") == "ABC"
    assert as_word_mapper(case_insensitive) is case_insensitive


def test_non_callable_mapper_is_rejected():
    with pytest.raises(TypeError):
        as_word_mapper(42)
