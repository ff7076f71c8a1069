from __future__ import annotations

import pytest

from flashcard_relay.core.errors import NormalizationError
from flashcard_relay.core.normalization import (
    NORMALIZATION_FAILURE_MESSAGE,
    extract_json,
    find_greedy_span,
)
from flashcard_relay.core.types import JSONShape


def test_clean_array_parses_directly():
    text = '[{"term": "A", "definition": "B"}, {"term": "C", "definition": "D"}]'

    assert extract_json(text, JSONShape.ARRAY) == [
        {"term": "A", "definition": "B"},
        {"term": "C", "definition": "D"},
    ]


def test_clean_object_parses_directly_with_surrounding_whitespace():
    text = '\n  {"question": "Q", "options": ["1", "2", "3", "4"], "correct": "b"}  \n'

    assert extract_json(text, JSONShape.OBJECT) == {
        "question": "Q",
        "options": ["1", "2", "3", "4"],
        "correct": "b",
    }


def test_array_recovered_from_surrounding_prose():
    text = 'Here is the result: [{"term":"A","definition":"B"}] Hope that helps!'

    assert extract_json(text, JSONShape.ARRAY) == [{"term": "A", "definition": "B"}]


def test_object_recovered_from_markdown_fence():
    text = '```json\n{\n  "groups": [{"title": "T", "description": "D", "cardIndices": [0]}]\n}\n```'

    assert extract_json(text, JSONShape.OBJECT) == {
        "groups": [{"title": "T", "description": "D", "cardIndices": [0]}]
    }


def test_wrong_top_level_shape_falls_back_to_inner_span():
    text = '{"flashcards": [{"term": "A", "definition": "B"}]}'

    assert extract_json(text, JSONShape.ARRAY) == [{"term": "A", "definition": "B"}]


def test_no_bracket_is_terminal_failure():
    with pytest.raises(NormalizationError) as excinfo:
        extract_json("I cannot help with that.", JSONShape.ARRAY)

    assert excinfo.value.status_code == 500
    assert excinfo.value.message == NORMALIZATION_FAILURE_MESSAGE
    assert excinfo.value.to_envelope()["error"] == NORMALIZATION_FAILURE_MESSAGE


def test_empty_output_is_terminal_failure():
    with pytest.raises(NormalizationError):
        extract_json("", JSONShape.OBJECT)


def test_unparseable_span_is_terminal_failure():
    with pytest.raises(NormalizationError) as excinfo:
        extract_json("Result: {term: A, definition: B}", JSONShape.OBJECT)

    assert "could not be parsed" in excinfo.value.details


def test_greedy_span_runs_from_first_open_to_last_close():
    text = 'first {"a": 1} then {"b": 2} done'

    assert find_greedy_span(text, JSONShape.OBJECT) == '{"a": 1} then {"b": 2}'


def test_multiple_blobs_are_not_disambiguated():
    # The greedy span covers both objects and is not valid JSON
    with pytest.raises(NormalizationError):
        extract_json('first {"a": 1} then {"b": 2} done', JSONShape.OBJECT)


def test_nested_brackets_inside_single_blob_are_kept():
    text = 'Sure! {"groups": [{"title": "T", "cardIndices": [0, 1]}]} Enjoy.'

    assert extract_json(text, JSONShape.OBJECT) == {
        "groups": [{"title": "T", "cardIndices": [0, 1]}]
    }
