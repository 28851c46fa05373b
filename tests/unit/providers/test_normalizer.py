"""Tests for completion text normalization."""

import json

import pytest

from lfdigital.providers.llm.normalizer import (
    normalize,
    strip_boxed_wrapper,
    strip_code_fences,
)

PLAIN_INPUTS = [
    "",
    "hello world",
    '{"a":1}',
    '  {"serviceSuggestions": []}  ',
    "not json { at all",
    "a single ` backtick and a {brace}",
    "boxed without backslash: boxed{1}",
    "\n\n",
]

MESSY_INPUTS = [
    '```json\n{"a":1}\n```',
    '```JSON\n{"a":1}\n```',
    '```\n{"a":1}\n```',
    'Sure! Here it is:\n```json\n{"a":1}\n```\nAnything else?',
    '\\boxed{{"a":1}}',
    '```json\n\\boxed{{"a": {"b": 2}}}\n```',
    '\\boxed{ {"a": "}"} }',
    "\\boxed{unbalanced",
    "```json\nno closing fence",
    '\\boxed{\\boxed{{"a":1}}}',
]


class TestStripCodeFences:
    """Tests for strip_code_fences."""

    def test_strips_json_fence(self) -> None:
        """Opening and closing fence markers are removed."""
        assert strip_code_fences('```json\n{"a":1}\n```') == '{"a":1}'

    def test_strips_bare_fence(self) -> None:
        """A fence without a language tag is also stripped."""
        assert strip_code_fences('```\n{"a":1}\n```') == '{"a":1}'

    def test_drops_surrounding_prose(self) -> None:
        """Only the fenced interior is kept."""
        text = 'Here you go:\n```json\n{"a":1}\n```\nThanks'
        assert strip_code_fences(text) == '{"a":1}'

    def test_unclosed_fence_keeps_rest(self) -> None:
        """Without a closing fence everything after the opener is kept."""
        assert strip_code_fences('```json\n{"a":1}') == '{"a":1}'

    def test_no_fence_is_noop(self) -> None:
        """Text without a fence is returned unchanged."""
        assert strip_code_fences(' {"a":1} ') == ' {"a":1} '


class TestStripBoxedWrapper:
    """Tests for strip_boxed_wrapper."""

    def test_strips_wrapper_around_object(self) -> None:
        """The wrapper's braces are removed, the payload's are kept."""
        assert strip_boxed_wrapper('\\boxed{{"a":1}}') == '{"a":1}'

    def test_keeps_nested_braces(self) -> None:
        """Nested objects survive wrapper removal."""
        result = strip_boxed_wrapper('\\boxed{{"a": {"b": {"c": 3}}}}')
        assert json.loads(result) == {"a": {"b": {"c": 3}}}

    def test_ignores_braces_inside_strings(self) -> None:
        """Braces inside JSON strings do not close the wrapper."""
        result = strip_boxed_wrapper('\\boxed{{"a": "}{", "b": "\\"}"}}')
        assert json.loads(result) == {"a": "}{", "b": '"}'}

    def test_unbalanced_removes_opener_only(self) -> None:
        """An unclosed wrapper loses its opener and keeps the rest."""
        assert strip_boxed_wrapper('\\boxed{{"a":1}') == '{"a":1}'

    def test_no_wrapper_is_noop(self) -> None:
        """Text without a wrapper is returned unchanged."""
        assert strip_boxed_wrapper('{"a":1}') == '{"a":1}'


class TestNormalize:
    """Tests for the composed normalize function."""

    def test_fence_example(self) -> None:
        """A fenced JSON block becomes bare JSON."""
        assert normalize('```json\n{"a":1}\n```') == '{"a":1}'

    def test_boxed_example_parses(self) -> None:
        """A boxed JSON object parses after normalization."""
        assert json.loads(normalize('\\boxed{{"a":1}}')) == {"a": 1}

    def test_fence_then_boxed(self) -> None:
        """A boxed payload inside a fence is fully unwrapped."""
        text = '```json\n\\boxed{{"caseStudy": {"title": "X"}}}\n```'
        assert json.loads(normalize(text)) == {"caseStudy": {"title": "X"}}

    def test_nested_wrappers(self) -> None:
        """Repeated wrappers are removed until none remain."""
        assert json.loads(normalize('\\boxed{\\boxed{{"a":1}}}')) == {"a": 1}

    @pytest.mark.parametrize("text", PLAIN_INPUTS)
    def test_noop_without_patterns(self, text: str) -> None:
        """Strings without a fence or wrapper are returned unchanged."""
        assert normalize(text) == text

    @pytest.mark.parametrize("text", PLAIN_INPUTS + MESSY_INPUTS)
    def test_idempotent(self, text: str) -> None:
        """Normalizing twice equals normalizing once."""
        once = normalize(text)
        assert normalize(once) == once
