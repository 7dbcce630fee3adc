"""
Tests for the parsers module.
"""

import json
import os

import pytest

from morningpost.exceptions import ParseError
from morningpost.models import Story
from morningpost.parsers import parse_newest_ids, parse_story

TESTDATA = os.path.join(os.path.dirname(__file__), "testdata")


def read_testdata(name):
    with open(os.path.join(TESTDATA, name), "rb") as f:
        return f.read()


class TestParseNewestIds:

    def test_parses_json_array_of_ints(self):
        result = parse_newest_ids(b"[38776446, 38776437]")

        assert result == [38776446, 38776437]

    def test_preserves_order(self):
        result = parse_newest_ids(b"[3, 1, 2]")

        assert result == [3, 1, 2]

    def test_empty_array(self):
        assert parse_newest_ids(b"[]") == []

    def test_null_is_no_items(self):
        assert parse_newest_ids(b"null") == []

    def test_non_int_element_raises(self):
        with pytest.raises(ParseError):
            parse_newest_ids(b'["not-an-int"]')

    @pytest.mark.parametrize("payload", [b"[1.5]", b"[true]", b"[null]", b"[{}]", b"[[1]]"])
    def test_other_non_int_elements_raise(self, payload):
        with pytest.raises(ParseError):
            parse_newest_ids(payload)

    def test_object_raises(self):
        with pytest.raises(ParseError):
            parse_newest_ids(b'{"ids": [1, 2]}')

    def test_malformed_json_raises_with_cause(self):
        with pytest.raises(ParseError) as exc_info:
            parse_newest_ids(b"[1, 2")

        assert exc_info.value.payload == b"[1, 2"
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)
        assert "invalid API response" in str(exc_info.value)
        assert "[1, 2" in str(exc_info.value)


class TestParseStory:

    def test_parses_item_response(self):
        result = parse_story(read_testdata("hackernews_story_item_response.json"))

        assert result == Story(
            title="Computer-Based System Safety Essential Reading List",
            url="http://safeautonomy.blogspot.com/p/safe-autonomy.html",
        )

    def test_simple_object(self):
        result = parse_story(b'{"title": "T", "url": "U"}')

        assert result.title == "T"
        assert result.url == "U"

    def test_missing_fields_default_to_empty(self):
        result = parse_story(b'{"id": 1, "type": "job"}')

        assert result == Story(title="", url="")

    def test_null_fields_default_to_empty(self):
        result = parse_story(b'{"title": "Ask HN: Anything?", "url": null}')

        assert result.title == "Ask HN: Anything?"
        assert result.url == ""

    def test_null_document_is_empty_story(self):
        assert parse_story(b"null") == Story()

    def test_empty_array_raises(self):
        with pytest.raises(ParseError) as exc_info:
            parse_story(b"[]")

        assert exc_info.value.payload == b"[]"

    def test_malformed_json_raises(self):
        with pytest.raises(ParseError):
            parse_story(b'{"title": ')

    def test_non_string_title_raises(self):
        with pytest.raises(ParseError):
            parse_story(b'{"title": 42, "url": "U"}')

    def test_story_is_immutable(self):
        story = parse_story(b'{"title": "T", "url": "U"}')

        with pytest.raises(AttributeError):
            story.title = "changed"
