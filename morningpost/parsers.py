"""
Decoders for Hacker News API responses.

These functions do no I/O; they turn raw response bodies into model
objects or raise ParseError.
"""

import json
from typing import Any, List

from .exceptions import ParseError
from .models import Story


def _decode(data: bytes) -> Any:
    try:
        return json.loads(data)
    except ValueError as e:
        raise ParseError(data, e) from e


def _is_int(value: Any) -> bool:
    # bool is a subclass of int but never a valid item ID
    return isinstance(value, int) and not isinstance(value, bool)


def parse_newest_ids(data: bytes) -> List[int]:
    """
    Parse a newest-stories response into a list of item IDs.

    Args:
        data: Raw response body, expected to be a JSON array of integers

    Returns:
        Item IDs in the order the API returned them (newest first)

    Raises:
        ParseError: If the body is not a JSON array of integers
    """
    decoded = _decode(data)
    if decoded is None:
        return []
    if not isinstance(decoded, list):
        raise ParseError(data, f"expected a JSON array, got {type(decoded).__name__}")
    for index, value in enumerate(decoded):
        if not _is_int(value):
            raise ParseError(data, f"element {index} is not an integer: {value!r}")
    return decoded


def _string_field(data: bytes, item: dict, name: str) -> str:
    value = item.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ParseError(data, f"field {name!r} is not a string: {value!r}")
    return value


def parse_story(data: bytes) -> Story:
    """
    Parse an item response into a Story.

    Missing or null ``title``/``url`` fields become empty strings; only a
    body that is not a JSON object (or has non-string fields) is an error.
    """
    decoded = _decode(data)
    if decoded is None:
        return Story()
    if not isinstance(decoded, dict):
        raise ParseError(data, f"expected a JSON object, got {type(decoded).__name__}")
    return Story(
        title=_string_field(data, decoded, "title"),
        url=_string_field(data, decoded, "url"),
    )
