"""
Exception types raised by morningpost.
"""

from typing import Iterable, Iterator, List


class MorningPostError(Exception):
    """Base class for all morningpost errors."""


class TransportError(MorningPostError):
    """Raised when the API cannot be reached (connection failure, timeout)."""

    def __init__(self, url: str, reason: Exception):
        self.url = url
        self.reason = reason
        super().__init__(f"request to {url} failed: {reason}")


class UnexpectedStatusError(MorningPostError):
    """Raised when the API answers with anything other than HTTP 200."""

    def __init__(self, status_code: int, url: str = ""):
        self.status_code = status_code
        self.url = url
        super().__init__(f"got unexpected response code {status_code}")


class ParseError(MorningPostError):
    """Raised when a response body does not decode into the expected shape."""

    def __init__(self, payload: bytes, reason):
        self.payload = payload
        self.reason = reason
        super().__init__(f"invalid API response {payload!r}: {reason}")


class AggregateError(MorningPostError):
    """
    Joins the errors of every failed news source.

    Errors are kept in the order the sources were processed. The message
    lists one error per line.
    """

    def __init__(self, errors: Iterable[Exception]):
        self.errors: List[Exception] = list(errors)
        super().__init__("\n".join(str(e) for e in self.errors))

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[Exception]:
        return iter(self.errors)

    def __bool__(self) -> bool:
        return bool(self.errors)
