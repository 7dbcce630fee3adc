"""
morningpost
Aggregate news summaries from pluggable sources, starting with Hacker News
"""

from .aggregator import write_summaries
from .exceptions import (
    MorningPostError,
    TransportError,
    UnexpectedStatusError,
    ParseError,
    AggregateError,
)
from .fetchers import APIClient
from .models import Story, ClientConfig
from .parsers import parse_newest_ids, parse_story
from .summarizers import Summarizer, HNClient

__version__ = "0.1.0"

__all__ = [
    "write_summaries",
    "MorningPostError",
    "TransportError",
    "UnexpectedStatusError",
    "ParseError",
    "AggregateError",
    "APIClient",
    "Story",
    "ClientConfig",
    "parse_newest_ids",
    "parse_story",
    "Summarizer",
    "HNClient",
]
