"""
News sources that can be combined by write_summaries.
"""

from .base import Summarizer
from .hackernews import HNClient

__all__ = [
    "Summarizer",
    "HNClient",
]
