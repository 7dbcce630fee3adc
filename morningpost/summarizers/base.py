"""
Base class for news sources.
"""

from abc import ABC, abstractmethod

from ..logging_config import get_logger


class Summarizer(ABC):
    """
    A news source that can render a human-readable summary.

    Subclassing is optional: write_summaries accepts any object with a
    parameterless ``summary()`` method.
    """

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

    @abstractmethod
    def summary(self) -> str:
        """
        Build a news summary suitable for reading by human beings.

        Returns:
            The rendered summary text

        Raises:
            Exception: Any problem building the summary, e.g. talking to
                an API or parsing its responses
        """
        pass
