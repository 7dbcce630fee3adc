"""
Combine the summaries of several news sources into one output stream.
"""

import concurrent.futures as _fut
from typing import Callable, List, TextIO

from .exceptions import AggregateError
from .logging_config import get_logger

logger = get_logger(__name__)


def _source_name(source) -> str:
    return type(source).__name__


def _emit(output: TextIO, text: str) -> None:
    output.write(text + "\n")
    flush = getattr(output, "flush", None)
    if flush is not None:
        flush()


def write_summaries(output: TextIO, *sources, max_workers: int = 1) -> None:
    """
    Write the summary of every source to ``output``, in the order given.

    Each successful summary is written as soon as it is available, followed
    by a newline. A failing source writes nothing and does not stop the
    sources after it.

    Args:
        output: Any writable text stream
        sources: Objects with a parameterless ``summary()`` method
        max_workers: Run up to this many summaries in threads. Output order
            is the same as with the default sequential run.

    Raises:
        AggregateError: If one or more sources failed, holding every
            failure in source order
        ValueError: If max_workers is less than 1
    """
    if max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")

    logger.debug(f"Writing summaries for {len(sources)} sources (max_workers={max_workers})")
    errors: List[Exception] = []

    def _record(source, result: Callable[[], str]) -> None:
        try:
            text = result()
            if not isinstance(text, str):
                raise TypeError(
                    f"{_source_name(source)}.summary() returned {type(text).__name__}, expected str"
                )
        except Exception as e:
            logger.warning(f"Source {_source_name(source)} failed: {e}")
            errors.append(e)
            return
        _emit(output, text)

    if max_workers == 1 or len(sources) < 2:
        for source in sources:
            _record(source, source.summary)
    else:
        with _fut.ThreadPoolExecutor(max_workers=max_workers) as ex:
            futures = [ex.submit(source.summary) for source in sources]
            for source, fu in zip(sources, futures):
                _record(source, fu.result)

    if errors:
        logger.info(f"{len(errors)} of {len(sources)} sources failed")
        raise AggregateError(errors)
    logger.info(f"Wrote summaries for {len(sources)} sources")
