"""
Streaming Engine
================

Line source in -> samples out. One line at a time, nothing buffered.

    line -> classify -> tokenize -> (resolve schema) -> map -> build -> Sample | None

SampleParser holds the per-parse state and does all the work synchronously.
iter_samples / aiter_samples only differ in how they fetch the next line:
the async adapter awaits the line source and nothing else.
"""

import logging
from typing import AsyncIterable, AsyncIterator, Iterable, Iterator, Optional, Protocol

from flysight.config.settings import ReaderConfig
from flysight.core.sample import Sample
from flysight.stream.builder import build_sample
from flysight.stream.classifier import is_skippable, strip_bom
from flysight.stream.mapper import map_row
from flysight.stream.schema import ResolverState, SchemaResolver
from flysight.stream.tokenizer import split_line

logger = logging.getLogger(__name__)


class CancelToken(Protocol):
    """Anything with is_set(): threading.Event, asyncio.Event, ..."""

    def is_set(self) -> bool: ...


class ParseCancelled(Exception):
    """
    Raised when a parse is stopped through its cancel token.

    Distinct from normal completion (StopIteration) and from resource
    errors (OSError and friends), which propagate unchanged.
    """

    def __init__(self, line_number: int):
        super().__init__(f"Parse cancelled before line {line_number}")
        self.line_number = line_number


class SampleParser:
    """
    Per-parse state machine.

    Create one per line source; never share between parses.

    Usage:
        parser = SampleParser()
        for line in lines:
            sample = parser.feed(line)
            if sample is not None:
                ...
    """

    def __init__(self, config: Optional[ReaderConfig] = None):
        self.config = config or ReaderConfig()
        self.resolver = SchemaResolver(min_matches=self.config.min_header_matches)
        self.line_number = 0

    @property
    def state(self) -> ResolverState:
        """Resolver state for this parse."""
        return self.resolver.state

    def feed(self, line: str) -> Optional[Sample]:
        """
        Process one line.

        Args:
            line: Raw line; a trailing newline is tolerated

        Returns:
            The line's Sample, or None (skipped, header, or dropped row)
        """
        self.line_number += 1
        line = line.rstrip('\r\n')

        if is_skippable(line):
            return None

        fields = split_line(strip_bom(line))

        if not self.resolver.established:
            if self.resolver.resolve(fields):
                logger.debug(f"Header at line {self.line_number}: {self.resolver.schema}")
                return None
            logger.debug(f"No header; canonical columns from line {self.line_number}")

        sample = build_sample(map_row(fields, self.resolver.schema))
        if sample is None:
            logger.debug(f"Dropped malformed row at line {self.line_number}")
        return sample

    def check_cancelled(self, cancel: Optional[CancelToken]) -> None:
        """Raise ParseCancelled if `cancel` is set; call before each line."""
        if cancel is not None and cancel.is_set():
            logger.warning(f"Parse cancelled after {self.line_number} lines")
            raise ParseCancelled(self.line_number + 1)


def iter_samples(
    lines: Iterable[str],
    config: Optional[ReaderConfig] = None,
    cancel: Optional[CancelToken] = None,
) -> Iterator[Sample]:
    """
    Blocking adapter: pull lines from an iterable, yield samples lazily.

    Args:
        lines: Any iterable of text lines (file object, list, generator)
        config: Reader settings (defaults if None)
        cancel: Optional token checked before each line is processed

    Raises:
        ParseCancelled: If `cancel` is set at a line boundary
    """
    parser = SampleParser(config)

    for line in lines:
        parser.check_cancelled(cancel)
        sample = parser.feed(line)
        if sample is not None:
            yield sample


async def aiter_samples(
    lines: AsyncIterable[str],
    config: Optional[ReaderConfig] = None,
    cancel: Optional[CancelToken] = None,
) -> AsyncIterator[Sample]:
    """
    Suspending adapter: await each line, then process it synchronously.

    asyncio task cancellation surfaces from the line fetch as usual;
    `cancel` gives the same cooperative stop as iter_samples.

    Raises:
        ParseCancelled: If `cancel` is set at a line boundary
    """
    parser = SampleParser(config)

    async for line in lines:
        parser.check_cancelled(cancel)
        sample = parser.feed(line)
        if sample is not None:
            yield sample
