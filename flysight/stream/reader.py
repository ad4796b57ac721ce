"""
FlySight Readers
================

Public entry points.

    read(lines)              - any iterable of lines, blocking
    read_async(lines)        - any async iterable of lines
    read_file(path)          - open a log file, then read()
    read_file_async(path)    - open a log file, then read_async()

The file readers are the only code that touches the filesystem. Missing
or unreadable files raise the usual OSError subclasses; nothing is retried.

Usage:
    from flysight import read_file, where_fix_3d

    for sample in where_fix_3d(read_file('TRACK.CSV')):
        print(sample.time, sample.speed_3d)
"""

import asyncio
import logging
from pathlib import Path
from typing import AsyncIterable, AsyncIterator, Iterable, Iterator, Optional, TextIO, Union

from flysight.config.settings import ReaderConfig
from flysight.core.sample import Sample
from flysight.stream.engine import CancelToken, aiter_samples, iter_samples

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read(
    lines: Iterable[str],
    config: Optional[ReaderConfig] = None,
    cancel: Optional[CancelToken] = None,
) -> Iterator[Sample]:
    """Parse samples from an iterable of text lines. Lazy."""
    return iter_samples(lines, config=config, cancel=cancel)


def read_async(
    lines: AsyncIterable[str],
    config: Optional[ReaderConfig] = None,
    cancel: Optional[CancelToken] = None,
) -> AsyncIterator[Sample]:
    """Parse samples from an async iterable of text lines. Lazy."""
    return aiter_samples(lines, config=config, cancel=cancel)


def _open(path: PathLike, config: ReaderConfig) -> TextIO:
    return open(path, 'r', encoding=config.encoding)


def read_file(
    path: PathLike,
    config: Optional[ReaderConfig] = None,
    cancel: Optional[CancelToken] = None,
) -> Iterator[Sample]:
    """
    Open a FlySight log and yield its samples.

    The file is opened on first iteration and closed when the generator
    finishes or is closed.

    Args:
        path: Log file path
        config: Reader settings; `encoding` is used to decode the file
        cancel: Optional cancel token

    Raises:
        FileNotFoundError: If the file does not exist
        ParseCancelled: If cancelled
    """
    config = config or ReaderConfig()

    with _open(path, config) as f:
        logger.info(f"Reading {path}")
        yield from iter_samples(f, config=config, cancel=cancel)


async def _aiter_lines(f: TextIO) -> AsyncIterator[str]:
    """Read lines off the event loop thread, one at a time."""
    while True:
        line = await asyncio.to_thread(f.readline)
        if not line:
            return
        yield line


async def read_file_async(
    path: PathLike,
    config: Optional[ReaderConfig] = None,
    cancel: Optional[CancelToken] = None,
) -> AsyncIterator[Sample]:
    """
    Async counterpart of read_file.

    Opening and each line read run in a worker thread, so the event loop
    only waits; parsing happens on the loop between reads.
    """
    config = config or ReaderConfig()

    f = await asyncio.to_thread(_open, path, config)
    try:
        logger.info(f"Reading {path} (async)")
        async for sample in aiter_samples(_aiter_lines(f), config=config, cancel=cancel):
            yield sample
    finally:
        f.close()
