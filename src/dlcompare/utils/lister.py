import asyncio
import logging
import multiprocessing
import os
import stat
from abc import ABC, abstractmethod
from multiprocessing.pool import ThreadPool
from pathlib import Path

logger = logging.getLogger(__name__)


def list_directory_entries(path: Path) -> list[str]:
    return os.listdir(path)


def is_directory_path(path: Path) -> bool:
    return stat.S_ISDIR(os.lstat(path).st_mode)


class DirectoryLister(ABC):
    """Directory access used by the comparison engines.

    Both operations report a missing path with FileNotFoundError and a path that
    runs through a non-directory with NotADirectoryError, so callers can tell
    those conditions apart from other failures.
    """

    @abstractmethod
    async def list_entries(self, path: Path) -> list[str]:
        """List the names of the immediate entries of a directory."""

    @abstractmethod
    async def is_directory(self, path: Path) -> bool:
        """Report whether a path is a directory, without following symlinks."""


class FilesystemLister(DirectoryLister):
    def __init__(self, concurrency: int | None = None):
        if concurrency is None:
            concurrency = multiprocessing.cpu_count()

        self._concurrency = concurrency
        self._pool: ThreadPool = ThreadPool(self._concurrency)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        self._pool.close()

    @property
    def concurrency(self):
        return self._concurrency

    async def list_entries(self, path: Path) -> list[str]:
        logger.debug(f"Listing directory: {path}")
        return await self._evaluate(list_directory_entries, path)

    async def is_directory(self, path: Path) -> bool:
        return await self._evaluate(is_directory_path, path)

    def _evaluate(self, func, *args):
        loop = asyncio.get_running_loop()
        future = loop.create_future()

        def resolve(value):
            if not future.done():
                future.set_result(value)

        def reject(exc):
            if not future.done():
                future.set_exception(exc)

        def post(settle, value):
            try:
                loop.call_soon_threadsafe(settle, value)
            except RuntimeError:
                # The comparison was aborted and its loop closed before this call finished
                logger.debug(f"Discarding result of {func.__name__}{args}: event loop closed")

        self._pool.apply_async(func, args=args,
                               callback=lambda v: post(resolve, v),
                               error_callback=lambda e: post(reject, e))

        return future
