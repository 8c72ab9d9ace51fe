"""
File-backed cache for recognition results.

One JSON file per request fingerprint:

    <cache_dir>/<fingerprint>.cache.json

Entries are written once and never updated; changed ink produces a new
fingerprint and therefore a new entry. All cache failures are soft: a
read problem is a miss, a failed background write is logged and dropped.

A single lock guards all file access, so a reader never sees a file that
is still being written.
"""

from __future__ import annotations

import json
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from pathlib import Path

from inkscript.models import Result

logger = logging.getLogger(__name__)

CACHE_SUFFIX = ".cache.json"


class ContentCache:
    """
    Key-value store mapping fingerprints to recognition results.

    A cache created without a directory is disabled: every read misses
    and writes do nothing.

    Example:
        >>> with ContentCache(Path("~/.cache/inkscript/hwr").expanduser()) as cache:
        ...     result = cache.read(key)
        ...     if result is None:
        ...         result = client.batch(request)
        ...         cache.write_async(key, result)
    """

    def __init__(self, cache_dir: str | Path | None = None) -> None:
        self.cache_dir = Path(cache_dir) if cache_dir else None
        self._lock = threading.Lock()
        self._executor: ThreadPoolExecutor | None = None
        self._executor_lock = threading.Lock()
        self._pending: set[Future] = set()

    @property
    def enabled(self) -> bool:
        return self.cache_dir is not None

    def path_for(self, key: str) -> Path:
        if self.cache_dir is None:
            raise ValueError("Cache is disabled; no cache directory configured")
        return self.cache_dir / f"{key}{CACHE_SUFFIX}"

    def read(self, key: str) -> Result | None:
        """
        Look up a cached result.

        Returns:
            The cached Result, or None on a miss (including unreadable
            or corrupt entries).
        """
        if self.cache_dir is None:
            return None

        path = self.path_for(key)
        with self._lock:
            try:
                with open(path, encoding="utf-8") as f:
                    data = json.load(f)
            except FileNotFoundError:
                logger.debug("Cache miss for %s", key)
                return None
            except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
                logger.warning("Ignoring unreadable cache entry %s: %s", path, e)
                return None

        try:
            result = Result.from_dict(data)
        except (ValueError, TypeError, AttributeError) as e:
            logger.warning("Ignoring malformed cache entry %s: %s", path, e)
            return None

        logger.debug("Cache hit for %s", key)
        return result

    def write(self, key: str, result: Result) -> None:
        """
        Store a result, creating the cache directory on demand.

        Raises:
            OSError: If the directory or file cannot be written.
        """
        if self.cache_dir is None:
            return

        path = self.path_for(key)
        with self._lock:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(result.to_dict(), f)
        logger.debug("Cached result for %s", key)

    def write_async(self, key: str, result: Result) -> Future | None:
        """
        Store a result in the background.

        Failures are logged and otherwise discarded. Use flush() to wait
        for pending writes.
        """
        if self.cache_dir is None:
            return None

        future = self._get_executor().submit(self._write_quietly, key, result)
        with self._executor_lock:
            self._pending.add(future)
        future.add_done_callback(self._discard)
        return future

    def flush(self, timeout: float | None = None) -> None:
        """Wait until all background writes have finished."""
        with self._executor_lock:
            pending = set(self._pending)
        if pending:
            wait(pending, timeout=timeout)

    def close(self) -> None:
        """Flush pending writes and stop the background writer."""
        with self._executor_lock:
            executor = self._executor
            self._executor = None
        if executor is not None:
            executor.shutdown(wait=True)

    def __enter__(self) -> ContentCache:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get_executor(self) -> ThreadPoolExecutor:
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=1, thread_name_prefix="inkscript-cache"
                )
            return self._executor

    def _write_quietly(self, key: str, result: Result) -> None:
        try:
            self.write(key, result)
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Failed to cache result for %s: %s", key, e)

    def _discard(self, future: Future) -> None:
        with self._executor_lock:
            self._pending.discard(future)
