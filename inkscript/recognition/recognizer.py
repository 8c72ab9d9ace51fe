"""
Recognition orchestrator.

The Recognizer turns the pages of a notebook into recognition results:

1. Fetch the page drawing from the document
2. Convert the ink into a page request
3. Look the request's fingerprint up in the cache
4. On a miss, call the recognition service and cache the result
   in the background

Pages are processed concurrently, one task per page. A failed page does
not cancel the others; the document fails with the first error once all
tasks have finished.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass

from inkscript.config import RecognitionConfig, Settings
from inkscript.exceptions import PageRecognitionError
from inkscript.models import Document, Drawing, Result
from inkscript.recognition.cache import ContentCache
from inkscript.recognition.client import RecognitionClient
from inkscript.recognition.fingerprint import fingerprint
from inkscript.recognition.ink import convert_drawing
from inkscript.recognition.request import prepare_request

logger = logging.getLogger(__name__)


@dataclass
class RecognitionStats:
    """Statistics for the recognition of one document."""

    pages: int = 0
    cache_hits: int = 0
    remote_calls: int = 0
    failures: int = 0
    processing_time_ms: float = 0.0


class Recognizer:
    """
    Organizes recognition calls for whole documents, with caching.

    Attributes:
        client: RecognitionClient used on cache misses.
        cache: ContentCache for results (disabled cache if None).
        config: Default RecognitionConfig for page requests.
        last_stats: Statistics of the most recent recognize() call.

    Example:
        >>> recognizer = Recognizer.from_settings(load_settings())
        >>> results = recognizer.recognize(doc)
        >>> results["page-1"].label
        'Hello world'
    """

    def __init__(
        self,
        client: RecognitionClient,
        cache: ContentCache | None = None,
        config: RecognitionConfig | None = None,
    ) -> None:
        self.client = client
        self.cache = cache if cache is not None else ContentCache()
        self.config = config or RecognitionConfig()
        self.last_stats = RecognitionStats()
        self._stats_lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings, use_cache: bool = True) -> Recognizer:
        """Create a recognizer with client and cache configured from settings."""
        client = RecognitionClient(
            settings.app_key,
            settings.hmac_key,
            host=settings.host,
            timeout=settings.recognition.timeout,
        )
        cache = ContentCache(settings.hwr_cache if use_cache else None)
        return cls(client, cache, settings.recognition)

    def recognize(self, document: Document, language: str | None = None) -> dict[str, Result]:
        """
        Perform handwriting recognition on all pages of a document.

        Args:
            document: The notebook to recognize.
            language: Optional language override (e.g. "de" or "de_DE").

        Returns:
            Mapping of page id to recognition Result.

        Raises:
            PageRecognitionError: For the first page that failed, after
                all page tasks have completed.
        """
        config = self._config_for(language)
        page_ids = list(document.pages())
        stats = RecognitionStats(pages=len(page_ids))
        self.last_stats = stats
        start_time = time.time()

        results: dict[str, Result] = {}
        results_lock = threading.Lock()

        def recognize_page(page_id: str) -> None:
            drawing = document.drawing(page_id)
            result = self._recognize(drawing, config, stats)
            with results_lock:
                results[page_id] = result
            logger.debug("Recognized page %s: %d chars", page_id, len(result.label))

        if not page_ids:
            return results

        first_error: tuple[str, Exception] | None = None
        workers = config.max_workers or len(page_ids)
        with ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix="inkscript-page"
        ) as executor:
            futures = {executor.submit(recognize_page, page_id): page_id for page_id in page_ids}
            for future in as_completed(futures):
                page_id = futures[future]
                try:
                    future.result()
                except Exception as e:
                    logger.error("Recognition failed for page %s: %s", page_id, e)
                    with self._stats_lock:
                        stats.failures += 1
                    if first_error is None:
                        first_error = (page_id, e)

        stats.processing_time_ms = (time.time() - start_time) * 1000
        logger.info(
            "Recognized %d pages: %d cached, %d remote calls, %d failed (%.0f ms)",
            stats.pages,
            stats.cache_hits,
            stats.remote_calls,
            stats.failures,
            stats.processing_time_ms,
        )

        if first_error is not None:
            page_id, cause = first_error
            raise PageRecognitionError(page_id, cause) from cause

        return results

    def recognize_drawing(self, drawing: Drawing, language: str | None = None) -> Result:
        """Recognize a single page drawing, using the cache."""
        return self._recognize(drawing, self._config_for(language), RecognitionStats(pages=1))

    def close(self) -> None:
        """Wait for background cache writes and release resources."""
        self.cache.close()

    def __enter__(self) -> Recognizer:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _recognize(
        self,
        drawing: Drawing,
        config: RecognitionConfig,
        stats: RecognitionStats,
    ) -> Result:
        request = prepare_request(config, convert_drawing(drawing))
        key = fingerprint(request)

        cached = self.cache.read(key)
        if cached is not None:
            with self._stats_lock:
                stats.cache_hits += 1
            return cached

        with self._stats_lock:
            stats.remote_calls += 1
        result = self.client.batch(request)

        # Written in the background; write failures are logged by the cache
        self.cache.write_async(key, result)
        return result

    def _config_for(self, language: str | None) -> RecognitionConfig:
        if language is None:
            return self.config
        return dataclasses.replace(self.config, language=language)
