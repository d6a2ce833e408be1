"""Image placeholders and the image-resolution collaborator interface.

The parser only ever creates ``ImageRef`` values: an opaque, stable handle
carrying the URL found in ``![alt](url)``. Fetching bytes is the job of an
injected ``ImageFetcher``; Tinta ships none.

Architecture:
    parse() -> Document with ImageRef placeholders
    ImageResolver.watch(doc, callback)
        -> ImageCache.request(url)         (one in-flight fetch per URL)
        -> callback(ImageEvent(...))       (per watched document)

Usage:
    >>> cache = ImageCache(fetcher=my_fetch)
    >>> resolver = ImageResolver(cache)
    >>> resolver.watch(doc, surface.on_image)
    >>> ...
    >>> resolver.unwatch(doc)

Thread Safety:
    ImageRef is frozen. ImageCache and ImageResolver guard their tables with
    a lock; callbacks run on the fetch worker threads, never on the parsing
    thread.

"""

from __future__ import annotations

import itertools
import threading
from collections.abc import Callable
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from tinta.errors import ImageError
from tinta.utils.logger import get_logger

if TYPE_CHECKING:
    from tinta.document import Document

logger = get_logger(__name__)

_ids = itertools.count(1)
_ids_lock = threading.Lock()


def _next_image_id() -> int:
    with _ids_lock:
        return next(_ids)


@dataclass(frozen=True, slots=True)
class ImageRef:
    """Opaque image placeholder handle.

    Attributes:
        id: Process-unique identity, stable for the life of the Document
        url: Resolved (trimmed, validated) image URL
        alt: Alternative text from the markup

    """

    id: int
    url: str
    alt: str = ""

    @classmethod
    def create(cls, url: str, alt: str = "") -> ImageRef:
        """Create a placeholder with a fresh identity."""
        return cls(id=_next_image_id(), url=url, alt=alt)


class ImageFetcher(Protocol):
    """Protocol for image fetchers.

    Takes a URL and returns the raw image bytes, raising on failure.
    """

    def __call__(self, url: str) -> bytes: ...


@dataclass(frozen=True, slots=True)
class ImageEvent:
    """Completion notification for one placeholder of one document.

    Exactly one of ``data`` and ``error`` is set.
    """

    document_id: int
    image: ImageRef
    data: bytes | None = None
    error: ImageError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ImageCache:
    """URL-keyed fetch cache with per-URL deduplication.

    Concurrent requests for the same URL share one Future. Failures are
    cached as well: a URL that failed once stays failed for the life of the
    cache.

    """

    __slots__ = ("_executor", "_fetcher", "_futures", "_lock", "_owns_executor")

    def __init__(self, fetcher: ImageFetcher, *, executor: Executor | None = None) -> None:
        """Initialize the cache.

        Args:
            fetcher: Callable returning image bytes for a URL
            executor: Where fetches run. Defaults to a small private thread pool.
        """
        self._fetcher = fetcher
        self._owns_executor = executor is None
        self._executor: Executor = executor or ThreadPoolExecutor(
            max_workers=4, thread_name_prefix="tinta-image"
        )
        self._futures: dict[str, Future[bytes]] = {}
        self._lock = threading.Lock()

    def request(self, url: str) -> Future[bytes]:
        """Return the (possibly shared) Future for ``url``."""
        with self._lock:
            future = self._futures.get(url)
            if future is None:
                logger.debug("Fetching image %s", url)
                future = self._executor.submit(self._fetch, url)
                self._futures[url] = future
            return future

    def _fetch(self, url: str) -> bytes:
        try:
            return self._fetcher(url)
        except ImageError:
            raise
        except Exception as e:
            raise ImageError(url, str(e) or type(e).__name__) from e

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._futures

    def __len__(self) -> int:
        with self._lock:
            return len(self._futures)

    def close(self) -> None:
        """Shut down the private executor (no-op for injected executors)."""
        if self._owns_executor:
            self._executor.shutdown(wait=True)


ImageCallback = Callable[[ImageEvent], None]


class ImageResolver:
    """Per-document observer hub for resolved images.

    ``watch`` subscribes a callback for one document and requests every
    placeholder it contains; each completion is published as an
    ``ImageEvent``. ``unwatch`` drops the subscription, after which pending
    completions for that document are discarded.

    """

    __slots__ = ("_cache", "_lock", "_watchers")

    def __init__(self, cache: ImageCache) -> None:
        self._cache = cache
        # The document is held so its id() cannot be reused while watched.
        self._watchers: dict[int, tuple[Document, ImageCallback]] = {}
        self._lock = threading.Lock()

    def watch(self, document: Document, callback: ImageCallback) -> int:
        """Start resolving the document's images.

        Args:
            document: Parsed document whose placeholders should be resolved
            callback: Receives one ImageEvent per placeholder

        Returns:
            The document identity used in published events.
        """
        document_id = id(document)
        with self._lock:
            self._watchers[document_id] = (document, callback)
        for image in document.images():
            future = self._cache.request(image.url)
            future.add_done_callback(
                lambda f, image=image: self._publish(document_id, image, f)
            )
        return document_id

    def unwatch(self, document: Document) -> None:
        """Stop delivering events for ``document``."""
        with self._lock:
            self._watchers.pop(id(document), None)

    def is_watching(self, document: Document) -> bool:
        with self._lock:
            return id(document) in self._watchers

    def _publish(self, document_id: int, image: ImageRef, future: Future[bytes]) -> None:
        with self._lock:
            entry = self._watchers.get(document_id)
        if entry is None:
            return
        _, callback = entry
        error = future.exception()
        if error is None:
            event = ImageEvent(document_id=document_id, image=image, data=future.result())
        else:
            if not isinstance(error, ImageError):
                error = ImageError(image.url, str(error))
            logger.debug("Image %s unresolved: %s", image.url, error)
            event = ImageEvent(document_id=document_id, image=image, error=error)
        callback(event)


__all__ = [
    "ImageCache",
    "ImageCallback",
    "ImageEvent",
    "ImageFetcher",
    "ImageRef",
    "ImageResolver",
]
