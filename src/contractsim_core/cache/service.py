# src/contractsim_core/cache/service.py
"""
Provides the per-simulator cache of lazily built circuit dispatchers.
"""
import logging
from typing import Any, Callable, Dict, TypeVar

from ..core.base_enums import CircuitKind

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DispatcherCache:
    """
    Holds at most one dispatcher per circuit kind, together with an explicit
    validity flag.

    The cache has two states. It is *uncached* right after creation and after
    every `invalidate()`, and becomes *cached* as soon as a dispatcher is built
    through `get_or_build`. Invalidation drops every stored dispatcher and bumps
    `generation`, so a dispatcher obtained before an invalidation is never
    returned again.
    """

    def __init__(self):
        self._entries: Dict[CircuitKind, Any] = {}
        self._valid = False
        self.generation = 0
        self.clear_stats()
        logger.debug("DispatcherCache instance created.")

    @property
    def is_valid(self) -> bool:
        return self._valid

    def get(self, kind: CircuitKind) -> Any:
        """Returns the cached dispatcher for `kind`, or None."""
        if self._valid and kind in self._entries:
            self._stats['hits'] += 1
            logger.debug(f"Dispatcher cache HIT for '{kind}' (generation {self.generation}).")
            return self._entries[kind]

        self._stats['misses'] += 1
        logger.debug(f"Dispatcher cache MISS for '{kind}' (generation {self.generation}).")
        return None

    def put(self, kind: CircuitKind, dispatcher: Any):
        """
        Stores a dispatcher for `kind` and marks the cache valid.

        Also usable directly, to install a wrapped or instrumented dispatcher in
        place of the one `get_or_build` would create. Replacing a cached entry
        logs a warning.
        """
        if self._valid and kind in self._entries:
            logger.warning(f"Dispatcher for '{kind}' already cached. Overwriting existing value.")
        self._entries[kind] = dispatcher
        self._valid = True

    def get_or_build(self, kind: CircuitKind, build: Callable[[], T]) -> T:
        """Returns the cached dispatcher for `kind`, building and storing it on a miss."""
        dispatcher = self.get(kind)
        if dispatcher is None:
            dispatcher = build()
            self.put(kind, dispatcher)
        return dispatcher

    def invalidate(self):
        """Drops every cached dispatcher. The next access rebuilds."""
        self._entries.clear()
        self._valid = False
        self.generation += 1
        logger.debug(f"Dispatcher cache invalidated (now generation {self.generation}).")

    def get_stats(self) -> Dict[str, int]:
        """Returns a copy of the hit/miss statistics."""
        return self._stats.copy()

    def clear_stats(self):
        self._stats = {'hits': 0, 'misses': 0}
