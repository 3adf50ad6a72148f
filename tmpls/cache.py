"""
Executor Cache - Glob pattern to Executor mapping.

Lazily populated and additive-only: an entry is created the first time a
glob is executed and lives as long as the cache. Reads take no lock; a
miss builds outside the lock and publishes with insert-if-absent, so two
threads racing on the same unseen glob may both build, but only the first
stored Executor is ever returned.
"""

from typing import Callable, Dict, List
import logging
import threading

from .executor import Executor

logger = logging.getLogger("tmpls.cache")


class ExecutorCache:
    """
    Thread-safe, insert-if-absent Executor cache keyed by glob.
    """

    def __init__(self):
        self._executors: Dict[str, Executor] = {}
        self._lock = threading.Lock()

    def get_or_build(self, glob: str, build: Callable[[str], Executor]) -> Executor:
        """
        Return the Executor cached for ``glob``, building it on a miss.

        Args:
            glob: Cache key (the exact glob string)
            build: Called with ``glob`` to create a new Executor

        Returns:
            The canonical Executor for ``glob``

        Raises:
            Whatever ``build`` raises; nothing is stored in that case.
        """
        executor = self._executors.get(glob)
        if executor is not None:
            return executor

        built = build(glob)
        with self._lock:
            executor = self._executors.setdefault(glob, built)

        if executor is not built:
            logger.debug("Discarding duplicate executor for %r", glob)
        return executor

    def keys(self) -> List[str]:
        return list(self._executors)

    def __contains__(self, glob: object) -> bool:
        return glob in self._executors

    def __len__(self) -> int:
        return len(self._executors)
