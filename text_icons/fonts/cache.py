"""Load-once cache of icon font legends.

Legends are static, so each one is read at most once per cache and kept for
the cache's lifetime; there is no eviction and no reload. The cache is safe to
share between threads: concurrent first use of a font performs a single read
and every caller receives the same Legend object.

The cache also registers each font file with the rendering contexts that use
it, at most once per (context, specifier) pair. Contexts need not be hashable
or weakly referenceable; entries for contexts that are not weakly referenceable
live as long as the cache. A context's register_font may call back into the
cache for the same context.
"""

from __future__ import annotations

import logging
import threading
import weakref
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from text_icons.fonts.legend import Legend, read_legend
from text_icons.fonts.resolver import FontRegistry

if TYPE_CHECKING:
    from text_icons.context import RenderContext

logger = logging.getLogger(__name__)

LegendReader = Callable[[str, Path, Path | None], Legend]


@dataclass
class _Registration:
    """Fonts already registered with one rendering context."""

    lock: threading.RLock
    names: set[str] = field(default_factory=set)
    # Strong reference for contexts that cannot be weakly referenced, so that
    # their id is not reused while the entry exists
    pinned: object = None


class LegendCache:
    """Thread-safe, lazily populated mapping of specifier to Legend.

    Args:
        registry: Where legends and font files are found.
        reader: Function reading one legend; defaults to :func:`read_legend`.
    """

    def __init__(self, registry: FontRegistry, reader: LegendReader = read_legend) -> None:
        self.registry = registry
        self._reader = reader
        self._legends: dict[str, Legend] = {}
        self._load_lock = threading.Lock()
        # Guards the registration map only; each context has its own lock
        self._register_lock = threading.RLock()
        self._registered: dict[int, _Registration] = {}
        self.load_count = 0

    @property
    def loaded(self) -> tuple[str, ...]:
        """Specifiers whose legend has been read."""
        return tuple(sorted(self._legends))

    def get(self, specifier: str) -> Legend | None:
        """Return the cached legend without loading it."""
        return self._legends.get(specifier)

    def load(self, context: RenderContext | None, specifier: str) -> Legend:
        """Return the legend for ``specifier``, reading it on first use.

        When ``context`` is given, the font file is registered with it the
        first time this context asks for this font.

        Raises:
            FontNotFoundError: If the font has no legend file.
            LegendFormatError: If the legend file is malformed.
        """
        legend = self._legends.get(specifier)
        if legend is None:
            legend = self._load_once(specifier)
        else:
            logger.debug("Legend cache hit: %s", specifier)

        if context is not None:
            self._register(context, legend)
        return legend

    def _load_once(self, specifier: str) -> Legend:
        with self._load_lock:
            legend = self._legends.get(specifier)
            if legend is not None:
                return legend
            logger.debug("Legend cache miss: %s", specifier)
            legend = self._reader(
                specifier,
                self.registry.legend_path(specifier),
                self.registry.font_path(specifier),
            )
            self.load_count += 1
            self._legends[specifier] = legend
            return legend

    def _registration(self, context: RenderContext) -> _Registration:
        key = id(context)
        with self._register_lock:
            entry = self._registered.get(key)
            if entry is None:
                entry = _Registration(threading.RLock())
                try:
                    weakref.finalize(context, self._forget, key)
                except TypeError:
                    entry.pinned = context
                self._registered[key] = entry
            return entry

    def _forget(self, key: int) -> None:
        with self._register_lock:
            self._registered.pop(key, None)

    def _register(self, context: RenderContext, legend: Legend) -> None:
        if legend.font_path is None:
            return
        entry = self._registration(context)
        with entry.lock:
            if legend.specifier in entry.names:
                return
            entry.names.add(legend.specifier)
            try:
                context.register_font(legend.specifier, legend.font_path)
            except BaseException:
                entry.names.discard(legend.specifier)
                raise
        logger.debug("Registered %s font %s", legend.specifier, legend.font_path)
