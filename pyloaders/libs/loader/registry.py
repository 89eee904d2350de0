"""Process-wide loader registry.

Responsibilities:
1) Keep an ordered table of "name -> zero-argument loader factory".
2) Turn a factory into a loader instance, wrapping every failure into
   `LoaderInstantiationError` so discovery can skip the entry.
3) Optionally pull factories from an entry-point group, the packaging-level
   manifest third-party distributions use to advertise loaders.

Registration order is the discovery order; nothing here sorts.
"""

from __future__ import annotations

import logging
from importlib.metadata import entry_points
from typing import Any, Callable, Iterator

from pyloaders.core.errors import LoaderInstantiationError
from pyloaders.core.settings import Settings
from pyloaders.libs.loader.base_loader import Loader
from pyloaders.observability.logger import get_logger

logger = logging.getLogger(__name__)

LoaderFactory = Callable[[], Loader]


def _factory_name(factory: Callable[..., Any]) -> str:
    module = getattr(factory, "__module__", None)
    qualname = getattr(factory, "__qualname__", None) or repr(factory)
    return f"{module}.{qualname}" if module else qualname


class LoaderRegistry:
    """Ordered registry of loader factories.

    Usage:
    1. At program start, register factories:
       `registry.register(TextLoader)`
    2. Discovery enumerates and instantiates them on every call:
       `find_loaders(Document, registry)`
    """

    def __init__(self) -> None:
        # Keys are lower-cased names; dicts keep insertion order.
        self._factories: dict[str, tuple[str, LoaderFactory]] = {}

    def register(self, factory: LoaderFactory, name: str | None = None) -> str:
        """Register a loader factory and return the name it was stored under.

        Re-registering a name replaces the factory but keeps its position.
        """

        if not callable(factory):
            raise ValueError("Loader factory must be callable")

        display_name = (name if name is not None else _factory_name(factory)).strip()
        if not display_name:
            raise ValueError("Loader name cannot be empty")

        self._factories[display_name.lower()] = (display_name, factory)
        return display_name

    def unregister(self, name: str) -> None:
        key = name.strip().lower()
        if key not in self._factories:
            raise KeyError(f"No loader registered under name: '{name}'")
        del self._factories[key]

    def clear(self) -> None:
        self._factories.clear()

    def list_names(self) -> list[str]:
        """Return registered names in registration order."""

        return [display_name for display_name, _ in self._factories.values()]

    def iter_factories(self) -> Iterator[tuple[str, LoaderFactory]]:
        """Iterate over a snapshot of `(name, factory)` pairs."""

        return iter(list(self._factories.values()))

    def __len__(self) -> int:
        return len(self._factories)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._factories

    @staticmethod
    def instantiate(name: str, factory: LoaderFactory) -> Loader:
        """Call `factory` and check that it produced a `Loader`."""

        try:
            loader = factory()
        except Exception as error:  # noqa: BLE001 - plugin code may fail in any way
            raise LoaderInstantiationError(name, str(error) or type(error).__name__) from error

        if not isinstance(loader, Loader):
            raise LoaderInstantiationError(
                name, f"factory returned {type(loader).__name__}, expected a Loader"
            )
        return loader

    def load_entry_points(self, group: str) -> int:
        """Register every loader factory advertised under an entry-point group.

        Entry points that cannot be imported are logged and skipped.
        """

        registered = 0
        for entry_point in entry_points(group=group):
            try:
                factory = entry_point.load()
            except Exception as error:  # noqa: BLE001 - a broken plugin must not stop the scan
                logger.warning(
                    "Skipping entry point '%s' in group '%s': %s",
                    entry_point.name,
                    group,
                    error,
                )
                continue
            try:
                self.register(factory, name=entry_point.name)
            except ValueError as error:
                logger.warning("Skipping entry point '%s': %s", entry_point.name, error)
                continue
            registered += 1
        return registered

    @classmethod
    def from_settings(cls, settings: Settings) -> "LoaderRegistry":
        """Build a registry as described by `settings.discovery`.

        Also applies `settings.observability.log_level` to the `pyloaders` logger.
        """

        from pyloaders.libs.loader import register_builtin_loaders

        get_logger("pyloaders", settings.observability.log_level)

        discovery = settings.discovery
        registry = cls()
        if discovery.register_builtin:
            register_builtin_loaders(registry, encoding=settings.text.encoding)
        if discovery.entry_point_group:
            count = registry.load_entry_points(discovery.entry_point_group)
            logger.debug(
                "Registered %d loader(s) from entry point group '%s'",
                count,
                discovery.entry_point_group,
            )
        return registry


default_registry = LoaderRegistry()
