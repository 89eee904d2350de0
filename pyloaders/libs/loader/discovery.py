"""Find loader implementations by the data type they produce."""

from __future__ import annotations

import logging

from pyloaders.core.errors import LoaderInstantiationError
from pyloaders.libs.loader.base_loader import Loader
from pyloaders.libs.loader.registry import LoaderRegistry, default_registry

logger = logging.getLogger(__name__)


def find_all_loaders(registry: LoaderRegistry | None = None) -> list[Loader]:
    """Instantiate every loader registered in `registry`.

    Factories that fail are logged as warnings and skipped. The registry is
    scanned afresh on every call.
    """

    source = registry if registry is not None else default_registry
    loaders: list[Loader] = []
    for name, factory in source.iter_factories():
        try:
            loader = source.instantiate(name, factory)
        except LoaderInstantiationError as error:
            logger.warning("%s", error)
            continue
        logger.debug("Found implementation of Loader: %r", loader)
        loaders.append(loader)
    return loaders


def find_loaders(data_type: type, registry: LoaderRegistry | None = None) -> list[Loader]:
    """Return all registered loaders whose data type is `data_type` or a subclass of it.

    Args:
        data_type: The requested result type.
        registry: Registry to scan. Defaults to the process-wide registry.

    Returns:
        Loaders in registration order.
    """

    matching: list[Loader] = []
    for loader in find_all_loaders(registry):
        declared = loader.data_type
        if not isinstance(declared, type):
            logger.warning("Skipping %r: data_type is not a class", loader)
            continue
        if issubclass(declared, data_type):
            matching.append(loader)
    return matching
