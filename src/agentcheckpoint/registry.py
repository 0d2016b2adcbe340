"""Keyed registry with a single active selection."""

import threading
from typing import Generic, Optional, TypeVar

from agentcheckpoint.exceptions import NoActiveProviderError, ProviderNotFoundError
from agentcheckpoint.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class KeyedRegistryWithSingleSelection(Generic[T]):
    """Registry mapping names to items, with at most one active item.

    Registration is append/overwrite only: there is no removal. Selecting
    an item deactivates whichever item was active before.

    Example:
        registry = KeyedRegistryWithSingleSelection[CheckpointProvider]()
        registry.register("memory", MemoryProvider())
        registry.set_enabled_item("memory")
        provider = registry.get_active_item()
    """

    def __init__(self) -> None:
        """Initialize an empty registry with nothing selected."""
        self._items: dict[str, T] = {}
        self._active_name: Optional[str] = None
        self._lock = threading.RLock()

    def register(self, name: str, item: T) -> None:
        """Register an item under a name, replacing any previous entry.

        Args:
            name: Registration key
            item: The item to register
        """
        with self._lock:
            if name in self._items:
                logger.warning(f"Overwriting registered item: {name}")
            self._items[name] = item
        logger.debug(f"Registered item: {name}")

    def set_enabled_item(self, name: str) -> None:
        """Make the named item the sole active item.

        Args:
            name: Registration key of the item to activate

        Raises:
            ProviderNotFoundError: If nothing is registered under ``name``
        """
        with self._lock:
            if name not in self._items:
                raise ProviderNotFoundError(name)
            self._active_name = name
        logger.info(f"Active item set to: {name}")

    def get_active_item(self) -> T:
        """Get the active item.

        Raises:
            NoActiveProviderError: If no item has been selected
        """
        with self._lock:
            if self._active_name is None:
                raise NoActiveProviderError()
            return self._items[self._active_name]

    def get_active_item_name(self) -> Optional[str]:
        """Get the registration key of the active item, or None."""
        return self._active_name

    def get_all_item_names(self) -> list[str]:
        """Get the names of all registered items."""
        with self._lock:
            return list(self._items.keys())

    def get_item(self, name: str) -> Optional[T]:
        """Get an item by name, or None if it is not registered."""
        return self._items.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __len__(self) -> int:
        return len(self._items)
