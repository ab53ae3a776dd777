"""Abstract key-value storage interface (port) for persisted application state."""

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """Port for string-keyed, string-valued durable storage.

    Implementations raise ``PersistenceUnavailableError`` when the backing
    store cannot be read or written.
    """

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any prior value."""
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove ``key``. Removing an absent key is not an error."""
        ...
