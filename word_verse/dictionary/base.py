"""
Base class for dictionary backends.
Defines the interface all dictionary lookups must implement.
"""

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Optional

from word_verse.core.taxonomy import PartOfSpeech


@dataclass(frozen=True)
class DictionaryEntry:
    """
    Typed result of a successful lookup.

    part_of_speech is already mapped onto the closed taxonomy.
    """
    word: str
    part_of_speech: PartOfSpeech
    definition: Optional[str] = None


class BaseDictionary(ABC):
    """
    Abstract base class for dictionary lookup backends.

    All backends must:
    - Provide an async session context shared by a batch of lookups
    - Return None (never raise) when a word has no usable data
    - Provide a unique name for the registry
    """

    @asynccontextmanager
    async def session(self) -> AsyncIterator[Any]:
        """
        Open a client session for a run of lookups.

        Backends without connection state yield None.
        """
        yield None

    @abstractmethod
    async def lookup(self, session: Any, word: str) -> Optional[DictionaryEntry]:
        """
        Look up a single lower-cased word.

        Args:
            session: Object yielded by session()
            word: Lower-cased word

        Returns:
            DictionaryEntry, or None if the word is absent, the request
            failed, or the payload was malformed
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Unique name for this backend.

        Returns:
            String identifier for the backend
        """
        pass


# Registry for available dictionary backends
_DICTIONARY_REGISTRY: dict[str, type[BaseDictionary]] = {}


def register_dictionary(name: str):
    """
    Decorator to register a dictionary backend class.

    Usage:
        @register_dictionary("free_dictionary")
        class FreeDictionary(BaseDictionary):
            ...

    Raises:
        TypeError: If class doesn't inherit from BaseDictionary
        ValueError: If name is already registered
    """
    def decorator(cls: type[BaseDictionary]):
        if not issubclass(cls, BaseDictionary):
            raise TypeError(f"{cls.__name__} must inherit from BaseDictionary")
        if name in _DICTIONARY_REGISTRY:
            raise ValueError(
                f"Dictionary '{name}' already registered by {_DICTIONARY_REGISTRY[name].__name__}"
            )
        _DICTIONARY_REGISTRY[name] = cls
        return cls
    return decorator


def get_dictionary(name: str, **kwargs) -> BaseDictionary:
    """
    Get a dictionary backend instance by name.

    Raises:
        ValueError: If backend name not found
    """
    if name not in _DICTIONARY_REGISTRY:
        available = list(_DICTIONARY_REGISTRY.keys())
        raise ValueError(f"Unknown dictionary '{name}'. Available: {available}")

    return _DICTIONARY_REGISTRY[name](**kwargs)


def list_dictionaries() -> list[str]:
    """Return list of registered dictionary names."""
    return list(_DICTIONARY_REGISTRY.keys())
