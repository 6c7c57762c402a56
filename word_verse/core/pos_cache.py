"""
Session-wide part-of-speech cache.
Once a word's metadata is known it is never fetched again, whichever model
is active.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from word_verse.core.taxonomy import PartOfSpeech

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """Classification result for one word."""
    part_of_speech: PartOfSpeech
    definition: Optional[str] = None


class PartOfSpeechCache:
    """
    Mapping from lower-cased word to CacheEntry.

    Entries are only ever added or overwritten (last writer wins); there is
    no expiry and model changes never invalidate anything.
    """

    def __init__(self):
        self._entries: dict[str, CacheEntry] = {}

    @staticmethod
    def _key(word: str) -> str:
        return word.strip().lower()

    def get(self, word: str) -> Optional[CacheEntry]:
        """Look up a word; returns None on miss."""
        return self._entries.get(self._key(word))

    def put(
        self,
        word: str,
        part_of_speech: PartOfSpeech,
        definition: Optional[str] = None
    ) -> CacheEntry:
        """Store (or overwrite) the classification for a word."""
        entry = CacheEntry(PartOfSpeech.normalize(part_of_speech), definition)
        self._entries[self._key(word)] = entry
        return entry

    def definition(self, word: str) -> Optional[str]:
        entry = self.get(word)
        return entry.definition if entry else None

    def items(self) -> Iterator[tuple[str, CacheEntry]]:
        # Copy so callers may write while iterating
        return iter(list(self._entries.items()))

    def __contains__(self, word: str) -> bool:
        return self._key(word) in self._entries

    def __len__(self) -> int:
        return len(self._entries)
