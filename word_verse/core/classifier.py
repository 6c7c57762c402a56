"""
WordClassifier: cache-first part-of-speech classification.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from word_verse.core.embedding_store import EmbeddingStore
from word_verse.core.taxonomy import PartOfSpeech
from word_verse.dictionary.base import BaseDictionary

logger = logging.getLogger(__name__)


class WordClassifier:
    """
    Resolves a word's part of speech, falling back to UNKNOWN.

    classify() never raises: lookup failures of any kind become UNKNOWN.
    Every result, fallback included, is written to the cache and tagged on
    the active model's embedding before classify() returns.
    """

    def __init__(self, store: EmbeddingStore, dictionary: BaseDictionary):
        self.store = store
        self.dictionary = dictionary

    @property
    def cache(self):
        return self.store.cache

    @asynccontextmanager
    async def session(self) -> AsyncIterator[Any]:
        """Open one dictionary session for a run of classify() calls."""
        async with self.dictionary.session() as session:
            yield session

    async def classify(self, word: str, session: Optional[Any] = None) -> PartOfSpeech:
        """
        Classify a word, consulting the cache before the dictionary.

        Args:
            word: Word to classify (normalized to lower case)
            session: Session from session(); one is opened if omitted

        Returns:
            PartOfSpeech (UNKNOWN on any failure)
        """
        key = word.strip().lower()

        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for '{key}': {cached.part_of_speech.value}")
            self.store.tag_active(key, cached.part_of_speech)
            return cached.part_of_speech

        if session is None:
            async with self.session() as own_session:
                entry = await self._lookup(own_session, key)
        else:
            entry = await self._lookup(session, key)

        if entry is None:
            part_of_speech, definition = PartOfSpeech.UNKNOWN, None
        else:
            part_of_speech, definition = entry.part_of_speech, entry.definition

        self.cache.put(key, part_of_speech, definition)
        self.store.tag_active(key, part_of_speech)
        return part_of_speech

    async def _lookup(self, session: Any, word: str):
        try:
            return await self.dictionary.lookup(session, word)
        except Exception as e:
            # Backends should not raise, but one misbehaving word must not sink a batch
            logger.warning(f"Dictionary backend '{self.dictionary.name}' raised for '{word}': {e}")
            return None
