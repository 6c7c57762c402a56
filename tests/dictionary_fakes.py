# -*- coding: utf-8 -*-
"""In-memory dictionary backend for tests (no network)."""

import asyncio
from contextlib import asynccontextmanager
from typing import Optional

from word_verse.core.taxonomy import PartOfSpeech
from word_verse.dictionary.base import BaseDictionary, DictionaryEntry

# Captured before any test patches asyncio.sleep
_real_sleep = asyncio.sleep


class FakeDictionary(BaseDictionary):
    """
    Serves canned entries; words not in `entries` have no data.

    Words in `failing` raise from lookup() to simulate a misbehaving backend.
    Every lookup is recorded in `events` in the order it started.
    """

    def __init__(self, entries: Optional[dict] = None, failing=()):
        self.entries = dict(entries or {})
        self.failing = set(failing)
        self.events: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.sessions_opened = 0

    @asynccontextmanager
    async def session(self):
        self.sessions_opened += 1
        yield None

    @property
    def name(self) -> str:
        return "fake"

    async def lookup(self, session, word: str) -> Optional[DictionaryEntry]:
        self.events.append(word)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            # Yield a few times so concurrent lookups overlap
            for _ in range(3):
                await _real_sleep(0)
            if word in self.failing:
                raise RuntimeError(f"backend exploded on {word}")
            data = self.entries.get(word)
            if data is None:
                return None
            pos, definition = data
            return DictionaryEntry(word=word, part_of_speech=PartOfSpeech(pos), definition=definition)
        finally:
            self.in_flight -= 1

    @property
    def lookups(self) -> list[str]:
        return [e for e in self.events if e != "<sleep>"]
