"""
Free Dictionary API backend.
Async lookups against dictionaryapi.dev with graceful degradation: any
failure is reported as "no data" rather than raised.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional
from urllib.parse import quote

import aiohttp

from .base import BaseDictionary, DictionaryEntry, register_dictionary
from word_verse.core.taxonomy import PartOfSpeech
import config

logger = logging.getLogger(__name__)


def parse_entry(word: str, payload: Any) -> Optional[DictionaryEntry]:
    """
    Turn a dictionaryapi.dev payload into a DictionaryEntry.

    Only the first entry's first meaning is used. A missing or unexpected
    field anywhere on that path yields None, except the definition, which
    is optional.

    Args:
        word: Word that was looked up
        payload: Decoded JSON body

    Returns:
        DictionaryEntry, or None if the payload has no usable meaning
    """
    if not isinstance(payload, list) or not payload:
        return None
    first = payload[0]
    if not isinstance(first, dict):
        return None
    meanings = first.get("meanings")
    if not isinstance(meanings, list) or not meanings or not isinstance(meanings[0], dict):
        return None

    meaning = meanings[0]
    raw_pos = meaning.get("partOfSpeech")
    part_of_speech = PartOfSpeech.normalize(raw_pos if isinstance(raw_pos, str) else None)

    definition = None
    definitions = meaning.get("definitions")
    if isinstance(definitions, list) and definitions and isinstance(definitions[0], dict):
        text = definitions[0].get("definition")
        if isinstance(text, str) and text.strip():
            definition = text.strip()

    return DictionaryEntry(word=word, part_of_speech=part_of_speech, definition=definition)


@register_dictionary("free_dictionary")
class FreeDictionary(BaseDictionary):
    """
    Backend for the public Free Dictionary API.

    Features:
    - One shared aiohttp session per batch of lookups
    - Per-request timeout
    - Non-200 responses, network errors and malformed JSON all map to None
    """

    def __init__(
        self,
        base_url: str = config.DICTIONARY_URL,
        timeout: float = config.DICTIONARY_TIMEOUT
    ):
        """
        Initialize the backend.

        Args:
            base_url: Endpoint prefix; the word is appended as a path segment
            timeout: Total request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def name(self) -> str:
        return "free_dictionary"

    def url_for(self, word: str) -> str:
        return f"{self.base_url}/{quote(word, safe='')}"

    @asynccontextmanager
    async def session(self) -> AsyncIterator[aiohttp.ClientSession]:
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            yield session

    async def lookup(self, session: aiohttp.ClientSession, word: str) -> Optional[DictionaryEntry]:
        try:
            async with session.get(self.url_for(word)) as resp:
                if resp.status != 200:
                    logger.debug(f"No dictionary entry for '{word}' (HTTP {resp.status})")
                    return None
                payload = await resp.json(content_type=None)
        except asyncio.TimeoutError:
            logger.warning(f"Dictionary lookup timed out for '{word}'")
            return None
        except aiohttp.ClientError as e:
            logger.warning(f"Dictionary lookup failed for '{word}': {e}")
            return None
        except ValueError as e:
            # Body was not valid JSON
            logger.warning(f"Malformed dictionary response for '{word}': {e}")
            return None

        entry = parse_entry(word, payload)
        if entry is None:
            logger.debug(f"Dictionary response for '{word}' had no usable meaning")
        return entry
