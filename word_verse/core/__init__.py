"""
Core components for Word-Verse.
"""

from .taxonomy import PartOfSpeech, POS_BUCKETS
from .errors import (
    WordVerseError,
    EmptyModel,
    NoActiveModel,
    WordNotFound,
    AlreadyHighlighted,
    NoMatch,
)
from .pos_cache import PartOfSpeechCache, CacheEntry
from .embedding_store import EmbeddingStore, Model, WordEmbedding, LoadSummary

__all__ = [
    "PartOfSpeech",
    "POS_BUCKETS",
    "WordVerseError",
    "EmptyModel",
    "NoActiveModel",
    "WordNotFound",
    "AlreadyHighlighted",
    "NoMatch",
    "PartOfSpeechCache",
    "CacheEntry",
    "EmbeddingStore",
    "Model",
    "WordEmbedding",
    "LoadSummary",
]
