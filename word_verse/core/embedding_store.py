"""
EmbeddingStore: holds every loaded embedding model.
Handles row validation on load, model removal, and active-model selection.
"""

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

import numpy as np

from word_verse.core.errors import EmptyModel
from word_verse.core.pos_cache import PartOfSpeechCache
from word_verse.core.taxonomy import PartOfSpeech

logger = logging.getLogger(__name__)

# One leading and/or one trailing quote character
_QUOTE_RE = re.compile(r"^[\"']|[\"']$")

NO_MODEL = -1


@dataclass
class WordEmbedding:
    """A word's position in the 2D projection, plus its part of speech once known."""
    word: str                                      # Original casing from the CSV
    x: float
    y: float
    part_of_speech: Optional[PartOfSpeech] = None

    @property
    def key(self) -> str:
        return self.word.lower()


@dataclass
class Model:
    """A named vocabulary of word embeddings keyed by lower-cased word."""
    name: str
    embeddings: dict[str, WordEmbedding] = field(default_factory=dict)

    def get(self, word: str) -> Optional[WordEmbedding]:
        return self.embeddings.get(word.lower())

    def coordinates(self) -> np.ndarray:
        """Return all coordinates as an array of shape (n, 2)."""
        if not self.embeddings:
            return np.empty((0, 2))
        return np.array([(e.x, e.y) for e in self.embeddings.values()], dtype=np.float64)

    def __contains__(self, word: str) -> bool:
        return word.lower() in self.embeddings

    def __len__(self) -> int:
        return len(self.embeddings)


@dataclass(frozen=True)
class LoadSummary:
    """Outcome of a successful model load."""
    model_name: str
    word_count: int
    invalid_count: int

    @property
    def message(self) -> str:
        msg = f"Model loaded with {self.word_count} words"
        if self.invalid_count > 0:
            msg += f" ({self.invalid_count} invalid entries skipped)"
        return msg


def _strip_quotes(value: str) -> str:
    return _QUOTE_RE.sub("", value)


def _parse_coordinate(raw) -> Optional[float]:
    """Parse a possibly quoted coordinate; None if not a finite number."""
    text = _strip_quotes(str(raw).strip()).strip()
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def build_model(name: str, rows: Iterable[Sequence]) -> tuple[Model, LoadSummary]:
    """
    Validate raw (x, y, word) rows and build a Model.

    Rows with fewer than three fields are not embeddings at all and are skipped
    silently. Rows with an empty word, a lone period, or a non-numeric
    coordinate are counted as invalid. A repeated word keeps the last row.

    Args:
        name: Display name of the model
        rows: Iterable of (x, y, word) sequences; extra fields are ignored

    Returns:
        Tuple of (Model, LoadSummary)

    Raises:
        EmptyModel: If no row survives validation
    """
    model = Model(name=name)
    invalid_count = 0

    for row in rows:
        if row is None or len(row) < 3 or any(v is None for v in row[:3]):
            continue

        word = _strip_quotes(str(row[2]).strip())
        if not word or word == ".":
            invalid_count += 1
            continue

        x = _parse_coordinate(row[0])
        y = _parse_coordinate(row[1])
        if x is None or y is None:
            invalid_count += 1
            continue

        model.embeddings[word.lower()] = WordEmbedding(word=word, x=x, y=y)

    if not model.embeddings:
        logger.warning(f"Model '{name}' rejected: no valid rows ({invalid_count} invalid)")
        raise EmptyModel(name)

    if invalid_count > 0:
        logger.warning(f"Model '{name}': skipped {invalid_count} invalid rows")

    summary = LoadSummary(model_name=name, word_count=len(model), invalid_count=invalid_count)
    return model, summary


class EmbeddingStore:
    """
    Ordered collection of loaded models plus the active-model index.

    The store owns the embedding data; everything else refers to the
    active model through this object.
    """

    def __init__(self, cache: Optional[PartOfSpeechCache] = None):
        self.cache = cache if cache is not None else PartOfSpeechCache()
        self._models: list[Model] = []
        self._active_index: int = NO_MODEL

    @property
    def models(self) -> list[Model]:
        return list(self._models)

    @property
    def active_index(self) -> int:
        return self._active_index

    @property
    def active_model(self) -> Optional[Model]:
        if self._active_index == NO_MODEL:
            return None
        return self._models[self._active_index]

    @property
    def has_active_model(self) -> bool:
        return self._active_index != NO_MODEL

    def load_model(self, name: str, rows: Iterable[Sequence]) -> tuple[Model, LoadSummary]:
        """
        Build a model from rows, append it and make it active.

        Embeddings of words the cache already knows are tagged immediately.

        Raises:
            EmptyModel: If no row survives validation (store unchanged)
        """
        model, summary = build_model(name, rows)
        self._models.append(model)
        self.select_model(len(self._models) - 1)
        logger.info(f"Loaded model '{name}': {summary.word_count} words, {summary.invalid_count} invalid")
        return model, summary

    def remove_model(self, index: int) -> bool:
        """
        Remove the model at index.

        Returns:
            True if the active model was removed (caller must clear
            anything scoped to it)

        Raises:
            IndexError: If index is out of range
        """
        if not 0 <= index < len(self._models):
            raise IndexError(f"No model at index {index}")

        removed = self._models.pop(index)
        logger.info(f"Removed model '{removed.name}'")

        if self._active_index == index:
            self._active_index = NO_MODEL
            return True
        if self._active_index > index:
            self._active_index -= 1
        return False

    def select_model(self, index: int) -> bool:
        """
        Make the model at index active and hydrate it from the cache.

        Returns:
            True if the active model changed, False if it was already active

        Raises:
            IndexError: If index is out of range
        """
        if not 0 <= index < len(self._models):
            raise IndexError(f"No model at index {index}")
        if index == self._active_index:
            return False

        self._active_index = index
        hydrated = self.apply_cache(self._models[index])
        logger.debug(f"Selected model '{self._models[index].name}' ({hydrated} tags from cache)")
        return True

    def apply_cache(self, model: Model) -> int:
        """Copy every cached part of speech onto the model's matching embeddings."""
        count = 0
        for word, entry in self.cache.items():
            embedding = model.embeddings.get(word)
            if embedding is not None:
                embedding.part_of_speech = entry.part_of_speech
                count += 1
        return count

    def tag_active(self, word: str, part_of_speech: PartOfSpeech) -> None:
        """Tag the active model's embedding for word, if present."""
        model = self.active_model
        if model is None:
            return
        embedding = model.get(word)
        if embedding is not None:
            embedding.part_of_speech = part_of_speech

    def __len__(self) -> int:
        return len(self._models)
