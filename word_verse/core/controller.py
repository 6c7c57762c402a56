"""
VisualizationController: the single owner of visualization state.

Holds the embedding store, the part-of-speech cache, the highlight set and
the saved paragraphs, and is the only writer of each. Every mutation keeps
them consistent: the highlight set never contains a word the active model
lacks, and paragraph filters never point at a deleted paragraph.
"""

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Sequence

from word_verse.core.classifier import WordClassifier
from word_verse.core.embedding_store import EmbeddingStore, LoadSummary, Model, WordEmbedding
from word_verse.core.errors import AlreadyHighlighted, NoActiveModel, NoMatch, WordNotFound
from word_verse.core.extraction import ExtractionResult, ParagraphExtractor
from word_verse.core.pos_cache import PartOfSpeechCache
from word_verse.core.taxonomy import PartOfSpeech, POS_BUCKETS
from word_verse.dictionary.base import BaseDictionary, get_dictionary
from word_verse.visualization.points import PointSet, build_point_sets
import config

logger = logging.getLogger(__name__)


@dataclass
class Paragraph:
    """A submitted paragraph and the words it added to the highlight set."""
    id: str
    text: str
    words: list[str] = field(default_factory=list)

    @property
    def preview(self) -> str:
        limit = config.PARAGRAPH_PREVIEW_CHARS
        return self.text if len(self.text) <= limit else self.text[:limit] + "..."


def _new_paragraph_id() -> str:
    return f"para-{int(time.time() * 1000)}-{uuid.uuid4().hex[:7]}"


class VisualizationController:
    """
    State owner for one user session.

    Model operations delegate to the EmbeddingStore and then repair the
    highlight set; word and paragraph operations go through the classifier
    and extractor so the cache stays the single source of part-of-speech data.
    """

    def __init__(
        self,
        dictionary: Optional[BaseDictionary] = None,
        cache: Optional[PartOfSpeechCache] = None,
        batch_size: int = config.CLASSIFY_BATCH_SIZE,
        batch_delay: float = config.CLASSIFY_BATCH_DELAY
    ):
        """
        Initialize the controller.

        Args:
            dictionary: Dictionary backend (defaults to config.DEFAULT_DICTIONARY)
            cache: Part-of-speech cache (a fresh one by default)
            batch_size: Words classified concurrently per paragraph batch
            batch_delay: Seconds to pause between paragraph batches
        """
        self.store = EmbeddingStore(cache)
        self.dictionary = dictionary or get_dictionary(config.DEFAULT_DICTIONARY)
        self.classifier = WordClassifier(self.store, self.dictionary)
        self.extractor = ParagraphExtractor(self.classifier, batch_size, batch_delay)

        self._highlighted: list[str] = []
        self._paragraphs: list[Paragraph] = []
        self.active_paragraph_id: Optional[str] = None
        self.expanded_paragraph_id: Optional[str] = None

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def cache(self) -> PartOfSpeechCache:
        return self.store.cache

    @property
    def models(self) -> list[Model]:
        return self.store.models

    @property
    def active_model(self) -> Optional[Model]:
        return self.store.active_model

    @property
    def active_index(self) -> int:
        return self.store.active_index

    @property
    def highlighted(self) -> list[str]:
        return list(self._highlighted)

    @property
    def paragraphs(self) -> list[Paragraph]:
        return list(self._paragraphs)

    def get_paragraph(self, paragraph_id: str) -> Optional[Paragraph]:
        for paragraph in self._paragraphs:
            if paragraph.id == paragraph_id:
                return paragraph
        return None

    def pos_of(self, word: str) -> PartOfSpeech:
        entry = self.cache.get(word)
        return entry.part_of_speech if entry else PartOfSpeech.UNKNOWN

    def definition_of(self, word: str) -> Optional[str]:
        return self.cache.definition(word)

    # ------------------------------------------------------------------
    # Models
    # ------------------------------------------------------------------

    def load_model(self, name: str, rows: Iterable[Sequence]) -> LoadSummary:
        """
        Load a model from (x, y, word) rows and make it active.

        Raises:
            EmptyModel: If no row is valid (state unchanged)
        """
        _, summary = self.store.load_model(name, rows)
        self._prune_highlights()
        return summary

    def remove_model(self, index: int) -> None:
        """Remove a model; removing the active one clears the highlight set."""
        if self.store.remove_model(index):
            self._highlighted.clear()

    def select_model(self, index: int) -> None:
        """Switch the active model, dropping highlights it cannot resolve."""
        if self.store.select_model(index):
            self._prune_highlights()

    def _prune_highlights(self) -> None:
        model = self.active_model
        if model is None:
            self._highlighted.clear()
            return
        before = len(self._highlighted)
        self._highlighted = [w for w in self._highlighted if w in model.embeddings]
        dropped = before - len(self._highlighted)
        if dropped:
            logger.info(f"Dropped {dropped} highlighted words missing from '{model.name}'")

    # ------------------------------------------------------------------
    # Words
    # ------------------------------------------------------------------

    def _require_model(self) -> Model:
        model = self.active_model
        if model is None:
            raise NoActiveModel()
        return model

    async def add_word(self, word: str) -> Optional[PartOfSpeech]:
        """
        Add a single word to the highlight set.

        Returns:
            The word's part of speech, or None for blank input

        Raises:
            NoActiveModel: If no model is selected
            WordNotFound: If the word is not in the active vocabulary
            AlreadyHighlighted: If the word is already visualized
        """
        key = word.strip().lower()
        if not key:
            return None

        model = self._require_model()
        if key not in model.embeddings:
            raise WordNotFound(key)
        if key in self._highlighted:
            raise AlreadyHighlighted(key)

        pos = await self.classifier.classify(key)
        self._highlighted.append(key)
        logger.info(f"Added '{key}' ({pos.value})")
        return pos

    def remove_word(self, word: str) -> None:
        key = word.strip().lower()
        self._highlighted = [w for w in self._highlighted if w != key]

    def clear_words(self) -> None:
        self._highlighted.clear()

    # ------------------------------------------------------------------
    # Paragraphs
    # ------------------------------------------------------------------

    async def submit_paragraph(
        self,
        text: str,
        progress_callback: Optional[Callable[[int, int], None]] = None
    ) -> ExtractionResult:
        """
        Extract vocabulary words from text, classify them and highlight them.

        A Paragraph is recorded only when at least one new word was added;
        its word list is exactly the newly added words.

        Raises:
            NoActiveModel: If no model is selected
            NoMatch: If the text has no vocabulary words, or none that are new
        """
        model = self._require_model()
        paragraph_text = text.strip()

        candidates = self.extractor.extract(paragraph_text, model)
        result = await self.extractor.classify_batch(
            candidates, self._highlighted, progress_callback=progress_callback
        )
        if not result:
            raise NoMatch("No new words from the paragraph were found in the model")

        self._highlighted.extend(result.words)
        paragraph = Paragraph(id=_new_paragraph_id(), text=paragraph_text, words=list(result.words))
        self._paragraphs.append(paragraph)
        logger.info(f"Paragraph {paragraph.id}: {result.summary()}")
        return result

    def toggle_active_paragraph(self, paragraph_id: str) -> None:
        if self.active_paragraph_id == paragraph_id:
            self.active_paragraph_id = None
        else:
            self.active_paragraph_id = paragraph_id

    def toggle_expanded_paragraph(self, paragraph_id: str) -> None:
        if self.expanded_paragraph_id == paragraph_id:
            self.expanded_paragraph_id = None
        else:
            self.expanded_paragraph_id = paragraph_id

    def remove_paragraph(self, paragraph_id: str) -> bool:
        """
        Delete a paragraph and un-highlight the words it recorded.

        Returns:
            False if no paragraph has that id
        """
        paragraph = self.get_paragraph(paragraph_id)
        if paragraph is None:
            return False

        owned = set(paragraph.words)
        self._highlighted = [w for w in self._highlighted if w not in owned]
        self._paragraphs = [p for p in self._paragraphs if p.id != paragraph_id]

        if self.active_paragraph_id == paragraph_id:
            self.active_paragraph_id = None
        if self.expanded_paragraph_id == paragraph_id:
            self.expanded_paragraph_id = None
        return True

    # ------------------------------------------------------------------
    # Derived view
    # ------------------------------------------------------------------

    def visible_words(self) -> list[str]:
        """Highlighted words, narrowed to the active paragraph if one is set."""
        words = self._highlighted
        if self.active_paragraph_id is not None:
            paragraph = self.get_paragraph(self.active_paragraph_id)
            if paragraph is not None:
                allowed = set(paragraph.words)
                words = [w for w in words if w in allowed]
        return list(words)

    def derived_view(self) -> dict[PartOfSpeech, list[WordEmbedding]]:
        """
        Group the visible embeddings of the active model by part of speech.

        Embeddings without a tag fall into UNKNOWN. With no active model
        every bucket is empty.
        """
        grouped: dict[PartOfSpeech, list[WordEmbedding]] = {pos: [] for pos in POS_BUCKETS}
        model = self.active_model
        if model is None:
            return grouped

        for word in self.visible_words():
            embedding = model.embeddings.get(word)
            if embedding is None:
                continue
            pos = PartOfSpeech.normalize(embedding.part_of_speech)
            grouped[pos].append(embedding)
        return grouped

    def point_sets(self) -> list[PointSet]:
        """Per-bucket coordinates, labels and tooltips for the plot."""
        return build_point_sets(self.derived_view(), self.cache)
