"""
ParagraphExtractor: turns free text into classified vocabulary words.

Text is tokenized, deduplicated and intersected with the active model's
vocabulary; the surviving words are classified in fixed-size batches. Words
inside a batch are classified concurrently, and a short pause separates
consecutive batches to bound the request rate against the dictionary.
"""

import asyncio
import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Collection, Optional

from word_verse.core.classifier import WordClassifier
from word_verse.core.embedding_store import Model
from word_verse.core.errors import NoMatch
from word_verse.core.taxonomy import PartOfSpeech, POS_BUCKETS
import config

logger = logging.getLogger(__name__)

_NON_WORD_RE = re.compile(r"[^\w\s]|_")
_WHITESPACE_RE = re.compile(r"\s+")
_DIGIT_RE = re.compile(r"\d")


def tokenize(text: str) -> list[str]:
    """
    Split text into unique lower-cased candidate words, in first-seen order.

    Punctuation and underscores become separators; tokens containing a digit
    are dropped.
    """
    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    cleaned = _WHITESPACE_RE.sub(" ", cleaned).strip()

    seen = set()
    tokens = []
    for token in cleaned.split(" "):
        if not token or _DIGIT_RE.search(token) or token in seen:
            continue
        seen.add(token)
        tokens.append(token)
    return tokens


@dataclass
class ExtractionResult:
    """Words newly classified from one paragraph."""
    words: list[str] = field(default_factory=list)
    classifications: list[tuple[str, PartOfSpeech]] = field(default_factory=list)

    @property
    def counts(self) -> dict[PartOfSpeech, int]:
        tally = Counter(pos for _, pos in self.classifications)
        return {pos: tally.get(pos, 0) for pos in POS_BUCKETS}

    def summary(self) -> str:
        """Human-readable report, e.g. 'Added 3 words from paragraph (2 nouns, 1 verb)'."""
        n = len(self.words)
        stats = []
        for pos, count in self.counts.items():
            if pos is PartOfSpeech.UNKNOWN or count == 0:
                continue
            stats.append(f"{count} {pos.value if count == 1 else pos.value + 's'}")
        msg = f"Added {n} {'word' if n == 1 else 'words'} from paragraph"
        if stats:
            msg += f" ({', '.join(stats)})"
        return msg

    def __bool__(self) -> bool:
        return bool(self.words)


class ParagraphExtractor:
    """
    Extracts vocabulary words from paragraphs and classifies them in batches.
    """

    def __init__(
        self,
        classifier: WordClassifier,
        batch_size: int = config.CLASSIFY_BATCH_SIZE,
        batch_delay: float = config.CLASSIFY_BATCH_DELAY
    ):
        """
        Initialize the extractor.

        Args:
            classifier: Classifier used for every word
            batch_size: Words classified concurrently per batch
            batch_delay: Seconds to pause between batches (not after the last)
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self.classifier = classifier
        self.batch_size = batch_size
        self.batch_delay = batch_delay

    def extract(self, text: str, model: Model) -> list[str]:
        """
        Find the words of text that exist in the model's vocabulary.

        Raises:
            NoMatch: If no token is in the vocabulary
        """
        candidates = [w for w in tokenize(text) if w in model.embeddings]
        if not candidates:
            raise NoMatch()
        return candidates

    async def classify_batch(
        self,
        words: list[str],
        highlighted: Collection[str] = (),
        progress_callback: Optional[Callable[[int, int], None]] = None
    ) -> ExtractionResult:
        """
        Classify words in order-preserving batches.

        Batches are cut from the full candidate list; words already in
        highlighted are then skipped inside their batch and left out of the
        result. Each batch fully resolves, cache and model writes included,
        before the next one starts.

        Args:
            words: Candidate words (already normalized and deduplicated)
            highlighted: Words currently visualized
            progress_callback: Optional callable(done, total) called after each
                batch, counted over all candidates

        Returns:
            ExtractionResult with the new words and their parts of speech
        """
        skip = set(highlighted)
        result = ExtractionResult()
        total = len(words)

        # Nothing new: no session, no pauses
        if all(w in skip for w in words):
            return result

        n_batches = (total + self.batch_size - 1) // self.batch_size
        logger.info(f"Classifying {total} words in {n_batches} batches")

        async with self.classifier.session() as session:
            for start in range(0, total, self.batch_size):
                batch = [w for w in words[start:start + self.batch_size] if w not in skip]
                tags = await asyncio.gather(
                    *(self.classifier.classify(word, session) for word in batch)
                )
                for word, pos in zip(batch, tags):
                    result.words.append(word)
                    result.classifications.append((word, pos))

                done = min(start + self.batch_size, total)
                if progress_callback:
                    progress_callback(done, total)

                if done < total:
                    await asyncio.sleep(self.batch_delay)

        return result
