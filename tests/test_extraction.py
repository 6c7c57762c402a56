# -*- coding: utf-8 -*-

import os
import sys
import unittest
from unittest.mock import AsyncMock, patch


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


from dictionary_fakes import FakeDictionary  # noqa: E402
from word_verse.core.classifier import WordClassifier  # noqa: E402
from word_verse.core.embedding_store import EmbeddingStore  # noqa: E402
from word_verse.core.errors import NoMatch  # noqa: E402
from word_verse.core.extraction import ExtractionResult, ParagraphExtractor, tokenize  # noqa: E402
from word_verse.core.taxonomy import PartOfSpeech  # noqa: E402


class TestTokenize(unittest.TestCase):
    def test_drops_digit_tokens_and_punctuation(self):
        tokens = tokenize("The quick brown fox jumps. 123abc")
        self.assertEqual(tokens, ["the", "quick", "brown", "fox", "jumps"])

    def test_dedupes_in_first_seen_order(self):
        self.assertEqual(tokenize("Dog cat, DOG! cat? bird"), ["dog", "cat", "bird"])

    def test_underscores_and_apostrophes_split_words(self):
        self.assertEqual(tokenize("snake_case don't"), ["snake", "case", "don", "t"])

    def test_blank_text(self):
        self.assertEqual(tokenize("  \n\t ... "), [])


class _ExtractorTestBase(unittest.IsolatedAsyncioTestCase):
    WORDS = ["the", "quick", "brown", "fox", "jumps"]

    def setUp(self):
        self.store = EmbeddingStore()
        self.store.load_model("demo", [(str(i), str(i), w) for i, w in enumerate(self.WORDS)])
        self.dictionary = FakeDictionary({
            "quick": ("adjective", "Moving fast."),
            "brown": ("adjective", None),
            "fox": ("noun", "A wild canine."),
            "jumps": ("verb", None),
        })
        self.classifier = WordClassifier(self.store, self.dictionary)
        self.extractor = ParagraphExtractor(self.classifier, batch_size=25, batch_delay=0.1)


class TestExtract(_ExtractorTestBase):
    def test_keeps_only_vocabulary_words(self):
        words = self.extractor.extract("The quick brown fox jumps over 123abc dogs", self.store.active_model)
        self.assertEqual(words, ["the", "quick", "brown", "fox", "jumps"])

    def test_no_vocabulary_words_raises_no_match(self):
        with self.assertRaises(NoMatch):
            self.extractor.extract("Lorem ipsum 42", self.store.active_model)

    def test_invalid_batch_size(self):
        with self.assertRaises(ValueError):
            ParagraphExtractor(self.classifier, batch_size=0)


class TestClassifyBatch(_ExtractorTestBase):
    async def test_single_batch_classifies_concurrently_without_pause(self):
        words = self.extractor.extract("The quick brown fox jumps. 123abc", self.store.active_model)
        with patch("word_verse.core.extraction.asyncio.sleep", new=AsyncMock()) as sleep:
            result = await self.extractor.classify_batch(words)

        self.assertEqual(self.dictionary.lookups, self.WORDS)
        self.assertEqual(self.dictionary.max_in_flight, 5)
        sleep.assert_not_awaited()
        self.assertEqual(result.words, self.WORDS)
        self.assertEqual(dict(result.classifications)["the"], PartOfSpeech.UNKNOWN)
        self.assertEqual(result.counts[PartOfSpeech.ADJECTIVE], 2)
        self.assertEqual(self.dictionary.sessions_opened, 1)

    async def test_batches_run_in_order_with_pause_between(self):
        extractor = ParagraphExtractor(self.classifier, batch_size=2, batch_delay=0.1)

        async def record_sleep(delay):
            self.dictionary.events.append("<sleep>")

        with patch("word_verse.core.extraction.asyncio.sleep", new=AsyncMock(side_effect=record_sleep)) as sleep:
            result = await extractor.classify_batch(self.WORDS)

        self.assertEqual(
            self.dictionary.events,
            ["the", "quick", "<sleep>", "brown", "fox", "<sleep>", "jumps"],
        )
        self.assertEqual(sleep.await_count, 2)
        sleep.assert_awaited_with(0.1)
        self.assertEqual(self.dictionary.max_in_flight, 2)
        self.assertEqual(result.words, self.WORDS)

    async def test_batches_are_cut_before_highlighted_words_are_skipped(self):
        extractor = ParagraphExtractor(self.classifier, batch_size=2, batch_delay=0.1)
        calls = []

        async def record_sleep(delay):
            self.dictionary.events.append("<sleep>")

        with patch("word_verse.core.extraction.asyncio.sleep", new=AsyncMock(side_effect=record_sleep)):
            result = await extractor.classify_batch(
                self.WORDS,
                highlighted=["the", "quick"],
                progress_callback=lambda d, t: calls.append((d, t)),
            )

        # First batch is ["the", "quick"], both already visualized
        self.assertEqual(self.dictionary.events, ["<sleep>", "brown", "fox", "<sleep>", "jumps"])
        self.assertEqual(result.words, ["brown", "fox", "jumps"])
        self.assertEqual(calls, [(2, 5), (4, 5), (5, 5)])

    async def test_highlighted_word_inside_batch_keeps_batch_boundaries(self):
        extractor = ParagraphExtractor(self.classifier, batch_size=2, batch_delay=0.1)

        async def record_sleep(delay):
            self.dictionary.events.append("<sleep>")

        with patch("word_verse.core.extraction.asyncio.sleep", new=AsyncMock(side_effect=record_sleep)):
            await extractor.classify_batch(self.WORDS, highlighted=["quick"])

        self.assertEqual(
            self.dictionary.events,
            ["the", "<sleep>", "brown", "fox", "<sleep>", "jumps"],
        )

    async def test_each_batch_is_written_to_the_model_before_the_next(self):
        extractor = ParagraphExtractor(self.classifier, batch_size=2, batch_delay=0)
        model = self.store.active_model
        seen = []

        async def snapshot(delay):
            seen.append({w: model.get(w).part_of_speech for w in self.WORDS})

        with patch("word_verse.core.extraction.asyncio.sleep", new=AsyncMock(side_effect=snapshot)):
            await extractor.classify_batch(self.WORDS)

        self.assertEqual(seen[0]["quick"], PartOfSpeech.ADJECTIVE)
        self.assertIsNone(seen[0]["brown"])
        self.assertEqual(seen[1]["fox"], PartOfSpeech.NOUN)
        self.assertIsNone(seen[1]["jumps"])

    async def test_highlighted_words_are_excluded(self):
        with patch("word_verse.core.extraction.asyncio.sleep", new=AsyncMock()):
            result = await self.extractor.classify_batch(self.WORDS, highlighted=["fox", "the"])
        self.assertEqual(result.words, ["quick", "brown", "jumps"])
        self.assertNotIn("fox", self.dictionary.lookups)

    async def test_failure_does_not_abort_batch(self):
        self.dictionary.failing.add("brown")
        with patch("word_verse.core.extraction.asyncio.sleep", new=AsyncMock()):
            result = await self.extractor.classify_batch(self.WORDS)
        self.assertEqual(result.words, self.WORDS)
        self.assertIs(dict(result.classifications)["brown"], PartOfSpeech.UNKNOWN)

    async def test_cached_words_skip_network_but_are_returned(self):
        self.store.cache.put("fox", PartOfSpeech.NOUN)
        result = await self.extractor.classify_batch(["fox", "jumps"])
        self.assertEqual(self.dictionary.lookups, ["jumps"])
        self.assertEqual(result.classifications, [("fox", PartOfSpeech.NOUN), ("jumps", PartOfSpeech.VERB)])

    async def test_progress_callback_reports_each_batch(self):
        extractor = ParagraphExtractor(self.classifier, batch_size=2, batch_delay=0)
        calls = []
        with patch("word_verse.core.extraction.asyncio.sleep", new=AsyncMock()):
            await extractor.classify_batch(self.WORDS, progress_callback=lambda d, t: calls.append((d, t)))
        self.assertEqual(calls, [(2, 5), (4, 5), (5, 5)])

    async def test_nothing_new_returns_empty_result(self):
        result = await self.extractor.classify_batch(["fox"], highlighted=["fox"])
        self.assertFalse(result)
        self.assertEqual(self.dictionary.sessions_opened, 0)


class TestExtractionResult(unittest.TestCase):
    def test_summary_pluralizes_and_skips_unknown(self):
        result = ExtractionResult(
            words=["a", "b", "c", "d"],
            classifications=[
                ("a", PartOfSpeech.NOUN),
                ("b", PartOfSpeech.NOUN),
                ("c", PartOfSpeech.VERB),
                ("d", PartOfSpeech.UNKNOWN),
            ],
        )
        self.assertEqual(result.summary(), "Added 4 words from paragraph (2 nouns, 1 verb)")
        self.assertEqual(result.counts[PartOfSpeech.UNKNOWN], 1)

    def test_summary_single_unknown_word(self):
        result = ExtractionResult(words=["x"], classifications=[("x", PartOfSpeech.UNKNOWN)])
        self.assertEqual(result.summary(), "Added 1 word from paragraph")


if __name__ == "__main__":
    unittest.main()
