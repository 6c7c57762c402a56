# -*- coding: utf-8 -*-

import os
import sys
import unittest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


from dictionary_fakes import FakeDictionary  # noqa: E402
from word_verse import VisualizationController  # noqa: E402
from word_verse.core.errors import (  # noqa: E402
    AlreadyHighlighted,
    NoActiveModel,
    NoMatch,
    WordNotFound,
)
from word_verse.core.taxonomy import PartOfSpeech, POS_BUCKETS  # noqa: E402


ENTRIES = {
    "cat": ("noun", "A small domesticated feline."),
    "dog": ("noun", None),
    "run": ("verb", "Move at a speed faster than a walk, never having both feet on the ground at the same time."),
    "blue": ("adjective", None),
    "quickly": ("adverb", None),
}


def _rows(*words):
    return [(str(i), str(-i), w) for i, w in enumerate(words)]


class _ControllerTestBase(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.dictionary = FakeDictionary(ENTRIES)
        self.controller = VisualizationController(dictionary=self.dictionary, batch_delay=0)
        self.controller.load_model("animals", _rows("cat", "dog", "run", "blue", "quickly", "the"))


class TestWords(_ControllerTestBase):
    async def test_add_word_classifies_and_highlights(self):
        pos = await self.controller.add_word("  Cat ")
        self.assertIs(pos, PartOfSpeech.NOUN)
        self.assertEqual(self.controller.highlighted, ["cat"])
        self.assertIs(self.controller.pos_of("cat"), PartOfSpeech.NOUN)
        self.assertEqual(self.controller.definition_of("cat"), "A small domesticated feline.")

    async def test_blank_word_is_ignored(self):
        self.assertIsNone(await self.controller.add_word("   "))
        self.assertEqual(self.controller.highlighted, [])

    async def test_add_word_without_model(self):
        controller = VisualizationController(dictionary=self.dictionary)
        with self.assertRaises(NoActiveModel) as ctx:
            await controller.add_word("cat")
        self.assertEqual(str(ctx.exception), "Please select a model first")

    async def test_add_word_outside_vocabulary(self):
        with self.assertRaises(WordNotFound) as ctx:
            await self.controller.add_word("Zebra")
        self.assertEqual(str(ctx.exception), 'Word "zebra" not found in the model')
        self.assertEqual(self.dictionary.lookups, [])

    async def test_add_word_twice(self):
        await self.controller.add_word("dog")
        with self.assertRaises(AlreadyHighlighted):
            await self.controller.add_word("DOG")
        self.assertEqual(self.controller.highlighted, ["dog"])

    async def test_remove_and_clear(self):
        await self.controller.add_word("dog")
        await self.controller.add_word("cat")
        self.controller.remove_word("DOG")
        self.assertEqual(self.controller.highlighted, ["cat"])
        self.controller.clear_words()
        self.assertEqual(self.controller.highlighted, [])
        self.assertIn("dog", self.controller.cache)


class TestModels(_ControllerTestBase):
    async def test_removing_only_model_empties_view(self):
        await self.controller.add_word("cat")
        self.controller.remove_model(0)
        self.assertIsNone(self.controller.active_model)
        self.assertEqual(self.controller.highlighted, [])
        self.assertTrue(all(not words for words in self.controller.derived_view().values()))

    async def test_removing_inactive_model_keeps_highlights(self):
        await self.controller.add_word("cat")
        self.controller.load_model("colors", _rows("blue", "cat"))
        self.controller.remove_model(0)
        self.assertEqual(self.controller.active_model.name, "colors")
        self.assertEqual(self.controller.highlighted, ["cat"])

    async def test_select_prunes_highlights_and_hydrates_tags(self):
        self.controller.load_model("colors", _rows("blue", "cat"))
        self.controller.select_model(0)
        await self.controller.add_word("cat")
        await self.controller.add_word("run")
        await self.controller.add_word("blue")

        self.controller.select_model(1)
        self.assertEqual(self.controller.highlighted, ["cat", "blue"])
        model = self.controller.active_model
        self.assertIs(model.get("cat").part_of_speech, PartOfSpeech.NOUN)
        self.assertIs(model.get("blue").part_of_speech, PartOfSpeech.ADJECTIVE)
        self.assertEqual(self.dictionary.lookups, ["cat", "run", "blue"])

    async def test_loading_a_model_prunes_highlights(self):
        await self.controller.add_word("run")
        await self.controller.add_word("cat")
        summary = self.controller.load_model("pets", _rows("cat"))
        self.assertEqual(summary.word_count, 1)
        self.assertEqual(self.controller.highlighted, ["cat"])

    async def test_highlights_always_resolve_in_active_model(self):
        await self.controller.add_word("cat")
        await self.controller.add_word("run")
        self.controller.load_model("pets", _rows("dog"))
        self.controller.select_model(0)
        model = self.controller.active_model
        for word in self.controller.highlighted:
            self.assertIn(word, model)


class TestParagraphs(_ControllerTestBase):
    async def test_submit_and_remove_round_trip(self):
        await self.controller.add_word("blue")
        before = self.controller.highlighted

        result = await self.controller.submit_paragraph("The cat runs; the dog: quickly!")
        self.assertEqual(result.words, ["the", "cat", "dog", "quickly"])
        self.assertEqual(self.controller.highlighted, ["blue", "the", "cat", "dog", "quickly"])

        paragraph = self.controller.paragraphs[0]
        self.assertEqual(paragraph.words, ["the", "cat", "dog", "quickly"])
        self.assertEqual(paragraph.text, "The cat runs; the dog: quickly!")
        self.assertTrue(paragraph.id.startswith("para-"))

        self.assertTrue(self.controller.remove_paragraph(paragraph.id))
        self.assertEqual(self.controller.highlighted, before)
        self.assertEqual(self.controller.paragraphs, [])

    async def test_paragraph_skips_already_highlighted_words(self):
        await self.controller.add_word("cat")
        result = await self.controller.submit_paragraph("cat dog")
        self.assertEqual(result.words, ["dog"])
        self.assertEqual(self.controller.paragraphs[0].words, ["dog"])

    async def test_paragraph_without_new_words(self):
        await self.controller.add_word("cat")
        with self.assertRaises(NoMatch) as ctx:
            await self.controller.submit_paragraph("Cat!")
        self.assertEqual(str(ctx.exception), "No new words from the paragraph were found in the model")
        self.assertEqual(self.controller.paragraphs, [])

    async def test_paragraph_without_vocabulary_words(self):
        with self.assertRaises(NoMatch) as ctx:
            await self.controller.submit_paragraph("Lorem ipsum 42")
        self.assertEqual(str(ctx.exception), "No words from the paragraph were found in the model")

    async def test_paragraph_without_model(self):
        controller = VisualizationController(dictionary=self.dictionary)
        with self.assertRaises(NoActiveModel):
            await controller.submit_paragraph("cat")

    async def test_second_paragraph_does_not_record_shared_words(self):
        first = (await self.controller.submit_paragraph("cat dog")).words
        await self.controller.submit_paragraph("dog run")
        p1, p2 = self.controller.paragraphs
        self.assertEqual(first, ["cat", "dog"])
        self.assertEqual(p2.words, ["run"])

        # "dog" belonged to the first paragraph only, so it goes with it
        self.controller.remove_paragraph(p1.id)
        self.assertEqual(self.controller.highlighted, ["run"])

    async def test_active_paragraph_filters_view(self):
        await self.controller.add_word("blue")
        await self.controller.submit_paragraph("cat run")
        paragraph = self.controller.paragraphs[0]

        self.controller.toggle_active_paragraph(paragraph.id)
        view = self.controller.derived_view()
        self.assertEqual([e.key for e in view[PartOfSpeech.NOUN]], ["cat"])
        self.assertEqual([e.key for e in view[PartOfSpeech.VERB]], ["run"])
        self.assertEqual(view[PartOfSpeech.ADJECTIVE], [])

        self.controller.toggle_active_paragraph(paragraph.id)
        self.assertIsNone(self.controller.active_paragraph_id)
        self.assertEqual(len(self.controller.derived_view()[PartOfSpeech.ADJECTIVE]), 1)

    async def test_removing_paragraph_clears_filters(self):
        await self.controller.submit_paragraph("cat run")
        paragraph_id = self.controller.paragraphs[0].id
        self.controller.toggle_active_paragraph(paragraph_id)
        self.controller.toggle_expanded_paragraph(paragraph_id)

        self.controller.remove_paragraph(paragraph_id)
        self.assertIsNone(self.controller.active_paragraph_id)
        self.assertIsNone(self.controller.expanded_paragraph_id)
        self.assertFalse(self.controller.remove_paragraph(paragraph_id))

    async def test_progress_is_reported(self):
        calls = []
        await self.controller.submit_paragraph("cat dog run", progress_callback=lambda d, t: calls.append((d, t)))
        self.assertEqual(calls, [(3, 3)])

    def test_preview_is_truncated(self):
        from word_verse import Paragraph

        paragraph = Paragraph(id="p", text="x" * 40)
        self.assertEqual(paragraph.preview, "x" * 30 + "...")
        self.assertEqual(Paragraph(id="p", text="short").preview, "short")


class TestDerivedView(_ControllerTestBase):
    async def test_every_bucket_present(self):
        view = self.controller.derived_view()
        self.assertEqual(list(view), list(POS_BUCKETS))

    async def test_unclassified_and_untagged_words_are_unknown(self):
        await self.controller.add_word("the")
        view = self.controller.derived_view()
        self.assertEqual([e.key for e in view[PartOfSpeech.UNKNOWN]], ["the"])

    async def test_point_sets_carry_tooltips(self):
        await self.controller.add_word("cat")
        await self.controller.add_word("run")
        await self.controller.add_word("dog")
        sets = {s.part_of_speech: s for s in self.controller.point_sets()}

        nouns = sets[PartOfSpeech.NOUN]
        self.assertEqual(nouns.labels, ["cat", "dog"])
        self.assertEqual(nouns.tooltips[0], "<b>cat</b> (noun)<br><br>A small domesticated feline.")
        self.assertEqual(nouns.tooltips[1], "<b>dog</b> (noun)")
        self.assertEqual((nouns.x, nouns.y), ([0.0, 1.0], [0.0, -1.0]))

        verb_tip = sets[PartOfSpeech.VERB].tooltips[0]
        self.assertTrue(verb_tip.startswith("<b>run</b> (verb)<br><br>"))
        for line in verb_tip.split("<br><br>", 1)[1].split("<br>"):
            self.assertLessEqual(len(line), 40)
        self.assertEqual(len(sets[PartOfSpeech.ADVERB]), 0)


if __name__ == "__main__":
    unittest.main()
