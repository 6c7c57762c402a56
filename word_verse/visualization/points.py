"""
Point sets handed to the plot: one per part of speech, with parallel
coordinate, label and tooltip sequences.
"""

import textwrap
from dataclasses import dataclass, field
from typing import Mapping, Optional

from word_verse.core.embedding_store import WordEmbedding
from word_verse.core.pos_cache import PartOfSpeechCache
from word_verse.core.taxonomy import PartOfSpeech, POS_BUCKETS
import config


@dataclass
class PointSet:
    """All visible words of one part of speech."""
    part_of_speech: PartOfSpeech
    x: list[float] = field(default_factory=list)
    y: list[float] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)
    tooltips: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.labels)


def wrap_definition(definition: Optional[str], width: int = config.TOOLTIP_WRAP_WIDTH) -> str:
    """
    Soft-wrap a definition at spaces, joining lines with <br>.

    Words longer than the width stay whole on their own line.
    """
    if not definition:
        return ""
    lines = textwrap.wrap(
        definition, width=width, break_long_words=False, break_on_hyphens=False
    )
    return "<br>".join(lines)


def build_tooltip(
    word: str,
    part_of_speech: PartOfSpeech,
    definition: Optional[str] = None
) -> str:
    """Tooltip HTML: bold word, part of speech, then the wrapped definition if known."""
    tooltip = f"<b>{word}</b> ({part_of_speech.value})"
    if definition:
        tooltip += f"<br><br>{wrap_definition(definition)}"
    return tooltip


def build_point_sets(
    grouped: Mapping[PartOfSpeech, list[WordEmbedding]],
    cache: PartOfSpeechCache
) -> list[PointSet]:
    """
    Convert grouped embeddings into one PointSet per bucket, in legend order.

    Empty buckets are kept so every part of speech has a set.
    """
    point_sets = []
    for pos in POS_BUCKETS:
        point_set = PointSet(part_of_speech=pos)
        for embedding in grouped.get(pos, []):
            label = embedding.key
            point_set.x.append(embedding.x)
            point_set.y.append(embedding.y)
            point_set.labels.append(label)
            point_set.tooltips.append(build_tooltip(label, pos, cache.definition(label)))
        point_sets.append(point_set)
    return point_sets
