"""
Part-of-speech taxonomy.
A closed set of five categories; anything the dictionary reports outside the
first four collapses to UNKNOWN.
"""

from enum import Enum
from typing import Optional


class PartOfSpeech(str, Enum):
    """Closed part-of-speech taxonomy used for grouping and coloring."""
    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    UNKNOWN = "unknown"

    @classmethod
    def normalize(cls, tag: Optional[str]) -> "PartOfSpeech":
        """
        Map a free-text tag onto the taxonomy.

        Exact string match only: "Noun" or "proper noun" map to UNKNOWN.

        Args:
            tag: Raw tag reported by the dictionary (may be None)

        Returns:
            Matching PartOfSpeech, or UNKNOWN
        """
        if isinstance(tag, cls):
            return tag
        for member in cls:
            if member.value == tag:
                return member
        return cls.UNKNOWN


# Ordered buckets for grouping and legends
POS_BUCKETS = (
    PartOfSpeech.NOUN,
    PartOfSpeech.VERB,
    PartOfSpeech.ADJECTIVE,
    PartOfSpeech.ADVERB,
    PartOfSpeech.UNKNOWN,
)
