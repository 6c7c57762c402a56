"""
Dictionary backends for Word-Verse.
"""

from .base import BaseDictionary, DictionaryEntry, get_dictionary, list_dictionaries, register_dictionary
from .free_dictionary import FreeDictionary, parse_entry

__all__ = [
    "BaseDictionary",
    "DictionaryEntry",
    "get_dictionary",
    "list_dictionaries",
    "register_dictionary",
    "FreeDictionary",
    "parse_entry",
]
