"""
Word-Verse Configuration
Central configuration for paths, dictionary service, batching, and plot settings.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Project paths
PROJECT_ROOT = Path(__file__).parent
DATA_DIR = PROJECT_ROOT / "data"

# Logging
LOG_LEVEL = os.getenv("WORD_VERSE_LOG_LEVEL", "INFO")

# Dictionary service settings
DEFAULT_DICTIONARY = "free_dictionary"
DICTIONARY_URL = os.getenv(
    "WORD_VERSE_DICTIONARY_URL",
    "https://api.dictionaryapi.dev/api/v2/entries/en",
)
DICTIONARY_TIMEOUT = float(os.getenv("WORD_VERSE_DICTIONARY_TIMEOUT", "10"))

# Paragraph extraction settings
CLASSIFY_BATCH_SIZE = 25  # Words classified concurrently per batch
CLASSIFY_BATCH_DELAY = 0.1  # Seconds to wait between batches

# Visualization settings
PLOT_HEIGHT = 700
PLOT_WIDTH = None  # None lets Streamlit stretch the chart to the container
TOOLTIP_WRAP_WIDTH = 40
AXIS_PADDING = 0.05  # Fraction of the model extent added around the axes

# Part-of-speech colors (legend order follows this dict)
POS_COLORS = {
    "noun": "#4285F4",       # Blue
    "verb": "#EA4335",       # Red
    "adjective": "#FBBC05",  # Yellow
    "adverb": "#34A853",     # Green
    "unknown": "#9E9E9E",    # Gray
}

POS_LABELS = {
    "noun": "Nouns",
    "verb": "Verbs",
    "adjective": "Adjectives",
    "adverb": "Adverbs",
    "unknown": "Unknown",
}

# Sidebar settings
PARAGRAPH_PREVIEW_CHARS = 30
