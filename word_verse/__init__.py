"""
Word-Verse: explore 2D word embeddings by part of speech.
"""

from word_verse.core.controller import VisualizationController, Paragraph

__version__ = "0.1.0"

__all__ = ["VisualizationController", "Paragraph", "__version__"]
