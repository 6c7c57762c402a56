"""
Model loaders for Word-Verse.
"""

from .base import BaseModelLoader
from .csv_loader import CsvModelLoader, list_data_files

__all__ = ["BaseModelLoader", "CsvModelLoader", "list_data_files"]
