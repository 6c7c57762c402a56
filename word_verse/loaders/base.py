"""
Base class for model loaders.
Defines the interface all loaders must implement.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import pandas as pd

logger = logging.getLogger(__name__)

Row = tuple[Optional[str], Optional[str], Optional[str]]


class BaseModelLoader(ABC):
    """
    Abstract base class for embedding model loaders.

    All loaders return raw (x, y, word) string rows. Validation (quote
    stripping, numeric parsing, invalid-row counting) belongs to the
    EmbeddingStore, so loaders only deal with getting rows out of a source.
    """

    @abstractmethod
    def load(self) -> list[Row]:
        """
        Load and return the raw rows.

        Returns:
            List of (x, y, word) tuples; a missing field is None
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Display name for the loaded model.

        Returns:
            String name shown in the model list
        """
        pass

    @staticmethod
    def to_rows(df: pd.DataFrame) -> list[Row]:
        """
        Convert a header-less frame to (x, y, word) tuples.

        Frames with fewer than three columns have no usable rows.
        """
        if df.shape[1] < 3:
            logger.warning(f"Expected at least 3 columns, found {df.shape[1]}")
            return []

        subset = df.iloc[:, :3]
        subset = subset.astype(object).where(subset.notna(), None)
        return [tuple(row) for row in subset.itertuples(index=False, name=None)]
