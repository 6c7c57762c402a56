"""
CSV loader for precomputed 2D embeddings.
Reads `x, y, word` rows from a file on disk or an uploaded file object.
"""

import io
import logging
import warnings
from pathlib import Path
from typing import BinaryIO, Optional, Union

import pandas as pd

from .base import BaseModelLoader, Row
import config

logger = logging.getLogger(__name__)

ROW_FIELDS = (0, 1, 2)


def _first_fields(fields: list[str]) -> list[str]:
    """Keep x, y and word from a line with extra fields."""
    return fields[:len(ROW_FIELDS)]


class CsvModelLoader(BaseModelLoader):
    """
    Loader for header-less `x, y, word` CSV files.

    Every value is read as a string so the store can count rows whose
    coordinates fail to parse. Only the first three fields of a line are
    kept, so lines of any width reach the store; short lines come back with
    missing fields. A header line survives and is later counted as invalid.
    """

    def __init__(
        self,
        source: Union[str, Path, BinaryIO],
        name: Optional[str] = None
    ):
        """
        Initialize the CSV loader.

        Args:
            source: Path to a CSV file, or a binary file-like object (e.g. an upload)
            name: Model name (defaults to the file name without extension)
        """
        self.source = source
        self._name = name

    @property
    def name(self) -> str:
        if self._name:
            return self._name
        raw_name = self.source if isinstance(self.source, (str, Path)) else getattr(self.source, "name", "")
        stem = Path(str(raw_name)).stem
        return stem or "model"

    def load(self) -> list[Row]:
        """
        Read the CSV into raw rows.

        Returns:
            List of (x, y, word) tuples; empty if the file has no data
        """
        source = self.source
        if not isinstance(source, (str, Path)):
            source = io.BytesIO(source.read())

        try:
            with warnings.catch_warnings():
                # Extra fields past the word are dropped on purpose
                warnings.simplefilter("ignore", pd.errors.ParserWarning)
                df = pd.read_csv(
                    source,
                    header=None,
                    names=list(ROW_FIELDS),
                    index_col=False,
                    dtype=str,
                    keep_default_na=False,
                    skip_blank_lines=True,
                    skipinitialspace=True,
                    engine="python",
                    on_bad_lines=_first_fields,
                )
        except pd.errors.EmptyDataError:
            logger.warning(f"CSV for '{self.name}' is empty")
            return []

        rows = self.to_rows(df)
        logger.info(f"Read {len(rows)} rows from '{self.name}'")
        return rows


def list_data_files(data_dir: Path = config.DATA_DIR) -> list[Path]:
    """Return CSV files bundled in the data directory, sorted by name."""
    if not data_dir.exists():
        return []
    return sorted(data_dir.glob("*.csv"))
