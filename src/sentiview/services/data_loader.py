"""Dataset ingestion: fetch the labeled comment CSV and normalize it."""

import io
import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

import pandas as pd
import requests
import yaml

from ..core.config import settings
from ..core.constants import FileConstants, LabelConstants
from ..core.models import Record
from ..core.normalizer import normalize_rows

logger = logging.getLogger(__name__)


class DataLoadError(Exception):
    """The dataset could not be fetched or parsed."""


def load_source_aliases(path: Optional[str] = None) -> Dict[str, str]:
    """Load the platform alias table (lower-cased name -> display name)."""
    aliases_file = Path(path or settings.source_aliases_file)
    try:
        with open(aliases_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"expected a mapping, got {type(data).__name__}")
        return {str(k).strip().lower(): str(v).strip() for k, v in data.items()}
    except (OSError, yaml.YAMLError, ValueError) as e:
        logger.warning(f"Failed to load source aliases: {e}. Using defaults.")
        return dict(LabelConstants.DEFAULT_SOURCE_ALIASES)


def parse_csv(text: str) -> List[Dict[str, str]]:
    """Parse CSV text into raw rows. Every value stays a string; blank cells are ''.

    Rows with more cells than the header are cut to the header width and rows
    with fewer are padded with '', so one damaged line never drops the dataset.
    """
    if not text.strip():
        return []
    try:
        header = pd.read_csv(io.StringIO(text), dtype=str, nrows=0)
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise DataLoadError(f"Invalid CSV data: {e}") from e
    width = len(header.columns)

    def truncate(bad_line: List[str]) -> List[str]:
        logger.warning(f"Row with {len(bad_line)} fields (expected {width}), dropping the extra fields")
        return bad_line[:width]

    try:
        frame = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            engine="python",
            on_bad_lines=truncate,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise DataLoadError(f"Invalid CSV data: {e}") from e
    return frame.fillna("").to_dict(orient="records")


class DatasetLoader:
    """Fetches the dataset from a URL or a local file and caches the normalized records."""

    def __init__(
        self,
        path: Optional[str] = None,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        source_aliases: Optional[Mapping[str, str]] = None,
        aliases_path: Optional[str] = None,
    ):
        self.url = url if url is not None else settings.data_url
        self.path = Path(path or settings.data_path)
        self.timeout = timeout or settings.request_timeout
        self.source_aliases = source_aliases
        self.aliases_path = aliases_path
        self._records: Optional[Tuple[Record, ...]] = None

    def _fetch_text(self) -> str:
        if self.url:
            try:
                response = requests.get(self.url, timeout=self.timeout)
            except requests.RequestException as e:
                logger.error(f"Failed to fetch CSV data from {self.url}: {e}")
                raise DataLoadError(f"Failed to fetch {self.url}: {e}") from e
            if not response.ok:
                logger.error(f"Failed to fetch CSV data from {self.url}: HTTP {response.status_code}")
                raise DataLoadError(f"Failed to fetch {self.url}: HTTP {response.status_code}")
            response.encoding = FileConstants.CSV_ENCODING
            return response.text

        try:
            return self.path.read_text(encoding=FileConstants.CSV_ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read CSV data from {self.path}: {e}")
            raise DataLoadError(f"Failed to read {self.path}: {e}") from e

    def fetch_rows(self) -> List[Dict[str, str]]:
        """Fetch and parse the CSV into raw string rows."""
        rows = parse_csv(self._fetch_text())
        logger.info(f"Fetched {len(rows)} rows from {self.url or self.path}")
        return rows

    def load(self) -> Tuple[Record, ...]:
        """Return the normalized records, fetching them on first call only."""
        if self._records is None:
            aliases = self.source_aliases
            if aliases is None:
                aliases = load_source_aliases(self.aliases_path)
            self._records = normalize_rows(self.fetch_rows(), source_aliases=aliases)
        return self._records
