"""Stopword list loading and download."""

import logging
from pathlib import Path
from typing import FrozenSet, Optional

import requests

from ..core.config import settings
from ..core.constants import TextConstants

logger = logging.getLogger(__name__)


class StopwordRepository:
    """Loads the stopword list once and keeps it for the repository's lifetime."""

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path or settings.stopwords_path)
        self._stopwords: Optional[FrozenSet[str]] = None

    def load(self) -> FrozenSet[str]:
        """Return the stopword set, reading the file on first use.

        Read failures fall back to the built-in list. Filler tokens are
        always part of the result.
        """
        if self._stopwords is not None:
            return self._stopwords

        try:
            words = self._read_file()
            logger.info(f"Loaded {len(words)} stopwords from {self.path}")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to load stopwords file: {e}. Using fallback list.")
            words = set(TextConstants.FALLBACK_STOPWORDS)

        self._stopwords = frozenset(words | TextConstants.FILLER_TOKENS)
        return self._stopwords

    def _read_file(self) -> set:
        text = self.path.read_text(encoding="utf-8")
        return {w.strip().lower() for w in text.splitlines() if w.strip()}

    @staticmethod
    def download(url: Optional[str] = None, dest: Optional[str] = None, timeout: Optional[float] = None) -> Path:
        """Download the stopword list to dest, creating parent directories."""
        url = url or settings.stopwords_url
        dest_path = Path(dest or settings.stopwords_path)
        dest_path.parent.mkdir(parents=True, exist_ok=True)

        logger.info(f"Downloading stopwords from {url}...")
        response = requests.get(url, timeout=timeout or settings.request_timeout)
        response.raise_for_status()
        dest_path.write_text(response.text, encoding="utf-8")
        logger.info(f"Stopwords saved to {dest_path}")
        return dest_path
