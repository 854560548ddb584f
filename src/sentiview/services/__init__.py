"""Services for SentiView."""

from .context import AnalyticsContext
from .data_loader import DataLoadError, DatasetLoader
from .stopwords import StopwordRepository

__all__ = [
    "AnalyticsContext",
    "DataLoadError",
    "DatasetLoader",
    "StopwordRepository",
]
