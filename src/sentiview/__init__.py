"""SentiView - analytics over pre-labeled social-media comments."""

__version__ = "1.0.0"
__author__ = "SentiView Team"

from .core.models import *
from .core.config import settings
from .services.context import AnalyticsContext
from .services.data_loader import DataLoadError, DatasetLoader

__all__ = [
    "settings",
    "AnalyticsContext",
    "DataLoadError",
    "DatasetLoader",
]
