"""Configuration management for SentiView."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    # Dataset
    data_path: str = Field("data/dataset.csv", description="Local path of the labeled comment CSV")
    data_url: str = Field("", description="HTTP(S) location of the comment CSV (overrides data_path)")
    request_timeout: float = Field(30.0, description="Timeout in seconds for dataset and stopword downloads")

    # Stopwords
    stopwords_path: str = Field("data/stopwords/id.txt", description="One-word-per-line stopword list")
    stopwords_url: str = Field(
        "https://raw.githubusercontent.com/stopwords-iso/stopwords-id/master/stopwords-id.txt",
        description="Download location of the Indonesian stopword list",
    )

    # Normalization
    source_aliases_file: str = Field("config/source_aliases.yaml", description="YAML map of platform aliases")

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Analysis settings
    sample_size: int = Field(50, description="Maximum samples shown for a clicked term")
    default_top_n: int = Field(80, description="Default number of terms per sentiment")
    default_ngram: int = Field(1, description="Default n-gram length for word frequency views")
    default_min_aspect_score: float = Field(2.0, description="Default aspect score floor")
    hide_general_by_default: bool = Field(True, description="Hide 'Umum' comments unless asked otherwise")
    page_size: int = Field(50, description="Rows per page in the explore view")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
