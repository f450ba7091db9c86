"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Invalid values are rejected at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Every setting has a default suitable for local development against a
    Solr core on localhost.
    """

    # App
    app_name: str = "tagfeed"
    app_version: str = "1.0.0"
    debug: bool = False

    # Search (Solr)
    solr_url: str = "http://localhost:8983/solr/sakai"
    solr_timeout_seconds: float = 10.0
    solr_page_size: int = 100  # rows per page when reading every hit
    selection_candidate_limit: int = 25

    # Content store
    content_root: str = "/var/tagfeed/content"
    content_metadata_filename: str = ".content.json"

    # Resource types
    tag_resource_type: str = "sakai/tag"
    pooled_content_resource_type: str = "sakai/pooled-content"
    directory_resource_type: str = "sakai/directory"

    # Randomized candidate ordering: sort on "<prefix><0..bound-1> asc"
    random_sort_field_prefix: str = "random_"
    random_sort_bound: int = 10000

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"
    correlation_id_header: str = "X-Correlation-ID"
    feed_rate_limit: str = "60/minute"

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_search_settings(self) -> "Settings":
        """Validate the search endpoint and the numeric search limits."""
        if not self.solr_url.startswith(("http://", "https://")):
            raise ValueError(
                f"SOLR_URL must be an http(s) URL to a Solr core, got: {self.solr_url!r}"
            )
        if self.random_sort_bound < 1:
            raise ValueError("RANDOM_SORT_BOUND must be at least 1")
        if self.solr_page_size < 1:
            raise ValueError("SOLR_PAGE_SIZE must be at least 1")
        if self.selection_candidate_limit < 1:
            raise ValueError("SELECTION_CANDIDATE_LIMIT must be at least 1")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
