"""API response schemas (pydantic)."""
