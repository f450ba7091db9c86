"""Directory tag feed service: one representative tagged item per category."""
