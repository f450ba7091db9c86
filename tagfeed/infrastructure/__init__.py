"""Infrastructure adapters for the application ports (Solr search, content store)."""
