"""Core constants: search field names and shared literal values."""

# Search document fields
FIELD_PATH = "path"
FIELD_RESOURCE_TYPE = "resourceType"
FIELD_TAG = "tag"
FIELD_TAG_NAME = "tagname"
FIELD_DESCRIPTION = "description"

# Tag name recorded for a tag document that has no tagname field.
TAG_NAME_MISSING = ""

# Node property holding the node's resource type.
PROP_RESOURCE_TYPE = "sling:resourceType"

# Key of the selected item inside each category entry.
FEED_CONTENT_KEY = "content"

# Selectors understood by the directory feed endpoint.
SELECTOR_TAGGED = "tagged"
SELECTOR_TIDY = "tidy"
SELECTOR_INFINITY = "infinity"
FEED_EXTENSION = "json"
