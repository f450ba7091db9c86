"""Search query construction with Solr/Lucene escaping.

Every literal value goes through escape_query_chars so that content data
(tag names, paths) cannot change the scope of a query. Field names are not
escaped; they must be plain identifiers.
"""

from __future__ import annotations

import random
import re
from collections.abc import Iterable

from tagfeed.domain.exceptions import ValidationException

# Characters the standard query parser treats as syntax.
_SPECIAL_CHARS = frozenset('\\+-!():^[]"{}~*?|&;/')

# Bare boolean keywords are operators even without special characters.
_RESERVED_WORDS = frozenset({"AND", "OR", "NOT", "TO"})

_FIELD_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_:.\-]*$")


def escape_query_chars(value: str) -> str:
    """Escape a literal so the query parser reads it as a single term.

    Backslash-escapes syntax characters and whitespace. A value that is
    exactly a boolean keyword gets its first letter escaped, and an empty
    value becomes an empty phrase.
    """
    if value == "":
        return '""'
    if value in _RESERVED_WORDS:
        return "\\" + value
    out = []
    for ch in value:
        if ch in _SPECIAL_CHARS or ch.isspace():
            out.append("\\")
        out.append(ch)
    return "".join(out)


def _check_field(field: str) -> str:
    if not _FIELD_PATTERN.match(field):
        raise ValidationException(f"Invalid search field name: {field!r}", field="field")
    return field


def random_sort_spec(
    rng: random.Random,
    prefix: str = "random_",
    bound: int = 10000,
) -> str:
    """Return an ascending sort on a dynamic random field, e.g. "random_4711 asc".

    The engine seeds its random ordering from the field name, so a new
    number per call yields a new order. rng is supplied by the caller.
    """
    return f"{_check_field(prefix + str(rng.randrange(bound)))} asc"


class QueryBuilder:
    """Builds a conjunction of field predicates.

    Example:
        QueryBuilder().where("path", "/tags/a b").where("resourceType", "sakai/tag").build()
        -> 'path:\\/tags\\/a\\ b AND resourceType:sakai\\/tag'
    """

    def __init__(self) -> None:
        self._clauses: list[str] = []

    def where(self, field: str, value: str) -> QueryBuilder:
        """Add an exact-match clause field:value."""
        self._clauses.append(f"{_check_field(field)}:{escape_query_chars(str(value))}")
        return self

    def where_any(self, field: str, values: Iterable[str]) -> QueryBuilder:
        """Add a disjunction clause field:(v1 v2 ...). Requires at least one value."""
        escaped = [escape_query_chars(str(v)) for v in values]
        if not escaped:
            raise ValidationException(
                f"Disjunction over {field!r} needs at least one value", field=field
            )
        self._clauses.append(f"{_check_field(field)}:({' '.join(escaped)})")
        return self

    def build(self) -> str:
        if not self._clauses:
            raise ValidationException("Query has no clauses")
        return " AND ".join(self._clauses)
