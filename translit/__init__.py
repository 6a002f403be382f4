"""
translit - schema-driven transliteration.

Text is transliterated with a named rule set ("schema") holding letter,
prefix, postfix and ending substitution tables.
"""

from translit.models import Ending, Schema
from translit.normalize.transliteration import transliterate, transliterate_by_name
from translit.repository import (
    SchemaError,
    SchemaFormatError,
    SchemaNotFoundError,
    SchemaRepository,
    get_repository,
    load_schema,
)


__version__ = "1.0.0"

__all__ = [
    "Ending",
    "Schema",
    "SchemaError",
    "SchemaFormatError",
    "SchemaNotFoundError",
    "SchemaRepository",
    "get_repository",
    "load_schema",
    "transliterate",
    "transliterate_by_name",
]
