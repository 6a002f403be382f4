"""Repository of named transliteration schema definitions."""

import json
import logging
import threading
from collections.abc import Iterable
from pathlib import Path

from translit.models import Schema
from translit.utils.io import read_json
from translit.utils.log import log_with_context
from translit.utils.schema import SCHEMA_DIR, validate_definition


# Definitions shipped with the package
RULES_DIR = Path(__file__).parent / "etc" / "rules"

DEFINITION_SUFFIX = ".json"


class SchemaError(ValueError):
    """Base class for schema resolution failures."""


class SchemaNotFoundError(SchemaError):
    """No definition exists for the requested schema name."""

    def __init__(self, name: str, available: Iterable[str] = ()):
        self.name = name
        self.available = sorted(available)
        message = f"There is no schema with name {name!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class SchemaFormatError(SchemaError):
    """A schema definition could not be parsed or is structurally invalid."""

    def __init__(self, path: Path, errors: list[str]):
        self.path = path
        self.errors = errors
        super().__init__(f"Malformed schema definition {path}: " + "; ".join(errors))


class SchemaRepository:
    """
    Resolve schemas by name from directories of JSON definitions.

    A schema named ``wikipedia`` is read from ``wikipedia.json``. Directories
    are searched in order and the bundled rules directory comes last, so
    user-supplied definitions shadow bundled ones. Loaded schemas are cached.
    """

    def __init__(
        self,
        search_paths: Iterable[Path] = (),
        definition_schema_dir: Path | None = None,
        logger: logging.Logger | None = None,
    ):
        self.search_paths = [Path(p) for p in search_paths]
        if RULES_DIR not in self.search_paths:
            self.search_paths.append(RULES_DIR)
        self.definition_schema_dir = definition_schema_dir or SCHEMA_DIR
        self.logger = logger or logging.getLogger(__name__)

        self._cache: dict[str, Schema] = {}
        self._lock = threading.Lock()

    def names(self) -> list[str]:
        """List names of all resolvable schemas."""
        found = set()
        for directory in self.search_paths:
            if directory.is_dir():
                found.update(p.stem for p in directory.glob(f"*{DEFINITION_SUFFIX}"))
        return sorted(found)

    def find_definition(self, name: str) -> Path:
        """
        Locate the definition file for a schema name.

        Raises:
            SchemaNotFoundError: No directory holds a definition for the name
        """
        # Names are plain identifiers, never paths
        if not name or Path(name).name != name or name.startswith("."):
            raise SchemaNotFoundError(name, self.names())

        for directory in self.search_paths:
            path = directory / f"{name}{DEFINITION_SUFFIX}"
            if path.is_file():
                return path

        raise SchemaNotFoundError(name, self.names())

    def load(self, name: str) -> Schema:
        """
        Load a schema by name.

        Args:
            name: Schema name

        Returns:
            Parsed, immutable schema

        Raises:
            SchemaNotFoundError: Unknown schema name
            SchemaFormatError: Definition is not valid JSON or is malformed
        """
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        with self._lock:
            cached = self._cache.get(name)
            if cached is not None:
                return cached

            path = self.find_definition(name)
            schema = self.load_file(path)
            self._cache[name] = schema

        log_with_context(self.logger, "debug", f"Loaded schema {name}", path=str(path))
        return schema

    def load_file(self, path: Path) -> Schema:
        """
        Parse and check a single definition file.

        Raises:
            SchemaFormatError: Definition is not valid JSON or is malformed
        """
        try:
            definition = read_json(path)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SchemaFormatError(path, [str(e)]) from e

        errors = validate_definition(definition, self.definition_schema_dir)
        if errors:
            raise SchemaFormatError(path, errors)

        return Schema.from_dict(definition)


_default_repository: SchemaRepository | None = None
_default_lock = threading.Lock()


def get_repository() -> SchemaRepository:
    """Return the process-wide repository of bundled schemas."""
    global _default_repository

    if _default_repository is None:
        with _default_lock:
            if _default_repository is None:
                _default_repository = SchemaRepository()
    return _default_repository


def load_schema(name: str) -> Schema:
    """Load a schema by name from the default repository."""
    return get_repository().load(name)
