"""Conformance checks of schemas against their bundled samples."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from translit.models import Schema
from translit.normalize.transliteration import transliterate
from translit.repository import SchemaRepository
from translit.utils.log import log_with_context


@dataclass
class SampleFailure:
    """A sample whose transliteration did not match."""

    source: str
    expected: str
    actual: str


@dataclass
class SampleCheckResult:
    """Result of checking one schema's samples."""

    schema_name: str
    total: int
    failures: list[SampleFailure] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failures


def check_schema_samples(
    schema: Schema,
    logger: logging.Logger,
) -> SampleCheckResult:
    """
    Transliterate every sample of a schema and compare with the expected output.

    Args:
        schema: Schema to check
        logger: Logger instance

    Returns:
        Sample check result
    """
    result = SampleCheckResult(schema_name=schema.name, total=len(schema.samples))

    for source, expected in schema.samples:
        actual = transliterate(source, schema)
        if actual != expected:
            result.failures.append(SampleFailure(source=source, expected=expected, actual=actual))

    if not schema.samples:
        logger.warning(f"Schema {schema.name} has no samples")
    elif result.failures:
        log_with_context(
            logger,
            "warning",
            f"Schema {schema.name}: {len(result.failures)}/{result.total} samples failed",
            result=result,
        )
    else:
        log_with_context(logger, "info", f"Schema {schema.name}: all {result.total} samples passed", result=result)

    return result


def check_repository_samples(
    repository: SchemaRepository,
    logger: logging.Logger,
    names: Iterable[str] | None = None,
) -> list[SampleCheckResult]:
    """
    Check samples of several schemas.

    Args:
        repository: Schema repository
        logger: Logger instance
        names: Schema names to check (default: all in the repository)

    Returns:
        One result per schema, in name order
    """
    selected = sorted(names) if names is not None else repository.names()
    return [check_schema_samples(repository.load(name), logger) for name in selected]
