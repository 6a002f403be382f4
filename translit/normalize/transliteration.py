"""Schema-driven transliteration of text."""

from collections.abc import Iterator
from typing import TYPE_CHECKING

from translit.models import BOUNDARY_MARKER, Ending, Schema
from translit.normalize.casing import propagate_case
from translit.normalize.segmentation import DEFAULT_SEGMENTER, BoundarySegmenter

if TYPE_CHECKING:
    from translit.repository import SchemaRepository


# Words shorter than this never have their ending peeled off
MIN_ENDING_WORD_LENGTH = 3


def parse_ending(letters: list[str], schema: Schema) -> Ending | None:
    """
    Match the schema's ending rules against the tail of a word.

    The last character is tried before the last two characters, so a
    one-character rule wins over a two-character rule for the same tail.

    Args:
        letters: Word split into characters
        schema: Transliteration schema

    Returns:
        Matched ending, or None when no rule applies
    """
    length = len(letters)
    if length < MIN_ENDING_WORD_LENGTH:
        return None

    for tail_length in (1, 2):
        start = length - tail_length
        tail = "".join(letters[start:])
        matched = schema.lookup_ending(tail)
        if matched is not None:
            return Ending(
                translation=propagate_case(matched, tail, first_symbol_only=False),
                start=start,
            )

    return None


def iter_windows(letters: list[str]) -> Iterator[tuple[str, str, str]]:
    """
    Yield (previous, current, next) windows over a padded word.

    Args:
        letters: Word split into characters

    Yields:
        One window per character of the word
    """
    padded = [BOUNDARY_MARKER, *letters, BOUNDARY_MARKER]
    return zip(padded, padded[1:], padded[2:])


def parse_letter(prev: str, letter: str, next_: str, schema: Schema) -> str:
    """
    Transliterate one character in the context of its neighbours.

    Priority, strongest first: prefix rule, postfix rule, letter rule,
    the character itself.
    """
    result = letter

    matched = schema.lookup_letter(letter)
    if matched is not None:
        result = matched

    matched = schema.lookup_postfix(letter + next_)
    if matched is not None:
        result = matched

    matched = schema.lookup_prefix(prev + letter)
    if matched is not None:
        result = matched

    return propagate_case(result, letter, first_symbol_only=True)


def transliterate_word(word: str, schema: Schema) -> str:
    """
    Transliterate a single segment.

    Args:
        word: Segment produced by the boundary segmenter
        schema: Transliteration schema

    Returns:
        Transliterated body followed by the transliterated ending
    """
    letters = list(word)

    ending = parse_ending(letters, schema)
    if ending is not None:
        body = letters[: ending.start]
        parsed_ending = ending.translation
    else:
        body = letters
        parsed_ending = ""

    parsed_body = "".join(
        parse_letter(prev, letter, next_, schema) for prev, letter, next_ in iter_windows(body)
    )
    return parsed_body + parsed_ending


def transliterate(
    text: str,
    schema: Schema,
    segmenter: BoundarySegmenter | None = None,
) -> str:
    """
    Transliterate text using a schema.

    Args:
        text: Input text
        schema: Transliteration schema
        segmenter: Word boundary segmenter (default: shared instance)

    Returns:
        Transliterated text
    """
    segmenter = segmenter or DEFAULT_SEGMENTER
    return "".join(transliterate_word(word, schema) for word in segmenter.split(text))


def transliterate_by_name(
    text: str,
    schema_name: str,
    repository: "SchemaRepository | None" = None,
) -> str:
    """
    Transliterate text using a schema resolved by name.

    Args:
        text: Input text
        schema_name: Name of a schema in the repository
        repository: Schema repository (default: shared repository)

    Returns:
        Transliterated text

    Raises:
        SchemaNotFoundError: No schema with the given name exists
    """
    from translit.repository import get_repository

    repository = repository or get_repository()
    return transliterate(text, repository.load(schema_name))
