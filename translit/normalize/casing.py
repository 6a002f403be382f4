"""Case propagation from source text onto its replacement."""


def has_uppercase(source: str) -> bool:
    """Check whether any character of the source is uppercase."""
    return any(char.isupper() for char in source)


def propagate_case(result: str, source: str, first_symbol_only: bool) -> str:
    """
    Restore the uppercase-ness of the source onto its replacement.

    Args:
        result: Replacement string as stored in the schema
        source: Source text being replaced
        first_symbol_only: Capitalize only the first character of the
            replacement instead of uppercasing all of it

    Returns:
        Replacement with case applied
    """
    if not has_uppercase(source):
        return result

    if first_symbol_only:
        return result[:1].upper() + result[1:]
    return result.upper()
