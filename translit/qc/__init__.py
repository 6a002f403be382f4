"""Quality checks for transliteration schemas."""
