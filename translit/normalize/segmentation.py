"""Text segmentation at word boundaries."""

import regex


# Word boundary where combining marks and join controls count as word
# characters; compiled once at import
WORD_BOUNDARY = regex.compile(r"\b", regex.V1)


class BoundarySegmenter:
    """
    Split text into runs separated at word boundaries.

    Every character of the input lands in exactly one segment, so
    joining the segments gives back the input unchanged.
    """

    def __init__(self, pattern: regex.Pattern = WORD_BOUNDARY):
        self.pattern = pattern

    def split(self, text: str) -> list[str]:
        """
        Split text at every word/non-word transition.

        Args:
            text: Input text

        Returns:
            Ordered list of segments (may include empty edge segments)
        """
        return self.pattern.split(text)


DEFAULT_SEGMENTER = BoundarySegmenter()


def split_words(text: str) -> list[str]:
    """Split text with the default segmenter."""
    return DEFAULT_SEGMENTER.split(text)
