"""Segmentation, case propagation and transliteration of text."""

from translit.normalize.casing import propagate_case
from translit.normalize.segmentation import BoundarySegmenter, split_words
from translit.normalize.transliteration import transliterate, transliterate_word


__all__ = ['BoundarySegmenter', 'propagate_case', 'split_words', 'transliterate', 'transliterate_word']
