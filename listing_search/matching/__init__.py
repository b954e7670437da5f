"""
Matching module for listing search.

This module provides text normalization and approximate string matching.
"""

from .normalizer import normalize, strip_accents, tokenize
from .string_matcher import edit_distance, fuzzy_score

__all__ = ['normalize', 'strip_accents', 'tokenize', 'edit_distance', 'fuzzy_score']
