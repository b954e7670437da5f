"""
Ranking module for listing search.

This module provides relevance scoring, result ordering and pagination.
"""

from .scorer import FIELD_WEIGHTS, score_listing, score_listings, rank_by_relevance
from .sorter import Page, sort_listings, paginate

__all__ = [
    'FIELD_WEIGHTS',
    'score_listing',
    'score_listings',
    'rank_by_relevance',
    'Page',
    'sort_listings',
    'paginate',
]
