"""
Facet aggregation module for search results.

This module derives category, location and price-range counts used to
build filter UIs.
"""

from .facet_builder import PRICE_BUCKETS, compute_facets, compute_price_ranges

__all__ = ['PRICE_BUCKETS', 'compute_facets', 'compute_price_ranges']
