"""
Filtering module for marketplace listings.

This module provides functionality to filter catalog listings based on
structured criteria such as category, price range and location.
"""

from .listing_filter import ListingFilter

__all__ = ['ListingFilter']
