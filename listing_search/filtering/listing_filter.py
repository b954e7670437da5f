"""
Listing filter implementation for catalog search.

This module provides structured filtering of marketplace listings by
category, price range, location, seller verification, promotion and status.
"""

from typing import List, Optional

from listing_search.models import Listing, ListingStatus, SearchFilters


class ListingFilter:
    """Filters marketplace listings based on structured criteria.

    Each ``filter_by_*`` method is an independent narrowing pass, so the
    order in which they run never changes the resulting set.
    """

    def apply(
        self,
        listings: List[Listing],
        filters: SearchFilters
    ) -> List[Listing]:
        """Apply every constraint set on ``filters``.

        Passes run cheapest first and preserve the incoming order.

        Args:
            listings: Listings to filter
            filters: Search filters; unset fields impose no constraint

        Returns:
            Listings meeting all criteria
        """
        results = list(listings)

        if filters.category:
            results = self.filter_by_category(results, filters.category)

        if filters.subcategory:
            results = self.filter_by_subcategory(results, filters.subcategory)

        if filters.min_price is not None or filters.max_price is not None:
            results = self.filter_by_price(
                results,
                min_price=filters.min_price,
                max_price=filters.max_price
            )

        if filters.location:
            results = self.filter_by_location(results, filters.location)

        if filters.verified:
            results = self.filter_verified(results)

        if filters.featured:
            results = self.filter_featured(results)

        if filters.status:
            results = self.filter_by_status(results, filters.status)

        return results

    def filter_by_category(self, listings: List[Listing], category: str) -> List[Listing]:
        return [listing for listing in listings if listing.category == category]

    def filter_by_subcategory(self, listings: List[Listing], subcategory: str) -> List[Listing]:
        return [listing for listing in listings if listing.subcategory == subcategory]

    def filter_by_price(
        self,
        listings: List[Listing],
        min_price: Optional[float] = None,
        max_price: Optional[float] = None
    ) -> List[Listing]:
        """Filter listings by price range.

        An inverted range (min above max) simply matches nothing.

        Args:
            listings: List of listings to filter
            min_price: Minimum price (inclusive), None for no minimum
            max_price: Maximum price (inclusive), None for no maximum

        Returns:
            List of listings that meet the price criteria
        """
        filtered = []

        for listing in listings:
            if min_price is not None and listing.price < min_price:
                continue

            if max_price is not None and listing.price > max_price:
                continue

            filtered.append(listing)

        return filtered

    def filter_by_location(
        self,
        listings: List[Listing],
        location_pattern: str
    ) -> List[Listing]:
        """Filter listings by location pattern matching.

        Filters listings to include only those whose location contains the
        specified pattern (case-insensitive substring match).

        Args:
            listings: List of listings to filter
            location_pattern: Location pattern to match (case-insensitive)

        Returns:
            List of listings with matching locations
        """
        pattern_lower = location_pattern.lower()
        return [
            listing for listing in listings
            if pattern_lower in listing.location.lower()
        ]

    def filter_verified(self, listings: List[Listing]) -> List[Listing]:
        return [listing for listing in listings if listing.seller_verified]

    def filter_featured(self, listings: List[Listing]) -> List[Listing]:
        return [listing for listing in listings if listing.featured]

    def filter_by_status(
        self,
        listings: List[Listing],
        status: ListingStatus
    ) -> List[Listing]:
        return [listing for listing in listings if listing.status == status]
