"""
Main entry point and CLI for Listing Search.

Provides a command-line interface for searching a JSON catalog of
marketplace listings with free-text query, structured filters and paging,
and for inspecting or clearing the search history.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from listing_search.config import get_search_settings, SEARCH_CONFIG
from listing_search.engine import SearchEngine
from listing_search.models import (
    Listing,
    ListingStatus,
    SearchFilters,
    SearchResult,
    SortOption,
)


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def load_catalog(path: Path) -> List[Listing]:
    """
    Load listings from a JSON file containing a list of listing objects.

    Args:
        path: Path to the catalog file

    Returns:
        Listings in file order

    Raises:
        OSError: If the file cannot be read
        ValueError: If the file is not a JSON list of valid listings
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"Catalog {path} must contain a JSON list")
    return [Listing.model_validate(entry) for entry in data]


def format_listing(listing: Listing) -> str:
    """
    Format a listing for console output.

    Args:
        listing: Listing to format

    Returns:
        Formatted string representation of the listing
    """
    lines = [f"📌 {listing.title}"]
    lines.append(f"   ID: {listing.id}")
    lines.append(f"   Price: {listing.price:,.2f}")
    lines.append(f"   Category: {listing.category}" + (
        f" / {listing.subcategory}" if listing.subcategory else ""
    ))
    if listing.location:
        lines.append(f"   Location: {listing.location}")

    badges = []
    if listing.seller_verified:
        badges.append("✔ verified seller")
    if listing.featured:
        badges.append("⭐ featured")
    if badges:
        lines.append(f"   {' | '.join(badges)}")

    lines.append("")
    return "\n".join(lines)


def format_result(result: SearchResult) -> str:
    """
    Format a search result page for console output.

    Args:
        result: Search result

    Returns:
        Formatted string representation of the page, facets and suggestions
    """
    if not result.items:
        if result.total:
            return f"No results on page {result.page} (of {result.total_pages}).\n"
        return "No listings found matching your criteria.\n"

    output = [f"\n{'=' * 60}"]
    output.append(
        f"{result.total} listing(s) found - page {result.page} of {result.total_pages}"
    )
    output.append(f"{'=' * 60}\n")

    for listing in result.items:
        output.append(format_listing(listing))

    facets = result.facets
    if facets.categories:
        output.append("Categories: " + ", ".join(
            f"{facet.name} ({facet.count})" for facet in facets.categories
        ))
    if facets.locations:
        output.append("Locations: " + ", ".join(
            f"{facet.name} ({facet.count})" for facet in facets.locations
        ))
    if facets.price_ranges:
        output.append("Prices: " + ", ".join(
            f"{bucket.min}-{bucket.max} ({bucket.count})" for bucket in facets.price_ranges
        ))
    if result.suggestions:
        output.append("Suggestions: " + ", ".join(result.suggestions))

    output.append(f"{'=' * 60}\n")
    return "\n".join(output)


def build_filters(args: argparse.Namespace) -> SearchFilters:
    """Build search filters from parsed arguments."""
    return SearchFilters(
        query=args.query,
        category=args.category,
        subcategory=args.subcategory,
        min_price=args.min_price,
        max_price=args.max_price,
        location=args.location,
        verified=args.verified or None,
        featured=args.featured or None,
        status=ListingStatus(args.status) if args.status else None,
        sort_by=SortOption(args.sort_by) if args.sort_by else None,
        page=args.page,
        limit=args.limit,
    )


def run_search(args: argparse.Namespace, engine: Optional[SearchEngine] = None) -> int:
    """
    Execute a search, or a history command, from parsed arguments.

    Args:
        args: Parsed command-line arguments
        engine: Engine to use; built from settings when omitted

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    try:
        if engine is None:
            logger.debug(f"Using configuration: {SEARCH_CONFIG}")
            engine = SearchEngine(settings=get_search_settings())

        if args.clear_history:
            engine.clear_history()
            print("Search history cleared.")
            return 0

        if args.history:
            history = engine.get_history()
            if not history:
                print("No search history.")
            for entry in history:
                print(f"{entry.timestamp:%Y-%m-%d %H:%M}  {entry.query}  ({entry.result_count} results)")
            return 0

        if args.catalog is None:
            print("Error: a catalog file is required to search", file=sys.stderr)
            return 1

        listings = load_catalog(Path(args.catalog))
        logger.info(f"Loaded {len(listings)} listings from {args.catalog}")

        result = engine.search(listings, build_filters(args))
        print(format_result(result))
        return 0

    except KeyboardInterrupt:
        logger.info("Search interrupted by user")
        print("\n\n⚠️  Search interrupted by user", file=sys.stderr)
        return 130

    except (OSError, ValueError) as e:
        logger.error(f"Could not load catalog: {e}")
        print(f"\n❌ Error: {str(e)}", file=sys.stderr)
        return 1


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="listing-search",
        description="Search a marketplace catalog with fuzzy matching and filters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Free-text search
  python -m listing_search.main catalog.json --query "tomato"

  # Filter and sort without a query
  python -m listing_search.main catalog.json --category crops --sort-by price-asc

  # Show or clear search history
  python -m listing_search.main --history
  python -m listing_search.main --clear-history
        """
    )

    parser.add_argument("catalog", nargs="?", default=None,
                        help="JSON file containing a list of listings")
    parser.add_argument("--query", "-q", default=None, help="Free-text query")
    parser.add_argument("--category", default=None, help="Exact category")
    parser.add_argument("--subcategory", default=None, help="Exact subcategory")
    parser.add_argument("--min-price", type=float, default=None, help="Minimum price (inclusive)")
    parser.add_argument("--max-price", type=float, default=None, help="Maximum price (inclusive)")
    parser.add_argument("--location", default=None, help="Location substring, e.g. 'Harare'")
    parser.add_argument("--verified", action="store_true", help="Only verified sellers")
    parser.add_argument("--featured", action="store_true", help="Only featured listings")
    parser.add_argument("--status", choices=[s.value for s in ListingStatus], default=None)
    parser.add_argument("--sort-by", choices=[s.value for s in SortOption], default=None)
    parser.add_argument("--page", type=int, default=1, help="1-based page number")
    parser.add_argument("--limit", type=int, default=12, help="Results per page")
    parser.add_argument("--history", action="store_true", help="Show search history and exit")
    parser.add_argument("--clear-history", action="store_true", help="Clear search history and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging output")

    return parser


def main() -> int:
    """
    Main entry point for the CLI application.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_argument_parser()
    args = parser.parse_args()
    return run_search(args)


if __name__ == "__main__":
    sys.exit(main())
