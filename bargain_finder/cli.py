"""
Command-line interface for Bargain Finder.

Runs one properties search against the listings provider and prints the
results, with the same refinement filters the web client offers.
"""

import asyncio
import argparse
import json
import logging
import sys
from typing import List, Optional
from datetime import datetime

from dotenv import load_dotenv

from bargain_finder.error_handling import BargainFinderError, ConfigError
from bargain_finder.models import ClassifiedListing, RefinementCriteria, SearchType
from bargain_finder.services.search import SearchService


logger = logging.getLogger(__name__)


def format_price(price) -> str:
    """Format an asking price in Canadian dollars."""
    if not price:
        return "Price not published"
    return f"CA${price:,.0f}"


def format_property(listing: ClassifiedListing) -> str:
    """
    Format a classified listing for console output.

    Args:
        listing: ClassifiedListing to format

    Returns:
        Formatted string representation of the listing
    """
    lines = []

    lines.append(f"🏠 {listing.address}")
    lines.append(f"   MLS #: {listing.mls_number or 'N/A'}")
    lines.append(f"   Price: {format_price(listing.asking_price)}")
    lines.append(f"   Type: {listing.property_type}")

    if listing.tags:
        lines.append(f"   Tags: {', '.join(listing.tags)}")

    if listing.mls_number:
        lines.append(f"   URL: {listing.realtor_ca_link}")

    lines.append("")

    return "\n".join(lines)


def format_results(listings: List[ClassifiedListing]) -> str:
    """
    Format a list of classified listings for console output.

    Args:
        listings: Listings to format

    Returns:
        Formatted string representation of all listings
    """
    if not listings:
        return "No properties found matching your criteria.\n"

    output = []
    output.append(f"\n{'='*60}\n")
    output.append(f"Found {len(listings)} propert{'y' if len(listings) == 1 else 'ies'}\n")
    output.append(f"{'='*60}\n\n")

    for listing in listings:
        output.append(format_property(listing))
        output.append("\n")

    output.append(f"{'='*60}\n")

    return "".join(output)


async def run_search(
    search_type: str = "bargain",
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    property_type: Optional[str] = None,
    tag: Optional[str] = None,
    as_json: bool = False,
    verbose: bool = False
) -> int:
    """
    Execute one properties search and print the results.

    Args:
        search_type: bargain, fixer, school or subway
        min_price: Minimum asking price (optional)
        max_price: Maximum asking price (optional)
        property_type: Property type substring (optional)
        tag: Tag substring (optional)
        as_json: Print the API response body instead of formatted text
        verbose: Enable verbose logging output

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    if min_price is not None and max_price is not None and min_price > max_price:
        logger.error(f"Invalid price range: min_price ({min_price}) > max_price ({max_price})")
        print(
            f"Error: Minimum price ({min_price}) cannot be greater than maximum price ({max_price})",
            file=sys.stderr
        )
        return 1

    criteria = RefinementCriteria(
        min_price=min_price,
        max_price=max_price,
        property_type=property_type,
        tag=tag
    )

    try:
        if not as_json:
            print(f"\n🔍 Searching {SearchType.parse(search_type).value} properties...\n")

        start_time = datetime.now()
        listings = await SearchService().search(search_type, criteria)
        elapsed_time = (datetime.now() - start_time).total_seconds()

        if as_json:
            body = {"properties": [listing.model_dump(by_alias=True) for listing in listings]}
            print(json.dumps(body, indent=2, ensure_ascii=False))
        else:
            print(format_results(listings))
            print(f"✅ Search completed in {elapsed_time:.2f} seconds")

        logger.info(f"Search completed in {elapsed_time:.2f} seconds with {len(listings)} results")
        return 0

    except ConfigError as e:
        logger.error(str(e))
        print(f"\n❌ Configuration error: {e}", file=sys.stderr)
        return 1

    except BargainFinderError as e:
        logger.error(f"Search failed: {e}")
        print(f"\n❌ Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        logger.info("Search interrupted by user")
        print("\n\n⚠️  Search interrupted by user", file=sys.stderr)
        return 130


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="bargain-finder",
        description="Search Ontario listings for bargain properties",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Bargain search
  bargain-finder

  # Fixer-uppers sold as is
  bargain-finder --type fixer

  # Bargains between $400k and $800k tagged as estate sales
  bargain-finder --min-price 400000 --max-price 800000 --tag estate

  # Raw API response body
  bargain-finder --json
        """
    )

    parser.add_argument(
        "--type",
        dest="search_type",
        choices=[search_type.value for search_type in SearchType],
        default=SearchType.BARGAIN.value,
        help="Search type (default: bargain)"
    )

    parser.add_argument(
        "--min-price",
        type=float,
        default=None,
        help="Minimum asking price (e.g., 400000)"
    )

    parser.add_argument(
        "--max-price",
        type=float,
        default=None,
        help="Maximum asking price (e.g., 800000)"
    )

    parser.add_argument(
        "--property-type",
        type=str,
        default=None,
        help="Property type substring (e.g., 'detached')"
    )

    parser.add_argument(
        "--tag",
        type=str,
        default=None,
        help="Tag substring (e.g., 'reposted')"
    )

    parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Print results as JSON"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging output"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI application.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    parser = create_argument_parser()
    args = parser.parse_args(argv)

    return asyncio.run(
        run_search(
            search_type=args.search_type,
            min_price=args.min_price,
            max_price=args.max_price,
            property_type=args.property_type,
            tag=args.tag,
            as_json=args.as_json,
            verbose=args.verbose
        )
    )


if __name__ == "__main__":
    sys.exit(main())
