#!/usr/bin/env python3
"""
KhojVerse - Explore the multiverse of ideas.

Command-line entry point for browsing the idea catalog:
  - Filter ideas by category and free-text query
  - Order them by views, popularity, trending score, or recency
  - Show search suggestions

Usage:
    python main.py                              # Trending ideas, most viewed first
    python main.py --category Research          # Only research ideas
    python main.py --query quantum --sort new   # Newest ideas matching "quantum"
    python main.py --suggestions                # Show search suggestions

Examples:
    # Top 5 hackathons by trending score
    python main.py -c Hackathons -s trending -l 5

    # Machine-readable output from a custom catalog
    python main.py --catalog ideas.json --json
"""

import argparse
import json
import logging
import sys

from src.catalog import load_catalog, load_suggestions
from src.config import (
    CATALOG_PATH,
    DEFAULT_SORT,
    LOG_LEVEL,
    SUGGESTIONS_PATH,
    configure_logging,
    print_config_summary,
    validate_config,
)
from src.models import Category, ContractViolation, LIST_CATEGORIES, SortOption
from src.navigation import (
    ExploreTrending,
    NavigationController,
    SelectCategory,
    SetQuery,
    SetSort,
)

logger = logging.getLogger("src.cli")


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="khojverse",
        description="Browse, filter, and rank ideas from the KhojVerse catalog.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                           Trending ideas, most viewed first
  %(prog)s -c Research               Only research ideas
  %(prog)s -q quantum -s new         Newest ideas matching "quantum"
  %(prog)s -c Hackathons -l 5        Show at most 5 hackathons
  %(prog)s --suggestions -q ai       Show search suggestions
  %(prog)s --json                    Print results as JSON
        """,
    )

    # Discovery options
    parser.add_argument(
        "--query", "-q",
        default="",
        metavar="TEXT",
        help="Case-insensitive text matched against titles and tags",
    )

    parser.add_argument(
        "--category", "-c",
        choices=[c.value for c in LIST_CATEGORIES],
        default=Category.TRENDING.value,
        metavar="CATEGORY",
        help="Category to browse (default: Trending, which includes everything)",
    )

    parser.add_argument(
        "--sort", "-s",
        choices=[s.value for s in SortOption],
        default=None,
        help=f"Sort order (default: {DEFAULT_SORT})",
    )

    parser.add_argument(
        "--limit", "-l",
        type=int,
        default=None,
        metavar="N",
        help="Show at most N ideas (default: all)",
    )

    parser.add_argument(
        "--suggestions",
        action="store_true",
        help="Show search suggestions instead of ideas",
    )

    parser.add_argument(
        "--catalog",
        default=None,
        metavar="PATH",
        help="JSON catalog file (default: CATALOG_PATH or the built-in catalog)",
    )

    # Output options
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging",
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print results",
    )

    # Info options
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Show current configuration and exit",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 1.0.0",
    )

    return parser


def show_config() -> None:
    """Display current configuration."""
    print("=" * 60)
    print("KhojVerse Configuration")
    print("=" * 60)
    print_config_summary()

    errors = validate_config()
    if errors:
        print("\nConfiguration warnings:")
        for error in errors:
            print(f"  ⚠️  {error}")
    else:
        print("\n✓ Configuration valid")
    print("=" * 60)


def format_idea(index: int, idea) -> str:
    """One line per idea: rank, category, title, views, popularity, tags."""
    tags = ", ".join(idea.tags)
    return (
        f"{index:>3}. [{idea.category.value}] {idea.title}\n"
        f"     {idea.views:,} views | {idea.popularity.value} | {tags}"
    )


def browse(controller: NavigationController, args) -> list:
    """Drive the controller through the same steps a user would take."""
    controller.dispatch(ExploreTrending())
    controller.dispatch(SelectCategory(args.category))
    if args.sort:
        controller.dispatch(SetSort(args.sort))
    if args.query:
        controller.dispatch(SetQuery(args.query))
    return controller.ordered_ideas()


def main(argv: list = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).

    Returns:
        Exit code (0 = success, 1 = error).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else LOG_LEVEL)

    # Handle --show-config
    if args.show_config:
        show_config()
        return 0

    if args.limit is not None and args.limit < 1:
        print("❌ --limit must be at least 1")
        return 1

    try:
        catalog = load_catalog(args.catalog or CATALOG_PATH)
        suggestions = load_suggestions(SUGGESTIONS_PATH)
        controller = NavigationController.from_config(catalog, suggestions)

        if args.suggestions:
            results = controller.suggestions(args.query)
            if args.json:
                print(json.dumps(results, indent=2))
            else:
                for suggestion in results:
                    print(f"  • {suggestion}")
            return 0

        ideas = browse(controller, args)

    except ContractViolation as e:
        print(f"❌ {e}")
        return 1
    except OSError as e:
        print(f"❌ Could not read catalog: {e}")
        return 1

    total = len(ideas)
    if args.limit is not None:
        ideas = ideas[:args.limit]

    if args.json:
        print(json.dumps({
            "state": controller.state.to_dict(),
            "count": total,
            "results": [idea.to_dict() for idea in ideas],
        }, indent=2))
        return 0

    if not args.quiet:
        discovery = controller.state.discovery
        print("=" * 60)
        print(f"KhojVerse: {discovery.category.value}")
        print("=" * 60)
        print(f"Sort by: {discovery.sort.label}")
        if discovery.query:
            print(f"Query:   {discovery.query}")
        print(f"Showing {len(ideas)} of {total} ideas")
        print()

    if not ideas:
        print("No ideas found matching your search.")
        return 0

    for index, idea in enumerate(ideas, start=1):
        print(format_idea(index, idea))

    logger.debug("Printed %d of %d ideas", len(ideas), total)
    return 0


if __name__ == "__main__":
    sys.exit(main())
