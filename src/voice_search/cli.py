#!/usr/bin/env python3
"""Command-line interface for Voice Search.

Usage:
    # Single query
    voice-search "italian restaurants in Austin"

    # Only show how the query would be routed (no provider call)
    voice-search --classify-only "how does photosynthesis work"

    # Interactive mode
    voice-search --interactive

    # JSON output
    voice-search --format json "bitcoin price today"
"""

from __future__ import annotations

import argparse
import json
import os
import sys

from voice_search import __version__
from voice_search.config import settings
from voice_search.errors import InputError
from voice_search.pipeline.classifier import classify
from voice_search.pipeline.service import SearchService
from voice_search.types.api import SearchResponse
from voice_search.types.query import Classification
from voice_search.utils.logging import set_log_level

# =============================================================================
# Output Formatting
# =============================================================================


class Colors:
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"
    CYAN = "\033[96m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RESET = "\033[0m"


def supports_color() -> bool:
    """Check if terminal supports colors."""
    return (
        hasattr(sys.stdout, "isatty")
        and sys.stdout.isatty()
        and os.environ.get("TERM") != "dumb"
        and os.environ.get("NO_COLOR") is None
    )


def colorize(text: str, color: str) -> str:
    """Apply color if supported."""
    if supports_color():
        return f"{color}{text}{Colors.RESET}"
    return text


STRATEGY_COLORS = {
    "web": Colors.BLUE,
    "news": Colors.YELLOW,
    "crypto": Colors.GREEN,
    "restaurants": Colors.CYAN,
}


def format_response_pretty(response: SearchResponse) -> None:
    """Format a search response for human-readable terminal output."""
    print(colorize("=" * 60, Colors.DIM))

    strategy = response.strategy.value if response.strategy else "unknown"
    engine = response.engine.value if response.engine else "-"
    header = f"Strategy: {strategy.upper()} ({engine})"
    print(colorize(header, STRATEGY_COLORS.get(strategy, Colors.RESET) + Colors.BOLD))
    if response.location:
        print(colorize(f"Location: {response.location}", Colors.DIM))
    if not response.success:
        print(colorize(f"Error: {response.error}", Colors.RED))

    print(colorize("=" * 60, Colors.DIM))
    print()

    print(colorize("SPOKEN ANSWER:", Colors.BOLD))
    print(colorize("-" * 40, Colors.DIM))
    print(response.tts_response)
    print()

    if response.results:
        print(colorize("RESULTS:", Colors.BOLD))
        print(colorize("-" * 40, Colors.DIM))
        for index, result in enumerate(response.results, start=1):
            print(f"  [{index}] {result.title}")
            print(colorize(f"       {result.url}", Colors.DIM))
        print()

    print(colorize("=" * 60, Colors.DIM))


def format_classification_pretty(classification: Classification) -> None:
    """Format a classification for terminal output."""
    location = classification.extracted_location
    print(f"Strategy:  {classification.search_strategy.value}")
    print(f"Engine:    {classification.search_engine.value}")
    print(f"Rule:      {classification.matched_rule}")
    print(f"Location:  {location.location or '-'}")
    print(f"Near me:   {'yes' if location.is_near_me else 'no'}")


def _dump_json(payload: dict) -> None:
    print(json.dumps(payload, indent=2, default=str))


# =============================================================================
# Execution Modes
# =============================================================================


def run_single_query(
    query: str,
    service: SearchService,
    output_format: str = "pretty",
    debug: bool = False,
) -> int:
    """Run a single query and display the result.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    try:
        response = service.search(query)
    except InputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if debug:
            import traceback

            traceback.print_exc()
        return 1

    if output_format == "json":
        _dump_json(response.model_dump(mode="json", by_alias=True, exclude_none=True))
    else:
        format_response_pretty(response)
    return 0 if response.success else 1


def run_classify_only(query: str, output_format: str = "pretty", debug: bool = False) -> int:
    """Show the routing decision for a query without searching."""
    classification = classify(query, debug=debug or settings.router_debug)
    if output_format == "json":
        _dump_json(classification.model_dump(mode="json"))
    else:
        format_classification_pretty(classification)
    return 0


def run_interactive(service: SearchService) -> int:
    """Run in interactive REPL mode.

    Returns:
        Exit code (0 for normal exit).
    """
    print(colorize("\n╔══════════════════════════════════════════╗", Colors.CYAN))
    print(colorize("║       Voice Search Interactive Mode      ║", Colors.CYAN + Colors.BOLD))
    print(colorize("╚══════════════════════════════════════════╝", Colors.CYAN))
    print()
    print("Type what you would say to the voice agent.")
    print("Commands: 'quit' to exit, 'help' for options")
    print(colorize("-" * 44, Colors.DIM))

    while True:
        try:
            query = input(colorize("\n❯ ", Colors.GREEN)).strip()

            if not query:
                continue

            if query.lower() in ("quit", "exit", "q"):
                print(colorize("\nGoodbye!", Colors.CYAN))
                break

            if query.lower() == "help":
                print("\nCommands:")
                print("  quit, exit, q  - Exit interactive mode")
                print("  help           - Show this help")
                print("\nAnything else is searched, e.g. 'sushi near me in Seattle'.")
                continue

            run_single_query(query, service)

        except KeyboardInterrupt:
            print(colorize("\n\nInterrupted. Type 'quit' to exit.", Colors.YELLOW))
        except EOFError:
            print(colorize("\nGoodbye!", Colors.CYAN))
            break

    return 0


# =============================================================================
# Main Entry Point
# =============================================================================


def main(argv: list[str] | None = None, service: SearchService | None = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).
        service: SearchService to use (defaults to one built from settings).

    Returns:
        Exit code.
    """
    parser = argparse.ArgumentParser(
        prog="voice-search",
        description="Voice Search: route spoken queries and answer aloud",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "italian restaurants in Austin"
  %(prog)s --classify-only "bitcoin restaurant meetup"
  %(prog)s --format json "breaking news election results" > result.json
  %(prog)s --interactive
        """,
    )

    parser.add_argument("query", nargs="?", help="Query to search")
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Run in interactive mode (REPL)",
    )
    parser.add_argument(
        "-c",
        "--classify-only",
        action="store_true",
        help="Print the routing decision without calling a search provider",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["pretty", "json"],
        default="pretty",
        help="Output format (default: pretty)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--version", action="version", version=f"voice-search {__version__}")

    args = parser.parse_args(argv)

    if args.debug:
        set_log_level("DEBUG")

    if args.classify_only:
        if not args.query:
            parser.error("--classify-only needs a query")
        return run_classify_only(args.query, output_format=args.format, debug=args.debug)

    if args.interactive:
        return run_interactive(service or SearchService.from_settings(settings))
    if args.query:
        return run_single_query(
            args.query,
            service or SearchService.from_settings(settings),
            output_format=args.format,
            debug=args.debug,
        )

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
