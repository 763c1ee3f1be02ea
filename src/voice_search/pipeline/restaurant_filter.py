"""Restaurant result filtering and deduplication.

Keyword search for "italian restaurants in austin" mostly returns listing
pages ("The 10 Best Restaurants in Austin - Tripadvisor"). This module
keeps results that look like a single establishment, collapses duplicates
by name, and builds the ladder of progressively narrower queries the
restaurant strategy walks through.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from collections.abc import Iterable

from voice_search.types.search import FormattedResult, RawResult
from voice_search.utils.text import clean

logger = logging.getLogger(__name__)

MAX_RESTAURANTS = 5

LISTING_PHRASES: tuple[str, ...] = (
    "best restaurants",
    "top restaurants",
    "top 10",
    "top 20",
    "the 10 best",
    "the 15 best",
    "the 20 best",
    "places to eat",
    "where to eat",
    "restaurant guide",
    "dining guide",
    "food guide",
    "tripadvisor",
    "yelp",
    "opentable",
    "zomato",
    "updated 2024",
    "updated 2025",
    "updated 2026",
)

AGGREGATOR_DOMAINS: tuple[str, ...] = (
    "tripadvisor",
    "yelp",
    "opentable",
    "zomato",
    "grubhub",
    "doordash",
    "ubereats",
    "infatuation",
    "eater.com",
    "timeout.com",
)

# Words that show up in the names of individual places
RESTAURANT_NAME_INDICATORS = re.compile(
    r"\b(?:restaurant|ristorante|trattoria|osteria|pizzeria|bistro|cafe|café|grill|kitchen|"
    r"house|place|diner|eatery|tavern|bar|brasserie|cantina|taqueria|steakhouse|bbq|"
    r"sushi|bakery|deli)\b"
)

# Page content that describes one place rather than a list
RESTAURANT_INFO_INDICATORS = re.compile(
    r"\b(?:menu|address|phone|call us|hours|open daily|reservations?|cuisine|dishes|"
    r"food|order online|located)\b"
)

# Domains excluded progressively by the query ladder
EXCLUDED_SITES: tuple[str, ...] = ("yelp.com", "tripadvisor.com", "opentable.com")


def is_listing_page(result: RawResult) -> bool:
    """Check whether a result is an aggregator or directory page.

    Args:
        result: Raw provider result

    Returns:
        True if the title, description or URL carries a listing phrase, or
        the URL belongs to an aggregator domain
    """
    url = result.url.lower()
    haystack = f"{result.title} {result.description} {url}".lower()

    if any(phrase in haystack for phrase in LISTING_PHRASES):
        return True
    return any(domain in url for domain in AGGREGATOR_DOMAINS)


def looks_like_restaurant(result: RawResult) -> bool:
    """Check for a restaurant-like name or restaurant details in the description."""
    if RESTAURANT_NAME_INDICATORS.search(result.title.lower()):
        return True
    return bool(RESTAURANT_INFO_INDICATORS.search(result.description.lower()))


def normalize_name(title: str) -> str:
    """Reduce a title to lowercase ASCII alphanumerics for deduplication.

    Accents are folded first, so "Joe's Café" and "Joe's Cafe!!" share the
    key "joescafe".
    """
    folded = unicodedata.normalize("NFKD", title).encode("ascii", "ignore").decode("ascii")
    return re.sub(r"[^a-z0-9]", "", folded.lower())


def to_formatted_result(result: RawResult) -> FormattedResult:
    """Convert a raw provider result into a TTS-safe FormattedResult."""
    return FormattedResult(
        title=clean(result.title, terminal_period=False),
        snippet=clean(result.description),
        url=result.url,
        score=result.score,
        published_date=result.published_date or result.age,
    )


def extract_restaurants(
    raw_results: Iterable[RawResult],
    limit: int = MAX_RESTAURANTS,
) -> list[FormattedResult]:
    """Filter raw results down to unique, individual restaurants.

    Listing pages are dropped first; survivors need a restaurant indicator;
    the first result per normalized name is kept, in provider order.

    Args:
        raw_results: Raw results in provider rank order
        limit: Maximum number of restaurants to return

    Returns:
        Up to ``limit`` FormattedResult objects
    """
    seen_keys: set[str] = set()
    restaurants: list[FormattedResult] = []

    for result in raw_results:
        if is_listing_page(result):
            logger.debug("Skipping listing page: %s", result.url)
            continue
        if not looks_like_restaurant(result):
            continue

        key = normalize_name(result.title)
        if not key or key in seen_keys:
            logger.debug("Skipping duplicate restaurant: %s", result.title)
            continue

        seen_keys.add(key)
        restaurants.append(to_formatted_result(result))
        if len(restaurants) >= limit:
            break

    return restaurants


def build_restaurant_queries(
    location: str | None,
    cuisine: str | None = None,
    query: str = "restaurants",
) -> list[str]:
    """Build up to four progressively narrower restaurant queries.

    Each step leans further towards individual establishment pages and
    excludes one more aggregator domain.

    Args:
        location: Place to search in (None searches without one)
        cuisine: Optional cuisine (e.g. "italian")
        query: What kind of place ("restaurants", "pizza", ...)

    Returns:
        Ordered list of provider queries
    """
    subject = " ".join(part for part in (cuisine, query or "restaurants") if part)
    where = f" {location}" if location else ""
    where_in = f" in {location}" if location else ""

    return [
        f"{subject}{where_in}",
        f"{subject}{where} -site:{EXCLUDED_SITES[0]}",
        f"{subject}{where} menu address phone -site:{EXCLUDED_SITES[0]} -site:{EXCLUDED_SITES[1]}",
        f"{subject}{where} official website hours "
        + " ".join(f"-site:{site}" for site in EXCLUDED_SITES),
    ]
