"""
Pattern definitions and helper functions for the query classifier.

This module centralizes the keyword lists, regex patterns and predicate
helpers used to decide which search strategy and engine a query gets.
Keyword checks are plain substring tests on the lowercased query: "link"
inside an unrelated word still counts as a crypto signal. That imprecision
is accepted; do not tokenize here without revisiting every routing test.
"""

from __future__ import annotations

import re

from voice_search.consts import CRYPTO_SYMBOLS, CUISINES

# ============================================================================
# Keyword Sets
# ============================================================================

CRYPTO_KEYWORDS: tuple[str, ...] = (
    "bitcoin",
    "btc",
    "ethereum",
    "crypto",
    "dogecoin",
    "doge",
    "solana",
    "cardano",
    "ripple",
    "xrp",
    "litecoin",
    "chainlink",
    "polkadot",
    "binance",
    "tether",
    "usdt",
    "shiba inu",
    "altcoin",
    "blockchain",
    "coin",
    "token",
    "price",
    "market cap",
    "trading",
)

RESTAURANT_KEYWORDS: tuple[str, ...] = (
    "restaurant",
    "food",
    "dining",
    "dinner",
    "lunch",
    "breakfast",
    "brunch",
    "cuisine",
    "pizza",
    "burger",
    "sushi",
    "taco",
    "coffee",
    "cafe",
    "café",
    "bistro",
    "bakery",
    "steakhouse",
    "bbq",
    "barbecue",
    "ramen",
    "noodle",
    "buffet",
    "takeout",
    "places to eat",
    "where to eat",
    "something to eat",
    "hungry",
    # Dishes only: nationality words ("italian", "thai") also hit
    # "italian history" or "thailand", so they count through other keywords.
    "seafood",
    "tapas",
    "burrito",
    "curry",
    "kebab",
    "falafel",
    "dumpling",
    "pasta",
    "dim sum",
    "vegan",
    "vegetarian",
)

NEWS_KEYWORDS: tuple[str, ...] = (
    "news",
    "breaking",
    "headline",
    "latest",
    "current events",
    "today's",
    "this week",
    "election",
    "politics",
    "update on",
    "updates",
    "what happened",
    "announcement",
    "scores",
)

COMPLEXITY_KEYWORDS: tuple[str, ...] = (
    "how does",
    "how do",
    "how is",
    "why does",
    "why do",
    "why is",
    "explain",
    "compare",
    "comparison",
    "difference between",
    "pros and cons",
    "advantages",
    "disadvantages",
    "analyze",
    "analysis",
    "relationship between",
    "impact of",
    "what are the benefits",
    "in depth",
    "research on",
)

# ============================================================================
# Regex Patterns
# ============================================================================

PROXIMITY_PATTERN = re.compile(r"\b(near me|nearby|close|around)\b")
FOOD_PATTERN = re.compile(r"\b(food|eat|eats|eating|hungry|meal|dinner|lunch|breakfast|restaurants?)\b")

# "near me" before or after a food word, anywhere in the query
PROXIMITY_FOOD_PATTERNS = [
    re.compile(PROXIMITY_PATTERN.pattern + r".*" + FOOD_PATTERN.pattern),
    re.compile(FOOD_PATTERN.pattern + r".*" + PROXIMITY_PATTERN.pattern),
]

# ============================================================================
# Helper Functions
# ============================================================================


def _contains_any(q_lower: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in q_lower for keyword in keywords)


def is_crypto_query(q_lower: str) -> bool:
    """Check for coin names, tickers or market vocabulary.

    Args:
        q_lower: Lowercased query string

    Returns:
        True if any crypto keyword is a substring of the query
    """
    return _contains_any(q_lower, CRYPTO_KEYWORDS)


def is_restaurant_query(q_lower: str) -> bool:
    """Check for food vocabulary, or proximity wording next to a food word.

    Args:
        q_lower: Lowercased query string

    Returns:
        True if a food keyword matches or a proximity/food pair co-occurs
    """
    if _contains_any(q_lower, RESTAURANT_KEYWORDS):
        return True
    return any(pattern.search(q_lower) for pattern in PROXIMITY_FOOD_PATTERNS)


def is_news_query(q_lower: str) -> bool:
    """Check for news and current-events vocabulary."""
    return _contains_any(q_lower, NEWS_KEYWORDS)


def is_complex_query(q_lower: str) -> bool:
    """Check for explanatory, comparative or analytical phrasing."""
    return _contains_any(q_lower, COMPLEXITY_KEYWORDS)


def extract_symbol(query: str) -> str | None:
    """Return the ticker of the first coin mentioned, in CRYPTO_SYMBOLS order.

    Args:
        query: User query string

    Returns:
        Uppercase ticker (e.g. 'BTC') or None
    """
    q_lower = query.lower()
    for name, symbol in CRYPTO_SYMBOLS.items():
        if name in q_lower:
            return symbol
    return None


def extract_cuisine(query: str) -> str | None:
    """Return the first cuisine word found, in CUISINES order."""
    q_lower = query.lower()
    for cuisine in CUISINES:
        if re.search(rf"\b{re.escape(cuisine)}\b", q_lower):
            return cuisine
    return None
