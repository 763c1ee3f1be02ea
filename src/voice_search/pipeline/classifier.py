"""Query classifier: picks the search strategy and engine for a query.

Strategy precedence is the order of STRATEGY_RULES and is the single place
where overlapping intents get resolved:

    crypto > restaurants > news > web (default)

so "bitcoin restaurant meetup" is a crypto query. Only the default web path
looks at query complexity; every specialized strategy uses the keyword
engine.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import NamedTuple

from voice_search.pipeline.classifier_patterns import (
    is_complex_query,
    is_crypto_query,
    is_news_query,
    is_restaurant_query,
)
from voice_search.pipeline.location import extract_location
from voice_search.types.query import Classification, SearchEngine, SearchStrategy

logger = logging.getLogger(__name__)


class StrategyRule(NamedTuple):
    """One entry of the ordered routing table."""

    name: str
    predicate: Callable[[str], bool]
    strategy: SearchStrategy


STRATEGY_RULES: tuple[StrategyRule, ...] = (
    StrategyRule("crypto", is_crypto_query, SearchStrategy.CRYPTO),
    StrategyRule("restaurants", is_restaurant_query, SearchStrategy.RESTAURANTS),
    StrategyRule("news", is_news_query, SearchStrategy.NEWS),
)

DEFAULT_RULE_NAME = "default_web"
COMPLEX_RULE_NAME = "complex_web"


def select_strategy(q_lower: str) -> tuple[SearchStrategy, str]:
    """Evaluate STRATEGY_RULES top to bottom; the first match wins.

    Args:
        q_lower: Lowercased query string

    Returns:
        (strategy, rule name); (WEB, "default_web") when nothing matches
    """
    for rule in STRATEGY_RULES:
        if rule.predicate(q_lower):
            return rule.strategy, rule.name
    return SearchStrategy.WEB, DEFAULT_RULE_NAME


def classify(query: str, debug: bool = False) -> Classification:
    """Classify a raw query into strategy, engine and location.

    Never raises: an empty or signal-free query falls through to web search
    with the keyword engine.

    Args:
        query: Raw user query (original casing is preserved elsewhere)
        debug: Log the decision at INFO with the full classification

    Returns:
        Fully populated Classification
    """
    q_lower = (query or "").lower()

    strategy, rule_name = select_strategy(q_lower)
    location = extract_location(query or "")

    engine = SearchEngine.KEYWORD
    if strategy == SearchStrategy.WEB and is_complex_query(q_lower):
        engine = SearchEngine.SEMANTIC
        rule_name = COMPLEX_RULE_NAME

    classification = Classification(
        search_strategy=strategy,
        search_engine=engine,
        extracted_location=location,
        matched_rule=rule_name,
    )

    if debug:
        logger.info(
            "Classifier: %s/%s (rule=%s)",
            strategy.value,
            engine.value,
            rule_name,
            extra={"classification": classification.model_dump(mode="json")},
        )
    else:
        logger.debug("Classifier: %s/%s (rule=%s)", strategy.value, engine.value, rule_name)
    return classification
