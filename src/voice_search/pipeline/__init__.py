"""Query analysis and search orchestration.

This package holds the classifier, location extractor, restaurant filter,
response composer and the SearchService that ties them to the providers.
"""

from voice_search.pipeline.classifier import classify
from voice_search.pipeline.composer import compose
from voice_search.pipeline.location import extract_location
from voice_search.pipeline.restaurant_filter import extract_restaurants
from voice_search.pipeline.service import SearchService

__all__ = [
    "classify",
    "compose",
    "extract_location",
    "extract_restaurants",
    "SearchService",
]
