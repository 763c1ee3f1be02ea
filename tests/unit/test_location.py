"""Tests for location extraction."""

import pytest
from pydantic import ValidationError

from voice_search.pipeline.location import (
    LOCATION_RULES,
    extract_location,
    find_city,
    find_explicit_location,
    find_state,
)
from voice_search.types.query import LocationResult


class TestExtractLocation:
    """Test suite for extract_location()."""

    def test_explicit_in_phrase(self):
        result = extract_location("best pizza in Austin")
        assert result.location == "austin"
        assert result.is_near_me is False
        assert result.original_query == "best pizza in Austin"

    def test_near_me_without_place(self):
        result = extract_location("italian restaurants near me")
        assert result.location is None
        assert result.is_near_me is True

    @pytest.mark.parametrize("phrase", ["nearby", "close by", "around here", "near here"])
    def test_near_me_variants(self, phrase: str):
        assert extract_location(f"tacos {phrase}").is_near_me is True

    def test_near_me_with_explicit_place_uses_place(self):
        result = extract_location("sushi near me in seattle")
        assert result.location == "seattle"
        assert result.is_near_me is False

    def test_near_me_with_state_uses_state(self):
        result = extract_location("bbq near me texas")
        assert result.location == "texas"
        assert result.is_near_me is False

    def test_near_place_phrase(self):
        result = extract_location("coffee shops near downtown portland")
        assert result.location == "downtown portland"

    def test_area_is_kept_and_articles_dropped(self):
        result = extract_location("restaurants in the bay area tonight")
        assert result.location == "bay area"

    def test_capture_stops_at_politeness_words(self):
        assert extract_location("pizza in denver please").location == "denver"

    def test_capture_stops_at_punctuation(self):
        assert extract_location("tacos in el paso, cheap ones").location == "el paso"

    def test_city_without_phrase(self):
        assert extract_location("weather chicago").location == "chicago"

    def test_state_without_phrase(self):
        assert extract_location("hiking trails colorado").location == "colorado"

    def test_city_order_follows_gazetteer_not_query(self):
        # "new york" precedes "austin" in MAJOR_US_CITIES
        assert extract_location("flights from austin to new york").location == "new york"

    def test_short_capture_is_ignored(self):
        assert extract_location("sushi in la").location is None

    @pytest.mark.parametrize("query", ["restaurants in the area", "late night food in town"])
    def test_placeholder_capture_is_not_a_place(self, query: str):
        result = extract_location(query)
        assert result.location is None
        assert result.is_near_me is False

    def test_no_location(self):
        result = extract_location("how does photosynthesis work")
        assert result.location is None
        assert result.is_near_me is False

    def test_empty_query_never_raises(self):
        result = extract_location("")
        assert result.location is None
        assert result.is_near_me is False

    def test_location_is_lowercase(self):
        assert extract_location("Dinner in San Francisco").location == "san francisco"

    @pytest.mark.parametrize(
        "query",
        [
            "italian restaurants near me",
            "sushi near me in seattle",
            "best pizza in Austin",
            "bitcoin price",
            "",
        ],
    )
    def test_location_and_near_me_are_exclusive(self, query: str):
        result = extract_location(query)
        assert not (result.location and result.is_near_me)


class TestHelpers:
    """Tests for the individual lookup helpers."""

    def test_find_explicit_location_removes_food_words(self):
        assert find_explicit_location("open late in the mission") == "mission"
        assert find_explicit_location("in pizza restaurants") is None

    def test_find_city_returns_none(self):
        assert find_city("nowhere special") is None

    def test_find_state_first_in_list(self):
        # alphabetical list: "georgia" precedes "oregon"
        assert find_state("oregon or georgia") == "georgia"

    def test_rule_order(self):
        assert [name for name, _ in LOCATION_RULES] == [
            "near_me",
            "explicit_phrase",
            "major_city",
            "us_state",
        ]


class TestLocationResult:
    """Tests for the LocationResult schema."""

    def test_both_location_and_near_me_fails(self):
        with pytest.raises(ValidationError):
            LocationResult(location="austin", is_near_me=True)

    def test_frozen(self):
        result = LocationResult(location="austin")
        with pytest.raises(ValidationError):
            result.location = "dallas"
