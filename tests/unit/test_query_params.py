"""
Unit tests for list filter query parsing.
It asserts expected behavior and guards against regressions in the corresponding component.
"""

import pytest

from src.api.query_params import normalize_text_filter, parse_number_filter


def test_normalize_text_filter() -> None:
    assert normalize_text_filter(None) is None
    assert normalize_text_filter("  ") is None
    assert normalize_text_filter("Electronics") == "Electronics"


def test_parse_number_filter_accepts_numbers_and_blanks() -> None:
    assert parse_number_filter(None, param="minPrice") is None
    assert parse_number_filter("", param="minPrice") is None
    assert parse_number_filter("0", param="minPrice") == 0.0
    assert parse_number_filter("19.99", param="maxPrice") == 19.99


@pytest.mark.parametrize("raw", ["cheap", "nan", "1,5", "10abc"])
def test_parse_number_filter_rejects_non_numbers(raw: str) -> None:
    with pytest.raises(ValueError, match="maxPrice must be a number"):
        parse_number_filter(raw, param="maxPrice")
