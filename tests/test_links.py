import pytest

from toshl.core.domain.errors import MalformedLocation
from toshl.core.services.links import extract_next_cursor, parse_location_id


def test_location_id_is_last_segment():
    assert parse_location_id("https://api.example.com/accounts/abc123") == "abc123"


def test_location_id_ignores_trailing_slash_and_query():
    assert parse_location_id("https://api.example.com/entries/42/?x=1") == "42"


def test_location_id_accepts_relative_path():
    assert parse_location_id("/categories/77") == "77"


@pytest.mark.parametrize(
    "location",
    [
        "",
        None,
        "   ",
        "https://api.example.com/",
        "https://api.example.com",
        "https://api.example.com/accounts",
        "http://[::1",
    ],
)
def test_location_without_id_is_malformed(location):
    with pytest.raises(MalformedLocation) as info:
        parse_location_id(location)
    assert info.value.location == location


def test_next_cursor_from_link_header():
    header = '<https://api.example.com/entries?from=2020-01-01&page=2>; rel="next"'
    assert extract_next_cursor(header) == "from=2020-01-01&page=2"


def test_next_cursor_picks_next_among_several_relations():
    header = (
        '<https://api.example.com/entries?page=1>; rel="first" '
        '<https://api.example.com/entries?page=3>; rel="next" '
        '<https://api.example.com/entries?page=9>; rel="last"'
    )
    assert extract_next_cursor(header) == "page=3"


@pytest.mark.parametrize(
    "header",
    [
        "",
        None,
        '<https://api.example.com/entries?page=1>; rel="prev"',
        '<https://api.example.com/entries>; rel="next"',
        "garbage",
    ],
)
def test_no_next_cursor(header):
    assert extract_next_cursor(header) == ""


@pytest.mark.parametrize(
    "header",
    [
        '<https://api.example.com/entries?page=2>; type="application/json"; rel="next"',
        "<https://api.example.com/entries?page=2>; rel=next",
        '<https://api.example.com/entries?page=2>; REL="Next"',
        '<https://api.example.com/entries?page=1>; rel="prev", <https://api.example.com/entries?page=2>; rel="next"',
        '<https://api.example.com/entries?page=2>; title="a;b"; rel="next last"',
    ],
)
def test_next_cursor_with_extra_link_params(header):
    assert extract_next_cursor(header) == "page=2"
