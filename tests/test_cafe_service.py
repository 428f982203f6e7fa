"""
Tests for query validation and cafe lookup.
"""

import pytest

from cafe_directory.entities import CafeDirectory, CafeListing, CafeQuery, ErrorKind
from cafe_directory.repositories import DEFAULT_CAFES, StaticCafeRepository
from cafe_directory.services import CafeService, parse_count

MOSCOW = tuple(DEFAULT_CAFES["moscow"])


@pytest.fixture
def service():
    return CafeService.create(source=StaticCafeRepository.create())


@pytest.mark.parametrize("count", range(0, 8))
def test_result_is_clamped_prefix(service, count):
    listing = service.list_cafes(CafeQuery(count=str(count), city="moscow"))
    n = min(count, len(MOSCOW))
    assert listing.is_ok
    assert listing.cafes == MOSCOW[:n]
    assert len(listing.cafes) == n


def test_body_joins_with_comma(service):
    listing = service.list_cafes(CafeQuery(count="2", city="moscow"))
    assert listing.body == "Мир кофе,Сладкоежка"


def test_zero_count_has_empty_body(service):
    listing = service.list_cafes(CafeQuery(count="0", city="moscow"))
    assert listing.is_ok
    assert listing.body == ""


@pytest.mark.parametrize(
    "query, error",
    [
        (CafeQuery(count=None, city="moscow"), ErrorKind.MISSING_COUNT),
        (CafeQuery(count="", city="moscow"), ErrorKind.MISSING_COUNT),
        (CafeQuery(count="", city=None), ErrorKind.MISSING_COUNT),
        (CafeQuery(count="all", city="moscow"), ErrorKind.INVALID_COUNT),
        (CafeQuery(count="all", city="spb"), ErrorKind.INVALID_COUNT),
        (CafeQuery(count="1", city="spb"), ErrorKind.UNKNOWN_CITY),
        (CafeQuery(count="1", city=""), ErrorKind.UNKNOWN_CITY),
        (CafeQuery(count="1", city=None), ErrorKind.UNKNOWN_CITY),
        (CafeQuery(count="1", city="MOSCOW"), ErrorKind.UNKNOWN_CITY),
    ],
)
def test_errors_in_check_order(service, query, error):
    listing = service.list_cafes(query)
    assert not listing.is_ok
    assert listing.error is error
    assert listing.cafes == ()
    assert listing.body == error.message


def test_error_messages():
    assert ErrorKind.MISSING_COUNT.message == "count missing"
    assert ErrorKind.INVALID_COUNT.message == "wrong count value"
    assert ErrorKind.UNKNOWN_CITY.message == "wrong city value"


@pytest.mark.parametrize("count", ["-1", "-0", "+2", "007"])
def test_signed_counts(service, count):
    listing = service.list_cafes(CafeQuery(count=count, city="moscow"))
    if int(count) < 0:
        assert listing.error is ErrorKind.INVALID_COUNT
    else:
        assert listing.cafes == MOSCOW[: int(count)]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", 0),
        ("42", 42),
        ("+3", 3),
        ("-3", -3),
        ("9223372036854775807", 2**63 - 1),
        ("-9223372036854775808", -(2**63)),
        ("9223372036854775808", None),
        ("-9223372036854775809", None),
        (" 3", None),
        ("3 ", None),
        ("3\n", None),
        ("3_0", None),
        ("3.0", None),
        ("0x10", None),
        ("+", None),
        ("-", None),
        ("٣", None),
        ("all", None),
    ],
)
def test_parse_count(text, expected):
    assert parse_count(text) == expected


@pytest.mark.parametrize("count", ["1" * 20, "1" * 30, "1" * 5000, "-" + "9" * 5000])
def test_huge_count_is_invalid(service, count):
    listing = service.list_cafes(CafeQuery(count=count, city="moscow"))
    assert listing.error is ErrorKind.INVALID_COUNT


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0" * 5000 + "1", 1),
        ("+" + "0" * 5000 + "3", 3),
        ("-" + "0" * 5000, 0),
        ("0" * 5000, 0),
        ("0" * 30 + "9223372036854775807", 2**63 - 1),
    ],
)
def test_parse_count_leading_zeros(text, expected):
    assert parse_count(text) == expected


def test_max_count_is_clamped(service):
    listing = service.list_cafes(CafeQuery(count=str(2**63 - 1), city="moscow"))
    assert listing.cafes == MOSCOW


def test_idempotent(service):
    query = CafeQuery(count="3", city="moscow")
    assert service.list_cafes(query) == service.list_cafes(query)


def test_directory_is_not_mutated(service):
    before = service.directory
    service.list_cafes(CafeQuery(count="2", city="moscow"))
    assert service.directory.cafes_for("moscow") == MOSCOW
    assert service.directory == before


def test_service_from_directory():
    directory = CafeDirectory.from_mapping({"spb": ["Север"]})
    service = CafeService(directory=directory)
    assert service.list_cafes(CafeQuery(count="5", city="spb")) == CafeListing(cafes=("Север",))
