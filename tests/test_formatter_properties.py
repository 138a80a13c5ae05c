"""
Property-based tests for address and listing formatting.
"""

from hypothesis import given, settings, strategies as st
from datetime import datetime

from bargain_finder.models import ClassifiedListing, TagLabel
from bargain_finder.services.search import (
    ADDRESS_PLACEHOLDER,
    ListingURLBuilder,
    format_address,
    format_listing,
)


NOW = datetime(2025, 6, 15, 12, 0, 0)

# Strategy for generating non-empty address parts without separators
parts = st.one_of(
    st.none(),
    st.from_regex(r'[A-Z][a-z0-9]{0,10}', fullmatch=True)
)

addresses = st.fixed_dictionaries({
    "streetNumber": parts,
    "streetName": parts,
    "streetSuffix": parts,
    "unitNumber": parts,
    "city": parts,
    "state": parts,
    "zip": parts,
})


@given(address=addresses)
@settings(max_examples=100)
def test_address_contains_only_present_parts(address):
    """
    **Property: Address formatting skips absent parts**

    For any address, the formatted string contains every present part and no
    empty segments; with no parts the placeholder is returned.
    """
    formatted = format_address(address)
    present = [value for value in address.values() if value]

    if not present:
        assert formatted == ADDRESS_PLACEHOLDER
        return

    for value in present:
        assert value in formatted
    assert ", , " not in formatted
    assert not formatted.startswith(", ")
    assert not formatted.endswith(", ")
    assert "  " not in formatted


def test_street_and_city():
    address = {"streetNumber": "12", "streetName": "Main", "city": "Toronto", "state": "ON"}
    assert format_address(address) == "12 Main, Toronto, ON"


def test_full_address_with_unit():
    address = {
        "streetNumber": "100",
        "streetName": "Queen",
        "streetSuffix": "St",
        "unitNumber": "1205",
        "city": "Toronto",
        "state": "ON",
        "zip": "M5H 2N2",
    }
    assert format_address(address) == "100 Queen St Unit 1205, Toronto, ON, M5H 2N2"


def test_city_only():
    assert format_address({"city": "Ottawa"}) == "Ottawa"


def test_missing_address():
    assert format_address(None) == ADDRESS_PLACEHOLDER
    assert format_address({}) == ADDRESS_PLACEHOLDER
    assert format_address({"streetName": "", "city": None}) == ADDRESS_PLACEHOLDER


class TestFormatListing:

    def test_bargain_listing(self):
        record = {
            "mlsNumber": "X7001234",
            "listPrice": 650000,
            "simpleDaysOnMarket": 75,
            "details": {"propertyType": "Detached"},
            "images": ["IMG-X7001234_1.jpg", "IMG-X7001234_2.jpg"],
            "address": {"streetNumber": "8", "streetName": "Elm", "city": "Guelph", "state": "ON"},
        }
        listing = format_listing(record, "bargain", NOW)

        assert isinstance(listing, ClassifiedListing)
        assert listing.mls_number == "X7001234"
        assert listing.address == "8 Elm, Guelph, ON"
        assert listing.asking_price == 650000
        assert listing.property_type == "Detached"
        assert listing.thumbnail == "IMG-X7001234_1.jpg"
        assert listing.realtor_ca_link == "https://www.realtor.ca/real-estate/X7001234"
        assert listing.tags == [TagLabel.LONG_TIME_NO_SOLD.value]

    def test_defaults_for_empty_record(self):
        listing = format_listing({}, "bargain", NOW)

        assert listing.mls_number == ""
        assert listing.address == ADDRESS_PLACEHOLDER
        assert listing.asking_price == 0
        assert listing.property_type == "Unknown"
        assert listing.thumbnail == ""
        assert listing.realtor_ca_link == "https://www.realtor.ca/real-estate/"
        assert listing.tags == []

    def test_alternate_field_names(self):
        record = {"mls": "N555", "price": 420000, "type": "Condo Apt"}
        listing = format_listing(record, "fixer", NOW)

        assert listing.mls_number == "N555"
        assert listing.asking_price == 420000
        assert listing.property_type == "Condo Apt"

    def test_tags_only_for_bargain_search(self):
        record = {"simpleDaysOnMarket": 200, "details": {"description": "sold as is"}}
        assert format_listing(record, "fixer", NOW).tags == []
        assert format_listing(record, "bargain", NOW).tags == ["long time no sold"]

    def test_serializes_with_camel_case_names(self):
        listing = format_listing({"mlsNumber": "E1", "listPrice": 1}, "school", NOW)
        body = listing.model_dump(by_alias=True)

        assert set(body) == {
            "mlsNumber", "address", "askingPrice", "propertyType",
            "thumbnail", "realtorCaLink", "tags",
        }


def test_listing_url_builder():
    assert ListingURLBuilder().build_listing_url("W123") == "https://www.realtor.ca/real-estate/W123"
