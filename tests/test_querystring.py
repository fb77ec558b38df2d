from urllib.parse import parse_qsl

import pytest

from app.querystring import build_api_query, build_listing_url, decode, encode


def test_alias_and_coercion_on_decode():
    decoded = decode("minBudget=100000&withPhotos=true")
    assert decoded.filters == {"minPrice": 100000, "onlyWithPhotos": True}


def test_tolerant_parse_drops_bad_numbers():
    decoded = decode("bedrooms=abc&city=Oulu")
    assert "bedrooms" not in decoded.filters
    assert decoded.filters == {"city": "Oulu"}


def test_unknown_and_transient_keys_are_dropped():
    decoded = decode("colour=red&areaRange=0,5000&listingType=buy")
    assert decoded.filters == {"listingType": "buy"}


def test_pagination_defaults_and_parsing():
    decoded = decode("city=Oulu", default_limit=12)
    assert (decoded.page, decoded.limit) == (1, 12)
    decoded = decode("?page=3&limit=24", default_limit=12)
    assert (decoded.page, decoded.limit) == (3, 24)
    decoded = decode("page=abc&limit=-5", default_limit=12)
    assert (decoded.page, decoded.limit) == (1, 12)


def test_property_type_always_decodes_to_list():
    assert decode("propertyType=villa").filters == {"propertyType": ["Villa"]}
    assert decode("propertyType=Villa&propertyType=house&propertyType=villa").filters == {
        "propertyType": ["Villa", "House"]
    }


def test_encode_formats_values_and_appends_pagination_last():
    qs = encode(
        {
            "listingType": "buy",
            "propertyType": ["Villa", "House"],
            "verified": True,
            "featured": False,
            "minPrice": 100000.0,
            "maxArea": 120.5,
            "bedrooms": 2,
            "search": "sea view",
        },
        page=2,
        limit=12,
    )
    assert qs == (
        "listingType=buy&propertyType=Villa,House&verified=true&featured=false"
        "&minPrice=100000&maxArea=120.5&bedrooms=2&search=sea+view&page=2&limit=12"
    )


def test_encode_never_emits_transient_or_empty_values():
    qs = encode({"areaRange": (0, 5000), "budgetRange": (0, 10), "amenities": [], "city": ""}, 1, 12)
    assert qs == "page=1&limit=12"


def test_encode_escapes_values():
    pairs = dict(parse_qsl(encode({"search": "a&b=c"}, 1, 12)))
    assert pairs["search"] == "a&b=c"


@pytest.mark.parametrize(
    "state",
    [
        {"listingType": "rent", "city": "Oulu", "search": "near park", "facingDirection": "east"},
        {"propertyType": ["Villa"], "ownership": ["freehold", "leasehold"], "postedBy": ["owner"]},
        {"amenities": ["pool", "gym"], "furnishingDetails": ["sofa"]},
        {"bedrooms": 0, "bathrooms": 2, "minPrice": 1500.5, "maxPrice": 2000000.0},
        {"minArea": 0.0, "maxArea": 5000.0},
        {"onlyWithPhotos": True, "onlyWithVideos": False, "verified": True, "featured": False, "heatingAvailable": True},
        {"sortBy": "price", "sortDir": "asc", "transactionType": "new", "status": "active"},
    ],
)
def test_round_trip(state):
    decoded = decode(encode(state, 4, 30), default_limit=12)
    assert decoded.filters == state
    assert (decoded.page, decoded.limit) == (4, 30)


def test_listing_and_api_urls(monkeypatch):
    from app.settings import settings

    monkeypatch.setattr(settings, "LISTINGS_PATH", "/properties")
    monkeypatch.setattr(settings, "API_PATH", "/api/properties")
    assert build_listing_url({"city": "Oulu"}, 1, 12) == "/properties?city=Oulu&page=1&limit=12"
    assert build_api_query({"featured": False}, 2, 12) == "/api/properties?featured=false&page=2&limit=12"
