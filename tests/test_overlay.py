import pytest

from app.errors import UnknownFilterKey
from app.overlay import OverlayForm, reconcile


def test_reset_signal_only_clears_overlay_keys():
    state = {"listingType": "buy", "propertyType": ["Villa"], "verified": True}
    assert reconcile(state, {}) == {"listingType": "buy"}


def test_reset_keeps_every_quick_filter_key():
    state = {
        "listingType": "rent",
        "city": "Oulu",
        "search": "park",
        "bedrooms": 2,
        "sortBy": "price",
        "sortDir": "asc",
        "featured": True,
        "minPrice": 1000.0,
        "amenities": ["pool"],
        "status": "active",
        "transactionType": "resale",
        "heatingAvailable": True,
    }
    assert reconcile(state, {}) == {
        "listingType": "rent",
        "city": "Oulu",
        "search": "park",
        "bedrooms": 2,
        "sortBy": "price",
        "sortDir": "asc",
        "featured": True,
    }


def test_partial_update_sets_aliases_and_clears_empty_values():
    state = {"listingType": "buy", "ownership": ["freehold"], "minPrice": 5000.0}
    update = {
        "ownershipType": [],
        "minBudget": "",
        "maxBudget": "900000",
        "withPhotos": "true",
        "facing": ["east"],
        "property": "villa",
    }
    assert reconcile(state, update) == {
        "listingType": "buy",
        "maxPrice": 900000.0,
        "onlyWithPhotos": True,
        "facingDirection": "east",
        "propertyType": ["Villa"],
    }


def test_partial_update_does_not_mutate_input_and_skips_transient_keys():
    state = {"city": "Oulu"}
    out = reconcile(state, {"areaRange": (10, 20), "verifiedProperties": False})
    assert state == {"city": "Oulu"}
    assert out == {"city": "Oulu", "verified": False}


def test_unknown_key_is_rejected():
    with pytest.raises(UnknownFilterKey) as exc:
        reconcile({}, {"colour": "red"})
    assert exc.value.key == "colour"


def test_form_derived_from_filters():
    form = OverlayForm.from_filters(
        {
            "propertyType": ["Villa"],
            "minArea": 50.0,
            "maxPrice": 2_000_000.0,
            "facingDirection": "east,north",
            "verified": True,
        }
    )
    assert form.property_type == ["Villa"]
    assert form.area_range == (50, 5000)
    assert form.budget_range == (0, 2_000_000)
    assert (form.min_area, form.max_area) == ("50", "")
    assert (form.min_budget, form.max_budget) == ("", "2000000")
    assert form.facing == ["east", "north"]
    assert form.verified_properties is True
    assert form.only_with_photos is False


def test_sliders_and_inputs_stay_in_step():
    form = OverlayForm()
    form.set_area_range(100, 900)
    assert (form.min_area, form.max_area) == ("100", "900")
    form.set_input("maxBudget", "")
    assert form.budget_range == (0, 10_000_000)
    form.set_input("minBudget", "250000")
    assert form.budget_range == (250000, 10_000_000)
    with pytest.raises(UnknownFilterKey):
        form.set_input("areaRange", "1")


def test_form_update_round_trips_through_reconcile():
    state = {"listingType": "buy", "propertyType": ["House"], "minPrice": 1000.0}
    form = OverlayForm.from_filters(state)
    form.toggle_option("propertyType", "House")
    form.toggle_option("propertyType", "Villa")
    form.toggle_option("postedBy", "agent")
    form.set_budget_range(0, 3_000_000)
    form.only_with_videos = True

    update = form.to_update()
    assert "areaRange" not in update and "budgetRange" not in update
    assert reconcile(state, update) == {
        "listingType": "buy",
        "propertyType": ["Villa"],
        "postedBy": ["agent"],
        "minPrice": 0.0,
        "maxPrice": 3_000_000.0,
        "onlyWithPhotos": False,
        "onlyWithVideos": True,
        "verified": False,
    }
    assert reconcile(state, OverlayForm.reset_signal()) == {"listingType": "buy"}
