from app.store import FilterStateStore
from app.sync import AddressBarSync, DebouncedDispatcher, MemoryHistory


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def _page(url="/properties?city=Oulu&page=2&limit=12"):
    history = MemoryHistory(url)
    store = FilterStateStore(default_limit=12)
    sync = AddressBarSync(store, history)
    sync.on_navigate()
    return sync


def test_in_page_mutation_replaces_the_history_entry():
    sync = _page()
    sync.store.set_one("withPhotos", "true")
    assert sync.history.entries == ["/properties?city=Oulu&onlyWithPhotos=true&page=1&limit=12"]
    assert sync.history.index == 0


def test_back_navigation_is_a_full_replace():
    history = MemoryHistory("/properties?city=Oulu&page=1&limit=12")
    history.push("/properties?listingType=rent&bedrooms=2&page=1&limit=12")
    store = FilterStateStore(default_limit=12)
    sync = AddressBarSync(store, history)
    sync.on_navigate()
    store.set_one("verified", "true")
    assert store.filters == {"listingType": "rent", "bedrooms": 2, "verified": True}

    sync.on_navigate(history.back())
    assert store.filters == {"city": "Oulu"}
    assert history.entries[1] == "/properties?listingType=rent&bedrooms=2&verified=true&page=1&limit=12"

    sync.on_navigate(history.forward())
    assert store.filters == {"listingType": "rent", "bedrooms": 2, "verified": True}


def test_url_and_store_converge_after_overlay_merge():
    sync = _page()
    sync.store.merge_from_overlay({"property": "villa", "minBudget": "500000"})
    replica = FilterStateStore.from_query(sync.history.current.split("?", 1)[1], default_limit=12)
    assert replica.filters == sync.store.filters


def test_debounce_delays_dispatch_but_not_state():
    clock = FakeClock()
    sent = []
    dispatcher = DebouncedDispatcher(lambda r, p, l: sent.append(dict(r)), window_ms=300, clock=clock)
    store = FilterStateStore(default_limit=12, on_dispatch=dispatcher)

    store.set_one("search", "s")
    clock.now = 0.1
    store.set_one("search", "se")
    clock.now = 0.2
    store.set_one("search", "sea")
    assert store.filters == {"search": "sea"}
    assert sent == []

    clock.now = 0.45
    assert dispatcher.poll() is False
    clock.now = 0.6
    assert dispatcher.poll() is True
    assert sent == [{"search": "sea"}]
    assert dispatcher.pending is False


def test_flush_sends_immediately():
    sent = []
    dispatcher = DebouncedDispatcher(lambda r, p, l: sent.append((dict(r), p, l)), window_ms=500, clock=FakeClock())
    dispatcher.submit({"city": "Oulu"}, 3, 12)
    dispatcher.flush()
    assert sent == [({"city": "Oulu"}, 3, 12)]
    assert dispatcher.flush() is None
