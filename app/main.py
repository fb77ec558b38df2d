import logging

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware

from .error_handlers import init_error_handlers
from .logging_config import setup_logging
from .middleware import RequestIdMiddleware
from .overlay import OverlayForm
from .querystring import build_api_query, build_listing_url
from .quick_filters import apply_quick_selection, selection_values
from .schemas import FilterStateResponse, OverlayRequest, PageRequest, QuickFilterRequest
from .settings import settings
from .store import FilterStateStore
from .sync import AddressBarSync, MemoryHistory

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def _open_page(query: str) -> AddressBarSync:
    # cada request = una vista de página; el query crudo se decodifica directo ("#" incluido)
    store = FilterStateStore.from_query(query)
    history = MemoryHistory(build_listing_url(store.filters, store.page, store.limit))
    return AddressBarSync(store, history)


def _state_response(sync: AddressBarSync) -> FilterStateResponse:
    store = sync.store
    dispatch = store.consolidate()
    return FilterStateResponse(
        url=sync.history.current,
        query=store.query_string(),
        filters=store.filters,
        dispatch=dict(dispatch),
        api_query=build_api_query(dispatch, store.page, store.limit),
        page=store.page,
        limit=store.limit,
        selections=selection_values(store.filters),
        overlay=OverlayForm.from_filters(store.filters),
    )


app = FastAPI(title="Listings - Search Filter API", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True, allow_methods=["*"], allow_headers=["*"],
)
app.add_middleware(RequestIdMiddleware)
init_error_handlers(app)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/filters/state", response_model=FilterStateResponse)
def filters_state(query: str = Query(default="", description="Query string de la página")):
    sync = _open_page(query)
    return _state_response(sync)


@app.post("/filters/quick", response_model=FilterStateResponse)
def filters_quick(req: QuickFilterRequest):
    sync = _open_page(req.query)
    apply_quick_selection(sync.store, req.control, req.value)
    return _state_response(sync)


@app.post("/filters/overlay", response_model=FilterStateResponse)
def filters_overlay(req: OverlayRequest):
    sync = _open_page(req.query)
    sync.store.merge_from_overlay(req.update)
    return _state_response(sync)


@app.post("/filters/page", response_model=FilterStateResponse)
def filters_page(req: PageRequest):
    sync = _open_page(req.query)
    sync.store.set_page(req.page)
    return _state_response(sync)
