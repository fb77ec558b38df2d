import logging
import time
from collections.abc import Callable
from typing import Any, Protocol
from urllib.parse import urlsplit

from .querystring import build_listing_url
from .settings import settings
from .store import DispatchListener, DispatchRecord, FilterStateStore

logger = logging.getLogger(__name__)


class History(Protocol):
    """Lo único que el sync necesita del historial: leer y reemplazar la entrada actual."""

    def replace(self, url: str) -> None: ...
    @property
    def current(self) -> str: ...


class MemoryHistory:
    """Historial de navegación en memoria (adaptador por defecto y para tests)."""

    def __init__(self, initial_url: str = "/"):
        self.entries: list[str] = [initial_url]
        self.index = 0

    @property
    def current(self) -> str:
        return self.entries[self.index]

    def replace(self, url: str) -> None:
        self.entries[self.index] = url

    def push(self, url: str) -> None:
        # navegación externa (un link nuevo); el sync nunca hace push
        del self.entries[self.index + 1:]
        self.entries.append(url)
        self.index += 1

    def back(self) -> str:
        if self.index > 0:
            self.index -= 1
        return self.current

    def forward(self) -> str:
        if self.index < len(self.entries) - 1:
            self.index += 1
        return self.current


class AddressBarSync:
    """Mantiene convergentes el store y la barra de direcciones.

    Cambios hechos en la página -> ``history.replace`` (sin entradas nuevas).
    Navegación externa (atrás/adelante) -> ``store.init_from_query``.
    """

    def __init__(self, store: FilterStateStore, history: History):
        self.store = store
        self.history = history
        store.on_change = self._on_store_change

    def _on_store_change(self, store: FilterStateStore) -> None:
        url = build_listing_url(store.filters, store.page, store.limit)
        logger.debug("replace URL -> %s", url)
        self.history.replace(url)

    def on_navigate(self, url: str | None = None) -> None:
        target = self.history.current if url is None else url
        self.store.init_from_query(urlsplit(target).query)


class DebouncedDispatcher:
    """Retrasa solo la llamada de búsqueda; gana el último registro enviado.

    Monohilo: el loop de eventos llama a ``poll`` en cada tick.
    """

    def __init__(
        self,
        sink: DispatchListener,
        window_ms: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.sink = sink
        self.window = (settings.DISPATCH_DEBOUNCE_MS if window_ms is None else window_ms) / 1000
        self.clock = clock
        self._pending: tuple[DispatchRecord, int, int] | None = None
        self._deadline = 0.0

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def __call__(self, record: DispatchRecord, page: int, limit: int) -> None:
        self.submit(record, page, limit)

    def submit(self, record: DispatchRecord, page: int, limit: int) -> None:
        self._pending = (record, page, limit)
        self._deadline = self.clock() + self.window

    def poll(self) -> bool:
        if self._pending is None or self.clock() < self._deadline:
            return False
        self.flush()
        return True

    def flush(self) -> Any:
        if self._pending is None:
            return None
        record, page, limit = self._pending
        self._pending = None
        logger.debug("dispatch: %s (page=%d, limit=%d)", dict(record), page, limit)
        return self.sink(record, page, limit)
