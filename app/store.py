import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from .consolidation import consolidate
from .errors import UnknownFilterKey
from .filters_catalog import canonical_key
from .overlay import reconcile
from .querystring import DEFAULT_PAGE, decode, encode
from .resolver import ABSENT, resolve
from .settings import settings

logger = logging.getLogger(__name__)

DispatchRecord = Mapping[str, Any]
ChangeListener = Callable[["FilterStateStore"], None]
DispatchListener = Callable[[DispatchRecord, int, int], None]


class FilterStateStore:
    """Estado canónico de filtros durante la vida de la página de resultados.

    ``on_change`` se llama tras cada mutación hecha desde la página (sincronía
    con la URL); ``on_dispatch`` recibe el registro consolidado para la API.
    """

    def __init__(
        self,
        *,
        default_limit: int | None = None,
        on_change: ChangeListener | None = None,
        on_dispatch: DispatchListener | None = None,
    ):
        self.default_limit = default_limit or settings.DEFAULT_PAGE_LIMIT
        self.filters: dict[str, Any] = {}
        self.page = DEFAULT_PAGE
        self.limit = self.default_limit
        self.on_change = on_change
        self.on_dispatch = on_dispatch

    @classmethod
    def from_query(cls, query: str, **kwargs) -> "FilterStateStore":
        store = cls(**kwargs)
        store.init_from_query(query)
        return store

    def init_from_query(self, query: str) -> None:
        # reemplazo total, nunca merge con el estado anterior
        decoded = decode(query, self.default_limit)
        self.filters = decoded.filters
        self.page = decoded.page
        self.limit = decoded.limit
        logger.debug("init_from_query: %s (page=%d, limit=%d)", self.filters, self.page, self.limit)
        self._dispatch()

    def set_one(self, key: str, raw_value: Any) -> None:
        self._write(key, raw_value)
        self.page = DEFAULT_PAGE
        self._changed()

    def set_many(self, values: Mapping[str, Any]) -> None:
        # varias claves desde un mismo control (p. ej. el preset de precio)
        for key in values:
            if canonical_key(key) is None:
                raise UnknownFilterKey(key)
        for key, raw_value in values.items():
            self._write(key, raw_value)
        self.page = DEFAULT_PAGE
        self._changed()

    def _write(self, key: str, raw_value: Any) -> None:
        target = canonical_key(key)
        if target is None:
            raise UnknownFilterKey(key)
        resolved = resolve(key, raw_value)
        if resolved is ABSENT:
            self.filters.pop(target, None)
        else:
            self.filters[target] = resolved[1]

    def merge_from_overlay(self, update: Mapping[str, Any]) -> dict[str, Any]:
        self.filters = reconcile(self.filters, update)
        self.page = DEFAULT_PAGE
        self._changed()
        return self.filters

    def set_page(self, page: int) -> None:
        self.page = max(DEFAULT_PAGE, int(page))
        self._changed()

    def consolidate(self) -> DispatchRecord:
        return MappingProxyType(consolidate(self.filters))

    def query_string(self) -> str:
        return encode(self.filters, self.page, self.limit)

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change(self)
        self._dispatch()

    def _dispatch(self) -> None:
        if self.on_dispatch is not None:
            self.on_dispatch(self.consolidate(), self.page, self.limit)
