import logging
from collections.abc import Mapping
from typing import Any

from .errors import InvalidQuickSelection
from .filters_catalog import ANY_OPTION, BHK_OPTIONS, LISTING_TYPES, PRICE_PRESETS
from .store import FilterStateStore

logger = logging.getLogger(__name__)


def _option(control: str, value: Any) -> str | None:
    # los selects solo envían escalares; None = "cualquiera"
    if isinstance(value, (list, tuple, dict, set)):
        raise InvalidQuickSelection(f"{control} inválido: {value!r}")
    if value is None or value == "" or value == ANY_OPTION:
        return None
    return str(value).strip()


def apply_quick_selection(store: FilterStateStore, control: str, value: Any) -> None:
    """Traduce un cambio de la barra de filtros rápidos a escrituras en el store.

    Controles: ``listingType``, ``property``, ``bhk``, ``price``; cualquier otro
    nombre se escribe tal cual con ``set_one``.
    """
    if control == "listingType":
        option = _option(control, value)
        if option is not None and option not in LISTING_TYPES:
            raise InvalidQuickSelection(f"listingType inválido: {value!r}")
        store.set_one("listingType", option)

    elif control == "property":
        store.set_one("property", _option(control, value))

    elif control == "bhk":
        option = _option(control, value)
        if option is None:
            store.set_one("bedrooms", None)
        elif option in BHK_OPTIONS:
            store.set_one("bedrooms", option.rstrip("+"))
        else:
            raise InvalidQuickSelection(f"bhk inválido: {value!r}")

    elif control == "price":
        option = _option(control, value)
        if option is None:
            store.set_many({"minPrice": None, "maxPrice": None})
        elif option in PRICE_PRESETS:
            low, high = PRICE_PRESETS[option]
            store.set_many({"minPrice": low, "maxPrice": high})
        else:
            raise InvalidQuickSelection(f"rango de precio inválido: {value!r}")

    else:
        store.set_one(control, value)

    logger.debug("quick %s=%r -> %s", control, value, store.filters)


def _property_select(value: Any) -> str:
    # el select es de valor único: solo se muestra una lista de un elemento
    if isinstance(value, (list, tuple)):
        return str(value[0]) if len(value) == 1 else ANY_OPTION
    return str(value) if value else ANY_OPTION


def _bhk_select(bedrooms: Any) -> str:
    if bedrooms is None:
        return ANY_OPTION
    if bedrooms >= 4:
        return "4+"
    return str(bedrooms)


def _price_select(min_price: Any, max_price: Any) -> str:
    for option, (low, high) in PRICE_PRESETS.items():
        if min_price == low and max_price == high:
            return option
    return ANY_OPTION


def selection_values(filters: Mapping[str, Any]) -> dict[str, str]:
    return {
        "listingType": filters.get("listingType") or ANY_OPTION,
        "property": _property_select(filters.get("propertyType")),
        "bhk": _bhk_select(filters.get("bedrooms")),
        "price": _price_select(filters.get("minPrice"), filters.get("maxPrice")),
    }
