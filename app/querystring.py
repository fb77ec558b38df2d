import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import parse_qsl, urlencode

from .filters_catalog import PAGINATION_KEYS, TRANSIENT_KEYS
from .resolver import ABSENT, resolve
from .settings import settings
from .utils import format_scalar, parse_int

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1


@dataclass(frozen=True)
class DecodedQuery:
    filters: dict[str, Any]
    page: int
    limit: int


def _encode_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(format_scalar(v) for v in value)
    return format_scalar(value)


def encode(state: Mapping[str, Any], page: int = DEFAULT_PAGE, limit: int | None = None) -> str:
    """Serializa el estado canónico a query string; page y limit siempre al final."""
    if limit is None:
        limit = settings.DEFAULT_PAGE_LIMIT
    pairs: list[tuple[str, str]] = []
    for key, value in state.items():
        if key in TRANSIENT_KEYS or key in PAGINATION_KEYS:
            continue
        if value is None or value == "":
            continue
        if isinstance(value, (list, tuple)) and len(value) == 0:
            continue
        pairs.append((key, _encode_value(value)))
    pairs.append(("page", str(page)))
    pairs.append(("limit", str(limit)))
    # las comas de los arrays van sin escapar
    return urlencode(pairs, safe=",")


def _positive_int(raw: str, default: int) -> int:
    num = parse_int(raw)
    if num is None or num < 1:
        return default
    return num


def decode(query: str, default_limit: int | None = None) -> DecodedQuery:
    """Parser tolerante: lo que no se puede convertir se descarta sin error."""
    if default_limit is None:
        default_limit = settings.DEFAULT_PAGE_LIMIT
    filters: dict[str, Any] = {}
    page, limit = DEFAULT_PAGE, default_limit

    for key, raw in parse_qsl((query or "").lstrip("?"), keep_blank_values=True):
        if key == "page":
            page = _positive_int(raw, DEFAULT_PAGE)
            continue
        if key == "limit":
            limit = _positive_int(raw, default_limit)
            continue

        resolved = resolve(key, raw)
        if resolved is ABSENT:
            logger.debug("decode: %s=%r descartado", key, raw)
            continue
        target, value = resolved

        if target == "propertyType" and target in filters:
            merged = list(filters[target])
            merged.extend(v for v in value if v not in merged)
            filters[target] = merged
        else:
            filters[target] = value

    return DecodedQuery(filters=filters, page=page, limit=limit)


def build_listing_url(state: Mapping[str, Any], page: int = DEFAULT_PAGE, limit: int | None = None) -> str:
    return f"{settings.LISTINGS_PATH}?{encode(state, page, limit)}"


def build_api_query(dispatch: Mapping[str, Any], page: int = DEFAULT_PAGE, limit: int | None = None) -> str:
    url = f"{settings.API_PATH}?{encode(dispatch, page, limit)}"
    logger.debug("API query: %s", url)
    return url
