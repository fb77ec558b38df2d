import logging
from typing import Any

from .filters_catalog import canonical_key, kind_of
from .utils import parse_float, parse_int, split_csv, title_case

logger = logging.getLogger(__name__)

# Única señal de error del resolver: "descartar esta clave".
ABSENT = None

Resolved = tuple[str, Any]


def is_truthy(value: Any) -> bool:
    """True solo para ``True`` o el string "true" (sin importar mayúsculas)."""
    return value is True or str(value).lower() == "true"


def _as_list(key: str, raw: Any) -> list[str]:
    if isinstance(raw, (list, tuple, set, frozenset)):
        items: list[str] = []
        for item in raw:
            if item is None:
                continue
            items.extend(split_csv(str(item)))
    else:
        items = split_csv(str(raw))
    if key == "propertyType":
        items = [title_case(i) for i in items]
    out: list[str] = []
    for i in items:
        if i not in out:
            out.append(i)
    return out


def _as_str(raw: Any) -> str:
    if isinstance(raw, (list, tuple)):
        return ",".join(s for s in (str(x).strip() for x in raw if x is not None) if s)
    return str(raw).strip()


def resolve(ui_key: str, raw_value: Any) -> Resolved | None:
    """Traduce (clave de UI, valor crudo) a (clave canónica, valor tipado).

    Devuelve ``ABSENT`` cuando la clave no existe o el valor no se puede
    convertir; nunca un 0 o False por defecto.
    """
    key = canonical_key(ui_key)
    if key is None:
        logger.debug("resolve: clave desconocida %r descartada", ui_key)
        return ABSENT
    if raw_value is None:
        return ABSENT

    kind = kind_of(key)
    if kind == "bool":
        return key, is_truthy(raw_value)

    if kind in ("int", "float"):
        num = parse_int(raw_value) if kind == "int" else parse_float(raw_value)
        if num is None:
            logger.debug("resolve: %s=%r no es numérico", key, raw_value)
            return ABSENT
        return key, num

    if kind == "list":
        items = _as_list(key, raw_value)
        return (key, items) if items else ABSENT

    value = _as_str(raw_value)
    if not value:
        return ABSENT
    return key, value
