import logging
from collections.abc import Mapping
from typing import Any

from .filters_catalog import KEEP_WHEN_FALSE, KEEP_WHEN_ZERO, TRANSIENT_KEYS

logger = logging.getLogger(__name__)


def consolidate(state: Mapping[str, Any]) -> dict[str, Any]:
    """Limpia el estado canónico para enviarlo a la API de búsqueda.

    No modifica ``state``. ``featured=False`` se conserva (la API distingue
    "sin preferencia" de "no destacado"); ``bedrooms``/``bathrooms`` en 0
    también (monoambiente). Cualquier otro False o 0 se descarta.
    """
    out: dict[str, Any] = {}
    for key, value in state.items():
        if value is None or value == "":
            continue
        if isinstance(value, (list, tuple)) and len(value) == 0:
            continue
        if key in TRANSIENT_KEYS:
            continue
        if value is False and key not in KEEP_WHEN_FALSE:
            continue
        if (
            isinstance(value, (int, float))
            and not isinstance(value, bool)
            and value == 0
            and key not in KEEP_WHEN_ZERO
        ):
            continue
        out[key] = list(value) if isinstance(value, (list, tuple)) else value
    logger.debug("consolidate -> %s", out)
    return out
