import math
import re
from typing import Any

_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def title_case(value: str) -> str:
    # "villa" / "VILLA" -> "Villa"
    if not value:
        return ""
    return value[:1].upper() + value[1:].lower()


def split_csv(value: str) -> list[str]:
    return [s.strip() for s in value.split(",") if s.strip()]


def parse_int(value: Any) -> int | None:
    """Entero con prefijo numérico ("12abc" -> 12); None si no hay número."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    m = _INT_RE.match(str(value))
    return int(m.group(1)) if m else None


def parse_float(value: Any) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        num = float(value)
    else:
        m = _FLOAT_RE.match(str(value))
        if not m:
            return None
        num = float(m.group(1))
    return num if math.isfinite(num) else None


def format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
