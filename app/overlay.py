import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .errors import UnknownFilterKey
from .filters_catalog import (
    ADVANCED_OWNED_KEYS, AREA_RANGE_DEFAULT, BUDGET_RANGE_DEFAULT, TRANSIENT_KEYS, canonical_key,
)
from .resolver import ABSENT, is_truthy, resolve
from .utils import format_scalar, parse_int, split_csv

logger = logging.getLogger(__name__)


def reconcile(state: Mapping[str, Any], update: Mapping[str, Any]) -> dict[str, Any]:
    """Aplica una actualización del overlay avanzado y devuelve el nuevo estado.

    Un ``update`` vacío es la señal de reset: borra solo las claves del
    overlay (``ADVANCED_OWNED_KEYS``), nunca las de los filtros rápidos.
    """
    new_state = dict(state)

    if len(update) == 0:
        for key in ADVANCED_OWNED_KEYS:
            new_state.pop(key, None)
        logger.info("overlay: reset, quedan %s", sorted(new_state))
        return new_state

    for ui_key, raw in update.items():
        if ui_key in TRANSIENT_KEYS:
            continue
        target = canonical_key(ui_key)
        if target is None:
            raise UnknownFilterKey(ui_key)

        resolved = resolve(ui_key, raw)
        # "limpiar este campo" llega como valor vacío
        if resolved is ABSENT or (isinstance(resolved[1], list) and not resolved[1]):
            logger.debug("overlay: borrando %s", target)
            new_state.pop(target, None)
        else:
            new_state[target] = resolved[1]

    logger.debug("overlay: estado tras merge %s", new_state)
    return new_state


def _text(value: Any) -> str:
    return "" if value is None else format_scalar(value)


def _strings(value: Any) -> list[str]:
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return split_csv(str(value))


class OverlayForm(BaseModel):
    """Estado de edición del overlay avanzado (claves locales de la UI).

    ``area_range`` y ``budget_range`` solo alimentan los sliders: ``to_update``
    nunca los incluye.
    """

    model_config = ConfigDict(populate_by_name=True)

    property_type: list[str] = Field(default_factory=list, alias="propertyType")
    area_range: tuple[int, int] = Field(default=AREA_RANGE_DEFAULT, alias="areaRange")
    budget_range: tuple[int, int] = Field(default=BUDGET_RANGE_DEFAULT, alias="budgetRange")
    min_area: str = Field(default="", alias="minArea")
    max_area: str = Field(default="", alias="maxArea")
    min_budget: str = Field(default="", alias="minBudget")
    max_budget: str = Field(default="", alias="maxBudget")
    ownership: list[str] = Field(default_factory=list)
    posted_by: list[str] = Field(default_factory=list, alias="postedBy")
    facing: list[str] = Field(default_factory=list)
    only_with_photos: bool = Field(default=False, alias="onlyWithPhotos")
    only_with_videos: bool = Field(default=False, alias="onlyWithVideos")
    verified_properties: bool = Field(default=False, alias="verifiedProperties")

    @classmethod
    def from_filters(cls, filters: Mapping[str, Any]) -> "OverlayForm":
        min_area = parse_int(filters.get("minArea"))
        max_area = parse_int(filters.get("maxArea"))
        min_price = parse_int(filters.get("minPrice"))
        max_price = parse_int(filters.get("maxPrice"))
        return cls(
            property_type=_strings(filters.get("propertyType")),
            area_range=(
                AREA_RANGE_DEFAULT[0] if min_area is None else min_area,
                AREA_RANGE_DEFAULT[1] if max_area is None else max_area,
            ),
            budget_range=(
                BUDGET_RANGE_DEFAULT[0] if min_price is None else min_price,
                BUDGET_RANGE_DEFAULT[1] if max_price is None else max_price,
            ),
            min_area=_text(filters.get("minArea")),
            max_area=_text(filters.get("maxArea")),
            min_budget=_text(filters.get("minPrice")),
            max_budget=_text(filters.get("maxPrice")),
            ownership=_strings(filters.get("ownership")),
            posted_by=_strings(filters.get("postedBy")),
            facing=_strings(filters.get("facingDirection")),
            only_with_photos=is_truthy(filters.get("onlyWithPhotos")),
            only_with_videos=is_truthy(filters.get("onlyWithVideos")),
            verified_properties=is_truthy(filters.get("verified")),
        )

    @staticmethod
    def reset_signal() -> dict[str, Any]:
        return {}

    def set_area_range(self, low: int, high: int) -> None:
        self.area_range = (low, high)
        self.min_area, self.max_area = str(low), str(high)

    def set_budget_range(self, low: int, high: int) -> None:
        self.budget_range = (low, high)
        self.min_budget, self.max_budget = str(low), str(high)

    def set_input(self, name: str, value: str) -> None:
        # los inputs de texto arrastran el slider correspondiente
        if name == "minArea":
            self.min_area = value
            self.area_range = (_or(parse_int(value), AREA_RANGE_DEFAULT[0]), self.area_range[1])
        elif name == "maxArea":
            self.max_area = value
            self.area_range = (self.area_range[0], _or(parse_int(value), AREA_RANGE_DEFAULT[1]))
        elif name == "minBudget":
            self.min_budget = value
            self.budget_range = (_or(parse_int(value), BUDGET_RANGE_DEFAULT[0]), self.budget_range[1])
        elif name == "maxBudget":
            self.max_budget = value
            self.budget_range = (self.budget_range[0], _or(parse_int(value), BUDGET_RANGE_DEFAULT[1]))
        else:
            raise UnknownFilterKey(name)

    def toggle_option(self, name: str, option: str) -> None:
        field_name = {
            "propertyType": "property_type",
            "ownership": "ownership",
            "postedBy": "posted_by",
            "facing": "facing",
        }.get(name)
        if field_name is None:
            raise UnknownFilterKey(name)
        current: list[str] = getattr(self, field_name)
        if option in current:
            setattr(self, field_name, [o for o in current if o != option])
        else:
            setattr(self, field_name, [*current, option])

    def to_update(self) -> dict[str, Any]:
        return {
            "propertyType": list(self.property_type),
            "ownership": list(self.ownership),
            "postedBy": list(self.posted_by),
            "facing": list(self.facing),
            "minArea": self.min_area,
            "maxArea": self.max_area,
            "minBudget": self.min_budget,
            "maxBudget": self.max_budget,
            "onlyWithPhotos": self.only_with_photos,
            "onlyWithVideos": self.only_with_videos,
            "verifiedProperties": self.verified_properties,
        }


def _or(value: int | None, default: int) -> int:
    return default if value is None else value
