from pydantic import BaseModel, Field, conint
from typing import Any, Optional, Union

from .overlay import OverlayForm

RawValue = Union[bool, int, float, str, list[str], None]

class QuickFilterRequest(BaseModel):
    query: str = Field(default="", description="Query string actual de la página")
    control: str = Field(description="listingType | property | bhk | price | clave de filtro")
    value: RawValue = None

class OverlayRequest(BaseModel):
    query: str = ""
    update: dict[str, Any] = Field(default_factory=dict)   # {} = reset del overlay

class PageRequest(BaseModel):
    query: str = ""
    page: conint(ge=1)

class FilterStateResponse(BaseModel):
    url: str                                # URL de la página (replace, no push)
    query: str
    filters: dict[str, Any]                 # estado canónico
    dispatch: dict[str, Any]                # registro consolidado para la API
    api_query: str
    page: int
    limit: int
    selections: dict[str, str] = Field(default_factory=dict)
    overlay: Optional[OverlayForm] = None
