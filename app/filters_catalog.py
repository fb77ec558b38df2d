# Catálogo cerrado de claves de filtro, alias de la UI y presets.

from typing import Literal

FilterKind = Literal["bool", "int", "float", "list", "str"]

FILTER_KINDS: dict[str, FilterKind] = {
    # Principales
    "listingType": "str",
    "propertyType": "list",
    "city": "str",
    "search": "str",
    # Dormitorios / baños
    "bedrooms": "int",
    "bathrooms": "int",
    # Precio y superficie
    "minPrice": "float",
    "maxPrice": "float",
    "minArea": "float",
    "maxArea": "float",
    # Otros
    "ownership": "list",
    "postedBy": "list",
    "amenities": "list",
    "furnishingDetails": "list",
    "facingDirection": "str",
    "transactionType": "str",
    "status": "str",
    "onlyWithPhotos": "bool",
    "onlyWithVideos": "bool",
    "verified": "bool",
    "featured": "bool",
    "heatingAvailable": "bool",
    # Orden
    "sortBy": "str",
    "sortDir": "str",
}

PAGINATION_KEYS = ("page", "limit")

# alias de la UI -> clave canónica
UI_ALIASES: dict[str, str] = {
    "minBudget": "minPrice",
    "maxBudget": "maxPrice",
    "withPhotos": "onlyWithPhotos",
    "withVideos": "onlyWithVideos",
    "verifiedProperties": "verified",
    "facing": "facingDirection",
    "ownershipType": "ownership",
    "property": "propertyType",
}

# Solo para los sliders del overlay; nunca llegan al estado ni a la URL.
TRANSIENT_KEYS = frozenset({"areaRange", "budgetRange"})

# Claves que el overlay avanzado puede borrar con la señal de reset.
ADVANCED_OWNED_KEYS = (
    "propertyType",
    "minArea",
    "maxArea",
    "minPrice",
    "maxPrice",
    "ownership",
    "postedBy",
    "facingDirection",
    "onlyWithPhotos",
    "onlyWithVideos",
    "verified",
    "amenities",
    "furnishingDetails",
    "heatingAvailable",
    "transactionType",
    "status",
)

# Excepciones de la consolidación
KEEP_WHEN_FALSE = frozenset({"featured"})
KEEP_WHEN_ZERO = frozenset({"bedrooms", "bathrooms"})

LISTING_TYPES = ("buy", "rent", "sell", "commercial", "pg")

# preset del select de precio -> (minPrice, maxPrice)
PRICE_PRESETS: dict[str, tuple[float, float]] = {
    "10L-20L": (1_000_000, 2_000_000),
    "20L-50L": (2_000_000, 5_000_000),
    "50L-1Cr": (5_000_000, 10_000_000),
    "1Cr+": (10_000_000, 100_000_000),
}

BHK_OPTIONS = ("1", "2", "3", "4+")

ANY_OPTION = "all"

AREA_RANGE_DEFAULT = (0, 5000)
BUDGET_RANGE_DEFAULT = (0, 10_000_000)


def canonical_key(key: str) -> str | None:
    """Clave canónica para ``key`` (canónica o alias), o None si no existe."""
    if key in FILTER_KINDS:
        return key
    return UI_ALIASES.get(key)


def kind_of(key: str) -> FilterKind | None:
    return FILTER_KINDS.get(key)
