from __future__ import annotations

from typing import Any, Dict, List, Optional

SUPPORTED_LOCALES = ("en", "de")
DEFAULT_LOCALE = "en"

# Text fields stored as ``<field>`` plus an optional German ``<field>_de``.
TRANSLATABLE_FIELDS = (
    "title",
    "travel_type",
    "category",
    "description",
    "long_description",
    "transportation",
    "location",
    "details",
    "description2",
    "days_and_durations",
    "pickup",
    "briefing",
    "trip",
    "program",
    "food_and_beverages",
    "what_to_take",
    "pickup_location",
    "van_location",
)
LOCATION_STOP_FIELDS = tuple(f"location{index}" for index in range(1, 7))


def normalize_locale(value: Optional[str]) -> str:
    locale = (value or "").strip().lower()[:2]
    return locale if locale in SUPPORTED_LOCALES else DEFAULT_LOCALE


def is_german(locale: Optional[str]) -> bool:
    return normalize_locale(locale) == "de"


def resolve_field(en: Any, de: Any, is_german: bool) -> Any:
    """Return the German text when asked for and present, otherwise the English one."""
    if is_german and de:
        return de
    return en


def _filled(items) -> List[str]:
    """Highlights without blank entries; a list of blanks counts as untranslated."""
    return [item for item in items or [] if isinstance(item, str) and item.strip()]


def localize_tour(tour, locale: Optional[str]) -> Dict[str, Any]:
    """
    Build the display copy of ``tour`` for ``locale``.

    Every translatable field falls back to English on its own, so a half
    translated tour still renders complete. Empty location stops are dropped.
    """
    german = is_german(locale)
    display: Dict[str, Any] = {
        field: resolve_field(getattr(tour, field, ""), getattr(tour, f"{field}_de", ""), german)
        for field in TRANSLATABLE_FIELDS
    }
    display["highlights"] = resolve_field(
        _filled(tour.highlights), _filled(tour.highlights_de), german
    )
    stops: List[str] = []
    for field in LOCATION_STOP_FIELDS:
        stop = resolve_field(getattr(tour, field, ""), getattr(tour, f"{field}_de", ""), german)
        if stop:
            stops.append(stop)
    display["locations"] = stops
    return display
