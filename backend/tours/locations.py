"""Landing page configuration for tour locations and categories."""
from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional

from .localization import is_german, resolve_field


@dataclass(frozen=True)
class LandingPage:
    slug: str
    name: str
    name_de: str = ""
    seo_title: str = ""
    seo_description: str = ""
    intro: str = ""
    intro_de: str = ""

    def names(self) -> List[str]:
        return [value for value in (self.slug, self.name, self.name_de) if value]

    def localized(self, locale: Optional[str]) -> Dict[str, str]:
        german = is_german(locale)
        data = asdict(self)
        data["display_name"] = resolve_field(self.name, self.name_de, german)
        data["display_intro"] = resolve_field(self.intro, self.intro_de, german)
        return data


LOCATIONS = (
    LandingPage(
        slug="cairo",
        name="Cairo",
        name_de="Kairo",
        seo_title="Cairo Tours & Day Trips | Sphinx Reisen",
        seo_description=(
            "Discover Cairo tours, pyramids, and cultural experiences. "
            "Book day trips and multi-day tours from Cairo with Sphinx Reisen."
        ),
        intro=(
            "Explore the heart of Egypt with our curated Cairo tours, "
            "from the Pyramids of Giza to the Egyptian Museum."
        ),
        intro_de=(
            "Entdecken Sie das Herz Ägyptens mit unseren Kairo-Touren, "
            "von den Pyramiden von Gizeh bis zum Ägyptischen Museum."
        ),
    ),
    LandingPage(
        slug="giza",
        name="Giza",
        name_de="Gizeh",
        seo_title="Giza Pyramids Tours | Sphinx Reisen",
        seo_description=(
            "Book Giza Pyramids tours and Sphinx visits. Half-day and full-day trips "
            "from Cairo. Best prices and expert guides."
        ),
        intro=(
            "Stand at the feet of the Great Pyramids and the Sphinx. "
            "Our Giza tours include skip-the-line access and expert guides."
        ),
        intro_de=(
            "Erleben Sie die Großen Pyramiden und die Sphinx. "
            "Unsere Gizeh-Touren beinhalten Eintritt und erfahrene Reiseleiter."
        ),
    ),
    LandingPage(
        slug="luxor",
        name="Luxor",
        name_de="Luxor",
        seo_title="Luxor Tours & Nile Cruises | Sphinx Reisen",
        seo_description=(
            "Luxor tours, Valley of the Kings, Karnak Temple, and Nile cruises. "
            "Multi-day packages from Cairo or Hurghada."
        ),
        intro=(
            "From the Valley of the Kings to Karnak Temple, discover ancient Thebes "
            "with our Luxor tours and Nile experiences."
        ),
        intro_de=(
            "Vom Tal der Könige bis zum Tempel von Karnak: entdecken Sie das antike "
            "Theben mit unseren Luxor-Touren."
        ),
    ),
    LandingPage(
        slug="hurghada",
        name="Hurghada",
        name_de="Hurghada",
        seo_title="Hurghada Tours & Red Sea Excursions | Sphinx Reisen",
        seo_description=(
            "Tours from Hurghada: Luxor, Cairo, desert safaris, and Red Sea activities. "
            "Day trips and multi-day packages."
        ),
        intro=(
            "Base yourself in Hurghada and explore Luxor, Cairo, or the Eastern Desert. "
            "Beach and culture combined."
        ),
        intro_de="Von Hurghada aus Luxor, Kairo oder die Wüste entdecken. Strand und Kultur in einem.",
    ),
    LandingPage(
        slug="alexandria",
        name="Alexandria",
        name_de="Alexandria",
        seo_title="Alexandria Day Tours from Cairo | Sphinx Reisen",
        seo_description=(
            "Alexandria day trips from Cairo. Visit the Library, Citadel, and "
            "Mediterranean coast. One-day tours with pickup."
        ),
        intro="Discover Alexandria's Greco-Roman heritage and Mediterranean charm on a day tour from Cairo.",
        intro_de=(
            "Entdecken Sie Alexandrias griechisch-römisches Erbe und die Mittelmeerküste "
            "bei einer Tagestour ab Kairo."
        ),
    ),
)

CATEGORIES = (
    LandingPage(
        slug="desert-safari",
        name="Desert Safari",
        name_de="Wüstensafari",
        seo_title="Desert Safari Tours in Egypt | Sphinx Reisen",
        seo_description=(
            "Book desert safari tours from Cairo, Hurghada, and Luxor. "
            "Quad biking, camel rides, and Bedouin experiences."
        ),
        intro=(
            "Experience the Egyptian desert with our safari tours: quad biking, "
            "camel rides, and traditional Bedouin evenings."
        ),
        intro_de="Erleben Sie die ägyptische Wüste: Quad fahren, Kamelritte und beduinische Abende.",
    ),
    LandingPage(
        slug="cultural",
        name="Cultural Tours",
        name_de="Kulturreisen",
        seo_title="Cultural Tours in Egypt | Sphinx Reisen",
        seo_description=(
            "Cultural and historical tours: pyramids, temples, museums. "
            "Expert guides and small groups."
        ),
        intro=(
            "Dive into ancient and modern Egypt with our cultural tours to temples, "
            "museums, and historic sites."
        ),
        intro_de=(
            "Tauchen Sie ein in das alte und moderne Ägypten mit unseren Kulturreisen "
            "zu Tempeln und Museen."
        ),
    ),
    LandingPage(
        slug="nile-cruise",
        name="Nile Cruise",
        name_de="Nilkreuzfahrt",
        seo_title="Nile Cruise Tours | Luxor to Aswan | Sphinx Reisen",
        seo_description=(
            "Nile cruise packages from Luxor to Aswan. "
            "Multi-day cruises with temple visits and onboard comfort."
        ),
        intro="Sail the Nile from Luxor to Aswan with temple stops and full-board accommodation.",
        intro_de="Segeln Sie von Luxor nach Assuan mit Tempelstopps und Vollpension an Bord.",
    ),
)


def category_to_slug(category: str) -> str:
    """``"Desert Safari"`` -> ``"desert-safari"``."""
    slug = re.sub(r"\s+", "-", (category or "").strip().lower())
    return re.sub(r"[^a-z0-9-]", "", slug)


def category_page_slug(category: str) -> str:
    """
    Slug of the landing page a tour category belongs to.

    A configured page claims every category matching its slug or one of its names,
    so "Cultural Tours" and "Kulturreisen" both land on ``cultural``.
    """
    slug = category_to_slug(category)
    for page in CATEGORIES:
        if slug in {category_to_slug(name) for name in page.names()}:
            return page.slug
    return slug


def _find(pages, slug: str) -> Optional[LandingPage]:
    slug = (slug or "").strip().lower()
    return next((page for page in pages if page.slug == slug), None)


def get_location_by_slug(slug: str) -> Optional[LandingPage]:
    return _find(LOCATIONS, slug)


def get_category_by_slug(slug: str) -> Optional[LandingPage]:
    return _find(CATEGORIES, slug)
