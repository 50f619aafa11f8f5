"""Global configuration constants for the study site generator.

Defines paths, supported locales, rendering constants and style tables used
across the content store, the website generator pipeline and the CLI.
"""

from __future__ import annotations

from pathlib import Path

# Project directories
PACKAGE_DIR: Path = Path(__file__).resolve().parent
PROJECT_ROOT: Path = PACKAGE_DIR.parent
LOG_DIR: Path = PROJECT_ROOT / "logs"

# Content and templates (shipped inside the package)
LOCALES_DIR: Path = PACKAGE_DIR / "locales"
TEMPLATES_DIR: Path = PACKAGE_DIR / "templates"
PAGE_TEMPLATE_PATH: Path = TEMPLATES_DIR / "page_template.html"
REDIRECT_TEMPLATE_PATH: Path = TEMPLATES_DIR / "redirect_template.html"

# Output
DEFAULT_OUTPUT_DIR: Path = PROJECT_ROOT / "output"
OUTPUT_INDEX_FILENAME: str = "index.html"

# Locales
DEFAULT_LOCALE: str = "en"
SUPPORTED_LOCALES: tuple[str, ...] = ("en", "th")
LANGUAGE_CLASS_DEFAULT: str = "lang-en"
LANGUAGE_CLASS_THAI: str = "lang-th"
THAI_LOCALE_PREFIX: str = "th"

# Performance chart
PERFORMANCE_REFERENCE_SCALE: float = 3
PERFORMANCE_BAR_FILL_OFFSET_MS: int = 200
PERFORMANCE_BAR_FILL_DURATION_MS: int = 1000
PERFORMANCE_BAR_STEP_MS: int = 100

# Stats grid: (icon, literal value, label key) in display order
STAT_CARDS: tuple[tuple[str, str, str], ...] = (
    ("beaker", "7", "models"),
    ("user-group", "5", "volunteers"),
    ("chart-bar", "8.26%", "accuracy"),
    ("shield-check", "17", "duration"),
)
STAT_CARD_BASE_DELAY_MS: int = 500
STAT_CARD_STEP_MS: int = 100
STAT_CARD_DURATION_MS: int = 500

# Insight cards
INSIGHT_CARD_BASE_DELAY_MS: int = 200
INSIGHT_CARD_STEP_MS: int = 100
INSIGHT_CARD_DURATION_MS: int = 400

# Status badge styles
BADGE_STYLE_POSITIVE: str = "bg-green-100 text-green-700 ring-1 ring-green-600/20"
BADGE_STYLE_NEGATIVE: str = "bg-red-50 text-red-600 ring-1 ring-red-600/20"
BADGE_STYLE_NEUTRAL: str = "bg-slate-100 text-slate-600"

# Translated status strings recognised when a record carries no statusCode
STATUS_VOCABULARY: dict[str, str] = {
    "Winner": "winner",
    "ชนะเลิศ": "winner",
    "Failed": "failed",
    "ล้มเหลว": "failed",
}

# Insight card colours
INSIGHT_STYLES: dict[str, str] = {
    "blue": "border-l-sky-500 bg-sky-50/50",
    "red": "border-l-rose-500 bg-rose-50/50",
    "amber": "border-l-amber-500 bg-amber-50/50",
}
DEFAULT_INSIGHT_STYLE: str = "border-l-slate-400 bg-slate-50/50"

# Researcher profile image
PROFILE_IMAGE_URL: str = "https://chawin.hansasuta.com/assets/Chawin_image-og7OhW3Z.svg"
PROFILE_IMAGE_NAME: str = "Chawin H"
FALLBACK_AVATAR_URL_FORMAT: str = (
    "https://ui-avatars.com/api/?name={name}&background=random"
)
ASSET_PROBE_TIMEOUT_SECONDS: float = 5.0

# Rendering fallbacks
MISSING_SECTION_HTML_FORMAT: str = (
    '<section data-section="{section}" data-content-missing="true"></section>'
)

# CLI defaults and logging
LOG_FILENAME_BUILD_SITE: str = "build_site.log"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
