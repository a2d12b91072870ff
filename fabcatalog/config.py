from pathlib import Path
from types import MappingProxyType

from pydantic_settings import BaseSettings, SettingsConfigDict

from fabcatalog.models.locale import Locale


class Settings(BaseSettings):
    """Catalog generation settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="FABCATALOG_")

    # Branch or tag of the card dataset repository
    branch: str = "develop"

    # Refresh the local cache before generating; False runs offline
    update: bool = True

    locales: list[str] = ["en"]

    cards_dir: Path = Path("cards")
    output_path: Path = Path("cards.csv")

    # Seconds; applies to connect and read of the dataset download
    fetch_timeout: float = 30.0

    user_agent: str = "fabcatalog/1.0"


settings = Settings()


# =============================================================================
# DATASET SOURCES
# =============================================================================

# Locale code -> dataset URL template; {branch} is substituted per run.
# Translated datasets only cover part of the card pool and translate keywords,
# so only English is registered.
LOCALE_URL_TEMPLATES = MappingProxyType(
    {
        "en": (
            "https://raw.githubusercontent.com/the-fab-cube/flesh-and-blood-cards/"
            "{branch}/json/english/card-flattened.json"
        ),
    }
)


def cache_path(locale_code: str, cards_dir: Path) -> Path:
    """Local cache file for a locale's dataset: <cards_dir>/<code>.json."""
    return cards_dir / f"{locale_code}.json"


def get_locale(code: str) -> Locale:
    """
    Look up a registered dataset locale.

    Raises:
        ValueError: If no dataset is registered for the code
    """
    try:
        template = LOCALE_URL_TEMPLATES[code]
    except KeyError:
        raise ValueError(
            f"Unknown locale: {code}. Must be one of: {sorted(LOCALE_URL_TEMPLATES)}"
        ) from None
    return Locale(code=code, url_template=template)
