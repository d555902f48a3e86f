from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="BINDERPAGES_")

    app_name: str = "BinderPages"
    debug: bool = False

    log_level: str = "INFO"

    cors_allow_origins: list[str] = ["*"]


settings = Settings()


# =============================================================================
# PAPER GEOMETRY (inches)
# =============================================================================

# US Letter
PAPER_WIDTH_IN = 8.5
PAPER_HEIGHT_IN = 11.0

# Added to the printable box so browsers don't open a sub-pixel seam
# between the last column/row and the page edge
SEAM_EPSILON_IN = 0.001


# =============================================================================
# LAYOUT DEFAULTS AND LIMITS
# =============================================================================

DEFAULT_MARGIN_IN = 0.16

MIN_GRID_SIZE = 1
MAX_GRID_SIZE = 8
DEFAULT_GRID_SIZE = 4

DEFAULT_RARITY_COUNT = 1

# Rarity key used for cards whose record carries no rarity
UNKNOWN_RARITY = "unknown"

DEFAULT_RARITY_COUNTS: dict[str, int] = {
    "mythic": 1,
    "rare": 1,
    "uncommon": 1,
    "common": 1,
}


# =============================================================================
# PRINT SHEET
# =============================================================================

RARITY_LABELS: dict[str, str] = {
    "mythic": "M",
    "rare": "R",
    "uncommon": "U",
    "common": "C",
    "special": "S",
    "bonus": "B",
    "promo": "P",
    "token": "T",
    "land": "L",
}
