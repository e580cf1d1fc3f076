import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Square Credentials ---
SQUARE_ACCESS_TOKEN = os.getenv("SQUARE_ACCESS_TOKEN")
SQUARE_LOCATION_ID = os.getenv("SQUARE_LOCATION_ID")

# --- Square API ---
SQUARE_VERSION = os.getenv("SQUARE_VERSION", "2024-01-18")
SQUARE_BASE_URL = os.getenv("SQUARE_BASE_URL", "https://connect.squareup.com")
# Unset means no timeout at all, matching the behaviour of a plain fetch.
SQUARE_TIMEOUT = float(os.environ["SQUARE_TIMEOUT"]) if os.getenv("SQUARE_TIMEOUT") else None
CATALOG_PAGE_LIMIT = int(os.getenv("CATALOG_PAGE_LIMIT", "1000"))

# --- Output ---
OUTPUT_FILE = Path(os.getenv("FEED_OUTPUT_FILE", "winesearcher-feed.txt"))
SHOP_SEARCH_BASE = os.getenv(
    "SHOP_SEARCH_BASE", "https://www.magazzinonyc.com/s/shop?query="
)

# --- Logging ---
LOG_DIR = Path(os.getenv("LOG_DIR", BASE_DIR / "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# --- Fixed Feed Labels ---
TAX = os.getenv("FEED_TAX", "Inc.tax")
OFFER_TYPE = os.getenv("FEED_OFFER_TYPE", "R")
DELIVERY_TIME = os.getenv("FEED_DELIVERY_TIME", "Next day")


class ConfigError(RuntimeError):
    """Raised when a required setting is missing."""


class FeedConfig(BaseModel):
    """
    The single configuration value for one export run.
    Built once at startup and passed explicitly to the client and pipeline.
    """

    model_config = ConfigDict(frozen=True)

    access_token: str
    location_id: str
    square_version: str = SQUARE_VERSION
    base_url: str = SQUARE_BASE_URL
    timeout: Optional[float] = SQUARE_TIMEOUT
    page_limit: int = CATALOG_PAGE_LIMIT
    output_file: Path = OUTPUT_FILE
    log_dir: Path = LOG_DIR
    log_level: str = LOG_LEVEL
    shop_search_base: str = SHOP_SEARCH_BASE
    tax: str = TAX
    offer_type: str = OFFER_TYPE
    delivery_time: str = DELIVERY_TIME


def load_config(**overrides) -> FeedConfig:
    """
    Builds the FeedConfig from the environment, applying any non-None overrides
    (e.g. from the command line). Fails fast if either credential is missing.
    """
    values = {
        "access_token": SQUARE_ACCESS_TOKEN,
        "location_id": SQUARE_LOCATION_ID,
        "log_dir": LOG_DIR,
    }
    values.update({key: val for key, val in overrides.items() if val is not None})

    if not values.get("access_token") or not values.get("location_id"):
        raise ConfigError("Missing SQUARE_ACCESS_TOKEN or SQUARE_LOCATION_ID secrets.")

    return FeedConfig(**values)
