import math
import re
from typing import Any
from urllib.parse import quote

VINTAGE_PATTERN = re.compile(r"\b(?:18|19|20)\d{2}\b", re.ASCII)

# Checked top to bottom, first hit wins.
UNIT_SIZE_RULES = [
    (("magnum", "1.5l", "1500"), "1.5L Magnum"),
    (("375",), "375ml"),
    (("500",), "500ml"),
    (("1l", "1000"), "1L"),
    (("3l",), "3L"),
]
DEFAULT_UNIT_SIZE = "750ml"
NON_VINTAGE = "NV"

# Characters encodeURIComponent leaves alone on top of letters and digits.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def guess_vintage(name: str) -> str:
    """Returns the first 1800-2099 year found in the name, or 'NV'."""
    match = VINTAGE_PATTERN.search(name)
    return match.group(0) if match else NON_VINTAGE


def guess_unit_size(name: str) -> str:
    """Infers the bottle size from naming cues, defaulting to a standard 750ml."""
    lowered = name.lower()
    for cues, label in UNIT_SIZE_RULES:
        if any(cue in lowered for cue in cues):
            return label
    return DEFAULT_UNIT_SIZE


def cents_to_dollars(cents: Any) -> str:
    """
    Converts a minor-unit amount (e.g. 4599) to a two-decimal string ('45.99').
    Missing or non-numeric amounts are treated as zero.
    """
    try:
        amount = float(cents or 0)
    except (TypeError, ValueError):
        amount = 0.0
    if not math.isfinite(amount):
        amount = 0.0
    return f"{amount / 100:.2f}"


def to_stock_count(quantity: Any) -> str:
    """Coerces an inventory quantity (Square sends decimal strings) to a non-negative integer string."""
    try:
        value = float(quantity or 0)
    except (TypeError, ValueError):
        return "0"
    if not math.isfinite(value) or value < 0:
        return "0"
    return str(int(value))


def encode_query(query: str) -> str:
    """Percent-encodes a search term the way a browser's encodeURIComponent does."""
    return quote(query, safe=_URI_COMPONENT_SAFE)


def build_search_url(base: str, name: str) -> str:
    return f"{base}{encode_query(name)}"
