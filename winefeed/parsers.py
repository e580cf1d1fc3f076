import logging
from typing import Any

import pandas as pd

from .schemas import UsableRow
from .utils import cents_to_dollars, to_stock_count

logger = logging.getLogger(__name__)

INVENTORY_COLUMNS = ["variation_id", "stock"]


def build_item_name_map(related_objects: list[dict[str, Any]]) -> dict[str, str]:
    """Maps ITEM id -> item display name. Other related object kinds are ignored."""
    names = {}
    for obj in related_objects:
        if obj.get("type") == "ITEM":
            names[obj.get("id")] = (obj.get("item_data") or {}).get("name") or ""
    return names


def compose_name(item_name: str, variation_name: str) -> str:
    """
    Appends the variation name to the item name when it adds information.
    Square's default variation is called 'Regular', which is dropped.
    """
    if variation_name and variation_name.lower() != "regular":
        return f"{item_name} {variation_name}".strip()
    return item_name.strip()


def parse_catalog_response(catalog: dict[str, Any]) -> list[UsableRow]:
    """
    Joins item variations with their parent item names and keeps only the
    variations that have a SKU. Output order follows the input variation order.
    """
    variations = catalog.get("objects") or []
    item_names = build_item_name_map(catalog.get("related_objects") or [])

    usable = []
    skipped = 0
    for variation in variations:
        data = variation.get("item_variation_data") or {}
        sku = str(data.get("sku") or "")
        if not sku:
            skipped += 1
            continue

        item_name = item_names.get(data.get("item_id")) or ""
        full_name = compose_name(item_name, data.get("name") or "")

        usable.append(
            UsableRow(
                sku=sku,
                name=full_name or sku,
                variation_id=variation.get("id") or "",
                price=cents_to_dollars((data.get("price_money") or {}).get("amount")),
                image_url=None,
            )
        )

    logger.info(
        f"  > Catalog: {len(variations)} variations, {len(usable)} usable, {skipped} without SKU."
    )
    return usable


def parse_inventory_counts(inventory: dict[str, Any]) -> pd.DataFrame:
    """
    Turns a batch-retrieve-counts response into a (variation_id, stock) frame.
    When a variation is counted more than once, the last count wins.
    """
    counts = inventory.get("counts") or []
    rows = [
        {
            "variation_id": count.get("catalog_object_id"),
            "stock": to_stock_count(count.get("quantity")),
        }
        for count in counts
    ]
    if not rows:
        logger.info("  > Inventory: no counts returned.")
        return pd.DataFrame(columns=INVENTORY_COLUMNS, dtype=str)

    df = pd.DataFrame(rows, columns=INVENTORY_COLUMNS)
    df = df.drop_duplicates(subset="variation_id", keep="last").reset_index(drop=True)
    logger.info(f"  > Inventory: {len(df)} variations counted.")
    return df
