import logging

import pandas as pd

from winefeed import data_handler, parsers, utils
from winefeed.pipeline import DataPipeline
from winefeed.schemas import FeedRow, UsableRow
from winefeed.settings import FeedConfig
from winefeed.square_client import SquareClient

logger = logging.getLogger(__name__)


class FeedPipeline(DataPipeline):
    def __init__(self, config: FeedConfig, client: SquareClient | None = None):
        super().__init__("wine-searcher feed", config)
        self.client = client or SquareClient(config)

    def extract(self) -> pd.DataFrame:
        logger.info("--- Fetching Square Catalog ---")
        catalog = self.client.search_item_variations()
        usable = parsers.parse_catalog_response(catalog)

        logger.info("\n--- Fetching Inventory Counts ---")
        inventory = self.client.batch_retrieve_counts(
            [row.variation_id for row in usable], self.config.location_id
        )
        counts_df = parsers.parse_inventory_counts(inventory)

        return self.join_inventory(usable, counts_df)

    @staticmethod
    def join_inventory(usable: list[UsableRow], counts_df: pd.DataFrame) -> pd.DataFrame:
        """
        Left-joins stock counts onto the usable rows by variation id.
        Rows keep their catalog order; uncounted variations get stock "0".
        """
        usable_df = pd.DataFrame(
            [row.model_dump() for row in usable],
            columns=list(UsableRow.model_fields.keys()),
        )
        merged_df = pd.merge(
            usable_df,
            counts_df.astype({"variation_id": object, "stock": object}),
            on="variation_id",
            how="left",
        )
        merged_df["stock"] = merged_df["stock"].fillna("0")
        return merged_df

    def transform(self, df: pd.DataFrame) -> list[FeedRow]:
        logger.info("\n--- Deriving Feed Fields ---")

        rows = []
        for record in df.to_dict("records"):
            name = record["name"]
            rows.append(
                FeedRow(
                    sku=record["sku"],
                    name=name,
                    vintage=utils.guess_vintage(name),
                    unit_size=utils.guess_unit_size(name),
                    price=record["price"],
                    stock=record["stock"],
                    url=utils.build_search_url(self.config.shop_search_base, name),
                    tax=self.config.tax,
                    offer_type=self.config.offer_type,
                    delivery_time=self.config.delivery_time,
                )
            )

        logger.info(f"Validated {len(rows)} feed rows.")
        return rows

    def load(self, validated_data: list[FeedRow]) -> int:
        return data_handler.save_feed(validated_data, self.config.output_file)
