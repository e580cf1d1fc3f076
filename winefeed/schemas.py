from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UsableRow(BaseModel):
    """A catalog variation that carries a SKU and can be exported."""

    sku: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    variation_id: str
    price: str = Field(..., pattern=r"^-?\d+\.\d{2}$")
    image_url: Optional[str] = None


class FeedRow(BaseModel):
    """
    Defines the data contract for a single line of the Wine-Searcher feed.
    Field order is the column order, and the aliases are the header names.
    """

    # This config lets us build rows by field name while the header uses the aliases.
    model_config = ConfigDict(populate_by_name=True)

    sku: str = Field(..., min_length=1, alias="SKU")
    name: str = Field(..., min_length=1, alias="name")
    description: str = Field(default="", alias="description")
    vintage: str = Field(..., pattern=r"^(NV|\d{4})$", alias="vintage")
    unit_size: str = Field(..., alias="unit-size")
    price: str = Field(..., alias="price")
    stock: str = Field(default="0", pattern=r"^\d+$", alias="stock")
    url: str = Field(..., alias="url")
    min_order: str = Field(default="", alias="min-order")
    tax: str = Field(..., alias="tax")
    offer_type: str = Field(..., alias="offer-type")
    delivery_time: str = Field(..., alias="delivery-time")
    lwin: str = Field(default="", alias="LWIN")
    image_url: str = Field(default="", alias="imageurl")


FEED_COLUMNS = [field.alias or name for name, field in FeedRow.model_fields.items()]
FEED_HEADER = "|".join(FEED_COLUMNS)
