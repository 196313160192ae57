"""Common Pydantic schemas."""

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema that keeps fields Shopify adds after this release."""

    model_config = ConfigDict(
        extra="allow",
    )
