"""Data models for the product catalog."""

from pydantic import BaseModel, ConfigDict, Field

from ..prompts import Subject


class Product(BaseModel):
    """A product page with its technical specifications."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Catalog identifier")
    name: str
    current_price: float = Field(ge=0)
    original_price: float = Field(ge=0)
    discount: int = Field(default=0, ge=0, le=100, description="Discount percentage")
    rating: float = Field(default=0.0, ge=0, le=5)
    reviews: int = Field(default=0, ge=0, description="Number of reviews")
    image: str | None = None
    specs: tuple[Subject, ...] = ()


class DemoConfig(BaseModel):
    """Settings for one storefront chat demo."""

    model_config = ConfigDict(frozen=True)

    title: str
    theme_color: str = Field(description="Hex colour used for headings")
    greeting: str = Field(description="Initial bot message for an empty conversation")
    product: str = Field(description="Key of the product whose specs the demo explains")
