from decimal import Decimal
from typing import List, NamedTuple, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel

ProductId = Union[int, str]


def _float_through_str(value):
    # Floats go through str so 19.99 stays 19.99; bad values fail Decimal validation
    return str(value) if isinstance(value, float) else value


# Structural identity of a cart line; two adds with equal identity merge
class LineIdentity(NamedTuple):
    product_id: ProductId
    size: Optional[str] = None
    color: Optional[str] = None


# Camel-case keys on the wire and in the persisted payload
class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Product data as the catalog hands it to "add to cart"
class ProductSnapshot(BaseModel):
    id: ProductId
    name: str
    price: Decimal
    images: List[str] = []
    image: Optional[str] = None
    stock: Optional[int] = None

    @field_validator("price", mode="before")
    @classmethod
    def _price_from_float(cls, value):
        return _float_through_str(value)

    @property
    def image_ref(self) -> Optional[str]:
        return self.images[0] if self.images else self.image


# One distinct purchasable configuration in the cart
class CartLine(CamelModel):
    line_id: str
    product_id: ProductId
    name: str
    unit_price: Decimal  # Price snapshot at add time
    image_ref: Optional[str] = None
    size: Optional[str] = None
    color: Optional[str] = None
    quantity: int = Field(ge=1)
    max_quantity: Optional[int] = None  # Advisory only, never enforced

    @field_validator("unit_price", mode="before")
    @classmethod
    def _unit_price_from_float(cls, value):
        return _float_through_str(value)

    @property
    def identity(self) -> LineIdentity:
        return LineIdentity(self.product_id, self.size, self.color)

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


CartPayload = TypeAdapter(List[CartLine])


# Request schema for adding a product to the cart
class CartAddItem(CamelModel):
    product: ProductSnapshot
    quantity: int = 1
    size: Optional[str] = None
    color: Optional[str] = None


# Request schema for changing a line quantity; 0 or less removes the line
class CartUpdateItem(CamelModel):
    quantity: int


# Response schema for the whole cart
class CartOut(CamelModel):
    items: List[CartLine]
    item_count: int
    total: Decimal
