"""Product DTO used to shape request items after presence checks."""

from typing import Annotated

from pydantic import BaseModel, Field, StrictStr, StringConstraints

from ...domain.entities import Product

VariationId = Annotated[StrictStr, StringConstraints(min_length=1)]


class ProductDTO(BaseModel):
    """DTO for a product item in the request body."""

    id: StrictStr = Field(..., min_length=1)
    slug: StrictStr = Field(..., min_length=1)
    name: StrictStr = Field(..., min_length=1)
    variations: list[VariationId] = Field(..., min_length=1)

    def to_entity(self) -> Product:
        return Product.create(
            id=self.id,
            slug=self.slug,
            name=self.name,
            variations=self.variations,
        )
