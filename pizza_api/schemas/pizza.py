"""Pizza request/response schemas - REST API contract and stored document shape."""

from pydantic import BaseModel, ConfigDict

# Ordered; order is kept as given but carries no meaning here
Ingredients = list[str]


class PizzaCreate(BaseModel):
    """Create payload and stored `_source`. Unknown keys (e.g. a client `id`) are dropped."""

    model_config = ConfigDict(strict=True, extra="ignore")

    name: str
    description: str
    price: float
    ingredients: Ingredients


class Pizza(BaseModel):
    """Pizza as returned to callers. `id` is the store-assigned `_id`."""

    model_config = ConfigDict(strict=True)

    id: str
    name: str
    description: str
    price: float
    ingredients: Ingredients

    @classmethod
    def from_create(cls, data: PizzaCreate, id: str) -> "Pizza":
        return cls(id=id, **data.model_dump())
