"""
Pizza schema tests - strict structural validation and JSON round trip.
"""

import pytest
from pydantic import ValidationError

from pizza_api.schemas.pizza import Pizza, PizzaCreate


def test_pizza_json_round_trip(margherita: dict):
    pizza = Pizza(id="abc123", **margherita)
    again = Pizza.model_validate_json(pizza.model_dump_json())
    assert again == pizza
    assert again.ingredients == ["tomato", "mozzarella", "basil"]


def test_from_create_keeps_fields_and_ingredient_order():
    data = PizzaCreate(
        name="Capricciosa",
        description="A bit of everything",
        price=11.0,
        ingredients=["olives", "ham", "artichokes", "mushrooms"],
    )
    pizza = Pizza.from_create(data, "id-1")
    assert pizza.id == "id-1"
    assert pizza.model_dump() == {"id": "id-1", **data.model_dump()}


def test_create_drops_unknown_fields(margherita: dict):
    data = PizzaCreate.model_validate({**margherita, "id": "client-id", "vegan": True})
    assert "id" not in data.model_dump()


@pytest.mark.parametrize(
    "field, value",
    [
        ("name", 42),
        ("description", None),
        ("price", "8.5"),
        ("ingredients", "tomato"),
        ("ingredients", ["tomato", 1]),
    ],
)
def test_create_rejects_wrong_types(margherita: dict, field: str, value):
    with pytest.raises(ValidationError):
        PizzaCreate.model_validate({**margherita, field: value})


def test_create_requires_every_field(margherita: dict):
    for field in margherita:
        payload = {k: v for k, v in margherita.items() if k != field}
        with pytest.raises(ValidationError):
            PizzaCreate.model_validate(payload)
