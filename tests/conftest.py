"""Test fixtures: purchase history, list contents and a Spanish aisle translator."""

import pytest

from shopping_suggest.aisles import translator_from_mapping

SPANISH_AISLES = {
    "Produce": "Productos Frescos",
    "Dairy": "Lácteos",
    "Meat & Seafood": "Carne y Marisco",
    "Bakery": "Panadería",
    "Pantry": "Despensa",
    "Frozen": "Congelados",
    "Personal Care": "Cuidado Personal",
    "Household": "Hogar",
    "Other": "Otros",
}


@pytest.fixture()
def translator():
    return translator_from_mapping(SPANISH_AISLES)


@pytest.fixture()
def aisle_colors() -> dict[str, str]:
    return {
        "Productos Frescos": "#22c55e",
        "Lácteos": "#F97316",
        "Panadería": "#fde68a",
        "Congelados": "not-a-colour",
    }


@pytest.fixture()
def history() -> list[dict]:
    return [
        {"item_name": "Leche", "purchase_count": 12, "last_aisle": "Dairy"},
        {"item_name": "Dulce de Leche", "purchase_count": 3, "last_aisle": "Pantry"},
        {"item_name": "Lechuga", "purchase_count": 8, "last_aisle": "Produce"},
        {"item_name": "Manzana", "purchase_count": 5, "last_aisle": "Produce"},
        {"item_name": "Café", "purchase_count": 9, "last_aisle": "Pantry"},
        {"item_name": "Pan de molde", "purchase_count": 7, "last_aisle": "Bakery"},
    ]
