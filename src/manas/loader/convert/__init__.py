from .menu import (
    food_to_json,
    food_json_to_food,
    menu_day_to_json,
    item_to_json,
    category_to_json,
    category_json_to_category,
    canteen_to_json,
    buffet_to_json,
    canteen_json_to_model,
    buffet_json_to_model,
)

__all__ = [
    "food_to_json",
    "food_json_to_food",
    "menu_day_to_json",
    "item_to_json",
    "category_to_json",
    "category_json_to_category",
    "canteen_to_json",
    "buffet_to_json",
    "canteen_json_to_model",
    "buffet_json_to_model",
]
