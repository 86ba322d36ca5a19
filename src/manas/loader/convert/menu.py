from __future__ import annotations

from typing import Any, Dict

from src.manas.models.menu import (
    BuffetMenu,
    BuffetMeta,
    CanteenMenu,
    CanteenMeta,
    Category,
    Food,
    Item,
    LocalizedName,
    MenuDay,
)


def food_to_json(food: Food) -> Dict[str, Any]:
    return {
        "id": food.id,
        "name": {"tr": food.name.tr, "ru": food.name.ru, "en": food.name.en},
        "caloriesKcal": food.calories_kcal,
    }


def food_json_to_food(row: Dict[str, Any]) -> Food:
    name = row.get("name") or {}
    return Food(
        id=row["id"],
        name=LocalizedName(tr=name.get("tr", ""), ru=name.get("ru", ""), en=name.get("en", "")),
        calories_kcal=row["caloriesKcal"],
    )


def menu_day_to_json(day: MenuDay) -> Dict[str, Any]:
    return {"date": day.date, "items": list(day.items)}


def item_to_json(item: Item) -> Dict[str, Any]:
    return {"id": item.id, "name": item.name, "price": item.price}


def category_to_json(category: Category) -> Dict[str, Any]:
    return {
        "id": category.id,
        "title": category.title,
        "items": [item_to_json(item) for item in category.items],
    }


def category_json_to_category(row: Dict[str, Any]) -> Category:
    return Category(
        id=row["id"],
        title=row.get("title", ""),
        items=[Item(id=i["id"], name=i["name"], price=i["price"]) for i in row.get("items") or []],
    )


def canteen_to_json(menu: CanteenMenu, meta: CanteenMeta) -> Dict[str, Any]:
    """Convert a reconstructed canteen menu into the published JSON document."""
    return {
        "foods": [food_to_json(food) for food in menu.foods],
        "menus": [menu_day_to_json(day) for day in menu.menus],
        "meta": {
            "timezone": meta.timezone,
            "source": meta.source,
            "lastUpdated": meta.last_updated,
        },
    }


def buffet_to_json(menu: BuffetMenu, meta: BuffetMeta) -> Dict[str, Any]:
    """Convert a reconstructed buffet menu into the published JSON document."""
    return {
        "categories": [category_to_json(category) for category in menu.categories],
        "meta": {
            "timezone": meta.timezone,
            "currency": meta.currency,
            "lastUpdated": meta.last_updated,
        },
    }


def canteen_json_to_model(body: Dict[str, Any]) -> tuple[CanteenMenu, CanteenMeta]:
    """Read a stored canteen document back into models."""
    meta = body.get("meta") or {}
    menu = CanteenMenu(
        foods=[food_json_to_food(row) for row in body.get("foods") or []],
        menus=[MenuDay(date=row["date"], items=list(row.get("items") or [])) for row in body.get("menus") or []],
    )
    return menu, CanteenMeta(
        timezone=meta.get("timezone", ""),
        source=meta.get("source", ""),
        last_updated=meta.get("lastUpdated", ""),
    )


def buffet_json_to_model(body: Dict[str, Any]) -> tuple[BuffetMenu, BuffetMeta]:
    """Read a stored buffet document back into models."""
    meta = body.get("meta") or {}
    menu = BuffetMenu(categories=[category_json_to_category(row) for row in body.get("categories") or []])
    return menu, BuffetMeta(
        timezone=meta.get("timezone", ""),
        currency=meta.get("currency", ""),
        last_updated=meta.get("lastUpdated", ""),
    )
