"""
Data models for the reconstructed menus.

Classes:
- HeadingToken: One heading of a page (level + trimmed text), in document order
- LocalizedName: Food name in tr/ru/en (the site only publishes Turkish)
- Food: Canteen dish with calorie value, keyed by slug id
- MenuDay: Food ids served on a given ISO date
- Item: Priced buffet position
- Category: Buffet category holding items in page order
- CanteenMenu / BuffetMenu: Results of a single reconstruction pass
- CanteenMeta / BuffetMeta: Metadata block attached to the JSON documents
"""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class HeadingToken:

    level: int
    text: str

    def __repr__(self):
        return f'h{self.level}:{self.text!r}'


@dataclass(frozen=True)
class LocalizedName:

    tr: str
    ru: str
    en: str

    @classmethod
    def untranslated(cls, name: str) -> 'LocalizedName':
        return cls(tr=name, ru=name, en=name)


@dataclass(frozen=True)
class Food:

    id: str
    name: LocalizedName
    calories_kcal: int

    def same_dish(self, name: str, calories_kcal: int) -> bool:
        return self.name.tr == name and self.calories_kcal == calories_kcal


@dataclass
class MenuDay:

    date: str
    items: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Item:

    id: str
    name: str
    price: int


@dataclass
class Category:

    id: str
    title: str
    items: list[Item] = field(default_factory=list)


@dataclass
class CanteenMenu:

    foods: list[Food]
    menus: list[MenuDay]

    @property
    def foods_by_id(self) -> dict[str, Food]:
        return {food.id: food for food in self.foods}


@dataclass
class BuffetMenu:

    categories: list[Category]

    @property
    def item_count(self) -> int:
        return sum(len(category.items) for category in self.categories)


@dataclass(frozen=True)
class CanteenMeta:

    timezone: str
    source: str
    last_updated: str


@dataclass(frozen=True)
class BuffetMeta:

    timezone: str
    currency: str
    last_updated: str
