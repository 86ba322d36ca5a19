"""
Buffet page reconstruction.

Levels carry the structure here: h4 opens a category, h5 names an item and the
h6 after it holds the price (`Fiyatı: 18 som`).
"""
import logging
from typing import Iterable, Mapping, Sequence

from src.manas.classify import parse_price
from src.manas.config import CATEGORY_TITLES_RU
from src.manas.models.menu import BuffetMenu, Category, HeadingToken, Item
from src.manas.text import slugify


class BuffetAccumulator:
    """
    State machine over buffet heading tokens.

    Attributes:
        titles: Category heading -> display title lookup (read-only)
        current_category: Category being filled, or None before the first category heading
        pending_item_name: Last item label not yet closed by a price line
    """

    def __init__(
            self,
            titles: Mapping[str, str] = CATEGORY_TITLES_RU,
            category_level: int = 4,
            item_level: int = 5,
            price_level: int = 6,
    ):
        self.titles = titles
        self.category_level = category_level
        self.item_level = item_level
        self.price_level = price_level
        self.current_category: Category | None = None
        self.pending_item_name: str | None = None
        self._categories: list[Category] = []

    def feed(self, token: HeadingToken) -> None:
        if token.level == self.category_level:
            self._open_category(token.text)
        elif token.level == self.price_level:
            self._close_item(token.text)
        elif token.level == self.item_level:
            if self.current_category is not None:
                self.pending_item_name = token.text

    def feed_all(self, tokens: Iterable[HeadingToken]) -> 'BuffetAccumulator':
        for token in tokens:
            self.feed(token)
        return self

    def _flush_category(self) -> None:
        if self.current_category is not None:
            self._categories.append(self.current_category)
            self.current_category = None

    def _open_category(self, text: str) -> None:
        self._flush_category()
        self.current_category = Category(id=slugify(text), title=self.titles.get(text) or text)
        self.pending_item_name = None

    def _close_item(self, text: str) -> None:
        if self.current_category is None or not self.pending_item_name:
            return
        price, ok = parse_price(text)
        if not ok:
            logging.debug("Ignoring malformed price line for %s: %s", self.pending_item_name, text)
            return
        name = self.pending_item_name
        self.current_category.items.append(Item(id=slugify(name), name=name, price=price))
        self.pending_item_name = None

    def result(self) -> BuffetMenu:
        """Close the open category and return everything collected so far."""
        self._flush_category()
        return BuffetMenu(categories=list(self._categories))


def reconstruct_buffet(
        tokens: Iterable[HeadingToken],
        titles: Mapping[str, str] = CATEGORY_TITLES_RU,
        levels: Sequence[int] = (4, 5, 6),
) -> BuffetMenu:
    """Build the category list with priced items from buffet heading tokens.

    `levels` are the category, item and price heading levels, in that order.
    """
    category_level, item_level, price_level = levels
    menu = BuffetAccumulator(titles, category_level, item_level, price_level).feed_all(tokens).result()
    logging.info("Reconstructed buffet menu: %s categories, %s items", len(menu.categories), menu.item_count)
    return menu
