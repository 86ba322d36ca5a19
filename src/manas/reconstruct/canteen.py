"""
Canteen page reconstruction.

The page is a flat run of h5/h6 headings:

    07.02.2026 Cumartesi     <- date
    Yayla Çorbası            <- food name
    Kalori: 175              <- closes the food started by the previous name
    ...

Which of h5/h6 holds names vs. annotations is not consistent, so the walk only
looks at the text. Lines that cannot be attached to a date and a name are
dropped rather than failing the whole page.
"""
import logging
from typing import Iterable

from src.manas.classify import LineKind, classify_line, parse_date, parse_kcal
from src.manas.models.menu import CanteenMenu, Food, HeadingToken, LocalizedName, MenuDay
from src.manas.text import slugify


COLLISION_SUFFIX = "_2"


class CanteenAccumulator:
    """
    State machine over canteen heading tokens.

    Attributes:
        current_date: ISO date of the last date line, or None before the first one
        pending_food_name: Last label seen since the previous calorie line, or None
    """

    def __init__(self):
        self.current_date: str | None = None
        self.pending_food_name: str | None = None
        self._foods_by_id: dict[str, Food] = {}
        self._menus_by_date: dict[str, list[str]] = {}

    def feed(self, token: HeadingToken) -> None:
        text = token.text
        kind = classify_line(text)

        if kind is LineKind.DATE:
            self.current_date, _ = parse_date(text)
            self.pending_food_name = None
            return

        if kind is LineKind.CALORIE:
            kcal, _ = parse_kcal(text)
            self._close_food(kcal)
            return

        # price lines have no meaning here and count as names
        if self.current_date is not None:
            if self.pending_food_name:
                logging.debug("Dropping food name without calories: %s", self.pending_food_name)
            self.pending_food_name = text

    def feed_all(self, tokens: Iterable[HeadingToken]) -> 'CanteenAccumulator':
        for token in tokens:
            self.feed(token)
        return self

    def _close_food(self, kcal: int) -> None:
        if self.current_date is None or not self.pending_food_name:
            logging.debug("Skipping calorie line without date or food name: %s kcal", kcal)
            return

        name = self.pending_food_name
        food_id = self._resolve_id(slugify(name), name, kcal)
        self._foods_by_id[food_id] = Food(
            id=food_id,
            name=LocalizedName.untranslated(name),
            calories_kcal=kcal,
        )
        self._menus_by_date.setdefault(self.current_date, []).append(food_id)
        self.pending_food_name = None

    def _resolve_id(self, food_id: str, name: str, kcal: int) -> str:
        # a different dish with the same slug gets "_2" appended, again and again if needed
        while food_id in self._foods_by_id and not self._foods_by_id[food_id].same_dish(name, kcal):
            food_id += COLLISION_SUFFIX
        return food_id

    def result(self) -> CanteenMenu:
        menus = [
            MenuDay(date=date, items=list(self._menus_by_date[date]))
            for date in sorted(self._menus_by_date)
        ]
        foods = [self._foods_by_id[food_id] for food_id in sorted(self._foods_by_id)]
        return CanteenMenu(foods=foods, menus=menus)


def reconstruct_canteen(tokens: Iterable[HeadingToken]) -> CanteenMenu:
    """Build the food catalog and per-date menus from canteen heading tokens."""
    menu = CanteenAccumulator().feed_all(tokens).result()
    logging.info("Reconstructed canteen menu: %s foods over %s days", len(menu.foods), len(menu.menus))
    return menu
