from __future__ import annotations

import os
from types import MappingProxyType

from pydantic import BaseModel, Field


BASE_URL = "https://beslenme.manas.edu.kg"
TIMEZONE = "Asia/Bishkek"
CURRENCY = "KGS"
CANTEEN_SOURCE = "manas_kantin"


# Buffet category headings as printed on the page -> Russian titles.
# Unknown categories keep their Turkish heading.
CATEGORY_TITLES_RU = MappingProxyType({
    "SICAK İÇECEK": "Горячие напитки",
    "PİZZA VE PİDELER": "Пицца и пиде",
    "UNLU MAMÜLLER": "Выпечка",
    "KAHVALTILIKLAR": "Завтраки",
})


class ScraperConfig(BaseModel):
    canteen_url: str = f"{BASE_URL}/menu"
    buffet_url: str = f"{BASE_URL}/1"
    output_dir: str = "public"
    canteen_filename: str = "manas_kantin.json"
    buffet_filename: str = "buffet_1.json"
    timezone: str = TIMEZONE
    currency: str = CURRENCY
    source: str = CANTEEN_SOURCE
    user_agent: str = "Mozilla/5.0 (compatible; manas-menu-scraper/1.0)"
    timeout_sec: float = 30.0
    # the canteen page mixes h5/h6 for names and annotations
    canteen_levels: list[int] = Field(default_factory=lambda: [5, 6], min_length=1)
    # category, item, price
    buffet_levels: list[int] = Field(default_factory=lambda: [4, 5, 6], min_length=3, max_length=3)

    @property
    def canteen_path(self) -> str:
        return os.path.join(self.output_dir, self.canteen_filename)

    @property
    def buffet_path(self) -> str:
        return os.path.join(self.output_dir, self.buffet_filename)
