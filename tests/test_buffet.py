"""
Unit tests for the buffet heading walk.
"""
from src.manas.config import CATEGORY_TITLES_RU
from src.manas.models.menu import HeadingToken, Item
from src.manas.reconstruct.buffet import BuffetAccumulator, reconstruct_buffet


def h(level: int, text: str) -> HeadingToken:
    return HeadingToken(level=level, text=text)


class TestBuffetWalk:
    """Test category -> item -> price sequencing."""

    def test_single_item(self):
        menu = reconstruct_buffet([h(4, "SICAK İÇECEK"), h(5, "Çay"), h(6, "Fiyatı: 18 som")])
        assert len(menu.categories) == 1
        category = menu.categories[0]
        assert category.id == "sicak_icecek"
        assert category.title == "Горячие напитки"
        assert category.items == [Item(id="cay", name="Çay", price=18)]

    def test_untranslated_category_keeps_heading(self):
        menu = reconstruct_buffet([h(4, "TATLILAR"), h(5, "Sütlaç"), h(6, "Fiyati: 80")])
        assert menu.categories[0].id == "tatlilar"
        assert menu.categories[0].title == "TATLILAR"

    def test_custom_titles(self):
        menu = reconstruct_buffet([h(4, "TATLILAR")], titles={"TATLILAR": "Десерты"})
        assert menu.categories[0].title == "Десерты"

    def test_encounter_order_preserved(self):
        menu = reconstruct_buffet([
            h(4, "UNLU MAMÜLLER"),
            h(5, "Simit"), h(6, "Fiyatı: 30"),
            h(5, "Açma"), h(6, "Fiyatı: 35"),
            h(4, "KAHVALTILIKLAR"),
            h(5, "Menemen"), h(6, "Fiyatı: 120"),
            h(4, "PİZZA VE PİDELER"),
        ])
        assert [c.id for c in menu.categories] == ["unlu_mamuller", "kahvaltiliklar", "pizza_ve_pideler"]
        assert [c.title for c in menu.categories] == ["Выпечка", "Завтраки", "Пицца и пиде"]
        assert [i.name for i in menu.categories[0].items] == ["Simit", "Açma"]
        assert menu.categories[2].items == []
        assert menu.item_count == 3

    def test_item_ids_need_not_be_unique(self):
        menu = reconstruct_buffet([
            h(4, "A"), h(5, "Çay"), h(6, "Fiyatı: 18"),
            h(4, "B"), h(5, "ÇAY"), h(6, "Fiyatı: 20"),
        ])
        assert [c.items[0].id for c in menu.categories] == ["cay", "cay"]

    def test_custom_levels(self):
        menu = reconstruct_buffet(
            [h(3, "SICAK İÇECEK"), h(4, "Çay"), h(5, "Fiyatı: 18")],
            levels=(3, 4, 5),
        )
        assert menu.categories[0].items == [Item(id="cay", name="Çay", price=18)]


class TestBuffetDiscards:
    """Orphan and malformed lines change nothing."""

    def test_price_without_category(self):
        menu = reconstruct_buffet([h(5, "Çay"), h(6, "Fiyatı: 18"), h(4, "SICAK İÇECEK")])
        assert len(menu.categories) == 1
        assert menu.categories[0].items == []

    def test_price_without_item(self):
        menu = reconstruct_buffet([h(4, "SICAK İÇECEK"), h(6, "Fiyatı: 18")])
        assert menu.categories[0].items == []

    def test_malformed_price_keeps_pending_item(self):
        acc = BuffetAccumulator(CATEGORY_TITLES_RU)
        acc.feed_all([h(4, "SICAK İÇECEK"), h(5, "Çay"), h(6, "Fiyat bilgisi yok")])
        assert acc.pending_item_name == "Çay"
        acc.feed(h(6, "Fiyatı: 18"))
        assert acc.result().categories[0].items == [Item(id="cay", name="Çay", price=18)]

    def test_overwritten_item_is_dropped(self):
        menu = reconstruct_buffet([h(4, "X"), h(5, "Çay"), h(5, "Kahve"), h(6, "Fiyatı: 50")])
        assert menu.categories[0].items == [Item(id="kahve", name="Kahve", price=50)]

    def test_new_category_clears_pending_item(self):
        menu = reconstruct_buffet([h(4, "A"), h(5, "Çay"), h(4, "B"), h(6, "Fiyatı: 18")])
        assert [c.items for c in menu.categories] == [[], []]

    def test_other_levels_ignored(self):
        menu = reconstruct_buffet([h(2, "Büfe"), h(4, "A"), h(3, "Reklam"), h(5, "Çay"), h(6, "Fiyatı: 18")])
        assert menu.categories[0].items[0].price == 18

    def test_empty_input(self):
        assert reconstruct_buffet([]).categories == []

    def test_result_closes_open_category(self):
        acc = BuffetAccumulator()
        acc.feed(h(4, "A"))
        assert acc.current_category is not None
        menu = acc.result()
        assert acc.current_category is None
        assert [c.id for c in menu.categories] == ["a"]
