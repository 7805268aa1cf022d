"""
Tests for catalog price update sentences.
"""
from shop_ledger.parsers.prices import is_price_sentence, parse_price_sentence


class TestParsePriceSentence:
    """'price of X is N' style updates."""

    def test_two_items(self):
        updates = parse_price_sentence("price of rice is 50 and milk is 25")
        assert [(u.item, u.price) for u in updates] == [("Rice", 50), ("Milk", 25)]

    def test_set_to_per_unit(self):
        updates = parse_price_sentence("set price of sugar to 45 per kg")
        assert [(u.item, u.price) for u in updates] == [("Sugar", 45)]

    def test_rate_and_currency(self):
        assert [(u.item, u.price) for u in parse_price_sentence("rice rate 60")] == [("Rice", 60)]
        updates = parse_price_sentence("coconut oil costs Rs 45.50")
        assert [(u.item, u.price) for u in updates] == [("Coconut Oil", 45.5)]

    def test_comma_list(self):
        updates = parse_price_sentence("new prices: rice 50, dal 90.")
        assert [(u.item, u.price) for u in updates] == [("Rice", 50), ("Dal", 90)]

    def test_requires_price_keyword(self):
        assert parse_price_sentence("sold rice for 20 rupees") == []
        assert parse_price_sentence("rice 50") == []

    def test_sale_words_block_price_parsing(self):
        assert parse_price_sentence("sold rice at price 50") == []
        assert not is_price_sentence("order rice at price 50")

    def test_keyword_without_amount(self):
        assert parse_price_sentence("what is the price") == []
        assert parse_price_sentence("") == []
