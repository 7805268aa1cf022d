"""
Tests for order commands and customer name extraction.
"""
from shop_ledger.parsers.orders import extract_customer_name, parse_order_command
from shop_ledger.schemas import CommandType


class TestExtractCustomerName:
    """'for NAME' at the end of the utterance."""

    def test_single_and_multi_word_names(self):
        assert extract_customer_name("order rice for priya") == "Priya"
        assert extract_customer_name("sold rice for ravi kumar.") == "Ravi Kumar"

    def test_rejects_non_names(self):
        assert extract_customer_name("order 2 kg rice for five") is None
        assert extract_customer_name("order sugar for tomorrow") is None
        assert extract_customer_name("2 kg for rice") is None
        assert extract_customer_name("rice for 2 kg") is None
        assert extract_customer_name("rice for a") is None

    def test_for_must_be_last(self):
        assert extract_customer_name("for priya 2 kg rice") is None
        assert extract_customer_name("") is None


class TestParseOrderCommand:
    """Order payloads with items and customer."""

    def test_multi_item_order(self):
        result = parse_order_command("order 2 kg rice and 1 packet maggi for Priya")

        assert result.type == CommandType.ORDER
        assert result.order.customer == "Priya"
        assert [(i.item, i.qty) for i in result.order.items] == [("Rice", 2), ("Maggi", 1)]
        assert all(i.price is None for i in result.order.items)
        assert all(i.delivery_date is None for i in result.order.items)
        assert result.warnings == []

    def test_number_word_is_not_a_customer(self):
        result = parse_order_command("order 2 kg rice for five")
        assert result.order.customer == "Walk-in"
        assert result.order.items[0].qty == 2

    def test_spoken_price_is_kept(self):
        result = parse_order_command("book 3 kg sugar at 40 each for Anil")
        item = result.order.items[0]
        assert (item.item, item.qty, item.price) == ("Sugar", 3, 40)

    def test_no_items(self):
        result = parse_order_command("order")
        assert result.type == CommandType.ORDER
        assert result.order is None
        assert result.warnings == ["Could not identify any items in the order"]

    def test_empty(self):
        result = parse_order_command("")
        assert result.type == CommandType.ORDER
        assert result.warnings == ["Empty input text"]
