"""
Tests for transaction parsing: direction, single items and sentences.
"""
import pytest

import shop_ledger.config as config_mod
from shop_ledger.parsers.transactions import (
    determine_transaction_type,
    parse_chunk,
    parse_sentence,
    parse_single_item,
    parse_single_sentence,
    split_chunks,
    validate_entry,
)
from shop_ledger.schemas import ParsedEntry, SkipReason, TransactionType


class TestTransactionType:
    """Purchase verbs win over sale verbs; no verb uses the default."""

    def test_sale(self):
        assert determine_transaction_type("sold 2 kg rice") == TransactionType.CASH_IN

    def test_purchase(self):
        assert determine_transaction_type("bought 2 kg sugar") == TransactionType.CASH_OUT

    def test_purchase_checked_first(self):
        assert determine_transaction_type("bought and sold rice") == TransactionType.CASH_OUT

    def test_paid_for_is_expense(self):
        assert determine_transaction_type("paid 200 for electricity") == TransactionType.CASH_OUT

    def test_paid_by_is_income(self):
        assert determine_transaction_type("paid by Ravi 500") == TransactionType.CASH_IN

    def test_no_signal_uses_configured_default(self, monkeypatch):
        assert determine_transaction_type("2 kg rice") == TransactionType.CASH_IN

        monkeypatch.setattr(config_mod, "DEFAULT_TRANSACTION_TYPE", "cash-out")
        assert determine_transaction_type("2 kg rice") == TransactionType.CASH_OUT

    def test_explicit_default(self):
        result = determine_transaction_type("2 kg rice", default=TransactionType.CASH_OUT)
        assert result == TransactionType.CASH_OUT


class TestParseSingleItem:
    """One chunk in, one entry (or None) out."""

    def test_price_without_quantity_defaults_qty_to_one(self):
        entry = parse_single_item("sold rice for 20 rupees")
        assert entry.item == "Rice"
        assert entry.qty == 1
        assert entry.price == 20
        assert entry.total == 20
        assert entry.type == TransactionType.CASH_IN

    def test_full_purchase(self):
        entry = parse_single_item("bought 2 kg sugar at 40 each")
        assert entry.item == "Sugar"
        assert entry.qty == 2
        assert entry.unit == "kg"
        assert entry.price == 40
        assert entry.total == 80
        assert entry.type == TransactionType.CASH_OUT

    def test_brand_with_unit(self):
        entry = parse_single_item("sold 3 packets parle g biscuits")
        assert entry.item == "Parle G Biscuits"
        assert entry.qty == 3
        assert entry.unit == "packet"

    def test_missing_price_is_zero(self):
        entry = parse_single_item("2 kg rice")
        assert entry.price == 0
        assert entry.total == 0

    def test_source_text_is_the_chunk(self):
        entry = parse_single_item("  2 kg rice ")
        assert entry.source_text == "2 kg rice"

    @pytest.mark.parametrize("garbage", [
        "",
        "   ",
        "12345",
        "@@@ ### !!!",
        "for for for",
        "₹₹₹",
        "and and and",
        "sold 5 for 20",
        "x" * 5000,
        "kg kg kg 2 2 2",
        "\n\t",
    ])
    def test_never_raises(self, garbage):
        """Garbage input yields None or an entry, never an exception."""
        result = parse_single_item(garbage)
        assert result is None or isinstance(result, ParsedEntry)


class TestParseChunk:
    """Skip reasons are explicit values."""

    def test_empty_chunk(self):
        result = parse_chunk("  ")
        assert result.skipped
        assert result.skip_reason == SkipReason.EMPTY_CHUNK

    def test_unknown_item(self):
        result = parse_chunk("sold 5 for 20")
        assert result.skipped
        assert result.skip_reason == SkipReason.UNKNOWN_ITEM

    def test_success(self):
        result = parse_chunk("2 kg rice")
        assert not result.skipped
        assert result.skip_reason is None
        assert result.entry.item == "Rice"


class TestParseSentence:
    """Sentence splitting and per-chunk parsing."""

    def test_two_items_joined_by_and(self):
        entries = parse_sentence("2 kg rice and 1 packet biscuit")
        assert [(e.item, e.qty, e.unit) for e in entries] == [
            ("Rice", 2, "kg"),
            ("Biscuit", 1, "packet"),
        ]

    def test_comma_separated(self):
        entries = parse_sentence("sold 2 kg rice for 80, 1 kg sugar for 45")
        assert [e.item for e in entries] == ["Rice", "Sugar"]
        assert [e.price for e in entries] == [80, 45]
        assert [e.total for e in entries] == [160, 45]

    def test_empty(self):
        assert parse_sentence("") == []
        assert parse_sentence("   ") == []

    def test_unparseable_chunks(self):
        assert parse_sentence("sold 5, 10") == []

    def test_totals_are_rounded_product(self):
        for entry in parse_sentence("3 kg rice at 33.333 each and 1.5 l milk for 27.5"):
            assert entry.total == round(entry.qty * entry.price, 2)

    def test_split_chunks_on_sentence_end_before_number(self):
        assert split_chunks("2 kg rice. 3 kg sugar") == ["2 kg rice.", "3 kg sugar"]
        assert split_chunks("") == []


class TestLegacyHelpers:
    """Single-entry parsing and entry validation."""

    def test_parse_single_sentence(self):
        entry, warnings = parse_single_sentence("sold 2 kg rice for 80")
        assert entry.item == "Rice"
        assert warnings == []

    def test_parse_single_sentence_blank(self):
        entry, warnings = parse_single_sentence("")
        assert entry.item == ""
        assert warnings == ["Empty input text"]

    def test_parse_single_sentence_unparsed_keeps_text(self):
        entry, warnings = parse_single_sentence("sold 5 for 20")
        assert entry.item == "sold 5 for 20"
        assert len(warnings) == 1

    def test_validate_entry(self):
        ok, errors = validate_entry(ParsedEntry(item="Rice", qty=2, price=40))
        assert ok
        assert errors == []

        ok, errors = validate_entry(ParsedEntry(item=" ", qty=0, price=-1))
        assert not ok
        assert errors == [
            "Item name is required",
            "Quantity must be a positive number",
            "Price cannot be negative",
        ]


class TestAmountsInSentences:
    """Spoken amounts are not split apart or double counted."""

    def test_thousands_separator_is_not_a_chunk_boundary(self):
        entries = parse_sentence("sold 5 kg rice for rs 2,000")

        assert [(e.item, e.qty, e.price, e.total) for e in entries] == [("Rice", 5, 2000, 10000)]

    def test_grouped_amount_inside_a_list(self):
        entries = parse_sentence("sold 1 bag rice for 1,200, 2 kg sugar for 45")
        assert [(e.item, e.price) for e in entries] == [("Rice", 1200), ("Sugar", 45)]

    def test_split_keeps_grouped_amounts(self):
        assert split_chunks("rice for 1,50,000, dal") == ["rice for 1,50,000", "dal"]

    def test_currency_amount_before_of(self):
        entry = parse_single_item("sold ₹50 of rice")
        assert (entry.item, entry.qty, entry.price, entry.total) == ("Rice", 1, 50, 50)
