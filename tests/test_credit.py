"""
Tests for credit sales and credit payments.
"""
import pytest

from shop_ledger.parsers.credit import parse_credit_command, parse_credit_payment
from shop_ledger.schemas import CommandType, CreditType


class TestCreditSale:
    """Goods given on credit."""

    @pytest.mark.asyncio
    async def test_single_item_with_customer(self):
        result = await parse_credit_command("Credit Sales 1 kg Rice for Rs 20 for Priya")

        assert result.type == CommandType.CREDIT
        credit = result.credit
        assert credit.type == CreditType.SALE
        assert credit.customer == "Priya"
        assert (credit.item, credit.qty, credit.unit, credit.price) == ("Rice", 1, "kg", 20)
        assert credit.amount == 20
        assert credit.items is None

    @pytest.mark.asyncio
    async def test_multi_item_sums_line_totals(self, catalog):
        result = await parse_credit_command(
            "credit sale 2 kg rice and 1 kg sugar for Anil", catalog.lookup_price
        )

        credit = result.credit
        assert credit.customer == "Anil"
        assert [(i.item, i.total) for i in credit.items] == [("Rice", 90), ("Sugar", 42.5)]
        assert credit.amount == 132.5
        assert credit.item is None
        assert any("Auto-populated" in w for w in result.warnings)

    @pytest.mark.asyncio
    async def test_missing_customer_is_walk_in(self):
        result = await parse_credit_command("credit sale 1 packet maggi for 12")

        credit = result.credit
        assert credit.customer == "Walk-in"
        assert (credit.item, credit.unit, credit.price, credit.amount) == ("Maggi", "packet", 12, 12)

    @pytest.mark.asyncio
    async def test_no_items(self):
        result = await parse_credit_command("credit sale for Priya")

        assert result.type == CommandType.TRANSACTION
        assert result.credit is None
        assert result.warnings == ["Could not parse item details from credit sale"]


class TestCreditPayment:
    """Money received against a customer's balance."""

    @pytest.mark.parametrize("text,amount,customer", [
        ("credit paid Rs 500 by Ramesh", 500, "Ramesh"),
        ("credit paid ₹250.50 from Priya.", 250.5, "Priya"),
        ("credit paid 300 from priya sharma", 300, "Priya Sharma"),
        ("credit paid 400 rupees to Anil", 400, "Anil"),
        ("credit paid Priya 500", 500, "Priya"),
        ("credit paid 250", 250, ""),
    ])
    def test_patterns(self, text, amount, customer):
        result = parse_credit_payment(text)

        assert result.type == CommandType.CREDIT
        assert result.credit.type == CreditType.PAYMENT
        assert result.credit.amount == amount
        assert result.credit.customer == customer

    @pytest.mark.asyncio
    async def test_always_forces_review(self):
        result = await parse_credit_command("credit paid Rs 500 by Ramesh")
        assert result.force_review is True
        assert result.to_dict()["forceReview"] is True

    def test_amount_only_shows_walk_in(self):
        result = parse_credit_payment("credit paid Rs 500")
        assert result.credit.customer == ""
        assert result.credit.display_customer == "Walk-in"

    def test_zero_amount(self):
        result = parse_credit_payment("credit paid 0 by Ramesh")
        assert result.type == CommandType.TRANSACTION
        assert result.warnings == ["Credit payment amount must be greater than zero"]
        assert result.force_review is None

    def test_unrecognised_format(self):
        result = parse_credit_payment("credit paid lots of money")
        assert result.type == CommandType.TRANSACTION
        assert result.warnings == ["Could not parse credit payment command format"]


class TestNotCredit:

    @pytest.mark.asyncio
    async def test_plain_sale(self):
        result = await parse_credit_command("sold rice")
        assert result.type == CommandType.TRANSACTION
        assert result.warnings == ["Not a credit command"]
