"""
Command Interpreter.

Top-level entry point: one utterance in, one ParsedResult out.

    interpreter = CommandInterpreter(lookup_price=catalog.lookup_price)
    result = await interpreter.parse("sold 2 kg rice and 1 packet maggi")

The utterance is classified (credit, order, price, transaction) and handed
to the matching parser. Nothing raises to the caller: every failure comes
back as a ParsedResult carrying warnings.
"""

import logging

from .config import MAX_INPUT_LENGTH
from .parsers import (
    PriceLookup,
    classify_command,
    enrich_order,
    parse_credit_command,
    parse_order_command,
    parse_price_sentence,
    parse_sentence_with_price_lookup,
)
from .parsers.errors import ParsingError
from .schemas import CommandType, ParsedResult

logger = logging.getLogger(__name__)


class CommandInterpreter:
    """
    Parses shopkeeper utterances into typed commands.

    Args:
        lookup_price: Optional async price catalog lookup used to fill in
            prices that were not spoken.
        max_input_length: Longer input is truncated with a warning.
    """

    def __init__(
        self,
        lookup_price: PriceLookup | None = None,
        max_input_length: int = MAX_INPUT_LENGTH,
    ):
        self._lookup_price = lookup_price
        self._max_input_length = max_input_length

    async def parse(self, text: str) -> ParsedResult:
        if not text or not text.strip():
            return ParsedResult(
                type=CommandType.TRANSACTION,
                warnings=["Empty input text"],
                source_text="",
            )

        text = text.strip()
        warnings = []
        if len(text) > self._max_input_length:
            logger.warning("Input of %d characters truncated to %d", len(text), self._max_input_length)
            text = text[:self._max_input_length]
            warnings.append(f"Input truncated to {self._max_input_length} characters")

        try:
            result = await self._dispatch(text)
        except (ParsingError, TypeError, ValueError) as e:
            logger.error("Error parsing input %r: %s", text, e)
            result = ParsedResult(
                type=CommandType.TRANSACTION,
                warnings=["Error parsing input"],
                source_text=text,
            )

        if warnings:
            result.warnings = warnings + result.warnings
        return result

    async def _parse_order(self, text: str) -> ParsedResult:
        """Order items without a spoken price are priced from the catalog, when one is configured."""
        result = parse_order_command(text)
        if result.order is None or self._lookup_price is None:
            return result

        order, warnings = await enrich_order(result.order, self._lookup_price)
        result.order = order
        result.warnings = result.warnings + warnings
        return result

    async def _dispatch(self, text: str) -> ParsedResult:
        command_type = classify_command(text)
        logger.info("Interpreting %s command", command_type.value)

        if command_type == CommandType.CREDIT:
            return await parse_credit_command(text, self._lookup_price)

        if command_type == CommandType.ORDER:
            return await self._parse_order(text)

        if command_type == CommandType.PRICE:
            return ParsedResult(
                type=CommandType.PRICE,
                price_updates=parse_price_sentence(text),
                source_text=text,
            )

        entries, warnings = await parse_sentence_with_price_lookup(text, self._lookup_price)
        if not entries:
            return ParsedResult(type=CommandType.TRANSACTION, warnings=warnings, source_text=text)

        return ParsedResult(
            type=CommandType.TRANSACTION,
            entry=entries[0],
            entries=entries,
            warnings=warnings,
            source_text=text,
        )


async def parse_enhanced(text: str, lookup_price: PriceLookup | None = None) -> ParsedResult:
    """Parse one utterance with a throwaway CommandInterpreter."""
    return await CommandInterpreter(lookup_price=lookup_price).parse(text)
