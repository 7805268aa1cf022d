"""
Shop Ledger - turns shopkeeper utterances into ledger commands.

    from shop_ledger import parse_enhanced, setup_logging

    setup_logging()
    result = await parse_enhanced("sold 2 kg rice for 80 rupees")
"""

from .interpreter import CommandInterpreter, parse_enhanced
from .logging_config import setup_logging

__all__ = ["CommandInterpreter", "parse_enhanced", "setup_logging"]
