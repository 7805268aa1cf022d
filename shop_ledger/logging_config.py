"""
Logging configuration for the shop ledger interpreter.

The interpreter itself never configures logging; every module only does
``logging.getLogger(__name__)``. The host application (the POS backend or
a worker that feeds transcripts in) calls ``setup_logging()`` once at
startup, before building a CommandInterpreter:

    from shop_ledger import CommandInterpreter, setup_logging

    setup_logging()
    interpreter = CommandInterpreter(lookup_price=catalog.lookup_price)

Environment variables:
    LEDGER_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL. Falls back to
        LOG_LEVEL, then INFO.

At DEBUG every parser rule that fires is logged, and the SQL issued by the
price catalog is echoed through the ``sqlalchemy.engine`` logger.
"""
import logging
import os
import sys

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_level(level: str = None) -> str:
    """Pick the level name: explicit argument, then env vars, then INFO. Unknown names become INFO."""
    if level is None:
        level = os.getenv("LEDGER_LOG_LEVEL") or os.getenv("LOG_LEVEL") or "INFO"
    level = level.strip().upper()
    return level if level in LEVELS else "INFO"


def setup_logging(level: str = None) -> str:
    """
    Configure logging for the interpreter and the price catalog.

    Args:
        level: Log level name. If not provided, read from the environment.

    Returns:
        The level name actually applied.
    """
    level = resolve_level(level)
    numeric_level = getattr(logging, level)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )
    logging.getLogger("shop_ledger").setLevel(numeric_level)

    # INFO on sqlalchemy.engine echoes every statement
    sql_level = logging.INFO if level == "DEBUG" else logging.WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(sql_level)

    logging.getLogger(__name__).debug("Logging configured at %s level", level)
    return level
