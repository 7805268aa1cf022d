"""
Parser Constants.

This module contains the word lists, synonym tables and ordered regex rule
tables shared by the lexical helpers and the command parsers. Rule tables
are lists evaluated top to bottom; the first rule that matches wins, so
their order is part of the grammar.
"""

import re

# =============================================================================
# Units
# =============================================================================

# Scan order for extract_unit. Abbreviations come before long forms so that
# "2 kg" is found before any accidental longer match.
KNOWN_UNITS = [
    "kg", "kgs", "g", "gm", "gms", "gram", "grams",
    "kilo", "kilos", "kilogram", "kilograms",
    "l", "ltr", "ltrs", "liter", "liters", "litre", "litres",
    "ml", "mls", "milliliter", "milliliters",
    "packet", "packets", "pack", "packs",
    "piece", "pieces", "pc", "pcs",
    "bottle", "bottles", "btl", "btls",
    "dozen", "dozens",
    "box", "boxes",
    "bag", "bags",
    "can", "cans",
    "sack", "sacks",
    "item", "items",
]

UNIT_NORMALIZATIONS = {
    "kgs": "kg", "kilo": "kg", "kilos": "kg", "kilogram": "kg", "kilograms": "kg",
    "gram": "g", "grams": "g", "gm": "g", "gms": "g",
    "ltr": "l", "ltrs": "l", "liter": "l", "liters": "l", "litre": "l", "litres": "l",
    "milliliter": "ml", "milliliters": "ml", "mls": "ml",
    "pc": "piece", "pcs": "piece", "pieces": "piece",
    "pack": "packet", "packs": "packet", "packets": "packet",
    "btl": "bottle", "btls": "bottle", "bottles": "bottle",
    "dozens": "dozen",
    "boxes": "box",
    "bags": "bag",
    "cans": "can",
    "sacks": "sack",
    "items": "item",
}

# Longest first so "kilograms" is not consumed as "kilo" + "grams"
_UNIT_ALTERNATION = "|".join(
    re.escape(u) for u in sorted(KNOWN_UNITS, key=len, reverse=True)
)

# Units are bounded by non-letters so "2kg" matches as well as "2 kg"
UNIT_TOKEN = rf"(?<![a-z])(?:{_UNIT_ALTERNATION})(?![a-z])"


def unit_pattern(unit: str, plural: bool = False) -> re.Pattern:
    """Compile a letter-bounded pattern for one unit, optionally plural tolerant."""
    suffix = r"(?:s|es)?" if plural else ""
    return re.compile(rf"(?<![a-z]){re.escape(unit)}{suffix}(?![a-z])", re.IGNORECASE)


UNIT_PATTERNS = [(unit, unit_pattern(unit)) for unit in KNOWN_UNITS]
PLURAL_UNIT_PATTERNS = [unit_pattern(unit, plural=True) for unit in KNOWN_UNITS]

# =============================================================================
# Numbers and Currency
# =============================================================================

# Digit-grouped amounts ("2,000", "1,50,000") are tried before plain numbers
NUMBER = r"(?:\d{1,3}(?:,\d{2,3})*,\d{3}(?!\d)|\d+)(?:\.\d+)?"
CURRENCY_PREFIX = r"(?:\brs\.?|\brupees?\b|\binr\b|₹)"
CURRENCY_SUFFIX = r"(?:rs\b\.?|rupees?\b|inr\b)"

NUMBER_PATTERN = re.compile(NUMBER)

# Text ending in a currency token: the number that follows it is a price
CURRENCY_BEFORE_PATTERN = re.compile(rf"{CURRENCY_PREFIX}\s*$", re.IGNORECASE)

# A number that is really part of a price, e.g. "20 rupees" or "10 each"
_NOT_PRICE_TAIL = r"(?![\d.])(?!\s*(?:rs\b|rupees?\b|inr\b|₹|each\b|per\b))"

# Words that, right before a number, make it a price rather than a quantity
PRICE_LEAD_WORDS = r"(?:rs|rupees?|inr|for|at|costs?|price|rate)"

# =============================================================================
# Quantity Rules (ordered)
# =============================================================================

# "2 kg", "5packets", "1.5 l"; group 2 is the unit actually spoken
NUMBER_UNIT_PATTERN = re.compile(rf"({NUMBER})\s*({UNIT_TOKEN})", re.IGNORECASE)

# A number preceded by a currency token is skipped by every rule
QUANTITY_RULES = [
    ("number_before_unit", NUMBER_UNIT_PATTERN),
    # "3 apples", "sold 4 soaps", "i sold 2 maggi" - at most two leading words
    ("leading_number", re.compile(
        rf"^\s*(?:(?!{PRICE_LEAD_WORDS}\b)[a-z']+\s+){{0,2}}?({NUMBER}){_NOT_PRICE_TAIL}",
        re.IGNORECASE,
    )),
    # "2 of rice"
    ("number_of", re.compile(rf"({NUMBER})\s+of\b", re.IGNORECASE)),
]

# =============================================================================
# Price Rules (ordered)
# =============================================================================

PRICE_RULES = [
    # "for Rs 20", "₹45", "rupees 30"
    ("currency_then_number", re.compile(
        rf"(?:\bfor\s+)?{CURRENCY_PREFIX}\s*({NUMBER})", re.IGNORECASE)),
    # "20 rupees", "20rs"
    ("number_then_currency", re.compile(
        rf"({NUMBER})\s*{CURRENCY_SUFFIX}", re.IGNORECASE)),
    # "at 10 each", "for 5 rs per"
    ("each_or_per", re.compile(
        rf"\b(?:at|for)\s+({NUMBER})\s*(?:{CURRENCY_SUFFIX}|₹)?\s*(?:each|per|a\s+piece)\b",
        re.IGNORECASE)),
    # "costs 30", "price 45", "price is 45"
    ("costs_or_price", re.compile(
        rf"\b(?:costs?|price|rate)\s+(?:is\s+|of\s+)?({NUMBER})", re.IGNORECASE)),
    # "for 50", "at 12" - but not "for 2 kg"
    ("for_or_at_number", re.compile(
        rf"(?:\b(?:for|at)|@)\s*({NUMBER})(?![\d.])(?!\s*{UNIT_TOKEN})", re.IGNORECASE)),
]

# =============================================================================
# Brands
# =============================================================================

# Brands whose name ends in a lone "g" that must not be read as grams
G_SUFFIX_BRAND_PATTERN = re.compile(r"\b(?:parle|nuti)[\s-]*g\b", re.IGNORECASE)

SPECIAL_BRANDS = [
    (re.compile(r"\bparle[\s-]*g\b", re.IGNORECASE), "Parle G"),
    (re.compile(r"\bnuti[\s-]*g\b", re.IGNORECASE), "Nuti G"),
    (re.compile(r"\bmaggi\b", re.IGNORECASE), "Maggi"),
    (re.compile(r"\blay'?s\b", re.IGNORECASE), "Lays"),
    (re.compile(r"\bamul\b", re.IGNORECASE), "Amul"),
    (re.compile(r"\btata\b", re.IGNORECASE), "Tata"),
    (re.compile(r"\bbritannia\b", re.IGNORECASE), "Britannia"),
]

# Product category mentioned next to a brand -> suffix appended to the name
BRAND_PRODUCT_SUFFIXES = [
    ("biscuit", "Biscuits"),
    ("noodle", "Noodles"),
    ("chips", "Chips"),
]

# =============================================================================
# Transaction Words
# =============================================================================

CASH_OUT_WORDS = {
    "bought", "buy", "buying", "purchased", "purchase", "spent", "spend",
    "expense", "expenses", "invoice", "bill",
}

CASH_IN_WORDS = {
    "sold", "sell", "sells", "selling", "sale", "sales", "income",
    "received", "receive",
}

# Cash-out rules are evaluated before cash-in rules
TRANSACTION_TYPE_RULES = [
    ("cash-out", re.compile(
        r"\b(?:bought|buy|buying|purchased|purchase|spent|spend|expenses?|invoice|bill)\b",
        re.IGNORECASE)),
    # "paid 200 for electricity" is an expense, "paid by Ravi" is not
    ("cash-out", re.compile(r"\bpaid\b(?!\s+(?:by|from)\b)", re.IGNORECASE)),
    ("cash-in", re.compile(
        r"\b(?:sold|sell|sells|selling|sales?|income|received|receive)\b",
        re.IGNORECASE)),
    ("cash-in", re.compile(r"\bpaid\s+(?:by|from)\b", re.IGNORECASE)),
]

CREDIT_WORDS = {"credit", "paid", "payment", "pay", "udhaar", "udhar"}

STOPWORDS = {
    "i", "we", "a", "an", "the", "of", "from", "to", "with", "for", "at",
    "by", "in", "on", "and", "is", "are", "was", "were", "has", "have",
    "had", "my", "our", "today", "total", "worth", "some", "please",
}

CURRENCY_WORDS = {"rs", "rs.", "rupee", "rupees", "inr", "₹"}

# Everything that is never part of an item name
NOISE_WORDS = (
    CASH_OUT_WORDS | CASH_IN_WORDS | CREDIT_WORDS | STOPWORDS | CURRENCY_WORDS
    | {"each", "per", "paid"}
)

_NOISE_WORD_PATTERN = re.compile(
    r"\b(?:" + "|".join(
        re.escape(w) for w in sorted(NOISE_WORDS - CURRENCY_WORDS, key=len, reverse=True)
    ) + r")\b",
    re.IGNORECASE,
)

ITEM_STRIP_PATTERNS = [
    _NOISE_WORD_PATTERN,
    re.compile(r"(?:\brs\b\.?|\brupees?\b|\binr\b|₹)", re.IGNORECASE),
    re.compile(NUMBER),
]

# =============================================================================
# Order Keywords
# =============================================================================

ORDER_KEYWORDS = [
    "order", "orders", "ordered", "ordering",
    "deliver", "delivery", "delivers", "delivering", "delivered",
    "book", "booking", "booked", "books",
    "reserve", "reservation", "reserved", "reserves",
]

ORDER_KEYWORD_PATTERN = re.compile(
    r"\b(?:" + "|".join(ORDER_KEYWORDS) + r")\b", re.IGNORECASE
)

# =============================================================================
# Customer Names
# =============================================================================

# "... for Priya" at the very end of the utterance
CUSTOMER_PATTERN = re.compile(r"\bfor\s+([a-z][a-z\s]*?)\s*[.!?]*\s*$", re.IGNORECASE)

NUMBER_WORDS = {
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "dozen", "half",
}

GROCERY_NOUNS = {
    "rice", "wheat", "sugar", "oil", "milk", "bread", "biscuit", "biscuits",
    "dal", "atta", "salt", "tea", "eggs", "egg", "flour", "soap", "butter",
}

DAY_WORDS = {"today", "tomorrow", "tonight", "morning", "evening"}

CUSTOMER_EXCLUDE_WORDS = (
    NUMBER_WORDS | set(KNOWN_UNITS) | GROCERY_NOUNS | DAY_WORDS | CURRENCY_WORDS
    | {"each", "cash", "free", "sale", "credit"}
)

# =============================================================================
# Credit Commands
# =============================================================================

CREDIT_SALE_PREFIX = re.compile(r"^\s*credit\s+sales?\s+", re.IGNORECASE)
CREDIT_PAID_PREFIX = re.compile(r"^\s*credit\s+paid\s+", re.IGNORECASE)

_NAME = r"(?P<customer>[a-z][a-z\s.]*?)"
_PAYER_LINK = r"(?:by|from|for|to)"

# Evaluated in order; the first match wins
PAYMENT_PATTERNS = [
    # "Rs 500 by Ramesh", "₹500 from Priya"
    ("currency_amount_and_customer", re.compile(
        rf"^{CURRENCY_PREFIX}\s*(?P<amount>{NUMBER})\s*(?:{CURRENCY_SUFFIX})?\s+{_PAYER_LINK}\s+{_NAME}\s*[.!?]*$",
        re.IGNORECASE)),
    # "500 by Ramesh", "500 rupees from Priya"
    ("amount_and_customer", re.compile(
        rf"^(?P<amount>{NUMBER})\s*(?:{CURRENCY_SUFFIX})?\s+{_PAYER_LINK}\s+{_NAME}\s*[.!?]*$",
        re.IGNORECASE)),
    # "Rs 500", "500"
    ("amount_only", re.compile(
        rf"^(?:{CURRENCY_PREFIX}\s*)?(?P<amount>{NUMBER})\s*(?:{CURRENCY_SUFFIX})?\s*[.!?]*$",
        re.IGNORECASE)),
    # "Priya 500", "Priya Rs 500"
    ("customer_then_amount", re.compile(
        rf"^{_NAME}\s+(?:{CURRENCY_PREFIX}\s*)?(?P<amount>{NUMBER})\s*(?:{CURRENCY_SUFFIX})?\s*[.!?]*$",
        re.IGNORECASE)),
]

# =============================================================================
# Price Update Sentences
# =============================================================================

PRICE_KEYWORD_PATTERN = re.compile(r"\b(?:prices?|costs?|rates?)\b", re.IGNORECASE)

# Any of these means the speaker is recording a sale/purchase, not a price
PRICE_BLOCKING_PATTERN = re.compile(
    r"\b(?:sold|sell|sells|selling|sales?|bought|buy|purchased|spent|expenses?|paid|received|credit)\b",
    re.IGNORECASE,
)

PRICE_SENTENCE_CLEANUPS = [
    re.compile(r"\b(?:prices?|costs?|rates?)\s+of\s+", re.IGNORECASE),
    re.compile(r"\b(?:is|are|costs?|prices?|rates?|now|new|set|update|change)\b", re.IGNORECASE),
    re.compile(r"(?:\brs\b\.?|\brupees?\b|\binr\b|₹)", re.IGNORECASE),
]

PRICE_PART_PATTERN = re.compile(
    rf"^(.+?)\s*(?:[:=@-]|\bto\b)?\s*({NUMBER})(?:\s*(?:per|/)\s*[a-z]+)?$",
    re.IGNORECASE,
)

# =============================================================================
# Sentence Splitting
# =============================================================================

# A comma inside a digit-grouped amount is not a list separator
_LIST_COMMA = r"(?:(?<!\d),|,(?!\d{3}(?!\d)|\d{2},\d))"

# Comma, the word "and", or a sentence end followed by a number
CHUNK_SPLIT_PATTERN = re.compile(rf"{_LIST_COMMA}|\s+and\s+|(?<=[.!?])\s+(?=\d)", re.IGNORECASE)

# Order/price utterances only split on comma and "and"
LIST_SPLIT_PATTERN = re.compile(rf"\s+and\s+|{_LIST_COMMA}\s*", re.IGNORECASE)
