"""
Type-directed field parsers.

Catalog exports are sparse: positions are blank for unmapped variants and
effect sizes are often missing or free text. A field that does not parse is
therefore an ordinary outcome, and every parser here returns ``None`` for it
instead of raising.
"""

import re
from typing import Callable, Dict, Optional, TypeVar

T = TypeVar("T")
Parser = Callable[[str], Optional[T]]

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?)",
    re.IGNORECASE,
)


def parse_int(field: str) -> Optional[int]:
    """Parse an optionally signed decimal integer, or return None."""
    if not isinstance(field, str) or not _INT_PATTERN.fullmatch(field):
        return None
    return int(field)


def parse_unsigned(field: str) -> Optional[int]:
    """Parse a non-negative decimal integer such as a base-pair position."""
    if not isinstance(field, str) or not _UNSIGNED_PATTERN.fullmatch(field):
        return None
    return int(field)


def parse_float(field: str) -> Optional[float]:
    """
    Parse a decimal or scientific numeral, or return None.

    Infinities are accepted; ``nan``, blanks, padding and digit-group
    underscores are not.
    """
    if not isinstance(field, str) or not _FLOAT_PATTERN.fullmatch(field):
        return None
    return float(field)


PARSERS: Dict[str, Parser] = {
    "int": parse_int,
    "unsigned": parse_unsigned,
    "float": parse_float,
}


def get_parser(type_name: str) -> Parser:
    """Look up a parser by target type name ('int', 'unsigned' or 'float')."""
    try:
        return PARSERS[type_name]
    except KeyError:
        raise ValueError(
            f"Unknown parser type: {type_name}. Available: {sorted(PARSERS)}"
        ) from None
