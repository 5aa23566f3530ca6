"""
Time breakdown parsing.

A time breakdown is a slash-separated list of whole-number percentages,
e.g. "25/50/25".  Position i is paired with drill i of the chosen focus,
so the parsed order is never changed.
"""

import re

from .config import BREAKDOWN_SEPARATOR, PERCENT_TOTAL, TOKEN_MAX, TOKEN_MIN
from .errors import (
    InvalidTimeBreakdownFormatError,
    NonPositivePercentageError,
    PercentageSumMismatchError,
)

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


def parse_time_breakdown(breakdown: str) -> tuple[int, ...]:
    """
    Parse and validate a percentage breakdown string.

    Args:
        breakdown: Percentages separated by '/', e.g. "25/50/25"

    Returns:
        Percentages in input order

    Raises:
        InvalidTimeBreakdownFormatError: If any token is not a 32-bit integer
        NonPositivePercentageError: If any percentage is zero or negative
        PercentageSumMismatchError: If the percentages do not sum to 100
    """
    values: list[int] = []
    for token in breakdown.split(BREAKDOWN_SEPARATOR):
        if not _INT_TOKEN.fullmatch(token):
            raise InvalidTimeBreakdownFormatError(breakdown, token)
        value = int(token)
        if not TOKEN_MIN <= value <= TOKEN_MAX:
            raise InvalidTimeBreakdownFormatError(breakdown, token)
        values.append(value)

    for value in values:
        if value <= 0:
            raise NonPositivePercentageError(value)

    total = sum(values)
    if total != PERCENT_TOTAL:
        raise PercentageSumMismatchError(total, PERCENT_TOTAL)

    return tuple(values)


def even_breakdown(parts: int) -> str:
    """
    Return an even breakdown string for the given number of parts.

    The remainder of 100 / parts goes to the earliest parts, one point
    each, so the result always parses: even_breakdown(3) == "34/33/33".

    Raises:
        ValueError: If parts is not between 1 and 100
    """
    if parts < 1 or parts > PERCENT_TOTAL:
        raise ValueError(f"parts must be between 1 and {PERCENT_TOTAL}, got {parts}")
    base, remainder = divmod(PERCENT_TOTAL, parts)
    shares = [base + 1 if i < remainder else base for i in range(parts)]
    return BREAKDOWN_SEPARATOR.join(str(s) for s in shares)
