"""
Timestamp utility functions for parsing and formatting subtitle timecodes.

This module provides utilities for:
- Parsing "HH:MM:SS,fff" / "HH:MM:SS.fff" timecodes to seconds
- Formatting seconds back to a timecode with a chosen precision and separator
- Shifting every timecode found in a block of text by an offset
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional


TIMECODE_PATTERN = re.compile(r'(\d+):(\d+):(\d+)([,.])(\d+)', re.ASCII)


def parse_timestamp(text: str) -> Optional[float]:
    """
    Parse the first timecode found in text to seconds.

    The fractional group is read as a real decimal fraction, so "00:00:01.5"
    is 1.5 seconds and "00:00:01,0500" is 1.05 seconds. Minutes and seconds
    are not range checked ("00:99:99,000" folds into 100m39s).

    Returns None when text holds no timecode, or one too large for a float.

    Examples:
        "01:02:03,456" -> 3723.456
        "00:00:01,000 --> 00:00:02,500" -> 1.0
        "not a time" -> None
    """
    match = TIMECODE_PATTERN.search(text)
    if not match:
        return None

    # float() has no digit limit; overlong fields become inf
    hours = float(match.group(1))
    minutes = float(match.group(2))
    seconds = float(f"{match.group(3)}.{match.group(5)}")

    result = hours * 3600 + minutes * 60 + seconds
    if not math.isfinite(result):
        return None
    return result


def format_timestamp(value: float, digits: int = 3, separator: str = '.') -> str:
    """
    Convert seconds to a timecode: HH:MM:SS<separator><fraction>.

    The value is rounded half-up to `digits` decimals before it is split into
    fields, so 59.9996 becomes "00:01:00.000". Hours widen past two digits
    instead of wrapping. With digits=0 the fraction is
    empty and the timecode ends in the separator ("00:00:05.").

    Negative and non-finite values are not supported.
    """
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # Room for every integer digit plus the requested fraction
        ctx.prec = max(exact.adjusted() + 1, 1) + digits + 1
        rounded = exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    whole_part, _, fraction = f"{rounded:f}".partition('.')

    whole = int(whole_part)
    hours = whole // 3600
    minutes = (whole % 3600) // 60
    secs = whole % 60

    return f"{hours:02d}:{minutes:02d}:{secs:02d}{separator}{fraction}"


def shift_timestamps(text: str, offset: float) -> str:
    """
    Move every timecode in text by offset seconds.

    Each timecode keeps its own separator and fraction width; results below
    zero are clamped to 00:00:00. Text around the timecodes is left untouched.

    Example:
        shift_timestamps("00:00:01,000 --> 00:00:02,500", 1.5)
        -> "00:00:02,500 --> 00:00:04,000"
    """
    def _shift(match: re.Match) -> str:
        value = parse_timestamp(match.group(0))
        if value is None:
            return match.group(0)
        shifted = max(value + offset, 0.0)
        return format_timestamp(shifted, len(match.group(5)), match.group(4))

    return TIMECODE_PATTERN.sub(_shift, text)
