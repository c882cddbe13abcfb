"""
Burmese numeral codec used by every numeric form field.

encode() renders a number with Myanmar digit glyphs, decode() reads user input
(Burmese or ASCII digits, with or without thousands separators) back into a
number. decode() is permissive: it never raises and falls back to 0.
"""
import re
from typing import Optional, Union

ASCII_DIGITS = "0123456789"
BURMESE_DIGITS = "၀၁၂၃၄၅၆၇၈၉"

_TO_BURMESE = str.maketrans(ASCII_DIGITS, BURMESE_DIGITS)
_TO_ASCII = str.maketrans(BURMESE_DIGITS, ASCII_DIGITS)

# Everything that is not a digit or a decimal point is dropped before parsing
_NON_NUMERIC = re.compile(r"[^0-9.]")
# parseFloat-style: take the longest leading "digits[.digits]" run
_LEADING_FLOAT = re.compile(r"\d*\.?\d*")


def _as_text(value: Union[int, float, str]) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def encode(value: Optional[Union[int, float, str]]) -> str:
    """Maps each ASCII digit to its Burmese glyph; sign and decimal point pass through."""
    if value is None:
        return ""
    return _as_text(value).translate(_TO_BURMESE)


def decode(text: Optional[Union[str, int, float]]) -> float:
    """Parses Burmese or ASCII digits into a float, returning 0 for anything unparseable."""
    if text is None:
        return 0
    normalized = str(text).translate(_TO_ASCII)
    normalized = _NON_NUMERIC.sub("", normalized.replace(",", ""))

    match = _LEADING_FLOAT.match(normalized)
    candidate = match.group(0) if match else ""
    if not any(ch.isdigit() for ch in candidate):
        return 0
    return float(candidate)


def decode_int(text: Optional[Union[str, int, float]]) -> int:
    """decode() truncated to an integer, for quantity and threshold fields."""
    return int(decode(text))
