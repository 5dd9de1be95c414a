"""Text helpers shared by the record comparator."""

import unicodedata
from decimal import ROUND_HALF_EVEN, Decimal
from typing import Callable, Optional


_TWO_PLACES = Decimal("0.01")
_STROKE_LETTERS = str.maketrans({"Đ": "D", "đ": "d"})


def remove_diacritics(text: str) -> str:
    """
    Strip combining marks from text.

    ``Đ`` does not decompose under NFD and is mapped to ``D`` explicitly.
    """
    decomposed = unicodedata.normalize("NFD", text.translate(_STROKE_LETTERS))
    stripped = "".join(c for c in decomposed if unicodedata.category(c) != "Mn")
    return unicodedata.normalize("NFC", stripped)


def fold(text: str) -> str:
    """Diacritic-insensitive, case-insensitive form of text."""
    return remove_diacritics(text).lower()


def contains_either(
    a: str, b: str, fold: Optional[Callable[[str], str]] = str.casefold
) -> bool:
    """True if either string contains the other after applying ``fold``."""
    if fold is not None:
        a, b = fold(a), fold(b)
    return a in b or b in a


def percentage(matched: int, total: int) -> Decimal:
    """``matched / total * 100`` rounded half to even at two places; 0 when total is 0."""
    if total <= 0:
        return Decimal("0")
    value = Decimal(matched) * 100 / Decimal(total)
    return value.quantize(_TWO_PLACES, rounding=ROUND_HALF_EVEN)
