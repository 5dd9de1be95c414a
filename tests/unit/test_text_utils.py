"""Unit tests for the comparison text helpers."""

from decimal import Decimal

import pytest

from contract_validation.comparison.text_utils import (
    contains_either,
    fold,
    percentage,
    remove_diacritics,
)


class TestRemoveDiacritics:
    """Tests for diacritic removal."""

    def test_vietnamese_marks_are_removed(self):
        """Tone and vowel marks are stripped."""
        assert remove_diacritics("Tết Nguyên Đán") == "Tet Nguyen Dan"

    def test_d_with_stroke_is_mapped(self):
        """Đ has no combining form and is mapped to D."""
        assert remove_diacritics("Đường đi") == "Duong di"

    def test_plain_ascii_is_unchanged(self):
        assert remove_diacritics("Kho A") == "Kho A"


class TestFold:
    """Tests for diacritic and case folding."""

    def test_tet_matches_upper_case_ascii(self):
        """'Tết Nguyên Đán' and 'TET NGUYEN DAN' match after folding."""
        assert contains_either("Tết Nguyên Đán", "TET NGUYEN DAN", fold=fold)

    def test_fold_lowercases(self):
        assert fold("QUỐC KHÁNH") == "quoc khanh"


class TestContainsEither:
    """Tests for two-way containment."""

    def test_either_direction(self):
        """Containment is checked both ways."""
        assert contains_either("Kho A", "Kho A - Bình Dương")
        assert contains_either("Kho A - Bình Dương", "kho a")

    def test_unrelated(self):
        assert not contains_either("Kho A", "Nhà máy B")

    def test_without_fold_is_case_sensitive(self):
        """Passing fold=None compares the raw strings."""
        assert not contains_either("KHO A", "kho a", fold=None)


class TestPercentage:
    """Tests for the rounded percentage."""

    @pytest.mark.parametrize(
        "matched,total,expected",
        [
            (0, 0, Decimal("0")),
            (3, 3, Decimal("100.00")),
            (2, 3, Decimal("66.67")),
            (1, 3, Decimal("33.33")),
            (1, 8, Decimal("12.50")),
            (0, 5, Decimal("0.00")),
            (1, 32, Decimal("3.12")),
            (5, 32, Decimal("15.62")),
            (3, 32, Decimal("9.38")),
        ],
    )
    def test_values(self, matched, total, expected):
        """Percentages are rounded half to even at two places."""
        assert percentage(matched, total) == expected

    def test_bounds(self):
        """The result stays within [0, 100]."""
        for total in range(1, 20):
            for matched in range(total + 1):
                assert Decimal("0") <= percentage(matched, total) <= Decimal("100")
