"""Tests for sheet id extraction."""

import pytest

from sheetscan.scanner.sheet import sheet_id, split_stem


class TestSplitStem:
    """Tests for split_stem function."""

    def test_simple_extension(self):
        assert split_stem("A101.pdf") == "A101"

    def test_multiple_dots(self):
        assert split_stem("A101.1.pdf") == "A101.1"

    def test_no_extension(self):
        assert split_stem("README") == "README"

    def test_leading_dot_is_not_extension(self):
        assert split_stem(".hidden") == ".hidden"


class TestSheetId:
    """Tests for sheet_id function."""

    def test_simple_sheet(self):
        assert sheet_id("A101.pdf") == "a101"

    def test_revision_suffix_groups_with_base_sheet(self):
        assert sheet_id("a101-Rev2.PDF") == "a101"
        assert sheet_id("A101-Rev2.pdf") == sheet_id("A101.pdf")

    def test_dotted_sheet_number(self):
        assert sheet_id("A101.1.pdf") == "a101.1"

    def test_hyphenated_sheet_number(self):
        assert sheet_id("S1-2.pdf") == "s1-2"

    def test_word_glued_to_number_keeps_full_number(self):
        assert sheet_id("A101Rev2.pdf") == "a101"
        assert sheet_id("A102Rev1.pdf") == "a102"
        assert sheet_id("M2.01Rev.pdf") == "m2.01"
        assert sheet_id("AB12CD.pdf") == "ab12"

    def test_dangling_separator_dropped(self):
        assert sheet_id("A101-.pdf") == "a101"
        assert sheet_id("A101-B.pdf") == "a101-b"

    def test_trailing_letter(self):
        assert sheet_id("A101B.pdf") == "a101b"
        assert sheet_id("A101b-Rev3.pdf") == "a101b"

    def test_three_letter_prefix(self):
        assert sheet_id("FPA200 Fire Plan.pdf") == "fpa200"

    def test_four_letter_prefix_falls_back(self):
        assert sheet_id("ABCD100.pdf") == "abcd100"

    def test_fallback_to_stem(self):
        assert sheet_id("readme.txt") == "readme"
        assert sheet_id("Project Schedule.XLSX") == "project schedule"

    def test_leading_digit_falls_back(self):
        assert sheet_id("101A.pdf") == "101a"

    @pytest.mark.parametrize("name", ["", ".", "..", "a", ".pdf"])
    def test_total(self, name):
        assert isinstance(sheet_id(name), str)
