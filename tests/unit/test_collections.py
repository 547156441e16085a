"""
Unit tests for split, join and sortAlpha.
"""

import pytest

from tmplfuncs.runtime.stdlib.collections import (
    SplitResult,
    join,
    sort_alpha,
    split,
    split_list,
    splitn,
)


class TestSplit:
    """Tests for split."""

    def test_fragments(self):
        """Test splitting on a literal delimiter."""
        assert list(split("$", "foo$bar$baz")) == ["foo", "bar", "baz"]

    def test_synthesized_keys(self):
        """Test fragments are reachable as _0, _1, ..."""
        result = split("$", "foo$bar$baz")
        assert result._0 == "foo"
        assert result._2 == "baz"
        assert result["_1"] == "bar"
        assert result[1] == "bar"

    def test_missing_key(self):
        """Test out-of-range keys raise like missing attributes."""
        result = split("$", "foo$bar")
        with pytest.raises(AttributeError):
            result._5
        with pytest.raises(KeyError):
            result["_5"]
        with pytest.raises(KeyError):
            result["first"]

    def test_to_dict(self):
        """Test the keyed view."""
        assert split(",", "a,b").to_dict() == {"_0": "a", "_1": "b"}

    def test_is_list(self):
        """Test the result is a list."""
        result = split(",", "a,b")
        assert isinstance(result, list)
        assert isinstance(result, SplitResult)
        assert len(result) == 2

    def test_literal_delimiter(self):
        """Test the delimiter is not a pattern."""
        assert list(split(".", "a.b.c")) == ["a", "b", "c"]
        assert list(split("|", "a|b")) == ["a", "b"]

    def test_no_delimiter_present(self):
        """Test a single fragment when the delimiter is absent."""
        assert list(split(",", "abc")) == ["abc"]

    def test_empty_text(self):
        """Test an empty string splits into one empty fragment."""
        assert list(split(",", "")) == [""]

    def test_empty_delimiter(self):
        """Test an empty delimiter splits into characters."""
        assert list(split("", "héllo")) == ["h", "é", "l", "l", "o"]

    def test_none_text(self):
        """Test None is treated as empty text."""
        assert list(split(",", None)) == [""]

    @pytest.mark.parametrize(
        "delimiter,text",
        [("$", "foo$bar$baz"), (", ", "a, b, , c"), ("ab", "xxabyyab"), ("-", "-")],
    )
    def test_rejoin(self, delimiter, text):
        """Test rejoining the fragments reconstructs the text."""
        assert delimiter.join(split(delimiter, text)) == text


class TestSplitn:
    """Tests for splitn."""

    def test_two_parts(self):
        """Test the remainder stays in the last fragment."""
        result = splitn("$", 2, "foo$bar$baz")
        assert result._0 == "foo"
        assert result._1 == "bar$baz"

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 10])
    def test_fragment_count(self, n):
        """Test the number of fragments is min(n, occurrences + 1)."""
        text = "a,b,c"
        result = splitn(",", n, text)
        assert len(result) == min(n, text.count(",") + 1)
        assert ",".join(result) == text

    def test_zero(self):
        """Test zero parts gives nothing."""
        assert list(splitn(",", 0, "a,b")) == []

    def test_negative_is_unbounded(self):
        """Test a negative count splits everywhere."""
        assert list(splitn(",", -1, "a,b,c")) == ["a", "b", "c"]

    def test_empty_delimiter(self):
        """Test an empty delimiter keeps the remainder last."""
        assert list(splitn("", 3, "abcde")) == ["a", "b", "cde"]


class TestSplitList:
    """Tests for split_list."""

    def test_plain_list(self):
        """Test the result is a plain list."""
        result = split_list(",", "a,b")
        assert result == ["a", "b"]
        assert type(result) is list


class TestJoin:
    """Tests for join."""

    def test_strings(self):
        """Test joining text."""
        assert join("-", ("a", "b", "c")) == "a-b-c"
        assert join("-", ["a", "b", "c"]) == "a-b-c"

    def test_numbers(self):
        """Test numbers are coerced."""
        assert join("-", [1, 2, 3]) == "1-2-3"

    def test_drops_none(self):
        """Test None elements are dropped."""
        assert join("-", ["1", None, "2"]) == "1-2"
        assert join("-", [1, None, 2]) == "1-2"

    def test_scalar(self):
        """Test a scalar comes back unchanged."""
        assert join("-", "abc") == "abc"

    def test_none(self):
        """Test None joins to empty text."""
        assert join("-", None) == ""

    def test_empty_separator(self):
        """Test joining without a separator."""
        assert join("", ["a", "b"]) == "ab"


class TestSortAlpha:
    """Tests for sort_alpha."""

    def test_strings(self):
        """Test sorting text."""
        assert sort_alpha(["c", "a", "b"]) == ["a", "b", "c"]

    def test_numbers_as_text(self):
        """Test numbers are sorted as text."""
        assert sort_alpha([2, 1, 4, 3]) == ["1", "2", "3", "4"]
        assert sort_alpha([10, 9, 100]) == ["10", "100", "9"]

    def test_join_after_sort(self):
        """Test the result feeds join."""
        assert join("", sort_alpha([2, 1, 4, 3])) == "1234"

    def test_drops_none(self):
        """Test None elements are dropped."""
        assert sort_alpha(["b", None, "a"]) == ["a", "b"]

    def test_scalar(self):
        """Test a scalar gives a single element."""
        assert sort_alpha("zyx") == ["zyx"]
