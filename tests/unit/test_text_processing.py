"""Unit tests for the line-split rule and structural comparison."""

import pytest

from cvsite.utils.text_processing import compare_structured, is_blank, join_lines, split_lines


@pytest.mark.unit
def test_join_lines():
    assert join_lines(["Python", "SQL"]) == "Python\nSQL"
    assert join_lines([]) == ""
    assert join_lines(None) == ""


@pytest.mark.unit
def test_join_lines_converts_non_strings():
    assert join_lines(["a", 3]) == "a\n3"


@pytest.mark.unit
def test_split_lines_drops_blank_lines():
    assert split_lines("Did X\n\n   \nDid Y\n") == ["Did X", "Did Y"]


@pytest.mark.unit
def test_split_lines_keeps_lines_as_typed():
    """Only whole blank lines are dropped; surrounding spaces stay."""
    assert split_lines("  indented \nplain") == ["  indented ", "plain"]


@pytest.mark.unit
def test_split_lines_handles_crlf():
    assert split_lines("one\r\ntwo\r\n\r\nthree") == ["one", "two", "three"]


@pytest.mark.unit
def test_split_lines_empty():
    assert split_lines("") == []
    assert split_lines("\n\n") == []


@pytest.mark.unit
def test_join_then_split_is_identity_without_blank_items():
    items = ["Led the rewrite", "Cut latency by 40%"]
    assert split_lines(join_lines(items)) == items


@pytest.mark.unit
def test_is_blank():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank("  \t")
    assert not is_blank("x")
    assert not is_blank(0)


@pytest.mark.unit
def test_compare_structured_identical():
    data = {"a": [1, {"b": "c"}], "d": None}
    assert compare_structured(data, {"d": None, "a": [1, {"b": "c"}]}) == ([], 0)


@pytest.mark.unit
def test_compare_structured_reports_value_change():
    diffs, num = compare_structured({"a": [1, 2]}, {"a": [1, 3]})

    assert num == 1
    assert diffs == ["$.a[1]: expected 2, got 3"]


@pytest.mark.unit
def test_compare_structured_reports_missing_and_unexpected_keys():
    diffs, num = compare_structured({"a": 1, "b": 2}, {"a": 1, "c": 3})

    assert num == 2
    assert "$.b: missing" in diffs
    assert "$.c: unexpected key" in diffs


@pytest.mark.unit
def test_compare_structured_reports_length_mismatch():
    diffs, num = compare_structured({"items": [1, 2, 3]}, {"items": [1, 2]})

    assert num == 1
    assert diffs == ["$.items: expected 3 items, got 2"]
