"""
Tests for normalizing WAQL results into tables.
"""

import pytest

from waql_tool.normalizer import normalize, stringify


class TestNormalize:
    """Tests for normalize()."""

    def test_heterogeneous_rows(self, sample_result):
        """Test first-seen column order and empty strings for missing keys."""
        table = normalize(sample_result)
        assert table.columns == ["a", "b", "c"]
        assert table.rows == [
            {"a": "1", "b": "x", "c": ""},
            {"a": "", "b": "y", "c": "true"},
        ]

    def test_columns_not_sorted(self):
        table = normalize({"return": [{"zeta": 1, "alpha": 2}, {"mid": 3}]})
        assert table.columns == ["zeta", "alpha", "mid"]

    def test_every_row_has_every_column(self):
        table = normalize({"return": [{"a": 1}, {"b": 2}, {}]})
        for row in table.rows:
            assert set(row) == {"a", "b"}
        assert table.rows[2] == {"a": "", "b": ""}

    def test_empty_return_is_none(self):
        assert normalize({"return": []}) is None

    def test_missing_return_is_none(self):
        """Test count-style responses without a return array."""
        assert normalize({"count": 5}) is None

    @pytest.mark.parametrize("value", [None, 5, "text", {"a": 1}])
    def test_non_array_return_is_none(self, value):
        assert normalize({"return": value}) is None

    def test_non_dict_result_is_none(self):
        assert normalize([{"a": 1}]) is None

    def test_skips_non_object_elements(self):
        table = normalize({"return": [1, {"name": "A"}, "x", None, {"id": "B"}]})
        assert table.columns == ["name", "id"]
        assert table.rows == [
            {"name": "A", "id": ""},
            {"name": "", "id": "B"},
        ]

    def test_only_non_objects_gives_empty_table(self):
        table = normalize({"return": [1, 2]})
        assert table.columns == []
        assert len(table) == 0

    def test_same_input_same_table(self, sample_result):
        """Test that normalizing twice yields identical tables."""
        first = normalize(sample_result)
        second = normalize(sample_result)
        assert first == second
        assert first.columns == second.columns

    def test_does_not_modify_input(self, sample_result):
        before = repr(sample_result)
        normalize(sample_result)
        assert repr(sample_result) == before


class TestStringify:
    """Tests for stringify()."""

    @pytest.mark.parametrize("value,expected", [
        ("test", "test"),
        ("", ""),
        (42, "42"),
        (-7, "-7"),
        (1.5, "1.5"),
        (True, "true"),
        (False, "false"),
        (None, "null"),
        ([1, "a"], '[1,"a"]'),
        ({"x": {"y": None}}, '{"x":{"y":null}}'),
        ({"name": "Só"}, '{"name":"Só"}'),
    ])
    def test_values(self, value, expected):
        assert stringify(value) == expected

    def test_nested_object_cell(self):
        table = normalize({"return": [{"parent": {"id": "{1}", "name": "Root"}}]})
        assert table.rows[0]["parent"] == '{"id":"{1}","name":"Root"}'
