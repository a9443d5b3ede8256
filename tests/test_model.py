"""
Tests for the table model: lookup, upsert, accessors and the color helper.
"""

import pytest
from eu4data.parser import parse, Table, Text, Array, Entry, color
from eu4data.errors import Eu4DataError, TypeMismatchError


class TestTableLookup:
    """Test get / get_all / get_text."""

    def test_get_first_match(self):
        """get returns the first entry's value for duplicate keys."""
        table = parse("add_core = SWE add_core = DAN")
        assert table.get("add_core") == Text("SWE")

    def test_get_missing(self):
        """A missing key is None, not an error."""
        assert parse("foo = bar").get("nope") is None

    def test_get_does_not_match_keyless(self):
        """Keyless entries are never returned by get."""
        table = parse("foo = { a b = c }").get("foo")
        assert table.get("a") is None
        assert table.keys() == ["b"]

    def test_get_text(self):
        """get_text returns scalar text or None."""
        table = parse("owner = SWE")
        assert table.get_text("owner") == "SWE"
        assert table.get_text("controller") is None

    def test_iteration(self):
        """Tables iterate over their entries in order."""
        table = parse("a = 1 b = 2")
        assert [e.key for e in table] == ["a", "b"]
        assert len(table) == 2


class TestTableSet:
    """Test the set upsert primitive."""

    def test_set_appends_new_key(self):
        """Setting an absent key appends at the end."""
        table = parse("a = 1 b = 2")
        table.set("c", Text("3"))
        assert [e.key for e in table.entries] == ["a", "b", "c"]

    def test_set_overwrites_in_place(self):
        """Setting an existing key keeps its position and a single entry."""
        table = parse("a = 1 k = 2 b = 3")
        table.set("k", Text("first"))
        table.set("k", Text("second"))
        assert [e.key for e in table.entries] == ["a", "k", "b"]
        assert table.get("k") == Text("second")

    def test_set_overwrites_first_duplicate(self):
        """Only the first of duplicate keys is overwritten."""
        table = parse("add_core = SWE add_core = DAN")
        table.set("add_core", Text("NOR"))
        assert table.get_all("add_core") == [Text("NOR"), Text("DAN")]

    def test_set_changes_value_type(self):
        """A scalar may be replaced by a block."""
        table = parse("color = red")
        table.set("color", color(1, 2, 3))
        assert isinstance(table.get("color"), Array)

    def test_build_from_scratch(self):
        """Tables can be built with Table() and set."""
        table = Table()
        table.set("tag", Text("SWE"))
        table.set("color", color(24, 55, 143))
        assert table.entries == [
            Entry("tag", Text("SWE")),
            Entry("color", Array([Text("24"), Text("55"), Text("143")])),
        ]

    def test_set_empty_key(self):
        """Keys must be non-empty."""
        with pytest.raises(ValueError):
            Table().set("", Text("x"))


class TestCopy:
    """Test independent copies."""

    def test_copy_is_deep(self):
        """Mutating a copy leaves the original untouched."""
        original = parse("owner = SWE history = { controller = DAN }")
        clone = original.copy()
        clone.set("owner", Text("DAN"))
        clone.get("history").set("controller", Text("SWE"))
        assert original.get_text("owner") == "SWE"
        assert original.get("history").get_text("controller") == "DAN"
        assert clone != original


class TestAccessors:
    """Test as_text and the typed mismatch error."""

    def test_text_as_text(self):
        assert Text("SWE").as_text() == "SWE"

    def test_table_as_text(self):
        """A table has no scalar text."""
        with pytest.raises(TypeMismatchError) as exc:
            parse("foo = { a = b }").get("foo").as_text()
        assert exc.value.actual == "table"

    def test_array_as_text(self):
        """An array has no scalar text."""
        with pytest.raises(TypeMismatchError) as exc:
            parse("foo = { a b }").get("foo").as_text()
        assert exc.value.actual == "array"

    def test_get_text_on_block(self):
        """get_text on a block value raises a recoverable error."""
        with pytest.raises(Eu4DataError):
            parse("foo = {}").get_text("foo")


class TestColor:
    """Test the color helper."""

    def test_decimal_rendering(self):
        """Components render as decimal text."""
        assert color(0, 128, 255) == Array([Text("0"), Text("128"), Text("255")])

    def test_out_of_range(self):
        """Components must fit in a byte."""
        with pytest.raises(ValueError):
            color(0, 256, 0)
        with pytest.raises(ValueError):
            color(-1, 0, 0)

    def test_matches_parsed_color(self):
        """A built color equals the parsed form."""
        assert parse("color = { 24 55 143 }").get("color") == color(24, 55, 143)
