#
# UOI - Tools Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from uoi.tools import class_name, fmt_type, fmt_value
from uoi.units import Unit


# Classes --------------------------------------------------------------------------------------------------------------

class AnyUserClass:
    """A simple class for testing user-defined types"""
    pass


class BrokenRepr:
    def __repr__(self):
        raise RuntimeError("no repr")


# Tests ----------------------------------------------------------------------------------------------------------------

class TestClassName:

    @pytest.mark.parametrize(
        "obj, expected",
        [
            pytest.param(10, "int", id="int-instance"),
            pytest.param(int, "int", id="int-class"),
            pytest.param(AnyUserClass(), "AnyUserClass", id="user-instance"),
            pytest.param(Unit.MB, "Unit", id="enum-member"),
        ],
    )
    def test_name(self, obj, expected):
        assert class_name(obj) == expected

    def test_fully_qualified(self):
        assert class_name(Unit, fully_qualified=True) == "uoi.units.Unit"
        assert class_name(10, fully_qualified=True) == "int"


class TestFmtType:

    @pytest.mark.parametrize(
        "obj, style, expected",
        [
            pytest.param(42, "ascii", "<int>", id="ascii"),
            pytest.param("abc", "unicode-angle", "⟨str⟩", id="unicode-angle"),
            pytest.param(None, "equal", "NoneType", id="equal"),
        ],
    )
    def test_styles(self, obj, style, expected):
        assert fmt_type(obj, style=style) == expected


class TestFmtValue:

    def test_basic(self):
        assert fmt_value(42) == "<int: 42>"
        assert fmt_value(2.5, style="equal") == "float=2.5"
        assert fmt_value([1, 2], style="unicode-angle") == "⟨list: [1, 2]⟩"

    def test_truncate_str(self):
        assert fmt_value("hello world", max_repr=5) == "<str: 'hello...'>"
        assert fmt_value("hello world", max_repr=5, ellipsis="~") == "<str: 'hello~'>"

    def test_truncate_other(self):
        assert fmt_value(list(range(100)), max_repr=6) == "<list: [0, 1,...>"

    def test_ascii_escapes_brackets(self):
        assert fmt_value(Unit.MB) == "<Unit: <Unit.MB: Megabyte\\>>"

    def test_broken_repr(self):
        assert fmt_value(BrokenRepr()) == "<BrokenRepr: <BrokenRepr object (repr failed: RuntimeError)\\>>"
