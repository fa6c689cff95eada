#
# UOI - Units Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from uoi.units import (
    BINARY, BIT, BYTE, DECIMAL, KILO, NONE, YOTTA,
    Unit, base_unit, find_unit, from_label, lookup, valid_exponents,
)


# Tests ----------------------------------------------------------------------------------------------------------------

class TestUnitTable:

    def test_size(self):
        """Two base units plus decimal/binary × kilo..yotta × bit/byte."""
        assert len(Unit) == 2 + 2 * 8 * 2

    @pytest.mark.parametrize(
        "unit, value",
        [
            pytest.param(Unit.b, 1, id="b"),
            pytest.param(Unit.B, 8, id="B"),
            pytest.param(Unit.Kbit, 1000, id="Kbit"),
            pytest.param(Unit.Kibit, 1024, id="Kibit"),
            pytest.param(Unit.KB, 8000, id="KB"),
            pytest.param(Unit.KiB, 8192, id="KiB"),
            pytest.param(Unit.MB, 8 * 1000 ** 2, id="MB"),
            pytest.param(Unit.GiB, 8 * 1024 ** 3, id="GiB"),
            pytest.param(Unit.YB, 8 * 10 ** 24, id="YB-exact"),
            pytest.param(Unit.YiB, 2 ** 83, id="YiB-exact"),
        ],
    )
    def test_value(self, unit, value):
        assert unit.value == value
        assert isinstance(unit.value, int)

    def test_value_formula(self):
        for unit in Unit:
            assert unit.value == unit.multiplier * unit.system ** unit.exponent

    @pytest.mark.parametrize(
        "unit, label",
        [
            pytest.param(Unit.b, "Bit", id="b"),
            pytest.param(Unit.B, "Byte", id="B"),
            pytest.param(Unit.Kbit, "Kilobit", id="Kbit"),
            pytest.param(Unit.Ybit, "Yottabit", id="Ybit"),
            pytest.param(Unit.MiB, "Mebibyte", id="MiB"),
            pytest.param(Unit.EiB, "Exbibyte", id="EiB"),
        ],
    )
    def test_label(self, unit, label):
        assert unit.label == label

    def test_symbol_and_str(self):
        assert Unit.MB.symbol == "MB"
        assert str(Unit.Kibit) == "Kibit"
        assert repr(Unit.GB) == "<Unit.GB: Gigabyte>"

    def test_lookup_by_symbol_and_value(self):
        assert Unit["MiB"] is Unit.MiB
        assert Unit(8_000_000) is Unit.MB
        assert Unit(1) is Unit.b

    def test_fields(self):
        assert (Unit.B.system, Unit.B.exponent, Unit.B.multiplier) == (NONE, 0, BYTE)
        assert (Unit.Tibit.system, Unit.Tibit.exponent, Unit.Tibit.multiplier) == (BINARY, 4, BIT)
        assert Unit.b.is_base and Unit.B.is_base
        assert not Unit.KB.is_base


class TestLookup:

    @pytest.mark.parametrize("system", [DECIMAL, BINARY])
    @pytest.mark.parametrize("multiplier", [BIT, BYTE])
    def test_family_ordering(self, system, multiplier):
        """Units of a family are ordered by exponent and strictly increasing in value."""
        family = lookup(system, multiplier)
        assert [u.exponent for u in family] == list(range(KILO, YOTTA + 1))
        assert all(lo.value < hi.value for lo, hi in zip(family, family[1:]))
        assert all(u.system == system and u.multiplier == multiplier for u in family)

    def test_descending(self):
        assert lookup(DECIMAL, BYTE, descending=True)[0] is Unit.YB
        assert lookup(DECIMAL, BYTE, descending=True)[-1] is Unit.KB
        assert lookup(DECIMAL, BYTE, descending=True) == lookup(DECIMAL, BYTE)[::-1]

    def test_base_family(self):
        assert lookup(NONE, BIT) == (Unit.b,)
        assert lookup(NONE, BYTE) == (Unit.B,)

    @pytest.mark.parametrize(
        "system, multiplier",
        [
            pytest.param(10, BIT, id="bad-system"),
            pytest.param(DECIMAL, 2, id="bad-multiplier"),
        ],
    )
    def test_invalid(self, system, multiplier):
        with pytest.raises(ValueError, match="must be one of"):
            lookup(system, multiplier)

    @pytest.mark.parametrize(
        "system, multiplier, exponent, expected",
        [
            pytest.param(DECIMAL, BYTE, 2, Unit.MB, id="MB"),
            pytest.param(BINARY, BIT, 8, Unit.Yibit, id="Yibit"),
            pytest.param(NONE, BYTE, 0, Unit.B, id="B"),
            pytest.param(DECIMAL, BYTE, 0, None, id="no-decimal-byte-at-zero"),
            pytest.param(BINARY, BYTE, 9, None, id="beyond-yotta"),
            pytest.param(BINARY, BYTE, -1, None, id="negative"),
        ],
    )
    def test_find_unit(self, system, multiplier, exponent, expected):
        assert find_unit(system, multiplier, exponent) is expected

    def test_valid_exponents(self):
        assert valid_exponents == tuple(range(0, 9))


class TestBaseUnit:

    def test_base_unit(self):
        assert base_unit(BIT) is Unit.b
        assert base_unit(BYTE) is Unit.B

    def test_invalid(self):
        with pytest.raises(ValueError, match="multiplier must be one of"):
            base_unit(16)


class TestLower:

    @pytest.mark.parametrize(
        "unit, expected",
        [
            pytest.param(Unit.YB, Unit.ZB, id="YB"),
            pytest.param(Unit.MB, Unit.KB, id="MB"),
            pytest.param(Unit.KB, Unit.B, id="KB"),
            pytest.param(Unit.MiB, Unit.KiB, id="MiB"),
            pytest.param(Unit.KiB, Unit.B, id="KiB"),
            pytest.param(Unit.Kbit, Unit.b, id="Kbit"),
            pytest.param(Unit.Kibit, Unit.b, id="Kibit"),
            pytest.param(Unit.B, None, id="B"),
            pytest.param(Unit.b, None, id="b"),
        ],
    )
    def test_lower(self, unit, expected):
        assert unit.lower() is expected

    def test_lower_divides_evenly(self):
        """Every step down stays in the bit or byte units and is a whole factor of the system."""
        for unit in Unit:
            lower = unit.lower()
            if lower is not None:
                assert unit.value % lower.value == 0
                assert unit.value // lower.value in (DECIMAL, BINARY)
                assert lower.multiplier == unit.multiplier


class TestFromLabel:

    @pytest.mark.parametrize(
        "label, expected",
        [
            pytest.param("Megabyte", Unit.MB, id="decimal-byte"),
            pytest.param("gibibits", Unit.Gibit, id="binary-bit-plural"),
            pytest.param("  YOTTABIT ", Unit.Ybit, id="upper-padded"),
            pytest.param("Exbibyte", Unit.EiB, id="exbi"),
            pytest.param("Byte", Unit.B, id="byte"),
            pytest.param("bits", Unit.b, id="bits"),
        ],
    )
    def test_from_label(self, label, expected):
        assert from_label(label) is expected

    def test_label_round_trip(self):
        for unit in Unit:
            assert from_label(unit.label) is unit

    @pytest.mark.parametrize(
        "label, match",
        [
            pytest.param("Megaword", "unknown unit label", id="no-base"),
            pytest.param("Kelobyte", "unknown unit prefix", id="bad-prefix"),
            pytest.param("", "unknown unit label", id="empty"),
        ],
    )
    def test_invalid(self, label, match):
        with pytest.raises(ValueError, match=match):
            from_label(label)

    def test_type_error(self):
        with pytest.raises(TypeError, match="label must be a str"):
            from_label(Unit.MB)
