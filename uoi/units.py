#
# UOI Units of Information
#

# Standard library -----------------------------------------------------------------------------------------------------
from enum import Enum, unique

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import BiDirectionalMap
from .tools import fmt_type, fmt_value

# @formatter:off

# Number systems
NONE = 1
DECIMAL = 1000
BINARY = 1024

# Magnitudes, the power the number system is raised to
KILO, MEGA, GIGA, TERA, PETA, EXA, ZETTA, YOTTA = range(1, 9)

# Multipliers, the bit value of the base unit
BIT = 1
BYTE = 8

decimal_prefixes = BiDirectionalMap({
    KILO: "Kilo", MEGA: "Mega", GIGA: "Giga", TERA: "Tera",
    PETA: "Peta", EXA: "Exa", ZETTA: "Zetta", YOTTA: "Yotta",
})

binary_prefixes = BiDirectionalMap({
    KILO: "Kibi", MEGA: "Mebi", GIGA: "Gibi", TERA: "Tebi",
    PETA: "Pebi", EXA: "Exbi", ZETTA: "Zebi", YOTTA: "Yobi",
})

valid_systems = (NONE, DECIMAL, BINARY)
valid_multipliers = (BIT, BYTE)
valid_exponents = (0, *decimal_prefixes.keys())
# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

# @formatter:off
@unique
class Unit(Enum):
    """
    Units of information.

    Each member is an immutable record of a number system, an exponent and a bit multiplier.
    The member value is the exact size of the unit in bits:

        value = multiplier × system ** exponent

    Decimal units follow the International System of Units, binary units follow ISO/IEC 80000.
    Member names are the unit symbols, so Unit["MiB"] and Unit(8_388_608) both return Unit.MiB.

    Attributes:
        label (str)      : Human-readable name, e.g. "Mebibyte"
        system (int)     : Number system base - NONE, DECIMAL or BINARY
        exponent (int)   : Power the system is raised to, 0 for the base units
        multiplier (int) : BIT for bit units, BYTE for byte units
    """
    b = (NONE, 0, BIT)
    B = (NONE, 0, BYTE)

    # Decimal Bit units (International system of Units, SI)
    Kbit = (DECIMAL, KILO, BIT)
    Mbit = (DECIMAL, MEGA, BIT)
    Gbit = (DECIMAL, GIGA, BIT)
    Tbit = (DECIMAL, TERA, BIT)
    Pbit = (DECIMAL, PETA, BIT)
    Ebit = (DECIMAL, EXA, BIT)
    Zbit = (DECIMAL, ZETTA, BIT)
    Ybit = (DECIMAL, YOTTA, BIT)

    # Binary Bit units (ISO/IEC 80000)
    Kibit = (BINARY, KILO, BIT)
    Mibit = (BINARY, MEGA, BIT)
    Gibit = (BINARY, GIGA, BIT)
    Tibit = (BINARY, TERA, BIT)
    Pibit = (BINARY, PETA, BIT)
    Eibit = (BINARY, EXA, BIT)
    Zibit = (BINARY, ZETTA, BIT)
    Yibit = (BINARY, YOTTA, BIT)

    # Decimal Byte units (Metric system)
    KB = (DECIMAL, KILO, BYTE)
    MB = (DECIMAL, MEGA, BYTE)
    GB = (DECIMAL, GIGA, BYTE)
    TB = (DECIMAL, TERA, BYTE)
    PB = (DECIMAL, PETA, BYTE)
    EB = (DECIMAL, EXA, BYTE)
    ZB = (DECIMAL, ZETTA, BYTE)
    YB = (DECIMAL, YOTTA, BYTE)

    # Binary Byte units (ISO/IEC 80000)
    KiB = (BINARY, KILO, BYTE)
    MiB = (BINARY, MEGA, BYTE)
    GiB = (BINARY, GIGA, BYTE)
    TiB = (BINARY, TERA, BYTE)
    PiB = (BINARY, PETA, BYTE)
    EiB = (BINARY, EXA, BYTE)
    ZiB = (BINARY, ZETTA, BYTE)
    YiB = (BINARY, YOTTA, BYTE)
# @formatter:on

    def __new__(cls, system: int, exponent: int, multiplier: int):
        obj = object.__new__(cls)
        # Integer power keeps the bit value exact up to YiB
        obj._value_ = multiplier * system ** exponent
        obj.system = system
        obj.exponent = exponent
        obj.multiplier = multiplier
        return obj

    def __repr__(self) -> str:
        return f"<Unit.{self.name}: {self.label}>"

    def __str__(self) -> str:
        return self.name

    @property
    def label(self) -> str:
        """Human-readable unit name, e.g. 'Kilobyte' or 'Gibibit'."""
        base = "Bit" if self.multiplier == BIT else "Byte"
        if self.exponent == 0:
            return base
        prefixes = decimal_prefixes if self.system == DECIMAL else binary_prefixes
        return f"{prefixes[self.exponent]}{base.lower()}"

    @property
    def symbol(self) -> str:
        """Unit abbreviation displayed after formatted numbers, e.g. 'MB'."""
        return self.name

    @property
    def is_base(self) -> bool:
        return self.exponent == 0

    def lower(self) -> "Unit | None":
        """
        The next smaller unit of this unit's family, used to break down fractional amounts.

        Within a (system, multiplier) family the exponent drops by one; exponent 1 drops to the base
        unit of the same multiplier (KB -> B, Kibit -> b). Base units have nothing below them.

        Examples:
            Unit.MB.lower() is Unit.KB
            Unit.KiB.lower() is Unit.B
            Unit.B.lower() is None
        """
        if self.is_base:
            return None
        if self.exponent == 1:
            return base_unit(self.multiplier)
        return find_unit(self.system, self.multiplier, self.exponent - 1)


# Methods --------------------------------------------------------------------------------------------------------------

def base_unit(multiplier: int) -> Unit:
    """Return the base unit for the multiplier, Unit.b for BIT and Unit.B for BYTE."""
    if multiplier == BIT:
        return Unit.b
    if multiplier == BYTE:
        return Unit.B
    raise ValueError(f"multiplier must be one of {valid_multipliers}, got {fmt_value(multiplier)}")


def lookup(system: int, multiplier: int, *, descending: bool = False) -> tuple[Unit, ...]:
    """
    All units matching both the number system and the multiplier, ordered by exponent.

    Examples:
        >>> lookup(DECIMAL, BYTE)[:2]
        (<Unit.KB: Kilobyte>, <Unit.MB: Megabyte>)
        >>> lookup(BINARY, BIT, descending=True)[0]
        <Unit.Yibit: Yobibit>

    Raises:
        ValueError: If system or multiplier is not a known one.
    """
    if system not in valid_systems:
        raise ValueError(f"system must be one of {valid_systems}, got {fmt_value(system)}")
    if multiplier not in valid_multipliers:
        raise ValueError(f"multiplier must be one of {valid_multipliers}, got {fmt_value(multiplier)}")
    return _families[(system, multiplier)][::-1 if descending else 1]


def find_unit(system: int, multiplier: int, exponent: int) -> Unit | None:
    """Exact match on system, multiplier and exponent, or None."""
    if exponent not in valid_exponents:
        return None
    for unit in lookup(system, multiplier):
        if unit.exponent == exponent:
            return unit
    return None


def from_label(label: str) -> Unit:
    """
    Unit named by its label, case-insensitive, singular or plural.

    Examples:
        >>> from_label("Megabyte")
        <Unit.MB: Megabyte>
        >>> from_label("gibibits")
        <Unit.Gibit: Gibibit>
        >>> from_label("Byte")
        <Unit.B: Byte>

    Raises:
        TypeError: If label is not a str.
        ValueError: If label names no unit.
    """
    if not isinstance(label, str):
        raise TypeError(f"label must be a str, got {fmt_type(label)}")

    text = label.strip().lower().removesuffix("s")
    for base, multiplier in (("bit", BIT), ("byte", BYTE)):
        if text.endswith(base):
            prefix = text.removesuffix(base).capitalize()
            break
    else:
        raise ValueError(f"unknown unit label {fmt_value(label)}")

    if not prefix:
        return base_unit(multiplier)
    for system, prefixes in ((DECIMAL, decimal_prefixes), (BINARY, binary_prefixes)):
        if prefixes.has_value(prefix):
            return find_unit(system, multiplier, prefixes.get_key(prefix))
    raise ValueError(f"unknown unit prefix {fmt_value(prefix)} in label {fmt_value(label)}")


def _build_families() -> dict[tuple[int, int], tuple[Unit, ...]]:
    families: dict[tuple[int, int], list[Unit]] = {}
    for unit in Unit:
        families.setdefault((unit.system, unit.multiplier), []).append(unit)
    return {key: tuple(sorted(units, key=lambda u: u.exponent)) for key, units in families.items()}


_families = _build_families()


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Ensure the prefix tables cover the same magnitudes.
if set(decimal_prefixes.keys()) != set(binary_prefixes.keys()):
    raise AssertionError(
        "Configuration Error: The exponent keys for decimal_prefixes and binary_prefixes must be identical."
    )

# Ensure unit values strictly increase with the exponent inside every family.
for _family in _families.values():
    if any(lo.value >= hi.value for lo, hi in zip(_family, _family[1:])):
        raise AssertionError(f"Configuration Error: Unit values must increase with exponent: {_family}")
