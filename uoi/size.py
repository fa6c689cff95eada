#
# UOI Information Size
#

# Standard library -----------------------------------------------------------------------------------------------------
import warnings
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from functools import total_ordering
from typing import Self, overload

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import format_number
from .numeric import div_half_up, is_whole, std_amount
from .tools import fmt_type, fmt_value
from .units import BINARY, DECIMAL, Unit, lookup


# @formatter:off

class SizeConf:
    """
    Defaults of InformationSize conversion and display.

    Attributes:
        PRECISION (int)       : Fractional digits kept by in_unit() before widening to float
        PATTERN (str)         : Numeric pattern of str() and format() without explicit pattern
        REFERENCE_UNIT (Unit) : Fallback unit of unit(), its multiplier selects bit or byte units
        SEPARATOR (str)       : Separator between the formatted number and the unit symbol
        FLOAT_EXACT_LIMIT (int): Float amounts from this magnitude on can not hold every integer
    """
    PRECISION = 5
    PATTERN = "#.##"
    REFERENCE_UNIT = Unit.B
    SEPARATOR = " "
    FLOAT_EXACT_LIMIT = 2 ** 53


size_conf = SizeConf()
# @formatter:on


# Exceptions -----------------------------------------------------------------------------------------------------------

class InvalidAmountError(ValueError):
    """Amount is NaN or infinite, or the size it leads to would be negative."""


class FractionalBitError(ValueError):
    """Amount and unit combined do not come out as a whole number of bits."""


class DivisionByZeroError(ZeroDivisionError):
    """Information size divided by zero."""


class PrecisionWarning(UserWarning):
    """Float amount is beyond the range where floats represent every integer."""


# Classes --------------------------------------------------------------------------------------------------------------

@total_ordering
@dataclass(frozen=True, eq=False)
class InformationSize:
    """
    Immutable quantity of digital information, stored as an exact number of bits.

    Sizes are created from an amount and a unit of information; fractional amounts are broken down
    through the smaller units of the same family until they are whole, so 2.5 MB is exactly
    2500 KB = 20,000,000 bits while 2.5 bits is rejected. The size can be read back in any unit,
    displayed in its best fitting unit and combined arithmetically. Two sizes are equal when they hold
    the same number of bits, whatever units they were created with.

    For most use cases, prefer the factory class method InformationSize.of() or the named
    constructors bits(), bytes_(), megabytes() and friends. Calling InformationSize(size) directly
    restores a size from its exact bit count, the lossless form to serialize.

    Examples:
        size = InformationSize.of(250, Unit.MB)
        size.in_unit(Unit.MiB)           # 238.41858
        size.format(Unit.GB, "%.2f")     # '0.25 GB'
        str(InformationSize.of(2.5e9))   # '312.5 MB'
        InformationSize.of(500, Unit.KB) == InformationSize.of(0.5, Unit.MB)  # True
    """

    size: int

    def __post_init__(self):
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise TypeError(f"size must be an int number of bits, got {fmt_type(self.size)}")
        if self.size < 0:
            raise InvalidAmountError(f"Amount must be greater than or equal to zero, got {self.size} bits.")

    @classmethod
    def of(cls, amount: int | float | Decimal | Fraction, unit: Unit = Unit.b) -> Self:
        """Create a size from an amount of units.

        When the amount is fractional it is scaled down one unit at a time within the unit's
        family (MB -> KB -> B) until it is whole. What is still fractional at the base unit, b or B,
        can not be represented.

        Args:
            amount: Number of units, must be finite and non-negative.
            unit: Unit of the amount, bits by default.

        Raises:
            InvalidAmountError: If amount is NaN, infinite or negative.
            FractionalBitError: If amount in unit is not a whole number of bits.
            TypeError: If amount is not numeric or unit is not a Unit.

        Warns:
            PrecisionWarning: If amount is a float beyond the range where every integer is a float.

        Examples:
            InformationSize.of(1024).size            # 1024
            InformationSize.of(2.5, Unit.MB).size    # 20_000_000
            InformationSize.of(2.5)                  # raises FractionalBitError
        """
        if not isinstance(unit, Unit):
            raise TypeError(f"unit must be a Unit, got {fmt_type(unit)}")

        exact = std_amount(amount)
        if isinstance(exact, float):
            raise InvalidAmountError(f"Amount can not be infinite or NaN, got {fmt_value(amount)}.")
        if exact < 0:
            raise InvalidAmountError(f"Amount must be greater than or equal to zero, got {fmt_value(amount)}.")
        if isinstance(amount, float) and amount >= size_conf.FLOAT_EXACT_LIMIT:
            warnings.warn(
                f"Float amount {amount!r} exceeds 2**53 where floats skip integers, the literal it was "
                f"written from may have been rounded to it. Pass an int for an exact size.",
                PrecisionWarning,
                stacklevel=2,
            )

        given = unit
        while not is_whole(exact):
            lower = unit.lower()
            if lower is None:
                raise FractionalBitError(f"Amount cannot be a fraction of a Bit: {amount!r} {given.symbol}.")
            exact *= unit.value // lower.value
            unit = lower

        return cls(int(exact) * unit.value)

    # ----- Conversion -----

    def in_unit(self, unit: Unit) -> float:
        """
        Returns the size in the requested unit.

        The exact quotient is rounded half-up to SizeConf.PRECISION fractional digits before the
        conversion to float, so binary floating-point division artifacts never show up.

        Examples:
            InformationSize.of(250, Unit.MB).in_unit(Unit.GB)          # 0.25
            InformationSize.of(512000, Unit.KiB).in_unit(Unit.MiB)     # 500.0
        """
        return float(self.in_unit_exact(unit))

    def in_unit_exact(self, unit: Unit) -> Decimal:
        """The size in the requested unit as a Decimal rounded half-up to SizeConf.PRECISION digits."""
        if not isinstance(unit, Unit):
            raise TypeError(f"unit must be a Unit, got {fmt_type(unit)}")
        return div_half_up(self.size, unit.value, size_conf.PRECISION)

    def unit(self, reference: Unit | None = None) -> Unit:
        """
        Find the unit best suited to represent this size.

        The number system is inferred first: decimal if the size in units of 1000 has at most two
        decimal places, otherwise binary if it has at most two decimal places in units of 1024,
        otherwise decimal. Then the units of that system with the reference unit's multiplier are
        scanned from the largest down, and the first one fitting into the size at least once wins.
        If none fits, the reference unit itself is returned.

        Args:
            reference: Its multiplier selects bit or byte units and it is the fallback.
                       Defaults to SizeConf.REFERENCE_UNIT, the byte.

        Examples:
            InformationSize.of(250_000_000_000).unit()     # Unit.GB
            InformationSize.of(1024).unit(Unit.b)          # Unit.Kibit
            InformationSize.of(4).unit()                   # Unit.B
        """
        reference = size_conf.REFERENCE_UNIT if reference is None else reference
        if not isinstance(reference, Unit):
            raise TypeError(f"reference must be a Unit, got {fmt_type(reference)}")

        for unit in lookup(self._system(), reference.multiplier, descending=True):
            if self.size >= unit.value:
                return unit
        return reference

    def _system(self) -> int:
        # Ties go to decimal, as does a size that is round in neither system
        if is_whole(Fraction(self.size * 100, DECIMAL)):
            return DECIMAL
        if is_whole(Fraction(self.size * 100, BINARY)):
            return BINARY
        return DECIMAL

    # ----- Formatting -----

    @overload
    def format(self, pattern: str) -> str: ...

    @overload
    def format(self, unit: Unit, pattern: str) -> str: ...

    def format(self, unit: Unit | str | None = None, pattern: str | None = None) -> str:
        """
        Format the size in a unit, appending the unit symbol.

        Called with a single pattern the best unit, see unit(), is used. The pattern is a printf
        ("%.2f"), format-spec (".2f") or decimal ("#.##") pattern, rounding is half-up.

        Examples:
            size = InformationSize.of(250, Unit.MB)
            size.format(Unit.GB, "%.2f")     # '0.25 GB'
            size.format(Unit.GB, "#.#")      # '0.3 GB'
            size.format("#")                 # '250 MB'
        """
        if isinstance(unit, str) and pattern is None:
            unit, pattern = None, unit

        unit = self.unit() if unit is None else unit
        pattern = size_conf.PATTERN if pattern is None else pattern
        number = format_number(self.in_unit_exact(unit), pattern)
        return f"{number}{size_conf.SEPARATOR}{unit.symbol}"

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec) if format_spec else str(self)

    def __str__(self) -> str:
        return self.format(self.unit(), size_conf.PATTERN)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size})"

    # ----- Arithmetic -----

    def add(self, other: "InformationSize") -> Self:
        """Sum of two sizes."""
        if not isinstance(other, InformationSize):
            raise TypeError(f"can only add an InformationSize, got {fmt_type(other)}")
        return type(self)(self.size + other.size)

    def subtract(self, other: "InformationSize") -> Self:
        """
        Difference of two sizes.

        Raises:
            InvalidAmountError: If other is larger than this size, sizes are never negative.
        """
        if not isinstance(other, InformationSize):
            raise TypeError(f"can only subtract an InformationSize, got {fmt_type(other)}")
        if other.size > self.size:
            raise InvalidAmountError(f"Can not subtract {other!r} from the smaller {self!r}.")
        return type(self)(self.size - other.size)

    def multiply(self, factor: int | float | Decimal | Fraction) -> Self:
        """
        Size scaled by a factor.

        The product is exact, floats taken by their repr(), and must be a whole number of bits.

        Raises:
            InvalidAmountError: If factor is NaN or infinite, or the product is negative.
            FractionalBitError: If the product is not a whole number of bits.
        """
        return self._scale(self._std_scalar(factor), factor)

    def divide(self, divisor: int | float | Decimal | Fraction) -> Self:
        """
        Size divided by a scalar.

        Raises:
            DivisionByZeroError: If divisor is zero.
            InvalidAmountError: If divisor is NaN or infinite, or the quotient is negative.
            FractionalBitError: If the quotient is not a whole number of bits.
        """
        exact = self._std_scalar(divisor)
        if exact == 0:
            raise DivisionByZeroError(f"Can not divide {self!r} by zero.")
        return self._scale(1 / exact, divisor)

    def equals(self, other: object) -> bool:
        """True if other holds the same number of bits."""
        return isinstance(other, InformationSize) and self.size == other.size

    def _scale(self, factor: Fraction, operand) -> Self:
        scaled = self.size * factor
        if scaled < 0:
            raise InvalidAmountError(f"Size can not become negative: {self!r} scaled by {fmt_value(operand)}.")
        if not is_whole(scaled):
            raise FractionalBitError(
                f"Amount cannot be a fraction of a Bit: {self!r} scaled by {fmt_value(operand)}."
            )
        return type(self)(int(scaled))

    @staticmethod
    def _std_scalar(value) -> Fraction:
        exact = std_amount(value)
        if isinstance(exact, float):
            raise InvalidAmountError(f"Scalar can not be infinite or NaN, got {fmt_value(value)}.")
        return exact

    # ----- Operators -----

    def __add__(self, other):
        if not isinstance(other, InformationSize):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, InformationSize):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, InformationSize) or not _is_scalar(other):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, InformationSize) or not _is_scalar(other):
            return NotImplemented
        return self.divide(other)

    def __eq__(self, other):
        if not isinstance(other, InformationSize):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other):
        if not isinstance(other, InformationSize):
            return NotImplemented
        return self.size < other.size

    def __hash__(self):
        return hash(self.size)


# Methods --------------------------------------------------------------------------------------------------------------

def _is_scalar(value) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, Decimal, Fraction)) or hasattr(value, "__index__") or hasattr(
        value, "__float__"
    )


def bits(amount) -> InformationSize:
    return InformationSize.of(amount, Unit.b)


def kilobits(amount) -> InformationSize:
    return InformationSize.of(amount, Unit.Kbit)


def megabits(amount) -> InformationSize:
    return InformationSize.of(amount, Unit.Mbit)


def gigabits(amount) -> InformationSize:
    return InformationSize.of(amount, Unit.Gbit)


def bytes_(amount) -> InformationSize:
    """Size of an amount of bytes, the trailing underscore keeps the builtin bytes usable."""
    return InformationSize.of(amount, Unit.B)


def kilobytes(amount) -> InformationSize:
    return InformationSize.of(amount, Unit.KB)


def megabytes(amount) -> InformationSize:
    return InformationSize.of(amount, Unit.MB)


def gigabytes(amount) -> InformationSize:
    return InformationSize.of(amount, Unit.GB)
