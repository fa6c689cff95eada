"""
Standardize numeric amounts into exact rationals and round them exactly.

Amounts given as int, float, Decimal, Fraction or numeric duck types (NumPy scalars and the like)
are turned into fractions.Fraction so that wholeness tests and scaling by unit factors never suffer
from binary floating-point artifacts.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from decimal import Decimal
from fractions import Fraction

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type


# Methods --------------------------------------------------------------------------------------------------------------

def std_amount(value) -> Fraction | float:
    """
    Convert a numeric amount to an exact Fraction.

    Whole floats are taken as the exact integer they hold, so 2.0 ** 60 stays 2 ** 60. Other finite
    floats are taken by their shortest decimal representation, the one repr() shows, so 0.1
    becomes Fraction(1, 10) rather than the binary approximation 3602879701896397/36028797018963968.
    This is what a caller who typed the literal means, and it makes fractional amounts such as 2.5 MB
    scale down to whole units exactly.

    Non-finite values (nan, inf, -inf) are NOT errors here: they are returned unchanged as float,
    leaving the policy to the caller.

    Parameters
    ----------
    value : int | float | Decimal | Fraction | numeric duck type
        Types implementing __index__ are taken as exact integers (NumPy integers),
        types implementing __float__ go through the float path (NumPy floats).

    Returns
    -------
    Fraction
        Exact value of a finite amount.
    float
        nan, inf or -inf for non-finite amounts.

    Raises
    ------
    TypeError
        For bool and unsupported types (str, None, containers...).

    Examples
    --------
    >>> std_amount(3)
    Fraction(3, 1)
    >>> std_amount(2.5)
    Fraction(5, 2)
    >>> std_amount(Decimal("0.1"))
    Fraction(1, 10)
    >>> std_amount(float("nan"))
    nan
    """
    # bool is a subclass of int but never a meaningful amount
    if isinstance(value, bool):
        raise TypeError(f"boolean values not supported as amount, got {value}")

    if isinstance(value, Fraction):
        return value

    if isinstance(value, int):
        return Fraction(value)

    if isinstance(value, float):
        if not math.isfinite(value):
            return value
        # Whole floats are exact integers, repr() would drop digits beyond 17 significant
        if value.is_integer():
            return Fraction(int(value))
        return Fraction(repr(value))

    if isinstance(value, Decimal):
        if value.is_nan():
            return math.nan
        if value.is_infinite():
            return math.inf if value > 0 else -math.inf
        return Fraction(value)

    # NumPy integers and other exact integer types
    if hasattr(value, "__index__"):
        try:
            return Fraction(operator.index(value))
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {e}") from e

    # NumPy floats and other float-like types
    if hasattr(value, "__float__"):
        try:
            as_float = float(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e
        return std_amount(as_float)

    raise TypeError(
        f"unsupported numeric type: {fmt_type(value)}. "
        f"Expected int, float, Decimal, Fraction or types implementing __index__ or __float__"
    )


def is_whole(value: Fraction) -> bool:
    """True if the exact value is an integer."""
    return value.denominator == 1


def div_half_up(numerator: int, denominator: int, places: int) -> Decimal:
    """
    Divide two integers exactly and round the quotient to a fixed number of decimal places.

    Ties are rounded away from zero (ROUND_HALF_UP). The result Decimal carries exactly `places`
    fractional digits and is built without any decimal context, so arbitrary large quotients
    keep all of their integer digits.

    Examples:
        >>> div_half_up(20_000_000, 8_000_000, 5)
        Decimal('2.50000')
        >>> div_half_up(1, 3, 2)
        Decimal('0.33')
        >>> div_half_up(5, 2, 0)
        Decimal('3')
    """
    if denominator == 0:
        raise ZeroDivisionError("division by zero")
    if places < 0:
        raise ValueError(f"places must be >= 0, got {places}")

    negative = (numerator < 0) != (denominator < 0)
    scaled, remainder = divmod(abs(numerator) * 10 ** places, abs(denominator))
    if 2 * remainder >= abs(denominator):
        scaled += 1

    sign = "-" if negative and scaled else ""
    return Decimal(f"{sign}{scaled}E-{places}")


def round_half_up(value: Decimal | Fraction | int, places: int) -> Decimal:
    """Round an exact value to `places` decimal places, ties away from zero."""
    exact = Fraction(value)
    return div_half_up(exact.numerator, exact.denominator, places)
