#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import warnings

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from uoi.size import InformationSize
from uoi.units import Unit


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def fail_on_warnings():
    """Fixture turning every warning raised inside the test into an error."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        yield


@pytest.fixture
def megabytes_2_5() -> InformationSize:
    """2.5 decimal megabytes, exactly 20,000,000 bits."""
    return InformationSize.of(2.5, Unit.MB)
