import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import classbreaks
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from classbreaks.common.datasets import ALL_STATES_S1701_SORTED


# Common test fixtures
@pytest.fixture
def small_data() -> list[int]:
    """Four values with an obvious two-class split."""
    return [4, 5, 9, 10]


@pytest.fixture
def census_sorted_f64() -> list[float]:
    """The 52-value census dataset, sorted, as floats."""
    return [float(v) for v in ALL_STATES_S1701_SORTED]
