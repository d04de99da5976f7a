"""Top-level package for classbreaks.

Class breakpoints for choropleth legends: equal interval, quantile and
exhaustive Jenks natural breaks.

Provides subpackages:
- classbreaks.core – Breaks/Ranges output model and Jenks partitions
- classbreaks.jenks – exhaustive natural breaks search
- classbreaks.closed_form – equal interval and quantile classifiers
- classbreaks.common – combinatorics, thresholds, reference data
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("classbreaks")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()

from .core.models import Breaks, DataRange, RangeStyle, Ranges, Partition, ScoredPartition
from .method import ClassificationMethod
from .config import ClassificationConfig
from .controller import classify, ClassificationResult, ClassificationError

__all__: list[str] = [
    "__version__",
    "Breaks",
    "DataRange",
    "RangeStyle",
    "Ranges",
    "Partition",
    "ScoredPartition",
    "ClassificationMethod",
    "ClassificationConfig",
    "classify",
    "ClassificationResult",
    "ClassificationError",
]
