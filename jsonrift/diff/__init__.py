# jsonrift/diff/__init__.py
# Comparator and diff result model.

from .models import (
    ComparisonStatus,
    DiffItem,
    DiffResult,
    Resolution,
)
from .comparator import compare

__all__ = [
    # Enumerations
    "Resolution",
    "ComparisonStatus",
    # Result model
    "DiffItem",
    "DiffResult",
    # Comparator
    "compare",
]
