"""List, dict and row helpers."""

from . import arr, multidimensional
from .multidimensional import RowComparator, SortCriterion

__all__ = ["arr", "multidimensional", "RowComparator", "SortCriterion"]
