"""Selection rules deciding which entries appear in the tree and which contents are emitted."""

from .pattern_matcher import extension_of, matches_name_or_path, relativize
from .selection_policy import SelectionPolicy

__all__ = [
    "SelectionPolicy",
    "extension_of",
    "matches_name_or_path",
    "relativize",
]
