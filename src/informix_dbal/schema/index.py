"""
Index model - Portable index / unique / primary key definition
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Index:
    """An index over an ordered list of columns."""
    name: str
    columns: Tuple[str, ...]
    is_unique: bool = False
    is_primary: bool = False

    def __post_init__(self):
        object.__setattr__(self, "columns", tuple(self.columns))
        # A primary key is always unique
        if self.is_primary and not self.is_unique:
            object.__setattr__(self, "is_unique", True)
