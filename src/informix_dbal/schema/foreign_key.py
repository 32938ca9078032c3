"""
ForeignKeyConstraint model - Portable foreign key definition
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class ForeignKeyConstraint:
    """A foreign key from local columns to columns of a referenced table."""
    local_columns: Tuple[str, ...]
    foreign_table_name: str
    foreign_columns: Tuple[str, ...]
    name: Optional[str] = None
    on_delete: Optional[str] = None
    on_update: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "local_columns", tuple(self.local_columns))
        object.__setattr__(self, "foreign_columns", tuple(self.foreign_columns))
