"""
TableDiff - Changes between two versions of a table

Produced by schema comparison code and consumed read-only by platforms
when generating ALTER TABLE statements.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from .column import Column
from .foreign_key import ForeignKeyConstraint
from .index import Index


@dataclass
class ColumnDiff:
    """A column whose definition changed."""
    old_column_name: str
    column: Column


@dataclass
class TableDiff:
    """
    Column, index and foreign key changes for one table.

    Mappings are keyed by (old) name and keep insertion order, which is the
    order clauses are emitted in.
    """
    name: str
    new_name: Optional[str] = None
    added_columns: Dict[str, Column] = field(default_factory=dict)
    removed_columns: Dict[str, Column] = field(default_factory=dict)
    changed_columns: Dict[str, ColumnDiff] = field(default_factory=dict)
    renamed_columns: Dict[str, Column] = field(default_factory=dict)
    added_indexes: Dict[str, Index] = field(default_factory=dict)
    changed_indexes: Dict[str, Index] = field(default_factory=dict)
    removed_indexes: Dict[str, Index] = field(default_factory=dict)
    renamed_indexes: Dict[str, Index] = field(default_factory=dict)
    added_foreign_keys: List[ForeignKeyConstraint] = field(default_factory=list)
    changed_foreign_keys: List[ForeignKeyConstraint] = field(default_factory=list)
    removed_foreign_keys: List[Union[ForeignKeyConstraint, str]] = field(default_factory=list)
