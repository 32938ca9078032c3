"""
Table, Sequence and View models
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .column import Column
from .foreign_key import ForeignKeyConstraint
from .index import Index


@dataclass
class Table:
    """A table with its columns, indexes and foreign keys (in declaration order)."""
    name: str
    columns: List[Column] = field(default_factory=list)
    indexes: List[Index] = field(default_factory=list)
    foreign_keys: List[ForeignKeyConstraint] = field(default_factory=list)
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def primary_key(self) -> Optional[Index]:
        for index in self.indexes:
            if index.is_primary:
                return index
        return None


@dataclass(frozen=True)
class Sequence:
    """A sequence generator."""
    name: str
    allocation_size: int = 1
    initial_value: int = 1


@dataclass(frozen=True)
class View:
    """A view and its SQL body (the part after AS)."""
    name: str
    sql: str
