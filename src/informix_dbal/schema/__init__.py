"""
Schema - Portable, engine-agnostic schema entities

All entities are re-exported here for convenience:
    from informix_dbal.schema import Column, Index, ForeignKeyConstraint, ...
"""

from .types import PortableType
from .column import Column
from .index import Index
from .foreign_key import ForeignKeyConstraint
from .table import Table, Sequence, View
from .table_diff import TableDiff, ColumnDiff

__all__ = [
    "PortableType",
    "Column",
    "Index",
    "ForeignKeyConstraint",
    "Table",
    "Sequence",
    "View",
    "TableDiff",
    "ColumnDiff",
]
