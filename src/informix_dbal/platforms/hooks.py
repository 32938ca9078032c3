"""
Alter Table Hooks - Let callers take over parts of ALTER TABLE generation

Before a platform emits a clause for a column change (or the table-level
statements of a diff) it asks each registered hook. A hook that returns a
list vetoes the default clause; the statements in that list (possibly
none) are appended to the generated SQL instead.
"""

from enum import Enum
from typing import Any, List, Optional

from ..schema import TableDiff


class AlterChangeKind(Enum):
    """Kinds of change a hook can intercept."""
    ADD_COLUMN = "add_column"
    REMOVE_COLUMN = "remove_column"
    CHANGE_COLUMN = "change_column"
    RENAME_COLUMN = "rename_column"
    ALTER_TABLE = "alter_table"


class SchemaAlterHook:
    """
    Base hook: never vetoes.

    Subclass and override ``on_alter_table_change``. The payload depends on
    the kind:
        ADD_COLUMN / REMOVE_COLUMN  -> Column
        CHANGE_COLUMN               -> ColumnDiff
        RENAME_COLUMN               -> (old_name, Column)
        ALTER_TABLE                 -> the TableDiff itself
    """

    def on_alter_table_change(
        self,
        kind: AlterChangeKind,
        payload: Any,
        diff: TableDiff
    ) -> Optional[List[str]]:
        """
        Returns:
            None to keep the default clause, or the replacement statements
        """
        return None
