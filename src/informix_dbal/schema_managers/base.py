"""
Base Schema Manager - Abstract base class for catalog introspection

Schema managers run a platform's catalog queries through a QueryExecutor
and turn the raw rows into portable schema entities (Column, Index,
ForeignKeyConstraint, View, Sequence, Table).
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..exceptions import CatalogRowError
from ..platforms import DatabasePlatform
from ..schema import Column, ForeignKeyConstraint, Index, Sequence, Table, View
from .executor import QueryExecutor

import logging
logger = logging.getLogger(__name__)

_MISSING = object()


class SchemaManager(ABC):
    """
    Abstract base class for schema managers.

    Each database type should have its own implementation that knows how to
    decode its catalog rows. The ``_get_portable_*`` methods are pure
    functions of the rows they receive.
    """

    def __init__(self, executor: QueryExecutor, platform: DatabasePlatform):
        """
        Initialize the schema manager.

        Args:
            executor: Runs catalog SQL and returns rows
            platform: Platform providing the catalog SQL
        """
        self.executor = executor
        self.platform = platform

    # ==================== Listing ====================

    def _fetch(self, sql: str) -> List[Mapping[str, Any]]:
        return list(self.executor.execute_query(sql))

    def list_databases(self) -> List[str]:
        return self._get_portable_databases_list(self._fetch(self.platform.get_list_databases_sql()))

    def list_table_names(self) -> List[str]:
        return self._get_portable_tables_list(self._fetch(self.platform.get_list_tables_sql()))

    def list_sequences(self) -> List[Sequence]:
        return self._get_portable_sequences_list(self._fetch(self.platform.get_list_sequences_sql()))

    def list_views(self) -> Dict[str, View]:
        return self._get_portable_views_list(self._fetch(self.platform.get_list_views_sql()))

    def list_table_columns(self, table_name: str) -> Dict[str, Column]:
        rows = self._fetch(self.platform.get_list_table_columns_sql(table_name))
        return self._get_portable_table_columns_list(table_name, rows)

    def list_table_indexes(self, table_name: str) -> Dict[str, Index]:
        rows = self._fetch(self.platform.get_list_table_indexes_sql(table_name))
        return self._get_portable_table_indexes_list(rows, table_name)

    def list_table_foreign_keys(self, table_name: str) -> List[ForeignKeyConstraint]:
        rows = self._fetch(self.platform.get_list_table_foreign_keys_sql(table_name))
        return self._get_portable_table_foreign_keys_list(rows)

    def list_table_details(self, table_name: str) -> Table:
        """Load a table with its columns, indexes and foreign keys."""
        columns = self.list_table_columns(table_name)
        indexes = self.list_table_indexes(table_name)
        foreign_keys = self.list_table_foreign_keys(table_name) \
            if self.platform.supports_foreign_key_constraints() else []

        logger.debug(
            f"Loaded table {table_name}: {len(columns)} columns, "
            f"{len(indexes)} indexes, {len(foreign_keys)} foreign keys"
        )
        return Table(
            name=table_name,
            columns=list(columns.values()),
            indexes=list(indexes.values()),
            foreign_keys=foreign_keys,
        )

    # ==================== Row Helpers ====================

    @staticmethod
    def _lower_keys(row: Mapping[str, Any]) -> Dict[str, Any]:
        """Copy a row with lower-case keys (catalog column names are case-insensitive)."""
        return {str(key).lower(): value for key, value in row.items()}

    @staticmethod
    def _require(row: Mapping[str, Any], field: str, row_kind: str) -> Any:
        """
        Value of a field that must be present in the row (it may be NULL).

        Raises:
            CatalogRowError: if the field is missing
        """
        value = row.get(field, _MISSING)
        if value is _MISSING:
            raise CatalogRowError.missing_field(field, row_kind)
        return value

    # ==================== Portable Conversions ====================

    def _get_portable_databases_list(self, rows: Iterable[Mapping[str, Any]]) -> List[str]:
        return [self._get_portable_database_definition(row) for row in rows]

    @abstractmethod
    def _get_portable_database_definition(self, row: Mapping[str, Any]) -> str:
        pass

    def _get_portable_tables_list(self, rows: Iterable[Mapping[str, Any]]) -> List[str]:
        return [self._get_portable_table_definition(row) for row in rows]

    @abstractmethod
    def _get_portable_table_definition(self, row: Mapping[str, Any]) -> str:
        pass

    def _get_portable_sequences_list(self, rows: Iterable[Mapping[str, Any]]) -> List[Sequence]:
        return [self._get_portable_sequence_definition(row) for row in rows]

    @abstractmethod
    def _get_portable_sequence_definition(self, row: Mapping[str, Any]) -> Sequence:
        pass

    def _get_portable_table_columns_list(self, table_name: str,
                                         rows: Iterable[Mapping[str, Any]]) -> Dict[str, Column]:
        """Columns keyed by lower-case name, in catalog order."""
        columns = {}
        for row in rows:
            column = self._get_portable_table_column_definition(row)
            columns[column.name.lower()] = column
        return columns

    @abstractmethod
    def _get_portable_table_column_definition(self, row: Mapping[str, Any]) -> Column:
        pass

    def _get_portable_table_indexes_list(self, rows: Iterable[Mapping[str, Any]],
                                         table_name: Optional[str] = None) -> Dict[str, Index]:
        """
        Group flattened index records into Index objects.

        Each record carries column_name, key_name, non_unique and primary.
        Records of the same index are merged in order; the primary key is
        keyed as "primary", every other index by its lower-case name.
        """
        grouped: Dict[str, Dict[str, Any]] = {}

        for record in rows:
            index_name = record["key_name"]
            key = "primary" if record["primary"] else index_name.lower()

            if key not in grouped:
                grouped[key] = {
                    "name": index_name,
                    "columns": [record["column_name"]],
                    "unique": not record["non_unique"],
                    "primary": bool(record["primary"]),
                }
            else:
                grouped[key]["columns"].append(record["column_name"])

        return {
            key: Index(
                name=data["name"],
                columns=data["columns"],
                is_unique=data["unique"],
                is_primary=data["primary"],
            )
            for key, data in grouped.items()
        }

    def _get_portable_table_foreign_keys_list(
        self, rows: Iterable[Mapping[str, Any]]
    ) -> List[ForeignKeyConstraint]:
        return [self._get_portable_table_foreign_key_definition(row) for row in rows]

    @abstractmethod
    def _get_portable_table_foreign_key_definition(self, row: Mapping[str, Any]) -> ForeignKeyConstraint:
        pass

    def _get_portable_views_list(self, rows: Iterable[Mapping[str, Any]]) -> Dict[str, View]:
        views = {}
        for row in rows:
            view = self._get_portable_view_definition(row)
            views[view.name] = view
        return views

    @abstractmethod
    def _get_portable_view_definition(self, row: Mapping[str, Any]) -> View:
        pass
