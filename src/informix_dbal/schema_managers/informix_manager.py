"""
Informix Schema Manager - Decodes Informix catalog rows

Turns rows produced by InformixCatalogQueries into portable schema
entities. Index and foreign-key rows carry their columns in numbered
slots (col1..col16, pkcol1..pkcol16) which are flattened here.
"""

import re
from itertools import groupby
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..constants import (
    CATALOG_SLOT_COUNT,
    CONSTRAINT_TYPE_PRIMARY,
    INDEX_TYPE_DUPLICATES,
    NULLS_NOT_ALLOWED,
    REFERENTIAL_RULE_CASCADE,
)
from ..exceptions import CatalogRowError
from ..platforms import InformixPlatform
from ..schema import Column, ForeignKeyConstraint, Index, Sequence, View
from .base import SchemaManager
from .executor import QueryExecutor

import logging
logger = logging.getLogger(__name__)

_FIXED_LENGTH_TYPES = frozenset({"char", "character", "nchar"})

# Native types that carry precision/scale
_SCALED_TYPES = frozenset({
    "dec", "decimal", "double", "double precision", "float",
    "money", "numeric", "real", "smallfloat",
})

_VIEW_BODY_SEPARATOR = re.compile(r"\sAS\s", re.IGNORECASE)


class InformixSchemaManager(SchemaManager):
    """
    Schema manager for Informix.

    Usage:
        manager = InformixSchemaManager(DbApiExecutor(connection, "informix"))
        columns = manager.list_table_columns("customer")
    """

    def __init__(self, executor: QueryExecutor, platform: Optional[InformixPlatform] = None):
        super().__init__(executor, platform or InformixPlatform())

    def list_table_names(self) -> List[str]:
        """Base tables owned by the connected user."""
        owner = self.executor.current_username()
        sql = self.platform.catalog_queries.list_tables_for_owner_sql(owner)
        return self._get_portable_tables_list(self._fetch(sql))

    # ==================== Helpers ====================

    @staticmethod
    def _clean_name(value: Any) -> str:
        return str(value).strip()

    @staticmethod
    def _to_int(value: Any) -> Optional[int]:
        return None if value is None else int(value)

    def _unpack_slots(self, row: Mapping[str, Any], prefix: str, row_kind: str) -> List[str]:
        """Non-empty slot values prefix1..prefix16, trimmed, in slot order."""
        names = []
        for position in range(1, CATALOG_SLOT_COUNT + 1):
            value = self._require(row, f"{prefix}{position}", row_kind)
            if value is None:
                continue
            name = self._clean_name(value)
            if name:
                names.append(name)
        return names

    # ==================== Databases / Tables / Sequences ====================

    def _get_portable_database_definition(self, row: Mapping[str, Any]) -> str:
        return self._clean_name(self._require(self._lower_keys(row), "name", "database"))

    def _get_portable_table_definition(self, row: Mapping[str, Any]) -> str:
        return self._clean_name(self._require(self._lower_keys(row), "tabname", "table"))

    def _get_portable_sequence_definition(self, row: Mapping[str, Any]) -> Sequence:
        row = self._lower_keys(row)
        return Sequence(
            name=self._clean_name(self._require(row, "sequence", "sequence")),
            allocation_size=int(self._require(row, "inc_val", "sequence")),
            initial_value=int(self._require(row, "start_val", "sequence")),
        )

    # ==================== Columns ====================

    def _get_portable_table_column_definition(self, row: Mapping[str, Any]) -> Column:
        """
        Decode one syscolumns row.

        Length is never recovered from the catalog and stays None.
        """
        row = self._lower_keys(row)

        column_name = self._require(row, "colname", "column")
        if column_name is None:
            raise CatalogRowError(
                f"Catalog column row for table {row.get('tabname')} has no column name"
            )

        type_name = self._clean_name(self._require(row, "typename", "column"))
        column_type = self.platform.type_map.portable_type(type_name)
        native = type_name.lower()

        # byte, varchar, nvarchar and character varying are variable length
        fixed = native in _FIXED_LENGTH_TYPES

        precision = scale = None
        if native in _SCALED_TYPES:
            precision = self._to_int(self._require(row, "precision", "column"))
            scale = self._to_int(self._require(row, "scale", "column"))

        default = self._require(row, "default", "column")
        nulls = self._require(row, "nulls", "column")

        return Column(
            name=self._clean_name(column_name),
            type=column_type,
            notnull=nulls == NULLS_NOT_ALLOWED,
            default=None if default == "NULL" else default,
            fixed=fixed,
            length=None,
            precision=precision,
            scale=scale,
        )

    # ==================== Indexes ====================

    def _get_portable_table_indexes_list(self, rows: Iterable[Mapping[str, Any]],
                                         table_name: Optional[str] = None) -> Dict[str, Index]:
        """Flatten one-row-per-index catalog rows into per-column records, then group."""
        records = []

        for raw in rows:
            row = self._lower_keys(raw)
            index_name = self._clean_name(self._require(row, "idxname", "index"))
            index_type = self._require(row, "idxtype", "index")
            constraint_type = self._require(row, "constrtype", "index")

            columns = self._unpack_slots(row, "col", "index")
            if not columns:
                raise CatalogRowError(f"Catalog index row for {index_name} has no columns")

            for column_name in columns:
                records.append({
                    "column_name": column_name,
                    "key_name": index_name,
                    "non_unique": index_type == INDEX_TYPE_DUPLICATES,
                    "primary": constraint_type == CONSTRAINT_TYPE_PRIMARY,
                })

        return super()._get_portable_table_indexes_list(records, table_name)

    # ==================== Foreign Keys ====================

    @staticmethod
    def _get_portable_foreign_key_rule_def(rule: Any) -> Optional[str]:
        if rule is not None and str(rule).strip() == REFERENTIAL_RULE_CASCADE:
            return "CASCADE"
        return None

    def _get_portable_table_foreign_key_definition(self, row: Mapping[str, Any]) -> ForeignKeyConstraint:
        row = self._lower_keys(row)

        constraint_name = self._require(row, "constrname", "foreign key")
        foreign_table = self._require(row, "reftabname", "foreign key")
        local_columns = self._unpack_slots(row, "col", "foreign key")
        foreign_columns = self._unpack_slots(row, "pkcol", "foreign key")

        if not local_columns or not foreign_columns:
            raise CatalogRowError(
                f"Catalog foreign key row for {constraint_name} has no local or referenced columns"
            )

        return ForeignKeyConstraint(
            local_columns=local_columns,
            foreign_table_name=self._clean_name(foreign_table),
            foreign_columns=foreign_columns,
            name=self._clean_name(constraint_name) if constraint_name is not None else None,
            on_delete=self._get_portable_foreign_key_rule_def(self._require(row, "delrule", "foreign key")),
            on_update=self._get_portable_foreign_key_rule_def(self._require(row, "updrule", "foreign key")),
        )

    # ==================== Views ====================

    def _get_portable_views_list(self, rows: Iterable[Mapping[str, Any]]) -> Dict[str, View]:
        """
        Reassemble view text split across sysviews rows.

        Rows arrive ordered by view name and chunk number; consecutive rows
        of the same view are concatenated before decoding.
        """
        views = {}
        lowered = (self._lower_keys(row) for row in rows)

        for view_name, chunks in groupby(lowered, key=lambda r: self._require(r, "tabname", "view")):
            texts = [self._require(chunk, "viewtext", "view") for chunk in chunks]
            if all(isinstance(text, str) for text in texts):
                view_text = "".join(texts)
            else:
                view_text = next(text for text in texts if not isinstance(text, str))

            view = self._get_portable_view_definition({"tabname": view_name, "viewtext": view_text})
            views[view.name] = view

        return views

    def _get_portable_view_definition(self, row: Mapping[str, Any]) -> View:
        row = self._lower_keys(row)
        name = self._clean_name(self._require(row, "tabname", "view"))
        view_text = self._require(row, "viewtext", "view")

        if not isinstance(view_text, str):
            logger.warning(f"View {name} text is not stored inline, returning an empty body")
            return View(name=name, sql="")

        match = _VIEW_BODY_SEPARATOR.search(view_text)
        if match is None:
            raise CatalogRowError(f"View {name} text has no AS keyword")

        return View(name=name, sql=view_text[match.end():].strip())
