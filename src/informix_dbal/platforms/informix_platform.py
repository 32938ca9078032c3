"""
Informix Platform - Informix-specific SQL dialect

Notable differences from the generic declaration order:
- Identifiers are never quoted
- Constraint names are declared after the constraint body
- BLOB/CLOB are declared as BYTE/TEXT
- Row limiting uses SELECT SKIP n LIMIT m
- Indexes are created with separate statements after CREATE TABLE
"""

import re
from typing import Any, List, Optional, Sequence, Union

from sqlparse import lexer
from sqlparse import tokens as T

from ..config import PlatformConfig, load_platform_config
from ..exceptions import UnsupportedOperationError
from ..schema import (
    Column,
    ForeignKeyConstraint,
    Index,
    Sequence as SequenceDef,
    Table,
    TableDiff,
)
from .base import Constraint, DatabasePlatform
from .catalog_queries import InformixCatalogQueries
from .constraint_name import reposition_constraint_name
from .hooks import AlterChangeKind, SchemaAlterHook
from .type_map import TypeMap

import logging
logger = logging.getLogger(__name__)


class InformixPlatform(DatabasePlatform):
    """Platform for IBM Informix databases."""

    def __init__(self, config: Optional[PlatformConfig] = None,
                 hooks: Optional[Sequence[SchemaAlterHook]] = None):
        super().__init__(config or load_platform_config(), hooks)
        self.type_map = TypeMap(self.config)
        self.catalog_queries = InformixCatalogQueries(self.type_map)

    @property
    def name(self) -> str:
        return "informix"

    @property
    def quote_char(self) -> str:
        # Informix doesn't support quoted table names
        return ""

    # ==================== Type Declarations ====================

    def get_boolean_type_declaration_sql(self, column: Column) -> str:
        """Informix has a native BOOLEAN type."""
        return "BOOLEAN"

    def get_integer_type_declaration_sql(self, column: Column) -> str:
        """INTEGER, or SERIAL for autoincrement columns."""
        return "SERIAL" if column.autoincrement else "INTEGER"

    def get_bigint_type_declaration_sql(self, column: Column) -> str:
        """BIGINT, or BIGSERIAL for autoincrement columns."""
        return "BIGSERIAL" if column.autoincrement else "BIGINT"

    def get_smallint_type_declaration_sql(self, column: Column) -> str:
        return "SMALLINT"

    def get_datetime_type_declaration_sql(self, column: Column) -> str:
        """Datetimes are declared with an explicit YEAR TO SECOND range."""
        return "DATETIME YEAR TO SECOND"

    def get_date_type_declaration_sql(self, column: Column) -> str:
        return "DATE"

    def get_time_type_declaration_sql(self, column: Column) -> str:
        """Times are datetimes with an HOUR TO SECOND range."""
        return "DATETIME HOUR TO SECOND"

    # BLOB and CLOB don't work reliably through the Informix client
    # protocol, BYTE and TEXT are used instead

    def get_binary_type_declaration_sql(self, column: Column) -> str:
        return "BYTE"

    def get_blob_type_declaration_sql(self, column: Column) -> str:
        return "BYTE"

    def get_clob_type_declaration_sql(self, column: Column) -> str:
        """Character large objects are declared as TEXT."""
        return "TEXT"

    def _get_varchar_type_declaration_sql_snippet(self, length: Optional[int], fixed: bool) -> str:
        length = length or self.varchar_default_length
        return f"CHAR({length})" if fixed else f"VARCHAR({length})"

    def convert_booleans(self, value: Any) -> Any:
        """Convert Python booleans (or lists of them) to Informix 't'/'f' literals."""
        if isinstance(value, list):
            return [self.convert_booleans(item) for item in value]
        if isinstance(value, bool):
            return "t" if value else "f"
        return value

    def get_comment_on_column_sql(self, table_name: str, column_name: str, comment: str) -> str:
        """Column comments are silently dropped."""
        return ""

    # ==================== Expressions ====================

    def get_now_expression(self) -> str:
        """Current date, as TODAY."""
        return "TODAY"

    def get_current_date_sql(self) -> str:
        return "TODAY"

    def get_current_time_sql(self) -> str:
        """Current time of day, as CURRENT HOUR TO SECOND."""
        return "CURRENT HOUR TO SECOND"

    def get_current_timestamp_sql(self) -> str:
        """Current date and time, as CURRENT."""
        return "CURRENT"

    def get_md5_expression(self, column: str) -> str:
        """Informix has no MD5 function."""
        raise UnsupportedOperationError.not_supported("get_md5_expression")

    def get_not_expression(self, expression: str) -> str:
        raise UnsupportedOperationError.not_supported("get_not_expression")

    def get_pi_expression(self) -> str:
        raise UnsupportedOperationError.not_supported("get_pi_expression")

    def get_date_diff_expression(self, date1: str, date2: str) -> str:
        """Difference in days between two dates cast to DATE."""
        return f"{date1}::DATE - {date2}::DATE"

    def get_date_add_hour_expression(self, date: str, hours: Any) -> str:
        """Add hours using an INTERVAL HOUR(9) TO HOUR."""
        return f"{date} + interval({hours}) hour(9) to hour"

    def get_date_sub_hour_expression(self, date: str, hours: Any) -> str:
        return f"{date} - interval({hours}) hour(9) to hour"

    def get_date_add_days_expression(self, date: str, days: Any) -> str:
        """Add days using an INTERVAL DAY(9) TO DAY."""
        return f"{date} + interval({days}) day(9) to day"

    def get_date_sub_days_expression(self, date: str, days: Any) -> str:
        return f"{date} - interval({days}) day(9) to day"

    def get_date_add_month_expression(self, date: str, months: Any) -> str:
        """Add months using ADD_MONTHS."""
        return f"ADD_MONTHS({date},{months})"

    def get_date_sub_month_expression(self, date: str, months: Any) -> str:
        """
        ADD_MONTHS with a negated month count.

        Integer counts are negated in place; any other expression is
        wrapped as ``-(expr)``.
        """
        if isinstance(months, int) or re.fullmatch(r"[+-]?\d+", str(months).strip()):
            return self.get_date_add_month_expression(date, -abs(int(months)))
        return self.get_date_add_month_expression(date, f"-({months})")

    def get_bit_and_comparison_expression(self, value1: Any, value2: Any) -> str:
        """Bitwise AND using BITAND."""
        return f"BITAND({value1}, {value2})"

    def get_bit_or_comparison_expression(self, value1: Any, value2: Any) -> str:
        """Bitwise OR using BITOR."""
        return f"BITOR({value1}, {value2})"

    def get_substring_expression(self, value: str, start: Any, length: Any = None) -> str:
        """Substring using SUBSTR, with an optional length."""
        if length is None:
            return f"SUBSTR({value}, {start})"
        return f"SUBSTR({value}, {start}, {length})"

    # ==================== Row Limiting ====================

    def do_modify_limit_query(self, query: str, limit: Optional[int], offset: Optional[int] = None) -> str:
        """
        Rewrite the first SELECT keyword as ``SELECT [SKIP o ][LIMIT l ]``.

        Only the first SELECT keyword is touched; select inside string
        literals or comments is not a keyword and is skipped. The query is
        lexed without grouping, so there is no cap on its token count.
        """
        if limit is None and offset is None:
            return query

        snippet = ""
        if offset is not None:
            snippet += f"SKIP {offset} "
        if limit is not None:
            snippet += f"LIMIT {limit} "

        tokens = list(lexer.tokenize(query))

        for i, (ttype, value) in enumerate(tokens):
            if ttype is T.Keyword.DML and value.upper() == "SELECT":
                rest = i + 1
                while rest < len(tokens) and tokens[rest][0] in T.Whitespace:
                    rest += 1
                head = "".join(v for _, v in tokens[:i])
                tail = "".join(v for _, v in tokens[rest:])
                return f"{head}SELECT {snippet}{tail}"

        logger.debug("No SELECT keyword found, limit query left unchanged")
        return query

    # ==================== Tables ====================

    def _get_create_table_sql(self, table_name: str, columns: Sequence[Column],
                              options: Optional[dict] = None) -> List[str]:
        # Index declarations inside CREATE TABLE don't work for multi-column
        # indexes, so every index becomes its own CREATE INDEX
        options = dict(options or {})
        indexes = self._named_definitions(options.get("indexes"))
        options["indexes"] = {}

        sql = super()._get_create_table_sql(table_name, columns, options)

        for _, index in indexes:
            sql.append(self.get_create_index_sql(index, table_name))

        return sql

    def get_temporary_table_sql(self) -> str:
        """Temporary tables are created with CREATE TEMP TABLE."""
        return "TEMP"

    # ==================== Indexes and Constraints ====================

    def get_unique_constraint_declaration_sql(self, name: str, index: Index) -> str:
        """Informix UNIQUE declaration, with the constraint name after the column list."""
        columns = self._require_columns(index)
        return (
            f"UNIQUE ({self.get_index_field_declaration_list_sql(columns)}) "
            f"CONSTRAINT {self.quote_identifier(name)}"
        )

    def get_index_declaration_sql(self, name: str, index: Index) -> str:
        """Inline index declarations are emitted as unique constraints."""
        return self.get_unique_constraint_declaration_sql(name, index)

    def get_create_constraint_sql(self, constraint: Constraint, table: Union[str, Table]) -> str:
        """Generic constraint SQL with the constraint name moved to the end."""
        sql = super().get_create_constraint_sql(constraint, table)
        return reposition_constraint_name(sql, constraint.name)

    # ==================== Foreign Keys ====================

    def get_foreign_key_base_declaration_sql(self, foreign_key: ForeignKeyConstraint) -> str:
        """Foreign key body with the constraint name moved to the end."""
        sql = super().get_foreign_key_base_declaration_sql(foreign_key)
        return reposition_constraint_name(sql, foreign_key.name)

    def get_foreign_key_declaration_sql(self, foreign_key: ForeignKeyConstraint) -> str:
        """Full foreign key declaration with the constraint name moved to the end."""
        sql = super().get_foreign_key_declaration_sql(foreign_key)
        return reposition_constraint_name(sql, foreign_key.name)

    def get_create_foreign_key_sql(self, foreign_key: ForeignKeyConstraint,
                                   table: Union[str, Table]) -> str:
        """Add a foreign key through ALTER TABLE ... ADD CONSTRAINT."""
        return (
            f"ALTER TABLE {self._quoted_name(table)} ADD CONSTRAINT "
            f"{self.get_foreign_key_declaration_sql(foreign_key)}"
        )

    def get_drop_foreign_key_sql(self, foreign_key: Union[str, ForeignKeyConstraint],
                                 table: Union[str, Table]) -> str:
        """Drop a named foreign key through ALTER TABLE ... DROP CONSTRAINT."""
        return f"ALTER TABLE {self._quoted_name(table)} DROP CONSTRAINT {self._quoted_name(foreign_key)}"

    # ==================== Alter Table ====================

    def get_alter_table_sql(self, diff: TableDiff) -> List[str]:
        """
        ALTER TABLE for a table diff.

        Clause order: ADD, DROP, ALTER, RENAME COLUMN (one statement), then
        index/foreign key statements, then RENAME TABLE. Hook replacement
        statements are appended at the end.
        """
        sql: List[str] = []
        column_sql: List[str] = []
        query_parts: List[str] = []

        for column in diff.added_columns.values():
            if self._on_alter_table_change(AlterChangeKind.ADD_COLUMN, column, diff, column_sql):
                continue
            query_parts.append(
                "ADD " + self.get_column_declaration_sql(self._quoted_name(column), column)
            )

        for column in diff.removed_columns.values():
            if self._on_alter_table_change(AlterChangeKind.REMOVE_COLUMN, column, diff, column_sql):
                continue
            query_parts.append(f"DROP {self._quoted_name(column)}")

        for column_diff in diff.changed_columns.values():
            if self._on_alter_table_change(AlterChangeKind.CHANGE_COLUMN, column_diff, diff, column_sql):
                continue
            column = column_diff.column
            query_parts.append(
                f"ALTER {self.quote_identifier(column_diff.old_column_name)} "
                + self.get_column_declaration_sql(self._quoted_name(column), column)
            )

        for old_column_name, column in diff.renamed_columns.items():
            if self._on_alter_table_change(
                AlterChangeKind.RENAME_COLUMN, (old_column_name, column), diff, column_sql
            ):
                continue
            query_parts.append(
                f"RENAME COLUMN {self.quote_identifier(old_column_name)} TO {self._quoted_name(column)}"
            )

        table_sql: List[str] = []

        if not self._on_alter_table_change(AlterChangeKind.ALTER_TABLE, diff, diff, table_sql):
            table_name = self.quote_identifier(diff.name)

            if query_parts:
                sql.append(f"ALTER TABLE {table_name} " + " ".join(query_parts))

            sql.extend(self._get_alter_table_index_foreign_key_sql(diff))

            if diff.new_name:
                sql.append(f"RENAME TABLE {table_name} TO {self.quote_identifier(diff.new_name)}")

        return sql + table_sql + column_sql

    def _get_alter_table_index_foreign_key_sql(self, diff: TableDiff) -> List[str]:
        # RENAME TABLE is issued last, so creates still target the old name
        table_name = self.quote_identifier(diff.name)
        return (
            self._get_pre_alter_table_index_foreign_key_sql(diff)
            + self._get_post_alter_table_index_foreign_key_sql(diff, table_name)
        )

    # ==================== Sequences ====================

    def supports_sequences(self) -> bool:
        return True

    def get_create_sequence_sql(self, sequence: SequenceDef) -> str:
        """CREATE SEQUENCE with MINVALUE pinned to the initial value."""
        return (
            f"CREATE SEQUENCE {self._quoted_name(sequence)}"
            f" START WITH {sequence.initial_value}"
            f" INCREMENT BY {sequence.allocation_size}"
            f" MINVALUE {sequence.initial_value}"
        )

    def get_alter_sequence_sql(self, sequence: SequenceDef) -> str:
        """Only the increment of a sequence can be altered."""
        return f"ALTER SEQUENCE {self._quoted_name(sequence)} INCREMENT BY {sequence.allocation_size}"

    def get_sequence_next_val_sql(self, sequence_name: str) -> str:
        """Next value of a sequence, as seq.NEXTVAL."""
        return f"{sequence_name}.NEXTVAL"

    # ==================== Databases ====================

    def supports_create_drop_database(self) -> bool:
        """CREATE DATABASE is supported but DROP DATABASE is not."""
        return False

    def get_create_database_sql(self, database: str) -> str:
        """Create a logged database."""
        return f"CREATE DATABASE {self.quote_identifier(database)} WITH LOG"

    def get_drop_database_sql(self, database: str) -> str:
        raise UnsupportedOperationError.not_supported("get_drop_database_sql")

    # ==================== Catalog Queries ====================

    def get_list_databases_sql(self) -> str:
        return self.catalog_queries.list_databases_sql()

    def get_list_tables_sql(self) -> str:
        return self.catalog_queries.list_tables_sql()

    def get_list_views_sql(self, database: Optional[str] = None) -> str:
        return self.catalog_queries.list_views_sql()

    def get_list_sequences_sql(self, database: Optional[str] = None) -> str:
        return self.catalog_queries.list_sequences_sql()

    def get_list_table_constraints_sql(self, table: str) -> str:
        return self.catalog_queries.list_table_constraints_sql(table)

    def get_list_table_columns_sql(self, table: str, database: Optional[str] = None) -> str:
        """Catalog query for a table's columns (see InformixCatalogQueries)."""
        return self.catalog_queries.list_table_columns_sql(table, database)

    def get_list_table_indexes_sql(self, table: str, database: Optional[str] = None) -> str:
        """Catalog query for a table's indexes, one 16-slot row per index."""
        return self.catalog_queries.list_table_indexes_sql(table, database)

    def get_list_table_foreign_keys_sql(self, table: str, database: Optional[str] = None) -> str:
        """Catalog query for a table's foreign keys, one 16-slot row per key."""
        return self.catalog_queries.list_table_foreign_keys_sql(table, database)

    # ==================== Capability Checks ====================

    def supports_identity_columns(self) -> bool:
        return True

    def prefers_identity_columns(self) -> bool:
        return True

    # ==================== Utility Methods ====================

    def get_for_update_sql(self) -> str:
        """Informix has no FOR UPDATE suffix on plain SELECTs."""
        return " "

    def get_dummy_select_sql(self) -> str:
        """Single-row SELECT against systables."""
        return "SELECT 1 FROM SYSTABLES WHERE TABID = 1"

    def get_sql_result_casing(self, column: str) -> str:
        """Informix returns result column names in upper case."""
        return column.upper()
