"""
Base Database Platform - Abstract base class for SQL dialect translation

Platforms turn portable schema descriptors into SQL text. The base class
holds the generic declaration order shared by most engines:
- Identifier quoting
- Type and column declarations
- CREATE TABLE / INDEX / constraint skeletons
- Index and foreign key statements of an ALTER TABLE
Engine specifics live in subclasses.
"""

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ..config import PlatformConfig
from ..constants import (
    DECIMAL_DEFAULT_PRECISION,
    DECIMAL_DEFAULT_SCALE,
    GUID_LENGTH,
    REFERENTIAL_ACTIONS,
)
from ..exceptions import InvalidDescriptorError, UnsupportedOperationError
from ..schema import (
    Column,
    ForeignKeyConstraint,
    Index,
    PortableType,
    Sequence as SequenceDef,
    Table,
    TableDiff,
)
from .catalog_queries import quote_string_literal
from .hooks import AlterChangeKind, SchemaAlterHook

import logging
logger = logging.getLogger(__name__)

Constraint = Union[Index, ForeignKeyConstraint]
NamedObject = Union[str, Table, Index, ForeignKeyConstraint, SequenceDef]


class DatabasePlatform(ABC):
    """
    Abstract base class for database platforms.

    Each platform knows how to:
    1. Declare columns and types in its dialect
    2. Generate DDL for tables, indexes, constraints, views and sequences
    3. Provide the catalog queries used for schema introspection

    Usage:
        platform = PlatformFactory.create("informix")
        statements = platform.get_create_table_sql(table)
    """

    CREATE_INDEXES = 1
    CREATE_FOREIGNKEYS = 2

    def __init__(self, config: PlatformConfig, hooks: Optional[Sequence[SchemaAlterHook]] = None):
        """
        Initialize the platform.

        Args:
            config: Platform configuration (limits, type mappings)
            hooks: Optional alter-table hooks, asked in registration order
        """
        self.config = config
        self.hooks: List[SchemaAlterHook] = list(hooks or [])

    def add_hook(self, hook: SchemaAlterHook) -> None:
        self.hooks.append(hook)

    @property
    @abstractmethod
    def name(self) -> str:
        """Platform name (e.g. 'informix')."""
        pass

    # ==================== Identifier Quoting ====================

    @property
    @abstractmethod
    def quote_char(self) -> str:
        """Character used to quote identifiers (empty when quoting is unsupported)."""
        pass

    @property
    def quote_char_end(self) -> str:
        """Closing quote character (same as quote_char for most databases)."""
        return self.quote_char

    def quote_single_identifier(self, identifier: str) -> str:
        """Quote one identifier part."""
        return f"{self.quote_char}{identifier}{self.quote_char_end}"

    def quote_identifier(self, identifier: str) -> str:
        """Quote an identifier, quoting each part of a dotted name separately."""
        return ".".join(self.quote_single_identifier(part) for part in identifier.split("."))

    def _quoted_name(self, obj: NamedObject) -> str:
        """
        Quoted name of a string or any schema object carrying ``name``.

        Raises:
            InvalidDescriptorError: if the object has no name
        """
        if isinstance(obj, str):
            return self.quote_identifier(obj)
        if not obj.name:
            raise InvalidDescriptorError(
                f"Incomplete definition. {type(obj).__name__} name required."
            )
        return self.quote_identifier(obj.name)

    def _quoted_columns(self, columns: Iterable[str]) -> List[str]:
        return [self.quote_identifier(column) for column in columns]

    # ==================== Limits ====================

    @property
    def max_identifier_length(self) -> int:
        return self.config.max_identifier_length

    @property
    def varchar_max_length(self) -> int:
        return self.config.varchar_max_length

    @property
    def varchar_default_length(self) -> int:
        return self.config.varchar_default_length

    # ==================== Type Declarations ====================

    def get_type_declaration_sql(self, column: Column) -> str:
        """Dispatch to the declaration method of the column's portable type."""
        handlers = {
            PortableType.BIGINT: self.get_bigint_type_declaration_sql,
            PortableType.BINARY: self.get_binary_type_declaration_sql,
            PortableType.BLOB: self.get_blob_type_declaration_sql,
            PortableType.BOOLEAN: self.get_boolean_type_declaration_sql,
            PortableType.DATE: self.get_date_type_declaration_sql,
            PortableType.DATETIME: self.get_datetime_type_declaration_sql,
            PortableType.DATETIMETZ: self.get_datetimetz_type_declaration_sql,
            PortableType.DECIMAL: self.get_decimal_type_declaration_sql,
            PortableType.FLOAT: self.get_float_declaration_sql,
            PortableType.GUID: self.get_guid_type_declaration_sql,
            PortableType.INTEGER: self.get_integer_type_declaration_sql,
            PortableType.JSON: self.get_json_type_declaration_sql,
            PortableType.SMALLINT: self.get_smallint_type_declaration_sql,
            PortableType.STRING: self.get_varchar_type_declaration_sql,
            PortableType.TEXT: self.get_clob_type_declaration_sql,
            PortableType.TIME: self.get_time_type_declaration_sql,
        }
        return handlers[column.type](column)

    @abstractmethod
    def get_boolean_type_declaration_sql(self, column: Column) -> str:
        pass

    @abstractmethod
    def get_integer_type_declaration_sql(self, column: Column) -> str:
        pass

    @abstractmethod
    def get_bigint_type_declaration_sql(self, column: Column) -> str:
        pass

    @abstractmethod
    def get_smallint_type_declaration_sql(self, column: Column) -> str:
        pass

    @abstractmethod
    def get_datetime_type_declaration_sql(self, column: Column) -> str:
        pass

    def get_datetimetz_type_declaration_sql(self, column: Column) -> str:
        return self.get_datetime_type_declaration_sql(column)

    @abstractmethod
    def get_date_type_declaration_sql(self, column: Column) -> str:
        pass

    @abstractmethod
    def get_time_type_declaration_sql(self, column: Column) -> str:
        pass

    @abstractmethod
    def get_clob_type_declaration_sql(self, column: Column) -> str:
        pass

    @abstractmethod
    def get_blob_type_declaration_sql(self, column: Column) -> str:
        pass

    @abstractmethod
    def get_binary_type_declaration_sql(self, column: Column) -> str:
        pass

    @abstractmethod
    def _get_varchar_type_declaration_sql_snippet(self, length: Optional[int], fixed: bool) -> str:
        pass

    def get_varchar_type_declaration_sql(self, column: Column) -> str:
        """CHAR/VARCHAR declaration; lengths above the platform maximum become a clob."""
        length = column.length if column.length is not None else self.varchar_default_length

        if length > self.varchar_max_length:
            return self.get_clob_type_declaration_sql(column)

        return self._get_varchar_type_declaration_sql_snippet(length, column.fixed)

    def get_decimal_type_declaration_sql(self, column: Column) -> str:
        precision = column.precision or DECIMAL_DEFAULT_PRECISION
        scale = column.scale or DECIMAL_DEFAULT_SCALE
        return f"NUMERIC({precision}, {scale})"

    def get_float_declaration_sql(self, column: Column) -> str:
        return "DOUBLE PRECISION"

    def get_guid_type_declaration_sql(self, column: Column) -> str:
        return self.get_varchar_type_declaration_sql(
            replace(column, length=GUID_LENGTH, fixed=True)
        )

    def get_json_type_declaration_sql(self, column: Column) -> str:
        return self.get_clob_type_declaration_sql(column)

    # ==================== Column Declarations ====================

    def convert_booleans(self, value: Any) -> Any:
        """Convert booleans (or a list of them) to their SQL representation."""
        if isinstance(value, list):
            return [self.convert_booleans(item) for item in value]
        if isinstance(value, bool):
            return int(value)
        return value

    def get_default_value_declaration_sql(self, column: Column) -> str:
        """DEFAULT clause (with its leading space) or an empty string."""
        if column.default is None:
            return "" if column.notnull else " DEFAULT NULL"

        default = column.default
        column_type = column.type

        if column_type.is_integer_family:
            return f" DEFAULT {default}"
        if column_type in (PortableType.DATETIME, PortableType.DATETIMETZ) \
                and default == self.get_current_timestamp_sql():
            return f" DEFAULT {default}"
        if column_type is PortableType.TIME and default == self.get_current_time_sql():
            return f" DEFAULT {default}"
        if column_type is PortableType.DATE and default == self.get_current_date_sql():
            return f" DEFAULT {default}"
        if column_type is PortableType.BOOLEAN:
            return f" DEFAULT {quote_string_literal(self.convert_booleans(default))}"

        return f" DEFAULT {quote_string_literal(default)}"

    def get_column_declaration_sql(self, name: str, column: Column) -> str:
        """
        Declare a single column.

        Args:
            name: Already quoted column name
            column: Column definition

        Returns:
            ``<name> <type>[ DEFAULT ...][ NOT NULL]``
        """
        if column.column_definition:
            column_def = column.column_definition
        else:
            column_def = (
                self.get_type_declaration_sql(column)
                + self.get_default_value_declaration_sql(column)
                + (" NOT NULL" if column.notnull else "")
            )

        return f"{name} {column_def}"

    def get_column_declaration_list_sql(self, columns: Sequence[Column]) -> str:
        return ", ".join(
            self.get_column_declaration_sql(self.quote_identifier(column.name), column)
            for column in columns
        )

    def get_comment_on_column_sql(self, table_name: str, column_name: str, comment: str) -> str:
        return (
            f"COMMENT ON COLUMN {self.quote_identifier(table_name)}."
            f"{self.quote_identifier(column_name)} IS {quote_string_literal(comment)}"
        )

    # ==================== Expressions ====================

    def get_now_expression(self) -> str:
        return "NOW()"

    def get_md5_expression(self, column: str) -> str:
        return f"MD5({column})"

    def get_not_expression(self, expression: str) -> str:
        return f"NOT({expression})"

    def get_pi_expression(self) -> str:
        return "PI()"

    def get_current_date_sql(self) -> str:
        return "CURRENT_DATE"

    def get_current_time_sql(self) -> str:
        return "CURRENT_TIME"

    def get_current_timestamp_sql(self) -> str:
        return "CURRENT_TIMESTAMP"

    def get_date_diff_expression(self, date1: str, date2: str) -> str:
        raise UnsupportedOperationError.not_supported("get_date_diff_expression")

    def get_date_add_hour_expression(self, date: str, hours: Any) -> str:
        raise UnsupportedOperationError.not_supported("get_date_add_hour_expression")

    def get_date_sub_hour_expression(self, date: str, hours: Any) -> str:
        raise UnsupportedOperationError.not_supported("get_date_sub_hour_expression")

    def get_date_add_days_expression(self, date: str, days: Any) -> str:
        raise UnsupportedOperationError.not_supported("get_date_add_days_expression")

    def get_date_sub_days_expression(self, date: str, days: Any) -> str:
        raise UnsupportedOperationError.not_supported("get_date_sub_days_expression")

    def get_date_add_month_expression(self, date: str, months: Any) -> str:
        raise UnsupportedOperationError.not_supported("get_date_add_month_expression")

    def get_date_sub_month_expression(self, date: str, months: Any) -> str:
        raise UnsupportedOperationError.not_supported("get_date_sub_month_expression")

    def get_bit_and_comparison_expression(self, value1: Any, value2: Any) -> str:
        return f"({value1} & {value2})"

    def get_bit_or_comparison_expression(self, value1: Any, value2: Any) -> str:
        return f"({value1} | {value2})"

    def get_substring_expression(self, value: str, start: Any, length: Any = None) -> str:
        if length is None:
            return f"SUBSTRING({value} FROM {start})"
        return f"SUBSTRING({value} FROM {start} FOR {length})"

    # ==================== Row Limiting ====================

    def modify_limit_query(self, query: str, limit: Optional[int], offset: Optional[int] = None) -> str:
        """
        Add row limiting to a query.

        Raises:
            InvalidDescriptorError: for a negative limit or offset
        """
        if limit is not None:
            limit = int(limit)
            if limit < 0:
                raise InvalidDescriptorError(f"LIMIT argument limit={limit} is not valid")

        if offset is not None:
            offset = int(offset)
            if offset < 0:
                raise InvalidDescriptorError(f"LIMIT argument offset={offset} is not valid")

        return self.do_modify_limit_query(query, limit, offset)

    def do_modify_limit_query(self, query: str, limit: Optional[int], offset: Optional[int] = None) -> str:
        if limit is not None:
            query += f" LIMIT {limit}"
        if offset is not None:
            query += f" OFFSET {offset}"
        return query

    # ==================== Tables ====================

    @staticmethod
    def _named_definitions(definitions: Any) -> List[Tuple[str, Any]]:
        """(name, definition) pairs from a mapping or from a sequence of named objects."""
        if not definitions:
            return []
        if isinstance(definitions, Mapping):
            return list(definitions.items())
        return [(definition.name, definition) for definition in definitions]

    def get_create_table_sql(self, table: Table, create_flags: Optional[int] = None) -> List[str]:
        """
        Generate the statements creating ``table``.

        Raises:
            InvalidDescriptorError: if the table has no columns
        """
        if create_flags is None:
            create_flags = self.CREATE_INDEXES | self.CREATE_FOREIGNKEYS

        if not table.columns:
            raise InvalidDescriptorError(f"No columns specified for table {table.name}")

        table_name = self._quoted_name(table)
        options = dict(table.options)
        options["unique_constraints"] = {}
        options["indexes"] = {}
        options["primary"] = []

        if create_flags & self.CREATE_INDEXES:
            for index in table.indexes:
                if index.is_primary:
                    options["primary"] = self._quoted_columns(index.columns)
                    options["primary_index"] = index
                else:
                    options["indexes"][self._quoted_name(index)] = index

        columns = []
        for column in table.columns:
            if column.type is PortableType.STRING and column.length is None:
                column = replace(column, length=self.varchar_default_length)
            columns.append(column)

        if create_flags & self.CREATE_FOREIGNKEYS:
            options["foreign_keys"] = list(table.foreign_keys)

        sql = self._get_create_table_sql(table_name, columns, options)

        if self.supports_comment_on_statement():
            for column in table.columns:
                if column.comment:
                    sql.append(self.get_comment_on_column_sql(table.name, column.name, column.comment))

        logger.debug(f"Generated {len(sql)} statement(s) for CREATE TABLE {table.name}")
        return sql

    def _get_create_table_sql(self, table_name: str, columns: Sequence[Column],
                              options: Optional[dict] = None) -> List[str]:
        """
        Build CREATE TABLE from prepared columns and options.

        Options:
            unique_constraints: {name: Index} declared inline
            primary: quoted primary key columns
            indexes: {name: Index} or [Index] declared inline
            foreign_keys: [ForeignKeyConstraint] created afterwards
        """
        options = options or {}
        column_list_sql = self.get_column_declaration_list_sql(columns)

        for name, definition in self._named_definitions(options.get("unique_constraints")):
            column_list_sql += ", " + self.get_unique_constraint_declaration_sql(name, definition)

        if options.get("primary"):
            primary = list(dict.fromkeys(options["primary"]))
            column_list_sql += ", PRIMARY KEY(" + ", ".join(primary) + ")"

        for name, definition in self._named_definitions(options.get("indexes")):
            column_list_sql += ", " + self.get_index_declaration_sql(name, definition)

        sql = [f"CREATE TABLE {table_name} ({column_list_sql})"]

        for foreign_key in options.get("foreign_keys") or []:
            sql.append(self.get_create_foreign_key_sql(foreign_key, table_name))

        return sql

    def get_drop_table_sql(self, table: Union[str, Table]) -> str:
        return f"DROP TABLE {self._quoted_name(table)}"

    def get_truncate_table_sql(self, table: Union[str, Table]) -> str:
        return f"TRUNCATE TABLE {self._quoted_name(table)}"

    def get_temporary_table_sql(self) -> str:
        return "TEMPORARY"

    def get_create_temporary_table_snippet_sql(self) -> str:
        return f"CREATE {self.get_temporary_table_sql()} TABLE"

    # ==================== Indexes and Constraints ====================

    def get_index_field_declaration_list_sql(self, columns: Sequence[str]) -> str:
        return ", ".join(columns)

    def _require_columns(self, index: Index) -> List[str]:
        columns = self._quoted_columns(index.columns)
        if not columns:
            raise InvalidDescriptorError("Incomplete definition. 'columns' required.")
        return columns

    def _get_create_index_sql_flags(self, index: Index) -> str:
        return "UNIQUE " if index.is_unique else ""

    def get_create_index_sql(self, index: Index, table: Union[str, Table]) -> str:
        """
        CREATE INDEX statement (ADD PRIMARY KEY for a primary index).

        Raises:
            InvalidDescriptorError: if the index has no columns
        """
        columns = self._require_columns(index)
        table_name = self._quoted_name(table)

        if index.is_primary:
            return self.get_create_primary_key_sql(index, table_name)

        return (
            f"CREATE {self._get_create_index_sql_flags(index)}INDEX {self._quoted_name(index)} "
            f"ON {table_name} ({self.get_index_field_declaration_list_sql(columns)})"
        )

    def get_create_primary_key_sql(self, index: Index, table: Union[str, Table]) -> str:
        columns = self._require_columns(index)
        return (
            f"ALTER TABLE {self._quoted_name(table)} ADD PRIMARY KEY "
            f"({self.get_index_field_declaration_list_sql(columns)})"
        )

    def get_unique_constraint_declaration_sql(self, name: str, index: Index) -> str:
        columns = self._require_columns(index)
        return (
            f"CONSTRAINT {self.quote_identifier(name)} "
            f"UNIQUE ({self.get_index_field_declaration_list_sql(columns)})"
        )

    def get_index_declaration_sql(self, name: str, index: Index) -> str:
        columns = self._require_columns(index)
        return (
            f"{self._get_create_index_sql_flags(index)}INDEX {self.quote_identifier(name)} "
            f"({self.get_index_field_declaration_list_sql(columns)})"
        )

    def get_create_constraint_sql(self, constraint: Constraint, table: Union[str, Table]) -> str:
        """
        ALTER TABLE ... ADD CONSTRAINT for a primary key, unique constraint
        or foreign key.

        Raises:
            InvalidDescriptorError: for a plain index or an empty column list
        """
        query = f"ALTER TABLE {self._quoted_name(table)} ADD CONSTRAINT {self._quoted_name(constraint)}"
        references = ""

        if isinstance(constraint, Index):
            columns = self._require_columns(constraint)
            if constraint.is_primary:
                query += " PRIMARY KEY"
            elif constraint.is_unique:
                query += " UNIQUE"
            else:
                raise InvalidDescriptorError(
                    "Can only create primary or unique constraints, no common indexes "
                    "with get_create_constraint_sql()."
                )
        else:
            columns = self._quoted_columns(constraint.local_columns)
            if not columns:
                raise InvalidDescriptorError("Incomplete definition. 'local columns' required.")
            query += " FOREIGN KEY"
            references = (
                f" REFERENCES {self.quote_identifier(constraint.foreign_table_name)} "
                f"({', '.join(self._quoted_columns(constraint.foreign_columns))})"
            )

        return f"{query} ({', '.join(columns)}){references}"

    def get_drop_index_sql(self, index: Union[str, Index], table: Union[str, Table, None] = None) -> str:
        return f"DROP INDEX {self._quoted_name(index)}"

    def get_drop_constraint_sql(self, constraint: Union[str, Constraint], table: Union[str, Table]) -> str:
        return f"ALTER TABLE {self._quoted_name(table)} DROP CONSTRAINT {self._quoted_name(constraint)}"

    def get_rename_index_sql(self, old_index_name: str, index: Index, table: Union[str, Table]) -> List[str]:
        return [
            self.get_drop_index_sql(old_index_name, table),
            self.get_create_index_sql(index, table),
        ]

    # ==================== Foreign Keys ====================

    def supports_foreign_key_constraints(self) -> bool:
        return True

    def supports_foreign_key_on_update(self) -> bool:
        return True

    def get_create_foreign_key_sql(self, foreign_key: ForeignKeyConstraint,
                                   table: Union[str, Table]) -> str:
        return f"ALTER TABLE {self._quoted_name(table)} ADD {self.get_foreign_key_declaration_sql(foreign_key)}"

    def get_foreign_key_declaration_sql(self, foreign_key: ForeignKeyConstraint) -> str:
        return (
            self.get_foreign_key_base_declaration_sql(foreign_key)
            + self.get_advanced_foreign_key_options_sql(foreign_key)
        )

    def get_advanced_foreign_key_options_sql(self, foreign_key: ForeignKeyConstraint) -> str:
        query = ""
        if self.supports_foreign_key_on_update() and foreign_key.on_update:
            query += f" ON UPDATE {self.get_foreign_key_referential_action_sql(foreign_key.on_update)}"
        if foreign_key.on_delete:
            query += f" ON DELETE {self.get_foreign_key_referential_action_sql(foreign_key.on_delete)}"
        return query

    def get_foreign_key_referential_action_sql(self, action: str) -> str:
        upper = action.upper()
        if upper not in REFERENTIAL_ACTIONS:
            raise InvalidDescriptorError(f"Invalid foreign key action: {upper}")
        return upper

    def get_foreign_key_base_declaration_sql(self, foreign_key: ForeignKeyConstraint) -> str:
        """
        ``[CONSTRAINT <name> ]FOREIGN KEY (<cols>) REFERENCES <table> (<cols>)``

        Raises:
            InvalidDescriptorError: if either column list is empty
        """
        if not foreign_key.local_columns:
            raise InvalidDescriptorError("Incomplete definition. 'local' required.")
        if not foreign_key.foreign_columns:
            raise InvalidDescriptorError("Incomplete definition. 'foreign' required.")
        if not foreign_key.foreign_table_name:
            raise InvalidDescriptorError("Incomplete definition. 'foreignTable' required.")

        sql = ""
        if foreign_key.name:
            sql += f"CONSTRAINT {self._quoted_name(foreign_key)} "

        return sql + (
            f"FOREIGN KEY ({', '.join(self._quoted_columns(foreign_key.local_columns))}) "
            f"REFERENCES {self.quote_identifier(foreign_key.foreign_table_name)} "
            f"({', '.join(self._quoted_columns(foreign_key.foreign_columns))})"
        )

    def get_drop_foreign_key_sql(self, foreign_key: Union[str, ForeignKeyConstraint],
                                 table: Union[str, Table]) -> str:
        return f"ALTER TABLE {self._quoted_name(table)} DROP FOREIGN KEY {self._quoted_name(foreign_key)}"

    # ==================== Alter Table ====================

    @abstractmethod
    def get_alter_table_sql(self, diff: TableDiff) -> List[str]:
        pass

    def _on_alter_table_change(self, kind: AlterChangeKind, payload: Any,
                               diff: TableDiff, collected: List[str]) -> bool:
        """
        Ask the hooks about one change.

        Returns:
            True when a hook vetoed the default clause; the hooks'
            replacement statements are appended to ``collected``.
        """
        vetoed = False
        for hook in self.hooks:
            replacement = hook.on_alter_table_change(kind, payload, diff)
            if replacement is not None:
                vetoed = True
                collected.extend(replacement)

        if vetoed:
            logger.debug(f"Hook took over {kind.value} change on table {diff.name}")
        return vetoed

    def _get_pre_alter_table_index_foreign_key_sql(self, diff: TableDiff) -> List[str]:
        """Drops that must run before the column changes."""
        table_name = self.quote_identifier(diff.name)
        sql = []

        if self.supports_foreign_key_constraints():
            for foreign_key in diff.removed_foreign_keys:
                sql.append(self.get_drop_foreign_key_sql(foreign_key, table_name))
            for foreign_key in diff.changed_foreign_keys:
                sql.append(self.get_drop_foreign_key_sql(foreign_key, table_name))

        for index in diff.removed_indexes.values():
            sql.append(self.get_drop_index_sql(index, table_name))
        for index in diff.changed_indexes.values():
            sql.append(self.get_drop_index_sql(index, table_name))

        return sql

    def _get_post_alter_table_index_foreign_key_sql(self, diff: TableDiff, table_name: str) -> List[str]:
        """Creates that run after the column changes, against ``table_name``."""
        sql = []

        if self.supports_foreign_key_constraints():
            for foreign_key in diff.added_foreign_keys:
                sql.append(self.get_create_foreign_key_sql(foreign_key, table_name))
            for foreign_key in diff.changed_foreign_keys:
                sql.append(self.get_create_foreign_key_sql(foreign_key, table_name))

        for index in diff.added_indexes.values():
            sql.append(self.get_create_index_sql(index, table_name))
        for index in diff.changed_indexes.values():
            sql.append(self.get_create_index_sql(index, table_name))

        for old_index_name, index in diff.renamed_indexes.items():
            sql.extend(self.get_rename_index_sql(old_index_name, index, table_name))

        return sql

    def _get_alter_table_index_foreign_key_sql(self, diff: TableDiff) -> List[str]:
        table_name = self.quote_identifier(diff.new_name or diff.name)
        return (
            self._get_pre_alter_table_index_foreign_key_sql(diff)
            + self._get_post_alter_table_index_foreign_key_sql(diff, table_name)
        )

    # ==================== Views ====================

    def get_create_view_sql(self, name: str, sql: str) -> str:
        return f"CREATE VIEW {self.quote_identifier(name)} AS {sql}"

    def get_drop_view_sql(self, name: str) -> str:
        return f"DROP VIEW {self.quote_identifier(name)}"

    # ==================== Sequences ====================

    def supports_sequences(self) -> bool:
        return False

    def get_create_sequence_sql(self, sequence: SequenceDef) -> str:
        raise UnsupportedOperationError.not_supported("get_create_sequence_sql")

    def get_alter_sequence_sql(self, sequence: SequenceDef) -> str:
        raise UnsupportedOperationError.not_supported("get_alter_sequence_sql")

    def get_drop_sequence_sql(self, sequence: Union[str, SequenceDef]) -> str:
        return f"DROP SEQUENCE {self._quoted_name(sequence)}"

    def get_sequence_next_val_sql(self, sequence_name: str) -> str:
        raise UnsupportedOperationError.not_supported("get_sequence_next_val_sql")

    # ==================== Databases ====================

    def supports_create_drop_database(self) -> bool:
        return True

    def get_create_database_sql(self, database: str) -> str:
        return f"CREATE DATABASE {self.quote_identifier(database)}"

    def get_drop_database_sql(self, database: str) -> str:
        return f"DROP DATABASE {self.quote_identifier(database)}"

    # ==================== Catalog Queries ====================

    @abstractmethod
    def get_list_databases_sql(self) -> str:
        pass

    @abstractmethod
    def get_list_tables_sql(self) -> str:
        pass

    @abstractmethod
    def get_list_views_sql(self, database: Optional[str] = None) -> str:
        pass

    @abstractmethod
    def get_list_sequences_sql(self, database: Optional[str] = None) -> str:
        pass

    @abstractmethod
    def get_list_table_columns_sql(self, table: str, database: Optional[str] = None) -> str:
        pass

    @abstractmethod
    def get_list_table_indexes_sql(self, table: str, database: Optional[str] = None) -> str:
        pass

    @abstractmethod
    def get_list_table_foreign_keys_sql(self, table: str, database: Optional[str] = None) -> str:
        pass

    def get_list_users_sql(self) -> str:
        raise UnsupportedOperationError.not_supported("get_list_users_sql")

    # ==================== Capability Checks ====================

    def supports_identity_columns(self) -> bool:
        return False

    def prefers_identity_columns(self) -> bool:
        return False

    def supports_comment_on_statement(self) -> bool:
        return False

    # ==================== Utility Methods ====================

    def get_for_update_sql(self) -> str:
        return "FOR UPDATE"

    def get_dummy_select_sql(self) -> str:
        return "SELECT 1"

    def get_sql_result_casing(self, column: str) -> str:
        return column
