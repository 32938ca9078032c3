"""
Unit tests for InformixPlatform SQL generation.
"""
import pytest

from informix_dbal.exceptions import InvalidDescriptorError, UnsupportedOperationError
from informix_dbal.schema import (
    Column,
    ForeignKeyConstraint,
    Index,
    PortableType,
    Sequence,
    Table,
)


def _column(name, column_type, **kwargs):
    return Column(name=name, type=column_type, **kwargs)


class TestIdentifiers:
    """Test identifier quoting and limits."""

    def test_identifiers_are_not_quoted(self, platform):
        """Test that identifiers are never quoted."""
        assert platform.quote_identifier("customer") == "customer"
        assert platform.quote_identifier("informix.customer") == "informix.customer"

    def test_name(self, platform):
        """Test the platform name."""
        assert platform.name == "informix"

    def test_limits(self, platform):
        """Test identifier and varchar limits from the config."""
        assert platform.max_identifier_length == 128
        assert platform.varchar_max_length == 255
        assert platform.varchar_default_length == 255


class TestTypeDeclarations:
    """Test column type declarations."""

    @pytest.mark.parametrize("column,expected", [
        (_column("a", PortableType.BOOLEAN), "BOOLEAN"),
        (_column("a", PortableType.INTEGER), "INTEGER"),
        (_column("a", PortableType.INTEGER, autoincrement=True), "SERIAL"),
        (_column("a", PortableType.BIGINT), "BIGINT"),
        (_column("a", PortableType.BIGINT, autoincrement=True), "BIGSERIAL"),
        (_column("a", PortableType.SMALLINT), "SMALLINT"),
        (_column("a", PortableType.DATETIME), "DATETIME YEAR TO SECOND"),
        (_column("a", PortableType.DATETIMETZ), "DATETIME YEAR TO SECOND"),
        (_column("a", PortableType.DATE), "DATE"),
        (_column("a", PortableType.TIME), "DATETIME HOUR TO SECOND"),
        (_column("a", PortableType.BLOB), "BYTE"),
        (_column("a", PortableType.BINARY), "BYTE"),
        (_column("a", PortableType.TEXT), "TEXT"),
        (_column("a", PortableType.JSON), "TEXT"),
        (_column("a", PortableType.GUID), "CHAR(36)"),
        (_column("a", PortableType.FLOAT), "DOUBLE PRECISION"),
    ])
    def test_type_declaration(self, platform, column, expected):
        """Test the declaration for each portable type."""
        assert platform.get_type_declaration_sql(column) == expected

    def test_varchar(self, platform):
        """Test VARCHAR and fixed CHAR declarations."""
        assert platform.get_type_declaration_sql(
            _column("a", PortableType.STRING, length=50)) == "VARCHAR(50)"
        assert platform.get_type_declaration_sql(
            _column("a", PortableType.STRING, length=50, fixed=True)) == "CHAR(50)"

    def test_varchar_default_length(self, platform):
        """Test the default varchar length."""
        assert platform.get_type_declaration_sql(_column("a", PortableType.STRING)) == "VARCHAR(255)"

    def test_varchar_over_maximum_becomes_text(self, platform):
        """Test that over-long strings become TEXT."""
        assert platform.get_type_declaration_sql(
            _column("a", PortableType.STRING, length=256)) == "TEXT"

    def test_decimal(self, platform):
        """Test NUMERIC precision and scale."""
        assert platform.get_type_declaration_sql(
            _column("a", PortableType.DECIMAL, precision=12, scale=2)) == "NUMERIC(12, 2)"
        assert platform.get_type_declaration_sql(_column("a", PortableType.DECIMAL)) == "NUMERIC(10, 0)"


class TestColumnDeclarations:
    """Test full column declarations."""

    def test_serial_not_null(self, platform):
        """Test that autoincrement columns are SERIAL NOT NULL."""
        column = _column("id", PortableType.INTEGER, autoincrement=True)
        assert platform.get_column_declaration_sql("id", column) == "id SERIAL NOT NULL"

    def test_nullable_without_default(self, platform):
        """Test that nullable columns get DEFAULT NULL."""
        column = _column("name", PortableType.STRING, notnull=False, length=100)
        assert platform.get_column_declaration_sql("name", column) == "name VARCHAR(100) DEFAULT NULL"

    def test_string_default_is_escaped(self, platform):
        """Test that string defaults are quoted and escaped."""
        column = _column("n", PortableType.STRING, length=10, default="it's")
        assert platform.get_column_declaration_sql("n", column) == "n VARCHAR(10) DEFAULT 'it''s' NOT NULL"

    def test_integer_default_is_unquoted(self, platform):
        """Test that integer defaults are not quoted."""
        column = _column("qty", PortableType.INTEGER, default=5)
        assert platform.get_column_declaration_sql("qty", column) == "qty INTEGER DEFAULT 5 NOT NULL"

    @pytest.mark.parametrize("column_type,token", [
        (PortableType.DATETIME, "CURRENT"),
        (PortableType.DATE, "TODAY"),
        (PortableType.TIME, "CURRENT HOUR TO SECOND"),
    ])
    def test_current_tokens_are_unquoted(self, platform, column_type, token):
        """Test that CURRENT and TODAY defaults are not quoted."""
        column = _column("ts", column_type, default=token)
        assert f" DEFAULT {token} NOT NULL" in platform.get_column_declaration_sql("ts", column)

    def test_datetime_literal_is_quoted(self, platform):
        """Test that datetime literal defaults are quoted."""
        column = _column("ts", PortableType.DATETIME, default="2020-01-01 00:00:00")
        assert "DEFAULT '2020-01-01 00:00:00'" in platform.get_column_declaration_sql("ts", column)

    def test_boolean_default(self, platform):
        """Test that boolean defaults become 'f'/'t'."""
        column = _column("active", PortableType.BOOLEAN, default=False)
        assert platform.get_column_declaration_sql("active", column) == "active BOOLEAN DEFAULT 'f' NOT NULL"

    def test_column_definition_overrides(self, platform):
        """Test that an explicit column definition is used verbatim."""
        column = _column("body", PortableType.STRING, column_definition="LVARCHAR(4000)")
        assert platform.get_column_declaration_sql("body", column) == "body LVARCHAR(4000)"

    def test_convert_booleans(self, platform):
        """Test boolean conversion of scalars and lists."""
        assert platform.convert_booleans(True) == "t"
        assert platform.convert_booleans(False) == "f"
        assert platform.convert_booleans([True, False, 1]) == ["t", "f", 1]
        assert platform.convert_booleans("x") == "x"

    def test_no_column_comments(self, platform):
        """Test that column comments produce no SQL."""
        assert platform.get_comment_on_column_sql("t", "c", "note") == ""


class TestExpressions:
    """Test SQL expression helpers."""

    def test_current_values(self, platform):
        """Test the current date and time expressions."""
        assert platform.get_now_expression() == "TODAY"
        assert platform.get_current_date_sql() == "TODAY"
        assert platform.get_current_time_sql() == "CURRENT HOUR TO SECOND"
        assert platform.get_current_timestamp_sql() == "CURRENT"

    @pytest.mark.parametrize("call", [
        lambda p: p.get_md5_expression("a"),
        lambda p: p.get_not_expression("a"),
        lambda p: p.get_pi_expression(),
    ])
    def test_unsupported_expressions(self, platform, call):
        """Test that unsupported expressions raise."""
        with pytest.raises(UnsupportedOperationError) as exc_info:
            call(platform)
        assert "is not supported by platform" in str(exc_info.value)

    def test_date_arithmetic(self, platform):
        """Test date difference and interval arithmetic."""
        assert platform.get_date_diff_expression("a", "b") == "a::DATE - b::DATE"
        assert platform.get_date_add_hour_expression("d", 3) == "d + interval(3) hour(9) to hour"
        assert platform.get_date_sub_hour_expression("d", 3) == "d - interval(3) hour(9) to hour"
        assert platform.get_date_add_days_expression("d", 2) == "d + interval(2) day(9) to day"
        assert platform.get_date_sub_days_expression("d", 2) == "d - interval(2) day(9) to day"
        assert platform.get_date_add_month_expression("d", 2) == "ADD_MONTHS(d,2)"
        assert platform.get_date_sub_month_expression("d", 2) == "ADD_MONTHS(d,-2)"

    @pytest.mark.parametrize("months,expected", [
        (-3, "ADD_MONTHS(d,-3)"),
        ("4", "ADD_MONTHS(d,-4)"),
        ("n", "ADD_MONTHS(d,-(n))"),
        ("n + 1", "ADD_MONTHS(d,-(n + 1))"),
    ])
    def test_date_sub_month_expression(self, platform, months, expected):
        """Test month subtraction with integers and expressions."""
        assert platform.get_date_sub_month_expression("d", months) == expected

    def test_bit_operations(self, platform):
        """Test BITAND and BITOR."""
        assert platform.get_bit_and_comparison_expression(2, 4) == "BITAND(2, 4)"
        assert platform.get_bit_or_comparison_expression(2, 4) == "BITOR(2, 4)"

    def test_substring(self, platform):
        """Test SUBSTR with and without a length."""
        assert platform.get_substring_expression("name", 2) == "SUBSTR(name, 2)"
        assert platform.get_substring_expression("name", 2, 3) == "SUBSTR(name, 2, 3)"


class TestLimitQuery:
    """Test SKIP/LIMIT rewriting."""

    def test_limit(self, platform):
        """Test a limit alone."""
        assert platform.modify_limit_query("SELECT * FROM user", 10) == "SELECT LIMIT 10 * FROM user"

    def test_limit_and_offset(self, platform):
        """Test that SKIP precedes LIMIT."""
        assert platform.modify_limit_query("SELECT * FROM user", 10, 5) == "SELECT SKIP 5 LIMIT 10 * FROM user"

    def test_offset_only(self, platform):
        """Test an offset alone."""
        assert platform.modify_limit_query("SELECT * FROM user", None, 5) == "SELECT SKIP 5 * FROM user"

    def test_zero_offset_is_emitted(self, platform):
        """Test that an offset of 0 is still emitted."""
        assert platform.modify_limit_query("SELECT * FROM user", 10, 0) == "SELECT SKIP 0 LIMIT 10 * FROM user"

    def test_nothing_requested(self, platform):
        """Test that the query is unchanged without limit or offset."""
        assert platform.modify_limit_query("SELECT * FROM user", None, None) == "SELECT * FROM user"

    def test_lower_case_keyword(self, platform):
        """Test that a lower-case select is rewritten."""
        assert platform.modify_limit_query("select id from t", 1) == "SELECT LIMIT 1 id from t"

    def test_only_first_select_is_rewritten(self, platform):
        """Test that subquery SELECTs are left alone."""
        query = "SELECT a FROM (SELECT b FROM t) x"
        assert platform.modify_limit_query(query, 1) == "SELECT LIMIT 1 a FROM (SELECT b FROM t) x"

    def test_select_in_comment_is_skipped(self, platform):
        """Test that select inside a comment is ignored."""
        query = "-- select\nSELECT a FROM t"
        assert platform.modify_limit_query(query, 1) == "-- select\nSELECT LIMIT 1 a FROM t"

    def test_whitespace_after_select_is_collapsed(self, platform):
        """Test that whitespace after SELECT collapses to one space."""
        assert platform.modify_limit_query("SELECT   a FROM t", 1) == "SELECT LIMIT 1 a FROM t"

    def test_query_without_select_unchanged(self, platform):
        """Test that non-SELECT statements are unchanged."""
        assert platform.modify_limit_query("UPDATE t SET a = 1", 1) == "UPDATE t SET a = 1"

    def test_long_in_list(self, platform):
        """Test a query with more than 10,000 tokens in an IN list."""
        values = ", ".join(str(i) for i in range(6000))
        query = f"SELECT a FROM t WHERE x IN ({values})"

        result = platform.modify_limit_query(query, 10)

        assert result == f"SELECT LIMIT 10 a FROM t WHERE x IN ({values})"

    def test_wide_column_list(self, platform):
        """Test a query selecting thousands of columns."""
        columns = ", ".join(f"c{i}" for i in range(5000))
        query = f"SELECT {columns} FROM t"

        result = platform.modify_limit_query(query, 10, 20)

        assert result == f"SELECT SKIP 20 LIMIT 10 {columns} FROM t"

    @pytest.mark.parametrize("limit,offset", [(-1, None), (None, -1), (5, -3)])
    def test_negative_values_raise(self, platform, limit, offset):
        """Test that negative limits and offsets are rejected."""
        with pytest.raises(InvalidDescriptorError):
            platform.modify_limit_query("SELECT * FROM t", limit, offset)


class TestCreateTable:
    """Test CREATE TABLE generation."""

    def test_primary_key(self, platform):
        """Test an inline primary key."""
        table = Table(
            name="test",
            columns=[
                _column("id", PortableType.INTEGER, autoincrement=True),
                _column("test", PortableType.STRING, notnull=False, length=255),
            ],
            indexes=[Index("primary", ["id"], is_primary=True)],
        )
        assert platform.get_create_table_sql(table) == [
            "CREATE TABLE test (id SERIAL NOT NULL, test VARCHAR(255) DEFAULT NULL, PRIMARY KEY(id))"
        ]

    def test_indexes_become_separate_statements(self, platform):
        """Test that indexes are created after the table."""
        table = Table(
            name="test",
            columns=[
                _column("id", PortableType.INTEGER),
                _column("foo", PortableType.STRING),
                _column("bar", PortableType.STRING),
            ],
            indexes=[
                Index("uniq_foo_bar", ["foo", "bar"], is_unique=True),
                Index("idx_bar", ["bar"]),
            ],
        )
        assert platform.get_create_table_sql(table) == [
            "CREATE TABLE test (id INTEGER NOT NULL, foo VARCHAR(255) NOT NULL, bar VARCHAR(255) NOT NULL)",
            "CREATE UNIQUE INDEX uniq_foo_bar ON test (foo, bar)",
            "CREATE INDEX idx_bar ON test (bar)",
        ]

    def test_foreign_keys_follow_create_table(self, platform):
        """Test that foreign keys are added after the table."""
        table = Table(
            name="test",
            columns=[_column("other_id", PortableType.INTEGER)],
            indexes=[Index("idx_other", ["other_id"])],
            foreign_keys=[ForeignKeyConstraint(["other_id"], "other", ["id"], name="fk_other")],
        )
        assert platform.get_create_table_sql(table) == [
            "CREATE TABLE test (other_id INTEGER NOT NULL)",
            "ALTER TABLE test ADD CONSTRAINT FOREIGN KEY (other_id) REFERENCES other (id) CONSTRAINT fk_other",
            "CREATE INDEX idx_other ON test (other_id)",
        ]

    def test_create_flags_skip_indexes_and_foreign_keys(self, platform):
        """Test that create flags of 0 emit the table only."""
        table = Table(
            name="test",
            columns=[_column("id", PortableType.INTEGER)],
            indexes=[Index("primary", ["id"], is_primary=True), Index("idx_id", ["id"])],
            foreign_keys=[ForeignKeyConstraint(["id"], "other", ["id"])],
        )
        assert platform.get_create_table_sql(table, create_flags=0) == [
            "CREATE TABLE test (id INTEGER NOT NULL)"
        ]

    def test_no_columns_raises(self, platform):
        """Test that a table without columns is rejected."""
        with pytest.raises(InvalidDescriptorError):
            platform.get_create_table_sql(Table(name="empty"))

    def test_comments_are_not_emitted(self, platform):
        """Test that column comments are dropped."""
        table = Table(name="t", columns=[_column("a", PortableType.INTEGER, comment="note")])
        assert platform.get_create_table_sql(table) == ["CREATE TABLE t (a INTEGER NOT NULL)"]

    def test_temporary_and_drop(self, platform):
        """Test temporary table, DROP and TRUNCATE statements."""
        assert platform.get_create_temporary_table_snippet_sql() == "CREATE TEMP TABLE"
        assert platform.get_drop_table_sql("test") == "DROP TABLE test"
        assert platform.get_truncate_table_sql(Table(name="test")) == "TRUNCATE TABLE test"


class TestIndexesAndConstraints:
    """Test index and constraint statements."""

    def test_create_index(self, platform):
        """Test a plain CREATE INDEX."""
        assert platform.get_create_index_sql(Index("idx", ["a", "b"]), "t") == "CREATE INDEX idx ON t (a, b)"

    def test_create_primary_index(self, platform):
        """Test that a primary index becomes ADD PRIMARY KEY."""
        index = Index("primary", ["id"], is_primary=True)
        assert platform.get_create_index_sql(index, "t") == "ALTER TABLE t ADD PRIMARY KEY (id)"

    def test_index_without_columns_raises(self, platform):
        """Test that an index without columns is rejected."""
        with pytest.raises(InvalidDescriptorError) as exc_info:
            platform.get_create_index_sql(Index("idx", []), "t")
        assert str(exc_info.value) == "Incomplete definition. 'columns' required."

    def test_unique_constraint_declaration(self, platform):
        """Test that the constraint name follows the UNIQUE column list."""
        index = Index("uq", ["a", "b"], is_unique=True)
        assert platform.get_unique_constraint_declaration_sql("uq", index) == "UNIQUE (a, b) CONSTRAINT uq"
        assert platform.get_index_declaration_sql("uq", index) == "UNIQUE (a, b) CONSTRAINT uq"

    def test_create_unique_constraint(self, platform):
        """Test ADD CONSTRAINT for a unique index."""
        index = Index("constraint_name", ["test"], is_unique=True)
        assert platform.get_create_constraint_sql(index, "test") == (
            "ALTER TABLE test ADD CONSTRAINT UNIQUE (test) CONSTRAINT constraint_name"
        )

    def test_create_primary_key_constraint(self, platform):
        """Test ADD CONSTRAINT for a primary key."""
        index = Index("constraint_name", ["test"], is_primary=True)
        assert platform.get_create_constraint_sql(index, "test") == (
            "ALTER TABLE test ADD CONSTRAINT PRIMARY KEY (test) CONSTRAINT constraint_name"
        )

    def test_create_foreign_key_constraint(self, platform):
        """Test ADD CONSTRAINT for a foreign key."""
        fk = ForeignKeyConstraint(["fk_name"], "foreign", ["id"], name="constraint_fk")
        assert platform.get_create_constraint_sql(fk, "test") == (
            "ALTER TABLE test ADD CONSTRAINT FOREIGN KEY (fk_name) REFERENCES foreign (id) CONSTRAINT constraint_fk"
        )

    def test_plain_index_constraint_raises(self, platform):
        """Test that a plain index cannot be a constraint."""
        with pytest.raises(InvalidDescriptorError):
            platform.get_create_constraint_sql(Index("idx", ["a"]), "test")

    def test_drop_index_and_constraint(self, platform):
        """Test DROP INDEX and DROP CONSTRAINT."""
        assert platform.get_drop_index_sql("idx", "t") == "DROP INDEX idx"
        assert platform.get_drop_constraint_sql("uq", "t") == "ALTER TABLE t DROP CONSTRAINT uq"

    def test_rename_index(self, platform):
        """Test that renaming an index drops and recreates it."""
        assert platform.get_rename_index_sql("old_idx", Index("new_idx", ["a"]), "t") == [
            "DROP INDEX old_idx",
            "CREATE INDEX new_idx ON t (a)",
        ]


class TestForeignKeys:
    """Test foreign key statements."""

    def test_unnamed_foreign_key(self, platform):
        """Test adding a foreign key without a name."""
        fk = ForeignKeyConstraint(["fk_name_id"], "other_table", ["id"])
        assert platform.get_create_foreign_key_sql(fk, "test") == (
            "ALTER TABLE test ADD CONSTRAINT FOREIGN KEY (fk_name_id) REFERENCES other_table (id)"
        )

    def test_name_follows_referential_actions(self, platform):
        """Test that the name follows ON UPDATE and ON DELETE."""
        fk = ForeignKeyConstraint(["a"], "b", ["id"], name="fk", on_update="cascade", on_delete="set null")
        assert platform.get_create_foreign_key_sql(fk, "test") == (
            "ALTER TABLE test ADD CONSTRAINT FOREIGN KEY (a) REFERENCES b (id) "
            "ON UPDATE CASCADE ON DELETE SET NULL CONSTRAINT fk"
        )

    def test_declarations_end_with_name(self, platform):
        """Test that both declaration forms end with the name."""
        fk = ForeignKeyConstraint(["a", "b"], "p", ["x", "y"], name="fk_ab")
        assert platform.get_foreign_key_base_declaration_sql(fk) == (
            "FOREIGN KEY (a, b) REFERENCES p (x, y) CONSTRAINT fk_ab"
        )
        assert platform.get_foreign_key_declaration_sql(fk) == (
            "FOREIGN KEY (a, b) REFERENCES p (x, y) CONSTRAINT fk_ab"
        )

    def test_invalid_action_raises(self, platform):
        """Test that an unknown referential action is rejected."""
        fk = ForeignKeyConstraint(["a"], "b", ["id"], on_delete="explode")
        with pytest.raises(InvalidDescriptorError):
            platform.get_foreign_key_declaration_sql(fk)

    @pytest.mark.parametrize("local,foreign", [([], ["id"]), (["a"], [])])
    def test_missing_columns_raise(self, platform, local, foreign):
        """Test that missing local or foreign columns are rejected."""
        with pytest.raises(InvalidDescriptorError):
            platform.get_foreign_key_declaration_sql(ForeignKeyConstraint(local, "b", foreign))

    def test_drop_foreign_key(self, platform):
        """Test dropping a foreign key by object or name."""
        fk = ForeignKeyConstraint(["a"], "b", ["id"], name="fk_a")
        assert platform.get_drop_foreign_key_sql(fk, "test") == "ALTER TABLE test DROP CONSTRAINT fk_a"
        assert platform.get_drop_foreign_key_sql("fk_a", "test") == "ALTER TABLE test DROP CONSTRAINT fk_a"

    def test_drop_unnamed_foreign_key_raises(self, platform):
        """Test that dropping an unnamed foreign key is rejected."""
        fk = ForeignKeyConstraint(["a"], "b", ["id"])
        with pytest.raises(InvalidDescriptorError) as exc_info:
            platform.get_drop_foreign_key_sql(fk, "test")
        assert "ForeignKeyConstraint name required" in str(exc_info.value)

    def test_unnamed_foreign_key_constraint_raises(self, platform):
        """Test that ADD CONSTRAINT needs a foreign key name."""
        with pytest.raises(InvalidDescriptorError):
            platform.get_create_constraint_sql(ForeignKeyConstraint(["a"], "b", ["id"]), "test")


class TestSequencesViewsDatabases:
    """Test sequence, view and database statements."""

    def test_sequences(self, platform):
        """Test sequence create, alter, drop and next value."""
        assert platform.supports_sequences()
        assert platform.get_create_sequence_sql(Sequence("seq")) == (
            "CREATE SEQUENCE seq START WITH 1 INCREMENT BY 1 MINVALUE 1"
        )
        assert platform.get_create_sequence_sql(Sequence("seq", allocation_size=10, initial_value=5)) == (
            "CREATE SEQUENCE seq START WITH 5 INCREMENT BY 10 MINVALUE 5"
        )
        assert platform.get_alter_sequence_sql(Sequence("seq", allocation_size=3)) == (
            "ALTER SEQUENCE seq INCREMENT BY 3"
        )
        assert platform.get_drop_sequence_sql("seq") == "DROP SEQUENCE seq"
        assert platform.get_sequence_next_val_sql("seq") == "seq.NEXTVAL"

    def test_views(self, platform):
        """Test CREATE VIEW and DROP VIEW."""
        assert platform.get_create_view_sql("v", "SELECT 1 FROM t") == "CREATE VIEW v AS SELECT 1 FROM t"
        assert platform.get_drop_view_sql("v") == "DROP VIEW v"

    def test_databases(self, platform):
        """Test that databases can be created but not dropped."""
        assert not platform.supports_create_drop_database()
        assert platform.get_create_database_sql("stores") == "CREATE DATABASE stores WITH LOG"
        with pytest.raises(UnsupportedOperationError):
            platform.get_drop_database_sql("stores")

    def test_list_users_unsupported(self, platform):
        """Test that listing users is unsupported."""
        with pytest.raises(UnsupportedOperationError):
            platform.get_list_users_sql()


class TestCatalogDelegation:
    """Test catalog query delegation."""

    def test_list_queries_come_from_catalog_builder(self, platform):
        """Test that list queries come from InformixCatalogQueries."""
        queries = platform.catalog_queries
        assert platform.get_list_databases_sql() == queries.list_databases_sql()
        assert platform.get_list_tables_sql() == queries.list_tables_sql()
        assert platform.get_list_views_sql() == queries.list_views_sql()
        assert platform.get_list_sequences_sql() == queries.list_sequences_sql()
        assert platform.get_list_table_columns_sql("t") == queries.list_table_columns_sql("t")
        assert platform.get_list_table_indexes_sql("t") == queries.list_table_indexes_sql("t")
        assert platform.get_list_table_foreign_keys_sql("t") == queries.list_table_foreign_keys_sql("t")
        assert platform.get_list_table_constraints_sql("t") == queries.list_table_constraints_sql("t")


class TestCapabilities:
    """Test capability flags and utility SQL."""

    def test_capabilities(self, platform):
        """Test the capability flags."""
        assert platform.supports_identity_columns()
        assert platform.prefers_identity_columns()
        assert platform.supports_foreign_key_constraints()
        assert not platform.supports_comment_on_statement()

    def test_utilities(self, platform):
        """Test FOR UPDATE, dummy select and result casing."""
        assert platform.get_for_update_sql() == " "
        assert platform.get_dummy_select_sql() == "SELECT 1 FROM SYSTABLES WHERE TABID = 1"
        assert platform.get_sql_result_casing("tabname") == "TABNAME"
