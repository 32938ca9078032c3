"""
Catalog Queries - SQL that introspects the Informix system catalog

Every query is fixed text apart from the interpolated table/owner name.
Multi-column keys are exposed as numbered slot fields (col1..col16,
pkcol1..pkcol16) because sysindexes stores index parts that way.
"""

from typing import List

from ..constants import (
    CATALOG_SLOT_COUNT,
    CONSTRAINT_TYPE_REFERENCE,
    MAX_NOT_NULL_COLTYPE,
    NOT_NULL_COLTYPE_OFFSET,
    TABLE_TYPE_TABLE,
    TABLE_TYPE_VIEW,
)
from .type_map import TypeMap

import logging
logger = logging.getLogger(__name__)


def quote_string_literal(value: str) -> str:
    """Single-quote a string literal, doubling embedded quotes."""
    return "'" + str(value).replace("'", "''") + "'"


# syscolumns.coltype with the NOT NULL offset removed
_BASE_COLTYPE = (
    f"(CASE WHEN (sc.coltype BETWEEN {NOT_NULL_COLTYPE_OFFSET} AND {MAX_NOT_NULL_COLTYPE}) "
    f"THEN (sc.coltype - {NOT_NULL_COLTYPE_OFFSET}) ELSE sc.coltype END)"
)


class InformixCatalogQueries:
    """
    Builds catalog introspection queries.

    Usage:
        queries = InformixCatalogQueries(TypeMap(config))
        sql = queries.list_table_columns_sql("customer")
    """

    def __init__(self, type_map: TypeMap):
        self.type_map = type_map
        self.config = type_map.config

    # ==================== Databases / Tables / Views ====================

    def list_databases_sql(self) -> str:
        return "SELECT sysmaster:sysdatabases.name FROM sysmaster:sysdatabases"

    def list_tables_sql(self) -> str:
        """Base tables only."""
        return (
            "SELECT systables.tabname FROM systables "
            f"WHERE tabtype = {quote_string_literal(TABLE_TYPE_TABLE)}"
        )

    def list_tables_for_owner_sql(self, owner: str) -> str:
        """Base tables owned by ``owner``."""
        return (
            f"{self.list_tables_sql()} "
            f"AND UPPER(owner) = UPPER({quote_string_literal(owner)})"
        )

    def list_views_sql(self) -> str:
        """
        Views with their stored text.

        sysviews splits long view text into several rows; they are returned
        in chunk order so the normalizer can reassemble them.
        """
        return (
            "SELECT st.tabname, sv.seqno, sv.viewtext "
            "FROM systables st, sysviews sv "
            f"WHERE st.tabtype = {quote_string_literal(TABLE_TYPE_VIEW)} "
            "AND st.tabid = sv.tabid "
            "ORDER BY st.tabname, sv.seqno"
        )

    def list_sequences_sql(self) -> str:
        return (
            "SELECT st.tabname sequence, ss.start_val, ss.inc_val "
            "FROM syssequences ss, systables st "
            "WHERE ss.tabid = st.tabid"
        )

    def list_table_constraints_sql(self, table: str) -> str:
        return (
            "SELECT sc.constrid, sc.constrname, sc.owner, sc.tabid, "
            "sc.constrtype, sc.idxname, sc.collation "
            "FROM systables st, sysconstraints sc "
            f"WHERE st.tabname = {quote_string_literal(table)} "
            "AND st.tabid = sc.tabid"
        )

    # ==================== Columns ====================

    def _type_name_case_sql(self) -> str:
        """CASE expression turning coltype codes into lower-case type names."""
        parts = [f"CASE {_BASE_COLTYPE}"]
        for code, name in self.type_map.coltype_names.items():
            parts.append(f"WHEN {code} THEN {quote_string_literal(name)}")
        parts.append(
            "ELSE CASE WHEN (sc.extended_id > 0) THEN "
            "(SELECT UPPER(name) FROM sysxtdtypes WHERE extended_id = sc.extended_id) "
            f"ELSE {quote_string_literal('unknown')} END"
        )
        parts.append("END typename")
        return " ".join(parts)

    def _default_case_sql(self) -> str:
        parts = ["CASE sd.type"]
        for code, token in self.config.default_type_tokens.items():
            parts.append(f"WHEN {quote_string_literal(code)} THEN {quote_string_literal(token)}")
        parts.append("ELSE sd.default END default")
        return " ".join(parts)

    def list_table_columns_sql(self, table: str, database: str = None) -> str:
        """
        Columns of ``table`` with decoded type name, precision, scale,
        nullability ("Y"/"N") and normalized default.
        """
        scaled = ", ".join(str(code) for code in self.config.scaled_coltypes) or "-1"
        offset = NOT_NULL_COLTYPE_OFFSET

        return " ".join([
            "SELECT st.tabname, sc.colname, sc.colno, sc.coltype,",
            self._type_name_case_sql() + ",",
            f"CASE WHEN ({_BASE_COLTYPE} IN ({scaled}) AND (sc.collength / 256) >= 1)",
            "THEN (sc.collength / 256)::INT ELSE NULL END precision,",
            f"CASE WHEN ({_BASE_COLTYPE} IN ({scaled})) THEN",
            "CASE WHEN (MOD(sc.collength, 256) = 255) THEN NULL",
            "ELSE MOD(sc.collength, 256)::INT END",
            "ELSE NULL END scale,",
            f"CASE WHEN (sc.coltype < {offset}) THEN 'Y'",
            f"WHEN (sc.coltype BETWEEN {offset} AND {MAX_NOT_NULL_COLTYPE}) THEN 'N'",
            "ELSE NULL END nulls,",
            self._default_case_sql(),
            "FROM systables st",
            "LEFT OUTER JOIN syscolumns sc ON st.tabid = sc.tabid",
            "LEFT OUTER JOIN sysdefaults sd ON (sc.tabid = sd.tabid AND sc.colno = sd.colno)",
            f"WHERE UPPER(st.tabname) = UPPER({quote_string_literal(table)})",
            "ORDER BY sc.colno",
        ])

    # ==================== Indexes / Foreign keys ====================

    @staticmethod
    def _slot_columns(prefix: str, alias: str) -> List[str]:
        return [f"{prefix}{i}.colname {alias}{i}" for i in range(1, CATALOG_SLOT_COUNT + 1)]

    @staticmethod
    def _slot_joins(prefix: str, index_alias: str) -> List[str]:
        return [
            f"LEFT OUTER JOIN syscolumns {prefix}{i} "
            f"ON ({index_alias}.part{i} = {prefix}{i}.colno AND {index_alias}.tabid = {prefix}{i}.tabid)"
            for i in range(1, CATALOG_SLOT_COUNT + 1)
        ]

    def list_table_indexes_sql(self, table: str, database: str = None) -> str:
        """One row per index: idxname, idxtype, constrtype, col1..col16."""
        select = ["si.idxname", "si.idxtype", "ctr.constrtype"] + self._slot_columns("sc", "col")

        return " ".join(
            ["SELECT " + ", ".join(select),
             "FROM systables st",
             "INNER JOIN sysindexes si ON si.tabid = st.tabid",
             "LEFT OUTER JOIN sysconstraints ctr "
             "ON (ctr.tabid = st.tabid AND ctr.idxname = si.idxname)"]
            + self._slot_joins("sc", "si")
            + [f"WHERE UPPER(st.tabname) = UPPER({quote_string_literal(table)})"]
        )

    def list_table_foreign_keys_sql(self, table: str, database: str = None) -> str:
        """
        One row per foreign key: local columns col1..col16, referenced
        columns pkcol1..pkcol16, update/delete rules and referenced names.
        """
        select = (
            ["st.tabname", "sc.constrname", "sr.updrule", "sr.delrule",
             "refst.tabname reftabname", "refsc.idxname refconstrname"]
            + self._slot_columns("sc", "col")
            + self._slot_columns("pksc", "pkcol")
        )

        return " ".join(
            ["SELECT " + ", ".join(select),
             "FROM systables st",
             "INNER JOIN sysconstraints sc ON st.tabid = sc.tabid",
             "INNER JOIN sysreferences sr ON sc.constrid = sr.constrid",
             "INNER JOIN systables refst ON sr.ptabid = refst.tabid",
             "INNER JOIN sysindexes si ON (sc.idxname = si.idxname AND sc.tabid = si.tabid)",
             "INNER JOIN sysconstraints refsc ON sr.primary = refsc.constrid",
             "INNER JOIN sysindexes refsi "
             "ON (refsc.idxname = refsi.idxname AND refsc.tabid = refsi.tabid)"]
            + self._slot_joins("sc", "si")
            + self._slot_joins("pksc", "refsi")
            + [f"WHERE UPPER(st.tabname) = UPPER({quote_string_literal(table)})",
               f"AND sc.constrtype = {quote_string_literal(CONSTRAINT_TYPE_REFERENCE)}"]
        )
