"""
Query Executor - Contract between schema managers and the execution layer

Schema managers never talk to a driver directly. They hand SQL text to a
QueryExecutor and get rows back as mappings of column name to value.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping

import logging
logger = logging.getLogger(__name__)


class QueryExecutor(ABC):
    """Runs catalog queries for a schema manager."""

    @abstractmethod
    def execute_query(self, sql: str) -> List[Mapping[str, Any]]:
        """
        Execute a query and return every row.

        Returns:
            Rows as mappings of column name (any case) to value
        """
        pass

    @abstractmethod
    def current_username(self) -> str:
        """Name of the connected user (used to scope table listings)."""
        pass


class DbApiExecutor(QueryExecutor):
    """
    QueryExecutor over a DB-API 2.0 connection (pyodbc, ifx_db_dbi, ...).

    Usage:
        executor = DbApiExecutor(connection, username="informix")
        manager = InformixSchemaManager(executor)
    """

    def __init__(self, connection: Any, username: str):
        """
        Args:
            connection: DB-API connection exposing cursor()
            username: Connected user name
        """
        self.connection = connection
        self.username = username

    def execute_query(self, sql: str) -> List[Dict[str, Any]]:
        cursor = self.connection.cursor()
        try:
            cursor.execute(sql)
            columns = [description[0] for description in cursor.description or ()]
            rows = cursor.fetchall()
        finally:
            cursor.close()

        logger.debug(f"Catalog query returned {len(rows)} row(s)")
        return [dict(zip(columns, row)) for row in rows]

    def current_username(self) -> str:
        return self.username
