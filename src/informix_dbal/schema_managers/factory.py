"""
Schema Manager Factory - Create the schema manager for a database type
"""

from typing import Optional

from ..platforms import DatabasePlatform
from ..registry import TypeRegistry
from .base import SchemaManager
from .executor import QueryExecutor


class SchemaManagerFactory(TypeRegistry):
    """
    Factory for creating schema managers.

    Usage:
        manager = SchemaManagerFactory.create("informix", executor)
        if manager:
            tables = manager.list_table_names()
    """

    kind = "schema manager"

    @classmethod
    def create(
        cls,
        db_type: str,
        executor: QueryExecutor,
        platform: Optional[DatabasePlatform] = None
    ) -> Optional[SchemaManager]:
        """
        Create a schema manager for the specified database type.

        Args:
            db_type: Database type (informix, ifx)
            executor: Runs the catalog queries
            platform: Optional platform (default platform for the type otherwise)

        Returns:
            SchemaManager instance or None if type not supported
        """
        manager_class = cls.lookup(db_type)
        return manager_class(executor, platform) if manager_class else None


def _register_default_managers():
    """Register built-in schema managers. Called on module import."""
    from .informix_manager import InformixSchemaManager

    SchemaManagerFactory.register("informix", InformixSchemaManager)
    SchemaManagerFactory.register("ifx", InformixSchemaManager)  # Alias


_register_default_managers()
