"""
Schema managers - Catalog introspection into portable schema entities
"""

from .executor import QueryExecutor, DbApiExecutor
from .base import SchemaManager
from .informix_manager import InformixSchemaManager
from .factory import SchemaManagerFactory

__all__ = [
    "QueryExecutor",
    "DbApiExecutor",
    "SchemaManager",
    "InformixSchemaManager",
    "SchemaManagerFactory",
]
