"""
Platforms - Database-specific SQL generation

Usage:
    from informix_dbal.platforms import PlatformFactory

    platform = PlatformFactory.create("informix")

    # DDL
    statements = platform.get_create_table_sql(table)
    statements = platform.get_alter_table_sql(diff)

    # Row limiting
    query = platform.modify_limit_query("SELECT * FROM customer", 10, 20)

    # Catalog introspection
    sql = platform.get_list_table_columns_sql("customer")
"""

from .base import DatabasePlatform
from .catalog_queries import InformixCatalogQueries, quote_string_literal
from .constraint_name import reposition_constraint_name
from .factory import PlatformFactory
from .hooks import AlterChangeKind, SchemaAlterHook
from .informix_platform import InformixPlatform
from .type_map import TypeMap

__all__ = [
    # Base classes
    "DatabasePlatform",
    "SchemaAlterHook",
    "AlterChangeKind",

    # Building blocks
    "TypeMap",
    "InformixCatalogQueries",
    "quote_string_literal",
    "reposition_constraint_name",

    # Factory
    "PlatformFactory",

    # Implementations
    "InformixPlatform",
]
