"""
Platform Factory - Create the platform for a database type
"""

from typing import Optional, Sequence

from ..config import PlatformConfig
from ..registry import TypeRegistry
from .base import DatabasePlatform
from .hooks import SchemaAlterHook


class PlatformFactory(TypeRegistry):
    """
    Factory for creating database platforms.

    Usage:
        platform = PlatformFactory.create("informix")
        sql = platform.get_create_table_sql(table)
    """

    kind = "platform"

    @classmethod
    def create(
        cls,
        db_type: str,
        config: Optional[PlatformConfig] = None,
        hooks: Optional[Sequence[SchemaAlterHook]] = None
    ) -> Optional[DatabasePlatform]:
        """
        Create a platform for the specified database type.

        Args:
            db_type: Database type (informix, ifx)
            config: Optional platform configuration (bundled default otherwise)
            hooks: Optional alter-table hooks

        Returns:
            DatabasePlatform instance or None if type not supported
        """
        platform_class = cls.lookup(db_type)
        return platform_class(config, hooks) if platform_class else None


def _register_default_platforms():
    """Register built-in platforms. Called on module import."""
    from .informix_platform import InformixPlatform

    PlatformFactory.register("informix", InformixPlatform)
    PlatformFactory.register("ifx", InformixPlatform)  # Alias


_register_default_platforms()
