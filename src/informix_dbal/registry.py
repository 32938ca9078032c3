"""
Registry - Database type name to implementation class lookup
"""

from typing import Dict, List, Optional

import logging
logger = logging.getLogger(__name__)


class TypeRegistry:
    """
    Case-insensitive map of database type names to implementation classes.

    Every subclass gets its own empty registry. ``kind`` names what the
    subclass registers and appears in log messages.
    """

    kind = "implementation"
    _registry: Dict[str, type] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._registry = {}

    @classmethod
    def lookup(cls, db_type: str) -> Optional[type]:
        """Registered class for a database type, or None if there is none."""
        registered = cls._registry.get(db_type.lower())
        if registered is None:
            logger.warning(f"No {cls.kind} for database type: {db_type}")
        return registered

    @classmethod
    def is_supported(cls, db_type: str) -> bool:
        """Check if a database type is supported."""
        return db_type.lower() in cls._registry

    @classmethod
    def supported_types(cls) -> List[str]:
        """Get list of supported database types."""
        return list(cls._registry.keys())

    @classmethod
    def register(cls, db_type: str, implementation: type):
        """
        Register a class for a database type.

        Args:
            db_type: Database type identifier (case-insensitive)
            implementation: Class to instantiate for that type
        """
        cls._registry[db_type.lower()] = implementation
        logger.debug(f"Registered {cls.kind} for: {db_type}")
