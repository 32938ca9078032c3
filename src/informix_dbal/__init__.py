"""
informix-dbal - Informix dialect translation and catalog introspection
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("informix-dbal")
except PackageNotFoundError:
    # Package not installed (running from a source checkout)
    __version__ = "0.3.0"

from .config import PlatformConfig, load_platform_config
from .platforms import InformixPlatform, PlatformFactory
from .schema_managers import InformixSchemaManager, SchemaManagerFactory

__all__ = [
    "__version__",
    "PlatformConfig",
    "load_platform_config",
    "InformixPlatform",
    "PlatformFactory",
    "InformixSchemaManager",
    "SchemaManagerFactory",
]
