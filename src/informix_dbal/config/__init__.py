"""
Platform configuration - immutable settings shared by the type map,
the catalog query builder and the platform.
"""

from .platform_config import (
    PlatformConfig,
    load_platform_config,
    DEFAULT_CONFIG_PATH,
)

__all__ = [
    "PlatformConfig",
    "load_platform_config",
    "DEFAULT_CONFIG_PATH",
]
