"""
Platform Config - Immutable platform settings loaded from YAML.

The bundled informix.yaml holds the native type mappings and the catalog
type-code table. A PlatformConfig is passed explicitly to the TypeMap and
the catalog query builder; nothing here is module-level mutable state.
"""

import threading
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import yaml
from cachetools import LRUCache, cached

from ..constants import (
    MAX_IDENTIFIER_LENGTH,
    VARCHAR_DEFAULT_LENGTH,
    VARCHAR_MAX_LENGTH,
)
from ..exceptions import ConfigurationError

import logging
logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "informix.yaml"

_REQUIRED_SECTIONS = ("type_mappings", "coltype_names")


@dataclass(frozen=True)
class PlatformConfig:
    """Read-only platform settings."""
    name: str = "informix"
    max_identifier_length: int = MAX_IDENTIFIER_LENGTH
    varchar_max_length: int = VARCHAR_MAX_LENGTH
    varchar_default_length: int = VARCHAR_DEFAULT_LENGTH
    type_mappings: Mapping[str, str] = field(default_factory=dict)
    coltype_names: Mapping[int, str] = field(default_factory=dict)
    scaled_coltypes: Tuple[int, ...] = ()
    default_type_tokens: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze the mappings so callers cannot mutate a shared config
        object.__setattr__(self, "type_mappings", MappingProxyType(dict(self.type_mappings)))
        object.__setattr__(self, "coltype_names", MappingProxyType(dict(self.coltype_names)))
        object.__setattr__(self, "scaled_coltypes", tuple(self.scaled_coltypes))
        object.__setattr__(
            self, "default_type_tokens", MappingProxyType(dict(self.default_type_tokens))
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlatformConfig":
        """
        Build a config from a parsed YAML document.

        Raises:
            ConfigurationError: if a required section is missing or malformed
        """
        if not isinstance(data, dict):
            raise ConfigurationError("Platform configuration must be a mapping")

        for section in _REQUIRED_SECTIONS:
            if not isinstance(data.get(section), dict) or not data[section]:
                raise ConfigurationError(f"Platform configuration requires a '{section}' mapping")

        try:
            coltype_names = {int(code): str(name) for code, name in data["coltype_names"].items()}
            scaled = tuple(int(code) for code in data.get("scaled_coltypes", ()))
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid catalog type code in configuration: {e}") from e

        return cls(
            name=str(data.get("name", "informix")),
            max_identifier_length=int(data.get("max_identifier_length", MAX_IDENTIFIER_LENGTH)),
            varchar_max_length=int(data.get("varchar_max_length", VARCHAR_MAX_LENGTH)),
            varchar_default_length=int(data.get("varchar_default_length", VARCHAR_DEFAULT_LENGTH)),
            type_mappings={str(k): str(v) for k, v in data["type_mappings"].items()},
            coltype_names=coltype_names,
            scaled_coltypes=scaled,
            default_type_tokens={
                str(k): str(v) for k, v in (data.get("default_type_tokens") or {}).items()
            },
        )


@cached(cache=LRUCache(maxsize=8), lock=threading.RLock())
def _load_cached(path: Path) -> PlatformConfig:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read platform configuration {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in platform configuration {path}: {e}") from e

    config = PlatformConfig.from_dict(data)
    logger.debug(
        f"Loaded platform configuration '{config.name}' from {path} "
        f"({len(config.type_mappings)} type mappings)"
    )
    return config


def load_platform_config(path: Optional[Union[str, Path]] = None) -> PlatformConfig:
    """
    Load a platform configuration.

    Args:
        path: YAML file to read. Defaults to the bundled informix.yaml.

    Returns:
        PlatformConfig (cached per resolved path)
    """
    resolved = Path(path).resolve() if path else DEFAULT_CONFIG_PATH.resolve()
    return _load_cached(resolved)
