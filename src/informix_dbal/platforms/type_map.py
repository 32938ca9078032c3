"""
Type Map - Native Informix type names <-> portable types

Holds two read-only tables taken from a PlatformConfig:
- native type name -> PortableType (used when normalizing catalog columns)
- syscolumns.coltype base code -> native type name (used to build the
  CASE expression of the column catalog query)
"""

from types import MappingProxyType
from typing import List, Mapping

from ..config import PlatformConfig
from ..exceptions import ConfigurationError, UnknownColumnTypeError
from ..schema import PortableType

import logging
logger = logging.getLogger(__name__)


class TypeMap:
    """
    Lookup tables for native and portable types.

    Usage:
        type_map = TypeMap(load_platform_config())
        type_map.portable_type("VARCHAR")   # PortableType.STRING
        type_map.coltype_name(13)           # "varchar"
    """

    def __init__(self, config: PlatformConfig):
        self.config = config
        self._native_to_portable = MappingProxyType(self._build_native_map(config.type_mappings))
        self._coltype_names = MappingProxyType(dict(sorted(config.coltype_names.items())))

    @staticmethod
    def _build_native_map(type_mappings: Mapping[str, str]) -> dict:
        result = {}
        for native, portable in type_mappings.items():
            key = native.strip().lower()
            if key in result:
                raise ConfigurationError(f"Duplicate native type mapping for '{native}'")
            try:
                result[key] = PortableType(portable.strip().lower())
            except ValueError:
                raise ConfigurationError(
                    f"Native type '{native}' maps to unknown portable type '{portable}'"
                ) from None
        return result

    # ==================== Native -> Portable ====================

    def portable_type(self, native_name: str) -> PortableType:
        """
        Resolve a native type name.

        Raises:
            UnknownColumnTypeError: if the name has no mapping
        """
        key = (native_name or "").strip().lower()
        try:
            return self._native_to_portable[key]
        except KeyError:
            raise UnknownColumnTypeError.unknown_type(native_name) from None

    def has_native_type(self, native_name: str) -> bool:
        return (native_name or "").strip().lower() in self._native_to_portable

    def native_types(self) -> List[str]:
        """All mapped native type names (lower case)."""
        return list(self._native_to_portable.keys())

    @property
    def native_to_portable(self) -> Mapping[str, PortableType]:
        return self._native_to_portable

    # ==================== Catalog code -> Native ====================

    def coltype_name(self, code: int) -> str:
        """Native type name for a base coltype code (not-null offset already removed)."""
        try:
            return self._coltype_names[code]
        except KeyError:
            raise UnknownColumnTypeError(f"Unknown catalog column type code {code}") from None

    def coltype_codes(self) -> List[int]:
        """Known base coltype codes in ascending order."""
        return list(self._coltype_names.keys())

    @property
    def coltype_names(self) -> Mapping[int, str]:
        return self._coltype_names
