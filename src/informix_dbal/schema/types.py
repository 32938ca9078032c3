"""
PortableType - Engine-agnostic column type identifiers
"""

from enum import Enum


class PortableType(Enum):
    """Portable column types understood by every platform."""
    BIGINT = "bigint"
    BINARY = "binary"
    BLOB = "blob"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    DATETIMETZ = "datetimetz"
    DECIMAL = "decimal"
    FLOAT = "float"
    GUID = "guid"
    INTEGER = "integer"
    JSON = "json"
    SMALLINT = "smallint"
    STRING = "string"
    TEXT = "text"
    TIME = "time"

    @property
    def is_integer_family(self) -> bool:
        return self in (PortableType.INTEGER, PortableType.BIGINT, PortableType.SMALLINT)
