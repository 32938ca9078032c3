"""
Exceptions raised by platforms and schema managers.

All errors are synchronous failures of the call that produced them.
"""


class DBALError(Exception):
    """Base class for every error raised by informix_dbal."""


class UnsupportedOperationError(DBALError):
    """The engine cannot express the requested feature."""

    @classmethod
    def not_supported(cls, operation: str) -> "UnsupportedOperationError":
        return cls(f"Operation '{operation}' is not supported by platform.")


class InvalidDescriptorError(DBALError, ValueError):
    """A schema descriptor violates a structural precondition."""


class CatalogRowError(DBALError, LookupError):
    """A catalog row could not be decoded into a portable entity."""

    @classmethod
    def missing_field(cls, field: str, row_kind: str) -> "CatalogRowError":
        return cls(f"Catalog {row_kind} row is missing field '{field}'")


class UnknownColumnTypeError(CatalogRowError):
    """A native type name has no portable type mapping."""

    @classmethod
    def unknown_type(cls, type_name: str) -> "UnknownColumnTypeError":
        return cls(
            f"Unknown database type {type_name} requested, "
            f"no portable type mapping is configured for it."
        )


class ConfigurationError(DBALError):
    """The platform configuration is invalid."""
