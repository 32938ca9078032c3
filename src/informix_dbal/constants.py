"""
Centralized constants for the Informix platform.

Catalog layout values are fixed by the engine's system tables and are not
configurable. Import from here instead of hardcoding values.
"""

# ===========================================================================
# Catalog layout
# ===========================================================================
CATALOG_SLOT_COUNT = 16          # sysindexes.part1 .. part16
NOT_NULL_COLTYPE_OFFSET = 256    # syscolumns.coltype + 256 => NOT NULL
MAX_NOT_NULL_COLTYPE = 309       # highest not-null variant of a base code

# sysindexes.idxtype / sysconstraints.constrtype / sysreferences rules
INDEX_TYPE_DUPLICATES = "D"
CONSTRAINT_TYPE_PRIMARY = "P"
CONSTRAINT_TYPE_REFERENCE = "R"
TABLE_TYPE_TABLE = "T"
TABLE_TYPE_VIEW = "V"
REFERENTIAL_RULE_CASCADE = "C"

# Value of the derived "nulls" column for NOT NULL columns
NULLS_NOT_ALLOWED = "N"

# ===========================================================================
# Identifier / length limits (defaults for PlatformConfig)
# ===========================================================================
MAX_IDENTIFIER_LENGTH = 128
VARCHAR_MAX_LENGTH = 255
VARCHAR_DEFAULT_LENGTH = 255

# ===========================================================================
# Generic declaration defaults
# ===========================================================================
DECIMAL_DEFAULT_PRECISION = 10
DECIMAL_DEFAULT_SCALE = 0
GUID_LENGTH = 36

# ===========================================================================
# Referential actions accepted in foreign key declarations
# ===========================================================================
REFERENTIAL_ACTIONS = ("CASCADE", "SET NULL", "NO ACTION", "RESTRICT", "SET DEFAULT")
