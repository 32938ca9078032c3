"""
Column model - Portable column definition
"""

from dataclasses import dataclass
from typing import Any, Optional

from .types import PortableType


@dataclass(frozen=True)
class Column:
    """
    A table column.

    ``precision``/``scale`` are only meaningful for the decimal family and
    ``fixed`` only for character types. ``default`` is either a literal or
    one of the reserved tokens CURRENT / TODAY.
    """
    name: str
    type: PortableType
    notnull: bool = True
    default: Optional[Any] = None
    fixed: bool = False
    length: Optional[int] = None
    precision: Optional[int] = None
    scale: Optional[int] = None
    autoincrement: bool = False
    column_definition: Optional[str] = None
    comment: Optional[str] = None
