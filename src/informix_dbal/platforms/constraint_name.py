"""
Constraint name repositioning.

Informix declares the constraint name at the END of a constraint:

    generic:  ALTER TABLE t ADD CONSTRAINT uniq_a UNIQUE (a)
    informix: ALTER TABLE t ADD CONSTRAINT UNIQUE (a) CONSTRAINT uniq_a

    generic:  CONSTRAINT fk_a FOREIGN KEY (a) REFERENCES p (id)
    informix: FOREIGN KEY (a) REFERENCES p (id) CONSTRAINT fk_a
"""

import re
import threading
from typing import Optional, Tuple

from cachetools import LRUCache, cached

# Keywords match in any case, the constraint name only literally
_ADD_CONSTRAINT = re.compile(r"\b(?i:ADD)\s+(?i:CONSTRAINT)\b")


@cached(cache=LRUCache(maxsize=256), lock=threading.RLock())
def _name_patterns(name: str) -> Tuple["re.Pattern", "re.Pattern"]:
    escaped = re.escape(name)
    add_named = re.compile(r"\b(?i:ADD)\s+(?i:CONSTRAINT)\s+" + escaped + r"(?!\w)")
    standalone = re.compile(r"\s*\b(?i:CONSTRAINT)\s+" + escaped + r"(?!\w)")
    return add_named, standalone


def reposition_constraint_name(sql: str, name: Optional[str]) -> str:
    """
    Move the constraint name of a declaration to its end.

    Args:
        sql: Constraint or foreign key declaration
        name: Constraint name (unnamed constraints are returned unchanged)

    Returns:
        Declaration ending in ``CONSTRAINT <name>``
    """
    if not name:
        return sql

    add_named, standalone = _name_patterns(name)

    if _ADD_CONSTRAINT.search(sql):
        sql = add_named.sub("ADD CONSTRAINT", sql, count=1)

    sql = standalone.sub("", sql).strip()

    return f"{sql} CONSTRAINT {name}"
