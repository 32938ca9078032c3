"""
Pytest configuration and fixtures for informix-dbal tests.
"""
import pytest
from unittest.mock import Mock

from informix_dbal.config import load_platform_config
from informix_dbal.constants import CATALOG_SLOT_COUNT
from informix_dbal.platforms import InformixPlatform, TypeMap
from informix_dbal.schema_managers import InformixSchemaManager, QueryExecutor


def slot_fields(prefix, names):
    """Fill prefix1..prefix16 with ``names`` (None for unused slots)."""
    names = list(names)
    return {
        f"{prefix}{i}": names[i - 1] if i <= len(names) else None
        for i in range(1, CATALOG_SLOT_COUNT + 1)
    }


@pytest.fixture(scope="session")
def config():
    """Bundled Informix platform configuration."""
    return load_platform_config()


@pytest.fixture
def platform(config):
    return InformixPlatform(config)


@pytest.fixture
def type_map(config):
    return TypeMap(config)


@pytest.fixture
def mock_executor():
    """QueryExecutor returning no rows, connected as 'informix'."""
    executor = Mock(spec=QueryExecutor)
    executor.execute_query.return_value = []
    executor.current_username.return_value = "informix"
    return executor


@pytest.fixture
def manager(mock_executor, platform):
    return InformixSchemaManager(mock_executor, platform)


@pytest.fixture
def column_row():
    """Build a syscolumns row as returned by the column catalog query."""
    def build(colname, typename, nulls="Y", default="NULL", precision=None, scale=None):
        return {
            "tabname": "customer",
            "colname": colname,
            "colno": 1,
            "coltype": 0,
            "typename": typename,
            "precision": precision,
            "scale": scale,
            "nulls": nulls,
            "default": default,
        }
    return build


@pytest.fixture
def index_row():
    """Build a sysindexes row with its column slots."""
    def build(idxname, columns, idxtype="U", constrtype=None):
        row = {"idxname": idxname, "idxtype": idxtype, "constrtype": constrtype}
        row.update(slot_fields("col", columns))
        return row
    return build


@pytest.fixture
def foreign_key_row():
    """Build a foreign key row with local and referenced column slots."""
    def build(constrname, local, reftabname, foreign, delrule="R", updrule="R"):
        row = {
            "tabname": "orders",
            "constrname": constrname,
            "updrule": updrule,
            "delrule": delrule,
            "reftabname": reftabname,
            "refconstrname": "u101_1",
        }
        row.update(slot_fields("col", local))
        row.update(slot_fields("pkcol", foreign))
        return row
    return build
