from unittest.mock import MagicMock, patch

import pytest

from resumi.config.settings import Settings
from resumi.database import connection


def test_build_conninfo_uses_db_settings() -> None:
    settings = Settings(  # type: ignore[call-arg]
        _env_file=None,
        db_host="db.internal",
        db_port=6543,
        db_database="reviews",
        db_username="app",
        db_password="pw",
    )
    assert connection.build_conninfo(settings) == (
        "host=db.internal port=6543 dbname=reviews user=app password=pw"
    )


def test_get_connection_requires_pool() -> None:
    with patch.object(connection, "_pool", None):
        with pytest.raises(RuntimeError, match="not initialized"):
            with connection.get_connection():
                pass


def test_ping_runs_trivial_query() -> None:
    pool = MagicMock()
    conn = pool.connection.return_value.__enter__.return_value
    with patch.object(connection, "_pool", pool):
        connection.ping()
    conn.execute.assert_called_once_with("SELECT 1")


def test_close_pool_is_idempotent() -> None:
    pool = MagicMock()
    with patch.object(connection, "_pool", pool):
        connection.close_pool()
        connection.close_pool()
    pool.close.assert_called_once()
