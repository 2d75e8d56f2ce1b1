import os
from collections.abc import Generator

import pytest

from resumi.config.settings import Settings
from resumi.database.connection import close_pool, get_connection, init_pool, ping
from resumi.database.repositories.analysis_repository import AnalysisRepository


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "resumi_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        ping()
        AnalysisRepository().ensure_schema()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env vars.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def analysis_cleanup(integration_pool: None) -> Generator[list[str], None, None]:
    """Collect unique ids created by a test and delete them afterwards."""
    created: list[str] = []
    yield created
    if not created:
        return
    with get_connection() as conn:
        conn.execute(
            "DELETE FROM resume_analyses WHERE unique_id = ANY(%s)",
            (created,),
        )
        conn.commit()
