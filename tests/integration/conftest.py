import os
import uuid
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from docpolicy.config.settings import Settings
from docpolicy.database.connection import close_pool, get_connection, init_pool
from docpolicy.database.repositories.issuance_repository import IssuanceRepository


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "clinic_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute("SELECT 1")
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def issuance_repo(
    integration_pool: None,
    test_settings: Settings,
) -> IssuanceRepository:
    repo = IssuanceRepository(table=test_settings.issuance_table)
    repo.ensure_schema()
    return repo


@pytest.fixture
def document_id(
    issuance_repo: IssuanceRepository,
) -> Generator[str, None, None]:
    doc_id = f"it_{uuid.uuid4().hex}_receipt_download"
    yield doc_id
    issuance_repo.remove(doc_id)
