import logging
import os
from collections.abc import Generator
from random import randint

import pytest
from sqlalchemy import text
from sqlalchemy.engine import Engine, make_url

from dexdb.database import create_db_engine
from dexdb.schema_manager import SchemaManager

pytest.register_assert_rewrite("tests.helpers")


@pytest.fixture
def sqlite_url(tmp_path) -> str:
    return f'sqlite:///{tmp_path / "dexdb.sqlite3"}'


@pytest.fixture
def engine(sqlite_url) -> Generator[Engine, None, None]:
    engine = create_db_engine(sqlite_url)
    yield engine
    engine.dispose()


@pytest.fixture
def schema_manager(engine) -> SchemaManager:
    return SchemaManager(
        engine, logger=logging.getLogger('tests.schema_manager'), allow_inexact_decimals=True
    )


@pytest.fixture
def postgres_url() -> Generator[str, None, None]:
    url = os.getenv('TEST_DATABASE_URL')
    if not url:
        pytest.skip('TEST_DATABASE_URL env var is not set')
    test_db_name = os.getenv('TEST_DATABASE_NAME') or f'_dexdb_test_{randint(0, 999_999)}'

    def cleanup(connection):
        connection.execute(text(f'DROP DATABASE IF EXISTS {test_db_name}'))

    admin_engine = create_db_engine(url, isolation_level='AUTOCOMMIT')
    try:
        with admin_engine.connect() as connection:
            cleanup(connection)
            connection.execute(text(f'CREATE DATABASE {test_db_name}'))

        yield make_url(url).set(database=test_db_name).render_as_string(hide_password=False)

        with admin_engine.connect() as connection:
            cleanup(connection)
    finally:
        admin_engine.dispose()


@pytest.fixture
def postgres_engine(postgres_url) -> Generator[Engine, None, None]:
    engine = create_db_engine(postgres_url)
    yield engine
    engine.dispose()


@pytest.fixture
def postgres_schema_manager(postgres_engine) -> SchemaManager:
    return SchemaManager(postgres_engine, logger=logging.getLogger('tests.schema_manager'))
