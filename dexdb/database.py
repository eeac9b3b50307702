import logging
from collections.abc import Iterable
from typing import TextIO

from sqlalchemy import create_engine, create_mock_engine
from sqlalchemy.engine import Engine

from dexdb.enumeration.entity_type import ALL, LogVariant
from dexdb.schema import catalog_metadata

logger = logging.getLogger(__name__)


def create_db_engine(url: str, **kwargs) -> Engine:
    return create_engine(url, pool_pre_ping=True, **kwargs)


def get_schema_ddls(
    url: str, log_variant: LogVariant = LogVariant.TOPIC_COLUMNS, entity_types=ALL
) -> Iterable[str]:
    """
    Yields the CREATE TABLE / CREATE INDEX statements of the catalog compiled for the
    dialect of ``url``. No connection is made.
    """
    ddls: list[str] = []

    def collect(sql, *multiparams, **params):
        ddls.append(str(sql.compile(dialect=mock_engine.dialect)).strip())

    mock_engine = create_mock_engine(url, collect)
    catalog_metadata(log_variant, entity_types).create_all(mock_engine, checkfirst=False)
    yield from ddls


def write_schema_ddl(
    url: str, f: TextIO, log_variant: LogVariant = LogVariant.TOPIC_COLUMNS, entity_types=ALL
):
    ddls = iter(get_schema_ddls(url, log_variant, entity_types))
    for ddl in ddls:
        f.write(ddl)
        f.write(';\n')
        break
    for ddl in ddls:
        f.write('\n')
        f.write(ddl)
        f.write(';\n')


def write_schema_ddl_by_url_to_file_path(
    url: str, file_path: str, log_variant: LogVariant = LogVariant.TOPIC_COLUMNS
):
    with open(file_path, 'w') as f:
        write_schema_ddl(url, f, log_variant)
    logger.debug(f'Schema DDL for "{log_variant}" Log variant written to "{file_path}"')
