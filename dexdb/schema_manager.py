import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from sqlalchemy import MetaData, Table
from sqlalchemy.engine import Engine
from sqlalchemy.schema import DropTable

from dexdb.enumeration.entity_type import ALL, EntityType, LogVariant
from dexdb.events import EventDispatcherInterface, NullEventDispatcher
from dexdb.misc.inexact_decimal_error import InexactDecimalError
from dexdb.schema import (
    TableBuilder,
    block_table,
    fixed_point_columns,
    get_table_builder,
    log_table,
    log_topics_table,
    pair_table,
    swap_table,
    table_name,
    token_table,
    transaction_table,
)

log = logging.getLogger(__name__)


@contextmanager
def schema_logging(logger: logging.Logger, operation: str) -> Iterator[None]:
    """
    Logs any exception raised inside the block at ERROR level, then re-raises it as is.

    Usage:

    with schema_logging(log, 'create table "Token"'):
        table.create(connection)
    """
    try:
        yield
    except Exception as e:
        logger.error('%s failed: %s', operation, e, exc_info=True)
        raise


class SchemaManager:
    """
    Creates and drops the tables of the indexer store.

    The engine is shared with the rest of the application and is never disposed here.
    Every operation runs in its own transaction, so operations may be issued concurrently.
    """

    def __init__(
        self,
        engine: Engine,
        logger: logging.Logger | None = None,
        event_dispatcher: EventDispatcherInterface | None = None,
        log_variant: LogVariant = LogVariant.TOPIC_COLUMNS,
        allow_inexact_decimals: bool = False,
    ):
        self.engine = engine
        self.logger = logger or log
        self.event_dispatcher = event_dispatcher or NullEventDispatcher()
        self.log_variant = LogVariant(log_variant)
        self.allow_inexact_decimals = allow_inexact_decimals

    def _check_fixed_point_support(self, table: Table):
        if self.allow_inexact_decimals or self.engine.dialect.supports_native_decimal:
            return
        columns = fixed_point_columns(table)
        if columns:
            raise InexactDecimalError(
                f'Dialect "{self.engine.dialect.name}" stores {", ".join(columns)}'
                f' of table "{table.name}" as floating point'
            )

    def _create_table(self, builder: TableBuilder) -> Table:
        table = builder(MetaData())
        with schema_logging(self.logger, f'create table "{table.name}"'):
            self._check_fixed_point_support(table)
            with self.engine.begin() as connection:
                table.create(connection, checkfirst=False)
        self.logger.info(f'Created table "{table.name}".')
        return table

    def create_token_table(self) -> Table:
        return self._create_table(token_table)

    def create_pair_table(self) -> Table:
        return self._create_table(pair_table)

    def create_swap_table(self) -> Table:
        return self._create_table(swap_table)

    def create_log_table(self) -> Table:
        return self._create_table(log_table)

    def create_log_topics_table(self) -> Table:
        return self._create_table(log_topics_table)

    def create_block_table(self) -> Table:
        return self._create_table(block_table)

    def create_transaction_table(self) -> Table:
        return self._create_table(transaction_table)

    def create_table(self, entity_type: EntityType) -> Table:
        """Creates the table of the given entity; ``Log`` follows ``self.log_variant``."""
        return self._create_table(get_table_builder(entity_type, self.log_variant))

    def drop_table(self, table_name: str) -> None:
        table = Table(table_name, MetaData())
        with schema_logging(self.logger, f'drop table "{table_name}"'):
            with self.engine.begin() as connection:
                connection.execute(DropTable(table, if_exists=True))
        self.logger.info(f'Dropped table "{table_name}" (if it existed).')

    def create_all_tables(
        self, entity_types: Iterable[EntityType] = ALL
    ) -> dict[str, BaseException]:
        """
        Creates the table of every given entity, carrying on after a failure.

        Returns failures by table name, empty when every table was created.
        """
        failures: dict[str, BaseException] = {}
        for entity_type in entity_types:
            try:
                self.create_table(entity_type)
            except Exception as e:
                failures[table_name(entity_type)] = e
        if failures:
            self.logger.warning(f'Tables not created: {", ".join(failures)}')
        return failures

    def drop_all_tables(
        self, entity_types: Iterable[EntityType] = ALL
    ) -> dict[str, BaseException]:
        failures: dict[str, BaseException] = {}
        for entity_type in entity_types:
            name = table_name(entity_type)
            try:
                self.drop_table(name)
            except Exception as e:
                failures[name] = e
        if failures:
            self.logger.warning(f'Tables not dropped: {", ".join(failures)}')
        return failures
