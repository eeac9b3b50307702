"""
Table catalog of the DEX indexer store.

Every builder attaches exactly one table to the given ``MetaData`` and returns it.
Addresses are 42 characters (``0x`` + 40 hex). Address columns that point at
other entities are indexed but never declared as foreign keys.
"""
from collections.abc import Callable, Mapping

from sqlalchemy import (
    JSON,
    TIMESTAMP,
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Date,
    Index,
    Integer,
    MetaData,
    Numeric,
    PrimaryKeyConstraint,
    SmallInteger,
    String,
    Table,
    Text,
    func,
)

from dexdb.enumeration.entity_type import (
    ALL,
    ENTITY_TYPE_TO_TABLE_MAPPING,
    EntityType,
    LogVariant,
)

ADDRESS_LENGTH = 42

GAS_PRECISION = 24
GAS_SCALE = 12
USD_PRECISION = 84
USD_SCALE = 56

USD_COLUMNS = (
    'lpReserveUsd',
    'tokenInUsd',
    'tokenOutUsd',
    'lpInUsd',
    'lpOutUsd',
    'tokenPriceUsd',
    'lpPriceUsd',
)

TableBuilder = Callable[[MetaData], Table]


def address(name: str, **kwargs) -> Column:
    return Column(name, String(ADDRESS_LENGTH), **kwargs)


def gas_amount(name: str) -> Column:
    return Column(name, Numeric(GAS_PRECISION, GAS_SCALE, asdecimal=True), nullable=False)


def usd_amount(name: str) -> Column:
    return Column(name, Numeric(USD_PRECISION, USD_SCALE, asdecimal=True), nullable=False)


def audit_timestamps() -> list[Column]:
    return [
        Column('createdAt', TIMESTAMP(), nullable=False, server_default=func.now()),
        Column('updatedAt', TIMESTAMP(), nullable=False, server_default=func.now()),
    ]


def token_table(metadata: MetaData) -> Table:
    return Table(
        'Token',
        metadata,
        address('addr', primary_key=True),
        Column('decimals', SmallInteger),
        Column('name', String(255)),
        Column('symbol', String(32)),
        Column('createDate', TIMESTAMP()),
        *audit_timestamps(),
        CheckConstraint('decimals >= 0', name='ck_Token_decimals_unsigned'),
        Index('idx_name', 'name'),
        Index('idx_symbol', 'symbol'),
    )


def pair_table(metadata: MetaData) -> Table:
    return Table(
        'Pair',
        metadata,
        address('addr', primary_key=True, nullable=False),
        address('tokenAddr', nullable=False),
        address('lpAddr', nullable=False),
        address('factoryAddr'),
        Column('createDate', Date),
        *audit_timestamps(),
        Index('idx_tokenAddr', 'tokenAddr'),
        Index('idx_lpAddr', 'lpAddr'),
        Index('idx_factoryAddr', 'factoryAddr'),
    )


def swap_table(metadata: MetaData) -> Table:
    table = Table(
        'Swap',
        metadata,
        Column('blockNumber', BigInteger, nullable=False, autoincrement=False),
        Column('txHash', String(80), nullable=False),
        Column('logIdx', BigInteger, nullable=False, autoincrement=False),
        address('pairAddr', nullable=False),
        address('tokenAddr', nullable=False),
        address('lpAddr', nullable=False),
        gas_amount('gasPrice'),
        gas_amount('gasLimit'),
        address('txFrom'),
        address('txTo'),
        address('swapSender', nullable=False),
        address('swapTo', nullable=False),
        Column('side', String(4), nullable=False),
        *(usd_amount(name) for name in USD_COLUMNS),
        Column('timestamp', BigInteger, nullable=False),
        *audit_timestamps(),
        PrimaryKeyConstraint('blockNumber', 'logIdx', name='Swap_pkey'),
    )
    for column in (
        'blockNumber',
        'txHash',
        'logIdx',
        'pairAddr',
        'tokenAddr',
        'lpAddr',
        'txFrom',
        'txTo',
        'swapSender',
        'swapTo',
        'side',
    ):
        Index(f'idx_swap_{column}', table.c[column])
    return table


def _log_columns(*topic_columns: Column) -> list:
    return [
        Column('blockNumber', Integer),
        Column('blockHash', String(ADDRESS_LENGTH)),
        Column('transactionIndex', SmallInteger),
        Column('removed', Boolean),
        address('address'),
        Column('data', Text),
        *topic_columns,
        Column('transactionHash', String(ADDRESS_LENGTH)),
        Column('logIndex', SmallInteger),
        Index('log_blockNumber', 'blockNumber'),
        Index('log_blockNumber_logIndex', 'blockNumber', 'logIndex'),
    ]


def log_table(metadata: MetaData) -> Table:
    topics = [Column(f'topic{i}', String(255)) for i in range(4)]
    return Table('Log', metadata, *_log_columns(*topics))


def log_topics_table(metadata: MetaData) -> Table:
    return Table('Log', metadata, *_log_columns(Column('topics', JSON)))


def block_table(metadata: MetaData) -> Table:
    return Table(
        'Block',
        metadata,
        Column('hash', String(ADDRESS_LENGTH)),
        Column('parentHash', String(ADDRESS_LENGTH)),
        Column('number', Integer, primary_key=True, autoincrement=False),
        Column('timestamp', Integer),
        Column('nonce', String(42)),
        Column('difficulty', SmallInteger),
        # gas values are kept as strings to avoid precision loss
        Column('gasLimit', String(18)),
        Column('gasUsed', String(18)),
        address('miner'),
        Column('extraData', Text),
        Column('_difficulty', String(42)),
    )


def transaction_table(metadata: MetaData) -> Table:
    return Table(
        'Transaction',
        metadata,
        Column('hash', String(ADDRESS_LENGTH), primary_key=True),
        Column('blockNumber', Integer),
        Index('idx_blockNumber', 'blockNumber'),
    )


LOG_VARIANT_BUILDERS: Mapping[LogVariant, TableBuilder] = {
    LogVariant.TOPIC_COLUMNS: log_table,
    LogVariant.TOPICS_JSON: log_topics_table,
}

TABLE_BUILDERS: Mapping[EntityType, TableBuilder] = {
    EntityType.TOKEN: token_table,
    EntityType.PAIR: pair_table,
    EntityType.SWAP: swap_table,
    EntityType.LOG: log_table,
    EntityType.BLOCK: block_table,
    EntityType.TRANSACTION: transaction_table,
}


def get_table_builder(
    entity_type: EntityType, log_variant: LogVariant = LogVariant.TOPIC_COLUMNS
) -> TableBuilder:
    if entity_type == EntityType.LOG:
        return LOG_VARIANT_BUILDERS[LogVariant(log_variant)]
    return TABLE_BUILDERS[EntityType(entity_type)]


def catalog_metadata(
    log_variant: LogVariant = LogVariant.TOPIC_COLUMNS, entity_types=ALL
) -> MetaData:
    """Returns a ``MetaData`` holding every catalog table, with one ``Log`` variant."""
    metadata = MetaData()
    for entity_type in entity_types:
        get_table_builder(entity_type, log_variant)(metadata)
    return metadata


def table_name(entity_type: EntityType) -> str:
    return ENTITY_TYPE_TO_TABLE_MAPPING[EntityType(entity_type)]


def fixed_point_columns(table: Table) -> list[str]:
    return [
        column.name
        for column in table.columns
        if isinstance(column.type, Numeric) and column.type.asdecimal
    ]
