from decimal import Decimal

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from dexdb.schema import USD_COLUMNS


def address(char: str) -> str:
    return '0x' + char * 40


def token_row(**overrides) -> dict:
    row = {
        'addr': address('a'),
        'decimals': 18,
        'name': 'Wrapped Ether',
        'symbol': 'WETH',
    }
    row.update(overrides)
    return row


def swap_row(**overrides) -> dict:
    row = {
        'blockNumber': 17_000_000,
        'txHash': '0x' + 'f' * 64,
        'logIdx': 0,
        'pairAddr': address('1'),
        'tokenAddr': address('2'),
        'lpAddr': address('3'),
        'gasPrice': Decimal('30.5'),
        'gasLimit': Decimal('210000'),
        'txFrom': address('4'),
        'txTo': address('5'),
        'swapSender': address('6'),
        'swapTo': address('7'),
        'side': 'buy',
        'timestamp': 1_681_000_000,
    }
    row.update({column: Decimal('1.5') for column in USD_COLUMNS})
    row.update(overrides)
    return row


def describe_table(engine: Engine, table_name: str) -> dict:
    """Reflects what the database reports about a table."""
    inspector = inspect(engine)
    return {
        'columns': {c['name']: c for c in inspector.get_columns(table_name)},
        'primary_key': inspector.get_pk_constraint(table_name)['constrained_columns'],
        'indexes': {
            i['name']: list(i['column_names']) for i in inspector.get_indexes(table_name)
        },
        'foreign_keys': inspector.get_foreign_keys(table_name),
    }


def table_names(engine: Engine) -> set[str]:
    return set(inspect(engine).get_table_names())
