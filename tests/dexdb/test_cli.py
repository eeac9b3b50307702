from click.testing import CliRunner

from dexdb.cli import cli
from dexdb.database import create_db_engine
from tests.helpers import describe_table, table_names


def invoke(*args):
    return CliRunner().invoke(cli, list(args), catch_exceptions=False)


def tables_at(url):
    engine = create_db_engine(url)
    try:
        return table_names(engine)
    finally:
        engine.dispose()


def test_create_tables(sqlite_url):
    result = invoke('create-tables', '-u', sqlite_url, '--allow-inexact-decimals')

    assert result.exit_code == 0, result.output
    assert tables_at(sqlite_url) == {'Token', 'Pair', 'Swap', 'Log', 'Block', 'Transaction'}


def test_create_tables_twice_fails(sqlite_url):
    invoke('create-tables', '-u', sqlite_url, '-e', 'token')

    result = invoke('create-tables', '-u', sqlite_url, '-e', 'token', '-e', 'pair')

    assert result.exit_code == 1
    assert 'Failed to create tables: Token' in result.output
    assert tables_at(sqlite_url) == {'Token', 'Pair'}


def test_create_tables_with_topics_log(sqlite_url):
    result = invoke('create-tables', '-u', sqlite_url, '-e', 'log', '--log-variant', 'topics_json')

    assert result.exit_code == 0, result.output
    engine = create_db_engine(sqlite_url)
    try:
        assert 'topics' in describe_table(engine, 'Log')['columns']
    finally:
        engine.dispose()


def test_drop_table(sqlite_url):
    invoke('create-tables', '-u', sqlite_url, '-e', 'swap', '--allow-inexact-decimals')

    assert invoke('drop-table', '-u', sqlite_url, 'Swap').exit_code == 0
    assert invoke('drop-table', '-u', sqlite_url, 'Swap').exit_code == 0
    assert invoke('drop-table', '-u', sqlite_url, 'DoesNotExist').exit_code == 0
    assert tables_at(sqlite_url) == set()


def test_drop_tables(sqlite_url):
    invoke('create-tables', '-u', sqlite_url, '--allow-inexact-decimals')

    result = invoke('drop-tables', '-u', sqlite_url, '-e', 'block', '-e', 'transaction')

    assert result.exit_code == 0, result.output
    assert tables_at(sqlite_url) == {'Token', 'Pair', 'Swap', 'Log'}
    assert invoke('drop-tables', '-u', sqlite_url).exit_code == 0
    assert tables_at(sqlite_url) == set()


def test_dump_schema(tmp_path):
    output = tmp_path / 'schema.sql'

    result = invoke('dump-schema', '-u', 'postgresql://', '-o', str(output))

    assert result.exit_code == 0, result.output
    assert 'NUMERIC(84, 56)' in output.read_text()


def test_rejects_unknown_entity(sqlite_url):
    result = CliRunner().invoke(cli, ['create-tables', '-u', sqlite_url, '-e', 'contract'])

    assert result.exit_code == 2


def test_create_tables_refuses_swap_on_sqlite(sqlite_url):
    result = invoke('create-tables', '-u', sqlite_url)

    assert result.exit_code == 1
    assert 'Failed to create tables: Swap' in result.output
    assert tables_at(sqlite_url) == {'Token', 'Pair', 'Log', 'Block', 'Transaction'}
