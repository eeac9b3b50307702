import click

from dexdb.cli.options import database_url_option, entity_types_option
from dexdb.database import create_db_engine
from dexdb.logging_utils import logging_basic_config
from dexdb.schema_manager import SchemaManager


@click.command(context_settings=dict(help_option_names=['-h', '--help']))
@database_url_option
@click.argument('table_name', type=str)
def drop_table(database_url, table_name):
    """Drops a table if it exists. Any table name is accepted."""
    logging_basic_config()
    engine = create_db_engine(database_url)
    try:
        SchemaManager(engine).drop_table(table_name)
    finally:
        engine.dispose()


@click.command(context_settings=dict(help_option_names=['-h', '--help']))
@database_url_option
@entity_types_option
def drop_tables(database_url, entity_types):
    """Drops the tables of the given entities if they exist."""
    logging_basic_config()
    engine = create_db_engine(database_url)
    try:
        failures = SchemaManager(engine).drop_all_tables(entity_types)
    finally:
        engine.dispose()
    if failures:
        raise click.ClickException(f'Failed to drop tables: {", ".join(failures)}')
