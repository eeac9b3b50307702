import click

from dexdb.cli.options import (
    allow_inexact_decimals_option,
    database_url_option,
    entity_types_option,
    log_variant_option,
)
from dexdb.database import create_db_engine
from dexdb.logging_utils import logging_basic_config
from dexdb.schema_manager import SchemaManager


@click.command(context_settings=dict(help_option_names=['-h', '--help']))
@database_url_option
@entity_types_option
@log_variant_option
@allow_inexact_decimals_option
def create_tables(database_url, entity_types, log_variant, allow_inexact_decimals):
    """Creates the tables of the given entities. Existing tables are reported as failures."""
    logging_basic_config()
    engine = create_db_engine(database_url)
    try:
        schema_manager = SchemaManager(
            engine, log_variant=log_variant, allow_inexact_decimals=allow_inexact_decimals
        )
        failures = schema_manager.create_all_tables(entity_types)
    finally:
        engine.dispose()
    if failures:
        raise click.ClickException(f'Failed to create tables: {", ".join(failures)}')
