import logging

import click

from dexdb.cli.options import database_url_option, log_variant_option
from dexdb.database import write_schema_ddl_by_url_to_file_path


@click.command(context_settings=dict(help_option_names=['-h', '--help']))
@database_url_option
@log_variant_option
@click.option(
    '-o',
    '--output-file-path',
    type=click.Path(dir_okay=False, writable=True),
    default='/dev/stdout',
    show_default=True,
)
def dump_schema(database_url: str, log_variant, output_file_path: str):
    """Writes the catalog DDL compiled for the dialect of the database URL."""
    logging.basicConfig(level=logging.INFO, format='%(levelname)-5.5s [%(name)s] %(message)s')

    logging.info(f'Exporting schema DDL to "{output_file_path}"...')

    write_schema_ddl_by_url_to_file_path(database_url, output_file_path, log_variant)

    logging.info(f'Done. Schema DDL is written to "{output_file_path}".')
