import click

from dexdb.cli.create_tables import create_tables
from dexdb.cli.drop_tables import drop_table, drop_tables
from dexdb.cli.dump_schema import dump_schema


@click.group()
@click.version_option(version='1.0')
@click.pass_context
def cli(ctx):
    pass


cli.add_command(create_tables, "create-tables")
cli.add_command(drop_table, "drop-table")
cli.add_command(drop_tables, "drop-tables")
cli.add_command(dump_schema, "dump-schema")
