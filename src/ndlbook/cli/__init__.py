# ABOUTME: CLI package for ndlbook, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import click

from ndlbook.cli.commands import lookup_cmd


@click.group()
@click.version_option(package_name="ndlbook")
def cli() -> None:
    """ndlbook - look up book metadata in the National Diet Library."""


cli.add_command(lookup_cmd.lookup)
