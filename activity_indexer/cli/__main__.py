# activity_indexer/cli/__main__.py

"""
Activity Indexer CLI

Usage: python -m activity_indexer.cli [command] [options]

Classifies the transactions of a watched Sui account into transfers,
self transfers and swaps, and writes one JSON line per transaction to
the log.
"""

import click

from activity_indexer.cli.commands.fetch import fetch
from activity_indexer.cli.commands.classify import classify


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, verbose):
    """Activity Indexer CLI - classify Sui account activity"""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose


cli.add_command(fetch)
cli.add_command(classify)


if __name__ == '__main__':
    cli()
