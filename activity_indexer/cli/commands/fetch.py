# activity_indexer/cli/commands/fetch.py

import click
import requests

from ... import create_fetcher
from ...types import RpcError
from ..context import build_config


@click.command('fetch')
@click.argument('address', required=False)
@click.option('--config', 'config_file', type=click.Path(exists=True, dir_okay=False),
              help='YAML configuration file')
@click.option('--old-first', is_flag=True, help='Oldest transactions first (default: newest first)')
@click.option('--from', 'from_ts', type=int, help='Skip transactions before this epoch second')
@click.option('--to', 'to_ts', type=int, help='Skip transactions after this epoch second')
@click.option('--direction', type=click.Choice(['from', 'to']), default=None,
              help='Query transactions sent from or received by the account (default: to)')
@click.option('--rpc-url', help='Sui JSON-RPC endpoint (default: mainnet)')
@click.option('--page-size', type=int, help='Transactions per RPC page')
@click.option('--swap-events', type=click.Path(exists=True, dir_okay=False),
              help='YAML file with additional swap event signatures')
@click.option('--report-unknown', is_flag=True, help='Emit Unknown records instead of failures')
@click.pass_context
def fetch(ctx, address, config_file, old_first, from_ts, to_ts, direction,
          rpc_url, page_size, swap_events, report_unknown):
    """Fetch and classify the transactions of ADDRESS

    Examples:
        # Newest first, received transactions
        fetch 0x6231...74ff

        # Oldest first within a window, sent transactions
        fetch 0x6231...74ff --old-first --from 1751968800 --to 1754647200 --direction from
    """
    config = build_config(
        ctx,
        config_file=config_file,
        rpc_url=rpc_url,
        page_size=page_size,
        swap_events=swap_events,
        watched_account=address,
        old_first=True if old_first else None,
        by_from=None if direction is None else direction == 'from',
        from_ts=from_ts,
        to_ts=to_ts,
        report_unknown=True if report_unknown else None,
    )

    try:
        fetcher = create_fetcher(config)
        stats = fetcher.fetch_txs(by_from=config.by_from)
    except ValueError as e:
        raise click.ClickException(str(e))
    except (RpcError, requests.RequestException) as e:
        raise click.ClickException(f"RPC request failed: {e}")

    click.echo(f"classified={stats.classified} filtered={stats.filtered} failed={stats.failed}")
