# activity_indexer/cli/commands/classify.py

import click
import msgspec

from ... import TransactionClassifier, LogSink, classify_file
from ..context import build_config


@click.command('classify')
@click.argument('tx_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('address', required=False)
@click.option('--config', 'config_file', type=click.Path(exists=True, dir_okay=False),
              help='YAML configuration file')
@click.option('--from', 'from_ts', type=int, help='Skip transactions before this epoch second')
@click.option('--to', 'to_ts', type=int, help='Skip transactions after this epoch second')
@click.option('--swap-events', type=click.Path(exists=True, dir_okay=False),
              help='YAML file with additional swap event signatures')
@click.option('--report-unknown', is_flag=True, help='Emit Unknown records instead of failures')
@click.pass_context
def classify(ctx, tx_file, address, config_file, from_ts, to_ts, swap_events, report_unknown):
    """Classify transaction responses saved in TX_FILE for watched ADDRESS

    TX_FILE holds a JSON list of transaction responses, or a
    suix_queryTransactionBlocks page (with or without the JSON-RPC envelope).
    """
    config = build_config(
        ctx,
        config_file=config_file,
        swap_events=swap_events,
        watched_account=address,
        from_ts=from_ts,
        to_ts=to_ts,
        report_unknown=True if report_unknown else None,
    )

    try:
        classifier = TransactionClassifier.from_config(config)
        stats = classify_file(tx_file, classifier, LogSink())
    except ValueError as e:
        raise click.ClickException(str(e))
    except msgspec.DecodeError as e:
        raise click.ClickException(f"Cannot read transactions from {tx_file}: {e}")

    click.echo(f"classified={stats.classified} filtered={stats.filtered} failed={stats.failed}")
