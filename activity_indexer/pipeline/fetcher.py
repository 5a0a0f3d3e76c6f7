# activity_indexer/pipeline/fetcher.py

from pathlib import Path
from typing import Iterable, List, Union

import msgspec
from msgspec import Struct

from ..types import SuiTransactionResponse, TransactionPage, RpcError, create_rpc_error
from ..core.logging import LoggingMixin
from ..classify.classifier import TransactionClassifier
from ..clients.interfaces import RPCClientInterface, address_filter
from .sink import ActivitySink


class FetchStats(Struct):
    classified: int = 0
    filtered: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.classified + self.filtered + self.failed


class ActivityFetcher(LoggingMixin):
    """Streams an account's transactions, classifies each one and hands the result to a sink."""

    def __init__(self, client: RPCClientInterface, classifier: TransactionClassifier,
                 sink: ActivitySink, old_first: bool = False, page_size: int = 50):
        self.client = client
        self.classifier = classifier
        self.sink = sink
        self.old_first = old_first
        self.page_size = page_size

    def fetch_txs(self, by_from: bool = False) -> FetchStats:
        """Fetch and classify every transaction sent from (by_from) or to the watched account"""
        tx_filter = address_filter(self.classifier.watched_account, by_from)

        self.log_info("Fetching transactions",
                      watched_account=self.classifier.watched_account,
                      filter=next(iter(tx_filter)),
                      old_first=self.old_first)

        txs = self.client.stream_transactions(tx_filter,
                                              descending=not self.old_first,
                                              limit=self.page_size)
        try:
            stats = self.process(txs)
        except RpcError as e:
            error = create_rpc_error("rpc_error", str(e), method="suix_queryTransactionBlocks")
            self.log_error("RPC error while streaming transactions",
                           error_type=error.error_type,
                           error_id=error.error_id,
                           error=error.message)
            raise

        self.log_info("Finished fetching transactions",
                      watched_account=self.classifier.watched_account,
                      classified=stats.classified,
                      filtered=stats.filtered,
                      failed=stats.failed)
        return stats

    def process(self, txs: Iterable[SuiTransactionResponse]) -> FetchStats:
        return run_classification(txs, self.classifier, self.sink)


def load_transactions(path: Union[str, Path]) -> List[SuiTransactionResponse]:
    """Load transaction responses saved as a JSON list or as a query page"""
    content = Path(path).read_bytes()
    data = msgspec.json.decode(content)

    if isinstance(data, dict) and "result" in data:
        data = data["result"]
    if isinstance(data, dict) and "data" in data:
        return msgspec.convert(data, type=TransactionPage).data
    if isinstance(data, dict):
        data = [data]
    return msgspec.convert(data, type=List[SuiTransactionResponse])


def run_classification(txs: Iterable[SuiTransactionResponse], classifier: TransactionClassifier,
                       sink: ActivitySink) -> FetchStats:
    """Classify a stream of transactions. One failure never stops the stream."""
    stats = FetchStats()
    for _tx, kind, failure in classifier.process_transactions(txs):
        if kind is not None:
            sink.emit(kind)
            stats.classified += 1
        elif failure is not None:
            sink.emit_failure(failure)
            stats.failed += 1
        else:
            stats.filtered += 1
    return stats


def classify_file(path: Union[str, Path], classifier: TransactionClassifier,
                  sink: ActivitySink) -> FetchStats:
    """Classify transaction responses saved to disk, without touching the network"""
    return run_classification(load_transactions(path), classifier, sink)
