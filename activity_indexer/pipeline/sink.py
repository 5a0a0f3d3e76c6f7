# activity_indexer/pipeline/sink.py

from abc import ABC, abstractmethod
from typing import List

import msgspec

from ..types import TransactionKind, ClassificationFailure
from ..core.logging import LoggingMixin


def encode_line(record) -> str:
    """Encode a record as a single JSON line"""
    return msgspec.json.encode(record).decode("utf-8")


class ActivitySink(ABC):
    """Destination for classified activity and classification failures."""

    @abstractmethod
    def emit(self, kind: TransactionKind) -> None:
        pass

    @abstractmethod
    def emit_failure(self, failure: ClassificationFailure) -> None:
        pass


class LogSink(ActivitySink, LoggingMixin):
    """Writes one JSON line per classified transaction to the log."""

    def emit(self, kind: TransactionKind) -> None:
        self.log_info(encode_line(kind), tx_digest=kind.tx_digest, record_id=kind.content_id)

    def emit_failure(self, failure: ClassificationFailure) -> None:
        self.log_error(f"Failed to decode tx: {encode_line(failure.error)} context: {encode_line(failure.raw)}",
                       tx_digest=failure.tx_digest,
                       error_type=failure.error.error_type,
                       error_id=failure.error.error_id)


class CollectingSink(ActivitySink):
    """Keeps everything in memory. Used by offline classification and tests."""

    def __init__(self):
        self.kinds: List[TransactionKind] = []
        self.failures: List[ClassificationFailure] = []

    def emit(self, kind: TransactionKind) -> None:
        self.kinds.append(kind)

    def emit_failure(self, failure: ClassificationFailure) -> None:
        self.failures.append(failure)
