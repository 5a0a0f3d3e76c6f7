# activity_indexer/classify/classifier.py

from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Tuple

import msgspec

from ..types import (
    SuiTransactionResponse,
    SuiAddress,
    BalanceChange,
    TransactionKind,
    TxType,
    Transfer,
    SelfTransfer,
    Swap,
    Unknown,
    ClassificationFailure,
    ClassificationError,
    MalformedInput,
    UnknownTxType,
    TransactionWithoutEffects,
    create_classify_error,
)
from ..core.logging import LoggingMixin
from ..utils.address import normalize_address
from ..utils.amounts import parse_int_str
from ..utils.gas import tx_gas
from .balances import to_balance_changes
from .decoders import SwapDecoderRegistry
from .interpreter import TransferInterpreter

if TYPE_CHECKING:
    from ..core.config import ActivityConfig

ClassificationResult = Tuple[Optional[TransactionKind], Optional[ClassificationFailure]]


class TransactionClassifier(LoggingMixin):
    """Classifies one executed transaction as a transfer, self transfer or swap.

    Classification is a pure function of the transaction payload: no I/O and
    no state shared between calls, so transactions can be classified in any
    order or concurrently.
    """

    def __init__(self, watched_account: str,
                 from_ts: Optional[int] = None,
                 to_ts: Optional[int] = None,
                 registry: Optional[SwapDecoderRegistry] = None,
                 interpreter: Optional[TransferInterpreter] = None,
                 report_unknown: bool = False):
        if from_ts is not None and to_ts is not None and from_ts > to_ts:
            raise ValueError(f"Time window is empty: from {from_ts} is after to {to_ts}")

        self.watched_account: SuiAddress = normalize_address(watched_account)
        self.from_ts = from_ts
        self.to_ts = to_ts
        self.registry = registry if registry is not None else SwapDecoderRegistry.default()
        self.interpreter = interpreter or TransferInterpreter()
        self.report_unknown = report_unknown

        self.log_info("TransactionClassifier initialized",
                      watched_account=self.watched_account,
                      from_ts=from_ts,
                      to_ts=to_ts,
                      swap_signatures=len(self.registry),
                      report_unknown=report_unknown)

    @classmethod
    def from_config(cls, config: 'ActivityConfig',
                    registry: Optional[SwapDecoderRegistry] = None) -> 'TransactionClassifier':
        if registry is None:
            registry = SwapDecoderRegistry.default(config.swap_events)
        return cls(
            watched_account=config.watched_account,
            from_ts=config.from_ts,
            to_ts=config.to_ts,
            registry=registry,
            report_unknown=config.report_unknown,
        )

    # === Gates ===

    def in_window(self, tx: SuiTransactionResponse) -> bool:
        """Inclusive epoch-second window. Transactions without a timestamp pass the gate."""
        if self.from_ts is None and self.to_ts is None:
            return True
        if tx.timestampMs is None:
            return True

        seconds = self._timestamp_ms(tx) // 1000
        if self.from_ts is not None and seconds < self.from_ts:
            return False
        if self.to_ts is not None and seconds > self.to_ts:
            return False
        return True

    @staticmethod
    def is_failed(tx: SuiTransactionResponse) -> bool:
        if tx.effects is None:
            raise TransactionWithoutEffects(f"Transaction {tx.digest} has no effects")
        return tx.effects.status.status != "success"

    # === Classification ===

    def classify(self, tx: SuiTransactionResponse) -> TransactionKind:
        timestamp_ms = self._timestamp_ms(tx)
        gas_fee = self._gas_fee(tx)

        try:
            if not tx.events:
                tx_type = self._classify_transfer(tx, timestamp_ms)
            else:
                tx_type = self._classify_events(tx)
        except UnknownTxType as e:
            if not self.report_unknown:
                raise
            tx_type = Unknown(reason=str(e))

        return TransactionKind(
            tx_type=tx_type,
            tx_digest=tx.digest,
            event_timestamp_ms=timestamp_ms,
            gas_fee=gas_fee,
        )

    def _classify_transfer(self, tx: SuiTransactionResponse, timestamp_ms: int) -> TxType:
        balance_changes = to_balance_changes(tx.balanceChanges)
        transfer = self.interpreter.interpret(balance_changes, self.watched_account)
        transfer = msgspec.structs.replace(transfer, timestamp_ms=timestamp_ms)

        if transfer.sender == transfer.receiver:
            return SelfTransfer(transfer=transfer)
        return Transfer(transfer=transfer)

    def _classify_events(self, tx: SuiTransactionResponse) -> TxType:
        balance_changes: Optional[List[BalanceChange]] = None

        for event in tx.events:
            if event.type not in self.registry:
                self.log_debug("Event is not a known swap signature",
                               tx_digest=tx.digest,
                               event_type=event.type)
                continue

            if balance_changes is None:
                balance_changes = to_balance_changes(tx.balanceChanges)

            swap = self.registry.decode_swap(event, balance_changes)
            if swap is not None:
                return Swap(swap=swap)

        event_types = sorted({event.type for event in tx.events})
        raise UnknownTxType(f"No known swap signature among events: {', '.join(event_types)}")

    # === Pipeline entry points ===

    def process_transaction(self, tx: SuiTransactionResponse) -> ClassificationResult:
        """Gate and classify one transaction.

        Returns (kind, None) on success, (None, failure) on a classification
        error and (None, None) when the transaction was filtered out.
        """
        try:
            if not self.in_window(tx):
                self.log_debug("Transaction outside time window", tx_digest=tx.digest)
                return None, None

            if self.is_failed(tx):
                self.log_debug("Skipping failed transaction",
                               tx_digest=tx.digest,
                               error=tx.effects.status.error)
                return None, None

            kind = self.classify(tx)

        except ClassificationError as e:
            return None, self._failure(tx, e)

        self.log_debug("Transaction classified",
                       tx_digest=tx.digest,
                       tx_type=type(kind.tx_type).__name__)
        return kind, None

    def process_transactions(self, txs: Iterable[SuiTransactionResponse]
                             ) -> Iterator[Tuple[SuiTransactionResponse, Optional[TransactionKind],
                                                 Optional[ClassificationFailure]]]:
        for tx in txs:
            kind, failure = self.process_transaction(tx)
            yield tx, kind, failure

    # === Helpers ===

    @staticmethod
    def _timestamp_ms(tx: SuiTransactionResponse) -> int:
        if tx.timestampMs is None:
            raise TransactionWithoutEffects(f"Transaction {tx.digest} has no timestamp")
        try:
            return parse_int_str(tx.timestampMs)
        except ValueError as e:
            raise MalformedInput(f"Invalid timestamp: {e}") from e

    @staticmethod
    def _gas_fee(tx: SuiTransactionResponse) -> Optional[Decimal]:
        try:
            return tx_gas(tx.effects)
        except ValueError as e:
            raise MalformedInput(f"Invalid gas summary: {e}") from e

    def _failure(self, tx: SuiTransactionResponse, error: ClassificationError) -> ClassificationFailure:
        processing_error = create_classify_error(error, tx_digest=tx.digest)

        self.log_warning("Transaction classification failed",
                         tx_digest=tx.digest,
                         error_type=processing_error.error_type,
                         error_id=processing_error.error_id,
                         error=processing_error.message)

        return ClassificationFailure(
            tx_digest=tx.digest,
            error=processing_error,
            raw=tx,
        )
