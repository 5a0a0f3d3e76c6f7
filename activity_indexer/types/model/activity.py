# activity_indexer/types/model/activity.py

from decimal import Decimal
from typing import Optional, Union
from msgspec import Struct

from ..new import TxDigest
from ..sui import SuiTransactionResponse
from .base import ActivityRecord
from .errors import ProcessingError
from .swap import SwapEvent
from .transfer import TransferEvent


class Transfer(ActivityRecord, frozen=True, tag=True):
    transfer: TransferEvent

    def _get_identifying_content(self):
        return self.transfer._get_identifying_content()

class SelfTransfer(ActivityRecord, frozen=True, tag=True):
    transfer: TransferEvent

    def _get_identifying_content(self):
        return self.transfer._get_identifying_content()

class Swap(ActivityRecord, frozen=True, tag=True):
    swap: SwapEvent

    def _get_identifying_content(self):
        return self.swap._get_identifying_content()

class Unknown(ActivityRecord, frozen=True, tag=True):
    reason: Optional[str] = None


TxType = Union[Transfer, SelfTransfer, Swap, Unknown]


class TransactionKind(ActivityRecord, frozen=True):
    '''Top level classified activity for one transaction'''
    tx_type: TxType
    tx_digest: TxDigest
    event_timestamp_ms: int
    gas_fee: Optional[Decimal] = None

    def _get_identifying_content(self):
        return {
            "tx_digest": self.tx_digest,
            "tx_type": type(self.tx_type).__name__,
            "event_timestamp_ms": self.event_timestamp_ms,
            "activity": self.tx_type._get_identifying_content(),
        }


class ClassificationFailure(Struct):
    tx_digest: TxDigest
    error: ProcessingError
    raw: SuiTransactionResponse
