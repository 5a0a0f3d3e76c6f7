# activity_indexer/types/model/transfer.py

from ..new import SuiAddress, CoinType
from .base import ActivityRecord


class TransferEvent(ActivityRecord, frozen=True):
    amount: int
    token: CoinType
    sender: SuiAddress
    receiver: SuiAddress
    timestamp_ms: int = 0

    @property
    def is_self_transfer(self) -> bool:
        return self.sender == self.receiver

    def _get_identifying_content(self):
        return {
            "event_type": "transfer",
            "token": self.token,
            "sender": self.sender,
            "receiver": self.receiver,
            "amount": str(self.amount),
            "timestamp_ms": self.timestamp_ms,
        }
