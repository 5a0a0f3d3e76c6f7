# activity_indexer/types/model/swap.py

import enum
from typing import Optional

from ..new import CoinType
from .base import ActivityRecord


class Dex(enum.Enum):
    CETUS = "Cetus"
    BLUEFIN = "Bluefin"
    MAGMA = "Magma"  # declared, no built-in signature produces it yet


class SwapEvent(ActivityRecord, frozen=True):
    pool: str
    dex: Dex
    a2b: bool
    in_amount: int
    out_amount: int
    in_token: CoinType
    out_token: CoinType
    before_sqrt_price: Optional[str] = None
    after_sqrt_price: Optional[str] = None

    def _get_identifying_content(self):
        return {
            "event_type": "swap",
            "pool": self.pool,
            "dex": self.dex.value,
            "a2b": self.a2b,
            "in_amount": str(self.in_amount),
            "out_amount": str(self.out_amount),
        }
