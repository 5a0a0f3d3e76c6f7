# activity_indexer/types/configs/swap_event.py

from typing import Optional
from msgspec import Struct

from ..new import EventType


class SwapEventConfig(Struct):
    event_type: EventType
    dex: str
    pool_field: str = "pool"
    a2b_field: str = "a2b"
    amount_in_field: str = "amount_in"
    amount_out_field: str = "amount_out"
    before_sqrt_price_field: Optional[str] = None
    after_sqrt_price_field: Optional[str] = None

    def validate(self):
        if "::" not in self.event_type:
            raise ValueError(f"Event type must be fully qualified, got {self.event_type}")
        if not self.pool_field or not self.a2b_field:
            raise ValueError(f"Pool and direction fields are required for {self.event_type}")
