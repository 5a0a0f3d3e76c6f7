# activity_indexer/classify/decoders/builtin.py

from ...types import SwapEventConfig, CETUS_SWAP_EVENT, BLUEFIN_SWAP_EVENT, Dex

BUILTIN_SWAP_EVENTS = [
    SwapEventConfig(
        event_type=CETUS_SWAP_EVENT,
        dex=Dex.CETUS.value,
        pool_field="pool",
        a2b_field="atob",
        amount_in_field="amount_in",
        amount_out_field="amount_out",
        before_sqrt_price_field="before_sqrt_price",
        after_sqrt_price_field="after_sqrt_price",
    ),
    SwapEventConfig(
        event_type=BLUEFIN_SWAP_EVENT,
        dex=Dex.BLUEFIN.value,
        pool_field="pool_id",
        a2b_field="a2b",
        amount_in_field="amount_in",
        amount_out_field="amount_out",
        before_sqrt_price_field="before_sqrt_price",
        after_sqrt_price_field="after_sqrt_price",
    ),
]
