# activity_indexer/types/constants.py

from .new import CoinType, EventType

SUI_COIN_TYPE = CoinType("0x2::sui::SUI")
MIST_PER_SUI = 10**9

I128_MIN = -(2**127)
I128_MAX = 2**127 - 1

CETUS_SWAP_EVENT = EventType(
    "0x1eabed72c53feb3805120a081dc15963c204dc8d091542592abaf7a35689b2fb::pool::SwapEvent"
)
BLUEFIN_SWAP_EVENT = EventType(
    "0x3492c874c1e3b3e2984e8c41b589e642d4d0a5d6459e5a9cfc2d52fd7c89c267::events::AssetSwap"
)

MAINNET_RPC_URL = "https://fullnode.mainnet.sui.io:443"
