# activity_indexer/classify/decoders/__init__.py

from .base import FieldMappedSwapDecoder, SwapDecoder, derive_swap_tokens
from .builtin import BUILTIN_SWAP_EVENTS
from .registry import SwapDecoderRegistry

__all__ = [
    "FieldMappedSwapDecoder",
    "SwapDecoder",
    "derive_swap_tokens",
    "BUILTIN_SWAP_EVENTS",
    "SwapDecoderRegistry",
]
