# activity_indexer/utils/amounts.py
"""
Utility functions for handling string amounts and coin types in Sui payloads
"""

from typing import Union

from ..types import SUI_COIN_TYPE, CoinType


def parse_int_str(amount: Union[str, int]) -> int:
    """Parse a decimal-string (or plain int) amount. Raises ValueError on anything else."""
    if isinstance(amount, bool):
        raise ValueError(f"Boolean is not an amount: {amount!r}")
    if isinstance(amount, int):
        return amount
    if isinstance(amount, str):
        text = amount.strip()
        digits = text[1:] if text[:1] in "+-" else text
        if not digits.isdigit() or not digits.isascii():
            raise ValueError(f"Not a decimal integer: {amount!r}")
        return int(text)
    raise ValueError(f"Unsupported amount type: {type(amount).__name__}")


def normalize_coin_type(coin_type: str) -> CoinType:
    """Strip leading zeros of the package address so long and short forms compare equal"""
    address, sep, rest = coin_type.partition("::")
    if not sep or not address.lower().startswith("0x"):
        return CoinType(coin_type)
    digits = address[2:].lstrip("0") or "0"
    return CoinType(f"0x{digits.lower()}::{rest}")


def is_native_token(coin_type: str) -> bool:
    """Check if coin type is the network fee token (SUI)"""
    return normalize_coin_type(coin_type) == SUI_COIN_TYPE
