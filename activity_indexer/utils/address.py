# activity_indexer/utils/address.py

from ..types import SuiAddress

SUI_ADDRESS_LENGTH = 64


def normalize_address(address: str) -> SuiAddress:
    """Lowercase and left-pad a Sui address to its canonical 32-byte hex form"""
    text = address.strip().lower()
    if text.startswith("0x"):
        text = text[2:]
    if not text or len(text) > SUI_ADDRESS_LENGTH or any(c not in "0123456789abcdef" for c in text):
        raise ValueError(f"Invalid Sui address: {address!r}")
    return SuiAddress("0x" + text.rjust(SUI_ADDRESS_LENGTH, "0"))
