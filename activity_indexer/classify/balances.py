# activity_indexer/classify/balances.py

from typing import Any, List, Optional

from ..types import (
    BalanceChange,
    SuiBalanceChange,
    SuiAddress,
    CoinType,
    MalformedInput,
    UnsupportedOwner,
)
from ..utils.address import normalize_address
from ..utils.amounts import parse_int_str

# Owner variants that belong to exactly one address
_SINGLE_ADDRESS_OWNERS = ("AddressOwner", "ObjectOwner")


def resolve_owner(owner: Any) -> SuiAddress:
    """Resolve a Sui Owner value to its single address. Shared and immutable owners fail."""
    address = None
    if isinstance(owner, dict) and len(owner) == 1:
        kind, value = next(iter(owner.items()))
        if kind in _SINGLE_ADDRESS_OWNERS and isinstance(value, str):
            address = value
        elif kind == "ConsensusAddressOwner" and isinstance(value, dict):
            address = value.get("owner")
        else:
            raise UnsupportedOwner(f"Owner kind {kind} does not resolve to a single address")

    if not isinstance(address, str):
        raise UnsupportedOwner(f"Unsupported owner: {owner!r}")

    try:
        return normalize_address(address)
    except ValueError as e:
        raise MalformedInput(str(e)) from e


def to_balance_change(change: SuiBalanceChange) -> BalanceChange:
    try:
        amount = parse_int_str(change.amount)
    except ValueError as e:
        raise MalformedInput(f"Invalid balance change amount: {e}") from e
    if amount == 0:
        raise MalformedInput(f"Zero balance change for {change.coinType}")

    return BalanceChange(
        owner=resolve_owner(change.owner),
        token=CoinType(change.coinType),
        amount=amount,
    )


def to_balance_changes(changes: Optional[List[SuiBalanceChange]]) -> List[BalanceChange]:
    return [to_balance_change(change) for change in changes or []]
