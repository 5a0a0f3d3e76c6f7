# tests/conftest.py
"""
pytest configuration and fixtures for activity indexer tests
"""

from typing import Any, Dict, List, Optional

import msgspec
import pytest

from activity_indexer.core.logging import ActivityLogger
from activity_indexer.types import (
    BalanceChange,
    SuiAddress,
    CoinType,
    SuiTransactionResponse,
    CETUS_SWAP_EVENT,
)

ALICE = SuiAddress("0x62310ee294108c13f3496ce6895f12f3c2cf3994c74c2911501535e23ccc74ff")
BOB = SuiAddress("0xf261e0419966da973b7964a293fc4fe592727df803b4339ee5460f98e9537946")
CAROL = SuiAddress("0xef6bb8190f8caaa2e67ac0d91389777b0a0c6a7d0feddfcbfc72f40343fb522b")
DAVE = SuiAddress("0x00000000000000000000000000000000000000000000000000000000000000da")

SUI = CoinType("0x2::sui::SUI")
USDC = CoinType("0xdba34672e30cb065b1f93e3ab55318768fd6fef66c15942c9f7cb846e2f900e7::usdc::USDC")
WETH = CoinType("0xaf8cd5edc19c4512f4259f0bee101a40d41ebed738ade5874359610ef8eeced5::coin::COIN")

CETUS_POOL = "0xb8d7d9e66a60c239e7a60110efcf8de6c705580ed924d0dde141f4a0e2c90105"

# 2025-07-08T10:00:00Z
TX_TIMESTAMP_MS = 1751968800000


def change(owner: str, token: str, amount: int) -> BalanceChange:
    return BalanceChange(owner=SuiAddress(owner), token=CoinType(token), amount=amount)


def wire_change(owner: str, token: str, amount: int) -> Dict[str, Any]:
    return {"owner": {"AddressOwner": owner}, "coinType": token, "amount": str(amount)}


def make_tx(digest: str = "8h3Y1pV5yz6yS8WwZcdcz7PxwXv1g6DDrXDQWFzYtHoM",
            balance_changes: Optional[List[Dict[str, Any]]] = None,
            events: Optional[List[Dict[str, Any]]] = None,
            status: str = "success",
            timestamp_ms: Optional[int] = TX_TIMESTAMP_MS,
            with_effects: bool = True,
            gas_used: Optional[Dict[str, Any]] = None) -> SuiTransactionResponse:
    """Build a transaction response the way the JSON-RPC node returns it"""
    data: Dict[str, Any] = {
        "digest": digest,
        "events": events or [],
        "balanceChanges": balance_changes or [],
    }
    if timestamp_ms is not None:
        data["timestampMs"] = str(timestamp_ms)
    if with_effects:
        data["effects"] = {
            "status": {"status": status} if status == "success" else {"status": status, "error": "MoveAbort"},
            "gasUsed": gas_used or {
                "computationCost": "750000",
                "storageCost": "1976000",
                "storageRebate": "978120",
                "nonRefundableStorageFee": "9880",
            },
        }
    return msgspec.convert(data, type=SuiTransactionResponse)


def cetus_swap_event(amount_in: Any = "65403000000", amount_out: Any = "18234567891") -> Dict[str, Any]:
    return {
        "type": CETUS_SWAP_EVENT,
        "parsedJson": {
            "pool": CETUS_POOL,
            "atob": True,
            "amount_in": amount_in,
            "amount_out": amount_out,
            "before_sqrt_price": "1461446703485210103287273052203988822",
            "after_sqrt_price": "1461446703485210103287273052203988790",
            "fee_amount": "16350750",
        },
        "sender": ALICE,
    }


@pytest.fixture(autouse=True)
def reset_logging():
    """Each test starts with unconfigured logging"""
    ActivityLogger.reset()
    yield
    ActivityLogger.reset()


@pytest.fixture
def sui_transfer_tx():
    return make_tx(balance_changes=[
        wire_change(ALICE, SUI, -12004001747880),
        wire_change(BOB, SUI, 12004000000000),
    ])


@pytest.fixture
def self_transfer_tx():
    return make_tx(digest="4pDUbGtuZbbzxnKDKbS7xX4dN2ax6rZqv6u6bUeMZtFf",
                   balance_changes=[wire_change(ALICE, SUI, -2095504)])


@pytest.fixture
def cetus_swap_tx():
    return make_tx(digest="CsnHdGfRzvVjXhYbW2Ykq1hY8GZ5iJrC3hX9kLqP2rXd",
                   balance_changes=[
                       wire_change(ALICE, USDC, -65403000000),
                       wire_change(ALICE, SUI, 18234567891),
                   ],
                   events=[cetus_swap_event()])
