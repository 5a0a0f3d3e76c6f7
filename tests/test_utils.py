# tests/test_utils.py

from decimal import Decimal

import msgspec
import pytest

from activity_indexer.classify.balances import resolve_owner, to_balance_change, to_balance_changes
from activity_indexer.types import SuiBalanceChange, SuiEffects, MalformedInput, UnsupportedOwner
from activity_indexer.utils.address import normalize_address
from activity_indexer.utils.amounts import parse_int_str, normalize_coin_type, is_native_token
from activity_indexer.utils.gas import tx_gas

from conftest import ALICE, DAVE, SUI, USDC


class TestAmounts:

    @pytest.mark.parametrize("value,expected", [
        ("0", 0),
        ("12004000000000", 12004000000000),
        ("-2095504", -2095504),
        ("+15", 15),
        (42, 42),
        ("340282366920938463463374607431768211455", 2**128 - 1),
    ])
    def test_parse_int_str(self, value, expected):
        assert parse_int_str(value) == expected

    @pytest.mark.parametrize("value", ["", "-", "1.0", "1e6", "0x10", "١٢", True, None, 1.5, [1]])
    def test_parse_int_str_rejects(self, value):
        with pytest.raises(ValueError):
            parse_int_str(value)

    @pytest.mark.parametrize("coin_type", [
        "0x2::sui::SUI",
        "0x0000000000000000000000000000000000000000000000000000000000000002::sui::SUI",
    ])
    def test_native_token(self, coin_type):
        assert is_native_token(coin_type)
        assert normalize_coin_type(coin_type) == SUI

    def test_other_tokens_are_not_native(self):
        assert not is_native_token(USDC)
        assert not is_native_token("0x3::sui::SUI")
        assert normalize_coin_type(USDC) == USDC


class TestAddress:

    def test_pads_and_lowercases(self):
        assert normalize_address("0xDA") == DAVE
        assert normalize_address(ALICE.upper().replace("0X", "0x")) == ALICE
        assert normalize_address(ALICE[2:]) == ALICE

    @pytest.mark.parametrize("address", ["", "0x", "0xzz", "0x" + "1" * 65])
    def test_invalid(self, address):
        with pytest.raises(ValueError):
            normalize_address(address)


class TestGas:

    def test_net_gas_in_sui(self):
        effects = msgspec.convert({
            "status": {"status": "success"},
            "gasUsed": {"computationCost": "750000", "storageCost": "1976000", "storageRebate": "978120"},
        }, type=SuiEffects)

        assert tx_gas(effects) == Decimal("0.00174788")

    def test_rebate_can_exceed_cost(self):
        effects = msgspec.convert({
            "status": {"status": "success"},
            "gasUsed": {"computationCost": "1000", "storageCost": "0", "storageRebate": "3000"},
        }, type=SuiEffects)

        assert tx_gas(effects) == Decimal("-0.000002")

    def test_missing_gas(self):
        assert tx_gas(None) is None
        assert tx_gas(msgspec.convert({"status": {"status": "success"}}, type=SuiEffects)) is None


class TestBalances:

    @pytest.mark.parametrize("owner", [
        {"AddressOwner": ALICE},
        {"ObjectOwner": ALICE},
        {"ConsensusAddressOwner": {"owner": ALICE, "start_version": 7}},
    ])
    def test_single_address_owners(self, owner):
        assert resolve_owner(owner) == ALICE

    @pytest.mark.parametrize("owner", [
        {"Shared": {"initial_shared_version": 1}},
        "Immutable",
        {"AddressOwner": 7},
        {"ConsensusAddressOwner": {"start_version": 7}},
        None,
    ])
    def test_unsupported_owners(self, owner):
        with pytest.raises(UnsupportedOwner):
            resolve_owner(owner)

    def test_unsupported_owner_is_malformed_input(self):
        with pytest.raises(MalformedInput):
            resolve_owner("Immutable")

    def test_to_balance_change(self):
        change = to_balance_change(SuiBalanceChange(owner={"AddressOwner": "0xda"}, coinType=SUI, amount="-15"))

        assert change.owner == DAVE
        assert change.token == SUI
        assert change.amount == -15
        assert change.is_outflow and not change.is_inflow

    @pytest.mark.parametrize("amount", ["0", "ten", "-"])
    def test_bad_amounts(self, amount):
        with pytest.raises(MalformedInput):
            to_balance_change(SuiBalanceChange(owner={"AddressOwner": ALICE}, coinType=SUI, amount=amount))

    def test_missing_balance_changes(self):
        assert to_balance_changes(None) == []
