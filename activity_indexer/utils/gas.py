# activity_indexer/utils/gas.py

from decimal import Decimal
from typing import Optional

from ..types import SuiEffects, MIST_PER_SUI
from .amounts import parse_int_str


def tx_gas(effects: Optional[SuiEffects]) -> Optional[Decimal]:
    """Net gas paid in SUI: computation + storage - storage rebate"""
    if effects is None or effects.gasUsed is None:
        return None
    fee = effects.gasUsed
    net = (
        parse_int_str(fee.computationCost)
        + parse_int_str(fee.storageCost)
        - parse_int_str(fee.storageRebate)
    )
    return Decimal(net) / MIST_PER_SUI
