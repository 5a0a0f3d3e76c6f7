# activity_indexer/types/model/balance.py

from msgspec import Struct

from ..new import SuiAddress, CoinType


class BalanceChange(Struct, frozen=True):
    """Signed per-owner, per-token delta of one transaction.

    Negative amounts are outflows from ``owner``, positive amounts inflows.
    """
    owner: SuiAddress
    token: CoinType
    amount: int

    @property
    def is_outflow(self) -> bool:
        return self.amount < 0

    @property
    def is_inflow(self) -> bool:
        return self.amount > 0
