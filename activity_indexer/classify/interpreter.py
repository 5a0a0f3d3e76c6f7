# activity_indexer/classify/interpreter.py
"""
Transfer interpreter.

Infers sender, receiver, token and amount of a plain transfer from the
unordered balance changes of one transaction. Each quantity is derived
separately so a watched account hint can settle the receiver without
touching the other three.
"""

from typing import Iterable, List, Optional, Sequence, TypeVar

from ..types import (
    BalanceChange,
    TransferEvent,
    SuiAddress,
    CoinType,
    MalformedInput,
    AmbiguousSender,
    AmbiguousToken,
    TooManyReceivers,
    TooManyCandidates,
    AmountNotFound,
)
from ..utils.amounts import is_native_token
from ..core.logging import LoggingMixin

MIN_BALANCE_CHANGES = 1
MAX_BALANCE_CHANGES = 3

T = TypeVar('T')


def _distinct(values: Iterable[T]) -> List[T]:
    seen = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


class TransferInterpreter(LoggingMixin):

    def interpret(self, balance_changes: Sequence[BalanceChange],
                  watched_account: Optional[SuiAddress] = None) -> TransferEvent:
        changes = list(balance_changes)
        if not MIN_BALANCE_CHANGES <= len(changes) <= MAX_BALANCE_CHANGES:
            raise MalformedInput(
                f"Expected {MIN_BALANCE_CHANGES}-{MAX_BALANCE_CHANGES} balance changes, got {len(changes)}"
            )
        if any(change.amount == 0 for change in changes):
            raise MalformedInput("Zero balance change")

        sender = self.derive_sender(changes, watched_account)
        receiver = self.derive_receiver(changes, sender, watched_account)
        token = self.derive_token(changes)
        amount = self.derive_amount(changes, receiver, token)

        self.log_debug("Transfer interpreted",
                       sender=sender,
                       receiver=receiver,
                       token=token,
                       amount=amount,
                       change_count=len(changes),
                       watched_account=watched_account)

        return TransferEvent(
            amount=amount,
            token=token,
            sender=sender,
            receiver=receiver,
        )

    def derive_sender(self, changes: List[BalanceChange],
                      watched_account: Optional[SuiAddress] = None) -> SuiAddress:
        if len(changes) == 1:
            return changes[0].owner

        outflows = [c for c in changes if c.is_outflow]
        if not outflows:
            raise MalformedInput("No outflow entry to derive a sender from")

        owners = _distinct(c.owner for c in outflows)
        if len(owners) == 1:
            return owners[0]

        if watched_account is None:
            raise AmbiguousSender(f"{len(owners)} accounts have outflows and no watched account was given")

        # The native token outflow of a second account is the sponsor paying gas
        payers = _distinct(c.owner for c in outflows if not is_native_token(c.token))
        if len(payers) == 1:
            return payers[0]
        if watched_account in owners:
            return watched_account

        raise AmbiguousSender(f"Cannot pick a sender among {len(owners)} accounts with outflows")

    def derive_receiver(self, changes: List[BalanceChange], sender: SuiAddress,
                        watched_account: Optional[SuiAddress] = None) -> SuiAddress:
        if watched_account is not None and watched_account != sender:
            return watched_account

        receivers = _distinct(c.owner for c in changes if c.is_inflow and c.owner != sender)
        if not receivers:
            return sender
        if len(receivers) > 1:
            raise TooManyReceivers(f"{len(receivers)} accounts besides the sender received funds")
        return receivers[0]

    def derive_token(self, changes: List[BalanceChange]) -> CoinType:
        outflows = [c for c in changes if c.is_outflow] or changes
        tokens = _distinct(c.token for c in outflows)

        transferred = [t for t in tokens if not is_native_token(t)]
        if not transferred:
            return tokens[0]
        if len(transferred) > 1:
            raise AmbiguousToken(f"Outflows of {len(transferred)} non-fee tokens: {transferred}")
        return transferred[0]

    def derive_amount(self, changes: List[BalanceChange], receiver: SuiAddress, token: CoinType) -> int:
        candidates = [
            c for c in changes
            if c.owner == receiver and (c.token == token or is_native_token(c.token))
        ]
        if len(candidates) > 2:
            raise TooManyCandidates(f"{len(candidates)} balance changes match receiver {receiver}")

        matches = [c for c in candidates if c.token == token]
        if not matches:
            raise AmountNotFound(f"No {token} balance change for receiver {receiver}")
        if len(matches) > 1:
            raise TooManyCandidates(f"{len(matches)} {token} balance changes for receiver {receiver}")

        return abs(matches[0].amount)


def interpret(balance_changes: Sequence[BalanceChange],
              watched_account: Optional[SuiAddress] = None) -> TransferEvent:
    return TransferInterpreter().interpret(balance_changes, watched_account)
